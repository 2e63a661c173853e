"""Consume one turn's response stream from the agent runtime.

Both session drivers hand every turn to :func:`run_turn`, which renders the
chunks as they arrive and reports failures as data instead of raising, so
the calling loop decides what a failed turn means.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, Optional, Protocol

from rich.console import Console

from webhook_agent.errors import StreamError

logger = logging.getLogger("webhook_agent.session.stream")

SEPARATOR = "-------------------"


class ChunkOrigin(str, Enum):
    AGENT = "agent"
    TOOL = "tool"


@dataclass(frozen=True)
class ResponseChunk:
    """One incremental piece of a turn, tagged by who produced it."""

    origin: ChunkOrigin
    text: str


@dataclass(frozen=True)
class SessionMessage:
    """The next thing to send to the agent."""

    text: str


class AgentRuntime(Protocol):
    def stream(self, message: SessionMessage, thread_id: str) -> AsyncIterator[ResponseChunk]:
        ...


@dataclass
class TurnOutcome:
    chunks: int = 0
    error: Optional[StreamError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def render_chunk(console: Console, chunk: ResponseChunk) -> None:
    # Agent and tool chunks currently render the same way.
    console.print(chunk.text, markup=False, highlight=False)


async def consume_stream(
    chunks: AsyncIterator[ResponseChunk],
    console: Console,
    outcome: TurnOutcome | None = None,
) -> TurnOutcome:
    """Drain *chunks* in order, rendering each; no separator is printed."""
    outcome = outcome or TurnOutcome()
    async for chunk in chunks:
        render_chunk(console, chunk)
        outcome.chunks += 1
    return outcome


async def run_turn(
    runtime: AgentRuntime,
    message: SessionMessage,
    thread_id: str,
    console: Console,
) -> TurnOutcome:
    """Send *message* and drain the response; failures land in ``outcome.error``."""
    outcome = TurnOutcome()
    try:
        await consume_stream(runtime.stream(message, thread_id), console, outcome)
    except Exception as exc:
        logger.error(f"Turn failed after {outcome.chunks} chunks: {exc}")
        outcome.error = StreamError(exc)
    return outcome
