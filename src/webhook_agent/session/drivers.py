"""Session drivers: interactive chat and unattended autonomous mode.

Each driver is a strictly sequential loop; a turn's stream is fully drained
before the next message is sent.  ``run()`` returns the process exit status.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
import logging

from rich.console import Console

from webhook_agent.agent.prompts import AUTONOMOUS_PROMPT
from webhook_agent.config import StreamErrorPolicy
from webhook_agent.session.stream import (
    SEPARATOR,
    AgentRuntime,
    SessionMessage,
    TurnOutcome,
    run_turn,
)

logger = logging.getLogger("webhook_agent.session")

EXIT_COMMAND = "exit"


class SessionDriver(ABC):
    """Shared turn handling for both modes."""

    def __init__(
        self,
        runtime: AgentRuntime,
        console: Console,
        thread_id: str,
        policy: StreamErrorPolicy = StreamErrorPolicy.TERMINATE,
    ) -> None:
        self.runtime = runtime
        self.console = console
        self.thread_id = thread_id
        self.policy = policy

    async def _turn(self, text: str) -> TurnOutcome:
        return await run_turn(self.runtime, SessionMessage(text), self.thread_id, self.console)

    def _should_stop(self, outcome: TurnOutcome) -> bool:
        """Report a failed turn; True when the policy says to end the session."""
        if outcome.ok:
            return False
        logger.error(f"Stream error: {outcome.error}")
        self.console.print(f"Error: {outcome.error}", style="red", markup=False)
        return self.policy is StreamErrorPolicy.TERMINATE

    @abstractmethod
    async def run(self) -> int:
        """Run the session loop and return the process exit status."""


class ChatDriver(SessionDriver):
    """Read a line, run one turn, print a separator, repeat until ``exit``."""

    async def _read_line(self) -> str | None:
        try:
            return await asyncio.to_thread(self.console.input, "\nPrompt: ")
        except (EOFError, KeyboardInterrupt):
            return None

    async def run(self) -> int:
        self.console.print("Starting chat mode... Type 'exit' to end.")
        while True:
            user_input = await self._read_line()
            if user_input is None or user_input.strip().lower() == EXIT_COMMAND:
                return 0

            outcome = await self._turn(user_input)
            if self._should_stop(outcome):
                return 1
            if outcome.ok:
                self.console.print(SEPARATOR)


class AutonomousDriver(SessionDriver):
    """Prompt the agent with a fixed creative task every ``interval`` seconds.

    The wait between turns doubles as the cancellation point: :meth:`stop`
    ends the loop before the next turn starts.
    """

    def __init__(
        self,
        runtime: AgentRuntime,
        console: Console,
        thread_id: str,
        interval: float = 10.0,
        policy: StreamErrorPolicy = StreamErrorPolicy.TERMINATE,
        prompt: str = AUTONOMOUS_PROMPT,
    ) -> None:
        super().__init__(runtime, console, thread_id, policy)
        self.interval = interval
        self.prompt = prompt
        self._stop = asyncio.Event()

    def stop(self) -> None:
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    async def _wait(self) -> None:
        try:
            await asyncio.wait_for(self._stop.wait(), timeout=self.interval)
        except asyncio.TimeoutError:
            pass

    async def run(self) -> int:
        self.console.print("Starting autonomous mode...")
        while not self.stopped:
            outcome = await self._turn(self.prompt)
            if self._should_stop(outcome):
                return 1
            if outcome.ok:
                self.console.print(SEPARATOR)
            await self._wait()
        logger.info("Autonomous mode stopped")
        return 0
