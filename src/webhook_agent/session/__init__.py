"""Session drivers and the stream consumer they share."""

from webhook_agent.session.drivers import AutonomousDriver, ChatDriver
from webhook_agent.session.selector import Mode, choose_mode
from webhook_agent.session.stream import (
    ChunkOrigin,
    ResponseChunk,
    SessionMessage,
    TurnOutcome,
    consume_stream,
    run_turn,
)

__all__ = [
    "AutonomousDriver",
    "ChatDriver",
    "ChunkOrigin",
    "Mode",
    "ResponseChunk",
    "SessionMessage",
    "TurnOutcome",
    "choose_mode",
    "consume_stream",
    "run_turn",
]
