import time

import pytest

from webhook_agent.config import Settings
from webhook_agent.session.stream import ChunkOrigin, ResponseChunk


class FakeConsole:
    """Scripted stand-in for ``rich.console.Console``."""

    def __init__(self, inputs=()):
        self.inputs = list(inputs)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def print(self, *objects, **kwargs) -> None:
        self.lines.append(" ".join(str(o) for o in objects))


class FakeRuntime:
    """Agent runtime that replays canned chunks and records every send."""

    def __init__(self, turns=None, fail_on=(), on_finish=None):
        self.turns = turns or [[ResponseChunk(ChunkOrigin.AGENT, "hello from agent")]]
        self.fail_on = set(fail_on)
        self.on_finish = on_finish
        self.sent: list[tuple[str, str]] = []
        self.started_at: list[float] = []
        self.finished_at: list[float] = []

    async def stream(self, message, thread_id):
        self.started_at.append(time.monotonic())
        self.sent.append((message.text, thread_id))
        index = len(self.sent) - 1
        if index in self.fail_on:
            raise RuntimeError("stream exploded")
        for chunk in self.turns[index % len(self.turns)]:
            yield chunk
        self.finished_at.append(time.monotonic())
        if self.on_finish is not None:
            self.on_finish(index)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        cdp_api_key_name="organizations/org/apiKeys/key",
        cdp_api_key_private_key="secret",
        network_id="base-sepolia",
        wallet_data_file=tmp_path / "wallet_data.txt",
        wallet_password="hunter2",
    )
