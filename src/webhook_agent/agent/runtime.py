"""ReAct-style agent runtime that streams its turn as response chunks."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from webhook_agent.agent.prompts import SYSTEM_PROMPT
from webhook_agent.llm.base import BaseLLMProvider, LLMMessage
from webhook_agent.session.stream import ChunkOrigin, ResponseChunk, SessionMessage
from webhook_agent.tools.registry import ToolRegistry

logger = logging.getLogger("webhook_agent.agent")


class MemoryCheckpointer:
    """Conversation history per thread id, kept for the life of the process."""

    def __init__(self) -> None:
        self._threads: dict[str, list[LLMMessage]] = {}

    def get(self, thread_id: str) -> list[LLMMessage]:
        return self._threads.setdefault(thread_id, [])

    def thread_ids(self) -> list[str]:
        return list(self._threads)


class ReactAgent:
    """Alternate model calls and tool calls until the model answers in text.

    Every assistant message with text yields an ``agent`` chunk and every tool
    result yields a ``tool`` chunk, in the order they happen.
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        tools: ToolRegistry,
        system_prompt: str = SYSTEM_PROMPT,
        checkpointer: MemoryCheckpointer | None = None,
        max_iterations: int = 15,
    ):
        self.provider = provider
        self.tools = tools
        self.system_prompt = system_prompt
        self.checkpointer = checkpointer or MemoryCheckpointer()
        self.max_iterations = max_iterations

    async def stream(self, message: SessionMessage, thread_id: str) -> AsyncIterator[ResponseChunk]:
        history = self.checkpointer.get(thread_id)
        if not history:
            history.append(LLMMessage(role="system", content=self.system_prompt))
        turn_start = len(history)
        history.append(LLMMessage(role="user", content=message.text))

        try:
            async for chunk in self._run(history):
                yield chunk
        except Exception:
            # Leave no half-finished tool exchange behind for the next turn.
            del history[turn_start:]
            raise

    async def _run(self, history: list[LLMMessage]) -> AsyncIterator[ResponseChunk]:
        definitions = self.tools.definitions()
        for _ in range(self.max_iterations):
            response = await self.provider.complete(messages=history, tools=definitions)

            if not response.tool_calls:
                history.append(LLMMessage(role="assistant", content=response.content))
                yield ResponseChunk(ChunkOrigin.AGENT, response.content)
                return

            history.append(LLMMessage(
                role="assistant",
                content=response.content or "",
                tool_calls=[
                    {"id": tc.id, "name": tc.name, "arguments": tc.arguments}
                    for tc in response.tool_calls
                ],
            ))
            if response.content:
                yield ResponseChunk(ChunkOrigin.AGENT, response.content)

            for tc in response.tool_calls:
                result = await self.tools.call(tc.name, tc.arguments)
                history.append(LLMMessage(role="tool", content=result, tool_call_id=tc.id))
                yield ResponseChunk(ChunkOrigin.TOOL, result)

        raise RuntimeError(
            f"Agent exceeded {self.max_iterations} steps without a final answer"
        )
