"""Chat model abstraction used by the agent runtime."""

from webhook_agent.llm.base import (
    BaseLLMProvider,
    LLMMessage,
    LLMResponse,
    ToolCall,
    ToolDefinition,
)
from webhook_agent.llm.openai import OpenAIProvider

__all__ = [
    "BaseLLMProvider",
    "LLMMessage",
    "LLMResponse",
    "OpenAIProvider",
    "ToolCall",
    "ToolDefinition",
]
