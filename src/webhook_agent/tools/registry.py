"""Tool registry - register the tools the agent runtime may call."""

from __future__ import annotations

import inspect
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from webhook_agent.llm.base import ToolDefinition

logger = logging.getLogger("webhook_agent.tools")


@dataclass
class Tool:
    name: str
    description: str
    parameters: dict[str, Any]
    func: Callable[..., Any] | Callable[..., Awaitable[Any]]
    is_async: bool = False

    def to_definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
        )

    async def execute(self, **kwargs) -> str:
        if self.is_async:
            result = await self.func(**kwargs)
        else:
            result = self.func(**kwargs)
        if isinstance(result, str):
            return result
        return json.dumps(result, default=str)


class ToolRegistry:
    """The set of tools handed to one agent runtime."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        self._tools[tool.name] = tool

    def get_tool(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def list_names(self) -> list[str]:
        return list(self._tools.keys())

    def definitions(self) -> list[ToolDefinition]:
        return [t.to_definition() for t in self._tools.values()]

    async def call(self, name: str, arguments: dict[str, Any]) -> str:
        """Run a tool and return its result text.

        Unknown tools and exceptions raised by a tool come back as
        ``"Error: ..."`` strings; the model sees them as the tool's answer.
        """
        tool = self.get_tool(name)
        if tool is None:
            return f"Error: Unknown tool '{name}'"
        logger.info(f"calling tool: {name}({arguments})")
        try:
            return await tool.execute(**arguments)
        except Exception as e:
            logger.warning(f"Tool {name} failed: {e}")
            return f"Error: {e}"

    def tool(self, name: str, description: str, parameters: dict[str, Any] | None = None):
        """Decorator to register a function as a tool.

        Usage:
            @registry.tool("get_balance", "Get the wallet balance")
            def get_balance() -> str:
                ...
        """

        def decorator(func: Callable) -> Callable:
            params = parameters if parameters is not None else _extract_parameters(func)
            self.register(Tool(
                name=name,
                description=description,
                parameters=params,
                func=func,
                is_async=inspect.iscoroutinefunction(func),
            ))
            return func

        return decorator


def _extract_parameters(func: Callable) -> dict:
    """Extract a JSON Schema for *func* from its signature."""
    sig = inspect.signature(func)
    properties = {}
    required = []

    type_map = {
        "str": "string",
        "int": "integer",
        "float": "number",
        "bool": "boolean",
        "list": "array",
        "dict": "object",
    }

    for name, param in sig.parameters.items():
        # Annotations are strings under ``from __future__ import annotations``.
        annotation = param.annotation
        if isinstance(annotation, type):
            annotation = annotation.__name__
        properties[name] = {"type": type_map.get(str(annotation), "string")}
        if param.default is inspect.Parameter.empty:
            required.append(name)

    schema: dict[str, Any] = {
        "type": "object",
        "properties": properties,
    }
    if required:
        schema["required"] = required
    return schema
