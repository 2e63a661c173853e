"""Tools exposed to the agent runtime."""

from webhook_agent.tools.registry import Tool, ToolRegistry
from webhook_agent.tools.wallet_tools import register_wallet_tools
from webhook_agent.tools.webhook_tools import register_webhook_tools

__all__ = ["Tool", "ToolRegistry", "register_wallet_tools", "register_webhook_tools"]
