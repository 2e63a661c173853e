"""On-chain agent that chats, acts autonomously and registers CDP webhooks."""

__version__ = "0.1.0"
