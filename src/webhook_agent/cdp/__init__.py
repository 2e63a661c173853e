"""Coinbase Developer Platform API access."""

from webhook_agent.cdp.client import CdpClient, build_jwt

__all__ = ["CdpClient", "build_jwt"]
