"""Coinbase Developer Platform REST client via httpx.

Every request carries a short-lived ES256 JWT signed with the CDP API key
secret.  Only the two endpoints the agent needs are wrapped: webhook
creation and the testnet faucet.
"""

from __future__ import annotations

import logging
import secrets
import time
from typing import Any
from urllib.parse import quote, urlsplit

import httpx
from jose import jwt

from webhook_agent.errors import SubmissionError
from webhook_agent.webhooks.models import Webhook

logger = logging.getLogger("webhook_agent.cdp")

JWT_LIFETIME_SECONDS = 120


def build_jwt(key_name: str, key_secret: str, method: str, url: str) -> str:
    """Create the bearer token for a single CDP request.

    The ``uri`` claim binds the token to ``"<METHOD> <host><path>"``.
    """
    parts = urlsplit(url)
    now = int(time.time())
    claims = {
        "sub": key_name,
        "iss": "cdp",
        "aud": ["cdp_service"],
        "nbf": now,
        "exp": now + JWT_LIFETIME_SECONDS,
        "uri": f"{method.upper()} {parts.netloc}{parts.path}",
    }
    headers = {"kid": key_name, "nonce": secrets.token_hex(16)}
    return jwt.encode(claims, key_secret, algorithm="ES256", headers=headers)


class CdpClient:
    """Thin async client for the CDP platform API."""

    def __init__(
        self,
        api_key_name: str,
        api_key_secret: str,
        base_url: str = "https://api.cdp.coinbase.com/platform",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.api_key_name = api_key_name
        self._api_key_secret = api_key_secret
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        self._timeout = timeout

    async def _request(self, method: str, path: str, json: dict | None = None) -> Any:
        url = f"{self.base_url}{path}"
        token = build_jwt(self.api_key_name, self._api_key_secret, method, url)
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                resp = await client.request(
                    method,
                    url,
                    headers={
                        "Authorization": f"Bearer {token}",
                        "Content-Type": "application/json",
                    },
                    json=json,
                )
        except httpx.HTTPError as exc:
            raise SubmissionError(f"CDP request failed: {exc}") from exc

        if resp.status_code >= 400:
            try:
                data = resp.json()
            except ValueError:
                data = resp.text
            raise SubmissionError(
                f"CDP API error ({resp.status_code}): {data}",
                status_code=resp.status_code,
                body=data,
            )
        if not resp.content:
            return {}
        return resp.json()

    async def create_webhook(self, payload: dict[str, Any]) -> Webhook:
        """Create a webhook from a rendered request payload."""
        data = await self._request("POST", "/v1/webhooks", json=payload)
        webhook = Webhook.model_validate(data)
        logger.info(f"Webhook created: {webhook.id} ({webhook.event_type})")
        return webhook

    async def request_faucet_funds(
        self,
        network_id: str,
        address: str,
        asset_id: str | None = None,
    ) -> dict[str, Any]:
        """Ask the testnet faucet to fund *address*; returns the faucet transaction."""
        path = f"/v1/networks/{quote(network_id)}/addresses/{quote(address)}/faucet"
        if asset_id:
            path += f"?asset_id={quote(asset_id)}"
        data = await self._request("POST", path)
        logger.info(f"Faucet funds requested for {address} on {network_id}")
        return data
