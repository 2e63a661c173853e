"""Submit webhook creation requests and render the outcome for the agent.

The submitter is what the ``create_webhook`` tool calls.  Its contract to the
agent runtime is that it always returns a string: configuration, validation
and provider failures are all reported as ``"Error: ..."`` so the
conversation can carry on.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import urlsplit

from webhook_agent.errors import ConfigurationError, ValidationError
from webhook_agent.webhooks.builder import build_webhook_request

if TYPE_CHECKING:
    from webhook_agent.cdp.client import CdpClient
    from webhook_agent.config import Settings

logger = logging.getLogger("webhook_agent.webhooks.submitter")


def _check_notification_uri(uri: str) -> str:
    parts = urlsplit(uri or "")
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValidationError(f"notification_uri must be an http(s) URL, got {uri!r}")
    return uri


def _check_addresses(event_type_filter: Mapping[str, Any] | None) -> list[str]:
    if event_type_filter is None:
        return []
    if not isinstance(event_type_filter, Mapping):
        raise ValidationError("event_type_filter must be an object with an 'addresses' list")
    addresses = event_type_filter.get("addresses", [])
    if not isinstance(addresses, list) or not all(isinstance(a, str) for a in addresses):
        raise ValidationError("event_type_filter.addresses must be a list of strings")
    return addresses


class WebhookSubmitter:
    """Build a webhook request from tool arguments and send it to CDP."""

    def __init__(self, settings: Settings, client: CdpClient) -> None:
        self._settings = settings
        self._client = client

    def _network_id(self) -> str:
        network_id = self._settings.network_id
        if not network_id:
            raise ConfigurationError(
                "Network ID is not configured. Set NETWORK_ID to create webhooks."
            )
        return network_id

    async def create_webhook(
        self,
        notification_uri: str,
        event_type: str,
        event_type_filter: Mapping[str, Any] | None = None,
        event_filters: Mapping[str, Any] | None = None,
    ) -> str:
        try:
            request = build_webhook_request(
                event_type,
                _check_addresses(event_type_filter),
                event_filters,
                network_id=self._network_id(),
                notification_uri=_check_notification_uri(notification_uri),
            )
            webhook = await self._client.create_webhook(request.to_payload())
        except Exception as exc:
            logger.error(f"Failed to create webhook: {exc}")
            return f"Error: {exc}"
        return f"The webhook was successfully created: {webhook}\n\n"
