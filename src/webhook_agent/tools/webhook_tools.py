"""The ``create_webhook`` tool."""

from __future__ import annotations

from typing import TYPE_CHECKING

from webhook_agent.agent.prompts import CREATE_WEBHOOK_PROMPT
from webhook_agent.webhooks.models import EventType

if TYPE_CHECKING:
    from webhook_agent.tools.registry import ToolRegistry
    from webhook_agent.webhooks.submitter import WebhookSubmitter

_ADDRESS_LIST = {
    "type": "array",
    "items": {"type": "string"},
    "description": "List of wallet or contract addresses to monitor",
}

CREATE_WEBHOOK_PARAMETERS = {
    "type": "object",
    "properties": {
        "notification_uri": {
            "type": "string",
            "format": "uri",
            "description": "The callback URL where webhook events will be sent",
        },
        "event_type": {
            "type": "string",
            "enum": [e.value for e in EventType],
        },
        "event_type_filter": {
            "type": "object",
            "properties": {"addresses": _ADDRESS_LIST},
            "required": ["addresses"],
        },
        "event_filters": {
            "type": "object",
            "properties": {
                "from_address": {
                    "type": "string",
                    "description": "Sender address for token transfers",
                },
                "to_address": {
                    "type": "string",
                    "description": "Recipient address for token transfers",
                },
                "contract_address": {
                    "type": "string",
                    "description": "Contract address for token transfers",
                },
            },
        },
    },
    "required": ["notification_uri", "event_type", "event_type_filter"],
}


def register_webhook_tools(registry: ToolRegistry, submitter: WebhookSubmitter) -> None:
    registry.tool(
        "create_webhook", CREATE_WEBHOOK_PROMPT, CREATE_WEBHOOK_PARAMETERS
    )(submitter.create_webhook)
