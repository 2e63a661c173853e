"""Webhook subscription requests: filter validation, building, submission."""

from webhook_agent.webhooks.builder import build_webhook_request
from webhook_agent.webhooks.models import (
    EventType,
    TransferFilter,
    Webhook,
    WebhookRequest,
    validate_event_filters,
)
from webhook_agent.webhooks.submitter import WebhookSubmitter

__all__ = [
    "EventType",
    "TransferFilter",
    "Webhook",
    "WebhookRequest",
    "WebhookSubmitter",
    "build_webhook_request",
    "validate_event_filters",
]
