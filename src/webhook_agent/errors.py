"""Exception hierarchy for the webhook agent.

Everything raised on purpose by this package derives from
:class:`WebhookAgentError`, so the tool boundary and the CLI can catch the
whole family or a single kind.
"""

from __future__ import annotations


class WebhookAgentError(Exception):
    """Base class for all webhook agent errors."""


class ConfigurationError(WebhookAgentError):
    """Required configuration is missing or malformed."""


class ValidationError(WebhookAgentError):
    """Tool input failed validation (e.g. an event filter with no fields)."""


class UnsupportedEventTypeError(WebhookAgentError):
    """The requested event type is outside the supported set."""

    def __init__(self, event_type: object):
        self.event_type = event_type
        super().__init__(f"Unsupported event type: {event_type}")


class SubmissionError(WebhookAgentError):
    """The CDP platform rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None, body: object = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class StreamError(WebhookAgentError):
    """Consuming a turn's response stream failed."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)
