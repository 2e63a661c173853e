import asyncio

from webhook_agent.errors import SubmissionError
from webhook_agent.webhooks.models import Webhook
from webhook_agent.webhooks.submitter import WebhookSubmitter


class _RecordingClient:
    def __init__(self, error=None):
        self.error = error
        self.payloads: list[dict] = []

    async def create_webhook(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return Webhook(
            id="wh_123",
            network_id=payload["network_id"],
            event_type=payload["event_type"],
            notification_uri=payload["notification_uri"],
            event_filters=payload.get("event_filters"),
        )


def _create(submitter, **kwargs):
    args = {
        "notification_uri": "https://example.com/hook",
        "event_type": "erc20_transfer",
        "event_type_filter": {"addresses": []},
        "event_filters": {"from_address": "0xAA"},
    }
    args.update(kwargs)
    return asyncio.run(submitter.create_webhook(**args))


def test_erc20_scenario_submits_sparse_filter_and_reports_success(settings):
    client = _RecordingClient()
    result = _create(WebhookSubmitter(settings, client))

    assert client.payloads == [{
        "network_id": "base-sepolia",
        "notification_uri": "https://example.com/hook",
        "event_type": "erc20_transfer",
        "event_filters": [{"from_address": "0xAA"}],
    }]
    assert result.startswith("The webhook was successfully created:")
    assert "wh_123" in result
    assert "0xAA" in result


def test_wallet_activity_uses_event_type_filter_addresses(settings):
    client = _RecordingClient()
    result = _create(
        WebhookSubmitter(settings, client),
        event_type="wallet_activity",
        event_type_filter={"addresses": ["0x1"]},
        event_filters=None,
    )

    assert "successfully created" in result
    assert client.payloads[0]["event_type_filter"] == {"addresses": ["0x1"], "wallet_id": ""}


def test_missing_network_id_is_reported_without_calling_provider(settings):
    settings = settings.model_copy(update={"network_id": None})
    client = _RecordingClient()

    result = _create(WebhookSubmitter(settings, client))

    assert result.startswith("Error: Network ID is not configured")
    assert client.payloads == []


def test_provider_failure_becomes_error_string(settings):
    client = _RecordingClient(
        error=SubmissionError("CDP API error (400): bad filter", status_code=400)
    )

    result = _create(WebhookSubmitter(settings, client))

    assert result == "Error: CDP API error (400): bad filter"


def test_unexpected_exception_is_contained(settings):
    client = _RecordingClient(error=ConnectionResetError("reset by peer"))

    result = _create(WebhookSubmitter(settings, client))

    assert result == "Error: reset by peer"


def test_empty_transfer_filter_is_a_tool_error(settings):
    client = _RecordingClient()

    result = _create(WebhookSubmitter(settings, client), event_filters={})

    assert result == "Error: At least one filter must be provided"
    assert client.payloads == []


def test_unsupported_event_type_is_a_tool_error(settings):
    result = _create(WebhookSubmitter(settings, _RecordingClient()), event_type="nft_mint")

    assert result == "Error: Unsupported event type: nft_mint"


def test_notification_uri_must_be_http_url(settings):
    result = _create(WebhookSubmitter(settings, _RecordingClient()), notification_uri="not a url")

    assert result.startswith("Error: notification_uri must be an http(s) URL")


def test_addresses_must_be_strings(settings):
    result = _create(
        WebhookSubmitter(settings, _RecordingClient()),
        event_type="wallet_activity",
        event_type_filter={"addresses": "0x1"},
    )

    assert result == "Error: event_type_filter.addresses must be a list of strings"


def test_empty_filters_block_address_list_webhooks(settings):
    for event_type in ("wallet_activity", "smart_contract_event_activity"):
        client = _RecordingClient()

        result = _create(
            WebhookSubmitter(settings, client),
            event_type=event_type,
            event_type_filter={"addresses": ["0x1"]},
            event_filters={},
        )

        assert result == "Error: At least one filter must be provided"
        assert client.payloads == []
