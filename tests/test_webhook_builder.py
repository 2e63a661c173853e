import pydantic
import pytest

from webhook_agent.errors import UnsupportedEventTypeError, ValidationError
from webhook_agent.webhooks.builder import build_webhook_request
from webhook_agent.webhooks.models import (
    ContractActivityRequest,
    EventType,
    TransferFilter,
    TransferRequest,
    WalletActivityRequest,
    validate_event_filters,
)

URI = "https://example.com/hook"
NETWORK = "base-sepolia"


def _build(event_type, addresses=(), filters=None):
    return build_webhook_request(
        event_type, list(addresses), filters, network_id=NETWORK, notification_uri=URI
    )


def test_wallet_activity_payload_has_addresses_and_placeholder_wallet_id():
    request = _build("wallet_activity", ["0x1", "0x2"])

    assert isinstance(request, WalletActivityRequest)
    assert request.to_payload() == {
        "network_id": NETWORK,
        "notification_uri": URI,
        "event_type": "wallet_activity",
        "event_type_filter": {"addresses": ["0x1", "0x2"], "wallet_id": ""},
    }


def test_contract_activity_payload_labels_contract_addresses():
    request = _build(EventType.SMART_CONTRACT_EVENT_ACTIVITY, ["0xC0"])

    assert isinstance(request, ContractActivityRequest)
    payload = request.to_payload()
    assert payload["event_type"] == "smart_contract_event_activity"
    assert payload["event_type_filter"] == {"contract_addresses": ["0xC0"]}
    assert "event_filters" not in payload


@pytest.mark.parametrize("event_type", ["erc20_transfer", "erc721_transfer"])
def test_transfer_payload_is_single_sparse_filter(event_type):
    request = _build(event_type, ["0xIGNORED"], {"from_address": "0xAA"})

    assert isinstance(request, TransferRequest)
    payload = request.to_payload()
    assert payload["event_type"] == event_type
    assert payload["event_filters"] == [{"from_address": "0xAA"}]
    assert "event_type_filter" not in payload


def test_transfer_with_only_contract_address_has_exactly_that_key():
    payload = _build("erc20_transfer", filters={"contract_address": "0xT0KEN"}).to_payload()

    assert payload["event_filters"] == [{"contract_address": "0xT0KEN"}]
    (only,) = payload["event_filters"]
    assert list(only) == ["contract_address"]


def test_transfer_drops_blank_fields():
    payload = _build(
        "erc721_transfer",
        filters={"from_address": "", "to_address": "0xBB", "contract_address": "  "},
    ).to_payload()

    assert payload["event_filters"] == [{"to_address": "0xBB"}]


def test_unsupported_event_type_names_the_value():
    with pytest.raises(UnsupportedEventTypeError) as excinfo:
        _build("erc1155_transfer", ["0x1"])

    assert excinfo.value.event_type == "erc1155_transfer"
    assert "erc1155_transfer" in str(excinfo.value)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        None,
        {"from_address": "", "to_address": None},
        {"addresses": ["0x1"]},
    ],
)
def test_transfer_filter_without_populated_field_is_rejected(raw):
    with pytest.raises(ValidationError, match="At least one filter must be provided"):
        validate_event_filters(raw)


def test_transfer_build_validates_before_constructing_request():
    with pytest.raises(ValidationError):
        _build("erc20_transfer", filters={})


def test_validate_event_filters_rejects_non_mapping():
    with pytest.raises(ValidationError, match="must be an object"):
        validate_event_filters(["0xAA"])


def test_validate_event_filters_passes_through_model():
    existing = TransferFilter(to_address="0xBB")
    assert validate_event_filters(existing) is existing


def test_builder_is_pure_and_requests_are_immutable():
    first = _build("wallet_activity", ["0x1"])
    second = _build("wallet_activity", ["0x1"])

    assert first == second
    with pytest.raises(pydantic.ValidationError):
        first.network_id = "base-mainnet"


@pytest.mark.parametrize("event_type", ["wallet_activity", "smart_contract_event_activity"])
@pytest.mark.parametrize("filters", [{}, {"from_address": "", "to_address": "  "}])
def test_empty_filters_rejected_for_address_list_types(event_type, filters):
    with pytest.raises(ValidationError, match="At least one filter must be provided"):
        _build(event_type, ["0x1"], filters)


def test_address_list_types_accept_absent_or_populated_filters():
    assert _build("wallet_activity", ["0x1"]).to_payload()["event_type_filter"]["addresses"] == ["0x1"]
    payload = _build("smart_contract_event_activity", ["0xC0"], {"to_address": "0xBB"}).to_payload()
    assert payload["event_type_filter"] == {"contract_addresses": ["0xC0"]}
    assert "event_filters" not in payload
