"""Map a semantic event filter onto the provider's webhook request shape."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from webhook_agent.errors import UnsupportedEventTypeError
from webhook_agent.webhooks.models import (
    TRANSFER_EVENT_TYPES,
    ContractActivityFilter,
    ContractActivityRequest,
    EventType,
    TransferFilter,
    TransferRequest,
    WalletActivityFilter,
    WalletActivityRequest,
    WebhookRequest,
    validate_event_filters,
)


def _coerce_event_type(event_type: EventType | str) -> EventType:
    try:
        return EventType(event_type)
    except ValueError:
        raise UnsupportedEventTypeError(event_type) from None


def build_webhook_request(
    event_type: EventType | str,
    addresses: Sequence[str],
    filters: TransferFilter | Mapping[str, Any] | None = None,
    *,
    network_id: str,
    notification_uri: str,
) -> WebhookRequest:
    """Build the request variant for *event_type*.

    ``wallet_activity`` watches *addresses* as wallets,
    ``smart_contract_event_activity`` watches them as contracts, and the two
    transfer types ignore *addresses* in favour of a single sparse transfer
    filter built from *filters*.

    Raises
    ------
    UnsupportedEventTypeError
        If *event_type* is not one of :class:`EventType`.
    ValidationError
        If *filters* is given without a populated field (for any event
        type), or a transfer type is requested without *filters*.
    """
    kind = _coerce_event_type(event_type)
    transfer_filter = None
    if filters is not None or kind in TRANSFER_EVENT_TYPES:
        transfer_filter = validate_event_filters(filters)

    if kind is EventType.WALLET_ACTIVITY:
        return WalletActivityRequest(
            network_id=network_id,
            notification_uri=notification_uri,
            event_type_filter=WalletActivityFilter(addresses=tuple(addresses)),
        )

    if kind is EventType.SMART_CONTRACT_EVENT_ACTIVITY:
        return ContractActivityRequest(
            network_id=network_id,
            notification_uri=notification_uri,
            event_type_filter=ContractActivityFilter(contract_addresses=tuple(addresses)),
        )

    if kind in TRANSFER_EVENT_TYPES:
        return TransferRequest(
            event_type=kind,
            network_id=network_id,
            notification_uri=notification_uri,
            event_filters=(transfer_filter,),
        )

    raise UnsupportedEventTypeError(kind.value)
