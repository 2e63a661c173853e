"""Value types for webhook creation requests.

A request is a tagged union keyed by :class:`EventType`.  Each variant carries
only the fields the CDP platform expects for that kind of event and knows
how to render itself as the JSON body of ``POST /v1/webhooks``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Optional, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from webhook_agent.errors import ValidationError


class EventType(str, Enum):
    """On-chain activity a webhook can monitor."""

    WALLET_ACTIVITY = "wallet_activity"
    SMART_CONTRACT_EVENT_ACTIVITY = "smart_contract_event_activity"
    ERC20_TRANSFER = "erc20_transfer"
    ERC721_TRANSFER = "erc721_transfer"


TRANSFER_EVENT_TYPES = frozenset({EventType.ERC20_TRANSFER, EventType.ERC721_TRANSFER})


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class TransferFilter(BaseModel):
    """Which token transfers to watch.

    A field counts as populated when it holds a non-empty string; empty
    strings are normalised to ``None`` so they never reach the payload.
    At least one field must be populated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    from_address: Optional[str] = None
    to_address: Optional[str] = None
    contract_address: Optional[str] = None

    @field_validator("from_address", "to_address", "contract_address", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _require_one_field(self) -> TransferFilter:
        if not self.populated_fields():
            raise ValueError("At least one filter must be provided")
        return self

    def populated_fields(self) -> dict[str, str]:
        """Return only the fields that carry a value, in provider order."""
        values = {
            "contract_address": self.contract_address,
            "from_address": self.from_address,
            "to_address": self.to_address,
        }
        return {k: v for k, v in values.items() if v}


def validate_event_filters(raw: TransferFilter | Mapping[str, Any] | None) -> TransferFilter:
    """Validate a raw event filter object.

    Raises
    ------
    ValidationError
        If *raw* is missing, not a mapping, or has no populated field.
    """
    if isinstance(raw, TransferFilter):
        return raw
    if raw is None:
        raise ValidationError("At least one filter must be provided")
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Event filters must be an object, got {type(raw).__name__}")
    try:
        return TransferFilter.model_validate(dict(raw))
    except pydantic.ValidationError as exc:
        messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in exc.errors())
        raise ValidationError(messages) from exc


class WalletActivityFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    addresses: tuple[str, ...]
    # Required by the provider schema, meaningless here.
    wallet_id: str = ""


class ContractActivityFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    contract_addresses: tuple[str, ...]


# ---------------------------------------------------------------------------
# Request variants
# ---------------------------------------------------------------------------


class _WebhookRequestBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    network_id: str
    notification_uri: str

    def to_payload(self) -> dict[str, Any]:
        """Render the JSON body expected by the CDP webhooks endpoint."""
        return self.model_dump(mode="json", exclude_none=True)


class WalletActivityRequest(_WebhookRequestBase):
    event_type: Literal[EventType.WALLET_ACTIVITY] = EventType.WALLET_ACTIVITY
    event_type_filter: WalletActivityFilter


class ContractActivityRequest(_WebhookRequestBase):
    event_type: Literal[EventType.SMART_CONTRACT_EVENT_ACTIVITY] = (
        EventType.SMART_CONTRACT_EVENT_ACTIVITY
    )
    event_type_filter: ContractActivityFilter


class TransferRequest(_WebhookRequestBase):
    event_type: Literal[EventType.ERC20_TRANSFER, EventType.ERC721_TRANSFER]
    event_filters: tuple[TransferFilter]

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["event_filters"] = [f.populated_fields() for f in self.event_filters]
        return payload


WebhookRequest = Annotated[
    Union[WalletActivityRequest, ContractActivityRequest, TransferRequest],
    Field(discriminator="event_type"),
]


# ---------------------------------------------------------------------------
# Provider response
# ---------------------------------------------------------------------------


class Webhook(BaseModel):
    """A webhook as returned by the CDP platform."""

    model_config = ConfigDict(extra="allow")

    id: str
    network_id: str = ""
    event_type: str = ""
    notification_uri: str = ""
    event_type_filter: Optional[dict[str, Any]] = None
    event_filters: Optional[list[dict[str, Any]]] = None
    signature_header: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __str__(self) -> str:
        fields = [
            ("id", self.id),
            ("network_id", self.network_id),
            ("event_type", self.event_type),
            ("event_type_filter", self.event_type_filter),
            ("event_filters", self.event_filters),
            ("notification_uri", self.notification_uri),
            ("signature_header", self.signature_header),
            ("created_at", self.created_at),
            ("updated_at", self.updated_at),
        ]
        body = ", ".join(f"{name}: {value!r}" for name, value in fields if value is not None)
        return f"Webhook {{ {body} }}"
