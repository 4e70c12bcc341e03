"""Client-facing price feed view.

RpcPriceFeed is what API clients see for a single feed: identifier,
current and EMA prices, and optionally the verification metadata and the
signed update (VAA) as base64.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from feedwire.models.identifier import PriceIdentifier
from feedwire.models.price import U16_MAX, Price, Slot, UnixTimestamp
from feedwire.models.wire import WireModel


class RpcPriceFeedMetadata(WireModel):
    """Verbose metadata block. Unknown values are emitted as null."""
    slot: Optional[Slot] = Field(
        default=None,
        description="Slot the update was observed in"
    )
    emitter_chain: int = Field(
        ge=0,
        le=U16_MAX,
        description="Chain id of the network the price data originates from"
    )
    price_service_receive_time: Optional[UnixTimestamp] = Field(
        default=None,
        description="When the price service received the update (unix seconds)"
    )
    prev_publish_time: Optional[UnixTimestamp] = Field(
        default=None,
        description="Publish time of the previous price for this feed"
    )


class RpcPriceFeed(WireModel):
    """One price feed as returned to API clients."""

    omit_if_none: ClassVar[frozenset[str]] = frozenset({"metadata", "vaa"})

    id: PriceIdentifier = Field(
        description="Feed identifier, 64 lower-case hex characters"
    )
    price: Price
    ema_price: Price
    metadata: Optional[RpcPriceFeedMetadata] = Field(
        default=None,
        description="Present only for verbose requests"
    )
    vaa: Optional[str] = Field(
        default=None,
        description="Signed update bytes as base64, present only for binary requests"
    )
