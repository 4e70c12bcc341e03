"""Binary proof envelope.

A PriceUpdate carries the same batch of updates twice, populated
independently: ``binary`` holds the raw signed update bytes under one
encoding, ``parsed`` holds the decoded client-facing fields. Either side
may be missing or sized differently from the other.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from feedwire.models.encoding import EncodingType
from feedwire.models.identifier import PriceIdentifier
from feedwire.models.price import Price, Slot, UnixTimestamp
from feedwire.models.wire import WireModel


class BinaryPriceUpdate(WireModel):
    """Encoded raw update blobs plus the tag needed to decode them."""
    encoding: EncodingType = Field(
        description="Encoding applied to every entry in data"
    )
    data: list[str] = Field(
        description="Ordered encoded update blobs"
    )


class RpcPriceFeedMetadataV2(WireModel):
    """Metadata attached to each parsed update."""
    slot: Optional[Slot] = None
    proof_available_time: Optional[UnixTimestamp] = Field(
        default=None,
        description="When the proof for this update became available (unix seconds)"
    )
    prev_publish_time: Optional[UnixTimestamp] = None


class ParsedPriceUpdate(WireModel):
    """Decoded view of one update inside an envelope."""
    id: PriceIdentifier
    price: Price
    ema_price: Price
    metadata: RpcPriceFeedMetadataV2


class PriceUpdate(WireModel):
    """Envelope pairing binary proof data with an optional parsed view."""

    omit_if_none: ClassVar[frozenset[str]] = frozenset({"parsed"})

    binary: BinaryPriceUpdate
    parsed: Optional[list[ParsedPriceUpdate]] = None


class StreamResponse(WireModel):
    """Wrapper for one PriceUpdate pushed over a stream."""
    data: PriceUpdate
