"""Packing and unpacking of binary proof envelopes.

Producer side: encode raw update blobs under one encoding and attach the
parsed records the caller asked for. Consumer side: rebuild domain
updates from the parsed records and decode the blobs separately.

The trip is lossy by construction. Parsed records never carry raw update
bytes, so every rebuilt PriceFeedUpdate has ``update_data=None``. The
decoded blobs are returned next to the updates, uncorrelated.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from feedwire.config import settings
from feedwire.conversion.client_view import build_parsed_price_update
from feedwire.errors import MissingParsedDataError
from feedwire.models.encoding import EncodingType
from feedwire.models.envelope import (
    BinaryPriceUpdate,
    ParsedPriceUpdate,
    PriceUpdate,
    StreamResponse,
)
from feedwire.models.feed import PriceFeedUpdate, PriceFeedsWithUpdateData

logger = logging.getLogger("feedwire.conversion.envelope")


# ---------------------------------------------------------------------------
# Producer
# ---------------------------------------------------------------------------


def encode_update_data(
    update_data: Iterable[bytes],
    encoding: Optional[EncodingType] = None,
) -> BinaryPriceUpdate:
    """Encode each raw blob independently under a single encoding."""
    if encoding is None:
        encoding = settings.binary_encoding
    return BinaryPriceUpdate(
        encoding=encoding,
        data=[encoding.encode_bytes(blob) for blob in update_data],
    )


def pack_price_update(
    update_data: Iterable[bytes] = (),
    price_feeds: Optional[Iterable[PriceFeedUpdate]] = None,
    encoding: Optional[EncodingType] = None,
) -> PriceUpdate:
    """Assemble an envelope from raw blobs and, optionally, domain updates.

    Passing no ``price_feeds`` yields a binary-only envelope
    (``parsed`` absent); passing no ``update_data`` yields an empty
    ``binary.data``. The two inputs are not required to line up.
    """
    binary = encode_update_data(update_data, encoding)

    parsed: Optional[list[ParsedPriceUpdate]] = None
    if price_feeds is not None:
        parsed = [build_parsed_price_update(u) for u in price_feeds]

    logger.debug(
        "Packed envelope: %d blobs (%s), %s parsed updates",
        len(binary.data), binary.encoding.value,
        "no" if parsed is None else len(parsed),
    )
    return PriceUpdate(binary=binary, parsed=parsed)


def pack_stream_response(price_update: PriceUpdate) -> StreamResponse:
    """Wrap an envelope for delivery over a stream."""
    return StreamResponse(data=price_update)


# ---------------------------------------------------------------------------
# Consumer
# ---------------------------------------------------------------------------


def decode_update_data(binary: BinaryPriceUpdate) -> tuple[list[bytes], list[bool]]:
    """Decode every blob with the envelope's own encoding tag.

    A blob that fails to decode becomes ``b""`` instead of failing the
    batch. The second list runs parallel to the first and marks which
    entries decoded cleanly, for callers that need strict validation.
    """
    blobs: list[bytes] = []
    outcomes: list[bool] = []
    for index, text in enumerate(binary.data):
        try:
            blobs.append(binary.encoding.decode_text(text))
            outcomes.append(True)
        except ValueError as exc:
            logger.warning(
                "Update data entry %d is not valid %s, using empty bytes: %s",
                index, binary.encoding.value, exc,
                extra={"entry_index": index, "encoding": binary.encoding.value},
            )
            blobs.append(b"")
            outcomes.append(False)
    return blobs, outcomes


def _to_price_feed_update(parsed: ParsedPriceUpdate) -> PriceFeedUpdate:
    return PriceFeedUpdate(
        id=parsed.id,
        price=parsed.price,
        ema_price=parsed.ema_price,
        slot=parsed.metadata.slot,
        received_at=parsed.metadata.proof_available_time,
        # Raw bytes are not recoverable from the parsed view.
        update_data=None,
        prev_publish_time=parsed.metadata.prev_publish_time,
    )


def to_price_feeds_with_update_data(
    price_update: PriceUpdate,
) -> PriceFeedsWithUpdateData:
    """Rebuild domain updates and decoded blobs from an envelope.

    Raises:
        MissingParsedDataError: If the envelope has no parsed section.
            Identifier and prices cannot be recovered from binary data
            without proof verification, which happens elsewhere.
    """
    if price_update.parsed is None:
        raise MissingParsedDataError("No parsed price updates available")

    price_feeds = [_to_price_feed_update(p) for p in price_update.parsed]
    update_data, decode_ok = decode_update_data(price_update.binary)

    degraded = decode_ok.count(False)
    logger.debug(
        "Converted envelope: %d price feeds, %d blobs (%d degraded)",
        len(price_feeds), len(update_data), degraded,
    )
    return PriceFeedsWithUpdateData(
        price_feeds=price_feeds,
        update_data=update_data,
        decode_ok=decode_ok,
    )
