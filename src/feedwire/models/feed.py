"""Domain price feed updates.

A PriceFeedUpdate is the canonical in-process form of one feed's update
as produced by the upstream aggregator. This core only reads them and
projects them into wire shapes; nothing here mutates one in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from feedwire.models.identifier import PriceIdentifier
from feedwire.models.price import Price


@dataclass(frozen=True)
class PriceFeedUpdate:
    """One price feed's update plus its verification metadata.

    ``update_data`` is the signed update exactly as captured by the
    producer, or None when the update was synthesized without proof data
    (including every update rebuilt from a parsed envelope).
    """
    id: PriceIdentifier
    price: Price
    ema_price: Price
    slot: Optional[int] = None
    received_at: Optional[int] = None
    update_data: Optional[bytes] = None
    prev_publish_time: Optional[int] = None


@dataclass(frozen=True)
class PriceFeedsWithUpdateData:
    """Result of converting an envelope back into domain values.

    ``price_feeds`` and ``update_data`` are not correlated with each
    other; matching them by position or identifier is up to the caller.
    ``decode_ok`` runs parallel to ``update_data`` and is False where an
    entry failed to decode and was replaced by empty bytes.
    """
    price_feeds: list[PriceFeedUpdate]
    update_data: list[bytes]
    decode_ok: list[bool] = field(default_factory=list)

    @property
    def degraded_indices(self) -> list[int]:
        """Positions in ``update_data`` that failed to decode."""
        return [i for i, ok in enumerate(self.decode_ok) if not ok]
