"""Projection of domain updates into client-facing records.

Both builders are pure: they copy the numeric payload verbatim and never
fail on missing optional data. A missing field on the domain update
stays missing (or null) in the output.
"""

from __future__ import annotations

import base64
import logging
from typing import Optional

from feedwire.config import settings
from feedwire.models.envelope import ParsedPriceUpdate, RpcPriceFeedMetadataV2
from feedwire.models.feed import PriceFeedUpdate
from feedwire.models.rpc import RpcPriceFeed, RpcPriceFeedMetadata

logger = logging.getLogger("feedwire.conversion.client_view")


def build_rpc_price_feed(
    update: PriceFeedUpdate,
    verbose: bool = False,
    binary: bool = False,
    emitter_chain: Optional[int] = None,
) -> RpcPriceFeed:
    """Build the client view of a single price feed update.

    Args:
        update: Domain update to project.
        verbose: Attach the metadata block (chain, receive time, slot,
            previous publish time).
        binary: Attach the signed update as base64 in ``vaa``. Ignored
            when the update carries no raw bytes.
        emitter_chain: Chain id for the metadata block. Defaults to the
            configured emitter chain.

    Returns:
        RpcPriceFeed with ``metadata`` set iff ``verbose``, and ``vaa``
        set iff ``binary`` and raw bytes were available.
    """
    metadata = None
    if verbose:
        metadata = RpcPriceFeedMetadata(
            emitter_chain=(
                settings.emitter_chain if emitter_chain is None else emitter_chain
            ),
            price_service_receive_time=update.received_at,
            slot=update.slot,
            prev_publish_time=update.prev_publish_time,
        )

    vaa = None
    if binary:
        if update.update_data is not None:
            vaa = base64.b64encode(update.update_data).decode("ascii")
        else:
            logger.debug("No update data to attach for feed %s", update.id)

    return RpcPriceFeed(
        id=update.id,
        price=update.price,
        ema_price=update.ema_price,
        metadata=metadata,
        vaa=vaa,
    )


def build_parsed_price_update(update: PriceFeedUpdate) -> ParsedPriceUpdate:
    """Build the parsed envelope record for a domain update.

    The receive time becomes ``proof_available_time``; raw update bytes
    are not part of the parsed record.
    """
    return ParsedPriceUpdate(
        id=update.id,
        price=update.price,
        ema_price=update.ema_price,
        metadata=RpcPriceFeedMetadataV2(
            slot=update.slot,
            proof_available_time=update.received_at,
            prev_publish_time=update.prev_publish_time,
        ),
    )
