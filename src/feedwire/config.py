"""feedwire configuration via environment variables.

Only the values a caller cannot be expected to pass on every call live
here: the chain the price data originates from and the default binary
encoding for envelopes. Explicit arguments always win over these.
"""

import os
import logging

from feedwire.models.encoding import EncodingType

logger = logging.getLogger("feedwire.config")

# Wormhole chain id of Pythnet, where the price data is attested.
PYTHNET_CHAIN_ID = 26


class Settings:
    """All configuration sourced from environment."""

    def __init__(self):
        self.version = "0.1.0"
        self.log_level = os.environ.get("FEEDWIRE_LOG_LEVEL", "info")

        self.emitter_chain = int(
            os.environ.get("FEEDWIRE_EMITTER_CHAIN", str(PYTHNET_CHAIN_ID))
        )
        if not 0 <= self.emitter_chain <= 0xFFFF:
            raise ValueError(
                f"FEEDWIRE_EMITTER_CHAIN must fit in 16 bits, got {self.emitter_chain}"
            )

        self.binary_encoding = EncodingType(
            os.environ.get("FEEDWIRE_BINARY_ENCODING", "hex").strip().lower()
        )

        logger.debug(
            "Settings loaded: emitter_chain=%d binary_encoding=%s",
            self.emitter_chain, self.binary_encoding.value,
        )


settings = Settings()
