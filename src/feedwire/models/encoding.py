"""Binary encodings for raw update bytes.

The encoding tag travels with the payload it describes. Decoding always
uses the recorded tag; the content is never sniffed to guess one.
"""

from __future__ import annotations

import base64
import re
from enum import Enum

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


class EncodingType(str, Enum):
    """Closed set of text encodings for binary update data."""
    HEX = "hex"
    BASE64 = "base64"

    def encode_bytes(self, data: bytes) -> str:
        """Encode raw bytes into this encoding's text form."""
        if self is EncodingType.HEX:
            return data.hex()
        if self is EncodingType.BASE64:
            return base64.b64encode(data).decode("ascii")
        raise AssertionError(f"unhandled encoding {self!r}")

    def decode_text(self, text: str) -> bytes:
        """Decode text produced by :meth:`encode_bytes`.

        Raises:
            ValueError: If the text is not valid for this encoding.
        """
        if self is EncodingType.HEX:
            # bytes.fromhex tolerates embedded whitespace; the wire form does not.
            if not _HEX_RE.fullmatch(text):
                raise ValueError("invalid hex string")
            return bytes.fromhex(text)
        if self is EncodingType.BASE64:
            try:
                return base64.b64decode(text, validate=True)
            except ValueError as exc:
                raise ValueError(f"invalid base64 string: {exc}") from exc
        raise AssertionError(f"unhandled encoding {self!r}")
