"""Price feed identifier.

Every price feed is named by a 32-byte identifier. On the wire it is a
64-character hex string; input may carry a ``0x`` prefix and any letter
case, output is always lower-case without a prefix.

Examples of equivalent inputs:
    0xe62df6c8b4a85fe1a67db44dc12de5db330f7ac66b72dc658afedf0f4a415b43
    E62DF6C8B4A85FE1A67DB44DC12DE5DB330F7AC66B72DC658AFEDF0F4A415B43
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from feedwire.errors import InvalidHexError, InvalidLengthError

IDENTIFIER_SIZE = 32

_HEX_CHARS_RE = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True, order=True)
class PriceIdentifier:
    """Immutable 32-byte price feed identifier, ordered by raw bytes."""
    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray)):
            raise TypeError(
                f"Identifier must be bytes, got {type(self.raw).__name__}"
            )
        if len(self.raw) != IDENTIFIER_SIZE:
            raise InvalidLengthError(
                f"Identifier must be {IDENTIFIER_SIZE} bytes, got {len(self.raw)}"
            )
        if isinstance(self.raw, bytearray):
            object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def from_bytes(cls, raw: bytes) -> PriceIdentifier:
        return cls(bytes(raw))

    @classmethod
    def parse(cls, text: str) -> PriceIdentifier:
        """Parse hex text, with or without a ``0x``/``0X`` prefix.

        Raises:
            InvalidHexError: If the text contains non-hex characters.
            InvalidLengthError: If the text does not decode to 32 bytes.
        """
        digits = text[2:] if text[:2] in ("0x", "0X") else text
        if not _HEX_CHARS_RE.fullmatch(digits):
            raise InvalidHexError(f"Identifier contains non-hex characters: {text!r}")
        if len(digits) != IDENTIFIER_SIZE * 2:
            raise InvalidLengthError(
                f"Identifier must be {IDENTIFIER_SIZE * 2} hex characters, "
                f"got {len(digits)}"
            )
        return cls(bytes.fromhex(digits))

    def to_hex(self) -> str:
        """Canonical form: 64 lower-case hex characters, no prefix."""
        return self.raw.hex()

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"PriceIdentifier({self.to_hex()!r})"

    # -- pydantic integration ------------------------------------------

    @classmethod
    def _coerce(cls, value: Any) -> PriceIdentifier:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (bytes, bytearray)):
            return cls.from_bytes(value)
        raise ValueError(
            f"Identifier must be hex text or 32 bytes, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda ident: ident.to_hex(),
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": r"^(0[xX])?[0-9a-fA-F]{64}$",
            "description": "32-byte identifier as hex, optionally 0x-prefixed",
        }
