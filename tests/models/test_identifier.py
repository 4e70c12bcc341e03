"""Tests for price identifier parsing, encoding and ordering."""

import pytest
from pydantic import BaseModel, ValidationError

from feedwire.errors import (
    InvalidHexError,
    InvalidIdentifierError,
    InvalidLengthError,
)
from feedwire.models.identifier import PriceIdentifier

CANONICAL = "e62df6c8b4a85fe1a67db44dc12de5db330f7ac66b72dc658afedf0f4a415b43"


class _Holder(BaseModel):
    id: PriceIdentifier


class TestParse:
    """Verify accepted and rejected textual forms."""

    def test_prefixed_upper_case_equals_canonical(self):
        upper = "0xE62DF6C8B4A85FE1A67DB44DC12DE5DB330F7AC66B72DC658AFEDF0F4A415B43"
        assert PriceIdentifier.parse(upper) == PriceIdentifier.parse(CANONICAL)
        assert PriceIdentifier.parse(upper).to_hex() == CANONICAL

    def test_capital_prefix(self):
        assert PriceIdentifier.parse("0X" + CANONICAL).to_hex() == CANONICAL

    def test_mixed_case(self):
        mixed = "".join(
            c.upper() if i % 2 else c for i, c in enumerate(CANONICAL)
        )
        assert PriceIdentifier.parse(mixed).to_hex() == CANONICAL

    def test_short_text(self):
        with pytest.raises(InvalidLengthError):
            PriceIdentifier.parse(CANONICAL[:-2])

    def test_long_text(self):
        with pytest.raises(InvalidLengthError):
            PriceIdentifier.parse(CANONICAL + "00")

    def test_empty_text(self):
        with pytest.raises(InvalidLengthError):
            PriceIdentifier.parse("")

    def test_prefix_only(self):
        with pytest.raises(InvalidLengthError):
            PriceIdentifier.parse("0x")

    def test_non_hex_character(self):
        bad = CANONICAL[:-1] + "g"
        with pytest.raises(InvalidHexError):
            PriceIdentifier.parse(bad)

    def test_whitespace_is_not_hex(self):
        with pytest.raises(InvalidHexError):
            PriceIdentifier.parse(" " + CANONICAL)

    def test_errors_share_base(self):
        assert issubclass(InvalidHexError, InvalidIdentifierError)
        assert issubclass(InvalidLengthError, InvalidIdentifierError)
        assert issubclass(InvalidIdentifierError, ValueError)


class TestBytes:
    """Verify construction from raw bytes."""

    def test_round_trip_through_hex(self):
        for raw in (bytes(32), bytes(range(32)), b"\xff" * 32):
            ident = PriceIdentifier(raw)
            assert PriceIdentifier.parse(ident.to_hex()) == ident
            assert len(ident.to_hex()) == 64

    def test_wrong_size(self):
        with pytest.raises(InvalidLengthError):
            PriceIdentifier(bytes(31))

    def test_bytearray_is_frozen_to_bytes(self):
        ident = PriceIdentifier.from_bytes(bytearray(range(32)))
        assert isinstance(ident.raw, bytes)
        assert hash(ident) == hash(PriceIdentifier(bytes(range(32))))

    def test_immutable(self):
        ident = PriceIdentifier(bytes(32))
        with pytest.raises(AttributeError):
            ident.raw = b"\x01" * 32


class TestOrdering:
    """Identifiers sort by raw byte sequence."""

    def test_lexicographic(self):
        low = PriceIdentifier(b"\x00" * 31 + b"\xff")
        high = PriceIdentifier(b"\x01" + b"\x00" * 31)
        assert low < high
        assert sorted([high, low]) == [low, high]

    def test_str_is_canonical_hex(self):
        assert str(PriceIdentifier.parse(CANONICAL)) == CANONICAL


class TestPydanticField:
    """Identifier behaves as a pydantic field type."""

    def test_validates_prefixed_text(self):
        holder = _Holder(id="0x" + CANONICAL.upper())
        assert holder.id == PriceIdentifier.parse(CANONICAL)

    def test_serializes_to_canonical_hex(self):
        holder = _Holder(id="0x" + CANONICAL.upper())
        assert holder.model_dump() == {"id": CANONICAL}
        assert holder.model_dump_json() == '{"id":"%s"}' % CANONICAL

    def test_accepts_raw_bytes(self):
        holder = _Holder(id=bytes(32))
        assert holder.id.to_hex() == "00" * 32

    def test_invalid_text_is_validation_error(self):
        with pytest.raises(ValidationError):
            _Holder(id="0x1234")

    def test_wrong_type_is_validation_error(self):
        with pytest.raises(ValidationError):
            _Holder(id=12345)

    def test_json_schema_describes_hex_string(self):
        schema = _Holder.model_json_schema()
        assert schema["properties"]["id"]["type"] == "string"
        assert "pattern" in schema["properties"]["id"]
