"""Fixed-point price data model.

A price is an integer mantissa plus a power-of-ten exponent: the real
value is ``price * 10^expo``, and the confidence interval ``conf`` is in
the same units. The confidence roughly corresponds to the standard error
of a normal distribution around the price.

``price`` and ``conf`` are 64-bit integers that routinely exceed the
53-bit safe range of JSON numbers in many clients, so they always cross
a text boundary as decimal strings. ``expo`` and ``publish_time`` fit
safely and stay native integers.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

from feedwire.models.wire import WireModel

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U16_MAX = 2**16 - 1

_DECIMAL_RE = re.compile(r"-?[0-9]+")


def _parse_decimal_int(value: Any) -> Any:
    """Accept a native int or its decimal text; leave range checks to pydantic."""
    if isinstance(value, bool):
        raise ValueError("boolean is not a valid integer")
    if isinstance(value, str):
        if not _DECIMAL_RE.fullmatch(value):
            raise ValueError(f"not a decimal integer string: {value!r}")
        return int(value)
    return value


# Numeric-as-string rule, applied once per field type.
I64String = Annotated[
    int,
    Field(ge=I64_MIN, le=I64_MAX),
    BeforeValidator(_parse_decimal_int),
    PlainSerializer(str, return_type=str),
]
U64String = Annotated[
    int,
    Field(ge=0, le=U64_MAX),
    BeforeValidator(_parse_decimal_int),
    PlainSerializer(str, return_type=str),
]

# Seconds since the Unix epoch. Signed so durations are plain subtraction.
UnixTimestamp = Annotated[int, Field(ge=I64_MIN, le=I64_MAX)]
Slot = Annotated[int, Field(ge=0, le=U64_MAX)]


class Price(WireModel):
    """A price with a degree of uncertainty at a certain time."""

    price: I64String = Field(
        description="Price mantissa, serialized as a decimal string"
    )
    conf: U64String = Field(
        description="Confidence interval mantissa, serialized as a decimal string"
    )
    expo: int = Field(
        ge=I32_MIN,
        le=I32_MAX,
        description="Exponent shared by price and conf: value = mantissa * 10^expo"
    )
    publish_time: UnixTimestamp = Field(
        description="When the price was published (unix seconds)"
    )

    def as_decimal(self) -> tuple[Decimal, Decimal]:
        """Return ``(price, conf)`` scaled by ``10^expo`` without rounding."""
        return (
            Decimal(self.price).scaleb(self.expo),
            Decimal(self.conf).scaleb(self.expo),
        )
