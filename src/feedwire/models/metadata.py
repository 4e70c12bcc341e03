"""Price feed attribute sets.

Feeds carry free-form string attributes (symbol, asset type, quote
currency...). Attribute keys are stored sorted so that the emitted JSON
has the same key order no matter how the mapping was assembled.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from feedwire.models.identifier import PriceIdentifier
from feedwire.models.wire import WireModel

ASSET_TYPE_ATTRIBUTE = "asset_type"


class AssetType(str, Enum):
    """Asset classes a feed can belong to."""
    CRYPTO = "crypto"
    FX = "fx"
    EQUITY = "equity"
    METALS = "metals"
    RATES = "rates"

    @property
    def display_name(self) -> str:
        if self is AssetType.FX:
            return "FX"
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.display_name


class PriceFeedMetadata(WireModel):
    """Identifier plus its attribute mapping, keys in lexicographic order.

    The model is frozen but ``attributes`` is a plain dict. Key order is
    re-applied on output, so an in-place edit cannot reorder the JSON.
    """
    id: PriceIdentifier
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Attribute name -> value, always sorted by name"
    )

    @field_validator("attributes")
    @classmethod
    def sort_attributes(cls, v: dict[str, str]) -> dict[str, str]:
        return dict(sorted(v.items()))

    @field_serializer("attributes")
    def serialize_attributes(self, v: dict[str, str]) -> dict[str, str]:
        return dict(sorted(v.items()))

    @property
    def asset_type(self) -> Optional[AssetType]:
        """The feed's asset class, or None if absent or unrecognized."""
        raw = self.attributes.get(ASSET_TYPE_ATTRIBUTE)
        if raw is None:
            return None
        try:
            return AssetType(raw.strip().lower())
        except ValueError:
            return None

    def matches_asset_type(self, asset_type: AssetType) -> bool:
        return self.asset_type is asset_type
