"""Base model for client-facing wire shapes."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class WireModel(BaseModel):
    """Frozen pydantic model that can leave chosen fields out when None.

    Fields listed in ``omit_if_none`` disappear from serialized output
    when unset, matching the wire contract for optional blocks. Every
    other None field is emitted as ``null``.
    """

    model_config = ConfigDict(frozen=True)

    omit_if_none: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def drop_absent_fields(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if isinstance(data, dict):
            for name in self.omit_if_none:
                if name in data and data[name] is None:
                    del data[name]
        return data
