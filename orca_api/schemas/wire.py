from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated

from pydantic import ConfigDict, Field


U8 = Annotated[int, Field(ge=0, le=2**8 - 1)]
U16 = Annotated[int, Field(ge=0, le=2**16 - 1)]
U32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
U64 = Annotated[int, Field(ge=0, le=2**64 - 1)]
I32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]

# Sub-documents the server sends as JSON text. Kept verbatim, never parsed.
RawJsonText = str


def wire_model_config(wire_keys: Mapping[str, str]) -> ConfigDict:
    """Model config mapping semantic field names to wire keys.

    Fields missing from ``wire_keys`` use their own name on the wire; the
    semantic name is never accepted in place of the wire key. Values must
    already have the wire type (no "9" for an int, no "yes" for a bool).
    Unknown keys in the payload are ignored and records are immutable.
    """
    table = dict(wire_keys)
    return ConfigDict(
        alias_generator=lambda field_name: table.get(field_name, field_name),
        strict=True,
        frozen=True,
        extra="ignore",
    )
