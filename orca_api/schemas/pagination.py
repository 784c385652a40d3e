from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from orca_api.schemas.wire import wire_model_config


ItemT = TypeVar("ItemT")


class Meta(BaseModel):
    """Opaque cursors; pass them back as ``next``/``previous`` to page."""

    model_config = wire_model_config({})

    next: str | None = None
    previous: str | None = None


class Paginated(BaseModel, Generic[ItemT]):
    model_config = wire_model_config({})

    data: list[ItemT]
    meta: Meta
