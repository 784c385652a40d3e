from __future__ import annotations

from functools import lru_cache
import logging
from typing import Any, TypeVar, get_origin

from pydantic import TypeAdapter, ValidationError

from orca_api.domain.exceptions import DecodeError


logger = logging.getLogger(__name__)


T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter_for(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def describe_target(target: Any) -> str:
    if get_origin(target) is None and hasattr(target, "__name__"):
        return target.__name__
    return repr(target)


def decode_response(body: bytes | str, target: type[T]) -> T:
    """Parse a JSON body into ``target`` as a whole.

    Any failure (invalid JSON, missing required field, wrong type, value out
    of a closed vocabulary) raises :class:`DecodeError` chained to the
    underlying pydantic error.
    """
    target_name = describe_target(target)
    try:
        return _adapter_for(target).validate_json(body)
    except ValidationError as exc:
        logger.warning(
            "orca_response_mapper: decode_failed target=%s errors=%s first_error=%s",
            target_name,
            exc.error_count(),
            _first_error(exc),
        )
        raise DecodeError(
            f"Failed to decode Orca API response as {target_name}: {exc.error_count()} error(s)",
            target=target_name,
        ) from exc


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False)
    if not errors:
        return ""
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}:{first.get('msg', '')}"
