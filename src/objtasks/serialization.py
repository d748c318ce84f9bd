"""JSON helpers: encode any value, decode into a given type."""
from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objtasks.errors import DecodeError

__all__ = ["from_json", "to_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default(value: Any) -> Any:
    """Fallback encoder for objects the json module does not know."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, (set, frozenset)):
        return list(value)
    attrs = getattr(value, "__dict__", None)
    if attrs is not None:
        return {k: v for k, v in attrs.items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON text for *value*.

    Output is compact unless *indent* is given. Dataclasses become objects of
    their fields, other objects their public attributes.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        value,
        default=_default,
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
        ensure_ascii=False,
    )


def from_json(prototype: type[T] | None, text: str) -> T | Any:
    """Parse *text* and return it as an instance of *prototype*.

    With ``prototype=None`` the plain decoded value is returned. Dataclass
    prototypes are built through their constructor; any other class is
    created without running ``__init__`` and the decoded keys are set as
    attributes.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Invalid JSON for %s: %s", prototype, exc)
        raise DecodeError(f"Invalid JSON: {exc}", cause=exc) from exc

    if prototype is None:
        return data
    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object for {prototype.__name__}, "
            f"got {type(data).__name__}"
        )

    if dataclasses.is_dataclass(prototype):
        try:
            return prototype(**data)
        except TypeError as exc:
            raise DecodeError(
                f"Cannot build {prototype.__name__}: {exc}", cause=exc
            ) from exc

    try:
        obj = prototype.__new__(prototype)
        for key, value in data.items():
            setattr(obj, key, value)
    except (AttributeError, TypeError) as exc:
        raise DecodeError(
            f"Cannot build {prototype.__name__}: {exc}", cause=exc
        ) from exc
    return obj
