"""Normalisation of shard coordinates into plain integers."""
from __future__ import annotations

import operator
from collections.abc import Mapping
from typing import Any, Optional

from .errors import InvalidShardValueError
from .models import ShardPoint

_CONVERSION_METHODS = ("to_int", "to_bigint", "toBigInt")
_PREFIXES = ("0x", "0o", "0b")
_MISSING = object()


def _parse_numeric_string(text: str) -> int:
    text = text.strip()
    if not text or not text.isascii() or "_" in text:
        raise ValueError(text)
    if text.lower().startswith(_PREFIXES):
        return int(text, 0)
    return int(text, 10)


def to_field_int(value: Any, label: str, index: Optional[int] = None) -> int:
    """Convert a shard coordinate into an ``int``.

    Accepted inputs are ``int`` (but not ``bool``), integral ``float``,
    numeric strings (decimal, or ``0x``/``0o``/``0b`` prefixed), and objects
    exposing ``to_int()`` / ``to_bigint()`` / ``toBigInt()`` or ``__index__``.
    No modular reduction is applied here.
    """

    if isinstance(value, bool):
        raise InvalidShardValueError(label, value, index)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise InvalidShardValueError(label, value, index)
    if isinstance(value, str):
        try:
            return _parse_numeric_string(value)
        except ValueError:
            raise InvalidShardValueError(label, value, index) from None
    if value is None:
        raise InvalidShardValueError(label, value, index)

    for method_name in _CONVERSION_METHODS:
        method = getattr(value, method_name, None)
        if callable(method):
            converted = method()
            if isinstance(converted, int) and not isinstance(converted, bool):
                return int(converted)
            raise InvalidShardValueError(label, value, index)

    try:
        return operator.index(value)
    except TypeError:
        raise InvalidShardValueError(label, value, index) from None


def _component(shard: Any, name: str) -> Any:
    if isinstance(shard, Mapping):
        if name in shard:
            return shard[name]
        return shard.get(f"shard_{name}", _MISSING)
    return getattr(shard, name, _MISSING)


def coerce_point(shard: Any, index: Optional[int] = None) -> ShardPoint:
    """Accept a ShardPoint, an ``(x, y)`` pair, a mapping or an object with ``x``/``y``."""

    if isinstance(shard, ShardPoint):
        return shard
    if isinstance(shard, (tuple, list)):
        if len(shard) != 2:
            raise InvalidShardValueError("shard", shard, index)
        return ShardPoint(x=shard[0], y=shard[1])

    x = _component(shard, "x")
    y = _component(shard, "y")
    if x is _MISSING:
        raise InvalidShardValueError("x", None, index)
    if y is _MISSING:
        raise InvalidShardValueError("y", None, index)
    return ShardPoint(x=x, y=y)


__all__ = ["coerce_point", "to_field_int"]
