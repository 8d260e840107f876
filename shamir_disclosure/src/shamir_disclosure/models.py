"""Shared value types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ShardPoint:
    """One ``(x, y)`` point on the sharing polynomial.

    ``x`` is the recipient index and ``y`` the shard value. Both are kept in
    whatever representation the caller supplied; normalisation happens when
    the point is used for reconstruction.
    """

    x: Any
    y: Any
