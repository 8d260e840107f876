"""Exception hierarchy for shard reconstruction."""
from __future__ import annotations

from typing import Any, Optional


class ShamirError(Exception):
    """Base exception for shamir_disclosure"""


class InvalidParameterError(ShamirError, ValueError):
    """Raised when recipient or threshold amounts are not usable"""


class InsufficientSharesError(ShamirError, ValueError):
    """Raised when fewer shards than the threshold are supplied"""


class InvalidShardValueError(ShamirError, ValueError):
    """Raised when a shard coordinate cannot be read as a field element"""

    def __init__(self, label: str, raw: Any, index: Optional[int] = None) -> None:
        super().__init__(f"Invalid {label} value: {raw}")
        self.label = label
        self.raw = raw
        self.index = index


class OutOfRangeError(ShamirError, ValueError):
    """Raised when a shard x-coordinate is outside ``1..recipient_amount``"""


class DuplicateShardError(ShamirError, ValueError):
    """Raised when two selected shards share an x-coordinate"""


class NoModularInverseError(ShamirError, ArithmeticError):
    """Raised when an interpolation denominator is not invertible"""


class ShardDocumentError(ShamirError, ValueError):
    """Raised when a shard document is missing, unparsable or inconsistent"""


__all__ = [
    "DuplicateShardError",
    "InsufficientSharesError",
    "InvalidParameterError",
    "InvalidShardValueError",
    "NoModularInverseError",
    "OutOfRangeError",
    "ShamirError",
    "ShardDocumentError",
]
