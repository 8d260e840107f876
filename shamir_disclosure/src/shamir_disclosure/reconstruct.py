"""Shamir secret reconstruction over the BN254 scalar field.

Only the first ``threshold_amount`` shards are used, in the order supplied.
Anything after that is ignored without being parsed or validated.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Sequence

from .errors import (
    DuplicateShardError,
    InsufficientSharesError,
    InvalidParameterError,
    OutOfRangeError,
)
from .field import PRIME, interpolate_at_zero, mod
from .models import ShardPoint
from .shards import coerce_point, to_field_int

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .documents import ShardDocument


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _check_amounts(recipient_amount: Any, threshold_amount: Any) -> None:
    if not _is_positive_int(recipient_amount):
        raise InvalidParameterError("recipient_amount must be a positive integer.")
    if not _is_positive_int(threshold_amount):
        raise InvalidParameterError("threshold_amount must be a positive integer.")
    if threshold_amount > recipient_amount:
        raise InvalidParameterError("threshold_amount cannot exceed recipient_amount.")


def _select_points(
    recipient_amount: int, threshold_amount: int, shard_list: Sequence[Any]
) -> List[ShardPoint]:
    if len(shard_list) < threshold_amount:
        raise InsufficientSharesError("Not enough shards provided for threshold decryption.")

    seen_x: set[int] = set()
    points: List[ShardPoint] = []
    for index, shard in enumerate(shard_list[:threshold_amount]):
        point = coerce_point(shard, index)
        x = to_field_int(point.x, "x", index)
        y = mod(to_field_int(point.y, "y", index), PRIME)

        if x <= 0 or x > recipient_amount:
            raise OutOfRangeError(
                f"Shard x-coordinate {x} is outside expected recipient range 1..{recipient_amount}."
            )
        if x in seen_x:
            raise DuplicateShardError(f"Duplicate shard x-coordinate detected: {x}.")
        seen_x.add(x)
        points.append(ShardPoint(x=x, y=y))
    return points


def reconstruct_secret(
    recipient_amount: int, threshold_amount: int, shard_list: Sequence[Any]
) -> int:
    """Recover the secret (the polynomial's constant term) from shard points.

    Parameters
    ----------
    recipient_amount:
        Total number of recipients holding shards. Shard x-coordinates must
        fall within ``1..recipient_amount``.
    threshold_amount:
        Number of shards needed; exactly this many are taken from the front
        of ``shard_list``.
    shard_list:
        Ordered shard points. Each entry may be a :class:`ShardPoint`, an
        ``(x, y)`` pair, a mapping with ``x``/``y`` keys or an object with
        ``x``/``y`` attributes.

    Returns
    -------
    int
        The secret as a field element in ``[0, PRIME)``.
    """

    _check_amounts(recipient_amount, threshold_amount)
    points = _select_points(recipient_amount, threshold_amount, shard_list)
    xs = [point.x for point in points]
    ys = [point.y for point in points]
    return interpolate_at_zero(xs, ys, PRIME)


@dataclass(frozen=True)
class ShamirReconstructor:
    """Reconstruction bound to one disclosure's recipient and threshold amounts."""

    recipient_amount: int
    threshold_amount: int

    def __post_init__(self) -> None:
        _check_amounts(self.recipient_amount, self.threshold_amount)

    @classmethod
    def from_document(cls, document: "ShardDocument") -> "ShamirReconstructor":
        return cls(document.recipient_amount, document.threshold_amount)

    def select(self, shard_list: Sequence[Any]) -> List[ShardPoint]:
        """Return the normalised points that reconstruction would use."""
        return _select_points(self.recipient_amount, self.threshold_amount, shard_list)

    def reconstruct(self, shard_list: Sequence[Any]) -> int:
        return reconstruct_secret(self.recipient_amount, self.threshold_amount, shard_list)


__all__ = ["ShamirReconstructor", "reconstruct_secret"]
