"""Arithmetic over the BN254 scalar field.

Shards emitted by the disclosure contracts live in the scalar field of the
BN254 curve used by the proving system, so reconstruction must use the exact
same modulus. The value is fixed here and never taken as a parameter.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from .errors import NoModularInverseError

# BN254 scalar field prime
PRIME = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001


def mod(value: int, prime: int = PRIME) -> int:
    """Reduce ``value`` into ``[0, prime)``."""
    result = value % prime
    return result if result >= 0 else result + prime


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``a*s + b*t == g == gcd(a, b)``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


def mod_inverse(value: int, prime: int = PRIME) -> int:
    gcd, s, _ = extended_gcd(mod(value, prime), prime)
    if gcd != 1:
        raise NoModularInverseError(
            "Shard coordinates are invalid: denominator has no modular inverse."
        )
    return mod(s, prime)


def lagrange_basis_at_zero(xs: Sequence[int], i: int, prime: int = PRIME) -> int:
    """Value at ``x = 0`` of the Lagrange basis polynomial for ``xs[i]``."""
    xi = xs[i]
    numerator = 1
    denominator = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        numerator = mod(numerator * -xj, prime)
        denominator = mod(denominator * (xi - xj), prime)
    return mod(numerator * mod_inverse(denominator, prime), prime)


def interpolate_at_zero(xs: Sequence[int], ys: Sequence[int], prime: int = PRIME) -> int:
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    total = 0
    for i, yi in enumerate(ys):
        total = mod(total + yi * lagrange_basis_at_zero(xs, i, prime), prime)
    return total


__all__ = [
    "PRIME",
    "extended_gcd",
    "interpolate_at_zero",
    "lagrange_basis_at_zero",
    "mod",
    "mod_inverse",
]
