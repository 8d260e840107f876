"""Shamir secret reconstruction for disclosure shards."""
from .errors import (
    DuplicateShardError,
    InsufficientSharesError,
    InvalidParameterError,
    InvalidShardValueError,
    NoModularInverseError,
    OutOfRangeError,
    ShamirError,
    ShardDocumentError,
)
from .field import PRIME
from .models import ShardPoint
from .reconstruct import ShamirReconstructor, reconstruct_secret
from .version import __version__

__all__ = [
    "DuplicateShardError",
    "InsufficientSharesError",
    "InvalidParameterError",
    "InvalidShardValueError",
    "NoModularInverseError",
    "OutOfRangeError",
    "PRIME",
    "ShamirError",
    "ShamirReconstructor",
    "ShardDocumentError",
    "ShardPoint",
    "__version__",
    "reconstruct_secret",
]
