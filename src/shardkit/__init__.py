"""Shamir's Secret Sharing over GF(2^8) for files and byte strings."""

from __future__ import annotations

from shardkit.errors import (
    DuplicateShareCoordinateError,
    EmptySecretError,
    MalformedSharesError,
    PartsBelowThresholdError,
    PartsOutOfRangeError,
    ShamirError,
    ThresholdOutOfRangeError,
    ThresholdTooLowError,
    TooFewSharesError,
)
from shardkit.shamir import combine, share_coordinate, split

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "combine",
    "share_coordinate",
    "split",
    "DuplicateShareCoordinateError",
    "EmptySecretError",
    "MalformedSharesError",
    "PartsBelowThresholdError",
    "PartsOutOfRangeError",
    "ShamirError",
    "ThresholdOutOfRangeError",
    "ThresholdTooLowError",
    "TooFewSharesError",
]
