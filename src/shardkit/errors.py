"""Exceptions raised when split or combine inputs are rejected."""

from __future__ import annotations


class ShamirError(ValueError):
    """Base class for rejected split/combine parameters.

    ``kind`` names the failed precondition so callers can branch on it without
    matching message text.
    """

    kind = "ShamirError"


class PartsBelowThresholdError(ShamirError):
    kind = "PartsBelowThreshold"


class PartsOutOfRangeError(ShamirError):
    kind = "PartsOutOfRange"


class ThresholdTooLowError(ShamirError):
    kind = "ThresholdTooLow"


class ThresholdOutOfRangeError(ShamirError):
    kind = "ThresholdOutOfRange"


class EmptySecretError(ShamirError):
    kind = "EmptySecret"


class TooFewSharesError(ShamirError):
    kind = "TooFewShares"


class MalformedSharesError(ShamirError):
    """Shares are too short or do not all have the same length."""

    kind = "MalformedOrMismatchedShares"


class DuplicateShareCoordinateError(ShamirError):
    kind = "DuplicateShareCoordinate"


__all__ = [
    "ShamirError",
    "PartsBelowThresholdError",
    "PartsOutOfRangeError",
    "ThresholdTooLowError",
    "ThresholdOutOfRangeError",
    "EmptySecretError",
    "TooFewSharesError",
    "MalformedSharesError",
    "DuplicateShareCoordinateError",
]
