"""Shamir's Secret Sharing over GF(2^8).

This module provides two main functions:

``split``
    Split a byte string into ``parts`` shares, any ``threshold`` of which
    reconstruct it. Every secret byte gets its own random polynomial.

``combine``
    Reconstruct the secret from shares produced by :func:`split` using
    Lagrange interpolation at x=0.

A share is ``len(secret) + 1`` bytes: the polynomial values followed by the
share's x-coordinate. The threshold is not recorded anywhere, so combining
too few shares silently yields garbage.
"""

from __future__ import annotations

import logging
import secrets
from typing import Sequence

from shardkit.errors import (
    DuplicateShareCoordinateError,
    EmptySecretError,
    MalformedSharesError,
    PartsBelowThresholdError,
    PartsOutOfRangeError,
    ThresholdOutOfRangeError,
    ThresholdTooLowError,
    TooFewSharesError,
)
from shardkit.gf256 import FieldElement, add, div, mult
from shardkit.polynomial import Polynomial, RandomSource

_MAX_PARTS = 255

_logger = logging.getLogger(__name__)


def interpolate_polynomial(
    x_samples: Sequence[FieldElement],
    y_samples: Sequence[FieldElement],
    x: FieldElement,
) -> FieldElement:
    """Evaluate at *x* the polynomial passing through the sample points."""
    result = 0
    for i, xi in enumerate(x_samples):
        basis = 1
        for j, xj in enumerate(x_samples):
            if i == j:
                continue
            basis = mult(basis, div(add(x, xj), add(xi, xj)))
        result = add(result, mult(y_samples[i], basis))
    return result


def share_coordinate(share: bytes) -> FieldElement:
    """Return the x-coordinate stored in the last byte of *share*."""
    return share[-1]


def split(
    secret: bytes,
    parts: int,
    threshold: int,
    *,
    rng: RandomSource | None = None,
) -> list[bytes]:
    """Split *secret* into *parts* shares with reconstruction *threshold*."""
    if parts < threshold:
        raise PartsBelowThresholdError("parts cannot be less than threshold")
    if parts > _MAX_PARTS:
        raise PartsOutOfRangeError("parts cannot exceed 255")
    if threshold < 2:
        raise ThresholdTooLowError("threshold must be at least 2")
    if threshold > _MAX_PARTS:
        raise ThresholdOutOfRangeError("threshold cannot exceed 255")
    if not secret:
        raise EmptySecretError("cannot split an empty secret")

    if rng is None:
        rng = secrets.SystemRandom()

    size = len(secret)
    x_coordinates = rng.sample(range(1, _MAX_PARTS + 1), parts)
    buffers = [bytearray(size + 1) for _ in x_coordinates]
    for buffer, x in zip(buffers, x_coordinates):
        buffer[size] = x

    for idx, value in enumerate(secret):
        polynomial = Polynomial.random(value, threshold - 1, rng)
        for buffer, x in zip(buffers, x_coordinates):
            buffer[idx] = polynomial.evaluate(x)

    _logger.debug("split %d secret bytes into %d shares (threshold %d)", size, parts, threshold)
    return [bytes(buffer) for buffer in buffers]


def combine(shares: Sequence[bytes]) -> bytes:
    """Reconstruct the secret from *shares*.

    Raises :class:`~shardkit.errors.ShamirError` subclasses for fewer than two
    shares, short or mismatched shares and repeated x-coordinates.
    """
    if len(shares) < 2:
        raise TooFewSharesError("less than two parts cannot be used to reconstruct the secret")

    share_len = len(shares[0])
    if share_len < 2 or any(len(share) != share_len for share in shares):
        raise MalformedSharesError("all parts must be at least two bytes and the same length")

    seen: set[int] = set()
    x_samples: list[FieldElement] = []
    for share in shares:
        x = share_coordinate(share)
        if x in seen:
            raise DuplicateShareCoordinateError("duplicate part detected")
        seen.add(x)
        x_samples.append(x)

    secret = bytearray(share_len - 1)
    for idx in range(len(secret)):
        y_samples = [share[idx] for share in shares]
        secret[idx] = interpolate_polynomial(x_samples, y_samples, 0)

    _logger.debug("combined %d shares into %d secret bytes", len(shares), len(secret))
    return bytes(secret)


__all__ = ["split", "combine", "interpolate_polynomial", "share_coordinate"]
