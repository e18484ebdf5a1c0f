"""Arithmetic over the finite field GF(2^8).

Elements are plain ints in ``[0, 255]`` using the polynomial basis with the
AES reduction polynomial x^8 + x^4 + x^3 + x + 1 (``0x11B``).

``add``
    Field addition (and subtraction), which is bitwise XOR.

``mult``
    Carry-less multiplication reduced modulo ``0x11B``.

``inverse``
    Multiplicative inverse of a nonzero element.

``div``
    Division by a nonzero element.
"""

from __future__ import annotations

FieldElement = int

_REDUCTION = 0x1B  # low byte of 0x11B


def add(a: FieldElement, b: FieldElement) -> FieldElement:
    """Add two field elements."""
    return a ^ b


def mult(a: FieldElement, b: FieldElement) -> FieldElement:
    """Multiply two field elements using the Russian peasant algorithm."""
    result = 0
    for _ in range(8):
        if b & 1:
            result ^= a
        if a & 0x80:
            a = ((a << 1) & 0xFF) ^ _REDUCTION
        else:
            a <<= 1
        b >>= 1
    return result


def inverse(a: FieldElement) -> FieldElement:
    """Return ``a ** 254``, the multiplicative inverse of ``a``.

    The multiplicative group has order 255, so a^254 * a == 1. The exponent
    is reached through a fixed chain of squarings and multiplications.
    """
    if a == 0:
        raise ZeroDivisionError("zero has no multiplicative inverse")
    b = mult(a, a)  # a^2
    c = mult(a, b)  # a^3
    b = mult(c, c)  # a^6
    b = mult(b, b)  # a^12
    c = mult(b, c)  # a^15
    b = mult(b, b)  # a^24
    b = mult(b, b)  # a^48
    b = mult(b, c)  # a^63
    b = mult(b, b)  # a^126
    b = mult(a, b)  # a^127
    return mult(b, b)


def div(a: FieldElement, b: FieldElement) -> FieldElement:
    """Divide ``a`` by ``b``."""
    if b == 0:
        raise ZeroDivisionError("divide by zero")
    if a == 0:
        return 0
    return mult(a, inverse(b))


__all__ = ["FieldElement", "add", "mult", "inverse", "div"]
