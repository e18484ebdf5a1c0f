"""Random polynomials over GF(2^8) with a fixed intercept."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, TypeVar

from shardkit.gf256 import FieldElement, add, mult

_T = TypeVar("_T")


class RandomSource(Protocol):
    """The subset of :class:`random.Random` used to build shares.

    Production code passes :class:`secrets.SystemRandom`; anything weaker
    makes the shares predictable.
    """

    def randrange(self, stop: int) -> int: ...

    def sample(self, population: Sequence[_T], k: int) -> list[_T]: ...


@dataclass(frozen=True)
class Polynomial:
    """Coefficients of ``c0 + c1*x + ... + cd*x^d``; ``c0`` is the intercept."""

    coefficients: tuple[FieldElement, ...]

    @classmethod
    def random(cls, intercept: FieldElement, degree: int, rng: RandomSource) -> "Polynomial":
        """Build a polynomial of *degree* whose value at zero is *intercept*."""
        coefficients = [intercept]
        for _ in range(degree):
            coefficients.append(rng.randrange(256))
        return cls(tuple(coefficients))

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def evaluate(self, x: FieldElement) -> FieldElement:
        """Evaluate at *x* using Horner's method."""
        acc = 0
        for coefficient in reversed(self.coefficients):
            acc = add(mult(acc, x), coefficient)
        return acc


__all__ = ["Polynomial", "RandomSource"]
