"""
Configuration contracts for the correlation models.

Provides immutable configuration dataclasses:
- ParameterRange: Interval a single correlation parameter must fall in
- CorrelationParameterBounds: Validation ranges for (a, alpha, beta, tau)

Factory methods .enforced() and .documented() make the choice of range
for the scale factor A explicit. The library has always validated A
against [0, 1] while describing it as [-1, 1]; .enforced() is the default.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterRange:
    """
    Interval of accepted values for one correlation parameter.

    NaN never falls inside a range.
    """

    lower: float
    upper: float = math.inf
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    def contains(self, value: float) -> bool:
        """Check whether value lies within the range."""
        above = value >= self.lower if self.lower_inclusive else value > self.lower
        below = value <= self.upper if self.upper_inclusive else value < self.upper
        return above and below

    def describe(self) -> str:
        """Interval notation, e.g. '[0, 1]' or '(0, inf)'."""
        left = "[" if self.lower_inclusive else "("
        right = "]" if self.upper_inclusive and not math.isinf(self.upper) else ")"
        return f"{left}{self.lower:g}, {self.upper:g}{right}"


@dataclass(frozen=True)
class CorrelationParameterBounds:
    """
    Validation ranges for the four-parameter correlation function.

    Ranges:
        a: Overall scale factor, [0, 1] as enforced
        alpha: Long-lag correlation fraction, [0, 1]
        beta: Shape of the decay, [0, 10]
        tau: Time-decay constant, strictly positive
    """

    a: ParameterRange = ParameterRange(0.0, 1.0)
    alpha: ParameterRange = ParameterRange(0.0, 1.0)
    beta: ParameterRange = ParameterRange(0.0, 10.0)
    tau: ParameterRange = ParameterRange(0.0, lower_inclusive=False)

    def ranges(self) -> Iterator[tuple[str, ParameterRange]]:
        """Yield (name, range) pairs in validation order."""
        yield "a", self.a
        yield "alpha", self.alpha
        yield "beta", self.beta
        yield "tau", self.tau

    @classmethod
    def enforced(cls) -> CorrelationParameterBounds:
        """Ranges the library validates against: A in [0, 1]."""
        return cls()

    @classmethod
    def documented(cls) -> CorrelationParameterBounds:
        """Ranges as described in the model documentation: A in [-1, 1]."""
        return cls(a=ParameterRange(-1.0, 1.0))
