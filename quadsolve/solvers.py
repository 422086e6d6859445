"""Linear and quadratic equation solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

EPSILON = 1e-12
"""Values with a magnitude below this are treated as rounding noise."""


class RootsCount(IntEnum):
    """How many roots an equation has."""

    NO_ROOTS = 0
    ONE_ROOT = 1
    TWO_ROOTS = 2
    INF_ROOTS = -1


@dataclass(frozen=True)
class Solution:
    """Result of solving an equation.

    ``x1`` and ``x2`` keep their default of zero when the solver does not
    set them (no roots, infinitely many roots, or the second root of a
    linear equation).
    """

    count: RootsCount
    x1: float = 0.0
    x2: float = 0.0

    @property
    def roots(self) -> tuple[float, ...]:
        """The distinct roots found, in solver order."""
        if self.count is RootsCount.ONE_ROOT:
            return (self.x1,)
        if self.count is RootsCount.TWO_ROOTS:
            return (self.x1, self.x2)
        return ()


def _require_finite(*values: float) -> None:
    for value in values:
        if not math.isfinite(value):
            raise ValueError(f"coefficient must be finite, got {value!r}")


def close_to_zero(num: float) -> bool:
    """Return True if ``num`` is smaller in magnitude than EPSILON."""
    if not math.isfinite(num):
        raise ValueError(f"value must be finite, got {num!r}")
    return abs(num) < EPSILON


def polish_output(num: float) -> float:
    """Round negligibly small values to zero for display."""
    return 0.0 if close_to_zero(num) else num


def solve_linear(a: float, b: float) -> Solution:
    """Solve ``a*x + b = 0``."""
    _require_finite(a, b)
    if close_to_zero(a):
        if close_to_zero(b):
            return Solution(RootsCount.INF_ROOTS)
        return Solution(RootsCount.NO_ROOTS)
    return Solution(RootsCount.ONE_ROOT, x1=-b / a)


def _solve_proper_quadratic(a: float, b: float, c: float) -> Solution:
    _require_finite(a, b, c)
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return Solution(RootsCount.NO_ROOTS)
    root_of_d = math.sqrt(discriminant)
    x1 = (-b - root_of_d) / (2 * a)
    x2 = (-b + root_of_d) / (2 * a)
    if close_to_zero(discriminant):
        return Solution(RootsCount.ONE_ROOT, x1=x1, x2=x2)
    return Solution(RootsCount.TWO_ROOTS, x1=x1, x2=x2)


def solve_quadratic(a: float, b: float, c: float) -> Solution:
    """Solve ``a*x**2 + b*x + c = 0``, falling back to linear when a is ~0."""
    if close_to_zero(a):
        return solve_linear(b, c)
    return _solve_proper_quadratic(a, b, c)