"""Exact Lagrange interpolation."""
from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from .errors import InvalidFraction
from .rational import ZERO, Rational


class Point(NamedTuple):
    """Decoded share coordinates."""

    x: int
    y: int


def evaluate(points: Sequence[Point], at: int) -> Rational:
    """Evaluate the polynomial of degree ``len(points) - 1`` through *points* at *at*.

    Terms are built and summed in input order. Two points with the same x
    raise :class:`~threshold_recovery.errors.InvalidFraction`.
    """

    result = ZERO
    for i, (xi, yi) in enumerate(points):
        term = Rational(yi)
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            term = term.mul(Rational(at - xj, xi - xj))
        result = result.add(term)
    return result


def try_evaluate(points: Sequence[Point], at: int) -> Optional[Rational]:
    """Like :func:`evaluate` but return ``None`` when two points share an x."""

    try:
        return evaluate(points, at)
    except InvalidFraction:
        return None


__all__ = ["Point", "evaluate", "try_evaluate"]
