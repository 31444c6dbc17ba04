"""Lexicographic enumeration of share index subsets."""
from __future__ import annotations

import itertools
from math import comb
from typing import Iterator, Tuple

Combination = Tuple[int, ...]


def combinations(n: int, k: int) -> Iterator[Combination]:
    """Yield every strictly increasing *k*-tuple drawn from ``range(n)``.

    Tuples come out in lexicographic order, so ``(0, 1, ..., k - 1)`` is
    first. Each call returns a fresh generator. Nothing is yielded when
    ``k > n``; a single empty tuple is yielded for ``k == 0``.
    """

    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    return itertools.combinations(range(n), k)


def count_combinations(n: int, k: int) -> int:
    """Return C(n, k) without enumerating."""

    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    return comb(n, k)


__all__ = ["Combination", "combinations", "count_combinations"]
