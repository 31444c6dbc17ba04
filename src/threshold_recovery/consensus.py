"""Majority vote over every k-subset of shares.

Each subset of ``k`` shares is interpolated at ``x = 0``. Subsets that
contain a repeated x or that produce a non-integral value abstain. The
integer produced by the most subsets wins; when several candidates reach
the same count the one seen first in lexicographic subset order is kept.
"""
from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .combinations import Combination, combinations
from .errors import NoValidSecret
from .interpolation import Point, try_evaluate

logger = logging.getLogger(__name__)


@dataclass
class CandidateTally:
    """Votes collected by one candidate secret."""

    count: int = 0
    witnesses: List[Combination] = field(default_factory=list)

    def record(self, combo: Combination) -> None:
        self.count += 1
        self.witnesses.append(combo)


@dataclass(frozen=True)
class Consensus:
    secret: int
    witness: Combination
    votes: int
    candidates: int


def _vote(points: Sequence[Point], combo: Combination) -> Tuple[Combination, Optional[int]]:
    value = try_evaluate([points[i] for i in combo], 0)
    if value is None:
        logger.debug("combination %s abstains: repeated x", combo)
        return combo, None
    if not value.is_integer():
        logger.debug("combination %s abstains: non-integer value", combo)
        return combo, None
    return combo, value.integer_value()


def _votes(
    points: Sequence[Point],
    k: int,
    executor: Optional[ProcessPoolExecutor],
    chunk_size: int,
) -> Iterable[Tuple[Combination, Optional[int]]]:
    combos = combinations(len(points), k)
    if executor is None:
        return (_vote(points, combo) for combo in combos)
    # map() yields in submission order, so merging stays lexicographic.
    return executor.map(partial(_vote, points), combos, chunksize=chunk_size)


def _merge(votes: Iterable[Tuple[Combination, Optional[int]]]) -> Dict[int, CandidateTally]:
    tally: Dict[int, CandidateTally] = {}
    for combo, candidate in votes:
        if candidate is None:
            continue
        tally.setdefault(candidate, CandidateTally()).record(combo)
    return tally


def tally_candidates(
    points: Sequence[Point],
    k: int,
    *,
    workers: int = 1,
    chunk_size: int = 64,
) -> Dict[int, CandidateTally]:
    """Return the candidate tally, keyed by secret in first-seen order."""

    points = list(points)
    if workers <= 1:
        return _merge(_votes(points, k, None, chunk_size))
    with ProcessPoolExecutor(max_workers=workers) as executor:
        return _merge(_votes(points, k, executor, chunk_size))


def select(tally: Dict[int, CandidateTally]) -> Consensus:
    """Pick the candidate with the strictly greatest count."""

    if not tally:
        raise NoValidSecret("No valid secret found")
    entries = iter(tally.items())
    best, first = next(entries)
    best_count = first.count
    for candidate, entry in entries:
        if entry.count > best_count:
            best = candidate
            best_count = entry.count
    rivals = sum(1 for entry in tally.values() if entry.count == best_count) - 1
    if rivals:
        logger.warning(
            "consensus tie: %d other candidate(s) also reached %d vote(s); keeping the first seen",
            rivals,
            best_count,
        )
    return Consensus(
        secret=best,
        witness=tally[best].witnesses[0],
        votes=best_count,
        candidates=len(tally),
    )


def find_consensus(
    points: Sequence[Point],
    k: int,
    *,
    workers: int = 1,
    chunk_size: int = 64,
) -> Consensus:
    """Return the majority secret and the first subset that produced it."""

    tally = tally_candidates(points, k, workers=workers, chunk_size=chunk_size)
    consensus = select(tally)
    logger.info(
        "selected candidate with %d vote(s) out of %d distinct candidate(s)",
        consensus.votes,
        consensus.candidates,
    )
    return consensus


__all__ = ["CandidateTally", "Consensus", "tally_candidates", "select", "find_consensus"]
