"""Locate shares that disagree with the consensus polynomial."""
from __future__ import annotations

import logging
from typing import List, Sequence

from .combinations import Combination
from .interpolation import Point, evaluate
from .rational import Rational

logger = logging.getLogger(__name__)


def find_wrong(points: Sequence[Point], witness: Combination) -> List[int]:
    """Return the x of every point off the polynomial fitted through *witness*.

    The witness subset is trusted as-is. Results follow the order of
    *points*.
    """

    basis = [points[i] for i in witness]
    wrong: List[int] = []
    for point in points:
        expected = evaluate(basis, point.x)
        if not expected.equals(Rational(point.y)):
            logger.debug("share %d disagrees with the witness polynomial", point.x)
            wrong.append(point.x)
    return wrong


__all__ = ["find_wrong"]
