"""Reconstruction entry point: decode, vote, then localize faults."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from .audit import AuditTrail, secret_digest
from .combinations import count_combinations
from .consensus import find_consensus
from .errors import CombinationLimitExceeded, RecoveryError
from .faults import find_wrong
from .policy import RecoveryPolicy
from .policy import policy as default_policy
from .shares import ShareSet, parse_container

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconstructionResult:
    secret: int
    wrong_shares: Tuple[int, ...]
    votes: int
    witness: Tuple[int, ...]


def _reconstruct(shares: ShareSet, policy: RecoveryPolicy) -> ReconstructionResult:
    if policy.max_combinations:
        total = count_combinations(shares.n, shares.k)
        if total > policy.max_combinations:
            raise CombinationLimitExceeded(total, policy.max_combinations)

    points = shares.points
    consensus = find_consensus(
        points,
        shares.k,
        workers=policy.workers,
        chunk_size=policy.chunk_size,
    )
    wrong = find_wrong(points, consensus.witness)
    logger.info("reconstructed secret from %d share(s); wrong shares: %s", shares.n, wrong)
    return ReconstructionResult(
        secret=consensus.secret,
        wrong_shares=tuple(wrong),
        votes=consensus.votes,
        witness=tuple(points[i].x for i in consensus.witness),
    )


def reconstruct(
    container: Union[Mapping[str, Any], ShareSet],
    *,
    policy: Optional[RecoveryPolicy] = None,
    audit: Optional[AuditTrail] = None,
) -> ReconstructionResult:
    """Recover the secret from *container* and report the shares that disagree.

    Errors tied to a single subset of shares never surface here; malformed
    containers, undecodable shares and the absence of any integer candidate
    raise a :class:`~threshold_recovery.errors.RecoveryError`.
    """

    policy = policy or default_policy
    try:
        shares = container if isinstance(container, ShareSet) else parse_container(container)
        result = _reconstruct(shares, policy)
    except RecoveryError as exc:
        if audit is not None:
            audit.record_event(
                "reconstruction.failed",
                details={"error": type(exc).__name__, "message": str(exc)},
            )
        raise
    if audit is not None:
        audit.record_event(
            "reconstruction.completed",
            details={
                "n": shares.n,
                "k": shares.k,
                "votes": result.votes,
                "wrong_shares": list(result.wrong_shares),
                "secret_sha3_256": secret_digest(result.secret),
            },
        )
    return result


__all__ = ["ReconstructionResult", "reconstruct"]
