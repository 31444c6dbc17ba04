"""Runtime tunables for reconstruction.

Values come from environment variables so that batch jobs can adjust the
worker count or the combination limit without code changes. Unparseable
values fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds the knobs that bound the cost of a reconstruction."""

    workers: int = 1
    chunk_size: int = 64
    # 0 disables the limit.
    max_combinations: int = 0
    audit_dir: Optional[Path] = None
    log_level: str = "WARNING"


def load_policy() -> RecoveryPolicy:
    """Load the policy considering environment overrides."""

    return RecoveryPolicy(
        workers=max(1, _load_int("THRESHOLD_RECOVERY_WORKERS", 1)),
        chunk_size=max(1, _load_int("THRESHOLD_RECOVERY_CHUNK_SIZE", 64)),
        max_combinations=max(0, _load_int("THRESHOLD_RECOVERY_MAX_COMBINATIONS", 0)),
        audit_dir=_load_path("THRESHOLD_RECOVERY_AUDIT_DIR"),
        log_level=os.environ.get("THRESHOLD_RECOVERY_LOG_LEVEL", "WARNING").upper(),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
