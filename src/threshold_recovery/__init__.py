"""Threshold secret reconstruction with corrupted-share detection.

Every ``k``-subset of ``n`` shares is interpolated exactly at zero, the
most frequent integer result is taken as the secret, and shares that do
not lie on the winning polynomial are reported.
"""

from __future__ import annotations

from .errors import (
    CombinationLimitExceeded,
    InvalidContainer,
    InvalidDigit,
    InvalidFraction,
    InvalidRadix,
    NotAnInteger,
    NoValidSecret,
    RecoveryError,
    ShareCountMismatch,
)
from .interpolation import Point
from .rational import Rational
from .recovery import ReconstructionResult, reconstruct
from .shares import Share, ShareSet, load_container, parse_container

__version__ = "0.1.0"

__all__ = [
    "reconstruct",
    "ReconstructionResult",
    "parse_container",
    "load_container",
    "Share",
    "ShareSet",
    "Point",
    "Rational",
    "RecoveryError",
    "InvalidFraction",
    "NotAnInteger",
    "InvalidRadix",
    "InvalidDigit",
    "InvalidContainer",
    "ShareCountMismatch",
    "NoValidSecret",
    "CombinationLimitExceeded",
]
