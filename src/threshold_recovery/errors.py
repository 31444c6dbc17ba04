"""Exception hierarchy for secret reconstruction."""
from __future__ import annotations


class RecoveryError(Exception):
    """Base class for every error raised by :mod:`threshold_recovery`."""


class InvalidFraction(RecoveryError, ZeroDivisionError):
    """Raised when a rational number is built with a zero denominator."""


class NotAnInteger(RecoveryError, ValueError):
    """Raised when the integer value of a non-integral rational is requested."""


class InvalidRadix(RecoveryError, ValueError):
    """Raised when a radix outside ``[2, 36]`` is requested."""


class InvalidDigit(RecoveryError, ValueError):
    """Raised when a digit string contains a character invalid for its radix."""

    def __init__(self, char: str, position: int, radix: int) -> None:
        self.char = char
        self.position = position
        self.radix = radix
        super().__init__(f"Invalid digit {char!r} at position {position} for base {radix}")


class InvalidContainer(RecoveryError, ValueError):
    """Raised when a share container does not have the expected shape."""


class ShareCountMismatch(RecoveryError):
    """Raised when the declared share count differs from the supplied shares."""

    def __init__(self, declared: int, supplied: int) -> None:
        self.declared = declared
        self.supplied = supplied
        super().__init__(f"Number of shares does not match n: declared {declared}, supplied {supplied}")


class NoValidSecret(RecoveryError):
    """Raised when no combination of shares yields an integer secret."""


class CombinationLimitExceeded(RecoveryError):
    """Raised when C(n, k) is larger than the configured limit."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"{count} combinations exceed the configured limit of {limit}")


__all__ = [
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
