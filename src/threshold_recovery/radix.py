"""Digit strings in bases 2 to 36."""
from __future__ import annotations

from .errors import InvalidDigit, InvalidRadix

MIN_RADIX = 2
MAX_RADIX = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadix(f"Radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}")


def _digit_value(char: str) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    lowered = char.lower()
    if "a" <= lowered <= "z":
        return 10 + ord(lowered) - ord("a")
    return -1


def decode(digits: str, radix: int) -> int:
    """Decode *digits*, most significant first, as a non-negative integer.

    Letters are case-insensitive. Any character whose value is not in
    ``[0, radix)`` raises :class:`InvalidDigit`; there is no sign and no
    whitespace handling. An empty string decodes to ``0``.
    """

    _check_radix(radix)
    result = 0
    for position, char in enumerate(digits):
        value = _digit_value(char)
        if value < 0 or value >= radix:
            raise InvalidDigit(char, position, radix)
        result = result * radix + value
    return result


def encode(value: int, radix: int) -> str:
    """Inverse of :func:`decode` using lowercase digits."""

    _check_radix(radix)
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, radix)
        out.append(DIGITS[rem])
    return "".join(reversed(out))


__all__ = ["decode", "encode", "MIN_RADIX", "MAX_RADIX"]
