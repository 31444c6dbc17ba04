"""Share containers: validation, decoding and loading from disk.

A container is a mapping shaped like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

where every key other than ``keys`` is the decimal x-index of a share.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Tuple

import yaml

from .errors import InvalidContainer, ShareCountMismatch
from .interpolation import Point
from .radix import decode

KEYS_ENTRY = "keys"
INTEGER = re.compile(r"[+-]?[0-9]+")
INDEX = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Share:
    x: int
    y: int
    base: int
    raw: str

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class ShareSet:
    """Decoded shares ordered by ascending x, plus the threshold."""

    n: int
    k: int
    shares: Tuple[Share, ...]

    @property
    def points(self) -> List[Point]:
        return [share.point for share in self.shares]


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise InvalidContainer(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER.fullmatch(value.strip()):
        return int(value)
    raise InvalidContainer(f"{what} must be an integer, got {value!r}")


def _share_x(key: Any) -> int:
    text = str(key)
    if not INDEX.fullmatch(text):
        raise InvalidContainer(f"Share key {key!r} is not a decimal index")
    return int(text)


def parse_container(container: Mapping[str, Any]) -> ShareSet:
    """Validate *container* and decode every share.

    The share count is checked against ``keys.n`` before any value is
    decoded.
    """

    if not isinstance(container, Mapping):
        raise InvalidContainer("Share container must be a mapping")
    keys = container.get(KEYS_ENTRY)
    if not isinstance(keys, Mapping) or "n" not in keys or "k" not in keys:
        raise InvalidContainer("Share container needs a 'keys' entry with 'n' and 'k'")
    n = _as_int(keys["n"], "keys.n")
    k = _as_int(keys["k"], "keys.k")
    if k < 1:
        raise InvalidContainer(f"keys.k must be at least 1, got {k}")

    entries = [(key, value) for key, value in container.items() if key != KEYS_ENTRY]
    if len(entries) != n:
        raise ShareCountMismatch(n, len(entries))

    shares: List[Share] = []
    for key, entry in entries:
        x = _share_x(key)
        if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
            raise InvalidContainer(f"Share {key!r} needs 'base' and 'value'")
        base = _as_int(entry["base"], f"share {key!r} base")
        raw = str(entry["value"])
        shares.append(Share(x=x, y=decode(raw, base), base=base, raw=raw))
    shares.sort(key=lambda share: share.x)
    return ShareSet(n=n, k=k, shares=tuple(shares))


def load_container(path: str | Path) -> Mapping[str, Any]:
    """Read a container from JSON, or YAML for ``.yaml``/``.yml`` files."""

    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if not isinstance(data, Mapping):
        raise InvalidContainer(f"{path} does not contain a mapping")
    return data


__all__ = ["Share", "ShareSet", "parse_container", "load_container", "KEYS_ENTRY"]
