"""Volume size parsing."""

from __future__ import annotations

import re
from collections.abc import Mapping

from .errors import SizeParseError

__all__ = [
    "SIZE_KEY",
    "convert_size_to_bytes",
    "parse_volume_size",
]

SIZE_KEY = "size"

_SIZE_RE = re.compile(r"^\s*([0-9]{1,30})(?:\.([0-9]{1,30}))?\s*([a-zA-Z]*)\s*$")

# Single-letter suffixes are binary, as the Docker plugin has always read them.
_UNITS: dict[str, int] = {"": 1, "b": 1}
for _power, _prefix in enumerate("kmgtpe", start=1):
    _UNITS[_prefix] = 1024 ** _power
    _UNITS[f"{_prefix}i"] = 1024 ** _power
    _UNITS[f"{_prefix}ib"] = 1024 ** _power
    _UNITS[f"{_prefix}b"] = 1000 ** _power


def convert_size_to_bytes(size: str) -> int:
    """Convert a size such as ``"10g"``, ``"512MiB"`` or ``"1048576"`` to bytes."""
    match = _SIZE_RE.match(size)
    if match is None:
        raise SizeParseError(f"invalid size value {size!r}")
    whole, fraction, suffix = match.groups()
    multiplier = _UNITS.get(suffix.lower())
    if multiplier is None:
        raise SizeParseError(f"invalid size unit {suffix!r} in {size!r}")
    size_bytes = int(whole) * multiplier
    if fraction:
        # truncate to whole bytes without going through float
        size_bytes += int(fraction) * multiplier // 10 ** len(fraction)
    return size_bytes


def parse_volume_size(options: Mapping[str, str], default_size: str) -> int:
    """Return the requested volume size in bytes, falling back to *default_size*."""
    size = options.get(SIZE_KEY) or default_size
    return convert_size_to_bytes(size)
