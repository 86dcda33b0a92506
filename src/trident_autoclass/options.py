"""Helpers for reading raw volume-creation options."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .errors import OptionError

__all__ = [
    "get_option",
    "claim_options",
    "parse_option_pairs",
]


def get_option(options: Mapping[str, str], keys: str, default: str = "") -> str:
    """
    Return the value for *keys*, a ``|``-separated list of aliases.

    The combined key itself is tried first, then each alias in order.
    Only presence matters; an empty value is still returned as-is.
    """
    if keys in options:
        return options[keys]
    for key in keys.split("|"):
        if key in options:
            return options[key]
    return default


def claim_options(
    options: Mapping[str, str], *keys: str
) -> tuple[dict[str, str], dict[str, str]]:
    """Split *options* into (claimed, remaining) without touching the input."""
    claimed = {k: v for k, v in options.items() if k in keys}
    remaining = {k: v for k, v in options.items() if k not in keys}
    return claimed, remaining


def parse_option_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``key=value`` strings, as given on the command line."""
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise OptionError(f"expected key=value, got {pair!r}")
        options[key] = value
    return options
