"""Parsing of ``type:value`` attribute requests."""

from __future__ import annotations

import re
from typing import Union

from .errors import AttributeParseError
from .models import AttributeRequest

__all__ = ["parse_attribute_request"]

_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})
_INT_RE = re.compile(r"^\s*[+-]?[0-9]{1,30}\s*\Z")


def _to_int(raw: str) -> int:
    if _INT_RE.match(raw) is None:
        raise AttributeParseError(f"invalid int value {raw!r}")
    return int(raw.strip())


def _to_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise AttributeParseError(f"invalid bool value {raw!r}")


def parse_attribute_request(key: str, value: str) -> AttributeRequest:
    """
    Parse an option such as ``minIOPS: "int:500"`` into an AttributeRequest.

    Raises ``AttributeParseError`` when the type tag is missing or unknown,
    or when the value does not convert to that type.
    """
    type_tag, sep, raw = value.partition(":")
    if not sep:
        raise AttributeParseError(
            f"attribute {key!r} has no type tag: {value!r}"
        )
    type_tag = type_tag.strip().lower()

    parsed: Union[bool, int, str]
    if type_tag == "int":
        parsed = _to_int(raw)
    elif type_tag == "bool":
        parsed = _to_bool(raw)
    elif type_tag == "string":
        parsed = raw
    else:
        raise AttributeParseError(
            f"attribute {key!r} has unknown type {type_tag!r}"
        )
    return AttributeRequest(name=key, type=type_tag, value=parsed)
