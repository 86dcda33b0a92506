"""Exception hierarchy for trident-autoclass."""

from __future__ import annotations

__all__ = [
    "AutoClassError",
    "OptionError",
    "AttributeParseError",
    "SizeParseError",
    "HashError",
    "RegistrationError",
    "VolumeConfigError",
]


class AutoClassError(Exception):
    """Base class for all trident-autoclass errors."""


class OptionError(AutoClassError, ValueError):
    """A raw option could not be split into a key/value pair."""


class AttributeParseError(AutoClassError, ValueError):
    """An option value is not a valid ``type:value`` attribute request."""


class SizeParseError(AutoClassError, ValueError):
    """A volume size string could not be converted to bytes."""


class HashError(AutoClassError):
    """The structural hash of a storage class could not be computed."""


class RegistrationError(AutoClassError):
    """The orchestrator rejected a new storage class."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"could not add storage class {name!r}: {reason}")
        self.name = name
        self.reason = reason


class VolumeConfigError(AutoClassError):
    """A volume config could not be built from the request options."""
