"""Core logic for trident-autoclass."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Mapping
from typing import Optional

from .attributes import parse_attribute_request
from .config import get_settings
from .errors import (
    AttributeParseError,
    HashError,
    RegistrationError,
    SizeParseError,
    VolumeConfigError,
)
from .models import MODE_ANY, PROTOCOL_ANY, StorageClassConfig, VolumeConfig
from .options import claim_options, get_option
from .registry import Orchestrator
from .sizes import SIZE_KEY, parse_volume_size

__all__ = [
    "POOL_OPTION",
    "StorageClassResolver",
    "VolumeConfigBuilder",
    "prepare_volume",
    "structural_hash",
]

logger = logging.getLogger(__name__)

POOL_OPTION = "aggregate|pool"

# VolumeConfig field -> accepted option key(s)
_VOLUME_FIELDS: dict[str, str] = {
    "space_reserve": "spaceReserve",
    "security_style": "securityStyle",
    "split_on_clone": "splitOnClone",
    "snapshot_policy": "snapshotPolicy",
    "export_policy": "exportPolicy",
    "snapshot_dir": "snapshotDir",
    "unix_permissions": "unixPermissions",
    "block_size": "blocksize",
    "file_system": "fstype|fileSystemType",
    "encryption": "encryption",
    "clone_source_volume": "from",
    "clone_source_snapshot": "fromSnapshot",
}


def structural_hash(config: StorageClassConfig) -> str:
    """
    Return the SHA-256 hex digest of the pools and attributes of *config*.

    Keys are sorted before hashing, so map ordering never changes the
    result.  The name is left out: it is derived from this digest.
    """
    content = config.model_dump(mode="json", include={"pools", "attributes"})
    try:
        canonical = json.dumps(content, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise HashError(f"could not serialize storage class: {exc}") from exc
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class StorageClassResolver:
    """
    Maps volume creation options onto a storage class.

    Equivalent options always produce the same storage class name, which
    embeds a hash of the class content.  A class is registered with the
    orchestrator the first time it is seen and reused afterwards.
    """

    def __init__(
        self, orchestrator: Orchestrator, prefix: Optional[str] = None
    ) -> None:
        self.orchestrator = orchestrator
        self.prefix = (
            prefix if prefix is not None else get_settings().auto_storage_class_prefix
        )

    def resolve(self, options: Mapping[str, str]) -> StorageClassConfig:
        """
        Return the orchestrator's storage class for *options*.

        An existing class with the derived name is returned as stored by
        the orchestrator; otherwise the new class is registered.
        """
        config = self.build(options)

        existing = self.orchestrator.get_storage_class(config.name)
        if existing is not None:
            logger.debug("Matched existing storage class %s", existing.config.name)
            return existing.config

        try:
            added = self.orchestrator.add_storage_class(config)
        except RegistrationError as exc:
            logger.error("Couldn't add storage class %s: %s", config.name, exc)
            raise
        return added.config

    def build(self, options: Mapping[str, str]) -> StorageClassConfig:
        """Build a new, named storage class from *options*."""
        config = StorageClassConfig()

        required_pool = get_option(options, POOL_OPTION)
        if required_pool:
            config.pools = self._find_pool(required_pool)

        for key, value in options.items():
            try:
                config.attributes[key] = parse_attribute_request(key, value)
            except AttributeParseError as exc:
                logger.debug("Ignoring storage class attribute: %s", exc)

        try:
            digest = structural_hash(config)
        except HashError:
            logger.error(
                "Couldn't hash the storage class attributes %s", dict(options)
            )
            raise
        config.name = f"{self.prefix}{digest}"
        return config

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _find_pool(self, pool_name: str) -> dict[str, list[str]]:
        """Return ``{backend: [pool_name]}`` for the first backend with that pool."""
        for backend in self.orchestrator.list_backends():
            for name in backend.storage:
                if name == pool_name:
                    return {backend.name: [name]}
        logger.debug("No backend has pool %s; not pinning storage class", pool_name)
        return {}


class VolumeConfigBuilder:
    """Maps volume creation options onto a VolumeConfig."""

    def __init__(self, default_size: Optional[str] = None) -> None:
        self.default_size = (
            default_size if default_size is not None else get_settings().default_volume_size
        )

    def build_volume_config(
        self, name: str, storage_class: str, options: Mapping[str, str]
    ) -> tuple[VolumeConfig, dict[str, str]]:
        """
        Build the VolumeConfig for volume *name* in *storage_class*.

        Returns the config and the options left after the size option has
        been claimed.  *options* itself is not modified.
        """
        try:
            size_bytes = parse_volume_size(options, self.default_size)
        except SizeParseError as exc:
            raise VolumeConfigError(f"Error creating volume {name!r}: {exc}") from exc
        _, remaining = claim_options(options, SIZE_KEY)

        fields = {
            field: get_option(remaining, keys)
            for field, keys in _VOLUME_FIELDS.items()
        }
        volume = VolumeConfig(
            name=name,
            size=str(size_bytes),
            storage_class=storage_class,
            protocol=PROTOCOL_ANY,
            access_mode=MODE_ANY,
            **fields,
        )
        return volume, remaining


def prepare_volume(
    name: str,
    options: Mapping[str, str],
    orchestrator: Orchestrator,
    prefix: Optional[str] = None,
    default_size: Optional[str] = None,
) -> tuple[StorageClassConfig, VolumeConfig]:
    """Resolve the storage class for a creation request and build its VolumeConfig."""
    _, class_options = claim_options(options, SIZE_KEY)
    storage_class = StorageClassResolver(orchestrator, prefix).resolve(class_options)
    volume, _ = VolumeConfigBuilder(default_size).build_volume_config(
        name, storage_class.name, options
    )
    return storage_class, volume
