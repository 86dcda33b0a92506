"""Pydantic models for trident-autoclass."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, Union

from pydantic import BaseModel, Field

__all__ = [
    "PROTOCOL_ANY",
    "MODE_ANY",
    "AttributeRequest",
    "Backend",
    "StorageClass",
    "StorageClassConfig",
    "VolumeConfig",
]

PROTOCOL_ANY = "any"
MODE_ANY = "any"


class Backend(BaseModel):
    """A storage backend known to the orchestrator, with its pools."""

    name: str
    storage: dict[str, dict[str, Any]] = Field(default_factory=dict)  # pool name -> metadata


class AttributeRequest(BaseModel):
    """A typed constraint on a storage pool, e.g. ``IOPS >= 500``."""

    name: str
    type: Literal["int", "bool", "string"]
    value: Union[bool, int, str]


class StorageClassConfig(BaseModel):
    """
    A named bundle of placement and attribute constraints.

    ``name`` is derived from ``pools`` and ``attributes`` and is never
    supplied by the caller; see ``StorageClassResolver.build``.
    """

    name: str = ""
    pools: dict[str, list[str]] = Field(default_factory=dict)  # backend -> pools
    attributes: dict[str, AttributeRequest] = Field(default_factory=dict)


class StorageClass(BaseModel):
    """A storage class as persisted by the orchestrator."""

    config: StorageClassConfig
    registered_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


class VolumeConfig(BaseModel):
    """A concrete volume to create, ready for the orchestrator."""

    name: str
    size: str              # bytes, as a decimal string
    storage_class: str
    protocol: str = PROTOCOL_ANY
    access_mode: str = MODE_ANY
    space_reserve: str = ""
    security_style: str = ""
    split_on_clone: str = ""
    snapshot_policy: str = ""
    export_policy: str = ""
    snapshot_dir: str = ""
    unix_permissions: str = ""
    block_size: str = ""
    file_system: str = ""
    encryption: str = ""
    clone_source_volume: str = ""
    clone_source_snapshot: str = ""
