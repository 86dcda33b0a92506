"""Orchestrator interface and an in-memory storage class registry."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Optional, Protocol

from .errors import RegistrationError
from .models import Backend, StorageClass, StorageClassConfig

__all__ = [
    "Orchestrator",
    "InMemoryOrchestrator",
]

logger = logging.getLogger(__name__)


class Orchestrator(Protocol):
    """The parts of the orchestrator core that storage class resolution uses."""

    def list_backends(self) -> list[Backend]:
        ...

    def get_storage_class(self, name: str) -> Optional[StorageClass]:
        ...

    def add_storage_class(self, config: StorageClassConfig) -> StorageClass:
        """Register *config*; raises ``RegistrationError`` if it is rejected."""
        ...


class InMemoryOrchestrator:
    """
    Thread-safe registry of backends and storage classes.

    Backends are listed in the order they were added.  Registration is a
    single check-then-register step under a lock, so each storage class
    name is stored at most once no matter how many callers race on it.
    """

    def __init__(self, backends: Iterable[Backend] = ()) -> None:
        self._lock = threading.Lock()
        self._backends: dict[str, Backend] = {}
        self._storage_classes: dict[str, StorageClass] = {}
        for backend in backends:
            self.add_backend(backend)

    def add_backend(self, backend: Backend) -> None:
        with self._lock:
            self._backends[backend.name] = backend

    def list_backends(self) -> list[Backend]:
        with self._lock:
            return list(self._backends.values())

    def get_storage_class(self, name: str) -> Optional[StorageClass]:
        with self._lock:
            return self._storage_classes.get(name)

    def list_storage_classes(self) -> list[StorageClass]:
        with self._lock:
            return list(self._storage_classes.values())

    def add_storage_class(self, config: StorageClassConfig) -> StorageClass:
        if not config.name:
            raise RegistrationError(config.name, "storage class has no name")

        with self._lock:
            existing = self._storage_classes.get(config.name)
            if existing is not None:
                return existing

            for backend_name, pool_names in config.pools.items():
                backend = self._backends.get(backend_name)
                if backend is None:
                    raise RegistrationError(
                        config.name, f"unknown backend {backend_name!r}"
                    )
                for pool_name in pool_names:
                    if pool_name not in backend.storage:
                        raise RegistrationError(
                            config.name,
                            f"backend {backend_name!r} has no pool {pool_name!r}",
                        )

            storage_class = StorageClass(config=config.model_copy(deep=True))
            self._storage_classes[config.name] = storage_class

        logger.info("Added storage class %s", config.name)
        return storage_class
