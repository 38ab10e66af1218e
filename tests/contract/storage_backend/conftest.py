"""Backends under contract test."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

from userdir.adapters.storage import InMemoryStorageBackend, SqlAlchemyStorageBackend

if TYPE_CHECKING:
    from userdir.interfaces import StorageBackend

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["memory", "sqlite"])
def unconnected(
    request: pytest.FixtureRequest,
) -> Iterator[tuple[StorageBackend, str]]:
    """Return a fresh, disconnected backend plus a descriptor it accepts.

    Supported params:
      - `"memory"` → InMemoryStorageBackend
      - `"sqlite"` → SqlAlchemyStorageBackend over a temp-file SQLite DB

    A file (not ``:memory:``) database is used so records survive reconnects,
    as they do for the in-memory backend. The backend is disconnected at
    teardown.
    """
    backend: StorageBackend
    match request.param:
        case "memory":
            backend, descriptor = InMemoryStorageBackend(), "memory://contract"
        case "sqlite":
            backend = SqlAlchemyStorageBackend()
            descriptor = request.getfixturevalue("sqlite_url")
        case _:
            raise ValueError(f"unknown storage backend type: {request.param}")
    try:
        yield backend, descriptor
    finally:
        backend.disconnect()


@pytest.fixture
def storage_backend(unconnected: tuple[StorageBackend, str]) -> StorageBackend:
    """A fresh backend, already connected."""
    backend, descriptor = unconnected
    assert backend.connect(descriptor)
    return backend


@pytest.fixture
def descriptor(unconnected: tuple[StorageBackend, str]) -> str:
    """The descriptor `storage_backend` was connected with."""
    return unconnected[1]
