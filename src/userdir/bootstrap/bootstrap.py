"""Wire a storage backend into the user directory service."""

from __future__ import annotations

from dataclasses import dataclass

from userdir import config
from userdir.adapters.storage import InMemoryStorageBackend, SqlAlchemyStorageBackend
from userdir.interfaces.storage_backend import StorageBackend
from userdir.service_layer.user_directory import UserDirectoryService

DEMO_DESCRIPTOR = "memory://demo"


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application objects.

    The backend is exposed next to the service so entrypoints can read its
    diagnostics (`get_last_error`) and release it (`disconnect`).
    """

    directory: UserDirectoryService
    backend: StorageBackend
    descriptor: str


def build_backend(descriptor: str) -> StorageBackend:
    """Pick the backend implementation for a connection descriptor.

    ``memory://...`` selects the in-memory backend; anything else is treated
    as a SQLAlchemy URL.
    """
    if config.is_memory_descriptor(descriptor):
        return InMemoryStorageBackend()
    return SqlAlchemyStorageBackend()


def bootstrap(descriptor: str | None = None) -> AppContainer:
    """Compose the application without connecting it.

    Args:
        descriptor: Connection descriptor. Defaults to `config.get_db_url()`.

    Raises:
        config.DatabaseUrlNotSetError: If no descriptor is given and
            `USERDIR_DB_URL` is not set.
    """
    if descriptor is None:
        descriptor = config.get_db_url()
    backend = build_backend(descriptor)
    return AppContainer(
        directory=UserDirectoryService(backend),
        backend=backend,
        descriptor=descriptor,
    )
