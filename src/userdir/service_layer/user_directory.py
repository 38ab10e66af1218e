"""User directory service over a swappable storage backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userdir.interfaces.storage_backend import StorageBackend

logger = logging.getLogger(__name__)

#: Returned by `UserDirectoryService.get_total_users` when the gate is closed.
UNKNOWN_TOTAL = -1


class UserDirectoryService:
    """Gated facade over a `StorageBackend`.

    The service starts uninitialised. `initialize_connection` opens it once the
    backend reports a successful connect; there is no way back. Every data
    operation is gated on both the initialised flag and the backend's live
    connection status, so a backend that drops its connection later is still
    detected.

    Gate failures are not errors: they are reported as ``False``, ``""`` or
    ``-1`` and the backend's data methods are not called.

    Args:
        backend: The storage backend to delegate to. The caller keeps its own
            reference and may inspect the backend directly. ``None`` is
            accepted; `initialize_connection` then always fails.
    """

    def __init__(self, backend: StorageBackend | None) -> None:
        self._backend = backend
        self._initialized = False

    @property
    def backend(self) -> StorageBackend | None:
        """The backend this service delegates to."""
        return self._backend

    @property
    def initialized(self) -> bool:
        """True once a connect attempt has succeeded."""
        return self._initialized

    def initialize_connection(self, descriptor: str) -> bool:
        """Connect the backend and open the gate on success.

        Can be called again; each call re-attempts ``connect``. A failed
        attempt never closes a gate that is already open.

        Args:
            descriptor: Connection descriptor passed to the backend as is.

        Returns:
            bool: The backend's connect result, or False if no backend is bound.
        """
        if self._backend is None:
            logger.warning("Cannot initialise: no storage backend bound")
            return False

        connected = self._backend.connect(descriptor)
        if connected:
            self._initialized = True
            logger.info("User directory initialised")
        else:
            logger.warning("Storage backend refused the connection")
        return connected

    def create_user(self, name: str, age: int) -> bool:
        """Insert a user through the backend.

        Returns:
            bool: The backend's insert result, or False if the gate is closed.
        """
        if not self._is_ready("create_user"):
            return False
        return self._backend.insert_user(name, age)  # type: ignore[union-attr]

    def get_user_info(self, user_id: int) -> str:
        """Return ``"Name: <name>, Age: <age>"`` for a user.

        The age is only looked up when the backend knows the name.

        Returns:
            str: The formatted info, or ``""`` if the gate is closed or the
            user does not exist.
        """
        if not self._is_ready("get_user_info"):
            return ""

        backend: StorageBackend = self._backend  # type: ignore[assignment]
        if not (name := backend.get_user_name(user_id)):
            logger.debug("User %s not found", user_id)
            return ""
        age = backend.get_user_age(user_id)
        return f"Name: {name}, Age: {age}"

    def remove_user(self, user_id: int) -> bool:
        """Delete a user through the backend.

        Returns:
            bool: The backend's delete result, or False if the gate is closed.
        """
        if not self._is_ready("remove_user"):
            return False
        return self._backend.delete_user(user_id)  # type: ignore[union-attr]

    def get_total_users(self) -> int:
        """Return the number of users.

        Returns:
            int: The backend's count, or `UNKNOWN_TOTAL` if the gate is closed.
        """
        if not self._is_ready("get_total_users"):
            return UNKNOWN_TOTAL
        return self._backend.get_user_count()  # type: ignore[union-attr]

    def _is_ready(self, operation: str) -> bool:
        # is_connected() is only consulted once initialised
        if self._initialized and self._backend is not None:
            if self._backend.is_connected():
                return True
            logger.debug("%s rejected: backend is not connected", operation)
            return False
        logger.debug("%s rejected: service is not initialised", operation)
        return False
