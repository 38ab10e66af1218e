"""In-memory implementation of the StorageBackend interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar

from userdir.interfaces.storage_backend import MISSING_AGE, StorageBackend

from .common import (
    EMPTY_DESCRIPTOR,
    NOT_CONNECTED,
    parse_select_users,
    render_row,
    unsupported_query,
    user_not_found,
    validate_user,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class UserRecord:
    """A stored user."""

    id: int
    name: str
    age: int


class InMemoryStorageBackend(StorageBackend):
    """In-memory implementation of the StorageBackend interface.

    This implementation is intended for testing, demos and development only.
    Records are kept in a dict on the instance and survive `disconnect()`, but
    nothing is persisted across processes.

    Any non-empty descriptor is accepted by `connect()`. `execute_query()` only
    understands ``SELECT <columns> FROM users [ORDER BY id]``.
    """

    def __init__(self) -> None:
        self._records: dict[int, UserRecord] = {}
        self._next_id = 1
        self._connected = False
        self._descriptor: str | None = None
        self._last_error = ""

    # --- Connection ---

    def connect(self, descriptor: str) -> bool:
        if not descriptor:
            return self._fail(EMPTY_DESCRIPTOR, False)
        self._descriptor = descriptor
        self._connected = True
        logger.debug("In-memory backend connected (%s)", descriptor)
        return True

    def disconnect(self) -> None:
        if self._connected:
            logger.debug("In-memory backend disconnected (%s)", self._descriptor)
        self._connected = False

    def is_connected(self) -> bool:
        return self._connected

    # --- User records ---

    def insert_user(self, name: str, age: int) -> bool:
        if not self._connected:
            return self._fail(NOT_CONNECTED, False)
        if problem := validate_user(name, age):
            return self._fail(problem, False)
        record = UserRecord(self._next_id, name, age)
        self._records[record.id] = record
        self._next_id += 1
        return True

    def get_user_name(self, user_id: int) -> str:
        if not self._connected:
            return self._fail(NOT_CONNECTED, "")
        if (record := self._records.get(user_id)) is None:
            return self._fail(user_not_found(user_id), "")
        return record.name

    def get_user_age(self, user_id: int) -> int:
        if not self._connected:
            return self._fail(NOT_CONNECTED, MISSING_AGE)
        if (record := self._records.get(user_id)) is None:
            return self._fail(user_not_found(user_id), MISSING_AGE)
        return record.age

    def update_user(self, user_id: int, name: str, age: int) -> bool:
        if not self._connected:
            return self._fail(NOT_CONNECTED, False)
        if problem := validate_user(name, age):
            return self._fail(problem, False)
        if (record := self._records.get(user_id)) is None:
            return self._fail(user_not_found(user_id), False)
        record.name = name
        record.age = age
        return True

    def delete_user(self, user_id: int) -> bool:
        if not self._connected:
            return self._fail(NOT_CONNECTED, False)
        if self._records.pop(user_id, None) is None:
            return self._fail(user_not_found(user_id), False)
        return True

    # --- Bulk queries ---

    def get_all_user_names(self) -> list[str]:
        if not self._connected:
            return self._fail(NOT_CONNECTED, [])
        # dicts keep insertion order and ids only grow
        return [record.name for record in self._records.values()]

    def get_user_count(self) -> int:
        if not self._connected:
            return self._fail(NOT_CONNECTED, 0)
        return len(self._records)

    def execute_query(self, query: str, results: list[str]) -> bool:
        if not self._connected:
            return self._fail(NOT_CONNECTED, False)
        if (columns := parse_select_users(query)) is None:
            return self._fail(unsupported_query(query), False)
        results[:] = [
            render_row(getattr(record, column) for column in columns)
            for record in self._records.values()
        ]
        return True

    # --- Error state ---

    def get_last_error(self) -> str:
        return self._last_error

    def clear_error(self) -> None:
        self._last_error = ""

    def _fail(self, message: str, result: T) -> T:
        logger.debug("In-memory backend: %s", message)
        self._last_error = message
        return result
