"""Configuration utilities for USERDIR.

This module centralizes small helpers and constants related to application
configuration. All settings come from the environment.
"""

import os

DB_URL_ENV = "USERDIR_DB_URL"  # pragma: no mutate

#: Descriptor scheme that selects the in-memory storage backend.
MEMORY_SCHEME = "memory"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the USERDIR_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `USERDIR_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `USERDIR_DB_URL` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def is_memory_descriptor(descriptor: str) -> bool:
    """Return True if `descriptor` selects the in-memory backend.

    Examples:
        >>> is_memory_descriptor("memory://demo")
        True
        >>> is_memory_descriptor("sqlite:///users.db")
        False
    """
    scheme, sep, _ = descriptor.partition("://")
    return bool(sep) and scheme.lower() == MEMORY_SCHEME
