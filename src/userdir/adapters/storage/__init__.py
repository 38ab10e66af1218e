"""Contains concrete implementations of the StorageBackend interface."""

from .memory import InMemoryStorageBackend
from .sqlalchemy_backend import SqlAlchemyStorageBackend

__all__ = [
    "InMemoryStorageBackend",
    "SqlAlchemyStorageBackend",
]
