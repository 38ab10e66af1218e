"""Service layer for USERDIR.

Implements application use-cases on top of the storage contract in
`userdir.interfaces`.

Dependency rule: may import `userdir.interfaces` and `userdir.domain`, but not
`userdir.adapters` or `userdir.entrypoints`.
"""

from .user_directory import UNKNOWN_TOTAL, UserDirectoryService

__all__ = ["UNKNOWN_TOTAL", "UserDirectoryService"]
