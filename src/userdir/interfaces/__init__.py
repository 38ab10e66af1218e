"""Interfaces (application boundary) for USERDIR.

Defines framework-free application contracts shared by the service layer and
adapters. Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any
`userdir.*` modules. It may be imported by `userdir.service_layer`,
`userdir.adapters`, and `userdir.bootstrap`.
"""

from .storage_backend import MISSING_AGE, StorageBackend

__all__ = ["MISSING_AGE", "StorageBackend"]
