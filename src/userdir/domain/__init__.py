"""Domain layer for USERDIR.

Pure logic with no I/O: the `Calculator` helpers and the domain error
hierarchy. Nothing in this package imports adapters, the service layer, or
entrypoints.
"""

from .calculator import Calculator

__all__ = ["Calculator"]
