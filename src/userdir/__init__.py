"""USERDIR

A small user-directory application built around a swappable storage
backend. It pairs a gated service facade with in-memory and SQLAlchemy
backends, plus a calculator of pure helpers used by the demo command.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
