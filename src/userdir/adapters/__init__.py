"""Adapters (infrastructure) for USERDIR.

Provide concrete implementations of the ports in `userdir.interfaces`
(in-memory and SQLAlchemy storage backends) plus the database plumbing they
need (engines, metadata, table definitions).

Dependency rule: may import `userdir.interfaces`; inner layers must not import
this package.
"""
