"""Contract tests.

Purpose
- Define StorageBackend behaviour once and run it against every backend so they
  stay interchangeable behind the user directory service.

Guidelines
- Backends come from the parametrized `storage_backend` fixture.
- Assert only the public contract (return values and last error).
"""
