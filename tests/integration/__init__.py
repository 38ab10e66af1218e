"""Integration tests.

Purpose
- Exercise the SQLAlchemy backend and the bootstrap wiring against real
  SQLite databases.

Guidelines
- Use a temp-file database per test; never share state between tests.
"""
