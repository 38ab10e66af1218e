"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Replace storage backends with `unittest.mock.create_autospec` doubles or the
  in-memory backend; no files or network.
- Assert on return values and recorded calls, not on private attributes.
"""
