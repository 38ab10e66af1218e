"""Functional tests.

Purpose
- Validate user-visible behaviour of the ``userdir`` CLI.

Guidelines
- Treat the CLI as a black box; check exit codes, stdout and stderr.
- One flow/concern per test.
"""
