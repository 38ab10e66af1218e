"""Entrypoints (inbound adapters) for USERDIR.

Expose the application to the outside world: currently the ``userdir`` CLI.
Parse and validate inputs, call the service layer, and present results.

Dependency rule: may import `userdir.bootstrap`, `userdir.domain` and
`userdir.config`; avoid importing `userdir.adapters` directly.
"""
