"""Bootstrap (composition root) for USERDIR.

Assembles the application at runtime: picks a concrete storage backend for a
connection descriptor and binds it to the user directory service.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces).
- This package may import: `userdir.adapters`, `userdir.service_layer`,
  `userdir.interfaces`, and `userdir.config`.
- Inner layers must not import `userdir.bootstrap`.
"""

from .bootstrap import DEMO_DESCRIPTOR, AppContainer, bootstrap, build_backend

__all__ = ["DEMO_DESCRIPTOR", "AppContainer", "bootstrap", "build_backend"]
