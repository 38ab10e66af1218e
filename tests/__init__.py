"""USERDIR test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across every StorageBackend.
- integration/  : Real interactions with a database through SQLAlchemy.
- functional/   : User-visible CLI flows tested at the boundary.
- e2e/          : Whole-CLI behaviour (logging flags, flight recorder).
- fixtures/     : Shared pytest fixtures, loaded as plugins.

General guidance
- Keep unit fast and deterministic; test doubles come from `unittest.mock`.
- Contract parametrizes backends to keep them interchangeable.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
