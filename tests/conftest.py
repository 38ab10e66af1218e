"""Global pytest fixtures for USERDIR."""

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.doubles",
]
