"""Unit tests for userdir.config."""

import pytest

from userdir import config


def test_get_db_url_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.DB_URL_ENV, "sqlite:///users.db")
    assert config.get_db_url() == "sqlite:///users.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_requires_a_value(monkeypatch: pytest.MonkeyPatch, value) -> None:
    if value is None:
        monkeypatch.delenv(config.DB_URL_ENV, raising=False)
    else:
        monkeypatch.setenv(config.DB_URL_ENV, value)
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        ("memory://demo", True),
        ("MEMORY://x", True),
        ("memory://", True),
        ("memory", False),
        ("sqlite:///memory.db", False),
        ("test_db", False),
        ("", False),
    ],
)
def test_is_memory_descriptor(descriptor: str, expected: bool) -> None:
    assert config.is_memory_descriptor(descriptor) is expected
