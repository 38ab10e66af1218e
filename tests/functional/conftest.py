"""Default marks for tests under `tests/functional/`."""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    for item in items:
        if FUNCTIONAL_ROOT in item.path.resolve().parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, MARKER_NAME))


@pytest.fixture
def runner(tmp_path: Path) -> CliRunner:
    """CliRunner whose flight recorder writes under the test's temp dir."""
    return CliRunner(env={"USERDIR_LOG_PATH": str(tmp_path / "userdir.log")})
