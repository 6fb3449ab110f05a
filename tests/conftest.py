"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed exstatus package.
"""

import logging
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


@pytest.fixture
def status_fixtures() -> Path:
    """Directory holding sample status tables and run results."""
    return FIXTURES / "statuses"


@pytest.fixture
def in_tmp_project(tmp_path, monkeypatch):
    """Run with a temporary project root as cwd so relative spec files resolve there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo CLI logging setup so handlers never outlive a captured stream."""
    yield
    logger = logging.getLogger("exstatus")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
