"""
Shared test fixtures and path constants for transfer-analytics tests.

All input file paths are defined here as module-level constants for
easy discovery and modification. If fixture files move or new ones are
added, update this file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

SAMPLE_CSV = FIXTURE_DIR / "transfers_sample.csv"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against fixture files)",
    )


@pytest.fixture()
def sample_csv() -> Path:
    """Path to the small hand-written transfer table."""
    return SAMPLE_CSV
