"""
Shared pytest fixtures for radialcal tests

Supports both development mode (python -m radialcal) and installed mode (pip install -e .)
"""
import pytest
from pathlib import Path
import sys

import matplotlib
matplotlib.use("Agg")

# Repository root on sys.path for development mode. Done at import time so
# test modules can import radialcal during collection.
#
#   repo/                 <- repo root
#   └── radialcal/        <- package
#       └── tests/
#           └── conftest.py
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def engine():
    from radialcal.layout import SliceLayoutEngine
    return SliceLayoutEngine()


@pytest.fixture
def make_event():
    """Factory for CalendarEvent with sensible defaults"""
    from radialcal.layout import CalendarEvent

    def _make(event_id, slice_index, color='#ff6b6b', name=None):
        return CalendarEvent(
            id=event_id,
            slice_index=slice_index,
            name=name or f"Event {event_id}",
            color=color
        )
    return _make


@pytest.fixture
def four_at_nine(make_event):
    """Four events in slice 9, one more than the default cap"""
    return [make_event(f"e{k}", 9, color=c)
            for k, c in enumerate(['#ff0000', '#00ff00', '#0000ff', '#000000'])]


@pytest.fixture(scope="session")
def sample_events_file() -> Path:
    from radialcal.data import DEFAULT_SAMPLE_EVENTS
    return Path(DEFAULT_SAMPLE_EVENTS)


@pytest.fixture
def events_tsv(tmp_path):
    """Write rows to a TSV file and return its path"""
    def _write(rows, name="events.tsv"):
        path = tmp_path / name
        path.write_text("\n".join("\t".join(str(v) for v in row) for row in rows) + "\n",
                        encoding="utf-8")
        return path
    return _write


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the CLI end to end"
    )
    config.addinivalue_line(
        "markers", "scenarios: Worked layout examples with known coordinates"
    )
