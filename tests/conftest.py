"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add the src directory to sys.path so the package imports without installation
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


# Valid UBIDs whose bounding boxes lie well inside the coordinate ranges
VALID_CODES = [
    "849VQJH6+95J-51-58-42-50",
    "849VQJH6+95-0-0-0-0",
    "849VQJH6+-3-3-3-3",
    "87G8Q2PR+8F-2-3-1-1",
    "8FVC9G8F+6W-10-12-9-11",
    "849VCWC8+R9-1-0-0-4",
]


@pytest.fixture(params=VALID_CODES)
def valid_code(request):
    """Each known-valid UBID string in turn."""
    return request.param


@pytest.fixture
def seattle_box():
    """Small building footprint in Seattle (south, west, north, east, center lat, center lon)."""
    return (47.610, -122.200, 47.612, -122.198, 47.611, -122.199)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate configuration from the caller's environment and working directory."""
    for name in (
        "BUILDINGID_CONFIG",
        "BUILDINGID_CODE_LENGTH",
        "BUILDINGID_LOG_LEVEL",
        "BUILDINGID_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
