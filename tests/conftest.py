"""
Pytest configuration for world clock tests.

This file adds the parent directory to the Python path so that tests
can import from the domain, services, repositories, api and scripts modules.
"""

import sys
from importlib.resources import files
from pathlib import Path

import pytest

# Add the project root to the Python path
# so tests can import domain, services, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.zones import InMemoryZoneDatabase, reset_default_zone  # noqa: E402

KNOWN_ZONES = (
    "UTC",
    "America/Toronto",
    "Europe/Paris",
    "Australia/Sydney",
    "Asia/Kolkata",
)


def tzif_bytes(zone_name: str) -> bytes:
    """TZif data for a standard zone, taken from the tzdata package."""
    resource = files("tzdata").joinpath("zoneinfo")
    for part in zone_name.split("/"):
        resource = resource.joinpath(part)
    return resource.read_bytes()


def install_zone(root: Path, zone_name: str, source_zone: str) -> Path:
    """Write source_zone's TZif data under root as zone_name."""
    tzfile = root / zone_name
    tzfile.parent.mkdir(parents=True, exist_ok=True)
    tzfile.write_bytes(tzif_bytes(source_zone))
    return tzfile


@pytest.fixture
def zones() -> InMemoryZoneDatabase:
    """In-memory zone database holding a handful of real identifiers."""
    return InMemoryZoneDatabase(KNOWN_ZONES, root="/usr/share/zoneinfo")


@pytest.fixture
def zone_installer():
    """install_zone as a fixture, for tests that build their own zoneinfo trees."""
    return install_zone


@pytest.fixture
def zoneinfo_root(tmp_path: Path) -> Path:
    """A private zoneinfo directory holding real TZif data for the known zones."""
    root = tmp_path / "zoneinfo"
    for name in KNOWN_ZONES:
        install_zone(root, name, name)
    return root


@pytest.fixture(autouse=True)
def _isolate_default_zone():
    """The process-wide default zone must not leak between tests."""
    reset_default_zone()
    yield
    reset_default_zone()
