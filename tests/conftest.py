"""Shared test fixtures for geocoords tests."""

import pytest

from geocoords.config import reload_config
from geocoords.models import LatLng

ENV_VARS = (
    "GEOCOORDS_LATLNG_PRECISION",
    "GEOCOORDS_DMS_PRECISION",
    "GEOCOORDS_DDM_PRECISION",
    "GEOCOORDS_UTM_PRECISION",
    "GEOCOORDS_GEOHASH_LENGTH",
    "GEOCOORDS_PAD_LONGITUDE",
    "GEOCOORDS_NEWTON_TOLERANCE",
    "GEOCOORDS_NEWTON_MAX_ITERATIONS",
)


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against default settings, restoring them afterwards."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    config = reload_config()
    yield config
    monkeypatch.undo()
    reload_config()


@pytest.fixture
def brandenburg_gate():
    """Reference point used throughout the conversion fixtures."""
    return LatLng(52.51625340334874, 13.377625381177886)
