"""Tests for LatLng <-> DMS/DDM conversion and rendering."""

import pytest

from geocoords.converters.sexagesimal import (
    ddm_to_latlng,
    dms_to_latlng,
    latlng_to_ddm,
    latlng_to_dms,
)
from geocoords.models import DDM, DMS, LatLng

DMS_CASES = [
    (-1, "52°30'58.512252\" N, 13°22'39.451372\" E"),
    (10, "52°30'58.5122520555\" N, 13°22'39.4513722404\" E"),
    (5, "52°30'58.51225\" N, 13°22'39.45137\" E"),
    (4, "52°30'58.5123\" N, 13°22'39.4514\" E"),
    (3, "52°30'58.512\" N, 13°22'39.451\" E"),
    (2, "52°30'58.51\" N, 13°22'39.45\" E"),
    (1, "52°30'58.5\" N, 13°22'39.5\" E"),
    (0, "52°30'59\" N, 13°22'39\" E"),
]

DDM_CASES = [
    (-1, "52°30.975204' N, 13°22.657523' E"),
    (10, "52°30.9752042009' N, 13°22.6575228707' E"),
    (5, "52°30.97520' N, 13°22.65752' E"),
    (4, "52°30.9752' N, 13°22.6575' E"),
    (3, "52°30.975' N, 13°22.658' E"),
    (2, "52°30.98' N, 13°22.66' E"),
    (1, "52°31.0' N, 13°22.7' E"),
    (0, "52°31' N, 13°23' E"),
]

# ---------------------------------------------------------------------------
# LatLng -> DMS
# ---------------------------------------------------------------------------

class TestLatLngToDMS:

    @pytest.mark.parametrize("precision, expected", DMS_CASES, ids=[f"p{c[0]}" for c in DMS_CASES])
    def test_reference_point(self, brandenburg_gate, precision, expected):
        assert latlng_to_dms(brandenburg_gate).to_string(precision) == expected

    def test_components(self, brandenburg_gate):
        dms = latlng_to_dms(brandenburg_gate)
        assert (dms.degrees_lat, dms.minutes_lat) == (52, 30)
        assert (dms.degrees_lng, dms.minutes_lng) == (13, 22)
        assert dms.seconds_lat == pytest.approx(58.5122520555, abs=1e-9)

    def test_southern_western_point(self):
        dms = latlng_to_dms(LatLng(-33.8688, -151.2093))
        assert (dms.degrees_lat, dms.minutes_lat, dms.hemisphere_lat) == (33, 52, "S")
        assert (dms.degrees_lng, dms.minutes_lng, dms.hemisphere_lng) == (151, 12, "W")
        assert dms.to_string() == "33°52'7.680000\" S, 151°12'33.480000\" W"

    @pytest.mark.parametrize(
        "latitude, longitude",
        [(-0.5, -0.25), (-89.999, 179.999), (45.0, -120.0), (0.0, 0.0)],
    )
    def test_degrees_are_never_negative(self, latitude, longitude):
        dms = latlng_to_dms(LatLng(latitude, longitude))
        assert dms.degrees_lat >= 0 and dms.degrees_lng >= 0
        assert dms.hemisphere_lat == ("S" if latitude < 0 else "N")
        assert dms.hemisphere_lng == ("W" if longitude < 0 else "E")


# ---------------------------------------------------------------------------
# LatLng -> DDM
# ---------------------------------------------------------------------------

class TestLatLngToDDM:

    @pytest.mark.parametrize("precision, expected", DDM_CASES, ids=[f"p{c[0]}" for c in DDM_CASES])
    def test_reference_point(self, brandenburg_gate, precision, expected):
        assert latlng_to_ddm(brandenburg_gate).to_string(precision) == expected

    def test_southern_western_point(self):
        ddm = latlng_to_ddm(LatLng(-33.8688, -151.2093))
        assert ddm.to_string() == "33°52.128000' S, 151°12.558000' W"


# ---------------------------------------------------------------------------
# DMS/DDM -> LatLng
# ---------------------------------------------------------------------------

class TestToLatLng:

    def test_dms_reference(self):
        latlng = dms_to_latlng(DMS(52, 30, 58.512252, "N", 13, 22, 39.451372, "E"))
        assert latlng.latitude == pytest.approx(52.516253403, abs=1e-9)
        assert latlng.longitude == pytest.approx(13.377625381, abs=1e-9)

    def test_ddm_reference(self):
        latlng = ddm_to_latlng(DDM(52, 30.975204, "N", 13, 22.657523, "E"))
        assert latlng.latitude == pytest.approx(52.5162534, abs=1e-7)
        assert latlng.longitude == pytest.approx(13.37762538, abs=1e-7)

    def test_hemispheres_set_sign(self):
        latlng = dms_to_latlng(DMS(33, 52, 7.68, "S", 151, 12, 33.48, "W"))
        assert latlng.latitude == pytest.approx(-33.8688)
        assert latlng.longitude == pytest.approx(-151.2093)

    @pytest.mark.parametrize(
        "latitude, longitude",
        [(52.51625340334874, 13.377625381177886), (-17.978733, 18.457031), (-0.001, -179.5), (89.9, 0.0)],
    )
    def test_round_trip(self, latitude, longitude):
        original = LatLng(latitude, longitude)
        via_dms = dms_to_latlng(latlng_to_dms(original))
        via_ddm = ddm_to_latlng(latlng_to_ddm(original))
        for result in (via_dms, via_ddm):
            assert result.latitude == pytest.approx(latitude, abs=1e-12)
            assert result.longitude == pytest.approx(longitude, abs=1e-12)
