"""Tests for the transverse Mercator forward and inverse projections."""

import math

import pytest
from pyproj import Transformer

from geocoords.config import get_config
from geocoords.constants import to_degrees, to_radians
from geocoords.converters.utm import (
    alpha_coefficients,
    beta_coefficients,
    latlng_to_utm,
    utm_to_latlng,
    zone_for,
    _third_flattening_powers,
)
from geocoords.errors import ConvergenceError, DomainError
from geocoords.models import UTM, LatLng

FORWARD_CASES = [
    (-1, "33U 389912.653201401 5819696.850323285"),
    (10, "33U 389912.6532014008 5819696.8503232850"),
    (1, "33U 389912.7 5819696.9"),
    (2, "33U 389912.65 5819696.85"),
    (3, "33U 389912.653 5819696.850"),
    (4, "33U 389912.6532 5819696.8503"),
]

SAMPLE_POINTS = [
    (52.51625340334874, 13.377625381177886),
    (-17.978733, 18.457031),
    (0.0, 0.0),
    (4.0, -74.1),
    (-0.0001, 100.0),
    (-33.8688, 151.2093),
    (40.7128, -74.006),
    (-79.5, -60.25),
    (83.5, 25.0),
    (64.1, -21.9),
    (60.0, 5.0),
    (78.2, 15.6),
    (1.3, 179.9),
    (-45.0, -179.9),
]


def _pyproj_utm(latitude: float, longitude: float, zone: int) -> tuple[float, float]:
    """Project with PROJ using the EPSG code of the given UTM zone."""
    epsg = (32700 if latitude < 0 else 32600) + zone
    transformer = Transformer.from_crs("EPSG:4326", f"EPSG:{epsg}", always_xy=True)
    return transformer.transform(longitude, latitude)


# ---------------------------------------------------------------------------
# Zones and bands
# ---------------------------------------------------------------------------

class TestZoneFor:

    @pytest.mark.parametrize(
        "latitude, longitude, expected",
        [
            (52.5, 13.4, (33, "U")),
            (0.0, 0.0, (31, "N")),
            (-0.1, 0.0, (31, "M")),
            (84.0, 0.0, (31, "X")),
            (-80.0, 0.0, (31, "C")),
            (0.0, -180.0, (1, "N")),
            (0.0, 180.0, (60, "N")),
        ],
        ids=["berlin", "equator", "just-south", "north-limit", "south-limit", "antimeridian-west",
             "antimeridian-east"],
    )
    def test_regular_zones(self, latitude, longitude, expected):
        assert zone_for(latitude, longitude) == expected

    @pytest.mark.parametrize(
        "latitude, longitude, expected",
        [
            (60.0, 2.9, (31, "V")),
            (60.0, 3.0, (32, "V")),
            (60.0, 5.0, (32, "V")),
            (75.0, 8.0, (31, "X")),
            (75.0, 9.0, (33, "X")),
            (75.0, 20.0, (33, "X")),
            (75.0, 21.0, (35, "X")),
            (75.0, 32.0, (35, "X")),
            (75.0, 33.0, (37, "X")),
        ],
        ids=["norway-west", "norway-edge", "norway", "svalbard-31", "svalbard-33-edge", "svalbard-33",
             "svalbard-35-edge", "svalbard-35", "svalbard-37"],
    )
    def test_irregular_zones(self, latitude, longitude, expected):
        assert zone_for(latitude, longitude) == expected

    @pytest.mark.parametrize("latitude", [84.01, 85.0, -80.01, -90.0])
    def test_rejects_latitudes_outside_utm(self, latitude):
        with pytest.raises(DomainError) as exc_info:
            zone_for(latitude, 0.0)
        assert exc_info.value.field == "latitude"


# ---------------------------------------------------------------------------
# Angle conversion
# ---------------------------------------------------------------------------

class TestAngleConversion:

    def test_to_radians_multiplies_before_dividing(self):
        value = 52.51625340334874
        assert to_radians(value) == value * math.pi / 180

    def test_exact_angles(self):
        assert to_radians(180) == pytest.approx(math.pi, abs=1e-15)
        assert to_degrees(math.pi) == 180.0


# ---------------------------------------------------------------------------
# Series coefficients
# ---------------------------------------------------------------------------

class TestCoefficients:

    def test_eight_terms_each(self):
        n = _third_flattening_powers()
        assert len(n) == 8
        assert len(alpha_coefficients(n)) == 8
        assert len(beta_coefficients(n)) == 8

    def test_leading_terms(self):
        n = _third_flattening_powers()
        assert alpha_coefficients(n)[0] == pytest.approx(8.377318206244698e-4, rel=1e-9)
        assert beta_coefficients(n)[0] == pytest.approx(-8.377321640579488e-4, rel=1e-9)

    def test_terms_shrink(self):
        alpha = alpha_coefficients(_third_flattening_powers())
        for earlier, later in zip(alpha, alpha[1:]):
            assert abs(later) < abs(earlier)


# ---------------------------------------------------------------------------
# Forward projection
# ---------------------------------------------------------------------------

class TestLatLngToUTM:

    @pytest.mark.parametrize("precision, expected", FORWARD_CASES, ids=[f"p{c[0]}" for c in FORWARD_CASES])
    def test_reference_point(self, brandenburg_gate, precision, expected):
        assert latlng_to_utm(brandenburg_gate).to_string(precision) == expected

    def test_southern_hemisphere_adds_false_northing(self):
        utm = latlng_to_utm(LatLng(-17.978733, 18.457031))
        assert (utm.zone, utm.latitude_band) == (34, "K")
        assert utm.easting == pytest.approx(230690.325, abs=0.1)
        assert utm.northing == pytest.approx(8010321.788, abs=0.1)

    @pytest.mark.parametrize("latitude, longitude", SAMPLE_POINTS)
    def test_matches_proj(self, latitude, longitude):
        utm = latlng_to_utm(LatLng(latitude, longitude))
        easting, northing = _pyproj_utm(latitude, longitude, utm.zone)
        assert utm.easting == pytest.approx(easting, abs=1e-3)
        assert utm.northing == pytest.approx(northing, abs=1e-3)

    def test_scale_and_convergence_on_central_meridian(self):
        utm = latlng_to_utm(LatLng(45.0, 9.0))
        assert utm.zone == 32
        assert utm.easting == pytest.approx(500000.0, abs=1e-6)
        assert utm.scale == pytest.approx(0.9996, abs=1e-9)
        assert utm.convergence == pytest.approx(0.0, abs=1e-12)

    def test_convergence_east_of_central_meridian(self):
        utm = latlng_to_utm(LatLng(45.0, 11.0))
        # first order: delta longitude times sin(latitude)
        assert utm.convergence == pytest.approx(1.41421, abs=1e-2)

    def test_convergence_changes_sign_with_hemisphere(self):
        north = latlng_to_utm(LatLng(30.0, 11.0))
        south = latlng_to_utm(LatLng(-30.0, 11.0))
        assert north.convergence == pytest.approx(-south.convergence, abs=1e-9)

    def test_scale_grows_away_from_central_meridian(self):
        utm = latlng_to_utm(LatLng(0.0, 12.0))
        assert 1.0009 < utm.scale < 1.0011

    def test_rejects_polar_latitudes(self):
        with pytest.raises(DomainError):
            latlng_to_utm(LatLng(85.0, 0.0))


# ---------------------------------------------------------------------------
# Inverse projection
# ---------------------------------------------------------------------------

class TestUTMToLatLng:

    @pytest.mark.parametrize(
        "utm, expected",
        [
            (UTM(33, "U", 389912.6532014008, 5819696.850323285), "52.516253° N 13.377625° E"),
            (UTM(34, "K", 230690.325, 8010321.788), "17.978733° S 18.457031° E"),
        ],
        ids=["berlin", "namibia"],
    )
    def test_reference_points(self, utm, expected):
        assert utm_to_latlng(utm).to_string() == expected

    @pytest.mark.parametrize(
        "utm, expected_longitude",
        [
            (UTM(60, "N", 840000.0, 100000.0), -179.9455853017386),
            (UTM(1, "N", 160000.0, 100000.0), 179.9455853017386),
        ],
        ids=["zone-60-east-of-180", "zone-1-west-of-minus-180"],
    )
    def test_longitude_wraps_across_antimeridian(self, utm, expected_longitude):
        latlng = utm_to_latlng(utm)
        assert latlng.longitude == pytest.approx(expected_longitude, abs=1e-9)
        assert latlng.latitude == pytest.approx(utm_to_latlng(UTM(31, "N", 840000.0, 100000.0)).latitude)

    def test_antimeridian_round_trip(self):
        utm = latlng_to_utm(LatLng(0.9, 179.99))
        wrapped = UTM(utm.zone, utm.latitude_band, utm.easting + 10000.0, utm.northing)
        latlng = utm_to_latlng(wrapped)
        assert -180.0 < latlng.longitude < -179.0
        assert latlng_to_utm(latlng).zone == 1

    def test_band_n_is_northern(self):
        latlng = utm_to_latlng(latlng_to_utm(LatLng(4.0, -74.1)))
        assert latlng.latitude == pytest.approx(4.0, abs=1e-9)

    @pytest.mark.parametrize("latitude, longitude", SAMPLE_POINTS)
    def test_round_trip(self, latitude, longitude):
        latlng = utm_to_latlng(latlng_to_utm(LatLng(latitude, longitude)))
        assert latlng.latitude == pytest.approx(latitude, abs=1e-6)
        assert latlng.longitude == pytest.approx(longitude, abs=1e-6)

    def test_raises_when_solver_cannot_converge(self):
        get_config().projection.newton_tolerance = -1.0
        get_config().projection.newton_max_iterations = 5
        with pytest.raises(ConvergenceError) as exc_info:
            utm_to_latlng(UTM(33, "U", 389912.653, 5819696.850))
        assert exc_info.value.iterations == 5

    def test_zero_iterations_is_a_convergence_error(self):
        get_config().projection.newton_max_iterations = 0
        with pytest.raises(ConvergenceError):
            utm_to_latlng(UTM(33, "U", 389912.653, 5819696.850))
