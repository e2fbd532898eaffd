"""Transverse Mercator projection between LatLng and UTM.

Implementation of Karney's method using the Krüger series to order 8,
accurate to a few nanometres within 3900 km of the central meridian.

See C. F. F. Karney, "Transverse Mercator with an accuracy of a few
nanometers", J. Geodesy 85(8), 475-485 (2011), and
https://www.mygeodesy.id.au/documents/Karney-Krueger%20equations.pdf

The series coefficients are stored zero-based: ``alpha[0]`` is Karney's
α₁ and ``beta[7]`` is β₈, so term ``j`` of each sum uses index ``j - 1``.
"""

import math

import structlog

from geocoords.config import get_config
from geocoords.constants import (
    EQUATORIAL_RADIUS,
    FALSE_EASTING,
    FALSE_NORTHING,
    FLATTENING,
    LATITUDE_BANDS,
    MAX_UTM_LATITUDE,
    MAX_ZONE,
    MIN_UTM_LATITUDE,
    UTM_SCALE_FACTOR,
    ZONE_WIDTH_DEG,
    to_degrees,
    to_radians,
)
from geocoords.errors import ConvergenceError, DomainError
from geocoords.models import UTM, LatLng

logger = structlog.get_logger()

# Irregular zones as (zone, band, split longitude, zone below split, zone at or above split).
# Norway widens 32V westwards; Svalbard merges 31X-37X into four wide zones.
ZONE_EXCEPTIONS = (
    (31, "V", 3, 31, 32),
    (32, "X", 9, 31, 33),
    (34, "X", 21, 33, 35),
    (36, "X", 33, 35, 37),
)


def _third_flattening_powers() -> tuple[float, ...]:
    """Return (n, n², ..., n⁸) for the WGS84 ellipsoid."""
    n = FLATTENING / (2 - FLATTENING)
    powers = [n]
    for _ in range(7):
        powers.append(powers[-1] * n)
    return tuple(powers)


def _eccentricity() -> float:
    return math.sqrt(FLATTENING * (2 - FLATTENING))


def rectifying_radius(n: tuple[float, ...]) -> float:
    """Radius A such that 2πA is the circumference of a meridian."""
    n1, n2, n3, n4, n5, n6, n7, n8 = n
    return EQUATORIAL_RADIUS / (1 + n1) * (1 + n2 / 4 + n4 / 64 + n6 / 256 + 25 * n8 / 16_384)


def alpha_coefficients(n: tuple[float, ...]) -> tuple[float, ...]:
    """Krüger α₁..α₈ for the forward series."""
    n1, n2, n3, n4, n5, n6, n7, n8 = n
    return (
        n1 / 2 - 2 * n2 / 3 + 5 * n3 / 16 + 41 * n4 / 180 - 127 * n5 / 288 + 7_891 * n6 / 37_800,
        13 * n2 / 48 - 3 * n3 / 5 + 557 * n4 / 1_440 + 281 * n5 / 630 - 1_983_433 * n6 / 1_935_360,
        61 * n3 / 240 - 103 * n4 / 140 + 15_061 * n5 / 26_880 + 167_603 * n6 / 181_440,
        49_561 * n4 / 161_280 - 179 * n5 / 168 + 6_601_661 * n6 / 7_257_600,
        34_729 * n5 / 80_640 - 3_418_889 * n6 / 1_995_840,
        212_378_941 * n6 / 319_334_400 - 30_705_481 * n7 / 10_378_368 + 2_605_413_599 * n8 / 58_118_860_800,
        1_522_256_789 * n7 / 1_383_782_400 - 16_759_934_899 * n8 / 3_113_510_400,
        1_424_729_850_961 * n8 / 743_921_418_240,
    )


def beta_coefficients(n: tuple[float, ...]) -> tuple[float, ...]:
    """Krüger β₁..β₈ for the inverse series."""
    n1, n2, n3, n4, n5, n6, n7, n8 = n
    return (
        -n1 / 2 + 2 * n2 / 3 - 37 * n3 / 96 + n4 / 360 + 81 * n5 / 512 - 96_199 * n6 / 604_800
        + 5_406_467 * n7 / 38_707_200 - 7_944_359 * n8 / 67_737_600,
        -n2 / 48 - n3 / 15 + 437 * n4 / 1_440 - 46 * n5 / 105 + 111_871 * n6 / 387_072
        - 51_841 * n7 / 1_209_600 - 24_749_483 * n8 / 348_364_800,
        -17 * n3 / 480 + 37 * n4 / 840 + 209 * n5 / 4_480 - 5_569 * n6 / 90_720
        - 9_261_899 * n7 / 58_060_800 + 6_457_463 * n8 / 17_740_800,
        -4_397 * n4 / 161_280 + 11 * n5 / 504 + 830_251 * n6 / 7_257_600
        - 466_511 * n7 / 2_494_800 - 324_154_477 * n8 / 7_664_025_600,
        -4_583 * n5 / 161_280 + 108_847 * n6 / 3_991_680 + 8_005_831 * n7 / 63_866_880
        - 22_894_433 * n8 / 124_540_416,
        -20_648_693 * n6 / 638_668_800 + 16_363_163 * n7 / 518_918_400 + 2_204_645_983 * n8 / 12_915_302_400,
        -219_941_297 * n7 / 5_535_129_600 + 497_323_811 * n8 / 12_454_041_600,
        -191_773_887_257 * n8 / 3_719_607_091_200,
    )


def zone_for(latitude: float, longitude: float) -> tuple[int, str]:
    """Return the UTM zone number and latitude band letter for a position.

    Applies the Norway and Svalbard exceptions.
    """
    if not MIN_UTM_LATITUDE <= latitude <= MAX_UTM_LATITUDE:
        raise DomainError(
            "latitude", latitude, f"UTM covers [{MIN_UTM_LATITUDE}, {MAX_UTM_LATITUDE}] only"
        )

    # longitude 180 is the eastern edge of zone 60
    zone = min(math.floor((longitude + 180) / ZONE_WIDTH_DEG) + 1, MAX_ZONE)
    band = LATITUDE_BANDS[math.floor(latitude / 8 + 10)]

    for exception_zone, exception_band, split, below, above in ZONE_EXCEPTIONS:
        if zone == exception_zone and band == exception_band:
            zone = below if longitude < split else above
            if zone != exception_zone:
                logger.debug("Applied irregular UTM zone", band=band, zone=zone, longitude=longitude)
            break

    return zone, band


def _central_meridian(zone: int) -> float:
    """Central meridian of ``zone`` in radians."""
    return to_radians((zone - 1) * ZONE_WIDTH_DEG - 180 + ZONE_WIDTH_DEG / 2)


def latlng_to_utm(latlng: LatLng) -> UTM:
    """Project a coordinate onto the UTM grid.

    The result carries the grid convergence (degrees) and point scale factor
    alongside easting and northing. Values are not rounded; rounding happens
    when the UTM value is formatted.

    Args:
        latlng: Coordinate with latitude in [-80, 84].

    Returns:
        UTM grid reference.

    Raises:
        DomainError: If the latitude lies outside the UTM band table.
    """
    zone, band = zone_for(latlng.latitude, latlng.longitude)

    latitude = to_radians(latlng.latitude)
    longitude = to_radians(latlng.longitude) - _central_meridian(zone)

    e = _eccentricity()
    n = _third_flattening_powers()

    cos_lng = math.cos(longitude)
    sin_lng = math.sin(longitude)
    tan_lng = math.tan(longitude)

    # conformal latitude via Karney's τ' substitution
    tau = math.tan(latitude)
    sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau**2)))
    tau_prime = tau * math.sqrt(1 + sigma**2) - sigma * math.sqrt(1 + tau**2)

    # Gauss-Schreiber ratios
    xi_prime = math.atan2(tau_prime, cos_lng)
    eta_prime = math.asinh(sin_lng / math.sqrt(tau_prime**2 + cos_lng**2))

    a = rectifying_radius(n)
    alpha = alpha_coefficients(n)

    xi = xi_prime
    for j in range(1, 9):
        xi += alpha[j - 1] * math.sin(2 * j * xi_prime) * math.cosh(2 * j * eta_prime)
    eta = eta_prime
    for j in range(1, 9):
        eta += alpha[j - 1] * math.cos(2 * j * xi_prime) * math.sinh(2 * j * eta_prime)

    x = UTM_SCALE_FACTOR * a * eta
    y = UTM_SCALE_FACTOR * a * xi

    # Karney 2011 eq. 23, 24
    p_prime = 1
    for j in range(1, 9):
        p_prime += 2 * j * alpha[j - 1] * math.cos(2 * j * xi_prime) * math.cosh(2 * j * eta_prime)
    q_prime = 0
    for j in range(1, 9):
        q_prime += 2 * j * alpha[j - 1] * math.sin(2 * j * xi_prime) * math.sinh(2 * j * eta_prime)

    gamma = math.atan(tau_prime / math.sqrt(1 + tau_prime**2) * tan_lng) + math.atan2(q_prime, p_prime)

    # Karney 2011 eq. 25
    sin_lat = math.sin(latitude)
    k_prime = (
        math.sqrt(1 - e**2 * sin_lat**2) * math.sqrt(1 + tau**2) / math.sqrt(tau_prime**2 + cos_lng**2)
    )
    k_prime_prime = a / EQUATORIAL_RADIUS * math.sqrt(p_prime**2 + q_prime**2)
    k = UTM_SCALE_FACTOR * k_prime * k_prime_prime

    x += FALSE_EASTING
    if latlng.latitude < 0:
        y += FALSE_NORTHING

    return UTM(zone, band, x, y, convergence=to_degrees(gamma), scale=k)


def utm_to_latlng(utm: UTM) -> LatLng:
    """Invert a UTM grid reference to latitude/longitude.

    Raises:
        ConvergenceError: If the conformal latitude iteration does not settle
            within the configured number of iterations.
    """
    projection = get_config().projection

    e = _eccentricity()
    n = _third_flattening_powers()
    a = rectifying_radius(n)
    beta = beta_coefficients(n)

    x = (utm.easting - FALSE_EASTING) / UTM_SCALE_FACTOR
    y = (utm.northing - (FALSE_NORTHING if utm.is_southern else 0)) / UTM_SCALE_FACTOR

    # transverse Mercator ratios
    xi = y / a
    eta = x / a

    xi_prime = xi
    for j in range(1, 9):
        xi_prime += beta[j - 1] * math.sin(2 * j * xi) * math.cosh(2 * j * eta)
    eta_prime = eta
    for j in range(1, 9):
        eta_prime += beta[j - 1] * math.cos(2 * j * xi) * math.sinh(2 * j * eta)

    tau_prime = math.sin(xi_prime) / math.sqrt(math.sinh(eta_prime) ** 2 + math.cos(xi_prime) ** 2)

    tau_i = _solve_tau(
        tau_prime, e, projection.newton_tolerance, projection.newton_max_iterations
    )

    latitude = math.atan(tau_i)
    longitude = to_degrees(math.atan2(math.sinh(eta_prime), math.cos(xi_prime)) + _central_meridian(utm.zone))

    # zones 1 and 60 reach across the antimeridian
    if not -180 <= longitude <= 180:
        longitude = (longitude + 180) % 360 - 180

    return LatLng(to_degrees(latitude), longitude)


def _solve_tau(tau_prime: float, e: float, tolerance: float, max_iterations: int) -> float:
    """Newton-Raphson for τ = tan φ given the conformal τ'."""
    tau_i = tau_prime
    delta = math.inf
    for iteration in range(1, max_iterations + 1):
        sigma = math.sinh(e * math.atanh(e * tau_i / math.sqrt(1 + tau_i**2)))
        tau = tau_i * math.sqrt(1 + sigma**2) - sigma * math.sqrt(1 + tau_i**2)

        f = tau - tau_prime
        f_prime = (math.sqrt(1 + sigma**2) * math.sqrt(1 + tau_i**2) - sigma * tau_i) * (
            (1 - e**2) * math.sqrt(1 + tau_i**2) / (1 + (1 - e**2) * tau_i**2)
        )

        delta = f / f_prime
        tau_i -= delta
        if abs(delta) <= tolerance:
            logger.debug("Conformal latitude converged", iterations=iteration)
            return tau_i

    raise ConvergenceError(max_iterations, abs(delta))
