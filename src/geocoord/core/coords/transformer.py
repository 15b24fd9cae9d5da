"""
Reference UTM transformations through PROJ.

The closed-form inverse in geocoord.core.coords.utm is what the parsers
use. This module runs the same conversion through pyproj so its accuracy
can be checked against PROJ's exact transverse Mercator implementation.
"""

from typing import List, Tuple, Union

import numpy as np
from pyproj import CRS, Transformer

from geocoord.core.coords.utm import get_utm_epsg, utm_to_latlon

WGS84_EPSG = 4326

# Approximate length of one degree of latitude
METERS_PER_DEGREE = 111319.9


class TransformationError(Exception):
    """Raised when a reference transformation fails."""
    pass


def _utm_transformer(zone_number: int, is_northern: bool) -> Transformer:
    epsg = get_utm_epsg(zone_number, is_northern)
    try:
        return Transformer.from_crs(
            CRS.from_epsg(epsg),
            CRS.from_epsg(WGS84_EPSG),
            always_xy=True,
        )
    except Exception as e:
        raise TransformationError(f"Failed to create transformer for EPSG:{epsg}: {e}")


def reference_utm_to_wgs84(
    zone_number: int,
    easting: float,
    northing: float,
    is_northern: bool = True,
) -> Tuple[float, float]:
    """
    Transform UTM coordinates to WGS84 with PROJ.

    Args:
        zone_number: UTM zone number (1-60)
        easting: Easting in meters
        northing: Northing in meters
        is_northern: True for northern hemisphere

    Returns:
        Tuple of (latitude, longitude) in decimal degrees

    Raises:
        TransformationError: If transformation fails
    """
    transformer = _utm_transformer(zone_number, is_northern)
    try:
        longitude, latitude = transformer.transform(easting, northing)
    except Exception as e:
        raise TransformationError(f"Transformation failed: {e}")
    return latitude, longitude


def compare_batch(
    zone_number: int,
    eastings: Union[List[float], np.ndarray],
    northings: Union[List[float], np.ndarray],
    is_northern: bool = True,
) -> np.ndarray:
    """
    Compare the closed-form inverse against PROJ for many points.

    Args:
        zone_number: UTM zone number (1-60)
        eastings: Eastings in meters
        northings: Northings in meters
        is_northern: True for northern hemisphere

    Returns:
        Array of per-point horizontal differences in meters

    Raises:
        TransformationError: If the inputs differ in length or PROJ fails
    """
    e_arr = np.asarray(eastings, dtype=float)
    n_arr = np.asarray(northings, dtype=float)

    if len(e_arr) != len(n_arr):
        raise TransformationError("eastings and northings must have same length")

    transformer = _utm_transformer(zone_number, is_northern)
    try:
        ref_lon, ref_lat = transformer.transform(e_arr, n_arr)
    except Exception as e:
        raise TransformationError(f"Batch transformation failed: {e}")

    closed_form = np.array(
        [utm_to_latlon(zone_number, e, n, is_northern) for e, n in zip(e_arr, n_arr)]
    ).reshape(-1, 2)

    d_lat = (closed_form[:, 0] - np.asarray(ref_lat)) * METERS_PER_DEGREE
    d_lon = (
        (closed_form[:, 1] - np.asarray(ref_lon))
        * METERS_PER_DEGREE
        * np.cos(np.radians(np.asarray(ref_lat)))
    )

    return np.hypot(d_lat, d_lon)


def validate_utm_accuracy(
    zone_number: int,
    easting: float,
    northing: float,
    is_northern: bool = True,
    max_error_meters: float = 1.0,
) -> bool:
    """
    Check the closed-form inverse of one point against PROJ.

    Args:
        zone_number: UTM zone number (1-60)
        easting: Easting in meters
        northing: Northing in meters
        is_northern: True for northern hemisphere
        max_error_meters: Maximum acceptable error in meters

    Returns:
        True if the two results agree within tolerance

    Raises:
        TransformationError: If transformation fails
    """
    errors = compare_batch(zone_number, [easting], [northing], is_northern)
    return bool(errors[0] <= max_error_meters)
