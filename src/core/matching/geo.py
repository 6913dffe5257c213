"""Great-circle distance between [longitude, latitude] points."""

import math
from typing import Sequence

from src.utils.constants import EARTH_RADIUS_METERS


def haversine_distance(
    coord1: Sequence[float],
    coord2: Sequence[float],
    radius: float = EARTH_RADIUS_METERS,
) -> float:
    """
    Distance in meters between two points.

    Args:
        coord1: [longitude, latitude] in decimal degrees
        coord2: [longitude, latitude] in decimal degrees
        radius: Sphere radius in meters

    Returns:
        Great-circle distance in meters
    """
    lng1, lat1 = coord1
    lng2, lat2 = coord2

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    # Rounding can push a slightly above 1 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c
