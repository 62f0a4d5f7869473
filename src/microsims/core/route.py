"""Route metrics: great-circle leg lengths and totals over an ordered path."""
from __future__ import annotations

from math import atan2, cos, degrees, radians, sin, sqrt
from typing import List, Sequence, Tuple

from microsims.contracts.route_contract import RouteLeg, RouteSummary
from microsims.core.errors import EmptyInputError
from microsims.core.models import GeoPoint

EARTH_RADIUS_KM = 6371.0


# ---------------------------------------------------------------------------
# Geo helpers
# ---------------------------------------------------------------------------

def _haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres on a sphere of radius 6371 km."""
    lat1r, lon1r, lat2r, lon2r = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2r - lat1r
    dlon = lon2r - lon1r
    a = sin(dlat / 2) ** 2 + cos(lat1r) * cos(lat2r) * sin(dlon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(a), sqrt(1 - a))


def _bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial bearing (degrees clockwise from true north)."""
    lat1r, lon1r, lat2r, lon2r = map(radians, [lat1, lon1, lat2, lon2])
    dlon = lon2r - lon1r
    x = sin(dlon) * cos(lat2r)
    y = cos(lat1r) * sin(lat2r) - sin(lat1r) * cos(lat2r) * cos(dlon)
    return (degrees(atan2(x, y)) + 360.0) % 360.0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def segment_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return _haversine_km(a.lat, a.lon, b.lat, b.lon)


def initial_bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """Heading leaving ``a`` towards ``b``; 0.0 when the points coincide."""
    return _bearing_deg(a.lat, a.lon, b.lat, b.lon)


def cumulative_distances_km(points: Sequence[GeoPoint]) -> List[float]:
    """Distance travelled on arrival at each point (first entry is 0)."""
    if not points:
        return []
    cum: list[float] = [0.0]
    for i in range(1, len(points)):
        cum.append(cum[-1] + segment_distance_km(points[i - 1], points[i]))
    return cum


def route_distance_km(points: Sequence[GeoPoint]) -> float:
    """Sum of consecutive leg lengths; 0 for zero or one point.

    Repeated consecutive points are legs of length exactly 0 and are kept.
    """
    total = 0.0
    for i in range(1, len(points)):
        total += segment_distance_km(points[i - 1], points[i])
    return total


def route_centroid(points: Sequence[GeoPoint]) -> Tuple[float, float]:
    """Arithmetic mean (lat, lon) of the points."""
    if not points:
        raise EmptyInputError("cannot compute a centroid for zero points")
    n = len(points)
    return (sum(p.lat for p in points) / n, sum(p.lon for p in points) / n)


def summarize_route(points: Sequence[GeoPoint]) -> RouteSummary:
    """
    Per-leg breakdown of a route.

    Returns
    -------
    RouteSummary
        ``legs[k]`` joins ``points[k]`` to ``points[k + 1]``; its ``i`` is
        the index of the arriving point.
    """
    cum = cumulative_distances_km(points)
    legs: list[RouteLeg] = []
    for i in range(1, len(points)):
        a, b = points[i - 1], points[i]
        legs.append(RouteLeg(
            i=i,
            from_name=a.name,
            to_name=b.name,
            distance_km=segment_distance_km(a, b),
            cum_dist_km=cum[i],
            bearing_deg_true=initial_bearing_deg(a, b),
            to_date=b.date,
        ))

    center_lat = center_lon = None
    if points:
        center_lat, center_lon = route_centroid(points)

    return RouteSummary(
        point_count=len(points),
        segment_count=max(0, len(points) - 1),
        total_distance_km=cum[-1] if cum else 0.0,
        legs=legs,
        center_lat=center_lat,
        center_lon=center_lon,
    )
