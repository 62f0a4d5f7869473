"""Bounding boxes that auto-fit a projection to a set of points."""
from __future__ import annotations

import logging
from math import isnan
from typing import Sequence

from microsims.core.errors import EmptyInputError
from microsims.core.models import BoundingBox, GeoPoint

log = logging.getLogger(__name__)


def compute_bounding_box(
    points: Sequence[GeoPoint],
    padding_fraction: float = 0.0,
) -> BoundingBox:
    """
    Smallest lat/lon box holding every point, padded outward.

    Parameters
    ----------
    points : sequence of GeoPoint
        Must not be empty.
    padding_fraction : float
        Each axis grows by this fraction of its own raw span on both sides
        (0.1 = 10 %). An axis whose points all coincide gets no padding.

    Raises
    ------
    EmptyInputError
        When ``points`` is empty, or no point has a usable latitude or
        longitude. NaN coordinates are left out of the box so that one bad
        point does not hide the rest.
    """
    if not points:
        raise EmptyInputError("cannot compute a bounding box for zero points")
    if padding_fraction < 0:
        raise ValueError(f"padding_fraction must be >= 0, got {padding_fraction}")

    lats = [p.lat for p in points if not isnan(p.lat)]
    lons = [p.lon for p in points if not isnan(p.lon)]
    if not lats or not lons:
        raise EmptyInputError("cannot compute a bounding box: no point has finite coordinates")
    if len(lats) < len(points) or len(lons) < len(points):
        log.warning("bbox ignores %d NaN coordinate(s)", 2 * len(points) - len(lats) - len(lons))

    min_lat, max_lat = min(lats), max(lats)
    min_lon, max_lon = min(lons), max(lons)

    lat_pad = (max_lat - min_lat) * padding_fraction
    lon_pad = (max_lon - min_lon) * padding_fraction

    box = BoundingBox(
        min_lat=min_lat - lat_pad,
        max_lat=max_lat + lat_pad,
        min_lon=min_lon - lon_pad,
        max_lon=max_lon + lon_pad,
    )
    log.debug(
        "bbox for %d points: lat [%.5f, %.5f] lon [%.5f, %.5f]",
        len(points), box.min_lat, box.max_lat, box.min_lon, box.max_lon,
    )
    return box
