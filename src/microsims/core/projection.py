"""Linear lat/lon -> drawing-surface projection with manual alignment.

A point goes through three steps:

1. additive correction (``lat_offset`` / ``lon_offset`` degrees),
2. multiplicative correction about the *box* center, so every point of one
   render pass is stretched about the same anchor,
3. linear rescale of the box onto the output rectangle, latitude inverted
   so north is up (smaller y).

Bad numbers are not trapped: a NaN coordinate comes out as a NaN position.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from microsims.contracts.route_contract import ScreenPoint
from microsims.core.bounds import compute_bounding_box
from microsims.core.errors import DegenerateBoxError
from microsims.core.models import BoundingBox, GeoPoint, ProjectionConfig, Rect

log = logging.getLogger(__name__)

_IDENTITY = ProjectionConfig()


def _rescale(
    value: float,
    lo: float,
    hi: float,
    out_lo: float,
    out_hi: float,
    axis: str,
    strict: bool,
) -> float:
    """Map ``value`` from [lo, hi] onto [out_lo, out_hi] (no clamping)."""
    span = hi - lo
    if span == 0:
        if strict:
            raise DegenerateBoxError(f"bounding box has zero {axis} span at {lo}")
        return (out_lo + out_hi) / 2.0
    return out_lo + (value - lo) / span * (out_hi - out_lo)


def project_point(
    point: GeoPoint,
    box: BoundingBox,
    config: Optional[ProjectionConfig] = None,
    out_rect: Optional[Rect] = None,
    strict: bool = False,
) -> ScreenPoint:
    """Project one point onto ``out_rect``.

    ``config=None`` is the identity correction and ``out_rect=None`` the
    default 100x100 rectangle at the origin (percent units, as used by the
    waypoint visualizer). With ``strict=True`` a zero-span box axis raises
    :class:`DegenerateBoxError` instead of landing on the rectangle midpoint.
    """
    cfg = config or _IDENTITY
    rect = out_rect or Rect()

    adj_lat = point.lat + cfg.lat_offset
    adj_lon = point.lon + cfg.lon_offset

    center_lat = box.center_lat
    center_lon = box.center_lon
    scaled_lat = center_lat + (adj_lat - center_lat) * cfg.lat_scale
    scaled_lon = center_lon + (adj_lon - center_lon) * cfg.lon_scale

    x = _rescale(scaled_lon, box.min_lon, box.max_lon, rect.left, rect.right, "longitude", strict)
    y = _rescale(scaled_lat, box.min_lat, box.max_lat, rect.bottom, rect.top, "latitude", strict)
    return ScreenPoint(x, y)


class Projector:
    """Projection bound to one box / config / rectangle for a render pass.

    Gives the same answers as :func:`project_point`; it only saves passing
    the same three arguments for every point.
    """

    def __init__(
        self,
        box: BoundingBox,
        config: Optional[ProjectionConfig] = None,
        out_rect: Optional[Rect] = None,
        strict: bool = False,
    ):
        self.box = box
        self.config = config or _IDENTITY
        self.out_rect = out_rect or Rect()
        self.strict = strict

    def project(self, point: GeoPoint) -> ScreenPoint:
        return project_point(point, self.box, self.config, self.out_rect, self.strict)

    def project_many(self, points: Iterable[GeoPoint]) -> List[ScreenPoint]:
        return [self.project(p) for p in points]

    def __repr__(self) -> str:
        return f"Projector(box={self.box!r}, config={self.config!r}, out_rect={self.out_rect!r})"


def fit_projection(
    points: Sequence[GeoPoint],
    out_rect: Optional[Rect] = None,
    padding_fraction: float = 0.0,
    config: Optional[ProjectionConfig] = None,
) -> Projector:
    """Build a projector whose box is auto-fitted to ``points``."""
    box = compute_bounding_box(points, padding_fraction)
    projector = Projector(box, config, out_rect)
    log.debug("fitted %r", projector)
    return projector
