from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional


class ScreenPoint(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class RouteLeg:
    i: int  # leg i joins point i-1 to point i
    from_name: str
    to_name: str
    distance_km: float
    cum_dist_km: float
    bearing_deg_true: float
    to_date: Optional[str] = None


@dataclass(frozen=True)
class RouteSummary:
    point_count: int
    segment_count: int
    total_distance_km: float
    legs: List[RouteLeg]
    center_lat: Optional[float] = None
    center_lon: Optional[float] = None


@dataclass(frozen=True)
class RouteView:
    """Everything one render pass of a route map needs."""

    box: Any  # core.models.BoundingBox
    points: List[Any]  # core.models.GeoPoint, route order
    screen: List[ScreenPoint]  # parallel to the input points
    drawn_legs: List[int]  # leg indices (RouteLeg.i) long enough to draw
    summary: RouteSummary
    meta: Optional[Dict[str, Any]] = None
