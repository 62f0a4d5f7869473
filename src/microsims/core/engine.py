from __future__ import annotations

import logging
from math import hypot
from typing import Optional, Sequence

from microsims.contracts.route_contract import RouteView
from microsims.core.bounds import compute_bounding_box
from microsims.core.models import BoundingBox, GeoPoint, ProjectionConfig, Rect
from microsims.core.projection import Projector
from microsims.core.route import summarize_route

log = logging.getLogger(__name__)


def build_route_view(
    points: Sequence[GeoPoint],
    out_rect: Rect,
    padding_fraction: float = 0.0,
    config: Optional[ProjectionConfig] = None,
    box: Optional[BoundingBox] = None,
    min_leg_px: float = 0.0,
) -> RouteView:
    """One render pass: bounds -> projection -> metrics.

    A fixed ``box`` (the tour map's hand-aligned background) bypasses the
    auto-fit. Legs shorter than ``min_leg_px`` on screen are left out of
    ``drawn_legs`` but still count towards the route distance.
    """
    if box is None:
        box = compute_bounding_box(points, padding_fraction)

    projector = Projector(box, config, out_rect)
    screen = projector.project_many(points)
    summary = summarize_route(points)

    drawn: list[int] = []
    for leg in summary.legs:
        a, b = screen[leg.i - 1], screen[leg.i]
        # NaN lengths compare False and are dropped too
        if hypot(b.x - a.x, b.y - a.y) >= min_leg_px:
            drawn.append(leg.i)

    log.info(
        "route view: %d points, %d/%d legs drawn, %.1f km",
        summary.point_count, len(drawn), summary.segment_count, summary.total_distance_km,
    )
    return RouteView(
        box=box,
        points=list(points),
        screen=screen,
        drawn_legs=drawn,
        summary=summary,
        meta={"config": projector.config.model_dump(), "out_rect": projector.out_rect.model_dump()},
    )
