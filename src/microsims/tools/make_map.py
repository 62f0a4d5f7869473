from __future__ import annotations

import html
import logging
from math import atan2, degrees, isnan
from pathlib import Path

from microsims.contracts.route_contract import RouteView

log = logging.getLogger(__name__)


ROUTE_COLOR = "#3264c8"
START_END_FILL = "#32c832"
START_END_STROKE = "#1e9600"
STOP_FILL = "#c89600"
STOP_STROKE = "#964600"

ARROW_SIZE = 10


def _arrow(x1: float, y1: float, x2: float, y2: float) -> str:
    angle = degrees(atan2(y2 - y1, x2 - x1))
    s = ARROW_SIZE
    head = f"0,0 {-s * 1.5:.1f},{-s * 0.6:.1f} {-s * 1.5:.1f},{s * 0.6:.1f}"
    return (
        f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
        f'stroke="{ROUTE_COLOR}" stroke-width="3" />\n'
        f'<polygon points="{head}" fill="{ROUTE_COLOR}" '
        f'transform="translate({x2:.2f},{y2:.2f}) rotate({angle:.2f})" />'
    )


def render_route_svg(
    view: RouteView,
    width: float,
    height: float,
    title: str = "",
    show_labels: bool = True,
    show_dates: bool = False,
) -> str:
    """SVG for one route view: frame, arrows, markers, optional labels."""
    rect = view.meta["out_rect"] if view.meta else None
    parts: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        f'<rect x="0" y="0" width="{width}" height="{height}" fill="aliceblue" stroke="silver" />',
    ]
    if title:
        parts.append(
            f'<text x="{width / 2}" y="28" font-size="20" text-anchor="middle">{html.escape(title)}</text>'
        )
    if rect:
        parts.append(
            f'<rect x="{rect["left"]}" y="{rect["top"]}" width="{rect["width"]}" height="{rect["height"]}" '
            f'fill="rgb(235,245,250)" stroke="rgb(150,160,165)" stroke-width="2" />'
        )

    for i in view.drawn_legs:
        a, b = view.screen[i - 1], view.screen[i]
        parts.append(_arrow(a.x, a.y, b.x, b.y))

    last = len(view.points) - 1
    for idx, (p, pos) in enumerate(zip(view.points, view.screen)):
        if isnan(pos.x) or isnan(pos.y):
            log.warning("point %d (%s) has no screen position; not drawn", idx, p.name)
            continue
        fill, stroke = (START_END_FILL, START_END_STROKE) if idx in (0, last) else (STOP_FILL, STOP_STROKE)
        tip = f"{p.name}\n{p.date or ''}\nLat: {p.lat:.4f}, Lon: {p.lon:.4f}"
        if idx > 0:
            tip += f"\n{view.summary.legs[idx - 1].distance_km:.1f} km from previous"
        parts.append(
            f'<circle cx="{pos.x:.2f}" cy="{pos.y:.2f}" r="6" fill="{fill}" stroke="{stroke}" '
            f'stroke-width="2"><title>{html.escape(tip)}</title></circle>'
        )
        if show_labels and p.name:
            parts.append(
                f'<rect x="{pos.x - 50:.2f}" y="{pos.y - 25:.2f}" width="120" height="20" '
                f'fill="rgba(240,240,240,0.6)" />'
                f'<text x="{pos.x:.2f}" y="{pos.y - 10:.2f}" font-size="14" '
                f'text-anchor="middle">{html.escape(p.name)}</text>'
            )
        if show_dates and p.date:
            parts.append(
                f'<text x="{pos.x:.2f}" y="{pos.y + 22:.2f}" font-size="14" '
                f'text-anchor="middle">{html.escape(p.date)}</text>'
            )

    parts.append("</svg>")
    return "\n".join(parts)


def write_route_map(
    view: RouteView,
    out_path: Path,
    width: float,
    height: float,
    title: str = "Route Map",
    show_labels: bool = True,
    show_dates: bool = False,
) -> Path:
    svg = render_route_svg(view, width, height, title, show_labels, show_dates)
    s = view.summary

    rows: list[str] = []
    for idx, p in enumerate(view.points):
        leg = s.legs[idx - 1] if idx > 0 else None
        dist = f"{leg.distance_km:.1f} km" if leg else "-"
        cum = f"{leg.cum_dist_km:.1f} km" if leg else "-"
        rows.append(
            f"    <tr><td>{idx + 1}</td><td>{html.escape(p.name)}</td>"
            f"<td>{p.lat:.6f}</td><td>{p.lon:.6f}</td><td>{dist}</td><td>{cum}</td></tr>"
        )
    body = "\n".join(rows)

    doc = f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>{html.escape(title)}</title>
  <style>
    body {{ margin: 0; font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; }}
    .stats {{ display: flex; gap: 2rem; padding: 0.5rem 1rem; }}
    .stats b {{ font-size: 1.4rem; }}
    table {{ border-collapse: collapse; margin: 1rem; }}
    td, th {{ padding: 0.2rem 0.8rem; border-bottom: 1px solid #ddd; text-align: left; }}
  </style>
</head>
<body>
<div class="stats">
  <div>Total Waypoints<br/><b>{s.point_count}</b></div>
  <div>Total Distance<br/><b>{s.total_distance_km:.1f} km</b></div>
  <div>Segments<br/><b>{s.segment_count}</b></div>
</div>
{svg}
<table>
  <thead><tr><th>#</th><th>Name</th><th>Latitude</th><th>Longitude</th><th>Distance</th><th>Cumulative</th></tr></thead>
  <tbody>
{body}
  </tbody>
</table>
</body>
</html>
"""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(doc, encoding="utf-8")
    log.info("wrote route map %s", out_path)
    return out_path
