from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from microsims.config import settings
from microsims.core.engine import build_route_view
from microsims.core.errors import MicroSimError
from microsims.core.models import BoundingBox, ProjectionConfig, Rect
from microsims.core.route import summarize_route
from microsims.core.waypoints import COLUMN_ORDERS, load_waypoints
from microsims.sims.sine import SineWave, render_sine_svg
from microsims.sims.tartan import MACQUARRIE, render_tartan_svg
from microsims.tools.make_map import write_route_map

log = logging.getLogger(__name__)


def _parse_box(text: str) -> BoundingBox:
    """``min_lat,max_lat,min_lon,max_lon`` -> BoundingBox."""
    try:
        min_lat, max_lat, min_lon, max_lon = (float(v) for v in text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected min_lat,max_lat,min_lon,max_lon, got {text!r}") from exc
    return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon)


def _map_rect() -> Rect:
    top = settings.margin + settings.title_height
    return Rect(
        left=settings.margin,
        top=top,
        width=settings.canvas_width - 2 * settings.margin,
        height=settings.canvas_height - top - settings.margin,
    )


def _save_svg(path: Path, svg: str, console: Console) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    console.print(f"Saved: {path.resolve()}")


def cmd_route(args: argparse.Namespace, console: Console) -> None:
    points = load_waypoints(Path(args.csv), args.column_order)
    summary = summarize_route(points)

    table = Table(title=f"Route: {Path(args.csv).stem}")
    table.add_column("#")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Date")
    table.add_column("km", justify="right")
    table.add_column("Cum km", justify="right")
    table.add_column("Bearing", justify="right")

    for leg in summary.legs:
        table.add_row(
            str(leg.i),
            leg.from_name,
            leg.to_name,
            leg.to_date or "",
            f"{leg.distance_km:.1f}",
            f"{leg.cum_dist_km:.1f}",
            f"{leg.bearing_deg_true:.0f}°",
        )

    console.print(table)
    console.print(
        f"Waypoints: {summary.point_count}  Segments: {summary.segment_count}  "
        f"Total: {summary.total_distance_km:.1f} km"
    )


def cmd_map(args: argparse.Namespace, console: Console) -> None:
    points = load_waypoints(Path(args.csv), args.column_order)
    config = ProjectionConfig(
        lat_offset=args.lat_offset,
        lon_offset=args.lon_offset,
        lat_scale=args.lat_scale,
        lon_scale=args.lon_scale,
    )
    view = build_route_view(
        points,
        _map_rect(),
        padding_fraction=args.padding,
        config=config,
        box=args.fixed_box,
        min_leg_px=settings.min_leg_px,
    )
    out = Path(args.out) if args.out else Path(settings.output_dir) / f"{Path(args.csv).stem}_map.html"
    write_route_map(
        view,
        out,
        settings.canvas_width,
        settings.canvas_height,
        title=args.title or Path(args.csv).stem,
        show_labels=args.labels,
        show_dates=args.dates,
    )
    console.print(f"Saved: {out.resolve()}  ({view.summary.total_distance_km:.1f} km)")


def cmd_tartan(args: argparse.Namespace, console: Console) -> None:
    svg = render_tartan_svg(
        MACQUARRIE,
        width=args.width,
        height=args.height,
        repeats=args.repeats,
        horizontal_opacity=args.opacity,
    )
    _save_svg(Path(args.out or Path(settings.output_dir) / "tartan.svg"), svg, console)


def cmd_sine(args: argparse.Namespace, console: Console) -> None:
    wave = SineWave(amplitude=args.amplitude, period=args.period, phase=args.phase)
    svg = render_sine_svg(wave, width=args.width, height=args.height)
    _save_svg(Path(args.out or Path(settings.output_dir) / "sine.svg"), svg, console)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="microsims")
    ap.add_argument("--debug", action="store_true")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("route", help="Leg-by-leg distance table for a waypoint CSV")
    p.add_argument("csv")
    p.add_argument("--column-order", choices=COLUMN_ORDERS, default=settings.csv_column_order)
    p.set_defaults(func=cmd_route)

    p = sub.add_parser("map", help="Write an HTML route map for a waypoint CSV")
    p.add_argument("csv")
    p.add_argument("--column-order", choices=COLUMN_ORDERS, default=settings.csv_column_order)
    p.add_argument("--out")
    p.add_argument("--title")
    p.add_argument("--padding", type=float, default=settings.padding_fraction)
    p.add_argument("--fixed-box", type=_parse_box, help="min_lat,max_lat,min_lon,max_lon (skips auto-fit)")
    p.add_argument("--lat-offset", type=float, default=0.0)
    p.add_argument("--lon-offset", type=float, default=0.0)
    p.add_argument("--lat-scale", type=float, default=1.0)
    p.add_argument("--lon-scale", type=float, default=1.0)
    p.add_argument("--labels", action=argparse.BooleanOptionalAction, default=True)
    p.add_argument("--dates", action=argparse.BooleanOptionalAction, default=False)
    p.set_defaults(func=cmd_map)

    p = sub.add_parser("tartan", help="Render the MacQuarrie tartan as SVG")
    p.add_argument("--repeats", type=int, default=3)
    p.add_argument("--opacity", type=int, default=180)
    p.add_argument("--width", type=int, default=800)
    p.add_argument("--height", type=int, default=600)
    p.add_argument("--out")
    p.set_defaults(func=cmd_tartan)

    p = sub.add_parser("sine", help="Render a sine wave as SVG")
    p.add_argument("--amplitude", type=float, default=100.0)
    p.add_argument("--period", type=float, default=50.0)
    p.add_argument("--phase", type=float, default=0.0)
    p.add_argument("--width", type=int, default=670)
    p.add_argument("--height", type=int, default=400)
    p.add_argument("--out")
    p.set_defaults(func=cmd_sine)

    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.log_level,
        format="%(asctime)s [microsims] %(levelname)s %(message)s",
    )

    console = Console()
    try:
        args.func(args, console)
    except (MicroSimError, ValueError) as exc:
        log.error("%s", exc)
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
