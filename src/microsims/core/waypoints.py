"""CSV waypoint ingest: ``name,lat,lon[,date]`` rows under a header line."""
from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError

from microsims.core.errors import WaypointFormatError
from microsims.core.models import GeoPoint

log = logging.getLogger(__name__)

COLUMN_ORDERS = ("lat_lon", "lon_lat", "header")

_LAT_NAMES = {"lat", "latitude"}
_LON_NAMES = {"lon", "long", "lng", "longitude"}


def _header_axes(header: List[str]) -> Optional[Tuple[int, int]]:
    """(lat_idx, lon_idx) from header names in columns 1-2, if recognizable."""
    names = [h.strip().lower() for h in header[1:3]]
    if len(names) < 2:
        return None
    if names[0] in _LAT_NAMES and names[1] in _LON_NAMES:
        return (1, 2)
    if names[0] in _LON_NAMES and names[1] in _LAT_NAMES:
        return (2, 1)
    return None


def _resolve_columns(header: List[str], column_order: str) -> Tuple[int, int]:
    if column_order not in COLUMN_ORDERS:
        raise WaypointFormatError(
            f"unknown column order {column_order!r} (expected one of {', '.join(COLUMN_ORDERS)})"
        )

    from_header = _header_axes(header)
    if column_order == "header":
        if from_header is None:
            raise WaypointFormatError(f"cannot tell lat/lon columns apart from header {header!r}")
        return from_header

    positional = (1, 2) if column_order == "lat_lon" else (2, 1)
    if from_header is not None and from_header != positional:
        log.warning(
            "CSV header %r disagrees with column order %r; reading columns by position",
            ",".join(header), column_order,
        )
    return positional


def _to_float(raw: str, row_no: int, field: str) -> float:
    try:
        return float(raw.strip())
    except ValueError:
        log.warning("row %d: %s %r is not a number", row_no, field, raw)
        return float("nan")


def parse_waypoints_csv(text: str, column_order: str = "lat_lon") -> List[GeoPoint]:
    """
    Parse waypoint CSV text into an ordered list of points.

    The first row is a header and is never read as data. Rows with fewer than
    three columns are skipped; numbers that do not parse become NaN so the
    point is kept but will not draw. A fourth column, when present, is the
    point's date label.

    Raises
    ------
    WaypointFormatError
        No data rows, unknown ``column_order``, or a coordinate out of range.
    """
    rows = [r for r in csv.reader(io.StringIO(text.strip())) if any(c.strip() for c in r)]
    if len(rows) < 2:
        raise WaypointFormatError("waypoint CSV needs a header row and at least one data row")

    header, body = rows[0], rows[1:]
    lat_idx, lon_idx = _resolve_columns(header, column_order)

    points: list[GeoPoint] = []
    for row_no, row in enumerate(body, start=2):
        if len(row) < 3:
            log.warning("row %d: expected at least 3 columns, got %d; skipped", row_no, len(row))
            continue
        date = row[3].strip() if len(row) > 3 and row[3].strip() else None
        try:
            points.append(GeoPoint(
                name=row[0].strip(),
                lat=_to_float(row[lat_idx], row_no, "latitude"),
                lon=_to_float(row[lon_idx], row_no, "longitude"),
                date=date,
            ))
        except ValidationError as exc:
            raise WaypointFormatError(f"row {row_no}: {exc.errors()[0]['msg']}") from exc

    if not points:
        raise WaypointFormatError("waypoint CSV has no usable rows")

    log.debug("parsed %d waypoints (%s)", len(points), column_order)
    return points


def load_waypoints(path: Path, column_order: str = "lat_lon") -> List[GeoPoint]:
    return parse_waypoints_csv(Path(path).read_text(encoding="utf-8"), column_order)
