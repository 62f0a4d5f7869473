from __future__ import annotations

import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _in_range(v: float, lo: float, hi: float) -> bool:
    # NaN passes so bad data reaches the projector and simply fails to draw
    return math.isnan(v) or lo <= v <= hi


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    lat: float
    lon: float

    # Display label only (the tour map shows the night of each stay)
    date: Optional[str] = None

    @field_validator("lat")
    @classmethod
    def _check_lat(cls, v: float) -> float:
        if not _in_range(v, -90.0, 90.0):
            raise ValueError(f"latitude {v} outside [-90, 90]")
        return v

    @field_validator("lon")
    @classmethod
    def _check_lon(cls, v: float) -> float:
        if not _in_range(v, -180.0, 180.0):
            raise ValueError(f"longitude {v} outside [-180, 180]")
        return v


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @model_validator(mode="after")
    def _check_order(self) -> "BoundingBox":
        # NaN comparisons are always False, so malformed boxes slip through
        if self.min_lat > self.max_lat:
            raise ValueError("min_lat must be <= max_lat")
        if self.min_lon > self.max_lon:
            raise ValueError("min_lon must be <= max_lon")
        return self

    @property
    def center_lat(self) -> float:
        return (self.min_lat + self.max_lat) / 2.0

    @property
    def center_lon(self) -> float:
        return (self.min_lon + self.max_lon) / 2.0

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_span(self) -> float:
        return self.max_lon - self.min_lon

    def contains(self, point: GeoPoint) -> bool:
        return (
            self.min_lat <= point.lat <= self.max_lat
            and self.min_lon <= point.lon <= self.max_lon
        )


class ProjectionConfig(BaseModel):
    """Correction factors applied before box-relative rescaling.

    Offsets are in degrees (positive lat = shift north, positive lon = shift
    east). Scales stretch about the box center (>1 = stretch).
    """

    model_config = ConfigDict(frozen=True)

    lat_offset: float = 0.0
    lon_offset: float = 0.0
    lat_scale: float = 1.0
    lon_scale: float = 1.0

    @classmethod
    def identity(cls) -> "ProjectionConfig":
        return cls()

    @property
    def is_identity(self) -> bool:
        return (
            self.lat_offset == 0.0
            and self.lon_offset == 0.0
            and self.lat_scale == 1.0
            and self.lon_scale == 1.0
        )


class Rect(BaseModel):
    model_config = ConfigDict(frozen=True)

    left: float = 0.0
    top: float = 0.0
    width: float = Field(default=100.0, ge=0)
    height: float = Field(default=100.0, ge=0)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)
