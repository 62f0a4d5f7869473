"""Centralized settings for the microsims widgets."""
from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "MICROSIMS_"}

    # Bounding box padding as a fraction of each axis span (0.1 = 10 %)
    padding_fraction: float = 0.1

    # Drawing surface
    canvas_width: int = 600
    canvas_height: int = 700
    margin: int = 20
    title_height: int = 40

    # Legs shorter than this (after projection) are not drawn
    min_leg_px: float = 2.0

    # "lat_lon" / "lon_lat" / "header"
    csv_column_order: str = "lat_lon"

    output_dir: str = "trips"
    log_level: str = "INFO"


settings = Settings()
