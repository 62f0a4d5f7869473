"""Procedural tartan: a sett of coloured stripes woven both ways.

Warp (vertical) bands are painted opaque; weft (horizontal) bands are
multiplied on top with adjustable opacity, which is what gives the checks.
"""
from __future__ import annotations

import html
import logging
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

MAX_REPEATS = 10


class Stripe(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: RGB
    width: float = Field(gt=0)

    @field_validator("color")
    @classmethod
    def _check_color(cls, v: RGB) -> RGB:
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"colour channels must be 0..255, got {v}")
        return v


class TartanSett(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    background: RGB
    stripes: List[Stripe] = Field(min_length=1)


RED = (230, 45, 55)
GREEN = (50, 130, 50)

MACQUARRIE = TartanSett(
    name="MacQuarrie",
    background=RED,
    stripes=[
        Stripe(color=GREEN, width=30),
        Stripe(color=RED, width=12),
        Stripe(color=GREEN, width=2),
        Stripe(color=RED, width=3),
        Stripe(color=GREEN, width=2),
        Stripe(color=RED, width=36),
        Stripe(color=GREEN, width=2),
        Stripe(color=RED, width=3),
        Stripe(color=GREEN, width=2),
        Stripe(color=RED, width=12),
    ],
)


def sett_width(sett: TartanSett) -> float:
    return sum(s.width for s in sett.stripes)


def scale_factor(sett: TartanSett, repeats: int, width: float, height: float) -> float:
    """Scale that fits ``repeats`` whole setts across the shorter side."""
    if not 1 <= repeats <= MAX_REPEATS:
        raise ValueError(f"repeats must be 1..{MAX_REPEATS}, got {repeats}")
    return min(width, height) / (sett_width(sett) * repeats)


def stripe_bands(sett: TartanSett, scale: float, extent: float) -> List[Tuple[float, float, RGB]]:
    """(offset, size, colour) bands covering ``extent`` plus one extra sett."""
    if scale <= 0:
        raise ValueError(f"scale must be > 0, got {scale}")
    limit = extent + sett_width(sett) * scale
    bands: list[tuple[float, float, RGB]] = []
    pos = 0.0
    while pos < limit:
        for stripe in sett.stripes:
            size = stripe.width * scale
            bands.append((pos, size, stripe.color))
            pos += size
    return bands


def _rgb(c: RGB) -> str:
    return f"rgb({c[0]},{c[1]},{c[2]})"


def render_tartan_svg(
    sett: TartanSett = MACQUARRIE,
    width: int = 800,
    height: int = 600,
    repeats: int = 3,
    horizontal_opacity: int = 180,
    title: bool = True,
) -> str:
    if not 0 <= horizontal_opacity <= 255:
        raise ValueError(f"horizontal_opacity must be 0..255, got {horizontal_opacity}")

    scale = scale_factor(sett, repeats, width, height)
    alpha = horizontal_opacity / 255

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        f'<rect width="{width}" height="{height}" fill="{_rgb(sett.background)}" />',
        "<g>",
    ]
    for x, w, color in stripe_bands(sett, scale, width):
        parts.append(f'<rect x="{x:.2f}" y="0" width="{w:.2f}" height="{height}" fill="{_rgb(color)}" />')
    parts.append("</g>")

    parts.append('<g style="mix-blend-mode:multiply">')
    for y, h, color in stripe_bands(sett, scale, height):
        parts.append(
            f'<rect x="0" y="{y:.2f}" width="{width}" height="{h:.2f}" '
            f'fill="{_rgb(color)}" fill-opacity="{alpha:.3f}" />'
        )
    parts.append("</g>")

    if title:
        size = min(width / 15, 48)
        lines = (html.escape(f"{sett.name} Clan"), "Tartan Pattern")
        # shadow first, then the white text 2px up-left of it
        for dx, fill in ((2, "rgba(0,0,0,0.8)"), (0, "white")):
            cx, cy = width / 2 + dx, height / 2 + dx
            spans = "".join(
                f'<tspan x="{cx:.1f}" y="{cy + (k - 0.5) * size:.1f}">{line}</tspan>'
                for k, line in enumerate(lines)
            )
            parts.append(
                f'<text font-size="{size:.1f}" font-weight="bold" text-anchor="middle" '
                f'dominant-baseline="middle" fill="{fill}">{spans}</text>'
            )

    parts.append("</svg>")
    log.debug("tartan %s: scale %.3f, %d repeats", sett.name, scale, repeats)
    return "\n".join(parts)
