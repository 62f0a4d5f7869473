from __future__ import annotations

from math import sin
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SineWave(BaseModel):
    model_config = ConfigDict(frozen=True)

    amplitude: float = 100.0
    period: float = Field(default=50.0, gt=0)
    phase: float = 0.0

    @property
    def frequency(self) -> float:
        return 1.0 / self.period


def sample(wave: SineWave, width: int) -> List[Tuple[float, float]]:
    """(x, y) for every integer x in [-width/2, width/2), origin at centre."""
    pts: list[tuple[float, float]] = []
    x = -width / 2
    while x < width / 2:
        pts.append((x, wave.amplitude * sin(wave.frequency * (x - wave.phase))))
        x += 1
    return pts


def render_sine_svg(wave: SineWave, width: int = 670, height: int = 400) -> str:
    cx, cy = width / 2, height / 2
    # y flipped so positive amplitude points up
    coords = " ".join(f"{cx + x:.2f},{cy - y:.2f}" for x, y in sample(wave, width))
    return "\n".join([
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        f'<rect width="{width}" height="{height}" fill="aliceblue" stroke="silver" />',
        f'<line x1="0" y1="{cy}" x2="{width}" y2="{cy}" stroke="gray" stroke-dasharray="5,5" />',
        f'<line x1="{cx}" y1="0" x2="{cx}" y2="{height}" stroke="gray" stroke-dasharray="5,5" />',
        f'<text x="{cx - 20}" y="15" font-size="16">y</text>',
        f'<text x="{width - 20}" y="{cy + 20}" font-size="16">x</text>',
        f'<polyline points="{coords}" fill="none" stroke="blue" stroke-width="3" />',
        "</svg>",
    ])
