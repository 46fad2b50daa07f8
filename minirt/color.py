"""RGB colours and their packed RGBA form."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from minirt.numbers import atoi


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def rgba(self) -> int:
        """Pack as 0xRRGGBBAA with full opacity."""
        return (self.r << 24) + (self.g << 16) + (self.b << 8) + 255


def parse_color(fields: Sequence[str]) -> Color:
    """Build a colour from three text fields, each wrapped to 8 bits."""
    if len(fields) != 3:
        raise ValueError(f"expected 3 colour fields, got {len(fields)}")
    r, g, b = (atoi(field) & 0xFF for field in fields)
    return Color(r, g, b)