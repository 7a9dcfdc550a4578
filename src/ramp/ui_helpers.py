from __future__ import annotations

"""Helper utilities for handing ramps to external UIs.

This module exposes label/enum pairs for themes and export formats, and
provides :func:`export_ramp` to convert ramp colors into simple lists
(hex strings, RGB tuples or HSV tuples) that UI code can consume easily.
"""

from enum import Enum
from typing import List, Sequence

from .color_types import Color, ColorLike, as_color
from .ramp import Ramp, Theme


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HEX = "hex"
    RGB_255 = "rgb_255"
    RGB_01 = "rgb_01"
    HSV = "hsv"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
THEME_OPTIONS: List[tuple[str, Theme]] = [
    ("Light", Theme.LIGHT),
    ("Dark", Theme.DARK),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("RGB (0-255)", ExportFormat.RGB_255),
    ("RGB (0-1)", ExportFormat.RGB_01),
    ("HSV", ExportFormat.HSV),
]


def export_ramp(ramp: Ramp | Sequence[ColorLike], fmt: ExportFormat | str) -> List[object]:
    """Convert a Ramp (or a list of colors) to a list in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    colors: List[Color] = [as_color(c) for c in (ramp.colors if isinstance(ramp, Ramp) else ramp)]
    if export_fmt == ExportFormat.HEX:
        return [c.hex for c in colors]
    if export_fmt == ExportFormat.RGB_255:
        return [c.rgb for c in colors]
    if export_fmt == ExportFormat.RGB_01:
        return [tuple(ch / 255.0 for ch in c.rgb) for c in colors]
    if export_fmt == ExportFormat.HSV:
        return [c.to_hsv() for c in colors]
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "THEME_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "export_ramp",
]
