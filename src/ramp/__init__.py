"""Public entrypoint for the ramp library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``ramp`` instead of individual
submodules.
"""

from .errors import ArithmeticGuard, IndexOutOfRange, InvalidColorFormat, RampError
from .color_types import Color, ColorInput
from .ramp import Ramp, Theme
from .blend import DARK_COLOR_MAP, DEFAULT_BACKGROUND, AmountMapping
from .api import (
    build_ramp,
    cache_info,
    clear_cache,
    generate_ramp,
    reverse_dark_color,
    reverse_light_color,
)
from .presets import PRESET_COLORS, preset_color, preset_ramps
from .session import RampSession
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    THEME_OPTIONS,
    ExportFormat,
    export_ramp,
)

__all__ = [
    "RampError",
    "InvalidColorFormat",
    "IndexOutOfRange",
    "ArithmeticGuard",
    "Color",
    "ColorInput",
    "Ramp",
    "Theme",
    "AmountMapping",
    "DARK_COLOR_MAP",
    "DEFAULT_BACKGROUND",
    "build_ramp",
    "generate_ramp",
    "reverse_light_color",
    "reverse_dark_color",
    "clear_cache",
    "cache_info",
    "PRESET_COLORS",
    "preset_color",
    "preset_ramps",
    "RampSession",
    "ExportFormat",
    "export_ramp",
    "THEME_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
