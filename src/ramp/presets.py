from __future__ import annotations

"""Named seed colors shipped with the library."""

from typing import Dict

from .api import generate_ramp
from .blend import DEFAULT_BACKGROUND
from .color_types import ColorLike
from .ramp import Theme


PRESET_COLORS: Dict[str, str] = {
    "red": "#f5222d",
    "volcano": "#fa541c",
    "orange": "#fa8c16",
    "gold": "#faad14",
    "yellow": "#fadb14",
    "lime": "#a0d911",
    "green": "#52c41a",
    "cyan": "#13c2c2",
    "blue": "#1890ff",
    "geekblue": "#2f54eb",
    "purple": "#722ed1",
    "magenta": "#eb2f96",
    "grey": "#666666",
}

PRESET_COLOR_NAMES = list(PRESET_COLORS)


def preset_color(name: str) -> str:
    """Return the seed hex for a preset name (case-insensitive)."""
    key = name.strip().lower()
    if key not in PRESET_COLORS:
        raise KeyError(f"Unknown preset color: {name}")
    return PRESET_COLORS[key]


def preset_ramps(
    theme: Theme | str = Theme.LIGHT,
    background: ColorLike = DEFAULT_BACKGROUND,
) -> Dict[str, list[str]]:
    """Generate the ramp of every preset, keyed by preset name."""
    return {name: generate_ramp(seed, theme, background) for name, seed in PRESET_COLORS.items()}


__all__ = ["PRESET_COLORS", "PRESET_COLOR_NAMES", "preset_color", "preset_ramps"]
