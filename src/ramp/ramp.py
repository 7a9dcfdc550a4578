from __future__ import annotations

"""Container type for generated ramps.

This module defines :class:`Theme` and the :class:`Ramp` dataclass, which
groups the seed color, theme, background and the 10 generated colors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .color_types import Color


class Theme(Enum):
    """Which ramp variant to generate."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_value(cls, value: "Theme | str") -> "Theme":
        """Accept a Theme or its string value; ``"default"`` means light."""
        if isinstance(value, Theme):
            return value
        key = str(value).strip().lower()
        if key == "default":
            return cls.LIGHT
        for theme in cls:
            if theme.value == key:
                return theme
        raise ValueError(f"Unknown theme: {value}")


@dataclass
class Ramp:
    """Generated 10-step ramp.

    Attributes
    ----------
    seed:
        Seed color the ramp was derived from.
    theme:
        LIGHT or DARK.
    background:
        Blend base for DARK ramps, None for LIGHT ones.
    colors:
        The 10 ramp colors, lightest first for LIGHT ramps. For LIGHT the
        seed sits at position 5; DARK ramps have no seed position.
    """

    seed: Color
    theme: Theme
    background: Optional[Color]
    colors: List[Color]

    def hex(self) -> List[str]:
        """Return the ramp as lowercase hex strings."""
        return [c.hex for c in self.colors]

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]
