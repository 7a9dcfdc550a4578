from __future__ import annotations

"""Dark-theme ramp by alpha-blending light-ramp colors onto a background.

Each dark position reads one color from the *light* ramp and mixes it into
the background by a fixed percentage. The mapping table below is the only
source of those pairs.
"""

from typing import List, NamedTuple, Sequence

import numpy as np

from .color_types import Color
from .generator import RAMP_SIZE


DEFAULT_BACKGROUND = "#141414"


class AmountMapping(NamedTuple):
    """Blend source for one dark position."""

    light_index: int
    amount: int  # percent of the light color, 0-100


DARK_COLOR_MAP: tuple[AmountMapping, ...] = (
    AmountMapping(7, 15),
    AmountMapping(6, 25),
    AmountMapping(5, 30),
    AmountMapping(5, 45),
    AmountMapping(5, 65),
    AmountMapping(5, 85),
    AmountMapping(4, 90),
    AmountMapping(3, 95),
    AmountMapping(2, 97),
    AmountMapping(1, 98),
)


def validate_mapping(mapping: Sequence[AmountMapping]) -> None:
    """Check that ``mapping`` describes a full 10-entry dark ramp."""
    if len(mapping) != RAMP_SIZE:
        raise ValueError(f"dark color map must have {RAMP_SIZE} entries, got {len(mapping)}.")
    for pos, (light_index, amount) in enumerate(mapping):
        if not (0 <= light_index < RAMP_SIZE):
            raise ValueError(f"entry {pos}: light_index {light_index} outside 0..{RAMP_SIZE - 1}.")
        if not (0 <= amount <= 100):
            raise ValueError(f"entry {pos}: amount {amount} outside 0..100.")


def mix_rgb(background: np.ndarray, source: np.ndarray, amount: np.ndarray | float) -> np.ndarray:
    """Mix ``source`` into ``background`` by ``amount`` percent.

    Works channel-wise on arrays of any matching shape and rounds half-up
    to integer channels in [0, 255].
    """
    p = np.asarray(amount, dtype=np.float64) / 100
    mixed = (source - background) * p + background
    return np.clip(np.floor(mixed + 0.5), 0, 255).astype(np.int64)


def mix(background: Color, source: Color, amount: float) -> Color:
    """Blend a single color; ``amount`` is the percentage of ``source``."""
    bg = np.asarray(background.rgb, dtype=np.float64)
    src = np.asarray(source.rgb, dtype=np.float64)
    r, g, b = (int(c) for c in mix_rgb(bg, src, amount))
    return Color.from_rgb(r, g, b)


def blend_dark(
    light_colors: Sequence[Color],
    background: Color,
    mapping: Sequence[AmountMapping] = DARK_COLOR_MAP,
) -> List[Color]:
    """Project a light ramp onto ``background`` to build the dark ramp.

    Parameters
    ----------
    light_colors:
        The 10-entry light ramp; the sources are looked up here, never in
        the dark ramp being built.
    background:
        Blend base of the dark theme.
    mapping:
        Table of (light_index, amount) per dark position.
    """
    if len(light_colors) != RAMP_SIZE:
        raise ValueError(f"light ramp must have {RAMP_SIZE} colors, got {len(light_colors)}.")
    if mapping is not DARK_COLOR_MAP:
        validate_mapping(mapping)

    sources = np.array([light_colors[m.light_index].rgb for m in mapping], dtype=np.float64)
    amounts = np.array([[m.amount] for m in mapping], dtype=np.float64)
    bg = np.asarray(background.rgb, dtype=np.float64)
    mixed = mix_rgb(bg, sources, amounts)
    return [Color.from_rgb(int(r), int(g), int(b)) for r, g, b in mixed]


__all__ = [
    "DEFAULT_BACKGROUND",
    "AmountMapping",
    "DARK_COLOR_MAP",
    "validate_mapping",
    "mix_rgb",
    "mix",
    "blend_dark",
]
