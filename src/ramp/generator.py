from __future__ import annotations

"""Stepwise HSV transform producing the 10-step light ramp.

Positions 0-4 are tints (position 0 lightest), position 5 is the seed and
positions 6-9 are shades (position 9 darkest). Each derived color moves the
seed's hue, saturation and value by a multiple of a fixed step; the sign of
the hue move and the size of the saturation move depend on the direction
and on whether the step is the last shade.
"""

from enum import Enum, auto
from typing import List

from .color_types import Color
from .engine import HSV, ColorEngine, DefaultColorEngine, round2, round_half_up


HUE_STEP = 2
SATURATION_STEP = 0.16  # tints, and the darkest shade
SATURATION_STEP2 = 0.05  # shades
BRIGHTNESS_STEP1 = 0.05  # tints
BRIGHTNESS_STEP2 = 0.15  # shades
LIGHT_COLOR_COUNT = 5
DARK_COLOR_COUNT = 4

SEED_INDEX = LIGHT_COLOR_COUNT
RAMP_SIZE = LIGHT_COLOR_COUNT + 1 + DARK_COLOR_COUNT

MIN_SATURATION = 0.06
LIGHTEST_MAX_SATURATION = 0.10


class Direction(Enum):
    """Which side of the seed a ramp step lies on."""

    LIGHT = auto()
    DARK = auto()


def is_grey(hsv: HSV) -> bool:
    """Achromatic colors keep their saturation across the whole ramp.

    Only meaningful for triples that did not come from 8-bit channels: a
    rounded saturation of 0 also covers near-greys such as ``#fffefe``, so
    callers holding a :class:`Color` pass ``grey=Color.is_grey`` instead.
    """
    h, s, _ = hsv
    return h == 0 and s == 0


def hue_falls_when_lighter(h: float) -> bool:
    """Hues in [60, 240] rotate down for tints and up for shades."""
    return 60 <= round_half_up(h) <= 240


def get_hue(hsv: HSV, i: int, direction: Direction) -> float:
    h = round_half_up(hsv[0])
    if hue_falls_when_lighter(h):
        if direction is Direction.LIGHT:
            hue = h - HUE_STEP * i
        else:
            hue = h + HUE_STEP * i
    else:
        if direction is Direction.LIGHT:
            hue = h + HUE_STEP * i
        else:
            hue = h - HUE_STEP * i
    return float(hue % 360)


def get_saturation(hsv: HSV, i: int, direction: Direction, grey: bool | None = None) -> float:
    if grey is None:
        grey = is_grey(hsv)
    if grey:
        return hsv[1]

    s = hsv[1]
    if direction is Direction.LIGHT:
        saturation = s - SATURATION_STEP * i
    elif i == DARK_COLOR_COUNT:
        saturation = s + SATURATION_STEP
    else:
        saturation = s + SATURATION_STEP2 * i

    if saturation > 1:
        saturation = 1.0
    # the lightest tint is held between 0.06 and 0.10
    if direction is Direction.LIGHT and i == LIGHT_COLOR_COUNT and saturation > LIGHTEST_MAX_SATURATION:
        saturation = LIGHTEST_MAX_SATURATION
    if saturation < MIN_SATURATION:
        saturation = MIN_SATURATION
    return round2(saturation)


def get_value(hsv: HSV, i: int, direction: Direction) -> float:
    if direction is Direction.LIGHT:
        value = hsv[2] + BRIGHTNESS_STEP1 * i
    else:
        value = hsv[2] - BRIGHTNESS_STEP2 * i
    value = max(0.0, min(1.0, value))
    return round2(value)


def step_hsv(hsv: HSV, i: int, direction: Direction, grey: bool | None = None) -> HSV:
    """Return the color ``i`` steps away from ``hsv`` in ``direction``."""
    return (
        get_hue(hsv, i, direction),
        get_saturation(hsv, i, direction, grey),
        get_value(hsv, i, direction),
    )


def generate_light_hsv(seed_hsv: HSV, grey: bool | None = None) -> List[HSV]:
    """Generate the 10 HSV triples of the light ramp.

    The seed itself occupies position 5 unmodified. ``grey`` overrides the
    achromatic test made on ``seed_hsv``.
    """
    patterns: List[HSV] = []
    for i in range(LIGHT_COLOR_COUNT, 0, -1):
        patterns.append(step_hsv(seed_hsv, i, Direction.LIGHT, grey))
    patterns.append(seed_hsv)
    for i in range(1, DARK_COLOR_COUNT + 1):
        patterns.append(step_hsv(seed_hsv, i, Direction.DARK, grey))
    return patterns


def generate_light_colors(seed: Color, engine: ColorEngine | None = None) -> List[Color]:
    """Generate the light ramp for ``seed`` as 10 colors.

    Position 5 is ``seed`` itself rather than a round trip through HSV, so
    it always equals the seed's canonical hex.
    """
    if engine is None:
        engine = DefaultColorEngine()
    seed_hsv = seed.to_hsv(engine)
    colors: List[Color] = []
    for index, hsv in enumerate(generate_light_hsv(seed_hsv, seed.is_grey)):
        if index == SEED_INDEX:
            colors.append(seed)
        else:
            colors.append(Color.from_hsv(*hsv, engine=engine))
    return colors


__all__ = [
    "HUE_STEP",
    "SATURATION_STEP",
    "SATURATION_STEP2",
    "BRIGHTNESS_STEP1",
    "BRIGHTNESS_STEP2",
    "LIGHT_COLOR_COUNT",
    "DARK_COLOR_COUNT",
    "SEED_INDEX",
    "RAMP_SIZE",
    "MIN_SATURATION",
    "LIGHTEST_MAX_SATURATION",
    "Direction",
    "is_grey",
    "hue_falls_when_lighter",
    "get_hue",
    "get_saturation",
    "get_value",
    "step_hsv",
    "generate_light_hsv",
    "generate_light_colors",
]
