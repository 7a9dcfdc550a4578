from __future__ import annotations

"""Algebraic inverse of the ramp generator and the dark blender.

Given one ramp entry and its position, these functions walk the forward
formulas backwards to recover the seed. Rounding in the forward path is
lossy, so recovery is approximate except at the seed position itself.

The hue direction is judged from the *given* color's hue, since the seed's
hue is unknown. Seeds lying within a few degrees of 60 or 240 may therefore
be rotated the wrong way.
"""

import logging
from typing import Sequence

import numpy as np

from .blend import DARK_COLOR_MAP, AmountMapping
from .color_types import Color
from .engine import HSV, ColorEngine, DefaultColorEngine, clamp, round2, round_half_up
from .errors import ArithmeticGuard, IndexOutOfRange
from .generator import (
    BRIGHTNESS_STEP1,
    BRIGHTNESS_STEP2,
    DARK_COLOR_COUNT,
    HUE_STEP,
    MIN_SATURATION,
    RAMP_SIZE,
    SATURATION_STEP,
    SATURATION_STEP2,
    SEED_INDEX,
    hue_falls_when_lighter,
    is_grey,
)

logger = logging.getLogger(__name__)


def check_index(index: object, *, name: str = "index") -> int:
    """Return ``index`` as int if it is a valid ramp position."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfRange(f"{name} must be an int in 0..{RAMP_SIZE - 1}, got {index!r}")
    if not (0 <= index < RAMP_SIZE):
        raise IndexOutOfRange(f"{name} {index} outside 0..{RAMP_SIZE - 1}")
    return int(index)


def invert_light_hsv(hsv: HSV, index: int, grey: bool | None = None) -> HSV:
    """Undo ``index``'s step on an HSV triple; position 5 is returned as-is."""
    if index == SEED_INDEX:
        return hsv
    if grey is None:
        grey = is_grey(hsv)

    h, s, v = hsv
    if index < SEED_INDEX:
        steps = SEED_INDEX - index
        # tints: rotate hue back, restore saturation, darken
        if hue_falls_when_lighter(h):
            target_h = h + HUE_STEP * steps
        else:
            target_h = h - HUE_STEP * steps
        if grey:
            target_s = s
        else:
            target_s = clamp(s + SATURATION_STEP * steps, MIN_SATURATION, 1.0)
        target_v = clamp(v - BRIGHTNESS_STEP1 * steps, 0.0, 1.0)
    else:
        steps = index - SEED_INDEX
        # shades: rotate hue back, remove saturation, lighten
        if hue_falls_when_lighter(h):
            target_h = h - HUE_STEP * steps
        else:
            target_h = h + HUE_STEP * steps
        if grey:
            target_s = s
        elif steps == DARK_COLOR_COUNT:
            target_s = clamp(s - SATURATION_STEP, MIN_SATURATION, 1.0)
        else:
            target_s = clamp(s - SATURATION_STEP2 * steps, MIN_SATURATION, 1.0)
        target_v = clamp(v + BRIGHTNESS_STEP2 * steps, 0.0, 1.0)

    return (float(round_half_up(target_h) % 360), round2(target_s), round2(target_v))


def reverse_light(color: Color, index: int, engine: ColorEngine | None = None) -> Color:
    """Recover the seed from the light-ramp entry at ``index``."""
    index = check_index(index)
    if index == SEED_INDEX:
        return color
    if engine is None:
        engine = DefaultColorEngine()
    hsv = color.to_hsv(engine)
    target = invert_light_hsv(hsv, index, color.is_grey)
    logger.debug("reverse_light index=%d %s hsv=%s -> %s", index, color.hex, hsv, target)
    return Color.from_hsv(*target, engine=engine)


def unmix_rgb(blended: np.ndarray, background: np.ndarray, amount: float) -> np.ndarray:
    """Solve ``blended = bg * (1 - p) + src * p`` for ``src``.

    ``amount`` is in percent; the result is rounded half-up and clamped to
    [0, 255].
    """
    if amount == 0:
        raise ArithmeticGuard("cannot invert a blend with amount 0")
    p = amount / 100
    original = (blended - background * (1 - p)) / p
    return np.clip(np.floor(original + 0.5), 0, 255).astype(np.int64)


def reverse_dark(
    color: Color,
    dark_index: int,
    background: Color,
    engine: ColorEngine | None = None,
    mapping: Sequence[AmountMapping] = DARK_COLOR_MAP,
) -> Color:
    """Recover the seed from the dark-ramp entry at ``dark_index``.

    The blend is undone first, which yields the light-ramp color the entry
    was mixed from; that color is then passed through :func:`reverse_light`
    unless it already is the seed.
    """
    dark_index = check_index(dark_index, name="dark_index")
    light_index, amount = mapping[dark_index]

    blended = np.asarray(color.rgb, dtype=np.float64)
    bg = np.asarray(background.rgb, dtype=np.float64)
    r, g, b = (int(c) for c in unmix_rgb(blended, bg, amount))
    light_color = Color.from_rgb(r, g, b)
    logger.debug(
        "reverse_dark index=%d %s -> light[%d]=%s", dark_index, color.hex, light_index, light_color.hex
    )

    if light_index == SEED_INDEX:
        return light_color
    return reverse_light(light_color, light_index, engine)


__all__ = [
    "check_index",
    "invert_light_hsv",
    "reverse_light",
    "unmix_rgb",
    "reverse_dark",
]
