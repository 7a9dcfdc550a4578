from __future__ import annotations

"""High-level public API for generating and reversing ramps.

This module coordinates parsing, the forward generator, the dark blender
and the inverter, and memoises :func:`generate_ramp` results keyed on the
normalised ``(seed, theme, background)``.
"""

import logging
from functools import lru_cache
from typing import Callable, List, Optional, Tuple

from common import settings

from .blend import DEFAULT_BACKGROUND, blend_dark
from .color_types import ColorLike, as_color
from .engine import ColorEngine, DefaultColorEngine
from .generator import generate_light_colors
from .inverse import check_index, reverse_dark, reverse_light
from .ramp import Ramp, Theme

logger = logging.getLogger(__name__)

_cached_compute: Optional[Callable[[str, Theme, Optional[str]], Tuple[str, ...]]] = None


def build_ramp(
    seed: ColorLike,
    theme: Theme | str = Theme.LIGHT,
    background: ColorLike = DEFAULT_BACKGROUND,
    engine: Optional[ColorEngine] = None,
) -> Ramp:
    """Generate a ramp from a seed color.

    Parameters
    ----------
    seed:
        Hex string (``#rgb``/``#rrggbb``), Color or ColorInput.
    theme:
        Theme.LIGHT (alias ``"default"``) or Theme.DARK.
    background:
        Blend base for the dark ramp. Parsed only when ``theme`` is DARK.
    engine:
        Optional ColorEngine for conversions. If None, DefaultColorEngine
        is used.

    Returns
    -------
    Ramp
        10 colors; for LIGHT, position 5 is the seed itself.
    """
    theme = Theme.from_value(theme)
    if engine is None:
        engine = DefaultColorEngine()

    seed_color = as_color(seed, engine)
    light = generate_light_colors(seed_color, engine)
    if theme is Theme.LIGHT:
        return Ramp(seed=seed_color, theme=theme, background=None, colors=light)

    bg_color = as_color(background, engine)
    return Ramp(
        seed=seed_color,
        theme=theme,
        background=bg_color,
        colors=blend_dark(light, bg_color),
    )


def _compute(seed_hex: str, theme: Theme, background_hex: Optional[str]) -> Tuple[str, ...]:
    bg = background_hex if background_hex is not None else DEFAULT_BACKGROUND
    return tuple(build_ramp(seed_hex, theme, bg).hex())


def _get_cached_compute() -> Callable[[str, Theme, Optional[str]], Tuple[str, ...]]:
    global _cached_compute
    if _cached_compute is None:
        maxsize = settings.get().RAMP_CACHE_MAXSIZE
        _cached_compute = lru_cache(maxsize=maxsize)(_compute)
    return _cached_compute


def clear_cache() -> None:
    """Drop memoised ramps; the next call re-reads the cache size setting."""
    global _cached_compute
    _cached_compute = None


def cache_info():
    """Return ``functools`` cache statistics, or None before first use."""
    if _cached_compute is None:
        return None
    return _cached_compute.cache_info()  # type: ignore[attr-defined]


def generate_ramp(
    seed: ColorLike,
    theme: Theme | str = Theme.LIGHT,
    background: ColorLike = DEFAULT_BACKGROUND,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Generate a ramp and return it as 10 lowercase hex strings.

    Raises
    ------
    InvalidColorFormat
        If ``seed`` (or, for DARK, ``background``) cannot be parsed.
    """
    theme = Theme.from_value(theme)
    if engine is not None or not settings.get().RAMP_CACHE_ENABLED:
        return build_ramp(seed, theme, background, engine).hex()

    seed_hex = as_color(seed).hex
    bg_hex = as_color(background).hex if theme is Theme.DARK else None
    compute = _get_cached_compute()
    result = compute(seed_hex, theme, bg_hex)
    logger.debug(
        "generate_ramp %s %s bg=%s %s",
        seed_hex,
        theme.value,
        bg_hex,
        compute.cache_info(),  # type: ignore[attr-defined]
    )
    return list(result)


def reverse_light_color(
    color: ColorLike,
    index: int,
    engine: Optional[ColorEngine] = None,
) -> str:
    """Recover the seed from the light-ramp entry at ``index`` (0-9).

    Raises
    ------
    IndexOutOfRange
        If ``index`` is not an int in 0..9. Checked before ``color`` is parsed.
    InvalidColorFormat
        If ``color`` cannot be parsed.
    """
    index = check_index(index)
    return reverse_light(as_color(color, engine), index, engine).hex


def reverse_dark_color(
    color: ColorLike,
    dark_index: int,
    background: ColorLike = DEFAULT_BACKGROUND,
    engine: Optional[ColorEngine] = None,
) -> str:
    """Recover the seed from the dark-ramp entry at ``dark_index`` (0-9).

    Raises
    ------
    IndexOutOfRange
        If ``dark_index`` is not an int in 0..9. Checked before any parsing.
    InvalidColorFormat
        If ``color`` or ``background`` cannot be parsed.
    ArithmeticGuard
        If the mapping amount for ``dark_index`` is zero.
    """
    dark_index = check_index(dark_index, name="dark_index")
    return reverse_dark(as_color(color, engine), dark_index, as_color(background, engine), engine).hex


__all__ = [
    "build_ramp",
    "generate_ramp",
    "reverse_light_color",
    "reverse_dark_color",
    "clear_cache",
    "cache_info",
]
