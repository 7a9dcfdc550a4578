from __future__ import annotations

"""Rounding-defined color conversions between hex, RGB, HSV and HSL.

This module defines the :class:`ColorEngine` protocol and a default
implementation whose rounding rules are part of the contract: channels are
8-bit integers, hue is an integer degree, and saturation/value are kept at
two decimals. All rounding is half-up, never banker's rounding, so ramps
computed here match ramps computed by other tools built on the same rules.
"""

import math
import re
from typing import Protocol, Tuple

from .errors import InvalidColorFormat


HSV = Tuple[float, float, float]
RGB = Tuple[int, int, int]
HSL = Tuple[int, int, int]

_HEX_RE = re.compile(r"#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")
_HSL_RE = re.compile(r"^hsl\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})%\s*,\s*([0-9]{1,3})%\s*\)$")
_RGB_RE = re.compile(r"^rgb\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*\)$")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from negative infinity."""
    return int(math.floor(x + 0.5))


def round2(x: float) -> float:
    """Round to two decimals with :func:`round_half_up` semantics."""
    return math.floor(x * 100 + 0.5) / 100


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


class ColorEngine(Protocol):
    """Protocol abstracting the RGB/HSV conversions used by ramp code."""

    def rgb_to_hsv(self, r: int, g: int, b: int) -> HSV: ...

    def hsv_to_rgb(self, h: float, s: float, v: float) -> RGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation using the piecewise hue-sector formulas."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return h % 360.0

    def rgb_to_hsv(self, r: int, g: int, b: int) -> HSV:
        """Convert 8-bit RGB to (h, s, v).

        ``h`` is an integer degree in [0, 360); ``s`` and ``v`` are in
        [0, 1] and rounded to two decimals.
        """
        mx = max(r, g, b)
        mn = min(r, g, b)
        delta = mx - mn
        if delta == 0:
            h = 0
        elif r == mx:
            h = round_half_up(60 * ((g - b) / delta + (6 if g < b else 0)))
        elif g == mx:
            h = round_half_up(60 * ((b - r) / delta + 2))
        else:
            h = round_half_up(60 * ((r - g) / delta + 4))
        s = 0.0 if delta == 0 else delta / mx
        v = mx / 255
        return (float(h % 360), round2(s), round2(v))

    def hsv_to_rgb(self, h: float, s: float, v: float) -> RGB:
        """Convert (h, s, v) to 8-bit RGB, rounding each channel half-up."""
        grey = round_half_up(v * 255)
        if s <= 0:
            return (grey, grey, grey)

        hh = self.normalize_hue(h) / 60
        i = math.floor(hh)
        ff = hh - i
        p = round_half_up(v * (1.0 - s) * 255)
        q = round_half_up(v * (1.0 - s * ff) * 255)
        t = round_half_up(v * (1.0 - s * (1.0 - ff)) * 255)

        if i == 0:
            return (grey, t, p)
        if i == 1:
            return (q, grey, p)
        if i == 2:
            return (p, grey, t)
        if i == 3:
            return (p, q, grey)
        if i == 4:
            return (t, p, grey)
        return (grey, p, q)


def parse_hex(hex_str: str) -> RGB:
    """Parse ``#rgb`` or ``#rrggbb`` (case-insensitive) into 8-bit RGB."""
    if not isinstance(hex_str, str):
        raise InvalidColorFormat(f"hex color must be a string, got {type(hex_str).__name__}")
    m = _HEX_RE.fullmatch(hex_str)
    if m is None:
        raise InvalidColorFormat(f"invalid hex color: '{hex_str}' (expected #rgb or #rrggbb)")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as lowercase ``#rrggbb``."""
    r_i = int(clamp(round_half_up(r), 0, 255))
    g_i = int(clamp(round_half_up(g), 0, 255))
    b_i = int(clamp(round_half_up(b), 0, 255))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


def normalize_hex(hex_str: str) -> str:
    """Return the canonical lowercase 6-digit form of a hex color."""
    return rgb_to_hex(*parse_hex(hex_str))


def hex_to_hsv(hex_str: str, engine: ColorEngine | None = None) -> HSV:
    if engine is None:
        engine = DefaultColorEngine()
    return engine.rgb_to_hsv(*parse_hex(hex_str))


def hsv_to_hex(h: float, s: float, v: float, engine: ColorEngine | None = None) -> str:
    if engine is None:
        engine = DefaultColorEngine()
    return rgb_to_hex(*engine.hsv_to_rgb(h, s, v))


# --- HSL (integer percentages), used for text input ---


def hsl_to_rgb(h: int, s: int, l: int) -> RGB:
    """Convert HSL with ``s``/``l`` in percent to 8-bit RGB."""
    s_norm = s / 100
    l_norm = l / 100
    h = h % 360

    c = (1 - abs(2 * l_norm - 1)) * s_norm
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l_norm - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        round_half_up((r + m) * 255),
        round_half_up((g + m) * 255),
        round_half_up((b + m) * 255),
    )


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 8-bit RGB to HSL with integer degrees and percentages."""
    rn, gn, bn = r / 255, g / 255, b / 255
    mx = max(rn, gn, bn)
    mn = min(rn, gn, bn)
    diff = mx - mn
    l = (mx + mn) / 2

    h = 0.0
    s = 0.0
    if diff != 0:
        s = diff / (2 - mx - mn) if l > 0.5 else diff / (mx + mn)
        if mx == rn:
            h = ((gn - bn) / diff + (6 if gn < bn else 0)) / 6
        elif mx == gn:
            h = ((bn - rn) / diff + 2) / 6
        else:
            h = ((rn - gn) / diff + 4) / 6

    return (round_half_up(h * 360) % 360, round_half_up(s * 100), round_half_up(l * 100))


def hex_to_hsl(hex_str: str) -> HSL:
    return rgb_to_hsl(*parse_hex(hex_str))


def hsl_to_hex(h: int, s: int, l: int) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def parse_hsl(text: str) -> HSL:
    """Parse ``hsl(h, s%, l%)`` with ``h`` in [0, 360] and ``s``/``l`` in [0, 100]."""
    m = _HSL_RE.match(text.strip())
    if m is None:
        raise InvalidColorFormat(f"invalid hsl color: '{text}' (expected hsl(h, s%, l%))")
    h, s, l = (int(g) for g in m.groups())
    if h > 360 or s > 100 or l > 100:
        raise InvalidColorFormat(f"hsl component out of range: '{text}'")
    return (h, s, l)


def parse_rgb(text: str) -> RGB:
    """Parse ``rgb(r, g, b)`` with each channel in [0, 255]."""
    m = _RGB_RE.match(text.strip())
    if m is None:
        raise InvalidColorFormat(f"invalid rgb color: '{text}' (expected rgb(r, g, b))")
    r, g, b = (int(c) for c in m.groups())
    if max(r, g, b) > 255:
        raise InvalidColorFormat(f"rgb channel out of range: '{text}'")
    return (r, g, b)


__all__ = [
    "HSV",
    "RGB",
    "HSL",
    "ColorEngine",
    "DefaultColorEngine",
    "round_half_up",
    "round2",
    "clamp",
    "parse_hex",
    "rgb_to_hex",
    "normalize_hex",
    "hex_to_hsv",
    "hsv_to_hex",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "hex_to_hsl",
    "hsl_to_hex",
    "parse_hsl",
    "parse_rgb",
]
