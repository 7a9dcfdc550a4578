from __future__ import annotations

"""Core color types used by the ramp library.

This module defines a small immutable :class:`Color` value holding the
8-bit RGB channels and their canonical hex form, and a wrapper for
user-supplied color inputs in various formats.
"""

from dataclasses import dataclass
from typing import Union

from .engine import (
    HSV,
    RGB,
    ColorEngine,
    DefaultColorEngine,
    clamp,
    hsl_to_rgb,
    parse_hex,
    parse_hsl,
    parse_rgb,
    rgb_to_hex,
    round_half_up,
)
from .errors import InvalidColorFormat


@dataclass(frozen=True)
class Color:
    """Concrete 8-bit sRGB color.

    Attributes
    ----------
    rgb:
        Tuple of (r, g, b) integers in [0, 255].
    hex:
        Lowercase ``#rrggbb`` representation of ``rgb``.
    """

    rgb: RGB
    hex: str

    def to_hex(self) -> str:
        """Return hex representation of the color."""
        return self.hex

    def to_rgb(self) -> RGB:
        """Return (r, g, b) in [0, 255]."""
        return self.rgb

    def to_hsv(self, engine: ColorEngine | None = None) -> HSV:
        """Return (h, s, v) under the engine's rounding contract."""
        if engine is None:
            engine = DefaultColorEngine()
        return engine.rgb_to_hsv(*self.rgb)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        """Create a Color from channels, clamping them into [0, 255]."""
        rgb = (
            int(clamp(round_half_up(r), 0, 255)),
            int(clamp(round_half_up(g), 0, 255)),
            int(clamp(round_half_up(b), 0, 255)),
        )
        return cls(rgb=rgb, hex=rgb_to_hex(*rgb))

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from ``#rgb`` or ``#rrggbb``."""
        rgb = parse_hex(hex_str)
        return cls(rgb=rgb, hex=rgb_to_hex(*rgb))

    @classmethod
    def from_hsv(
        cls,
        h: float,
        s: float,
        v: float,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from HSV, clamping ``s`` and ``v`` into [0, 1].

        Parameters
        ----------
        h, s, v:
            Hue in degrees (normalized by the engine), saturation and value.
        engine:
            ColorEngine used for conversion. If None, DefaultColorEngine is used.
        """
        if engine is None:
            engine = DefaultColorEngine()
        rgb = engine.hsv_to_rgb(h, clamp(s, 0.0, 1.0), clamp(v, 0.0, 1.0))
        return cls(rgb=rgb, hex=rgb_to_hex(*rgb))

    @property
    def is_grey(self) -> bool:
        """True when all three channels are equal."""
        return max(self.rgb) == min(self.rgb)

    def __str__(self) -> str:
        return self.hex


class ColorInput:
    """User-facing color input wrapper supporting multiple text formats.

    Use one of the constructor-like class methods to create instances, or
    :meth:`parse` to detect the format from a string.
    """

    def __init__(self, *, _mode: str, _value) -> None:
        self._mode = _mode
        self._value = _value

    @classmethod
    def from_hex(cls, hex_str: str) -> "ColorInput":
        """Create ColorInput from ``#rgb`` or ``#rrggbb``."""
        return cls(_mode="rgb", _value=parse_hex(hex_str))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "ColorInput":
        """Create ColorInput from 8-bit channels."""
        for name, v in (("r", r), ("g", g), ("b", b)):
            if not (0 <= v <= 255):
                raise InvalidColorFormat(f"{name} must be in [0, 255].")
        return cls(_mode="rgb", _value=(int(r), int(g), int(b)))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "ColorInput":
        """Create ColorInput from HSV with ``s``/``v`` in [0, 1]."""
        if not (0.0 <= s <= 1.0):
            raise InvalidColorFormat("s must be in [0, 1].")
        if not (0.0 <= v <= 1.0):
            raise InvalidColorFormat("v must be in [0, 1].")
        return cls(_mode="hsv", _value=(h, s, v))

    @classmethod
    def from_hsl(cls, h: int, s: int, l: int) -> "ColorInput":
        """Create ColorInput from HSL with ``s``/``l`` in percent."""
        if not (0 <= s <= 100 and 0 <= l <= 100):
            raise InvalidColorFormat("s and l must be in [0, 100].")
        return cls(_mode="hsl", _value=(h, s, l))

    @classmethod
    def parse(cls, text: str) -> "ColorInput":
        """Detect and parse ``#hex``, ``rgb(...)`` or ``hsl(...)`` text.

        Surrounding whitespace is trimmed here, unlike :func:`parse_hex`.
        """
        if not isinstance(text, str):
            raise InvalidColorFormat(f"color must be a string, got {type(text).__name__}")
        t = text.strip().lower()
        if t.startswith("hsl("):
            return cls.from_hsl(*parse_hsl(t))
        if t.startswith("rgb("):
            return cls.from_rgb(*parse_rgb(t))
        return cls.from_hex(t)

    def to_color(self, engine: ColorEngine | None = None) -> Color:
        """Resolve the input into a :class:`Color`."""
        if self._mode == "rgb":
            r, g, b = self._value
            return Color(rgb=(r, g, b), hex=rgb_to_hex(r, g, b))

        if self._mode == "hsv":
            h, s, v = self._value
            return Color.from_hsv(h, s, v, engine)

        if self._mode == "hsl":
            r, g, b = hsl_to_rgb(*self._value)
            return Color(rgb=(r, g, b), hex=rgb_to_hex(r, g, b))

        raise RuntimeError(f"Unknown ColorInput mode: {self._mode}")


ColorLike = Union[str, Color, ColorInput]


def as_color(value: ColorLike, engine: ColorEngine | None = None) -> Color:
    """Coerce a hex string, :class:`Color` or :class:`ColorInput` into a Color.

    Strings must be hex (``#rgb``/``#rrggbb``); other text formats go
    through :meth:`ColorInput.parse` first.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, ColorInput):
        return value.to_color(engine)
    if isinstance(value, str):
        return Color.from_hex(value)
    raise InvalidColorFormat(f"unsupported color type: {type(value)!r}")


__all__ = ["Color", "ColorInput", "ColorLike", "as_color"]
