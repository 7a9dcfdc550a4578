from __future__ import annotations

"""Stateful holder for the seed and background an interactive UI edits.

:class:`RampSession` keeps the last valid seed and background, tracks
whether the most recent input for each was valid, and exposes both ramps.
Ramps are recomputed through :func:`ramp.api.generate_ramp`, so repeated
reads hit its memo cache.
"""

import logging
from typing import List

from .api import generate_ramp, reverse_dark_color, reverse_light_color
from .blend import DEFAULT_BACKGROUND
from .color_types import ColorInput
from .errors import InvalidColorFormat
from .ramp import Theme

logger = logging.getLogger(__name__)

DEFAULT_SEED = "#1677ff"


def _parse(text: str) -> str | None:
    try:
        return ColorInput.parse(text).to_color().hex
    except InvalidColorFormat as exc:
        logger.debug("rejected color input %r: %s", text, exc)
        return None


class RampSession:
    """Current seed/background pair plus validity flags.

    - `set_color()` / `set_background_color()` accept ``#hex``, ``rgb()``
      or ``hsl()`` text; invalid text only clears the validity flag.
    - `light_colors` / `dark_colors` are empty while the inputs they
      depend on are invalid.
    """

    def __init__(
        self,
        initial_color: str = DEFAULT_SEED,
        initial_background_color: str = DEFAULT_BACKGROUND,
    ) -> None:
        self._current_color = DEFAULT_SEED
        self._background_color = DEFAULT_BACKGROUND
        self.is_valid_color = True
        self.is_valid_background_color = True
        self.set_color(initial_color)
        self.set_background_color(initial_background_color)

    @property
    def current_color(self) -> str:
        return self._current_color

    @property
    def background_color(self) -> str:
        return self._background_color

    def set_color(self, text: str) -> bool:
        """Set the seed from text; returns whether it was accepted."""
        parsed = _parse(text)
        self.is_valid_color = parsed is not None
        if parsed is not None:
            self._current_color = parsed
        return self.is_valid_color

    def set_background_color(self, text: str) -> bool:
        """Set the dark-theme background from text; returns whether it was accepted."""
        parsed = _parse(text)
        self.is_valid_background_color = parsed is not None
        if parsed is not None:
            self._background_color = parsed
        return self.is_valid_background_color

    @property
    def light_colors(self) -> List[str]:
        if not self.is_valid_color:
            return []
        return generate_ramp(self._current_color, Theme.LIGHT)

    @property
    def dark_colors(self) -> List[str]:
        if not (self.is_valid_color and self.is_valid_background_color):
            return []
        return generate_ramp(self._current_color, Theme.DARK, self._background_color)

    def reverse(self, color: str, index: int, theme: Theme | str = Theme.LIGHT) -> str:
        """Recover a seed from a ramp entry and make it the current seed.

        Dark entries are inverted against the session's background.
        """
        theme = Theme.from_value(theme)
        if theme is Theme.DARK:
            seed = reverse_dark_color(color, index, self._background_color)
        else:
            seed = reverse_light_color(color, index)
        self._current_color = seed
        self.is_valid_color = True
        return seed


__all__ = ["DEFAULT_SEED", "RampSession"]
