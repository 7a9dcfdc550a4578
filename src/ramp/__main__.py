"""
Command line entry for ramp generation and reversal.

Usage:
    python -m ramp generate "#1677ff"
    python -m ramp generate "#1677ff" --dark --background "#141414"
    python -m ramp generate "#1677ff" --format rgb_255
    python -m ramp generate "#1677ff" --theme Dark
    python -m ramp reverse "#91caff" 2
    python -m ramp reverse "#15325b" 2 --dark
    python -m ramp presets --dark

Colors are printed one per line. Errors go to stderr with exit status 2.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from common.logging import setup_default_logging

from .api import generate_ramp, reverse_dark_color, reverse_light_color
from .blend import DEFAULT_BACKGROUND
from .errors import RampError
from .presets import PRESET_COLORS, preset_ramps
from .ramp import Theme
from .ui_helpers import EXPORT_FORMAT_OPTIONS, THEME_OPTIONS, ExportFormat, export_ramp

logger = logging.getLogger(__name__)


def _format_item(item: object) -> str:
    if isinstance(item, tuple):
        return " ".join(f"{v:g}" if isinstance(v, float) else str(v) for v in item)
    return str(item)


def _theme(value: str) -> Theme:
    for label, theme in THEME_OPTIONS:
        if value.strip().lower() == label.lower():
            return theme
    return Theme.from_value(value)


def _add_theme_options(parser: argparse.ArgumentParser, help_dark: str) -> None:
    group = parser.add_mutually_exclusive_group()
    labels = ", ".join(label for label, _ in THEME_OPTIONS)
    group.add_argument("--theme", type=_theme, default=Theme.LIGHT, help=f"ramp theme: {labels}")
    group.add_argument("--dark", dest="theme", action="store_const", const=Theme.DARK, help=help_dark)
    parser.add_argument("--background", default=DEFAULT_BACKGROUND, help="dark background color")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ramp", description="10-step color ramps from a seed color")
    parser.add_argument("--log-level", default=None, help="logging level (default: $RAMP_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="print the ramp of a seed color")
    gen.add_argument("seed", help="seed color, #rgb or #rrggbb")
    _add_theme_options(gen, "same as --theme dark")
    gen.add_argument(
        "--format",
        default=ExportFormat.HEX.value,
        choices=[f.value for f in ExportFormat],
        help="output format: " + ", ".join(f"{fmt.value} ({label})" for label, fmt in EXPORT_FORMAT_OPTIONS),
    )

    rev = sub.add_parser("reverse", help="recover the seed from one ramp entry")
    rev.add_argument("color", help="ramp entry, #rgb or #rrggbb")
    rev.add_argument("index", type=int, help="position of the entry in its ramp (0-9)")
    _add_theme_options(rev, "the entry comes from a dark ramp")

    pre = sub.add_parser("presets", help="print the ramp of every preset color")
    _add_theme_options(pre, "same as --theme dark")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)
    theme = args.theme

    try:
        if args.command == "generate":
            colors = generate_ramp(args.seed, theme, args.background)
            for item in export_ramp(colors, args.format):
                print(_format_item(item))
        elif args.command == "reverse":
            if theme is Theme.DARK:
                print(reverse_dark_color(args.color, args.index, args.background))
            else:
                print(reverse_light_color(args.color, args.index))
        elif args.command == "presets":
            for name, colors in preset_ramps(theme, args.background).items():
                print(f"{name:<9} {PRESET_COLORS[name]}  {' '.join(colors)}")
    except RampError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
