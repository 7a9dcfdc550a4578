from __future__ import annotations

"""Exception types raised by the ramp library.

Every error derives from :class:`RampError` and from the builtin exception
family it most resembles, so callers may catch either.
"""


class RampError(Exception):
    """Base class for all ramp errors."""


class InvalidColorFormat(RampError, ValueError):
    """A color string or component tuple could not be parsed."""


class IndexOutOfRange(RampError, IndexError):
    """A ramp position outside ``0..9`` was requested."""


class ArithmeticGuard(RampError, ArithmeticError):
    """A blend inversion would divide by a zero amount."""


__all__ = [
    "RampError",
    "InvalidColorFormat",
    "IndexOutOfRange",
    "ArithmeticGuard",
]
