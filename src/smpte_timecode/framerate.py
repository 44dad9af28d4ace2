"""Framerate catalog for SMPTE timecodes."""

from __future__ import annotations

from enum import Enum
from fractions import Fraction


class Framerate(Enum):
    """The supported timecode framerates.

    The drop-frame and non-drop-frame variants of 29.97 and 59.94 are
    separate members, so the drop-frame status of a Timecode can only change
    by replacing its framerate.

    A member can be looked up by its label (``Framerate("29.97DF")``) or by
    a number (``Framerate(25)``, ``Framerate(29.97)``). Numbers always
    resolve to the non-drop-frame member.
    """

    FPS_23_976 = "23.976"
    FPS_24 = "24"
    FPS_25 = "25"
    FPS_29_97_NDF = "29.97"
    FPS_29_97_DF = "29.97DF"
    FPS_30 = "30"
    FPS_47_95 = "47.95"
    FPS_48 = "48"
    FPS_50 = "50"
    FPS_59_94_NDF = "59.94"
    FPS_59_94_DF = "59.94DF"
    FPS_60 = "60"

    @classmethod
    def _missing_(cls, value: object) -> Framerate | None:
        if isinstance(value, bool) or not isinstance(
            value, (int, float, Fraction, str)
        ):
            return None
        try:
            # str() keeps 29.97 as "29.97" instead of its binary expansion
            fps = Fraction(str(value)) if isinstance(value, float) else Fraction(value)
        except (ValueError, ZeroDivisionError):
            return None
        for member in cls:
            if not member.drop_frame and member.nominal == fps:
                return member
        return None

    @property
    def nominal(self) -> Fraction:
        """Return the exact nominal rate, e.g. ``Fraction("29.97")``."""
        return _NOMINAL_RATES[self]

    @property
    def drop_frame(self) -> bool:
        """Return True for the drop-frame variants."""
        return self in _DROP_FRAME_RATES

    @property
    def timebase(self) -> int:
        """Return the integer frame count of one timecode second."""
        return round(self.nominal)

    @property
    def delimiter(self) -> str:
        """Return the frame delimiter implied by this framerate."""
        return ";" if self.drop_frame else ":"

    def __str__(self) -> str:
        return self.value


class FormatOption(Enum):
    """Explicit frame delimiter choice used when formatting a Timecode."""

    COLON = ":"
    SEMICOLON = ";"
    COMMA = ","


_NOMINAL_RATES = {
    Framerate.FPS_23_976: Fraction("23.976"),
    Framerate.FPS_24: Fraction(24),
    Framerate.FPS_25: Fraction(25),
    Framerate.FPS_29_97_NDF: Fraction("29.97"),
    Framerate.FPS_29_97_DF: Fraction("29.97"),
    Framerate.FPS_30: Fraction(30),
    Framerate.FPS_47_95: Fraction("47.95"),
    Framerate.FPS_48: Fraction(48),
    Framerate.FPS_50: Fraction(50),
    Framerate.FPS_59_94_NDF: Fraction("59.94"),
    Framerate.FPS_59_94_DF: Fraction("59.94"),
    Framerate.FPS_60: Fraction(60),
}

_DROP_FRAME_RATES = frozenset((Framerate.FPS_29_97_DF, Framerate.FPS_59_94_DF))


def nominal_rate(framerate: Framerate | str | float) -> Fraction:
    """Return the exact nominal rate of the given framerate.

    Args:
        framerate (Framerate | str | float): A Framerate member or any value
            accepted by ``Framerate(...)``.

    Returns:
        Fraction: The nominal rate as an exact fraction.
    """
    return Framerate(framerate).nominal


def is_drop_frame(framerate: Framerate | str | float) -> bool:
    """Return True if the framerate uses drop-frame counting."""
    return Framerate(framerate).drop_frame


def timebase(framerate: Framerate | str | float) -> int:
    """Return the nominal rate rounded to the nearest integer (30 for 29.97)."""
    return Framerate(framerate).timebase


def frame_delimiter(value: Framerate | FormatOption | str | float) -> str:
    """Return the delimiter placed before the frame field.

    Args:
        value (Framerate | FormatOption): A framerate, in which case ";" is
            returned for drop-frame rates and ":" otherwise, or a
            FormatOption forcing a specific delimiter.

    Returns:
        str: One of ":", ";" or ",".
    """
    if isinstance(value, FormatOption):
        return value.value
    return Framerate(value).delimiter
