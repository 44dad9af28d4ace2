"""String based timecode functions.

Every function takes a timecode string and a framerate and returns a new
string, the input format is validated before anything is computed.

    >>> add_frames("10:00:00:00", Framerate.FPS_25, 50)
    '10:00:02:00'
    >>> timecode_to_subtitle("10:00:00:12", Framerate.FPS_25)
    '10:00:00,480'
"""

from __future__ import annotations

import logging

from .framerate import Framerate
from .helpers import (
    drop_frames,
    is_dropped_frame_label,
    milliseconds_to_frame,
    parse_subtitle,
)
from .timecode import FormatError, Timecode

logger = logging.getLogger(__name__)


def add_hours(timecode: str, framerate: Framerate | str | float, hours: int) -> str:
    """Add hours to a SMPTE timecode string.

    Args:
        timecode (str): A SMPTE timecode like "10:00:00:00".
        framerate (Framerate | str | float): The framerate of the timecode.
        hours (int): The number of hours to add, negative values subtract.

    Raises:
        FormatError: If the timecode is not a valid SMPTE string.

    Returns:
        str: The resulting timecode, using the framerate's delimiter.
    """
    return str(Timecode(framerate, timecode).add_hours(hours))


def add_minutes(timecode: str, framerate: Framerate | str | float, minutes: int) -> str:
    """Add minutes to a SMPTE timecode string."""
    return str(Timecode(framerate, timecode).add_minutes(minutes))


def add_seconds(timecode: str, framerate: Framerate | str | float, seconds: int) -> str:
    """Add seconds to a SMPTE timecode string."""
    return str(Timecode(framerate, timecode).add_seconds(seconds))


def add_frames(timecode: str, framerate: Framerate | str | float, frames: int) -> str:
    """Add frames to a SMPTE timecode string."""
    return str(Timecode(framerate, timecode).add_frames(frames))


def convert_framerate(
    timecode: str,
    source: Framerate | str | float,
    target: Framerate | str | float,
) -> str:
    """Read a SMPTE timecode at one framerate and write it at another.

    The frame count is kept, see :meth:`.Timecode.convert_framerate`.

    Returns:
        str: The timecode string at the target framerate.
    """
    return str(Timecode(source, timecode).convert_framerate(target))


def timecode_to_subtitle(timecode: str, framerate: Framerate | str | float) -> str:
    """Convert a SMPTE timecode string to a subtitle timecode string.

    Args:
        timecode (str): A SMPTE timecode like "00:01:02:12".
        framerate (Framerate | str | float): The framerate of the timecode.

    Raises:
        FormatError: If the timecode is not a valid SMPTE string.

    Returns:
        str: A subtitle timecode like "00:01:02,480".
    """
    subtitle = Timecode(framerate, timecode).to_subtitle_string()
    logger.debug("Converted %s to subtitle timecode %s", timecode, subtitle)
    return subtitle


def subtitle_to_timecode(subtitle: str, framerate: Framerate | str | float) -> str:
    """Convert a subtitle timecode string to a SMPTE timecode string.

    The milliseconds are rounded to the nearest frame. A frame rounding up
    to a full second is carried into the seconds field, and at drop-frame
    rates a frame number skipped by drop-frame counting is moved to the first
    existing frame of that second.

    Args:
        subtitle (str): A subtitle timecode like "00:01:02,480".
        framerate (Framerate | str | float): The framerate of the result.

    Raises:
        FormatError: If the subtitle is not formatted as HH:MM:SS,mmm.

    Returns:
        str: The SMPTE timecode using the framerate's delimiter.
    """
    parsed = parse_subtitle(subtitle)
    if parsed is None:
        logger.debug("Rejected subtitle timecode %r", subtitle)
        raise FormatError(f"Invalid subtitle timecode format: {subtitle!r}")
    framerate = Framerate(framerate)

    hrs, mins, secs, msecs = parsed
    frs = milliseconds_to_frame(msecs, framerate)
    if frs >= framerate.timebase:
        frs -= framerate.timebase
        total_seconds = hrs * 3600 + mins * 60 + secs + 1
        hrs, remainder = divmod(total_seconds, 3600)
        mins, secs = divmod(remainder, 60)

    if is_dropped_frame_label(mins, secs, frs, framerate):
        frs = drop_frames(framerate)

    result = Timecode.from_parts(hrs, mins, secs, frs, framerate).to_string()
    logger.debug("Converted subtitle timecode %s to %s", subtitle, result)
    return result
