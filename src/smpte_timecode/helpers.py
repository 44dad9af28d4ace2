"""Frame/time conversion helpers for Timecode handling.

All functions here are pure: they take a total frame count or the
``(hours, minutes, seconds, frames)`` fields plus a framerate and return the
other representation. Signs are never folded into the fields; callers keep
the sign of a total frame count separately and pass its magnitude around.
"""

from __future__ import annotations

import re
from fractions import Fraction

from .framerate import Framerate

# Full-match patterns, no "^...$" so that a trailing newline is rejected too.
SMPTE_PATTERN = re.compile(r"(-)?([0-9]{2}):([0-9]{2}):([0-9]{2})[:;]([0-9]{2})")
SUBTITLE_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2}),([0-9]{3})")

# Number of drop frames is 6% of framerate rounded to nearest integer
_DROP_FRAME_RATIO = Fraction("0.066666")


def drop_frames(framerate: Framerate) -> int:
    """Return the frame numbers skipped at each non-tenth minute.

    Args:
        framerate (Framerate): The framerate.

    Returns:
        int: 2 for 29.97 DF, 4 for 59.94 DF and 0 for every non-drop rate.
    """
    if not framerate.drop_frame:
        return 0
    return round(framerate.nominal * _DROP_FRAME_RATIO)


def frames_per_24_hours(framerate: Framerate) -> int:
    """Return the number of frames in one 24 hour timecode cycle."""
    if framerate.drop_frame:
        return round(framerate.nominal * 60 * 60) * 24
    return framerate.timebase * 60 * 60 * 24


def frames_to_tc(frames: int, framerate: Framerate) -> tuple[int, int, int, int]:
    """Convert a total frame count to timecode fields.

    Only the magnitude of ``frames`` is used. Non-drop-frame hours grow
    without bound, drop-frame counts roll over after 24 hours.

    Args:
        frames (int): Total number of frames, 0 being 00:00:00:00.
        framerate (Framerate): The framerate to decompose with.

    Returns:
        tuple: A tuple containing the hours, minutes, seconds and frames.
    """
    frame_number = abs(frames)
    ifps = framerate.timebase

    if framerate.drop_frame:
        ffps = framerate.nominal
        dropped = drop_frames(framerate)

        # Number of frames per ten minutes
        frames_per_10_minutes = round(ffps * 60 * 10)

        # Number of frames per minute is the round of the framerate * 60 minus
        # the number of dropped frames
        frames_per_minute = ifps * 60 - dropped

        # timecode rolls over after 24 hours
        frame_number %= frames_per_24_hours(framerate)

        d = frame_number // frames_per_10_minutes
        m = frame_number % frames_per_10_minutes
        if m > dropped:
            frame_number += (dropped * 9 * d) + dropped * (
                (m - dropped) // frames_per_minute
            )
        else:
            frame_number += dropped * 9 * d

    frs = frame_number % ifps
    secs = (frame_number // ifps) % 60
    mins = ((frame_number // ifps) // 60) % 60
    hrs = ((frame_number // ifps) // 60) // 60

    return hrs, mins, secs, frs


def tc_to_frames(
    hours: int, minutes: int, seconds: int, frames: int, framerate: Framerate
) -> int:
    """Convert timecode fields to a total frame count.

    The fields are not range checked here, see
    :meth:`.Timecode.from_parts` for the validating constructor.

    Args:
        hours (int): The hours field.
        minutes (int): The minutes field.
        seconds (int): The seconds field.
        frames (int): The frames field.
        framerate (Framerate): The framerate to compose with.

    Returns:
        int: The number of frames from 00:00:00:00.
    """
    dropped = drop_frames(framerate)

    # We don't need the exact framerate anymore, we just need it rounded to
    # nearest integer
    ifps = framerate.timebase

    # Number of frames per hour (non-drop)
    hour_frames = ifps * 60 * 60

    # Number of frames per minute (non-drop)
    minute_frames = ifps * 60

    # Total number of minutes
    total_minutes = (60 * hours) + minutes

    return (
        (hour_frames * hours)
        + (minute_frames * minutes)
        + (ifps * seconds)
        + frames
    ) - (dropped * (total_minutes - (total_minutes // 10)))


def duration_to_frames(
    hours: int, minutes: int, seconds: int, framerate: Framerate
) -> int:
    """Return the signed frame delta of a duration at the given framerate.

    The duration is normalised to hours, minutes and seconds first, so at
    drop-frame rates 60 seconds and 1 minute give the same number of frames.
    At 29.97 DF one minute is 1798 frames, ten minutes 17982 and one hour
    107892.
    """
    total_seconds = hours * 3600 + minutes * 60 + seconds
    sign = -1 if total_seconds < 0 else 1
    hrs, remainder = divmod(abs(total_seconds), 3600)
    mins, secs = divmod(remainder, 60)
    return sign * tc_to_frames(hrs, mins, secs, 0, framerate)


def is_dropped_frame_label(
    minutes: int, seconds: int, frames: int, framerate: Framerate
) -> bool:
    """Return True if drop-frame counting skips this frame label.

    Drop-frame timecode skips the first 2 (29.97) or 4 (59.94) frame numbers
    at the start of every minute, except minutes divisible by ten.
    """
    return (
        framerate.drop_frame
        and seconds == 0
        and minutes % 10 != 0
        and frames < drop_frames(framerate)
    )


def parse_timecode(timecode: str) -> tuple[bool, int, int, int, int] | None:
    """Parse a SMPTE timecode string.

    ':' and ';' are accepted as the frame delimiter regardless of the
    framerate the result is used with.

    Args:
        timecode (str): A string like "10:00:00:00", "10:00:00;00" or
            "-01:00:00:00".

    Returns:
        (bool, int, int, int, int) | None: The sign flag (True if negative),
            hours, minutes, seconds and frames, or None if the string does not
            follow the SMPTE format.
    """
    if not isinstance(timecode, str):
        return None
    match = SMPTE_PATTERN.fullmatch(timecode)
    if match is None:
        return None
    sign, hrs, mins, secs, frs = match.groups()
    return sign is not None, int(hrs), int(mins), int(secs), int(frs)


def parse_subtitle(subtitle: str) -> tuple[int, int, int, int] | None:
    """Parse a subtitle timecode string like "00:01:02,345".

    Returns:
        (int, int, int, int) | None: The hours, minutes, seconds and
            milliseconds, or None if the string does not match.
    """
    if not isinstance(subtitle, str):
        return None
    match = SUBTITLE_PATTERN.fullmatch(subtitle)
    if match is None:
        return None
    hrs, mins, secs, msecs = map(int, match.groups())
    return hrs, mins, secs, msecs


def frame_to_milliseconds(frame: int, framerate: Framerate) -> int:
    """Return the millisecond offset of a frame number within its second."""
    return round(Fraction(frame) / framerate.nominal * 1000)


def milliseconds_to_frame(milliseconds: int, framerate: Framerate) -> int:
    """Return the frame number closest to a millisecond offset.

    The result can be equal to the timebase for offsets close to a full
    second, e.g. 999 ms at 25 fps rounds to frame 25.
    """
    return round(Fraction(milliseconds) * framerate.nominal / 1000)
