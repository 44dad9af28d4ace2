"""SMPTE timecode calculations with drop-frame support."""

import logging

from .convert import (
    add_frames,
    add_hours,
    add_minutes,
    add_seconds,
    convert_framerate,
    subtitle_to_timecode,
    timecode_to_subtitle,
)
from .framerate import (
    FormatOption,
    Framerate,
    frame_delimiter,
    is_drop_frame,
    nominal_rate,
    timebase,
)
from .timecode import (
    FormatError,
    FramerateMismatchError,
    RangeError,
    Timecode,
    TimecodeBuilder,
    TimecodeError,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FormatError",
    "FormatOption",
    "Framerate",
    "FramerateMismatchError",
    "RangeError",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeError",
    "add_frames",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "convert_framerate",
    "frame_delimiter",
    "is_drop_frame",
    "nominal_rate",
    "subtitle_to_timecode",
    "timebase",
    "timecode_to_subtitle",
]
