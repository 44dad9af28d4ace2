"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import logging
import sys

from .framerate import FormatOption, Framerate, frame_delimiter
from .helpers import (
    duration_to_frames,
    frame_to_milliseconds,
    frames_to_tc,
    is_dropped_frame_label,
    parse_timecode,
    tc_to_frames,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


#%%
class Timecode:
    """The main timecode class.

    Does all the calculation over frames, so the main data it holds is a
    signed total frame count, then when required it converts the frames to a
    timecode by using the frame rate setting. Instances are immutable, every
    arithmetic or conversion method returns a new Timecode.

    Args:
        framerate (Framerate | str | int | float): The frame rate of the
            Timecode instance. Anything accepted by ``Framerate(...)`` can be
            given, e.g. ``Framerate.FPS_29_97_DF``, ``"29.97DF"`` or ``25``.
            Can not be skipped.
        start_timecode (None | str | Timecode): The start timecode, a SMPTE
            string like "10:00:00:00", "10:00:00;00" or "-01:00:00:00", or
            another Timecode whose frame count is reused. If skipped, the
            frames attribute defines the timecode.
        frames (int): Timecode objects can be initialized with a signed
            integer showing the total frames. If both start_timecode and
            frames are skipped the Timecode is 00:00:00:00.
        format_option (FormatOption | None): Overrides the frame delimiter
            used when the Timecode is converted to a string.
    """

    def __init__(
        self,
        framerate: Framerate | str | float,
        start_timecode: str | Self | None = None,
        frames: int | None = None,
        format_option: FormatOption | None = None,
    ) -> None:
        self._framerate = Framerate(framerate)
        if format_option is not None and not isinstance(format_option, FormatOption):
            format_option = FormatOption(format_option)
        self._format_option = format_option
        self._frames = 0

        self._dispatch_set_frames(start_timecode=start_timecode, frames=frames)

    def _dispatch_set_frames(self, **kwargs) -> None:
        """Helper to dispatch the arguments to set the Timecode frames count.

        Args:
            kwargs (dict): dictionary of possible input values to set the frame
            count. The following order of priority applies:
                1. start_timecode: Timecode string, or Timecode object.
                2. frames: frames count of the Timecode.
        """
        if (start_timecode := kwargs.get("start_timecode")) is not None:
            if isinstance(start_timecode, Timecode):
                self._frames = start_timecode.frames
            else:
                self._frames = self._string_to_frames(start_timecode, self._framerate)
        elif (frames := kwargs.get("frames")) is not None:
            self._frames = _check_int(frames, "frames")

    #%% alternative constructors
    @classmethod
    def from_frames(
        cls, frames: int, framerate: Framerate | str | float
    ) -> Timecode:
        """Create a Timecode from a signed total frame count."""
        return cls(framerate, frames=frames)

    @classmethod
    def from_parts(
        cls,
        hour: int,
        minute: int,
        second: int,
        frame: int,
        framerate: Framerate | str | float,
        negative: bool = False,
    ) -> Timecode:
        """Create a Timecode from its hours, minutes, seconds and frames.

        Args:
            hour (int): The hours, any non-negative integer.
            minute (int): The minutes, 0-59.
            second (int): The seconds, 0-59.
            frame (int): The frames, 0 up to the framerate's timebase minus 1.
            framerate (Framerate | str | float): The frame rate.
            negative (bool): If True the Timecode is placed before
                00:00:00:00.

        Raises:
            RangeError: If a field is outside its legal range or the frame
                number is skipped by drop-frame counting.

        Returns:
            Timecode: The new Timecode instance.
        """
        framerate = Framerate(framerate)
        frames = cls._parts_to_frames(
            hour, minute, second, frame, framerate, negative=negative
        )
        return cls(framerate, frames=frames)

    @classmethod
    def from_string(
        cls, timecode: str, framerate: Framerate | str | float
    ) -> Timecode:
        """Create a Timecode by parsing a SMPTE timecode string.

        Raises:
            FormatError: If the string is not formatted as [-]HH:MM:SS:FF.
        """
        return cls(framerate, start_timecode=timecode)

    @staticmethod
    def _parts_to_frames(
        hour: int,
        minute: int,
        second: int,
        frame: int,
        framerate: Framerate,
        negative: bool = False,
    ) -> int:
        for name, value in (
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("frame", frame),
        ):
            _check_int(value, name)
            if value < 0:
                raise RangeError(f"{name} can not be negative, got {value}.")

        if minute >= 60:
            raise RangeError(f"minute should be in 0-59, got {minute}.")
        if second >= 60:
            raise RangeError(f"second should be in 0-59, got {second}.")
        if frame >= framerate.timebase:
            raise RangeError(
                f"frame should be in 0-{framerate.timebase - 1} at "
                f"{framerate.value} fps, got {frame}."
            )
        if is_dropped_frame_label(minute, second, frame, framerate):
            raise RangeError(
                f"Frame {minute:02d}:{second:02d};{frame:02d} does not exist in "
                f"{framerate.value} drop-frame timecode."
            )

        frames = tc_to_frames(hour, minute, second, frame, framerate)
        return -frames if negative else frames

    @classmethod
    def _string_to_frames(cls, timecode: str, framerate: Framerate) -> int:
        parsed = parse_timecode(timecode)
        if parsed is None:
            logger.debug("Rejected SMPTE timecode %r", timecode)
            raise FormatError(f"Invalid SMPTE timecode format: {timecode!r}")
        negative, hrs, mins, secs, frs = parsed
        return cls._parts_to_frames(hrs, mins, secs, frs, framerate, negative=negative)

    #%% attributes
    @property
    def framerate(self) -> Framerate:
        """Return the framerate of this Timecode."""
        return self._framerate

    @property
    def frames(self) -> int:
        """Return the signed total frame count, 0 being 00:00:00:00.

        Returns:
            int: The frames attribute value.
        """
        return self._frames

    @property
    def format_option(self) -> FormatOption | None:
        """Return the delimiter override used by :meth:`to_string`."""
        return self._format_option

    @property
    def drop_frame(self) -> bool:
        """Return True if the framerate uses drop-frame counting."""
        return self._framerate.drop_frame

    @property
    def is_negative(self) -> bool:
        """Return True if this Timecode lies before 00:00:00:00."""
        return self._frames < 0

    @property
    def frame_delimiter(self) -> str:
        """Return the delimiter placed before the frames field.

        Returns:
            str: The delimiter of the format option if one is set, otherwise
                ";" for drop-frame and ":" for non-drop-frame framerates.
        """
        return frame_delimiter(self._format_option or self._framerate)

    @property
    def hour(self) -> int:
        """Return the hours part of the timecode.

        Returns:
            int: The hours part of the timecode.
        """
        hrs, _, _, _ = frames_to_tc(self._frames, self._framerate)
        return hrs

    @property
    def minute(self) -> int:
        """Return the minutes part of the timecode.

        Returns:
            int: The minutes part of the timecode.
        """
        _, mins, _, _ = frames_to_tc(self._frames, self._framerate)
        return mins

    @property
    def second(self) -> int:
        """Return the seconds part of the timecode.

        Returns:
            int: The seconds part of the timecode.
        """
        _, _, secs, _ = frames_to_tc(self._frames, self._framerate)
        return secs

    @property
    def frame(self) -> int:
        """Return the frames part of the timecode.

        Returns:
            int: The frames part of the timecode.
        """
        _, _, _, frs = frames_to_tc(self._frames, self._framerate)
        return frs

    @property
    def parts(self) -> tuple[int, int, int, int]:
        """Return the hours, minutes, seconds and frames of the magnitude."""
        return frames_to_tc(self._frames, self._framerate)

    #%% arithmetic
    def _with_frames(
        self, frames: int, framerate: Framerate | None = None
    ) -> Timecode:
        return Timecode(
            framerate or self._framerate,
            frames=frames,
            format_option=self._format_option,
        )

    def add_frames(self, frames: int) -> Timecode:
        """Return a new Timecode with frames added to this one.

        Args:
            frames (int): The number of frames to add, negative values
                subtract frames. The result may lie before 00:00:00:00.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self._with_frames(self._frames + _check_int(frames, "frames"))

    def sub_frames(self, frames: int) -> Timecode:
        """Return a new Timecode with frames subtracted from this one."""
        return self.add_frames(-_check_int(frames, "frames"))

    def add_seconds(self, seconds: int) -> Timecode:
        """Return a new Timecode with seconds added, using this framerate."""
        delta = duration_to_frames(0, 0, _check_int(seconds, "seconds"), self._framerate)
        return self._with_frames(self._frames + delta)

    def add_minutes(self, minutes: int) -> Timecode:
        """Return a new Timecode with minutes added, using this framerate."""
        delta = duration_to_frames(0, _check_int(minutes, "minutes"), 0, self._framerate)
        return self._with_frames(self._frames + delta)

    def add_hours(self, hours: int) -> Timecode:
        """Return a new Timecode with hours added, using this framerate.

        Args:
            hours (int): The number of hours to add, negative values subtract.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        delta = duration_to_frames(_check_int(hours, "hours"), 0, 0, self._framerate)
        return self._with_frames(self._frames + delta)

    def convert_framerate(self, framerate: Framerate | str | float) -> Timecode:
        """Return a new Timecode with the same frame count at another framerate.

        The total number of frames is kept, not the elapsed duration, so
        10:00:00:00 at 24 fps becomes 09:36:00:00 at 25 fps.

        Args:
            framerate (Framerate | str | float): The target framerate.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        target = Framerate(framerate)
        logger.debug(
            "Converting %d frames from %s to %s fps",
            self._frames,
            self._framerate.value,
            target.value,
        )
        return self._with_frames(self._frames, framerate=target)

    def _check_framerate(self, other: Timecode, operation: str) -> None:
        if self._framerate != other.framerate:
            raise FramerateMismatchError(
                f"Can not {operation} Timecodes with different framerates: "
                f"{self._framerate.value} and {other.framerate.value}."
            )

    def _coerce(self, other: str | Timecode, operation: str) -> Timecode:
        if isinstance(other, str):
            other = Timecode(self._framerate, other)
        if not isinstance(other, Timecode):
            raise TypeError(
                f"'{operation}' not supported between instances of 'Timecode' "
                f"and '{other.__class__.__name__}'"
            )
        self._check_framerate(other, "compare")
        return other

    def add(self, other: int | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames added to this one.

        Args:
            other (int | Timecode): Either an int value or a Timecode in which
                the frames are used for the calculation.

        Raises:
            FramerateMismatchError: If other is a Timecode with a different
                framerate.
            TimecodeError: If the other is not an int or Timecode.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        if isinstance(other, Timecode):
            self._check_framerate(other, "add")
            return self._with_frames(self._frames + other.frames)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_frames(other)
        raise TimecodeError(
            f"Type {other.__class__.__name__} not supported for arithmetic."
        )

    def subtract(self, other: int | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames subtracted.

        The result keeps its sign, so subtracting a later Timecode gives a
        negative Timecode.

        Raises:
            FramerateMismatchError: If other is a Timecode with a different
                framerate.
            TimecodeError: If the other is not an int or Timecode.
        """
        if isinstance(other, Timecode):
            self._check_framerate(other, "subtract")
            return self._with_frames(self._frames - other.frames)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.sub_frames(other)
        raise TimecodeError(
            f"Type {other.__class__.__name__} not supported for arithmetic."
        )

    def compare(self, other: str | Timecode) -> int:
        """Compare this Timecode to another one of the same framerate.

        Args:
            other (str | Timecode): A Timecode, or a SMPTE string read at this
                Timecode's framerate.

        Raises:
            FramerateMismatchError: If the framerates differ.

        Returns:
            int: -1, 0 or 1 if this Timecode is before, equal to or after
                the other.
        """
        other = self._coerce(other, "compare")
        return (self._frames > other.frames) - (self._frames < other.frames)

    def equals(self, other: str | Timecode) -> bool:
        """Return True if both Timecodes hold the same frames and framerate.

        Raises:
            FramerateMismatchError: If the framerates differ.
        """
        return self.compare(other) == 0

    def __add__(self, other: int | Timecode) -> Timecode:
        return self.add(other)

    def __sub__(self, other: int | Timecode) -> Timecode:
        return self.subtract(other)

    def __eq__(self, other: object) -> bool:
        """Override the equality operator.

        Args:
            other (str | Timecode): Either a str representing a Timecode with
                the same frame rate of this one, or a Timecode to compare with.

        Raises:
            FramerateMismatchError: If other is a Timecode with a different
                framerate.

        Returns:
            bool: True if the other is equal to this Timecode instance.
        """
        if isinstance(other, (str, Timecode)):
            return self.compare(other) == 0
        return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: str | Timecode) -> bool:
        return self._frames < self._coerce(other, "<").frames

    def __le__(self, other: str | Timecode) -> bool:
        return self._frames <= self._coerce(other, "<=").frames

    def __gt__(self, other: str | Timecode) -> bool:
        return self._frames > self._coerce(other, ">").frames

    def __ge__(self, other: str | Timecode) -> bool:
        return self._frames >= self._coerce(other, ">=").frames

    def __hash__(self) -> int:
        return hash((self._frames, self._framerate))

    #%% formatting
    def to_string(self, format_option: FormatOption | None = None) -> str:
        """Return the SMPTE string of this Timecode.

        Args:
            format_option (FormatOption | None): Forces the frame delimiter.
                Defaults to the format option of this instance, or the
                delimiter implied by the framerate.

        Returns:
            str: A string formatted as [-]HH:MM:SS:FF, hours may use more than
                two digits.
        """
        hrs, mins, secs, frs = self.parts
        sign = "-" if self.is_negative else ""
        delimiter = frame_delimiter(
            format_option or self._format_option or self._framerate
        )
        return f"{sign}{hrs:02d}:{mins:02d}:{secs:02d}{delimiter}{frs:02d}"

    def to_subtitle_string(self) -> str:
        """Return the subtitle (SubRip) string of this Timecode.

        The frames field is replaced by its offset in milliseconds within the
        second, e.g. frame 12 at 25 fps gives "10:00:00,480".

        Returns:
            str: A string formatted as [-]HH:MM:SS,mmm.
        """
        hrs, mins, secs, frs = self.parts
        sign = "-" if self.is_negative else ""
        msecs = frame_to_milliseconds(frs, self._framerate)
        return f"{sign}{hrs:02d}:{mins:02d}:{secs:02d},{msecs:03d}"

    def __int__(self) -> int:
        return self._frames

    def __str__(self) -> str:
        """Return the actual Timecode as a string.

        Returns:
            str: The string of this Timecode.
        """
        return self.to_string()

    def __repr__(self) -> str:
        """Return the string representation of this Timecode instance.

        Returns:
            str: The string representation of this Timecode instance.
        """
        # use frames= as that is agnostic to drop_frame
        return f"{__class__.__name__}('{self._framerate.value}', frames={self._frames})"
####


def _check_int(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(
            f"Timecode {name} should be an integer, not a "
            f"{value.__class__.__name__}"
        )
    return value


#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    A list of kwargs of class Timecode can be provided to the builder, which
    will be used when the builder instance is called to create new Timecodes.

    Example:
        >>> pal = TimecodeBuilder(framerate=Framerate.FPS_25)
        >>> str(pal("10:00:00:00").add_frames(50))
        '10:00:02:00'

    Args:
        kwargs (dict): list of pre-configured arguments for the Timecodes
        instantiated by calling this builder. Refer to Timecode docu.
    """

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs

    def __call__(self, start_timecode: str | Timecode | None = None, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and user arguments.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        return Timecode(start_timecode=start_timecode, **kwargs)
####


#%%
class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class FormatError(TimecodeError, ValueError):
    """Raised when a string does not follow the expected timecode format."""


class RangeError(TimecodeError, ValueError):
    """Raised when a timecode field is outside of its legal range."""


class FramerateMismatchError(TimecodeError):
    """Raised when Timecodes of different framerates are compared or combined."""
