"""Tests for the string based timecode functions."""

import pytest

from smpte_timecode import (
    FormatError,
    Framerate,
    RangeError,
    add_frames,
    add_hours,
    add_minutes,
    add_seconds,
    convert_framerate,
    subtitle_to_timecode,
    timecode_to_subtitle,
)

DF_29_97 = Framerate.FPS_29_97_DF


def test_add_frames():
    assert add_frames("10:00:00:00", Framerate.FPS_25, 50) == "10:00:02:00"


def test_add_hours_to_negative_drop_frame():
    assert add_hours("10:00:00:00", DF_29_97, -11) == "-01:00:00;00"


def test_add_minutes():
    assert add_minutes("00:59:00:00", Framerate.FPS_25, 2) == "01:01:00:00"


def test_add_seconds():
    assert add_seconds("00:00:59:00", Framerate.FPS_30, 2) == "00:01:01:00"


def test_output_uses_the_framerate_delimiter():
    assert add_frames("00:00:00:00", DF_29_97, 1) == "00:00:00;01"
    assert add_frames("00:00:00;00", Framerate.FPS_30, 1) == "00:00:00:01"


def test_framerate_as_label():
    assert add_frames("00:09:59;29", "29.97DF", 1) == "00:10:00;00"


class TestConvertFramerate:
    def test_24_to_25(self):
        assert convert_framerate("10:00:00:00", Framerate.FPS_24, Framerate.FPS_25) == "09:36:00:00"

    def test_23_976_to_59_94(self):
        result = convert_framerate(
            "10:00:00:00", Framerate.FPS_23_976, Framerate.FPS_59_94_NDF
        )
        assert result == "04:00:00:00"

    def test_to_drop_frame(self):
        assert convert_framerate("00:00:01:00", Framerate.FPS_25, DF_29_97) == "00:00:00;25"


class TestTimecodeToSubtitle:
    @pytest.mark.parametrize(
        "timecode, framerate, expected",
        [
            ("10:00:00:12", Framerate.FPS_25, "10:00:00,480"),
            ("00:00:00:00", Framerate.FPS_24, "00:00:00,000"),
            ("00:00:01;15", DF_29_97, "00:00:01,501"),
            ("01:02:03:29", Framerate.FPS_29_97_NDF, "01:02:03,968"),
        ],
    )
    def test_conversion(self, timecode, framerate, expected):
        assert timecode_to_subtitle(timecode, framerate) == expected

    def test_subtitle_string_is_rejected(self):
        with pytest.raises(FormatError):
            timecode_to_subtitle("10:00:00,000", Framerate.FPS_25)


class TestSubtitleToTimecode:
    @pytest.mark.parametrize(
        "subtitle, framerate, expected",
        [
            ("10:00:00,480", Framerate.FPS_25, "10:00:00:12"),
            ("00:00:00,000", Framerate.FPS_24, "00:00:00:00"),
            ("00:00:00,500", Framerate.FPS_59_94_DF, "00:00:00;30"),
            ("01:02:03,968", Framerate.FPS_29_97_NDF, "01:02:03:29"),
            ("00:10:00,000", DF_29_97, "00:10:00;00"),
        ],
    )
    def test_conversion(self, subtitle, framerate, expected):
        assert subtitle_to_timecode(subtitle, framerate) == expected

    def test_rounding_up_to_a_full_second_carries(self):
        assert subtitle_to_timecode("00:00:00,999", Framerate.FPS_25) == "00:00:01:00"
        assert subtitle_to_timecode("00:59:59,999", Framerate.FPS_30) == "01:00:00:00"

    def test_dropped_frame_labels_move_to_the_first_existing_frame(self):
        assert subtitle_to_timecode("00:01:00,000", DF_29_97) == "00:01:00;02"
        assert subtitle_to_timecode("00:00:59,999", DF_29_97) == "00:01:00;02"
        assert subtitle_to_timecode("00:01:00,050", Framerate.FPS_59_94_DF) == "00:01:00;04"

    def test_smpte_string_is_rejected(self):
        with pytest.raises(FormatError):
            subtitle_to_timecode("10:00:00:00", Framerate.FPS_25)

    def test_out_of_range_minutes(self):
        with pytest.raises(RangeError):
            subtitle_to_timecode("00:75:00,000", Framerate.FPS_25)


@pytest.mark.parametrize(
    "timecode",
    ["10:00:00", "10:00:00:00:00", " 10:00:00:00", "+10:00:00:00", "10-00-00-00", "10:00:0a:00"],
)
@pytest.mark.parametrize(
    "function",
    [
        lambda tc: add_hours(tc, Framerate.FPS_25, 1),
        lambda tc: add_minutes(tc, Framerate.FPS_25, 1),
        lambda tc: add_seconds(tc, Framerate.FPS_25, 1),
        lambda tc: add_frames(tc, Framerate.FPS_25, 1),
        lambda tc: convert_framerate(tc, Framerate.FPS_25, Framerate.FPS_24),
        lambda tc: timecode_to_subtitle(tc, Framerate.FPS_25),
        lambda tc: subtitle_to_timecode(tc, Framerate.FPS_25),
    ],
)
def test_invalid_input_raises_format_error(function, timecode):
    with pytest.raises(FormatError):
        function(timecode)
