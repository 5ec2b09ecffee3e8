from __future__ import annotations

import pytest

from vtt2srt_lib.normalizer import (
    fix_timestamp_separators,
    normalize_lines,
    normalize_timestamp,
    strip_markup,
    truncate_timestamp,
)


def test_timestamp_with_cue_settings_is_cut_and_fixed():
    line = "00:00:01.000 --> 00:00:03.000 align:start"
    assert normalize_timestamp(line) == "00:00:01,000 --> 00:00:03,000"


def test_truncate_timestamp_keeps_plain_timing():
    line = "00:00:01.000 --> 00:00:03.000"
    assert truncate_timestamp(line) == line


@pytest.mark.parametrize(
    "line",
    [
        "00:00:01.000 --> 00:00:03.000",
        "01:02:03.456 --> 01:02:04.789 position:0%",
        "00:00:01,000 --> 00:00:03,000",
    ],
)
def test_separator_fix_is_idempotent(line):
    once = fix_timestamp_separators(truncate_timestamp(line))
    assert fix_timestamp_separators(once) == once
    assert "." not in once


def test_strip_markup_removes_tags():
    assert strip_markup("<c>foo</c> bar") == "foo bar"


def test_strip_markup_removes_inline_timestamps():
    text = "hello<00:00:00.640><c> everyone</c>"
    assert strip_markup(text) == "hello everyone"


def test_strip_markup_unclosed_tag_erases_rest_of_line():
    assert strip_markup("5 < 10 apples") == "5 "


def test_strip_markup_drops_stray_closing_bracket():
    assert strip_markup("a > b") == "a  b"


@pytest.mark.parametrize(
    "caption",
    ["<i>x</i>", "a<b", "a>b", "<<nested>> tail", "<c.colorE5E5E5>text</c>>", "plain"],
)
def test_no_markup_survives(caption):
    for line in normalize_lines(["00:00:00.000 --> 00:00:01.000", caption]):
        assert "<" not in line
        assert ">" not in line or " --> " in line


def test_normalize_lines_drops_blank_and_single_char_lines():
    lines = ["WEBVTT", "", " ", "x", "00:00:01.000 --> 00:00:02.000", "ok"]
    assert normalize_lines(lines) == ["WEBVTT", "00:00:01,000 --> 00:00:02,000", "ok"]


def test_normalize_lines_drops_captions_that_were_only_markup():
    lines = ["00:00:01.000 --> 00:00:02.000", "<c></c>", "00:00:02.000 --> 00:00:03.000", "hi"]
    assert normalize_lines(lines) == [
        "00:00:01,000 --> 00:00:02,000",
        "00:00:02,000 --> 00:00:03,000",
        "hi",
    ]


def test_caption_periods_are_kept():
    assert normalize_lines(["Dr. Smith arrived."]) == ["Dr. Smith arrived."]
