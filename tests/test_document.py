import pytest

from vttparse import ParsingError, ParsingIncomplete, Time, VTTError, parse_from_slice

SIMPLE_VTT = """WEBVTT
Kind: captions
Language: en

00:00:09.000 --> 00:00:11.000
Hello world

"""

COMMENTS_VTT = """WEBVTT

00:01.000 --> 00:04.000
Never drink liquid nitrogen.

NOTE check next cue

00:05.000 --> 00:09.000
It's a blue icicle.

00:10.000 --> 00:12.000
Really.

"""

MULTIPLE_LINES_VTT = """WEBVTT

00:01.000 --> 00:04.000
One line

00:05.000 --> 00:09.000
First line
Second line

"""

STYLE_VTT = """WEBVTT
Kind: subtitles
Style:
::cue {
  color: yellow;
}
##

01:00:00.000 --> 01:00:02.000 line:0
Top of the hour

"""


def test_simple_document():
    vtt = parse_from_slice(SIMPLE_VTT.encode("utf-8"))

    assert vtt.kind == "captions"
    assert vtt.language == "en"
    assert vtt.style is None
    assert len(vtt.subtitles) == 1

    subtitle = vtt.subtitles[0]
    assert subtitle.start == Time(hours=0, minutes=0, seconds=9, milliseconds=0)
    assert subtitle.end == Time(hours=0, minutes=0, seconds=11, milliseconds=0)
    assert subtitle.text == "Hello world"
    assert subtitle.note is None
    assert subtitle.positioning is None


def test_minimal_document_accepts_text_input():
    vtt = parse_from_slice("WEBVTT\n\n00:09.000 --> 00:11.000\nHi\n\n")

    assert vtt.kind is None
    assert vtt.language is None
    assert len(vtt.subtitles) == 1
    assert vtt.subtitles[0].start == Time(0, 0, 9, 0)
    assert vtt.subtitles[0].text == "Hi"


def test_hours_only_set_when_present_in_source():
    vtt = parse_from_slice(b"WEBVTT\n\n00:05.000 --> 02:00:06.000\nHi\n\n")
    assert vtt.subtitles[0].start.hours == 0
    assert vtt.subtitles[0].end.hours == 2


def test_notes_attach_to_following_cue_only():
    vtt = parse_from_slice(COMMENTS_VTT.encode("utf-8"))

    assert [s.note for s in vtt.subtitles] == [None, "check next cue", None]
    assert vtt.subtitles[1].text == "It's a blue icicle."
    assert vtt.subtitles[2].text == "Really."


def test_multiple_lines_kept_intact():
    vtt = parse_from_slice(MULTIPLE_LINES_VTT.encode("utf-8"))

    assert vtt.subtitles[1].text == "First line\nSecond line"
    assert vtt.subtitles[1].line_count == 2
    assert vtt.subtitles[0].line_count == 1


def test_style_block_and_positioning():
    vtt = parse_from_slice(STYLE_VTT.encode("utf-8"))

    assert vtt.kind == "subtitles"
    assert vtt.language is None
    assert vtt.style == "::cue {\n  color: yellow;\n}\n"
    assert vtt.subtitles[0].start == Time(1, 0, 0, 0)
    assert vtt.subtitles[0].positioning == "line:0"


def test_crlf_after_magic_number():
    vtt = parse_from_slice(b"WEBVTT\r\n\n00:01.000 --> 00:02.000\nHi\n\n")
    assert vtt.subtitles[0].text == "Hi"


def test_missing_trailing_blank_line_fails():
    with pytest.raises(VTTError):
        parse_from_slice(b"WEBVTT\n\n00:01.000 --> 00:02.000\nHi\n")

    # Same for the last of several cues
    with pytest.raises(ParsingIncomplete):
        parse_from_slice(b"WEBVTT\n\n00:01.000 --> 00:02.000\nHi\n\n00:03.000 --> 00:04.000\nBye")


def test_empty_cue_sequence_fails():
    with pytest.raises(ParsingError) as excinfo:
        parse_from_slice(b"WEBVTT\nKind: captions\n\n")
    assert excinfo.value.rule == "subtitles"


def test_bad_magic_number():
    with pytest.raises(ParsingError) as excinfo:
        parse_from_slice(b"WEBVTX\n\n00:01.000 --> 00:02.000\nHi\n\n")
    assert excinfo.value.rule == "magic number"
    assert excinfo.value.offset == 0


def test_truncated_magic_number_reports_needed_bytes():
    with pytest.raises(ParsingIncomplete) as excinfo:
        parse_from_slice(b"WEB")
    assert excinfo.value.needed == 3


def test_header_fields_in_fixed_order():
    # Language before Kind: Kind is skipped, then the stray line breaks the header
    with pytest.raises(ParsingError):
        parse_from_slice(b"WEBVTT\nLanguage: en\nKind: captions\n\n00:01.000 --> 00:02.000\nHi\n\n")


def test_trailing_bytes_after_last_cue_are_ignored():
    vtt = parse_from_slice(b"WEBVTT\n\n00:01.000 --> 00:02.000\nHi\n\n\nnot a cue")
    assert len(vtt.subtitles) == 1
