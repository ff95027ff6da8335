#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for frame lines and the StreamWriter."""

import datetime
import io
from pathlib import Path

from gocat.framing import (
    MAGIC_HEADER,
    RecordHeader,
    format_end_line,
    format_rfc3339,
    format_start_line,
    is_marker_line,
    parse_end_line,
    parse_start_line,
)
from gocat.source import SourceFile
from gocat.writer import StreamWriter

MOMENT_UTC = datetime.datetime(2024, 5, 1, 10, 0, 0, tzinfo=datetime.UTC)


def _source(display_path: str, content: bytes) -> SourceFile:
    return SourceFile(
        path=Path("/project") / display_path,
        display_path=display_path,
        size=len(content),
        modified=MOMENT_UTC,
        content=content,
    )


# --- Frame lines ---


def test_rfc3339_formatting():
    assert format_rfc3339(MOMENT_UTC) == "2024-05-01T10:00:00Z"
    plus_two = datetime.timezone(datetime.timedelta(hours=2))
    assert format_rfc3339(datetime.datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=plus_two)) == "2024-05-01T12:00:00+02:00"


def test_start_and_end_lines_are_bit_exact():
    assert (
        format_start_line("util/a.go", 42, MOMENT_UTC)
        == '// --------- FILE START: "util/a.go" (size: 42 bytes, modtime: 2024-05-01T10:00:00Z) ----------'
    )
    assert format_end_line("util/a.go") == '// --------- FILE END: "util/a.go" ----------'


def test_parse_start_line():
    line = format_start_line("main.go", 7, MOMENT_UTC)

    assert parse_start_line(line) == RecordHeader("main.go", 7, "2024-05-01T10:00:00Z")
    assert parse_start_line('// --------- FILE START: "bare.txt" ----------') == RecordHeader("bare.txt")
    assert parse_start_line("// --------- FILE START: no quotes") is None
    assert parse_start_line("package main") is None


def test_parse_end_line():
    assert parse_end_line(format_end_line("a b/c.go")) == "a b/c.go"
    assert parse_end_line("// --------- FILE END: broken") is None
    assert parse_end_line(MAGIC_HEADER) is None


def test_marker_line_prefix():
    assert is_marker_line(MAGIC_HEADER)
    assert is_marker_line(MAGIC_HEADER + " trailing")
    assert not is_marker_line("// --------- gocat v2")


# --- StreamWriter ---


def test_writer_leaves_sink_untouched_without_records():
    sink = io.BytesIO()
    writer = StreamWriter(sink)

    assert sink.getvalue() == b""
    assert writer.records_written == 0
    assert writer.bytes_written == 0


def test_writer_emits_marker_once():
    sink = io.BytesIO()
    writer = StreamWriter(sink)
    writer.write_record(_source("a.txt", b"alpha\n"))
    writer.write_record(_source("b.txt", b"beta\n"))

    expected = "\n".join(
        [
            MAGIC_HEADER,
            format_start_line("a.txt", 6, MOMENT_UTC),
            "alpha",
            format_end_line("a.txt"),
            format_start_line("b.txt", 5, MOMENT_UTC),
            "beta",
            format_end_line("b.txt"),
            "",
        ]
    ).encode("utf-8")
    assert sink.getvalue() == expected
    assert sink.getvalue().count(MAGIC_HEADER.encode("utf-8")) == 1
    assert writer.records_written == 2
    assert writer.bytes_written == len(expected)


def test_writer_terminates_content_without_newline():
    sink = io.BytesIO()
    StreamWriter(sink).write_record(_source("note.txt", b"no newline"))

    lines = sink.getvalue().split(b"\n")
    assert b"(size: 10 bytes" in lines[1]
    assert lines[2] == b"no newline"
    assert lines[3] == format_end_line("note.txt").encode("utf-8")


def test_writer_copies_content_verbatim():
    content = b"crlf\r\nline\r\n\xff\xfe binary-ish\n"
    sink = io.BytesIO()
    StreamWriter(sink).write_record(_source("raw.bin", content))

    assert content in sink.getvalue()


def test_writer_empty_content():
    sink = io.BytesIO()
    StreamWriter(sink).write_record(_source("empty.txt", b""))

    lines = sink.getvalue().decode("utf-8").splitlines()
    assert lines == [MAGIC_HEADER, format_start_line("empty.txt", 0, MOMENT_UTC), format_end_line("empty.txt")]


# 🐱📁🔚
