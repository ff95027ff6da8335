#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bundle stream framing shared by the join and split directions.

A stream is the marker line followed by framed records::

    // --------- gocat v1
    // --------- FILE START: "pkg/a.go" (size: 42 bytes, modtime: 2024-05-01T10:00:00Z) ----------
    <raw content>
    // --------- FILE END: "pkg/a.go" ----------

Content is not escaped: a content line that looks like a frame line makes
the stream ambiguous.
"""

import datetime
import re
from typing import NamedTuple

MAGIC_HEADER = "// --------- gocat v1"
START_PREFIX = "// --------- FILE START: "
END_PREFIX = "// --------- FILE END: "

_START_RE = re.compile(
    r'^// --------- FILE START: "(?P<path>[^"]*)"'
    r"(?: \(size: (?P<size>\d+) bytes, modtime: (?P<modtime>[^)]*)\))?"
)
_END_RE = re.compile(r'^// --------- FILE END: "(?P<path>[^"]*)"')


class RecordHeader(NamedTuple):
    """Fields parsed from a start line. Size and modtime may be missing."""

    display_path: str
    size: int | None = None
    modtime: str | None = None


def format_rfc3339(moment: datetime.datetime) -> str:
    """RFC 3339 with seconds precision; a zero UTC offset is written as ``Z``."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def format_start_line(display_path: str, size: int, modified: datetime.datetime) -> str:
    return (
        f'{START_PREFIX}"{display_path}" (size: {size} bytes, modtime: {format_rfc3339(modified)}) ----------'
    )


def format_end_line(display_path: str) -> str:
    return f'{END_PREFIX}"{display_path}" ----------'


def is_marker_line(line: str) -> bool:
    return line.startswith(MAGIC_HEADER)


def parse_start_line(line: str) -> RecordHeader | None:
    """Header of a start line, or None if ``line`` is not one."""
    if not line.startswith(START_PREFIX):
        return None
    match = _START_RE.match(line)
    if not match:
        return None
    size = match.group("size")
    return RecordHeader(
        display_path=match.group("path"),
        size=int(size) if size is not None else None,
        modtime=match.group("modtime"),
    )


def parse_end_line(line: str) -> str | None:
    """Display path named by an end line, or None if ``line`` is not one."""
    if not line.startswith(END_PREFIX):
        return None
    match = _END_RE.match(line)
    return match.group("path") if match else None


# 🐱📁🔚
