#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Serialization of source files into the bundle stream."""

from typing import BinaryIO

from provide.foundation import logger

from gocat.framing import MAGIC_HEADER, format_end_line, format_start_line
from gocat.source import SourceFile


class StreamWriter:
    """Writes framed records to a binary sink.

    The marker line is written once, right before the first record, so a
    run that emits nothing leaves the sink untouched.
    """

    def __init__(self, sink: BinaryIO) -> None:
        self.sink = sink
        self.records_written = 0
        self.bytes_written = 0
        self._marker_written = False

    def _write(self, data: bytes) -> None:
        self.sink.write(data)
        self.bytes_written += len(data)

    def _write_line(self, line: str) -> None:
        self._write(line.encode("utf-8") + b"\n")

    def write_record(self, source: SourceFile) -> None:
        """Frame ``source.content`` between a start and an end line.

        Content is written verbatim. When it does not end with a newline one
        is added so the end line starts a line; the size in the start line
        still counts the original bytes only.
        """
        if not self._marker_written:
            self._write_line(MAGIC_HEADER)
            self._marker_written = True

        self._write_line(format_start_line(source.display_path, source.size, source.modified))
        if source.content:
            self._write(source.content)
            if not source.content.endswith(b"\n"):
                self._write(b"\n")
        self._write_line(format_end_line(source.display_path))

        self.records_written += 1
        logger.debug("writer.record.written", path=source.display_path, size=source.size)


# 🐱📁🔚
