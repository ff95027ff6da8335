#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reconstruction of files from a bundle stream."""

import enum
from pathlib import Path
from typing import BinaryIO

import attrs
from provide.foundation import logger
from provide.foundation.archive.security import is_safe_path
from provide.foundation.file import atomic_write

from gocat.errors import BundleFormatError, RecordMismatchError, RecordPathError
from gocat.framing import START_PREFIX, RecordHeader, is_marker_line, parse_end_line, parse_start_line


class SplitState(enum.Enum):
    IDLE = "idle"
    IN_FILE = "in_file"


@attrs.define
class SplitResult:
    """Outcome of one split run."""

    written: list[Path] = attrs.field(factory=list)
    rejected: list[str] = attrs.field(factory=list)
    discarded: list[str] = attrs.field(factory=list)
    errors: int = 0


@attrs.define
class _OpenRecord:
    header: RecordHeader
    target: Path
    chunks: list[bytes] = attrs.field(factory=list)


def _line_text(raw_line: bytes) -> str:
    return raw_line.decode("utf-8", errors="replace").rstrip("\r\n")


class Splitter:
    """Writes the records of a bundle stream below an output root."""

    def __init__(self, output_root: Path | None = None) -> None:
        self.output_root = (output_root if output_root is not None else Path.cwd()).resolve()

    def resolve_target(self, display_path: str) -> Path:
        """Absolute target for a record path.

        Raises:
            RecordPathError: If the path is empty or does not stay below the output root
        """
        if not display_path.strip():
            raise RecordPathError("empty record path")

        target = (self.output_root / display_path).resolve()
        if target == self.output_root or not target.is_relative_to(self.output_root):
            raise RecordPathError(f"'{display_path}' resolves outside '{self.output_root}'")
        if not is_safe_path(self.output_root, display_path):
            raise RecordPathError(f"'{display_path}' is not a safe path")
        return target

    def split(self, stream: BinaryIO) -> SplitResult:
        """Rebuild every record of ``stream``.

        Raises:
            BundleFormatError: If the stream is empty or its first line is not the marker
        """
        first_line = stream.readline()
        if not first_line:
            raise BundleFormatError("Input is empty, missing marker line.")
        first_text = _line_text(first_line)
        if not is_marker_line(first_text):
            raise BundleFormatError(f"Invalid marker line: {first_text[:80]!r}")

        logger.info("split.start", output_root=str(self.output_root))
        result = SplitResult()
        state = SplitState.IDLE
        record: _OpenRecord | None = None

        for raw_line in stream:
            text = _line_text(raw_line)

            if state is SplitState.IN_FILE and record is not None:
                end_path = parse_end_line(text)
                if end_path is None:
                    record.chunks.append(raw_line)
                    continue
                if end_path == record.header.display_path:
                    self._write_record(record, result)
                else:
                    error = RecordMismatchError(
                        f"end line names '{end_path}' but record '{record.header.display_path}' is open"
                    )
                    logger.error("split.record.mismatch", path=record.header.display_path, error=str(error))
                    result.discarded.append(record.header.display_path)
                record = None
                state = SplitState.IDLE
                continue

            header = parse_start_line(text)
            if header is None:
                if text.startswith(START_PREFIX):
                    logger.warning("split.header.invalid", line=text)
                continue
            record = self._open_record(header, result)
            if record is not None:
                state = SplitState.IN_FILE

        if record is not None:
            logger.warning("split.record.unterminated", path=record.header.display_path)
            self._write_record(record, result)

        logger.info(
            "split.summary",
            written=len(result.written),
            rejected=len(result.rejected),
            discarded=len(result.discarded),
            errors=result.errors,
        )
        return result

    def _open_record(self, header: RecordHeader, result: SplitResult) -> _OpenRecord | None:
        try:
            target = self.resolve_target(header.display_path)
        except RecordPathError as e:
            logger.error("split.path.rejected", path=header.display_path, error=str(e))
            result.rejected.append(header.display_path)
            return None

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("split.directory.error", path=str(target.parent), error=str(e))
            result.errors += 1
            return None

        logger.debug("split.record.start", path=header.display_path, size=header.size)
        return _OpenRecord(header=header, target=target)

    def _write_record(self, record: _OpenRecord, result: SplitResult) -> None:
        data = b"".join(record.chunks)
        size = record.header.size
        if size is not None and len(data) == size + 1 and data.endswith(b"\n"):
            data = data[:-1]
        elif size is not None and len(data) != size:
            logger.warning(
                "split.record.size_mismatch",
                path=record.header.display_path,
                declared=size,
                actual=len(data),
            )

        try:
            atomic_write(record.target, data)
        except OSError as e:
            logger.error("split.file.os_error", path=str(record.target), error=str(e))
            result.errors += 1
            return

        logger.info("split.file.written", path=str(record.target), size_bytes=len(data))
        result.written.append(record.target)


# 🐱📁🔚
