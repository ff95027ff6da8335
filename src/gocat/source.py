#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#


import datetime
import os
from pathlib import Path
import stat

import attrs
from provide.foundation import logger

from gocat.errors import GocatFileError


def display_path_for(path: Path, root_dir: Path) -> str:
    """POSIX-style path of ``path`` relative to ``root_dir``.

    Files outside the root keep ``..`` segments, as a relative path would.
    """
    absolute = os.path.abspath(path)
    try:
        relative = os.path.relpath(absolute, root_dir)
    except ValueError:
        relative = absolute
    return relative.replace(os.sep, "/")


@attrs.define(kw_only=True, slots=True, frozen=True)
class SourceFile:
    """
    One file read for a join run.

    Attributes:
        path: Canonical absolute path (symlinks resolved); the file's identity.
        display_path: Path shown in the bundle, relative to the project root.
        size: Content size in bytes.
        modified: Last modification time, timezone-aware local time.
        content: Raw file bytes.
        dialect: Name of the source dialect, or None for plain files.
    """

    path: Path = attrs.field(validator=attrs.validators.instance_of(Path))
    display_path: str = attrs.field(validator=attrs.validators.instance_of(str))
    size: int = attrs.field(validator=attrs.validators.instance_of(int))
    modified: datetime.datetime = attrs.field(validator=attrs.validators.instance_of(datetime.datetime))
    content: bytes = attrs.field(default=b"", repr=False)
    dialect: str | None = attrs.field(default=None)

    @classmethod
    def load(cls, file_path: Path, root_dir: Path, dialect: str | None = None) -> "SourceFile":
        """
        Stat and read a file once.

        Args:
            file_path: Path as discovered (seed or import candidate).
            root_dir: Root the display path is relative to.
            dialect: Dialect name, if the extension is a known one.

        Raises:
            FileNotFoundError: If the file does not exist.
            GocatFileError: If the path is not a regular file.
            OSError: If the file cannot be stat'ed or read.
        """
        resolved_path = file_path.resolve()
        stat_result = resolved_path.stat()
        if not stat.S_ISREG(stat_result.st_mode):
            raise GocatFileError(f"Not a regular file: {file_path}")

        with resolved_path.open("rb") as fh:
            content = fh.read()

        modified = datetime.datetime.fromtimestamp(stat_result.st_mtime).astimezone()
        logger.debug("source.loaded", path=str(resolved_path), size=len(content), dialect=dialect)
        return cls(
            path=resolved_path,
            display_path=display_path_for(file_path, root_dir),
            size=len(content),
            modified=modified,
            content=content,
            dialect=dialect,
        )


# 🐱📁🔚
