#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Identity tracking for files already emitted in a join run."""

import os
from pathlib import Path

from provide.foundation import logger


def canonical_path(path: Path | str) -> Path:
    """Absolute, symlink-resolved form of ``path`` used as file identity."""
    return Path(path).resolve()


class ProcessedSet:
    """Canonical absolute paths already written to the current bundle."""

    def __init__(self) -> None:
        self._paths: set[Path] = set()

    def should_process(self, path: Path | str) -> bool:
        """Query and mark in one step.

        The first call for a file returns True and marks it; later calls,
        under any spelling of the same file, return False.
        """
        key = canonical_path(path)
        if key in self._paths:
            logger.debug("tracker.already_processed", path=str(key))
            return False
        self._paths.add(key)
        return True

    def is_processed(self, path: Path | str) -> bool:
        return canonical_path(path) in self._paths

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.is_processed(Path(path))

    def __len__(self) -> int:
        return len(self._paths)


# 🐱📁🔚
