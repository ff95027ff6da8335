#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#


import fnmatch

from provide.foundation import logger

from gocat.config import GocatConfig


class ExclusionFilter:
    """Decide whether a candidate file is left out of the bundle.

    Two independent checks, both empty by default:
    1. display path against shell-style globs (``--exclude``);
    2. declared Go package name against an exact-match list (``--exclude-package``).

    Neither check marks the file as processed, so a file skipped here can
    still be reached later through another route.
    """

    def __init__(self, config: GocatConfig) -> None:
        self._path_patterns: list[str] = list(config.exclude_patterns)
        self._packages: frozenset[str] = frozenset(config.exclude_packages)
        self._path_excluded: set[str] = set()
        self._namespace_excluded: set[str] = set()
        logger.debug(
            "exclusion.configured",
            path_patterns=self._path_patterns,
            packages=sorted(self._packages),
        )

    @property
    def has_namespace_exclusions(self) -> bool:
        return bool(self._packages)

    def is_excluded_by_path(self, display_path: str) -> bool:
        for pattern in self._path_patterns:
            if fnmatch.fnmatch(display_path, pattern):
                logger.debug("exclusion.path.matched", path=display_path, pattern=pattern)
                self._path_excluded.add(display_path)
                return True
        return False

    def is_excluded_by_namespace(self, namespace: str | None, display_path: str) -> bool:
        if namespace is None or namespace not in self._packages:
            return False
        logger.debug("exclusion.namespace.matched", path=display_path, namespace=namespace)
        self._namespace_excluded.add(display_path)
        return True

    def get_path_excluded_count(self) -> int:
        """Distinct files left out by a path glob."""
        return len(self._path_excluded)

    def get_namespace_excluded_count(self) -> int:
        return len(self._namespace_excluded)


# 🐱📁🔚
