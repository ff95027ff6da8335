#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Source dialects: import extraction and import-to-directory mapping."""

from collections.abc import Iterable
import os
from pathlib import Path
import re

from provide.foundation import logger

from gocat.errors import ConfigurationError
from gocat.goimports import parse_import_clause


class Dialect:
    """A source-file family with its own import syntax.

    Subclasses set the class attributes and implement ``extract_imports``.
    ``namespace_root`` is the module path or base package that decides which
    imports belong to the project; ``root_dir`` is the directory it maps to.
    """

    name: str = ""
    extensions: frozenset[str] = frozenset()
    # None accepts every regular file of a mapped directory.
    candidate_extensions: frozenset[str] | None = None
    separator: str = "/"

    def __init__(self, namespace_root: str | None, root_dir: Path) -> None:
        self.namespace_root = namespace_root
        self.root_dir = root_dir

    def extract_imports(self, content: bytes) -> list[str]:
        raise NotImplementedError

    def declared_namespace(self, content: bytes) -> str | None:
        """Namespace the file declares for exclusion purposes, if any."""
        return None

    def _require_namespace_root(self) -> str | None:
        return self.namespace_root

    def map_import_to_directory(self, reference: str) -> Path | None:
        """Directory holding the files of an internal import.

        Returns None for foreign imports (outside the namespace root).
        """
        root = self._require_namespace_root()
        if root is None:
            return None
        if reference == root:
            return self.root_dir

        prefix = root + self.separator
        if not reference.startswith(prefix):
            return None
        segments = reference[len(prefix) :].split(self.separator)
        if any(segment in ("", ".", "..") for segment in segments):
            logger.warning("dialect.import.invalid_path", dialect=self.name, reference=reference)
            return None
        return self.root_dir.joinpath(*segments)

    def accepts_candidate(self, file_name: str) -> bool:
        if self.candidate_extensions is None:
            return True
        return os.path.splitext(file_name)[1] in self.candidate_extensions

    def candidate_files(self, directory: Path) -> list[Path]:
        """Direct, non-directory entries of ``directory`` this dialect follows.

        Entries are returned sorted by name.

        Raises:
            OSError: If the directory cannot be listed
        """
        with os.scandir(directory) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if not entry.is_dir() and self.accepts_candidate(entry.name)
            )
        return [directory / name for name in names]


class GoDialect(Dialect):
    name = "go"
    extensions = frozenset({".go"})
    candidate_extensions = None
    separator = "/"

    def _require_namespace_root(self) -> str | None:
        if self.namespace_root is None:
            raise ConfigurationError("Go module name is required to resolve Go imports (go.mod or --module).")
        return self.namespace_root

    def extract_imports(self, content: bytes) -> list[str]:
        clause = parse_import_clause(content.decode("utf-8", errors="replace"))
        return clause.import_paths

    def declared_namespace(self, content: bytes) -> str | None:
        return parse_import_clause(content.decode("utf-8", errors="replace")).package


class KotlinDialect(Dialect):
    """Kotlin sources and scripts.

    Imports are found by a line scan, not a parser: an import split across
    lines, or one inside a comment block or string, is not seen.
    """

    name = "kotlin"
    extensions = frozenset({".kt", ".kts"})
    candidate_extensions = frozenset({".kt", ".kts"})
    separator = "."

    _IMPORT_RE = re.compile(r"^\s*import\s+([A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*)")

    def extract_imports(self, content: bytes) -> list[str]:
        imports: list[str] = []
        for line in content.decode("utf-8", errors="replace").splitlines():
            match = self._IMPORT_RE.match(line)
            if match:
                imports.append(match.group(1))
        return imports


class DialectRegistry:
    """Lookup of dialects by file extension."""

    def __init__(self, dialects: Iterable[Dialect]) -> None:
        self._by_extension: dict[str, Dialect] = {}
        for dialect in dialects:
            for ext in dialect.extensions:
                self._by_extension[ext] = dialect

    @classmethod
    def default(
        cls,
        root_dir: Path,
        go_module: str | None = None,
        base_package: str | None = None,
        kotlin_root: Path | None = None,
    ) -> "DialectRegistry":
        return cls(
            [
                GoDialect(go_module, root_dir),
                KotlinDialect(base_package, kotlin_root if kotlin_root is not None else root_dir),
            ]
        )

    def for_path(self, path: Path | str) -> Dialect | None:
        return self._by_extension.get(os.path.splitext(str(path))[1])


# 🐱📁🔚
