#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Transitive closure of seed files over in-project imports."""

from collections.abc import Iterable
from pathlib import Path

from provide.foundation import logger

from gocat.config import GocatConfig
from gocat.dialects import Dialect, DialectRegistry
from gocat.errors import GocatFileError
from gocat.exclusions import ExclusionFilter
from gocat.source import SourceFile, display_path_for
from gocat.tracker import ProcessedSet, canonical_path
from gocat.writer import StreamWriter


class ClosureResolver:
    """Emits each reachable file once, depth-first in seed order.

    Work is kept on an explicit stack. The children of a file (the candidate
    files of every directory its imports map to) are pushed in reverse, so
    popping yields them in import order, then directory listing order, the
    same order a recursive walk would produce.
    """

    def __init__(
        self,
        config: GocatConfig,
        writer: StreamWriter,
        registry: DialectRegistry,
        exclusion_filter: ExclusionFilter | None = None,
        processed: ProcessedSet | None = None,
    ) -> None:
        self.config = config
        self.writer = writer
        self.registry = registry
        self.exclusion_filter = exclusion_filter if exclusion_filter is not None else ExclusionFilter(config)
        self.processed = processed if processed is not None else ProcessedSet()
        self.missing_count = 0
        self.error_count = 0

    def process_all(self, paths: Iterable[Path]) -> None:
        for path in paths:
            self.process(path)

    def process(self, path: Path) -> None:
        """Emit ``path`` and everything reachable from it not yet emitted.

        Raises:
            ConfigurationError: If a dialect lacks its namespace root
        """
        stack: list[Path] = [Path(path)]
        while stack:
            current = stack.pop()
            children = self._visit(current)
            stack.extend(reversed(children))

    def _visit(self, path: Path) -> list[Path]:
        try:
            return self._process_file(path)
        except FileNotFoundError:
            logger.warning("join.file.not_found", path=str(path))
            self.missing_count += 1
        except (OSError, GocatFileError) as e:
            logger.error("join.file.error", path=str(path), error=str(e))
            self.error_count += 1
        return []

    def _process_file(self, path: Path) -> list[Path]:
        canonical = canonical_path(path)
        if not canonical.exists():
            raise FileNotFoundError(f"No such file: {path}")

        display_path = display_path_for(path, self.config.root_dir)
        if self.exclusion_filter.is_excluded_by_path(display_path):
            logger.debug("join.file.excluded", path=display_path, reason="path")
            return []

        if self.processed.is_processed(canonical):
            return []

        dialect = self.registry.for_path(path)
        source = SourceFile.load(path, self.config.root_dir, dialect.name if dialect else None)

        if dialect is not None and self.exclusion_filter.has_namespace_exclusions:
            namespace = dialect.declared_namespace(source.content)
            if self.exclusion_filter.is_excluded_by_namespace(namespace, display_path):
                logger.debug("join.file.excluded", path=display_path, reason="namespace", namespace=namespace)
                return []

        if not self.processed.should_process(canonical):
            return []

        self.writer.write_record(source)
        logger.debug("join.file.emitted", path=display_path, dialect=source.dialect)

        if dialect is None:
            return []
        return self._expand(source, dialect)

    def _expand(self, source: SourceFile, dialect: Dialect) -> list[Path]:
        """Candidate files of every internal import of ``source``, in order."""
        children: list[Path] = []
        for reference in dialect.extract_imports(source.content):
            directory = dialect.map_import_to_directory(reference)
            if directory is None:
                logger.debug("join.import.foreign", path=source.display_path, reference=reference)
                continue
            try:
                candidates = dialect.candidate_files(directory)
            except OSError as e:
                logger.warning(
                    "join.directory.list_error",
                    path=source.display_path,
                    reference=reference,
                    directory=str(directory),
                    error=str(e),
                )
                self.error_count += 1
                continue
            logger.debug("join.import.mapped", reference=reference, directory=str(directory), files=len(candidates))
            children.extend(candidates)
        return children


# 🐱📁🔚
