#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Core orchestration for join and split runs."""

from collections.abc import Iterable
import glob
from pathlib import Path
import time
from typing import BinaryIO

import attrs
from provide.foundation import logger

from gocat.config import GocatConfig
from gocat.dialects import DialectRegistry
from gocat.exclusions import ExclusionFilter
from gocat.manifest import detect_base_package, read_go_module
from gocat.resolver import ClosureResolver
from gocat.splitter import Splitter, SplitResult
from gocat.tracker import ProcessedSet
from gocat.writer import StreamWriter


@attrs.define
class JoinResult:
    """Counters of one join run."""

    seeds: int = 0
    emitted: int = 0
    excluded_by_path: int = 0
    excluded_by_namespace: int = 0
    missing: int = 0
    errors: int = 0
    bytes_written: int = 0


def expand_patterns(patterns: Iterable[str], root_dir: Path) -> list[Path]:
    """Expand shell globs relative to ``root_dir`` into seed paths.

    Matches of each pattern are sorted; pattern order is kept. A pattern
    that matches nothing is logged and skipped.
    """
    seeds: list[Path] = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, root_dir=root_dir, include_hidden=True))
        if not matches:
            logger.warning("join.pattern.no_match", pattern=pattern)
            continue
        logger.debug("join.pattern.matched", pattern=pattern, matches=len(matches))
        seeds.extend(root_dir / match for match in matches)
    return seeds


def build_registry(config: GocatConfig, seeds: list[Path]) -> DialectRegistry:
    """Resolve namespace roots for the dialects the seeds use.

    The Go module is required as soon as a Go seed is present, so a missing
    go.mod stops the run before anything is written. A missing Kotlin base
    package only disables Kotlin expansion.

    Raises:
        ManifestError: If Go seeds are present and no module name can be found
    """
    probe = DialectRegistry.default(config.root_dir)
    seed_dialects = {dialect.name for dialect in map(probe.for_path, seeds) if dialect is not None}

    go_module = config.go_module
    if go_module is None and "go" in seed_dialects:
        go_module = read_go_module(config.root_dir)
        logger.debug("join.go.module", module=go_module)

    base_package = config.base_package
    if base_package is None and "kotlin" in seed_dialects:
        base_package = detect_base_package(config.root_dir)
        if base_package is None:
            logger.warning("join.kotlin.no_base_package", root_dir=str(config.root_dir))
        else:
            logger.debug("join.kotlin.base_package", base_package=base_package)

    return DialectRegistry.default(
        config.root_dir,
        go_module=go_module,
        base_package=base_package,
        kotlin_root=config.kotlin_root,
    )


def join_files(config: GocatConfig, patterns: Iterable[str], sink: BinaryIO) -> JoinResult:
    """Write the bundle of the seeds matched by ``patterns`` to ``sink``.

    Args:
        config: Join configuration
        patterns: Shell globs naming the seed files
        sink: Binary stream receiving the bundle

    Returns:
        Run counters

    Raises:
        ConfigurationError: If a required namespace root cannot be resolved
    """
    logger.info("join.start", root_dir=str(config.root_dir))
    start_time = time.monotonic()

    seeds = expand_patterns(patterns, config.root_dir)
    registry = build_registry(config, seeds)
    writer = StreamWriter(sink)
    exclusion_filter = ExclusionFilter(config)
    resolver = ClosureResolver(config, writer, registry, exclusion_filter, ProcessedSet())
    resolver.process_all(seeds)

    result = JoinResult(
        seeds=len(seeds),
        emitted=writer.records_written,
        excluded_by_path=exclusion_filter.get_path_excluded_count(),
        excluded_by_namespace=exclusion_filter.get_namespace_excluded_count(),
        missing=resolver.missing_count,
        errors=resolver.error_count,
        bytes_written=writer.bytes_written,
    )
    logger.info("join.complete", duration_seconds=time.monotonic() - start_time)
    log_join_summary(result)
    return result


def log_join_summary(result: JoinResult) -> None:
    logger.info(
        "join.summary",
        seeds=result.seeds,
        emitted=result.emitted,
        excluded_path=result.excluded_by_path,
        excluded_namespace=result.excluded_by_namespace,
        missing=result.missing,
        errors=result.errors,
        size_bytes=result.bytes_written,
    )


def split_stream(stream: BinaryIO, output_root: Path | None = None) -> SplitResult:
    """Rebuild the files of a bundle stream below ``output_root``.

    Raises:
        BundleFormatError: If the stream does not start with the marker line
    """
    start_time = time.monotonic()
    result = Splitter(output_root).split(stream)
    logger.info("split.complete", duration_seconds=time.monotonic() - start_time)
    return result


# 🐱📁🔚
