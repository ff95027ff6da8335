#!/usr/bin/env python3
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#


import io
from pathlib import Path
from typing import BinaryIO

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout
from provide.foundation.file import atomic_write

from gocat import __version__
from gocat.config import GocatConfig
from gocat.core import join_files, split_stream
from gocat.errors import BundleFormatError, ConfigurationError

HELP_TOPICS = ("join", "split")


# Main CLI group
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, package_name="gocat", message="%(package)s version %(version)s")
def cli() -> None:
    """
    gocat: Join source files and their in-project imports into one stream

    and split such a stream back into files.
    """


@cli.command(name="join", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("patterns", nargs=-1, required=True)
@click.option(
    "--root-dir",
    "-d",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, readable=True, path_type=Path),
    default=".",
    show_default=True,
    help="Project root: patterns, display paths and manifests are relative to it.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the bundle to this file instead of standard output.",
)
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    type=str,
    help="Glob matched against display paths; matching files are left out. Use multiple times.",
)
@click.option(
    "--exclude-package",
    "-x",
    multiple=True,
    type=str,
    help="Go package name whose files are left out. Use multiple times.",
)
@click.option("--module", "go_module", type=str, default=None, help="Go module path. [default: from go.mod]")
@click.option(
    "--base-package",
    type=str,
    default=None,
    help="Kotlin base package. [default: group of build.gradle.kts, build.gradle or pom.xml]",
)
@click.option(
    "--kotlin-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory matching the Kotlin base package. [default: root-dir]",
)
def join_command(
    patterns: tuple[str, ...],
    root_dir: Path,
    output: Path | None,
    exclude: tuple[str, ...],
    exclude_package: tuple[str, ...],
    go_module: str | None,
    base_package: str | None,
    kotlin_root: Path | None,
) -> None:
    """Join source files and their in-project imports into one stream.

    Every file matched by PATTERNS is written, followed recursively by the
    files of the project packages it imports. Each file is written once.

    \b
    Example:
      gocat join main.go "./pkg/*.go" -o bundle.txt
    """
    try:
        config = GocatConfig(
            root_dir=root_dir,
            exclude_patterns=list(exclude),
            exclude_packages=list(exclude_package),
            go_module=go_module,
            base_package=base_package,
            kotlin_source_root=kotlin_root,
            output_file=output,
        )
        if output is None:
            sink: BinaryIO = click.get_binary_stream("stdout")
            join_files(config, patterns, sink)
            sink.flush()
        else:
            buffer = io.BytesIO()
            join_files(config, patterns, buffer)
            atomic_write(config.output_file, buffer.getvalue())
            logger.info("join.output.written", path=str(config.output_file), size_bytes=buffer.tell())
    except ConfigurationError as e:
        logger.critical(f"Configuration error: {e}", exc_info=False)
        perr(f"Error: {e}")
        raise SystemExit(1) from None
    except OSError as e:  # pragma: no cover
        logger.critical(f"File system error: {e}", exc_info=False)
        perr(f"Error: {e}")
        raise SystemExit(1) from None


@cli.command(name="split", context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--in",
    "-i",
    "input_file",
    type=click.File("rb"),
    default="-",
    help="Bundle to split. [default: standard input]",
)
@click.option(
    "--out",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory the files are written below.",
)
def split_command(input_file: BinaryIO, output_dir: Path) -> None:
    """Split a joined stream back into separate files.

    \b
    Examples:
      gocat split --in joined.txt --out outputFolder
      gocat split --out outputFolder < joined.txt
    """
    try:
        result = split_stream(input_file, output_dir)
    except BundleFormatError as e:
        logger.critical(f"Bundle format error: {e}", exc_info=False)
        perr(f"Error: {e}")
        raise SystemExit(1) from None
    except OSError as e:  # pragma: no cover
        logger.critical(f"File system error: {e}", exc_info=False)
        perr(f"Error: {e}")
        raise SystemExit(1) from None

    summary = f"Split complete: {len(result.written)} file(s) written to {output_dir.resolve()}"
    if result.rejected:
        summary += f", {len(result.rejected)} rejected"
    if result.discarded:
        summary += f", {len(result.discarded)} discarded"
    pout(summary)


@cli.command(name="help")
@click.argument("topic", required=False)
@click.pass_context
def help_command(ctx: click.Context, topic: str | None) -> None:
    """Show help for gocat or one of its commands."""
    parent = ctx.parent if ctx.parent is not None else ctx
    if topic is None:
        pout(parent.get_help())
        return

    command = cli.get_command(parent, topic) if topic in HELP_TOPICS else None
    if command is None:
        pout(f"Unknown help topic '{topic}'. Available topics: {', '.join(HELP_TOPICS)}")
        return

    with click.Context(command, info_name=topic, parent=parent) as sub_ctx:
        pout(command.get_help(sub_ctx))


if __name__ == "__main__":
    cli()

# 🐱📁🔚
