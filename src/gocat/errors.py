#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Error types for gocat operations."""

from provide.foundation import FoundationError


class GocatError(FoundationError):
    """Base error for all gocat operations."""

    pass


class ConfigurationError(GocatError):
    """Error in gocat configuration. Aborts the whole run."""

    pass


class InvalidPathError(ConfigurationError):
    """Invalid or unusable root path."""

    pass


class ManifestError(ConfigurationError):
    """Missing or unparsable project manifest (go.mod, build files)."""

    pass


class GocatFileError(GocatError):
    """Per-file failure while joining. Logged, the file is skipped."""

    pass


class ImportClauseError(GocatFileError):
    """Syntax error in a Go package clause or import declaration."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class SplitError(GocatError):
    """Base error for the split direction."""

    pass


class BundleFormatError(SplitError):
    """Stream is empty or does not start with the gocat marker line."""

    pass


class RecordPathError(SplitError):
    """Record path resolves outside the output root."""

    pass


class RecordMismatchError(SplitError):
    """End line names a different file than the start line."""

    pass


# 🐱📁🔚
