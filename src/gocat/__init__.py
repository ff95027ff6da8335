#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""gocat: join source files with their in-project imports, and split them back.

Integrated with provide-foundation for logging, configuration and file I/O.
"""

from provide.foundation import get_hub, logger
from provide.foundation.utils.versioning import get_version

from gocat.config import GocatConfig
from gocat.core import JoinResult, expand_patterns, join_files, split_stream
from gocat.dialects import DialectRegistry, GoDialect, KotlinDialect
from gocat.exclusions import ExclusionFilter
from gocat.resolver import ClosureResolver
from gocat.source import SourceFile
from gocat.splitter import Splitter, SplitResult
from gocat.tracker import ProcessedSet
from gocat.writer import StreamWriter

# Initialize the Foundation Hub (available for advanced usage)
_hub = get_hub()

logger.debug(
    "gocat.init",
    foundation_hub_available=True,
    dialects=["go", "kotlin"],
)

# Public API exports
__all__ = [
    # Components (for advanced usage)
    "ClosureResolver",
    "DialectRegistry",
    "ExclusionFilter",
    "GoDialect",
    # Configuration
    "GocatConfig",
    "JoinResult",
    "KotlinDialect",
    "ProcessedSet",
    # Data structures
    "SourceFile",
    "SplitResult",
    "Splitter",
    "StreamWriter",
    # Core operations
    "expand_patterns",
    "join_files",
    "split_stream",
]

__version__ = get_version("gocat", caller_file=__file__)

# 🐱📁🔚
