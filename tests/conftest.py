#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration for pytest."""

import pytest

pytest_plugins = [
    "tests.fixtures.cli",
    "tests.fixtures.config",
    "tests.fixtures.project",
]

# --- Bundle Test Fixtures ---


@pytest.fixture
def content_bundle_valid() -> bytes:
    return "\n".join(
        [
            "// --------- gocat v1",
            '// --------- FILE START: "hello.txt" (size: 12 bytes, modtime: 2024-01-01T12:00:00Z) ----------',
            "Hello World!",
            '// --------- FILE END: "hello.txt" ----------',
            '// --------- FILE START: "pkg/main.go" (size: 28 bytes, modtime: 2024-01-01T12:00:00Z) ----------',
            "package main",
            "",
            "func main() {}",
            '// --------- FILE END: "pkg/main.go" ----------',
            '// --------- FILE START: "empty.txt" (size: 0 bytes, modtime: 2024-01-01T12:00:00Z) ----------',
            '// --------- FILE END: "empty.txt" ----------',
            "",
        ]
    ).encode("utf-8")


@pytest.fixture
def content_bundle_with_unsafe_paths() -> bytes:
    return "\n".join(
        [
            "// --------- gocat v1",
            '// --------- FILE START: "../../etc/passed" (size: 5 bytes, modtime: 2024-01-01T12:00:00Z) ----------',
            "#fake",
            '// --------- FILE END: "../../etc/passed" ----------',
            '// --------- FILE START: "normal_dir/../../../root_file.txt" ----------',
            "#fake2",
            '// --------- FILE END: "normal_dir/../../../root_file.txt" ----------',
            '// --------- FILE START: "/abs/path/file.txt" ----------',
            "#fake3",
            '// --------- FILE END: "/abs/path/file.txt" ----------',
            '// --------- FILE START: "good/file.txt" (size: 8 bytes, modtime: 2024-01-01T12:00:00Z) ----------',
            "Good one",
            '// --------- FILE END: "good/file.txt" ----------',
            "",
        ]
    ).encode("utf-8")


# 🐱📁🔚
