#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the project metadata in pyproject.toml."""

from pathlib import Path
import tomllib

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_project_metadata():
    with (PROJECT_ROOT / "pyproject.toml").open("rb") as fh:
        project = tomllib.load(fh)["project"]

    assert project["name"] == "gocat"
    assert project["scripts"]["gocat"] == "gocat.cli:cli"
    assert {"provide-foundation", "attrs", "click"} <= set(project["dependencies"])
    assert project.get("readme") != "spec.md"
    if "readme" in project:
        assert (PROJECT_ROOT / project["readme"]).is_file()


# 🐱📁🔚
