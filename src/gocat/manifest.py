#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Project manifest discovery: Go module path and Kotlin base package."""

from pathlib import Path
import re
import xml.etree.ElementTree as ET

from provide.foundation import logger

from gocat.config import GO_MANIFEST, KOTLIN_MANIFESTS
from gocat.errors import ManifestError

_GRADLE_GROUP_RE = re.compile(r"""^\s*group\s*=?\s*["']([^"']+)["']""", re.MULTILINE)


def read_go_module(root_dir: Path) -> str:
    """Read the module path from the ``module`` line of ``go.mod``.

    Args:
        root_dir: Project root containing go.mod

    Returns:
        The module path, e.g. ``example.com/proj``

    Raises:
        ManifestError: If go.mod is missing, unreadable or has no module line
    """
    manifest = root_dir / GO_MANIFEST
    try:
        text = manifest.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ManifestError(f"{GO_MANIFEST} not found in {root_dir}") from e
    except OSError as e:
        raise ManifestError(f"Error reading {manifest}: {e}") from e

    for raw_line in text.splitlines():
        line = raw_line.split("//", 1)[0].strip()
        if not line.startswith("module"):
            continue
        parts = line.split()
        if len(parts) >= 2 and parts[0] == "module":
            module = parts[1].strip('"`')
            if module:
                logger.debug("manifest.go.module", module=module, path=str(manifest))
                return module

    raise ManifestError(f"module name not found in {manifest}")


def _gradle_group(text: str) -> str | None:
    match = _GRADLE_GROUP_RE.search(text)
    return match.group(1).strip() if match else None


def _maven_group(text: str) -> str | None:
    try:
        project = ET.fromstring(text)
    except ET.ParseError as e:
        logger.warning("manifest.maven.parse_error", error=str(e))
        return None

    # POMs usually carry the maven namespace; compare local names only.
    def child(element: ET.Element, name: str) -> ET.Element | None:
        for sub in element:
            if sub.tag.rsplit("}", 1)[-1] == name:
                return sub
        return None

    group = child(project, "groupId")
    if group is None:
        parent = child(project, "parent")
        group = child(parent, "groupId") if parent is not None else None
    if group is None or not (group.text or "").strip():
        return None
    return group.text.strip()


_DETECTORS = {
    "build.gradle.kts": _gradle_group,
    "build.gradle": _gradle_group,
    "pom.xml": _maven_group,
}


def detect_base_package(root_dir: Path) -> str | None:
    """Guess the Kotlin base package from the project's build manifest.

    Manifests are tried in a fixed order (``build.gradle.kts``,
    ``build.gradle``, ``pom.xml``); the first one that declares a group wins.

    Returns:
        The detected package, or None when no manifest declares one
    """
    for name in KOTLIN_MANIFESTS:
        manifest = root_dir / name
        if not manifest.is_file():
            continue
        try:
            text = manifest.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("manifest.read_error", path=str(manifest), error=str(e))
            continue
        package = _DETECTORS[name](text)
        if package:
            logger.info("manifest.base_package.detected", package=package, source=name)
            return package
        logger.debug("manifest.base_package.absent", source=name)

    logger.debug("manifest.base_package.not_found", root_dir=str(root_dir))
    return None


# 🐱📁🔚
