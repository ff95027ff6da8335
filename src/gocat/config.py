#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#


import glob
import os
from pathlib import Path

import attrs
from provide.foundation import logger
from provide.foundation.config.base import BaseConfig, field

from gocat.errors import ConfigurationError, InvalidPathError

GO_MANIFEST = "go.mod"
KOTLIN_MANIFESTS = ("build.gradle.kts", "build.gradle", "pom.xml")

_STR_LIST_VALIDATOR = attrs.validators.deep_iterable(
    member_validator=attrs.validators.instance_of(str),
    iterable_validator=attrs.validators.instance_of(list),
)


def _convert_optional_path(value: str | Path | None) -> Path | None:
    if value is None:
        return None
    if isinstance(value, Path):
        return value
    try:
        return Path(value)
    except TypeError as e:
        raise TypeError(f"Cannot convert value of type {type(value)} to Path or None.") from e


def _convert_optional_name(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@attrs.define(kw_only=True, slots=True)
class GocatConfig(BaseConfig):
    root_dir: Path = field(  # noqa: RUF009
        default=Path(),
        converter=Path,
        validator=attrs.validators.instance_of(Path),
        description="Project root; display paths and go.mod are relative to it",
        env_var="GOCAT_ROOT_DIR",
    )
    exclude_patterns: list[str] = field(  # noqa: RUF009
        factory=list,
        validator=_STR_LIST_VALIDATOR,
        description="Shell-style globs matched against display paths",
    )
    exclude_packages: list[str] = field(  # noqa: RUF009
        factory=list,
        validator=_STR_LIST_VALIDATOR,
        description="Go package names whose files are never emitted",
    )
    go_module: str | None = field(
        default=None,
        converter=_convert_optional_name,
        validator=attrs.validators.optional(attrs.validators.instance_of(str)),
        description="Go module path (overrides go.mod)",
        env_var="GOCAT_GO_MODULE",
    )
    base_package: str | None = field(
        default=None,
        converter=_convert_optional_name,
        validator=attrs.validators.optional(attrs.validators.instance_of(str)),
        description="Kotlin base package (overrides build manifest detection)",
        env_var="GOCAT_BASE_PACKAGE",
    )
    kotlin_source_root: Path | None = field(  # noqa: RUF009
        default=None,
        converter=_convert_optional_path,
        validator=attrs.validators.optional(attrs.validators.instance_of(Path)),
        description="Directory that corresponds to the Kotlin base package",
        env_var="GOCAT_KOTLIN_ROOT",
    )
    output_file: Path | None = field(  # noqa: RUF009
        default=None,
        converter=_convert_optional_path,
        validator=attrs.validators.optional(attrs.validators.instance_of(Path)),
        description="Bundle output file; never bundled into itself",
        env_var="GOCAT_OUTPUT",
    )

    def __attrs_post_init__(self) -> None:
        super().__attrs_post_init__()
        self.validate()

    def validate(self) -> None:
        try:
            self.root_dir = self.root_dir.resolve()
            if not self.root_dir.exists():
                raise InvalidPathError(f"Root directory '{self.root_dir}' not found.")
            if not self.root_dir.is_dir():
                raise InvalidPathError(f"Root path '{self.root_dir}' is not a directory.")
        except OSError as e:
            raise ConfigurationError(f"Root directory issue: {e}") from e

        if self.kotlin_source_root is not None and not self.kotlin_source_root.is_absolute():
            self.kotlin_source_root = (self.root_dir / self.kotlin_source_root).resolve()

        if self.output_file is not None:
            self.output_file = self.output_file.resolve()
            output_display = glob.escape(os.path.relpath(self.output_file, self.root_dir).replace(os.sep, "/"))
            if output_display not in self.exclude_patterns:
                self.exclude_patterns.append(output_display)
                logger.debug("config.exclude.output_file", path=output_display)

        logger.debug("config.initialized", config=str(self))

    @property
    def kotlin_root(self) -> Path:
        """Directory that the Kotlin base package maps to."""
        return self.kotlin_source_root if self.kotlin_source_root is not None else self.root_dir


# 🐱📁🔚
