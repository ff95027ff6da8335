#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Parser for the package clause and import declarations of a Go file.

Only the head of the file is read: the ``package`` clause followed by any
number of ``import`` declarations. Parsing stops at the first token that
does not start another import declaration, so syntax errors in the rest of
the file are never seen. Errors inside the clause itself raise
``ImportClauseError``.
"""

import json
import re
from typing import Literal, NamedTuple

import attrs
from provide.foundation import logger

from gocat.errors import ImportClauseError

TokenKind = Literal["ident", "string", "punct", "eof"]

_IDENT_RE = re.compile(r"[^\W\d]\w*")
_SPACE = frozenset(" \t\r\f\v\ufeff")


class _Token(NamedTuple):
    kind: TokenKind
    value: str
    line: int

    def describe(self) -> str:
        if self.kind == "eof":
            return "EOF"
        return f"'{self.value}'" if self.kind != "string" else self.value


@attrs.define(frozen=True, slots=True)
class ImportSpec:
    """One import: the unquoted path, the optional local name and its line."""

    path: str
    name: str | None
    line: int


@attrs.define(frozen=True, slots=True)
class ImportClause:
    package: str
    imports: tuple[ImportSpec, ...] = ()

    @property
    def import_paths(self) -> list[str]:
        return [spec.path for spec in self.imports]


class _Scanner:
    """Minimal Go tokenizer covering what an import clause can contain."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1

    def _skip_trivia(self) -> None:
        text = self.text
        n = len(text)
        while self.pos < n:
            ch = text[self.pos]
            if ch == "\n":
                self.line += 1
                self.pos += 1
            elif ch in _SPACE:
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = n if end == -1 else end
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise ImportClauseError("comment not terminated", self.line)
                self.line += text.count("\n", self.pos, end)
                self.pos = end + 2
            else:
                break

    def _scan_interpreted(self) -> str:
        text = self.text
        start = self.pos
        i = start + 1
        while i < len(text):
            ch = text[i]
            if ch == "\\":
                if text.startswith("\n", i + 1):
                    break
                i += 2
                continue
            if ch == "\n":
                break
            if ch == '"':
                self.pos = i + 1
                return text[start : i + 1]
            i += 1
        raise ImportClauseError("string literal not terminated", self.line)

    def _scan_raw(self) -> str:
        end = self.text.find("`", self.pos + 1)
        if end == -1:
            raise ImportClauseError("raw string literal not terminated", self.line)
        literal = self.text[self.pos : end + 1]
        self.line += literal.count("\n")
        self.pos = end + 1
        return literal

    def next(self) -> _Token:
        self._skip_trivia()
        if self.pos >= len(self.text):
            return _Token("eof", "", self.line)

        line = self.line
        ch = self.text[self.pos]
        if ch == '"':
            return _Token("string", self._scan_interpreted(), line)
        if ch == "`":
            return _Token("string", self._scan_raw(), line)

        ident = _IDENT_RE.match(self.text, self.pos)
        if ident:
            self.pos = ident.end()
            return _Token("ident", ident.group(), line)

        self.pos += 1
        return _Token("punct", ch, line)

    def peek(self) -> _Token:
        pos, line = self.pos, self.line
        token = self.next()
        self.pos, self.line = pos, line
        return token

    def skip_semicolon(self) -> None:
        token = self.peek()
        if token.kind == "punct" and token.value == ";":
            self.next()


def unquote(literal: str) -> str | None:
    """Value of a Go string literal, or None if it cannot be decoded."""
    if literal.startswith("`"):
        return literal[1:-1].replace("\r", "")
    try:
        value = json.loads(literal)
    except ValueError:
        return None
    return value if isinstance(value, str) else None


def _is_keyword(token: _Token, word: str) -> bool:
    return token.kind == "ident" and token.value == word


def _parse_spec(scanner: _Scanner) -> ImportSpec | None:
    token = scanner.next()
    name: str | None = None
    if token.kind == "ident" or (token.kind == "punct" and token.value == "."):
        name = token.value
        token = scanner.next()
    if token.kind != "string":
        raise ImportClauseError(f"expected import path, found {token.describe()}", token.line)

    path = unquote(token.value)
    if not path:
        logger.debug("goimports.path.invalid", literal=token.value, line=token.line)
        return None
    return ImportSpec(path=path, name=name, line=token.line)


def parse_import_clause(text: str) -> ImportClause:
    """Parse the package clause and import declarations of Go source text.

    Args:
        text: Go source, decoded

    Returns:
        The declared package name and the imports in source order

    Raises:
        ImportClauseError: On a syntax error inside the clause
    """
    scanner = _Scanner(text)

    token = scanner.next()
    if not _is_keyword(token, "package"):
        raise ImportClauseError(f"expected 'package', found {token.describe()}", token.line)
    name = scanner.next()
    if name.kind != "ident":
        raise ImportClauseError(f"expected package name, found {name.describe()}", name.line)
    scanner.skip_semicolon()

    specs: list[ImportSpec] = []
    while _is_keyword(scanner.peek(), "import"):
        scanner.next()
        token = scanner.peek()
        if token.kind == "punct" and token.value == "(":
            scanner.next()
            while True:
                token = scanner.peek()
                if token.kind == "punct" and token.value == ")":
                    scanner.next()
                    break
                if token.kind == "eof":
                    raise ImportClauseError("expected ')', found EOF", token.line)
                spec = _parse_spec(scanner)
                if spec is not None:
                    specs.append(spec)
                scanner.skip_semicolon()
        else:
            spec = _parse_spec(scanner)
            if spec is not None:
                specs.append(spec)
        scanner.skip_semicolon()

    return ImportClause(package=name.value, imports=tuple(specs))


# 🐱📁🔚
