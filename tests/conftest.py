"""Pytest fixtures for memberaccess tests."""
from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import pytest

from memberaccess.constants import MODIFIER_KINDS, SyntaxKind
from memberaccess.diagnostics import Replacement
from memberaccess.tree import Node, SourceTree, Token

_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""\s+|//[^\n]*|/\*.*?\*/|(?P<tok>[#A-Za-z_$][\w$]*|\d+(?:\.\d+)?|"[^"]*"|'[^']*'|=>|\S)""",
    re.S,
)

_KEYWORDS: Final[dict[str, SyntaxKind]] = {
    "public": SyntaxKind.PUBLIC_KEYWORD,
    "private": SyntaxKind.PRIVATE_KEYWORD,
    "protected": SyntaxKind.PROTECTED_KEYWORD,
    "static": SyntaxKind.STATIC_KEYWORD,
    "readonly": SyntaxKind.READONLY_KEYWORD,
    "abstract": SyntaxKind.ABSTRACT_KEYWORD,
    "async": SyntaxKind.ASYNC_KEYWORD,
    "declare": SyntaxKind.DECLARE_KEYWORD,
    "override": SyntaxKind.OVERRIDE_KEYWORD,
    "accessor": SyntaxKind.ACCESSOR_KEYWORD,
    "constructor": SyntaxKind.CONSTRUCTOR_KEYWORD,
}

# A keyword followed by one of these is a member name, not a modifier.
_NAME_FOLLOWERS: Final[frozenset[str]] = frozenset({"(", ":", "=", ";", "?", "!", "<", "{", "}"})

_EXPRESSION_PRECEDERS: Final[frozenset[str]] = frozenset({"=", "(", ",", "return", ":", "=>"})


@dataclass(frozen=True, slots=True)
class _Tok:
    kind: SyntaxKind
    start: int
    end: int
    value: str


def _token_kind(value: str) -> SyntaxKind:
    if value in _KEYWORDS:
        return _KEYWORDS[value]
    if value.startswith("#"):
        return SyntaxKind.PRIVATE_IDENTIFIER
    if value[0].isalpha() or value[0] in "_$":
        return SyntaxKind.IDENTIFIER
    if value[0] in "\"'":
        return SyntaxKind.STRING_LITERAL
    if value[0].isdigit():
        return SyntaxKind.NUMERIC_LITERAL
    return SyntaxKind.UNKNOWN


class _SnippetParser:
    """Builds trees for the small TypeScript class snippets used in tests.

    Handles class declarations and expressions, modifiers, methods,
    properties, accessors, constructors, index signatures, static blocks and
    classes nested in member bodies or initializers. Nothing more.
    """

    def __init__(self, text: str) -> None:
        self._text: str = text
        self._toks: list[_Tok] = [
            _Tok(_token_kind(m.group("tok")), m.start("tok"), m.end("tok"), m.group("tok"))
            for m in _TOKEN_RE.finditer(text)
            if m.group("tok") is not None
        ]
        self._match: dict[int, int] = {}
        stack: list[int] = []
        for index, tok in enumerate(self._toks):
            if tok.value in ("(", "[", "{"):
                stack.append(index)
            elif tok.value in (")", "]", "}"):
                self._match[stack.pop()] = index

    def parse(self) -> SourceTree:
        classes: list[Node] = self._scan(0, len(self._toks))
        root: Node = Node(
            kind=SyntaxKind.SOURCE_FILE,
            start=0,
            end=len(self._text),
            children=tuple(classes),
        )
        tokens: list[Token] = [Token(t.kind, t.start, t.end) for t in self._toks]
        tokens.append(Token(SyntaxKind.END_OF_FILE, len(self._text), len(self._text)))
        return SourceTree(text=self._text, root=root, tokens=tuple(tokens))

    def _value(self, index: int) -> str:
        return self._toks[index].value if index < len(self._toks) else ""

    def _scan(self, lo: int, hi: int) -> list[Node]:
        found: list[Node] = []
        index: int = lo
        while index < hi:
            if self._toks[index].value == "class":
                node: Node
                node, index = self._class(index)
                found.append(node)
            else:
                index += 1
        return found

    def _class(self, index: int) -> tuple[Node, int]:
        first: _Tok = self._toks[index]
        expression: bool = index > 0 and self._value(index - 1) in _EXPRESSION_PRECEDERS
        cursor: int = index + 1
        name: Node | None = None
        tok: _Tok = self._toks[cursor]
        if tok.kind == SyntaxKind.IDENTIFIER and tok.value not in ("extends", "implements"):
            name = Node(SyntaxKind.IDENTIFIER, tok.start, tok.end, text=tok.value)
        while self._value(cursor) != "{":
            cursor += 1
        close: int = self._match[cursor]
        members: list[Node] = []
        cursor += 1
        while cursor < close:
            member: Node
            member, cursor = self._member(cursor, close)
            members.append(member)
        kind: SyntaxKind = (
            SyntaxKind.CLASS_EXPRESSION if expression else SyntaxKind.CLASS_DECLARATION
        )
        node: Node = Node(
            kind=kind,
            start=first.start,
            end=self._toks[close].end,
            name=name,
            members=tuple(members),
        )
        return node, close + 1

    def _member(self, index: int, close: int) -> tuple[Node, int]:
        first: _Tok = self._toks[index]
        if first.value == ";":
            return Node(SyntaxKind.SEMICOLON_CLASS_ELEMENT, first.start, first.end), index + 1

        cursor: int = index
        modifiers: list[Node] = []
        while (
            self._toks[cursor].kind in MODIFIER_KINDS
            and self._value(cursor + 1) not in _NAME_FOLLOWERS
        ):
            tok: _Tok = self._toks[cursor]
            modifiers.append(Node(tok.kind, tok.start, tok.end))
            cursor += 1

        if self._value(cursor) == "static" and self._value(cursor + 1) == "{":
            body_close: int = self._match[cursor + 1]
            block: Node = Node(
                kind=SyntaxKind.CLASS_STATIC_BLOCK,
                start=first.start,
                end=self._toks[body_close].end,
                children=tuple(self._scan(cursor + 2, body_close)),
            )
            return block, body_close + 1

        kind: SyntaxKind | None = None
        name: Node | None = None
        tok = self._toks[cursor]
        following: str = self._value(cursor + 1)
        if tok.value in ("get", "set") and following not in _NAME_FOLLOWERS:
            kind = SyntaxKind.GET_ACCESSOR if tok.value == "get" else SyntaxKind.SET_ACCESSOR
            name, cursor = self._name(cursor + 1)
        elif tok.kind == SyntaxKind.CONSTRUCTOR_KEYWORD and following in ("(", "<"):
            kind = SyntaxKind.CONSTRUCTOR
            cursor += 1
        elif (
            tok.value == "["
            and self._toks[cursor + 1].kind == SyntaxKind.IDENTIFIER
            and self._value(cursor + 2) == ":"
        ):
            kind = SyntaxKind.INDEX_SIGNATURE
            cursor = self._match[cursor] + 1
        else:
            name, cursor = self._name(cursor)

        while self._value(cursor) in ("?", "!"):
            cursor += 1
        if kind is None:
            is_method: bool = self._value(cursor) in ("(", "<")
            kind = SyntaxKind.METHOD_DECLARATION if is_method else SyntaxKind.PROPERTY_DECLARATION

        children: list[Node]
        last: int
        if kind in (SyntaxKind.PROPERTY_DECLARATION, SyntaxKind.INDEX_SIGNATURE):
            value_start: int = cursor
            while cursor < close and self._value(cursor) != ";":
                if self._value(cursor) in ("(", "[", "{"):
                    cursor = self._match[cursor]
                cursor += 1
            children = self._scan(value_start, cursor)
            if cursor < close:
                last = cursor
                cursor += 1
            else:
                last = cursor - 1
        else:
            while self._value(cursor) != "(":
                cursor += 1
            cursor = self._match[cursor] + 1
            while self._value(cursor) not in ("{", ";"):
                cursor += 1
            if self._value(cursor) == "{":
                last = self._match[cursor]
                children = self._scan(cursor + 1, last)
            else:
                last = cursor
                children = []
            cursor = last + 1

        node: Node = Node(
            kind=kind,
            start=first.start,
            end=self._toks[last].end,
            modifiers=tuple(modifiers),
            name=name,
            children=tuple(children),
        )
        return node, cursor

    def _name(self, index: int) -> tuple[Node, int]:
        tok: _Tok = self._toks[index]
        if tok.value == "[":
            close: int = self._match[index]
            computed: Node = Node(
                SyntaxKind.COMPUTED_PROPERTY_NAME, tok.start, self._toks[close].end,
            )
            return computed, close + 1
        if tok.kind == SyntaxKind.STRING_LITERAL:
            return Node(tok.kind, tok.start, tok.end, text=tok.value[1:-1]), index + 1
        if tok.kind in (SyntaxKind.PRIVATE_IDENTIFIER, SyntaxKind.NUMERIC_LITERAL):
            return Node(tok.kind, tok.start, tok.end, text=tok.value), index + 1
        return Node(SyntaxKind.IDENTIFIER, tok.start, tok.end, text=tok.value), index + 1


def _apply(text: str, replacement: Replacement) -> str:
    return text[:replacement.start] + replacement.text + text[replacement.end:]


@pytest.fixture
def build_tree() -> Callable[[str], SourceTree]:
    """Build a SourceTree from a TypeScript class snippet."""
    return lambda text: _SnippetParser(text).parse()


@pytest.fixture
def apply_fix() -> Callable[[str, Replacement], str]:
    """Apply a single replacement to source text."""
    return _apply


@pytest.fixture
def temp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml file."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text(
        """
[tool.memberaccess]
options = ["no-public"]
include = ["trees/**/*.json"]
exclude = ["**/skip_*.json"]
"""
    )
    return config_path


@pytest.fixture
def empty_pyproject(tmp_path: Path) -> Path:
    """Create a pyproject.toml without [tool.memberaccess] section."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text(
        """
[project]
name = "test-project"
version = "0.1.0"
"""
    )
    return config_path


@pytest.fixture
def invalid_toml(tmp_path: Path) -> Path:
    """Create an invalid TOML file."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text("invalid [ toml content")
    return config_path


@pytest.fixture
def invalid_config(tmp_path: Path) -> Path:
    """Create a pyproject.toml with invalid memberaccess config."""
    config_path: Path = tmp_path / "pyproject.toml"
    config_path.write_text(
        """
[tool.memberaccess]
options = ["no-public", "check-everything"]
include = "*.json"
"""
    )
    return config_path
