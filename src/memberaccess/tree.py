"""Syntax tree abstraction consumed by the rule.

The tree is produced by an external parser. Offsets are character offsets
into ``SourceTree.text`` and exclude leading trivia, so ``start`` is the
first character of the node's first token.
"""
from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, field

from memberaccess.constants import CLASS_LIKE_KINDS, SyntaxKind


@dataclass(frozen=True, slots=True)
class Node:
    """A single node of the syntax tree."""

    kind: SyntaxKind
    start: int
    end: int
    modifiers: tuple[Node, ...] = ()
    name: Node | None = None
    text: str | None = None
    members: tuple[Node, ...] = ()
    children: tuple[Node, ...] = ()

    def iter_children(self) -> Iterator[Node]:
        """Yield direct children in source order: modifiers, name, members, rest."""
        yield from self.modifiers
        if self.name is not None:
            yield self.name
        yield from self.members
        yield from self.children


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token. Offsets follow the same convention as ``Node``."""

    kind: SyntaxKind
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class SourceTree:
    """Parsed file: source text, root node and the token stream."""

    text: str
    root: Node
    tokens: tuple[Token, ...] = ()
    _starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered: tuple[Token, ...] = tuple(sorted(self.tokens, key=lambda t: t.start))
        object.__setattr__(self, "tokens", ordered)
        object.__setattr__(self, "_starts", tuple(t.start for t in ordered))

    def next_token(self, node: Node | Token) -> Token | None:
        """Return the first token starting at or after the end of *node*."""
        index: int = bisect_left(self._starts, node.end)
        if index >= len(self.tokens):
            return None
        return self.tokens[index]

    def child_token(self, node: Node, kind: SyntaxKind) -> Token | None:
        """Return the first token of *kind* inside *node*'s span."""
        index: int = bisect_left(self._starts, node.start)
        for token in self.tokens[index:]:
            if token.start >= node.end:
                break
            if token.kind == kind and token.end <= node.end:
                return token
        return None


def is_class_like(node: Node) -> bool:
    return node.kind in CLASS_LIKE_KINDS


def get_modifier(node: Node, kind: SyntaxKind) -> Node | None:
    """Return the first modifier of *kind* on *node*, if any."""
    for modifier in node.modifiers:
        if modifier.kind == kind:
            return modifier
    return None


def has_modifier(node: Node, *kinds: SyntaxKind) -> bool:
    return any(modifier.kind in kinds for modifier in node.modifiers)


def walk(root: Node) -> Iterator[Node]:
    """Pre-order depth-first iteration over *root* and all its descendants."""
    stack: list[Node] = [root]
    while stack:
        node: Node = stack.pop()
        yield node
        stack.extend(reversed(tuple(node.iter_children())))
