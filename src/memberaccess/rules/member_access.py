"""member-access: Require explicit visibility declarations for class members."""
from __future__ import annotations

import logging
from typing import Final

from memberaccess.constants import (
    FAILURE_STRING_NO_PUBLIC,
    PUBLIC_KEYWORD_TEXT,
    RULE_NAME,
    SyntaxKind,
)
from memberaccess.diagnostics import Diagnostic, Replacement
from memberaccess.tree import (
    Node,
    SourceTree,
    Token,
    get_modifier,
    has_modifier,
    is_class_like,
    walk,
)
from memberaccess.types import MemberAccessOptions, RuleInvariantError

logger: logging.Logger = logging.getLogger(__name__)

MEMBER_TYPE_LABELS: Final[dict[SyntaxKind, str]] = {
    SyntaxKind.METHOD_DECLARATION: "class method",
    SyntaxKind.PROPERTY_DECLARATION: "class property",
    SyntaxKind.CONSTRUCTOR: "class constructor",
    SyntaxKind.GET_ACCESSOR: "get property accessor",
    SyntaxKind.SET_ACCESSOR: "set property accessor",
}

_ACCESSOR_KINDS: Final[frozenset[SyntaxKind]] = frozenset({
    SyntaxKind.GET_ACCESSOR,
    SyntaxKind.SET_ACCESSOR,
})

_ALWAYS_CHECKED_KINDS: Final[frozenset[SyntaxKind]] = frozenset({
    SyntaxKind.METHOD_DECLARATION,
    SyntaxKind.PROPERTY_DECLARATION,
})

# Every kind the scope filter can admit; must match MEMBER_TYPE_LABELS.
CHECKED_KINDS: Final[frozenset[SyntaxKind]] = (
    _ALWAYS_CHECKED_KINDS | _ACCESSOR_KINDS | {SyntaxKind.CONSTRUCTOR}
)


def failure_string(member_type: str, member_name: str | None) -> str:
    """Build the message for a member lacking an accessibility modifier."""
    name_part: str = "" if member_name is None else f" '{member_name}'"
    return (
        f"The {member_type}{name_part} must be marked either "
        "'private', 'public', or 'protected'"
    )


class MemberAccessRule:
    """Detect class members without an explicit accessibility modifier."""

    @property
    def name(self) -> str:
        return RULE_NAME

    def check(
        self,
        *,
        tree: SourceTree,
        options: MemberAccessOptions,
    ) -> list[Diagnostic]:
        walker: _Walker = _Walker(tree=tree, options=options)
        walker.visit(tree.root)
        return walker.diagnostics


class _Walker:
    """Visits every node and checks the members of class-like declarations."""

    def __init__(self, *, tree: SourceTree, options: MemberAccessOptions) -> None:
        self._tree: SourceTree = tree
        self._opts: MemberAccessOptions = options
        self.diagnostics: list[Diagnostic] = []

    def visit(self, root: Node) -> None:
        for node in walk(root):
            if not is_class_like(node):
                continue
            for member in node.members:
                if self._should_check(member):
                    self._check(member)

    def _should_check(self, member: Node) -> bool:
        if member.kind == SyntaxKind.CONSTRUCTOR:
            return self._opts.check_constructor
        if member.kind in _ACCESSOR_KINDS:
            return self._opts.check_accessor
        return member.kind in _ALWAYS_CHECKED_KINDS

    def _check(self, member: Node) -> None:
        if has_modifier(
            member, SyntaxKind.PROTECTED_KEYWORD, SyntaxKind.PRIVATE_KEYWORD
        ):
            return

        public_keyword: Node | None = get_modifier(member, SyntaxKind.PUBLIC_KEYWORD)
        if self._opts.no_public:
            if public_keyword is not None:
                self._add_no_public_failure(public_keyword)
        elif public_keyword is None:
            self._add_missing_modifier_failure(member)

    def _add_no_public_failure(self, public_keyword: Node) -> None:
        start: int = public_keyword.end - len(PUBLIC_KEYWORD_TEXT)
        following: Token | None = self._tree.next_token(public_keyword)
        delete_to: int = following.start if following is not None else public_keyword.end
        self.diagnostics.append(
            Diagnostic(
                start=start,
                end=public_keyword.end,
                message=FAILURE_STRING_NO_PUBLIC,
                rule_name=RULE_NAME,
                fix=Replacement.delete_from_to(start, delete_to),
            ),
        )

    def _add_missing_modifier_failure(self, member: Node) -> None:
        member_type: str = type_to_string(member)
        anchor: Node | Token = self._anchor(member)
        member_name: str | None = None
        if member.name is not None and member.name.kind == SyntaxKind.IDENTIFIER:
            member_name = member.name.text
        logger.debug(
            "%s at %d lacks an accessibility modifier", member_type, member.start
        )
        self.diagnostics.append(
            Diagnostic(
                start=anchor.start,
                end=anchor.end,
                message=failure_string(member_type, member_name),
                rule_name=RULE_NAME,
                fix=Replacement.append_text(member.start, f"{PUBLIC_KEYWORD_TEXT} "),
            ),
        )

    def _anchor(self, member: Node) -> Node | Token:
        """Span a missing-modifier diagnostic is reported on."""
        if member.kind == SyntaxKind.CONSTRUCTOR:
            keyword: Token | None = self._tree.child_token(
                member, SyntaxKind.CONSTRUCTOR_KEYWORD
            )
            return keyword if keyword is not None else member
        if member.name is not None and member.name.kind == SyntaxKind.IDENTIFIER:
            return member.name
        return member


def type_to_string(member: Node) -> str:
    """Human-readable label for a checked member kind."""
    try:
        return MEMBER_TYPE_LABELS[member.kind]
    except KeyError:
        raise RuleInvariantError(f"unhandled node type {member.kind.name}") from None
