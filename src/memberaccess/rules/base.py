"""Rule protocol for memberaccess rules."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from memberaccess.diagnostics import Diagnostic
from memberaccess.tree import SourceTree
from memberaccess.types import MemberAccessOptions


@runtime_checkable
class Rule(Protocol):
    """Structural interface for tree rules."""

    @property
    def name(self) -> str: ...

    def check(
        self,
        *,
        tree: SourceTree,
        options: MemberAccessOptions,
    ) -> list[Diagnostic]: ...
