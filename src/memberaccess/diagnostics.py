"""Diagnostic data model for memberaccess."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Replacement:
    """A text edit: replace ``length`` characters at ``start`` with ``text``.

    Offsets are 0-based character offsets into the analyzed source.
    """

    start: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.start + self.length

    @classmethod
    def delete_from_to(cls, start: int, end: int) -> Replacement:
        return cls(start=start, length=end - start, text="")

    @classmethod
    def append_text(cls, start: int, text: str) -> Replacement:
        """Insert *text* before offset *start*."""
        return cls(start=start, length=0, text=text)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single rule failure covering ``[start, end)``."""

    start: int
    end: int
    message: str
    rule_name: str
    fix: Replacement | None = None


@dataclass(slots=True)
class DiagnosticCollection:
    """Append-only collection of diagnostics, kept in submission order."""

    _diagnostics: list[Diagnostic] = field(default_factory=list)

    def add(self, *, diagnostic: Diagnostic) -> None:
        """Add a single diagnostic."""
        self._diagnostics.append(diagnostic)

    def add_all(self, *, diagnostics: list[Diagnostic]) -> None:
        """Add multiple diagnostics."""
        self._diagnostics.extend(diagnostics)

    @property
    def fixable_count(self) -> int:
        """Count of diagnostics carrying a fix."""
        return sum(1 for d in self._diagnostics if d.fix is not None)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)
