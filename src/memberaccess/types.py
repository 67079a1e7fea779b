"""Common types and dataclasses for memberaccess."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from memberaccess.constants import DEFAULT_EXCLUDES, DEFAULT_INCLUDE


@dataclass(frozen=True, slots=True)
class MemberAccessOptions:
    """Resolved rule options.

    ``no_public`` implies both check flags; the resolver enforces that.
    """

    no_public: bool = False
    check_accessor: bool = False
    check_constructor: bool = False


@dataclass(frozen=True, slots=True)
class MemberAccessConfig:
    """Complete memberaccess configuration."""

    config_path: Path | None = None
    options: tuple[str, ...] = ()
    include: tuple[str, ...] = DEFAULT_INCLUDE
    exclude: tuple[str, ...] = DEFAULT_EXCLUDES


class ConfigError(Exception):
    """Error during configuration loading or validation."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path: Path | None = path
        super().__init__(message)


class TreeFormatError(Exception):
    """A tree document does not match the interchange format."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path: Path | None = path
        super().__init__(message)


class RuleInvariantError(Exception):
    """A member kind outside the checked set reached the checker."""
