"""Option resolution for the member-access rule."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from memberaccess.constants import (
    MISUSE_WARNING,
    OPTION_CHECK_ACCESSOR,
    OPTION_CHECK_CONSTRUCTOR,
    OPTION_NO_PUBLIC,
    OPTION_TOKENS,
    RULE_NAME,
)
from memberaccess.types import ConfigError, MemberAccessOptions

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WarningReporter:
    """Deduplicating warning sink.

    A host keeps one instance for its whole lifetime and passes it to every
    analysis call, so each distinct key is warned about only once.
    """

    _seen: set[str] = field(default_factory=set)
    warnings: list[str] = field(default_factory=list)

    def warn_once(self, key: str, message: str) -> bool:
        """Log *message* unless *key* was already reported. Return True if logged."""
        if key in self._seen:
            return False
        self._seen.add(key)
        self.warnings.append(message)
        logger.warning(message)
        return True


def validate_tokens(tokens: Iterable[str]) -> frozenset[str]:
    """Return the distinct tokens, raising ConfigError on unrecognized ones."""
    distinct: frozenset[str] = frozenset(tokens)
    unknown: list[str] = sorted(distinct - OPTION_TOKENS)
    if unknown:
        raise ConfigError(
            f"Unknown {RULE_NAME} option(s): {unknown}; "
            f"valid options are {sorted(OPTION_TOKENS)}"
        )
    return distinct


def resolve_options(
    tokens: Iterable[str],
    *,
    reporter: WarningReporter,
) -> MemberAccessOptions | None:
    """
    Resolve option tokens into rule options.

    Args:
        tokens: Option tokens, any order, duplicates allowed.
        reporter: Sink for the one-time misuse warning.

    Returns:
        The resolved options, or None when ``no-public`` is combined with
        another option. In that case the rule reports nothing for the run.

    Raises:
        ConfigError: If a token is not a recognized option.
    """
    distinct: frozenset[str] = validate_tokens(tokens)
    no_public: bool = OPTION_NO_PUBLIC in distinct
    check_accessor: bool = OPTION_CHECK_ACCESSOR in distinct
    check_constructor: bool = OPTION_CHECK_CONSTRUCTOR in distinct

    if no_public:
        if check_accessor or check_constructor:
            reporter.warn_once(RULE_NAME, MISUSE_WARNING)
            return None
        check_accessor = check_constructor = True

    logger.debug(
        "Resolved %s options: no_public=%s check_accessor=%s check_constructor=%s",
        RULE_NAME, no_public, check_accessor, check_constructor,
    )
    return MemberAccessOptions(
        no_public=no_public,
        check_accessor=check_accessor,
        check_constructor=check_constructor,
    )
