"""Rule documentation for the explain command."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from memberaccess.constants import (
    OPTION_CHECK_ACCESSOR,
    OPTION_CHECK_CONSTRUCTOR,
    OPTION_NO_PUBLIC,
    RULE_NAME,
)


@dataclass(frozen=True, slots=True)
class RuleInfo:
    name: str
    description: str
    rationale: str
    options_description: tuple[tuple[str, str], ...]
    option_examples: tuple[tuple[str, ...], ...]
    bad_example: str
    good_example: str
    typescript_only: bool
    has_fix: bool


RULE_INFO: Final[RuleInfo] = RuleInfo(
    name=RULE_NAME,
    description="Requires explicit visibility declarations for class members.",
    rationale=(
        "Explicit visibility declarations can make code more readable and\n"
        "accessible for those new to TS."
    ),
    options_description=(
        (
            OPTION_NO_PUBLIC,
            "forbids public accessibility to be specified, because this is the default.",
        ),
        (OPTION_CHECK_ACCESSOR, "enforces explicit visibility on get/set accessors"),
        (OPTION_CHECK_CONSTRUCTOR, "enforces explicit visibility on constructors"),
    ),
    option_examples=((), (OPTION_NO_PUBLIC,), (OPTION_CHECK_ACCESSOR,)),
    bad_example="class Point { x = 0; move() {} }",
    good_example="class Point { public x = 0; private move() {} }",
    typescript_only=True,
    has_fix=True,
)


def format_rule_detail(*, info: RuleInfo) -> str:
    """Format the rule's full documentation."""
    lines: list[str] = [
        f"{info.name}: {info.description}",
        f"TypeScript only: {'Yes' if info.typescript_only else 'No'}"
        f" | Autofix: {'Yes' if info.has_fix else 'No'}",
        "",
    ]
    lines.extend(f"  {line}" for line in info.rationale.splitlines())
    lines.extend([
        "",
        f"  Bad:   {info.bad_example}",
        f"  Good:  {info.good_example}",
        "",
        "  Options (may be optionally provided):",
    ])
    for token, text in info.options_description:
        lines.append(f'    "{token}" {text}')

    examples: list[str] = [
        "[" + ", ".join(f'"{t}"' for t in example) + "]"
        for example in info.option_examples
    ]
    lines.extend([
        "",
        f"  Examples: {', '.join(examples)}",
        "  Config: [tool.memberaccess]",
        '          options = ["no-public"]',
    ])

    return "\n".join(lines)
