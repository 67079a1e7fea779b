"""Constants and enums for memberaccess."""
from __future__ import annotations

from enum import Enum
from typing import Final

__version__: Final[str] = "0.1.0"


class SyntaxKind(Enum):
    """Node and token kinds understood by the rule.

    Values are the kind strings used by the tree interchange format.
    Everything the producer emits that is not listed here maps to UNKNOWN.
    """

    SOURCE_FILE = "SourceFile"
    CLASS_DECLARATION = "ClassDeclaration"
    CLASS_EXPRESSION = "ClassExpression"

    # Class elements
    METHOD_DECLARATION = "MethodDeclaration"
    PROPERTY_DECLARATION = "PropertyDeclaration"
    CONSTRUCTOR = "Constructor"
    GET_ACCESSOR = "GetAccessor"
    SET_ACCESSOR = "SetAccessor"
    INDEX_SIGNATURE = "IndexSignature"
    CLASS_STATIC_BLOCK = "ClassStaticBlockDeclaration"
    SEMICOLON_CLASS_ELEMENT = "SemicolonClassElement"

    # Names
    IDENTIFIER = "Identifier"
    PRIVATE_IDENTIFIER = "PrivateIdentifier"
    STRING_LITERAL = "StringLiteral"
    NUMERIC_LITERAL = "NumericLiteral"
    COMPUTED_PROPERTY_NAME = "ComputedPropertyName"

    # Modifier keywords
    PUBLIC_KEYWORD = "PublicKeyword"
    PRIVATE_KEYWORD = "PrivateKeyword"
    PROTECTED_KEYWORD = "ProtectedKeyword"
    STATIC_KEYWORD = "StaticKeyword"
    READONLY_KEYWORD = "ReadonlyKeyword"
    ABSTRACT_KEYWORD = "AbstractKeyword"
    ASYNC_KEYWORD = "AsyncKeyword"
    DECLARE_KEYWORD = "DeclareKeyword"
    OVERRIDE_KEYWORD = "OverrideKeyword"
    ACCESSOR_KEYWORD = "AccessorKeyword"

    # Other tokens the rule asks about
    CONSTRUCTOR_KEYWORD = "ConstructorKeyword"
    END_OF_FILE = "EndOfFileToken"

    UNKNOWN = "Unknown"

    @classmethod
    def from_name(cls, name: str) -> SyntaxKind:
        """Map an interchange kind string to a member, UNKNOWN if unrecognized."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


CLASS_LIKE_KINDS: Final[frozenset[SyntaxKind]] = frozenset({
    SyntaxKind.CLASS_DECLARATION,
    SyntaxKind.CLASS_EXPRESSION,
})

MODIFIER_KINDS: Final[frozenset[SyntaxKind]] = frozenset({
    SyntaxKind.PUBLIC_KEYWORD,
    SyntaxKind.PRIVATE_KEYWORD,
    SyntaxKind.PROTECTED_KEYWORD,
    SyntaxKind.STATIC_KEYWORD,
    SyntaxKind.READONLY_KEYWORD,
    SyntaxKind.ABSTRACT_KEYWORD,
    SyntaxKind.ASYNC_KEYWORD,
    SyntaxKind.DECLARE_KEYWORD,
    SyntaxKind.OVERRIDE_KEYWORD,
    SyntaxKind.ACCESSOR_KEYWORD,
})

RULE_NAME: Final[str] = "member-access"

OPTION_NO_PUBLIC: Final[str] = "no-public"
OPTION_CHECK_ACCESSOR: Final[str] = "check-accessor"
OPTION_CHECK_CONSTRUCTOR: Final[str] = "check-constructor"

OPTION_TOKENS: Final[frozenset[str]] = frozenset({
    OPTION_NO_PUBLIC,
    OPTION_CHECK_ACCESSOR,
    OPTION_CHECK_CONSTRUCTOR,
})

PUBLIC_KEYWORD_TEXT: Final[str] = "public"

FAILURE_STRING_NO_PUBLIC: Final[str] = "'public' is implicit."

MISUSE_WARNING: Final[str] = (
    f"Warning: {RULE_NAME} - If '{OPTION_NO_PUBLIC}' is present, "
    "it should be the only option."
)

TREE_ERROR_CODE: Final[str] = "tree-error"

DEFAULT_INCLUDE: Final[tuple[str, ...]] = ("**/*.json",)

DEFAULT_EXCLUDES: Final[tuple[str, ...]] = (
    "**/__pycache__/**",
    "**/.*",
    "**/.git/**",
    "**/.venv/**",
    "**/venv/**",
    "**/node_modules/**",
    "build/**",
    "dist/**",
)
