"""Scope taxonomy for Resalta tokens.

A Scope classifies the lexical role of a token. The set is closed: adding a
scope means extending this enum, not registering one at runtime.

Each member's value is its canonical identifier, a lowercase, dash-separated
string that renderers use verbatim (e.g. as a CSS class suffix). Identifiers
are a public contract shared with stylesheets and must stay stable.

Thread Safety:
Scope is an enum (inherently immutable).

"""

from __future__ import annotations

from enum import Enum


class Scope(Enum):
    """Lexical category of a token.

    Organized by category:
    - Comments and constants
    - Names (functions, types, tags, sections)
    - Invalid / deprecated markers
    - Storage keywords
    - Strings
    - Support (language or standard library provided)
    - Variables
    - Keywords
    - NONE (unclassified character)

    """

    # Comments: // Hello, /* Hello */, <!-- Hello -->
    COMMENT = "comment"

    # Constants
    CONSTANT_NUMBER = "constant-number"  # 1234, 1.3f32, 0x42
    CONSTANT_CHAR = "constant-char"  # 'A'
    CONSTANT_LANGUAGE = "constant-language"  # true, false, nullptr, nil
    CONSTANT_OTHER = "constant-other"

    # Names
    NAME_FUNCTION = "name-function"  # main()
    NAME_TYPE = "name-type"  # typedef struct Name { ... } Name;
    NAME_TAG = "name-tag"  # <name></name>
    NAME_SECTION = "name-section"  # ## Header, \chapter{Chapter}

    INVALID = "invalid"
    DEPRECATED = "deprecated"

    # Storage
    STORAGE_TYPE = "storage-type"  # class, function, var, fn
    STORAGE_MODIFIER = "storage-modifier"  # static, mut, final

    # Strings
    STRING_QUOTED = "string-quoted"
    STRING_EVALUATED = "string-evaluated"  # JavaScript template strings
    STRING_REGEX = "string-regex"  # /([a-zA-Z])+/g
    STRING_OTHER = "string-other"

    # Provided by the language or its standard library
    SUPPORT_FUNCTION = "support-function"
    SUPPORT_TYPE = "support-type"
    SUPPORT_CONSTANT = "support-constant"
    SUPPORT_VAR = "support-var"
    SUPPORT_OTHER = "support-other"

    # Variables
    VARIABLE_PARAMETER = "variable-parameter"
    VARIABLE_LANGUAGE = "variable-language"  # super, this, self
    VARIABLE_OTHER = "variable-other"

    # Keywords
    KEYWORD_CONTROL = "keyword-control"  # if, break, return, while
    KEYWORD_OPERATOR = "keyword-operator"  # +, -, and, or
    KEYWORD_OTHER = "keyword-other"

    # No pattern matched this character
    NONE = "none"

    @property
    def identifier(self) -> str:
        """Canonical identifier (``keyword-control``)."""
        return self.value

    @property
    def snake_case(self) -> str:
        """Identifier with underscores (``keyword_control``)."""
        return self.value.replace("-", "_")

    @classmethod
    def from_identifier(cls, identifier: str) -> Scope:
        """Resolve a canonical identifier back to its Scope.

        Accepts the dash or underscore spelling, in any case.

        Args:
            identifier: Identifier such as ``"string-quoted"`` or ``"string_quoted"``

        Returns:
            The matching Scope

        Raises:
            ValueError: If no scope has this identifier

        """
        try:
            return cls(identifier.strip().lower().replace("_", "-"))
        except ValueError:
            msg = f"Unknown scope identifier: {identifier!r}"
            raise ValueError(msg) from None

    def __repr__(self) -> str:
        return f"Scope.{self.name}"


__all__ = ["Scope"]
