"""Pattern registry filled by a language during ``init``.

LexerContext is the mutable builder half of the lexer: a language appends
patterns to it, then the Lexer freezes the result with build(). Registration
order is precedence order; nothing is ever reordered.

Thread Safety:
LexerContext is mutable and owned by one Lexer construction.
The tuple returned by build() is immutable and safe to share.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from resalta.errors import PatternError
from resalta.scopes import Scope
from resalta.tokens import TokenContext

TokenHandler = Callable[[re.Match[str], str, TokenContext], None]
"""Callback turning one match into zero or more tokens.

Called as ``handler(match, source, tokens)`` with the match that triggered it
(capture spans via ``match.span(n)``), the full source and the active
TokenContext. Handlers cannot move the scan cursor.
"""


@dataclass(frozen=True, slots=True)
class PlainPattern:
    """Pattern emitting one token of ``scope`` for the whole match."""

    scope: Scope
    regex: re.Pattern[str]


@dataclass(frozen=True, slots=True)
class HandledPattern:
    """Pattern delegating token emission to ``handler``."""

    regex: re.Pattern[str]
    handler: TokenHandler


Pattern = PlainPattern | HandledPattern


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern[str]:
    """Compile pattern text, converting regex errors to PatternError.

    Args:
        pattern: Regular expression source
        flags: ``re`` flags

    Returns:
        Compiled pattern

    Raises:
        PatternError: If the pattern has invalid syntax
    """
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise PatternError(pattern, exc.msg, exc.pos) from exc


class LexerContext:
    """Ordered collection of patterns for one language.

    Usage:
        >>> ctx = LexerContext()
        >>> ctx.token(Scope.KEYWORD_CONTROL, r"\\b(if|else)\\b")
        >>> ctx.token(Scope.CONSTANT_NUMBER, r"\\b[0-9]+\\b")
        >>> len(ctx)
        2

    """

    __slots__ = ("_patterns",)

    def __init__(self) -> None:
        """Initialize empty context."""
        self._patterns: list[Pattern] = []

    def token(self, scope: Scope, pattern: str, flags: int = 0) -> None:
        """Register a plain pattern.

        Args:
            scope: Scope of the token emitted for each match
            pattern: Regular expression source
            flags: ``re`` flags for this pattern

        Raises:
            PatternError: If the pattern has invalid syntax
        """
        self._patterns.append(PlainPattern(scope, compile_pattern(pattern, flags)))

    def advanced_token(self, pattern: str, handler: TokenHandler, flags: int = 0) -> None:
        """Register a pattern whose matches are turned into tokens by ``handler``.

        Args:
            pattern: Regular expression source
            handler: Callback receiving ``(match, source, tokens)``
            flags: ``re`` flags for this pattern

        Raises:
            PatternError: If the pattern has invalid syntax
        """
        self._patterns.append(HandledPattern(compile_pattern(pattern, flags), handler))

    register_plain = token
    register_handled = advanced_token

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        """Patterns registered so far, in precedence order."""
        return tuple(self._patterns)

    def build(self) -> tuple[Pattern, ...]:
        """Freeze the registered patterns.

        Returns:
            Immutable tuple of patterns in registration order
        """
        return tuple(self._patterns)

    def __len__(self) -> int:
        """Number of registered patterns."""
        return len(self._patterns)


__all__ = [
    "HandledPattern",
    "LexerContext",
    "Pattern",
    "PlainPattern",
    "TokenHandler",
    "compile_pattern",
]
