"""Token and TokenContext definitions for the Resalta lexer.

The lexer produces a list of Token objects that renderers consume.
Each Token has a scope and the raw text it covers.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenContext is created per lex() call and never shared.

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from resalta.scopes import Scope


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of the source text.

    Attributes:
        scope: Lexical category of the token
        value: The raw text from source (never empty)

    """

    scope: Scope
    value: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.scope.name}, {val!r})"


class TokenContext:
    """Append-only token accumulator for a single lex() call.

    Handlers receive the active context and append the tokens they derive
    from their match. Empty values are skipped, so no empty token can reach
    the output.

    Usage:
        >>> tokens = TokenContext()
        >>> tokens.token(Scope.NAME_FUNCTION, "main")
        >>> tokens.token(Scope.KEYWORD_OTHER, "()")
        >>> tokens.tokens
        [Token(NAME_FUNCTION, 'main'), Token(KEYWORD_OTHER, '()')]

    Thread Safety:
        Instance is local to each lex() call.
        No shared mutable state.

    """

    __slots__ = ("_tokens",)

    def __init__(self) -> None:
        self._tokens: list[Token] = []

    def token(self, scope: Scope, value: str) -> None:
        """Append a token.

        Args:
            scope: Scope of the new token
            value: Text covered by the token (empty strings are skipped)
        """
        if value:
            self._tokens.append(Token(scope, value))

    def capture(self, scope: Scope, match: re.Match[str], group: int | str = 0) -> None:
        """Append the text of a capture group as a token.

        Groups that did not participate in the match are skipped.

        Args:
            scope: Scope of the new token
            match: The match handed to the handler
            group: Group index or name (default: whole match)
        """
        value = match.group(group)
        if value:
            self._tokens.append(Token(scope, value))

    @property
    def tokens(self) -> list[Token]:
        """Tokens accumulated so far, in emission order."""
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)


__all__ = ["Token", "TokenContext"]
