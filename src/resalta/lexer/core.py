"""Pattern-priority lexer.

Scans the source left to right. At every offset the patterns are tried in
registration order and the first one matching exactly at the cursor wins.
When none matches, the character at the cursor becomes a NONE token.

The cursor always advances by at least one character, so scanning terminates
for every input and every pattern set. Matches that would not advance the
cursor (zero width) are rejected.

Thread Safety:
Lexer instances are immutable after construction. lex() keeps its cursor and
TokenContext in locals, so one Lexer can scan from many threads at once.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resalta.errors import PatternError
from resalta.lexer.context import HandledPattern, LexerContext, Pattern, PlainPattern
from resalta.profiling import get_scan_accumulator
from resalta.scopes import Scope
from resalta.tokens import Token, TokenContext
from resalta.utils.logger import get_logger

if TYPE_CHECKING:
    from resalta.language import Language

logger = get_logger(__name__)


class Lexer:
    """A lexer for the selected language.

    Usage:
        >>> lexer = Lexer(Brainheck())
        >>> lexer.lex("+[x]")
        [Token(KEYWORD_OPERATOR, '+['), Token(COMMENT, 'x'), Token(KEYWORD_OPERATOR, ']')]

    """

    __slots__ = ("_name", "_patterns")

    def __init__(self, language: Language) -> None:
        """Create a lexer initialized for ``language``.

        Runs ``language.init`` once against a fresh LexerContext and keeps
        the frozen pattern tuple.

        Raises:
            PatternError: If the language registers a pattern that does not compile
        """
        name = language.name()
        ctx = LexerContext()
        try:
            language.init(ctx)
        except PatternError as exc:
            if exc.language is None:
                raise exc.with_language(name) from exc
            raise

        self._name = name
        self._patterns: tuple[Pattern, ...] = ctx.build()
        logger.debug("Compiled %d patterns for %s", len(self._patterns), name)

    @property
    def name(self) -> str:
        """Name of the language this lexer was built from."""
        return self._name

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        """Frozen patterns in precedence order."""
        return self._patterns

    def lex(self, source: str) -> list[Token]:
        """Tokenize a string.

        Args:
            source: Text to scan

        Returns:
            Tokens in source order; their values concatenate back to ``source``
            (handlers are responsible for their own matches)

        Complexity: O(n * p) pattern attempts for n characters and p patterns,
        plus whatever the patterns themselves cost.
        """
        patterns = self._patterns
        source_len = len(source)
        tokens = TokenContext()
        fallback_count = 0
        pos = 0

        while pos < source_len:
            for pattern in patterns:
                m = pattern.regex.match(source, pos)
                if m is None:
                    continue
                end = m.end()
                if end == pos:
                    logger.debug(
                        "%s: rejected zero-width match of %r at %d",
                        self._name,
                        pattern.regex.pattern,
                        pos,
                    )
                    continue

                pos = end
                match pattern:
                    case PlainPattern(scope=scope):
                        tokens.token(scope, m.group())
                    case HandledPattern(handler=handler):
                        handler(m, source, tokens)
                break
            else:
                tokens.token(Scope.NONE, source[pos])
                fallback_count += 1
                pos += 1

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(
                source_length=source_len,
                token_count=len(tokens),
                fallback_count=fallback_count,
            )

        return tokens.tokens

    def __len__(self) -> int:
        """Number of patterns."""
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"Lexer({self._name!r}, patterns={len(self._patterns)})"
