"""Pattern-priority lexer for Resalta.

A language fills a LexerContext with ordered patterns; the Lexer freezes them
and scans any number of inputs with anchored, first-match-wins matching.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── context.py           # LexerContext, PlainPattern, HandledPattern, TokenHandler
└── core.py              # Lexer (scan loop)

Usage:
    >>> from resalta.lexer import Lexer
    >>> lexer = Lexer(Brainheck())
    >>> for token in lexer.lex("+-x"):
    ...     print(token)
Token(KEYWORD_OPERATOR, '+-')
Token(COMMENT, 'x')

"""

from resalta.lexer.context import (
    HandledPattern,
    LexerContext,
    Pattern,
    PlainPattern,
    TokenHandler,
)
from resalta.lexer.core import Lexer

__all__ = [
    "HandledPattern",
    "Lexer",
    "LexerContext",
    "Pattern",
    "PlainPattern",
    "TokenHandler",
]
