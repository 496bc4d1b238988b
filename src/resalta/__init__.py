"""
Resalta — Extendable Syntax Highlighter for Python

An embeddable tokenizer for syntax-highlighting pipelines. A language
registers ordered regex patterns; the lexer turns any source text into a
flat list of scoped tokens; a render target turns tokens into HTML.

Quick Start:
    >>> from resalta import Language, Scope, highlight, HtmlTarget
    >>>
    >>> class MyLanguage(Language):
    ...     def name(self):
    ...         return "my-language"
    ...
    ...     def init(self, ctx):
    ...         ctx.token(Scope.KEYWORD_CONTROL, r"\\b(if|else|while|return)\\b")
    ...         ctx.token(Scope.STORAGE_TYPE, r"\\b(var|function)\\b")
    ...         ctx.token(Scope.CONSTANT_NUMBER, r"\\b[0-9][0-9_]*\\b")
    >>>
    >>> tokens = highlight(MyLanguage(), "var i = 0;")
    >>> html = HtmlTarget().build(tokens)

Bundled Languages:
    >>> from resalta.languages import highlight_language
    >>> tokens = highlight_language("brainheck", "+[-]")

Installation:
    pip install resalta              # Zero runtime dependencies
"""

from resalta.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from resalta.errors import PatternError, ResaltaError
from resalta.language import Language
from resalta.lexer import (
    HandledPattern,
    Lexer,
    LexerContext,
    Pattern,
    PlainPattern,
    TokenHandler,
)
from resalta.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from resalta.renderers.html import HtmlTarget
from resalta.renderers.protocol import TokenRenderer
from resalta.scopes import Scope
from resalta.serialization import from_dict, from_json, to_dict, to_json
from resalta.tokens import Token, TokenContext

__version__ = "0.1.0"


def highlight(language: Language, source: str) -> list[Token]:
    """Highlight source text with a language.

    Builds a Lexer for ``language`` (running its ``init``) and scans
    ``source``. For repeated calls with the same language, build a Lexer once
    and call ``lex`` instead.

    Args:
        language: Language implementation
        source: Text to tokenize

    Returns:
        Tokens in source order

    Raises:
        PatternError: If the language registers a pattern that does not
            compile. Scanning itself never fails.

    Example:
        >>> from resalta.languages import Brainheck
        >>> highlight(Brainheck(), "+x")
        [Token(KEYWORD_OPERATOR, '+'), Token(COMMENT, 'x')]
    """
    return Lexer(language).lex(source)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "highlight",
    # Language extension
    "Language",
    "LexerContext",
    "TokenHandler",
    "Pattern",
    "PlainPattern",
    "HandledPattern",
    # Lexer
    "Lexer",
    # Tokens
    "Scope",
    "Token",
    "TokenContext",
    # Errors
    "ResaltaError",
    "PatternError",
    # Renderers
    "HtmlTarget",
    "TokenRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Configuration (ContextVar-based)
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
]
