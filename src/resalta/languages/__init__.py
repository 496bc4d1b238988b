"""Bundled languages and name lookup for Resalta.

Languages:
- Brainheck: ``+-<>.,[]`` operators, everything else a comment

Usage:
    >>> from resalta.languages import get_language, highlight_language
    >>> highlight_language("brainheck", "+x")
    [Token(KEYWORD_OPERATOR, '+'), Token(COMMENT, 'x')]
    >>> highlight_language("cobol", "...") is None
    True

    >>> # Extend the defaults with your own language
    >>> builder = create_registry_with_defaults()
    >>> builder.register(MyLanguage())
    >>> registry = builder.build()

Thread Safety:
The default registry and the cached lexers are immutable. The caches are
filled idempotently, so a race only builds the same value twice.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resalta.languages.brainheck import Brainheck
from resalta.languages.registry import LanguageRegistry, LanguageRegistryBuilder
from resalta.lexer import Lexer

if TYPE_CHECKING:
    from resalta.language import Language
    from resalta.tokens import Token


def _builtin_languages() -> list[Language]:
    return [Brainheck()]


# Cached singletons; registry and lexers are immutable
_DEFAULT_REGISTRY: LanguageRegistry | None = None
_LEXERS: dict[str, Lexer] = {}


def create_default_registry() -> LanguageRegistry:
    """Get the registry of bundled languages (cached singleton)."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> LanguageRegistryBuilder:
    """Create a builder pre-populated with the bundled languages.

    Returns:
        LanguageRegistryBuilder with defaults already registered
    """
    return LanguageRegistryBuilder().register_all(_builtin_languages())


def get_language(name: str) -> Language:
    """Get a bundled language by name or alias.

    Args:
        name: Name or alias, case-insensitive (e.g., "brainheck")

    Returns:
        Language instance

    Raises:
        KeyError: If the name is not recognized

    """
    language = create_default_registry().get(name)
    if language is None:
        available = ", ".join(sorted(create_default_registry().names))
        raise KeyError(f"Unknown language: {name!r}. Available: {available}")
    return language


def get_lexer(name: str) -> Lexer:
    """Get a cached Lexer for a bundled language.

    The language's patterns are compiled on first use only.

    Raises:
        KeyError: If the name is not recognized
        PatternError: If the language registers an invalid pattern

    """
    language = get_language(name)
    key = language.name().lower()
    lexer = _LEXERS.get(key)
    if lexer is None:
        lexer = Lexer(language)
        _LEXERS[key] = lexer
    return lexer


def highlight_language(name: str, source: str) -> list[Token] | None:
    """Highlight ``source`` with a bundled language selected by name.

    Returns:
        Tokens, or None when no bundled language has this name

    Raises:
        PatternError: If the language registers an invalid pattern

    """
    if not create_default_registry().has(name):
        return None
    return get_lexer(name).lex(source)


__all__ = [
    "Brainheck",
    "LanguageRegistry",
    "LanguageRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    "get_language",
    "get_lexer",
    "highlight_language",
]
