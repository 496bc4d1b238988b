"""Exception classes for Resalta.

Provides standardized exceptions for error handling throughout Resalta.
Scanning and rendering are total; the only failure point is compiling the
patterns a language registers.
"""

from __future__ import annotations


class ResaltaError(Exception):
    """Base exception for all Resalta errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(ResaltaError):
    """A registered pattern could not be compiled.

    Raised from LexerContext registration while a language runs ``init``.
    Aborts Lexer construction and propagates to the caller of highlight().
    """

    def __init__(
        self,
        pattern: str,
        message: str,
        position: int | None = None,
        language: str | None = None,
    ) -> None:
        """Initialize pattern error with optional location.

        Args:
            pattern: The pattern text that failed to compile
            message: Error description from the regex compiler
            position: Offset into the pattern where compilation failed
            language: Name of the language that registered the pattern
        """
        self.pattern = pattern
        self.message = message
        self.position = position
        self.language = language

        location = ""
        if language:
            location = f"{language}: "
        at = f" at position {position}" if position is not None else ""

        super().__init__(f"{location}invalid pattern {pattern!r}{at}: {message}")

    def with_language(self, language: str) -> PatternError:
        """Return a copy of this error attributed to ``language``."""
        return PatternError(self.pattern, self.message, self.position, language)
