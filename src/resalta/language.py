"""Language protocol for pluggable syntax definitions.

A language is the extension point of Resalta. It names itself and registers
an ordered list of patterns into a LexerContext; the Lexer does the rest.

Thread Safety:
Languages must be stateless. ``init`` only configures the context it is
handed and runs once per Lexer.

Example:
    >>> class MyLanguage(Language):
    ...     def name(self) -> str:
    ...         return "my-language"
    ...
    ...     def init(self, ctx: LexerContext) -> None:
    ...         ctx.token(Scope.KEYWORD_CONTROL, r"\\b(if|else|while|return)\\b")
    ...         ctx.token(Scope.STORAGE_TYPE, r"\\b(var|function)\\b")
    ...         ctx.token(Scope.CONSTANT_NUMBER, r"\\b[0-9][0-9_]*\\b")
    ...
    >>> highlight(MyLanguage(), "var i = 0;")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from resalta.lexer.context import LexerContext


@runtime_checkable
class Language(Protocol):
    """Protocol for language implementations.

    Subclass it explicitly to inherit the default ``names()``; any object with
    the same three methods also satisfies the protocol.

    Contract:
        - ``name()`` returns the primary identifier used for registry lookup
        - ``names()`` returns every alias, non-empty, primary name first
        - ``init(ctx)`` registers patterns in precedence order and raises
          PatternError when a pattern does not compile

    """

    def name(self) -> str:
        """Return the name of the language."""
        ...

    def names(self) -> Sequence[str]:
        """Return all aliases of the language.

        Aliases are matched case-insensitively. For example a JavaScript
        definition might return ``["js", "javascript", "jscript", "es",
        "ecmascript"]``.
        """
        return [self.name()]

    def init(self, ctx: LexerContext) -> None:
        """Register this language's patterns into ``ctx``.

        Keyword and literal patterns must come before catch-all patterns
        (an identifier pattern registered first would shadow every keyword).

        Raises:
            PatternError: If a pattern has invalid syntax
        """
        ...


__all__ = ["Language"]
