"""Brainheck language for Resalta.

Every run of the eight command characters is an operator; everything else is
a comment.

Thread Safety:
This language is stateless and thread-safe.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resalta.language import Language
from resalta.scopes import Scope

if TYPE_CHECKING:
    from resalta.lexer.context import LexerContext


class Brainheck(Language):
    """Brainheck: ``+ - < > . , [ ]`` and comments."""

    def name(self) -> str:
        return "Brainheck"

    def init(self, ctx: LexerContext) -> None:
        ctx.token(Scope.KEYWORD_OPERATOR, r"[+\-<>.,\[\]]+")
        ctx.token(Scope.COMMENT, r"[^+\-<>.,\[\]]+")
