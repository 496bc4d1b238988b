"""Split one match into several tokens with a handler."""

import re

from resalta import Language, LexerContext, Scope, TokenContext, highlight


def function_call(m: re.Match[str], source: str, tokens: TokenContext) -> None:
    """Emit the callee name and the opening parenthesis separately."""
    tokens.capture(Scope.NAME_FUNCTION, m, "name")
    tokens.capture(Scope.KEYWORD_OTHER, m, "paren")


class Calls(Language):
    def name(self) -> str:
        return "calls"

    def init(self, ctx: LexerContext) -> None:
        ctx.token(Scope.STORAGE_TYPE, r"\bfunction\b")
        ctx.advanced_token(r"(?P<name>[A-Za-z_]\w*)(?P<paren>\()", function_call)
        ctx.token(Scope.VARIABLE_OTHER, r"[A-Za-z_]\w*")


for token in highlight(Calls(), "function main(argv)"):
    print(token)
