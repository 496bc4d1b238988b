"""Write your own language in ~15 lines — subclass Language, register patterns."""

from resalta import HtmlTarget, Language, LexerContext, Scope, highlight


class MyLanguage(Language):
    """My example programming language."""

    def name(self) -> str:
        return "my-language"

    def init(self, ctx: LexerContext) -> None:
        ctx.token(Scope.KEYWORD_CONTROL, r"\b(if|else|while|continue|break|return)\b")
        ctx.token(Scope.STORAGE_TYPE, r"\b(var|function)\b")
        ctx.token(Scope.CONSTANT_NUMBER, r"\b([0-9][0-9_]*)\b")
        ctx.token(Scope.CONSTANT_LANGUAGE, r"\b(true|false)\b")


tokens = highlight(MyLanguage(), "var i = 0;")
print(HtmlTarget().build(tokens))
