"""Tests for Resalta utility modules."""

import logging


class TestEscapeHtml:
    """Tests for escape_html function."""

    def test_reserved_characters(self) -> None:
        from resalta.utils.text import escape_html

        assert escape_html("<") == "&lt;"
        assert escape_html(">") == "&gt;"
        assert escape_html("&") == "&amp;"
        assert escape_html('"') == "&quot;"
        assert escape_html("'") == "&apos;"

    def test_script(self) -> None:
        from resalta.utils.text import escape_html

        assert (
            escape_html("<script>alert('xss')</script>")
            == "&lt;script&gt;alert(&apos;xss&apos;)&lt;/script&gt;"
        )

    def test_plain_text_unchanged(self) -> None:
        from resalta.utils.text import escape_html

        assert escape_html("héllo wörld 😀") == "héllo wörld 😀"

    def test_empty_string(self) -> None:
        from resalta.utils.text import escape_html

        assert escape_html("") == ""


class TestGetLogger:
    """Tests for get_logger."""

    def test_adds_prefix(self) -> None:
        from resalta.utils.logger import get_logger

        assert get_logger("mymodule").name == "resalta.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        from resalta.utils.logger import get_logger

        assert get_logger("resalta.lexer.core").name == "resalta.lexer.core"
        assert get_logger("resalta").name == "resalta"

    def test_returns_stdlib_logger(self) -> None:
        from resalta.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_lexer_logs_compilation(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from resalta.languages import Brainheck
        from resalta.lexer import Lexer

        with caplog.at_level(logging.DEBUG, logger="resalta"):
            Lexer(Brainheck())
        assert "Compiled 2 patterns for Brainheck" in caplog.text

    def test_lexer_logs_zero_width_rejection(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from resalta.lexer import Lexer, LexerContext
        from resalta.scopes import Scope

        class Star:
            def name(self) -> str:
                return "star"

            def names(self) -> list[str]:
                return ["star"]

            def init(self, ctx: LexerContext) -> None:
                ctx.token(Scope.COMMENT, "x*")

        with caplog.at_level(logging.DEBUG, logger="resalta"):
            Lexer(Star()).lex("y")
        assert "zero-width" in caplog.text
