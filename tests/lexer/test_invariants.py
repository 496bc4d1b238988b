"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from resalta.language import Language
from resalta.languages import Brainheck
from resalta.lexer import Lexer, LexerContext
from resalta.scopes import Scope

# Patterns exercising classes, alternation, boundaries and zero-width matches
PATTERN_POOL = [
    r"\b(if|else|while)\b",
    r"[0-9]+",
    r"[a-z_][a-z0-9_]*",
    r"\s+",
    r'"[^"]*"',
    r"//[^\n]*",
    r"x*",
    r"(?=a)",
    r"\b",
    r"[<>&\"']",
    r".",
]


class PatternList(Language):
    def __init__(self, entries: list[tuple[Scope, str]]) -> None:
        self._entries = entries

    def name(self) -> str:
        return "generated"

    def init(self, ctx: LexerContext) -> None:
        for scope, pattern in self._entries:
            ctx.token(scope, pattern)


registries = st.lists(
    st.tuples(st.sampled_from(list(Scope)), st.sampled_from(PATTERN_POOL)),
    max_size=6,
)


class TestRoundTrip:
    """Concatenated token values reproduce the source."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_brainheck_round_trip(self, source: str) -> None:
        tokens = Lexer(Brainheck()).lex(source)
        assert "".join(t.value for t in tokens) == source

    @given(registries, st.text(max_size=200))
    @settings(max_examples=200)
    def test_any_registry_round_trip(self, entries: list[tuple[Scope, str]], source: str) -> None:
        tokens = Lexer(PatternList(entries)).lex(source)
        assert "".join(t.value for t in tokens) == source

    @given(registries, st.text(max_size=200))
    @settings(max_examples=100)
    def test_no_empty_tokens(self, entries: list[tuple[Scope, str]], source: str) -> None:
        tokens = Lexer(PatternList(entries)).lex(source)
        assert all(t.value for t in tokens)


class TestTotality:
    """Unmatched characters fall back to one NONE token each."""

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_empty_registry_yields_one_token_per_character(self, source: str) -> None:
        tokens = Lexer(PatternList([])).lex(source)
        assert len(tokens) == len(source)
        assert all(t.scope is Scope.NONE for t in tokens)
        assert [t.value for t in tokens] == list(source)

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_zero_width_only_registry_terminates(self, source: str) -> None:
        entries = [(Scope.COMMENT, r"x*"), (Scope.STRING_OTHER, r"\b"), (Scope.INVALID, "")]
        tokens = Lexer(PatternList(entries)).lex(source)
        assert "".join(t.value for t in tokens) == source
        for token in tokens:
            if token.scope is Scope.NONE:
                assert len(token.value) == 1


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(registries, st.text(max_size=200))
    @settings(max_examples=100)
    def test_repeated_lexing_identical(self, entries: list[tuple[Scope, str]], source: str) -> None:
        lexer = Lexer(PatternList(entries))
        assert lexer.lex(source) == lexer.lex(source)

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_separate_lexers_identical(self, source: str) -> None:
        assert Lexer(Brainheck()).lex(source) == Lexer(Brainheck()).lex(source)


class TestPrecedence:
    """An earlier pattern wins whenever both match at the same offset."""

    @given(st.text(alphabet="ab", min_size=1, max_size=100))
    @settings(max_examples=100)
    def test_earlier_pattern_always_wins(self, source: str) -> None:
        entries = [(Scope.KEYWORD_OTHER, "a"), (Scope.STRING_OTHER, "a+b*")]
        tokens = Lexer(PatternList(entries)).lex(source)
        assert Scope.STRING_OTHER not in {t.scope for t in tokens}
        assert all(t.value == "a" for t in tokens if t.scope is Scope.KEYWORD_OTHER)
