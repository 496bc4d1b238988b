"""Tests for HtmlTarget."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from resalta.config import HighlightConfig, highlight_config_context
from resalta.renderers import HtmlTarget, TokenRenderer
from resalta.scopes import Scope
from resalta.tokens import Token


class TestHtmlTarget:
    """Each token becomes one span carrying its scope class."""

    def test_single_token(self) -> None:
        html = HtmlTarget().build([Token(Scope.KEYWORD_CONTROL, "if")])
        assert html == '<span class="scope-keyword-control">if</span>'

    def test_tokens_in_order(self) -> None:
        html = HtmlTarget().build(
            [Token(Scope.STORAGE_TYPE, "var"), Token(Scope.NONE, " "), Token(Scope.NONE, "i")]
        )
        assert html == (
            '<span class="scope-storage-type">var</span>'
            '<span class="scope-none"> </span>'
            '<span class="scope-none">i</span>'
        )

    def test_empty_tokens(self) -> None:
        assert HtmlTarget().build([]) == ""

    @pytest.mark.parametrize("scope", list(Scope))
    def test_class_attribute_for_every_scope(self, scope: Scope) -> None:
        target = HtmlTarget(class_prefix="hl-")
        html = target.build([Token(scope, "x")])
        assert html == f'<span class="hl-{scope.identifier}">x</span>'

    def test_accepts_generator(self) -> None:
        html = HtmlTarget().build(t for t in [Token(Scope.COMMENT, "#")])
        assert html == '<span class="scope-comment">#</span>'

    def test_conforms_to_protocol(self) -> None:
        target: TokenRenderer = HtmlTarget()
        assert target.build([]) == ""


class TestEscaping:
    """Reserved characters are replaced by named entities exactly once."""

    def test_all_reserved_characters(self) -> None:
        html = HtmlTarget().build([Token(Scope.STRING_QUOTED, "<>&\"'")])
        assert html == '<span class="scope-string-quoted">&lt;&gt;&amp;&quot;&apos;</span>'

    @pytest.mark.parametrize(
        ("char", "entity"),
        [("<", "&lt;"), (">", "&gt;"), ("&", "&amp;"), ('"', "&quot;"), ("'", "&apos;")],
    )
    def test_each_character_once(self, char: str, entity: str) -> None:
        html = HtmlTarget(class_prefix="").build([Token(Scope.NONE, f"a{char}b")])
        assert html == f'<span class="none">a{entity}b</span>'

    def test_existing_entities_are_escaped_again(self) -> None:
        html = HtmlTarget().build([Token(Scope.NONE, "&amp;")])
        assert "&amp;amp;" in html

    def test_prefix_and_suffix_are_verbatim(self) -> None:
        target = HtmlTarget(prefix="<pre><code>", suffix="</code></pre>")
        html = target.build([Token(Scope.NONE, "<")])
        assert html == '<pre><code><span class="scope-none">&lt;</span></code></pre>'


class TestOptions:
    """Builder-style option copies and config defaults."""

    def test_defaults(self) -> None:
        target = HtmlTarget()
        assert target.class_prefix == "scope-"
        assert target.prefix == ""
        assert target.suffix == ""

    def test_with_methods_return_copies(self) -> None:
        base = HtmlTarget()
        custom = base.with_class_prefix("x-").with_prefix("<pre>").with_suffix("</pre>")
        assert base.class_prefix == "scope-"
        assert (custom.class_prefix, custom.prefix, custom.suffix) == ("x-", "<pre>", "</pre>")

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            HtmlTarget().class_prefix = "x"  # type: ignore[misc]

    def test_defaults_follow_active_config(self) -> None:
        config = HighlightConfig(class_prefix="hl-", prefix="[", suffix="]")
        with highlight_config_context(config):
            target = HtmlTarget()
        assert target.build([Token(Scope.COMMENT, "#")]) == '[<span class="hl-comment">#</span>]'

    def test_explicit_options_override_config(self) -> None:
        with highlight_config_context(HighlightConfig(class_prefix="hl-")):
            target = HtmlTarget(class_prefix="own-")
        assert target.class_prefix == "own-"
