"""HTML render target.

Wraps every token in a ``<span>`` whose class is the configured prefix plus
the scope identifier, so a stylesheet can color each scope:

    <span class="scope-keyword-control">if</span>

Thread Safety:
HtmlTarget is a frozen dataclass. build() keeps its output buffer local, so
one target can be shared across threads.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from resalta.config import get_highlight_config
from resalta.tokens import Token
from resalta.utils.text import escape_html


def _default_class_prefix() -> str:
    return get_highlight_config().class_prefix


def _default_prefix() -> str:
    return get_highlight_config().prefix


def _default_suffix() -> str:
    return get_highlight_config().suffix


@dataclass(frozen=True, slots=True)
class HtmlTarget:
    """An HTML target for Resalta.

    Unset options are taken from the active HighlightConfig when the target
    is created.

    Attributes:
        class_prefix: Prefix for CSS class names (default ``"scope-"``)
        prefix: Markup emitted before the tokens (e.g. ``"<pre><code>"``)
        suffix: Markup emitted after the tokens (e.g. ``"</code></pre>"``)

    Usage:
        >>> target = HtmlTarget().with_class_prefix("hl-")
        >>> target.build([Token(Scope.KEYWORD_CONTROL, "if")])
        '<span class="hl-keyword-control">if</span>'

    """

    class_prefix: str = field(default_factory=_default_class_prefix)
    prefix: str = field(default_factory=_default_prefix)
    suffix: str = field(default_factory=_default_suffix)

    def with_class_prefix(self, class_prefix: str) -> HtmlTarget:
        """Return this target with the provided class prefix."""
        return replace(self, class_prefix=class_prefix)

    def with_prefix(self, prefix: str) -> HtmlTarget:
        """Return this target with the provided output prefix."""
        return replace(self, prefix=prefix)

    def with_suffix(self, suffix: str) -> HtmlTarget:
        """Return this target with the provided output suffix."""
        return replace(self, suffix=suffix)

    def build(self, tokens: Iterable[Token]) -> str:
        """Build the given tokens into a string of HTML."""
        class_prefix = escape_html(self.class_prefix)
        parts: list[str] = [self.prefix]
        for token in tokens:
            parts.append(
                f'<span class="{class_prefix}{token.scope.identifier}">'
                f"{escape_html(token.value)}</span>"
            )
        parts.append(self.suffix)
        return "".join(parts)
