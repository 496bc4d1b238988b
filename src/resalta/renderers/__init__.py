"""Resalta renderers.

Renderers convert token sequences into output formats.

Available Renderers:
- HtmlTarget: Renders tokens to ``<span>`` elements with scope classes

Thread Safety:
All renderers keep their output buffer local to each build() call.
Safe for concurrent use from multiple threads.

"""

from resalta.renderers.html import HtmlTarget
from resalta.renderers.protocol import TokenRenderer

__all__ = ["HtmlTarget", "TokenRenderer"]
