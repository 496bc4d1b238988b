"""TokenRenderer protocol — stable interface for render targets.

Any target that implements ``build(tokens) -> str`` conforms to this protocol.
The built-in ``HtmlTarget`` is the reference implementation.

Example:
    from resalta.renderers.protocol import TokenRenderer

    def render_snippet(target: TokenRenderer, tokens: list[Token]) -> str:
        return target.build(tokens)

"""

from collections.abc import Iterable
from typing import Protocol

from resalta.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for render targets.

    Implementations must accept a token sequence and return a rendered string.
    The built-in ``HtmlTarget`` conforms to this protocol.

    """

    def build(self, tokens: Iterable[Token]) -> str:
        """Render tokens to a string.

        Args:
            tokens: Tokens in source order.

        Returns:
            Rendered string output.

        Contract:
            - MUST NOT raise for any token sequence
            - MUST escape text for the output format

        """
        ...
