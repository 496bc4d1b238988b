"""Token serialization — JSON round-trip for Resalta tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching highlighted snippets to disk
- Handing tokens to a renderer in another process or language
- Debugging and inspection

Scopes are written as their canonical identifiers, the same strings renderers
use, so the format is stable across versions. All output is deterministic
(sorted keys).

Example:
    from resalta.serialization import to_json, from_json

    tokens = highlight(Brainheck(), "+x")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from resalta.scopes import Scope
from resalta.tokens import Token


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Returns:
        Dict with ``scope`` (canonical identifier) and ``value``.

    """
    return {"scope": token.scope.identifier, "value": token.value}


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict with ``scope`` and ``value`` (as produced by to_dict).

    Raises:
        ValueError: If a field is missing, the scope is unknown, or the value
            is not a non-empty string.

    """
    try:
        scope_id = data["scope"]
        value = data["value"]
    except KeyError as exc:
        msg = f"Missing {exc.args[0]!r} field in serialized token"
        raise ValueError(msg) from None

    if not isinstance(scope_id, str):
        msg = f"Scope must be a string, got {type(scope_id).__name__}"
        raise ValueError(msg)
    if not isinstance(value, str) or not value:
        msg = f"Token value must be a non-empty string, got {value!r}"
        raise ValueError(msg)

    return Token(Scope.from_identifier(scope_id), value)


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON array.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize tokens from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    tokens: list[Token] = []
    for item in raw:
        if not isinstance(item, dict):
            msg = f"Expected a token object, got {type(item).__name__}"
            raise ValueError(msg)
        tokens.append(from_dict(item))
    return tokens
