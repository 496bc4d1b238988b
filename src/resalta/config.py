"""ContextVar-based render configuration for Resalta.

Provides thread-local defaults for render targets using Python's ContextVars
(PEP 567). A render target built without explicit options picks up the
active configuration.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from resalta.config import HighlightConfig, highlight_config_context
    from resalta.renderers import HtmlTarget

    with highlight_config_context(HighlightConfig(class_prefix="hl-")):
        html = HtmlTarget().build(tokens)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable render configuration.

    Attributes:
        class_prefix: Prepended to each scope identifier in CSS class names
        prefix: Emitted before the first token
        suffix: Emitted after the last token

    """

    class_prefix: str = "scope-"
    prefix: str = ""
    suffix: str = ""

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Only includes keys that are valid HighlightConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                HighlightConfig attribute names.

        Returns:
            New HighlightConfig instance with values from dict.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "class_prefix": "hl-",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.class_prefix
            'hl-'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set configuration for current context.

    Args:
        config: HighlightConfig instance to use for this context.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: HighlightConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
]
