"""Language registry for name and alias lookup.

The registry maps every lowercase alias of a language to that language,
so callers can pick a language from a string (a fence info string, a file
extension, a CLI flag).

Thread Safety:
LanguageRegistry is immutable after creation. Safe to share.
Use LanguageRegistryBuilder for mutable construction.

Example:
    >>> builder = LanguageRegistryBuilder()
    >>> builder.register(Brainheck())
    >>> registry = builder.build()
    >>> registry.get("BRAINHECK").name()
    'Brainheck'
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from resalta.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from resalta.language import Language

logger = get_logger(__name__)


class LanguageRegistry:
    """Immutable registry of languages.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_languages", "_by_name")

    def __init__(
        self,
        languages: tuple[Language, ...],
        by_name: Mapping[str, Language],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use LanguageRegistryBuilder to create instances.
        """
        self._languages = languages
        self._by_name = MappingProxyType(dict(by_name))

    def get(self, name: str) -> Language | None:
        """Get language by name or alias (case-insensitive).

        Args:
            name: Name or alias (e.g., "brainheck")

        Returns:
            Language if registered, None otherwise
        """
        return self._by_name.get(name.lower())

    def has(self, name: str) -> bool:
        """Check if a name or alias is registered."""
        return name.lower() in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered names and aliases (lowercase)."""
        return frozenset(self._by_name.keys())

    @property
    def languages(self) -> tuple[Language, ...]:
        """Get all registered languages in registration order."""
        return self._languages

    def __contains__(self, name: object) -> bool:
        """Support 'name in registry' syntax."""
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        """Number of registered names and aliases."""
        return len(self._by_name)


class LanguageRegistryBuilder:
    """Mutable builder for LanguageRegistry.

    Example:
        >>> builder = LanguageRegistryBuilder()
        >>> builder.register(Brainheck())
        >>> registry = builder.build()
    """

    __slots__ = ("_languages", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._languages: list[Language] = []
        self._by_name: dict[str, Language] = {}

    def register(self, language: Language) -> LanguageRegistryBuilder:
        """Register a language under its name and every alias.

        Args:
            language: Object implementing the Language protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If the object does not implement the Language protocol
            ValueError: If a name or alias is already registered
        """
        for attr in ("name", "names", "init"):
            if not callable(getattr(language, attr, None)):
                msg = f"Language {type(language).__name__} missing '{attr}' method"
                raise TypeError(msg)

        # Primary name first, duplicates dropped, order kept
        keys = list(dict.fromkeys([language.name().lower(), *(a.lower() for a in language.names())]))

        for key in keys:
            existing = self._by_name.get(key)
            if existing is not None:
                msg = f"Language '{key}' already registered by {type(existing).__name__}"
                raise ValueError(msg)

        for key in keys:
            self._by_name[key] = language

        self._languages.append(language)
        logger.debug("Registered language %s (%s)", language.name(), ", ".join(keys))
        return self

    def register_all(self, languages: list[Language]) -> LanguageRegistryBuilder:
        """Register multiple languages.

        Returns:
            Self for chaining
        """
        for language in languages:
            self.register(language)
        return self

    def build(self) -> LanguageRegistry:
        """Build immutable registry from registered languages."""
        return LanguageRegistry(
            languages=tuple(self._languages),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered languages."""
        return len(self._languages)
