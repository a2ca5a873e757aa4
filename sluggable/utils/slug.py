"""URL slug generation engine.

Wraps python-slugify behind a small object so each (record type, attribute)
pair can carry its own transliteration rules.
"""

from collections.abc import Callable, Iterable
from threading import Lock
from typing import Any

from slugify import slugify

from sluggable.constants import DEFAULT_SEPARATOR
from sluggable.models.capabilities import CustomizesSlugEngine
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)


class SlugEngine:
    """Turns arbitrary text into a URL-safe slug."""

    def __init__(
        self,
        *,
        lowercase: bool = True,
        stopwords: Iterable[str] = (),
        regex_pattern: str | None = None,
        replacements: Iterable[tuple[str, str]] = (),
        allow_unicode: bool = False,
    ) -> None:
        self.lowercase = lowercase
        self.stopwords = list(stopwords)
        self.regex_pattern = regex_pattern
        self.replacements = [tuple(rule) for rule in replacements]
        self.allow_unicode = allow_unicode

    def add_rule(self, old: str, new: str) -> "SlugEngine":
        """
        Register a replacement applied before transliteration.

        Args:
            old: Text to replace
            new: Replacement text

        Returns:
            The engine itself, for chaining

        Examples:
            >>> SlugEngine().add_rule("&", "and").slugify("Salt & Pepper")
            'salt-and-pepper'
        """
        self.replacements.append((old, new))
        return self

    def add_stopwords(self, *words: str) -> "SlugEngine":
        """Drop the given words from generated slugs."""
        self.stopwords.extend(words)
        return self

    def slugify(self, text: str, separator: str = DEFAULT_SEPARATOR) -> str:
        """
        Generate a URL-safe slug from text.

        Args:
            text: Input text (e.g., a record title)
            separator: Word separator

        Returns:
            URL-safe slug, possibly empty

        Examples:
            >>> SlugEngine().slugify("Hello, World!")
            'hello-world'
            >>> SlugEngine().slugify("Café résumé", "_")
            'cafe_resume'
        """
        return slugify(
            text,
            separator=separator,
            lowercase=self.lowercase,
            stopwords=self.stopwords,
            regex_pattern=self.regex_pattern,
            replacements=self.replacements,
            allow_unicode=self.allow_unicode,
        )


class SlugEngineRegistry:
    """Memoizes one SlugEngine per (record type, attribute)."""

    def __init__(self, factory: Callable[[], SlugEngine] = SlugEngine) -> None:
        self._factory = factory
        self._engines: dict[tuple[type, str], SlugEngine] = {}
        self._lock = Lock()

    def get(self, record: Any, attribute: str) -> SlugEngine:
        """
        Get the engine for a record's attribute, creating it on first use.

        Record types inheriting ``CustomizesSlugEngine`` may tune or replace
        the engine when it is first created; the result is reused afterwards.

        Args:
            record: Record (or record type instance) being slugged
            attribute: Slug attribute name

        Returns:
            Memoized SlugEngine
        """
        key = (type(record), attribute)

        with self._lock:
            engine = self._engines.get(key)
            if engine is None:
                engine = self._factory()
                if isinstance(record, CustomizesSlugEngine):
                    engine = record.customize_slug_engine(engine, attribute)
                self._engines[key] = engine
                logger.debug(
                    "Slug engine created",
                    record_type=key[0].__name__,
                    attribute=attribute,
                )

        return engine

    def reset(self) -> None:
        """Forget every memoized engine."""
        with self._lock:
            self._engines.clear()

    def __len__(self) -> int:
        return len(self._engines)
