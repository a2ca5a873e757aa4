"""Slug building for sluggable records.

For each declared slug attribute the service decides whether a new slug is
needed, extracts the source text, generates a candidate with the slug engine
(or a configured callable), bumps reserved words and finally makes the
candidate unique among stored peers.
"""

from collections.abc import Mapping
from typing import Any

from sluggable.constants import RESERVED_BUMP_SUFFIX, SOURCE_JOINER
from sluggable.exceptions import SluggableConfigError
from sluggable.models.capabilities import Sluggable, iter_sluggable
from sluggable.models.config import SlugFieldConfig
from sluggable.services.config_resolver import ConfigResolver
from sluggable.services.uniqueness import UniquenessResolver
from sluggable.stores.base import RecordStore
from sluggable.utils.data import data_get
from sluggable.utils.logging import get_logger
from sluggable.utils.slug import SlugEngineRegistry

logger = get_logger(__name__)


class SlugService:
    """
    Builds and maintains slugs for records declaring ``Sluggable``.

    Attributes:
        store: Record store used for attribute access and peer queries
        resolver: Configuration resolver holding the default snapshot
        engines: Registry of per-(type, attribute) slug engines
    """

    def __init__(
        self,
        store: RecordStore,
        resolver: ConfigResolver | None = None,
        engines: SlugEngineRegistry | None = None,
    ) -> None:
        self.store = store
        self.resolver = resolver or ConfigResolver()
        self.engines = engines or SlugEngineRegistry()
        self.uniqueness = UniquenessResolver(store)

    def configurations(self, record: Sluggable) -> list[tuple[str, SlugFieldConfig]]:
        """
        Resolve the configuration of every declared slug attribute.

        Args:
            record: Sluggable record

        Returns:
            (attribute, config) pairs in declaration order
        """
        return [
            (attribute, self.resolver.resolve(overrides))
            for attribute, overrides in iter_sluggable(record.sluggable())
        ]

    def slug(self, record: Sluggable, force: bool = False) -> bool:
        """
        Slug every declared attribute of a record.

        Args:
            record: Sluggable record
            force: Regenerate even when the current value would be kept

        Returns:
            True if any slug attribute now differs from its value before the call
        """
        previous: dict[str, Any] = {}

        for attribute, config in self.configurations(record):
            previous[attribute] = self.store.get_attribute(record, attribute)
            slug = self.build_slug(record, attribute, config, force)
            self.store.set_attribute(record, attribute, slug)

        return any(
            self.store.get_attribute(record, attribute) != value
            for attribute, value in previous.items()
        )

    def build_slug(
        self, record: Any, attribute: str, config: SlugFieldConfig, force: bool = False
    ) -> Any:
        """
        Build the slug for one attribute of a record.

        Returns the current value untouched when no slug is needed or the
        source text is empty.

        Args:
            record: Record being slugged
            attribute: Slug attribute name
            config: Resolved configuration
            force: Regenerate regardless of the current state

        Returns:
            New (or unchanged) attribute value
        """
        slug = self.store.get_attribute(record, attribute)

        if not (force or self.needs_slugging(record, attribute, config)):
            logger.debug(
                "Slugging not needed", record_type=type(record).__name__, attribute=attribute
            )
            return slug

        source = self.get_slug_source(record, config)
        if not source.strip():
            logger.debug(
                "Empty slug source", record_type=type(record).__name__, attribute=attribute
            )
            return slug

        slug = self.generate_slug(record, source, config, attribute)
        slug = self.validate_slug(record, slug, config, attribute)
        slug = self.make_slug_unique(record, slug, config, attribute)

        logger.debug(
            "Slug built", record_type=type(record).__name__, attribute=attribute, slug=slug
        )
        return slug

    def needs_slugging(self, record: Any, attribute: str, config: SlugFieldConfig) -> bool:
        """
        Decide whether an attribute needs a new slug.

        An empty value or ``onUpdate`` always wins; otherwise an explicitly
        assigned (dirty) value is kept, and new records are slugged.
        """
        if not self.store.get_attribute(record, attribute) or config.on_update:
            return True

        if self.store.is_dirty(record, attribute):
            return False

        return not self.store.exists(record)

    def get_slug_source(self, record: Any, config: SlugFieldConfig) -> str:
        """
        Build the text a slug is generated from.

        Without a configured source the record's string form is used. Missing
        or None lookups contribute an empty string.
        """
        sources = config.sources
        if sources is None:
            return str(record)

        parts = []
        for path in sources:
            value = data_get(record, path)
            parts.append("" if value is None else str(value))

        return SOURCE_JOINER.join(parts)

    def generate_slug(
        self, record: Any, source: str, config: SlugFieldConfig, attribute: str
    ) -> Any:
        """
        Turn source text into a candidate slug.

        Truncation to ``maxLength`` happens here, before any uniqueness
        suffix is added.

        Raises:
            SluggableConfigError: If ``method`` is set but not callable
        """
        separator = config.separator
        method = config.method

        if method is None:
            engine = self.engines.get(record, attribute)
            slug = engine.slugify(source, separator)
        elif callable(method):
            slug = method(source, separator)
        else:
            message = (
                f'Sluggable "method" for {type(record).__name__}:{attribute} '
                "is not callable nor None."
            )
            logger.error(message, record_type=type(record).__name__, attribute=attribute)
            raise SluggableConfigError(message, type(record), attribute, "method")

        if isinstance(slug, str) and config.max_length:
            slug = slug[: config.max_length]

        return slug

    def validate_slug(
        self, record: Any, slug: Any, config: SlugFieldConfig, attribute: str
    ) -> Any:
        """
        Bump a slug that collides with a reserved word.

        A reserved slug gets ``separator + "1"`` appended once; the bumped
        value is not checked again.

        Raises:
            SluggableConfigError: If ``reserved`` is not None, a list, or a
                callable returning None or a list
        """
        reserved = config.reserved

        if reserved is None:
            return slug

        if callable(reserved):
            reserved = reserved(record)
            if reserved is None:
                return slug

        if isinstance(reserved, (list, tuple, set, frozenset)):
            if slug in reserved:
                bumped = f"{slug}{config.separator}{RESERVED_BUMP_SUFFIX}"
                logger.debug("Reserved slug bumped", attribute=attribute, slug=slug, bumped=bumped)
                return bumped
            return slug

        message = (
            f'Sluggable "reserved" for {type(record).__name__}:{attribute} '
            "is not None, a list, or a callable that returns None/list."
        )
        logger.error(message, record_type=type(record).__name__, attribute=attribute)
        raise SluggableConfigError(message, type(record), attribute, "reserved")

    def make_slug_unique(
        self, record: Any, slug: Any, config: SlugFieldConfig, attribute: str
    ) -> Any:
        """Make a candidate slug unique among stored peers (see ``UniquenessResolver``)."""
        return self.uniqueness.make_unique(record, slug, config, attribute)

    def create_slug(
        self,
        record: Sluggable | type[Sluggable],
        attribute: str,
        from_text: str,
        config: SlugFieldConfig | Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Generate a unique slug for arbitrary text without saving anything.

        Args:
            record: Record or record type the slug is meant for
            attribute: Slug attribute name
            from_text: Text to slug
            config: Overrides; None uses the record type's declaration

        Returns:
            Slug that would be assigned for ``from_text``

        Raises:
            SluggableConfigError: If ``config`` is neither None nor a mapping

        Examples:
            >>> service.create_slug(Post, "slug", "My First Post")
            'my-first-post'
        """
        if isinstance(record, type):
            record = record()

        if config is None:
            config = dict(iter_sluggable(record.sluggable())).get(attribute)
        elif not isinstance(config, (Mapping, SlugFieldConfig)):
            message = (
                "SlugService.create_slug expects a mapping or None as config; "
                f"{type(config).__name__} given."
            )
            logger.error(message, record_type=type(record).__name__, attribute=attribute)
            raise SluggableConfigError(message, type(record), attribute, "config")

        resolved = self.resolver.resolve(config)

        slug = self.generate_slug(record, from_text, resolved, attribute)
        slug = self.validate_slug(record, slug, resolved, attribute)
        return self.make_slug_unique(record, slug, resolved, attribute)
