"""Uniqueness resolution for generated slugs.

A candidate slug is compared with every stored slug of the same attribute that
equals it or extends it with ``separator + <anything>``. Collisions are
resolved by appending ``separator + suffix``, where the default suffix is one
more than the highest numeric suffix already in use.
"""

import re
from collections.abc import Mapping
from typing import Any

from sluggable.exceptions import SluggableConfigError
from sluggable.models.config import SlugFieldConfig
from sluggable.stores.base import RecordStore
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_suffix(value: str) -> int:
    """
    Parse the leading integer of a suffix, or 0 when there is none.

    Examples:
        >>> parse_suffix("3")
        3
        >>> parse_suffix("12-draft")
        12
        >>> parse_suffix("bar")
        0
    """
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def generate_suffix(
    slug: str,
    separator: str,
    peers: Mapping[Any, str],
    record_key: Any = None,
) -> str:
    """
    Compute the default uniqueness suffix for a colliding slug.

    If the exact slug is already stored for ``record_key``, the last segment
    of that slug is kept. Otherwise every peer's text after
    ``slug + separator`` is parsed as an integer (non-numeric text counts as
    0) and the highest value plus one is returned.

    Args:
        slug: Colliding candidate slug
        separator: Separator between slug and suffix
        peers: Stored slugs keyed by record key
        record_key: Key of the record being slugged, if persisted

    Returns:
        Suffix to append after the separator

    Examples:
        >>> generate_suffix("foo", "-", {1: "foo", 2: "foo-1", 3: "foo-3"})
        '4'
        >>> generate_suffix("foo", "-", {1: "foo", 2: "foo-bar"})
        '1'
    """
    if record_key is not None:
        for key, value in peers.items():
            if value == slug and key == record_key:
                return slug.split(separator)[-1]

    prefix_length = len(slug + separator)
    highest = max((parse_suffix(value[prefix_length:]) for value in peers.values()), default=0)
    return str(highest + 1)


class UniquenessResolver:
    """Makes slugs unique among the stored peers of the same attribute."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def existing_slugs(
        self, record: Any, slug: str, attribute: str, config: SlugFieldConfig
    ) -> dict[Any, str]:
        """
        Load the peer slug set for a candidate.

        Soft-deleted peers are included only when ``include_trashed`` is set
        and the record type supports soft deletes.

        Returns:
            Mapping of record key -> stored slug, ordered by key
        """
        record_type = type(record)
        include_trashed = config.include_trashed and self.store.supports_soft_delete(record_type)

        return self.store.find_similar(
            record_type,
            attribute,
            slug,
            config.separator,
            include_trashed,
            record=record,
            config=config,
        )

    def make_unique(
        self, record: Any, slug: Any, config: SlugFieldConfig, attribute: str
    ) -> Any:
        """
        Return a slug that no other stored record uses for ``attribute``.

        A record that already holds the candidate (or a suffixed form of it)
        keeps its current slug, so re-saving never mints a new suffix.

        A candidate that is not text (from a ``method`` callable) is compared
        as its string form, with None as the empty string.

        Args:
            record: Record being slugged
            slug: Candidate slug
            config: Resolved configuration
            attribute: Slug attribute name

        Returns:
            The candidate itself or the candidate plus a suffix

        Raises:
            SluggableConfigError: If ``uniqueSuffix`` is set but not callable
        """
        if not config.unique:
            return slug

        if not isinstance(slug, str):
            slug = "" if slug is None else str(slug)

        separator = config.separator
        peers = self.existing_slugs(record, slug, attribute, config)

        if not peers or slug not in peers.values():
            return slug

        record_key = self.store.record_key(record)
        if record_key is not None and record_key in peers:
            current_slug = peers[record_key]
            if current_slug == slug or current_slug.startswith(slug):
                return current_slug

        method = config.unique_suffix
        if method is None:
            suffix = generate_suffix(slug, separator, peers, record_key=record_key)
        elif callable(method):
            suffix = method(slug, separator, peers)
        else:
            message = (
                f'Sluggable "uniqueSuffix" for {type(record).__name__}:{attribute} '
                "is not callable nor None."
            )
            logger.error(message, record_type=type(record).__name__, attribute=attribute)
            raise SluggableConfigError(message, type(record), attribute, "uniqueSuffix")

        unique_slug = f"{slug}{separator}{suffix}"
        logger.debug(
            "Slug collision resolved",
            attribute=attribute,
            slug=slug,
            unique_slug=unique_slug,
            peers=len(peers),
        )
        return unique_slug
