"""Capability mixins declared by sluggable record types.

Record types opt into optional behaviour by inheriting from these mixins;
the services check for them with ``isinstance``/``issubclass``. The mixins are
plain classes so they combine with SQLAlchemy declarative bases.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sluggable.constants import DEFAULT_DELETED_AT_COLUMN

if TYPE_CHECKING:
    from sluggable.models.config import SlugFieldConfig
    from sluggable.utils.slug import SlugEngine

# Either ["slug", ...] or {"slug": {"source": "title"}, "code": None}
SluggableDeclaration = Sequence[str] | Mapping[str, Mapping[str, Any] | None]


class Sluggable:
    """Base capability: the record type declares which attributes are slugs."""

    # Set to name the primary slug attribute when it is not the first declared one.
    slug_key_name_override = None

    @classmethod
    def sluggable(cls) -> SluggableDeclaration:
        """Return the sluggable attribute declarations for this record type."""
        raise NotImplementedError(f"{cls.__name__} must implement sluggable()")

    @classmethod
    def slug_key_name(cls) -> str:
        """Name of the primary slug attribute."""
        if cls.slug_key_name_override:
            return cls.slug_key_name_override

        declaration = cls.sluggable()
        if isinstance(declaration, Mapping):
            return next(iter(declaration))
        return declaration[0]

    @property
    def slug_key(self) -> Any:
        """Value of the primary slug attribute."""
        return getattr(self, self.slug_key_name())


def iter_sluggable(
    declaration: SluggableDeclaration,
) -> list[tuple[str, Mapping[str, Any] | None]]:
    """
    Normalize a sluggable declaration into (attribute, overrides) pairs.

    Positional entries (plain attribute names) carry no overrides and use the
    default configuration.

    Args:
        declaration: Declaration returned by ``Sluggable.sluggable()``

    Returns:
        Pairs in declaration order
    """
    if isinstance(declaration, Mapping):
        return list(declaration.items())
    return [(attribute, None) for attribute in declaration]


class SoftDeletes:
    """Marks a record type whose rows are soft-deleted through a timestamp column."""

    deleted_at_column = DEFAULT_DELETED_AT_COLUMN


class CustomizesSlugEngine:
    """Record type that tunes the slug engine used for its attributes."""

    def customize_slug_engine(self, engine: "SlugEngine", attribute: str) -> "SlugEngine":
        """Return the engine to use for ``attribute``; called once per type and attribute."""
        raise NotImplementedError


class HasUniqueSlugConstraints:
    """Record type that narrows the set of peers a slug must be unique among."""

    def unique_slug_constraints(
        self, query: Any, attribute: str, config: "SlugFieldConfig", slug: str
    ) -> Any:
        """Return ``query`` with extra criteria applied (e.g. same tenant)."""
        raise NotImplementedError

    def shares_unique_slug_scope(self, other: Any, attribute: str) -> bool:
        """
        Whether an unsaved record of the same type falls under the same constraints.

        Used for records pending in the same flush, which the constraint query
        cannot see. Defaults to True, so pending records always count as peers.
        """
        return True
