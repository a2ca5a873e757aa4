"""
SQLAlchemy implementation of the record store contract.

Works with any mapped class of SQLAlchemy 2.x; dirty tracking and existence
come from the instance state, peer slugs from a single SELECT.
"""

from collections.abc import Iterable
from typing import Any

from sqlalchemy import inspect, or_, select
from sqlalchemy.orm import Session

from sluggable.exceptions import SlugNotFoundError
from sluggable.models.capabilities import HasUniqueSlugConstraints, Sluggable, SoftDeletes
from sluggable.models.config import SlugFieldConfig
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)


class SQLAlchemyRecordStore:
    """
    Record store backed by a synchronous SQLAlchemy session.

    Attributes:
        session: Session used for peer queries and slug lookups
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_attribute(self, record: Any, name: str) -> Any:
        return getattr(record, name, None)

    def set_attribute(self, record: Any, name: str, value: Any) -> None:
        setattr(record, name, value)

    def is_dirty(self, record: Any, names: str | Iterable[str]) -> bool:
        if isinstance(names, str):
            names = [names]

        attrs = inspect(record).attrs
        return any(attrs[name].history.has_changes() for name in names)

    def exists(self, record: Any) -> bool:
        return inspect(record).has_identity

    def record_key(self, record: Any) -> Any:
        identity = inspect(record).identity
        if identity is None:
            return None
        return identity[0] if len(identity) == 1 else identity

    def supports_soft_delete(self, record_type: type) -> bool:
        return issubclass(record_type, SoftDeletes)

    def find_similar(
        self,
        record_type: type,
        attribute: str,
        slug: str,
        separator: str,
        include_trashed: bool,
        *,
        record: Any = None,
        config: SlugFieldConfig | None = None,
    ) -> dict[Any, str]:
        """
        Find slugs equal to ``slug`` or prefixed by ``slug + separator``.

        Stored rows come from a single query. Records pending in the session
        (new or modified, not deleted) are matched in memory on their current
        values, so records slugged in the same flush see each other. Pending
        records without a primary key are keyed by the instance itself.

        Soft-deleted rows are skipped unless ``include_trashed`` is set. When
        the record inherits ``HasUniqueSlugConstraints`` its constraints are
        applied to the query and ``shares_unique_slug_scope`` filters the
        pending records.

        Args:
            record_type: Mapped class to search
            attribute: Slug column attribute name
            slug: Candidate slug
            separator: Separator between slug and suffix
            include_trashed: Include soft-deleted rows
            record: Record being slugged, if any
            config: Resolved configuration of the attribute

        Returns:
            Mapping of record key -> slug value; stored rows ordered by primary
            key, followed by pending records
        """
        primary_key = inspect(record_type).primary_key
        column = getattr(record_type, attribute)

        stmt = (
            select(*primary_key, column)
            .where(or_(column == slug, column.startswith(slug + separator, autoescape=True)))
            .order_by(*primary_key)
        )

        if self.supports_soft_delete(record_type) and not include_trashed:
            stmt = stmt.where(getattr(record_type, record_type.deleted_at_column).is_(None))

        if isinstance(record, HasUniqueSlugConstraints):
            stmt = record.unique_slug_constraints(
                stmt, attribute, config or SlugFieldConfig(), slug
            )

        key_width = len(primary_key)
        prefix = slug + separator

        with self.session.no_autoflush:
            similar = {
                (row[0] if key_width == 1 else tuple(row)[:key_width]): row[key_width]
                for row in self.session.execute(stmt)
            }

            for pending in self._pending_peers(record_type, attribute, record, include_trashed):
                value = getattr(pending, attribute, None)
                if isinstance(value, str) and (value == slug or value.startswith(prefix)):
                    key = self.record_key(pending)
                    similar[pending if key is None else key] = value

        logger.debug(
            "Similar slugs loaded",
            record_type=record_type.__name__,
            attribute=attribute,
            slug=slug,
            count=len(similar),
        )
        return similar

    def _pending_peers(
        self, record_type: type, attribute: str, record: Any, include_trashed: bool
    ) -> list[Any]:
        soft_deletes = self.supports_soft_delete(record_type) and not include_trashed
        constrained = isinstance(record, HasUniqueSlugConstraints)

        peers = []
        for pending in [*self.session.new, *self.session.dirty]:
            if pending is record or not isinstance(pending, record_type):
                continue
            if pending in self.session.deleted:
                continue
            if soft_deletes and getattr(pending, record_type.deleted_at_column) is not None:
                continue
            if constrained and not record.shares_unique_slug_scope(pending, attribute):
                continue
            peers.append(pending)
        return peers

    def replicate(self, record: Any, exclude: Iterable[str] = ()) -> Any:
        """
        Copy column attributes into a new transient instance.

        Primary key columns and ``exclude`` names are left unset.

        Args:
            record: Record to copy
            exclude: Attribute names not to copy

        Returns:
            New instance of the same class, not added to any session
        """
        excluded = set(exclude)
        mapper = inspect(type(record))
        clone = type(record)()

        for prop in mapper.column_attrs:
            if prop.key in excluded or any(column.primary_key for column in prop.columns):
                continue
            setattr(clone, prop.key, getattr(record, prop.key))

        return clone

    def find_by_slug(self, record_type: type[Sluggable], slug: str) -> Any:
        """
        Find a record by its primary slug.

        Args:
            record_type: Sluggable mapped class
            slug: Slug value to look up

        Returns:
            Matching record or None
        """
        column = getattr(record_type, record_type.slug_key_name())
        stmt = select(record_type).where(column == slug)
        return self.session.execute(stmt).scalars().first()

    def find_by_slug_or_fail(self, record_type: type[Sluggable], slug: str) -> Any:
        """
        Find a record by its primary slug or raise.

        Raises:
            SlugNotFoundError: If no record has this slug
        """
        record = self.find_by_slug(record_type, slug)
        if record is None:
            raise SlugNotFoundError(record_type, slug)
        return record
