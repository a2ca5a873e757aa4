"""Record store contract used by the slug services."""

from collections.abc import Iterable
from typing import Any, Protocol

from sluggable.models.config import SlugFieldConfig


class RecordStore(Protocol):
    """Persistence operations the slug services rely on."""

    def get_attribute(self, record: Any, name: str) -> Any:
        """Current value of an attribute."""
        ...

    def set_attribute(self, record: Any, name: str, value: Any) -> None:
        """Assign an attribute."""
        ...

    def is_dirty(self, record: Any, names: str | Iterable[str]) -> bool:
        """Whether any of the attributes changed since the record was loaded."""
        ...

    def exists(self, record: Any) -> bool:
        """Whether the record is already persisted."""
        ...

    def record_key(self, record: Any) -> Any:
        """Primary key of the record, or None when it has none yet."""
        ...

    def supports_soft_delete(self, record_type: type) -> bool:
        """Whether rows of this type are soft-deleted."""
        ...

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
        Slugs equal to ``slug`` or starting with ``slug + separator``.

        Covers stored rows and records pending in the same unit of work.

        Returns:
            Mapping of record key -> slug value, stored rows ordered by key
        """
        ...

    def replicate(self, record: Any, exclude: Iterable[str] = ()) -> Any:
        """New, not yet persisted copy of a record without its key."""
        ...
