"""Record store contract and implementations."""

from sluggable.stores.base import RecordStore
from sluggable.stores.sqlalchemy_store import SQLAlchemyRecordStore

__all__ = ["RecordStore", "SQLAlchemyRecordStore"]
