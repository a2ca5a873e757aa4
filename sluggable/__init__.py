"""Automatic, unique URL slugs for SQLAlchemy records."""

from sluggable.exceptions import SluggableConfigError, SlugNotFoundError
from sluggable.models import (
    CustomizesSlugEngine,
    HasUniqueSlugConstraints,
    SlugDecision,
    SlugFieldConfig,
    Sluggable,
    SoftDeletes,
)
from sluggable.services import ConfigResolver, SluggableObserver, SlugService, install
from sluggable.stores import SQLAlchemyRecordStore
from sluggable.utils import SlugEngine, SlugEngineRegistry

__version__ = "1.0.0"

__all__ = [
    "Sluggable",
    "SoftDeletes",
    "CustomizesSlugEngine",
    "HasUniqueSlugConstraints",
    "SlugFieldConfig",
    "SlugDecision",
    "SlugService",
    "SluggableObserver",
    "ConfigResolver",
    "SQLAlchemyRecordStore",
    "SlugEngine",
    "SlugEngineRegistry",
    "SluggableConfigError",
    "SlugNotFoundError",
    "install",
]
