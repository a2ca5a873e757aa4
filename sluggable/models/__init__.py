"""Data models and capability mixins."""

from sluggable.models.capabilities import (
    CustomizesSlugEngine,
    HasUniqueSlugConstraints,
    Sluggable,
    SluggableDeclaration,
    SoftDeletes,
    iter_sluggable,
)
from sluggable.models.config import LoggingConfig, SlugFieldConfig, SluggableSettings
from sluggable.models.events import SlugDecision, SluggedHook, SluggingHook

__all__ = [
    # Capabilities
    "Sluggable",
    "SluggableDeclaration",
    "SoftDeletes",
    "CustomizesSlugEngine",
    "HasUniqueSlugConstraints",
    "iter_sluggable",
    # Config
    "SlugFieldConfig",
    "LoggingConfig",
    "SluggableSettings",
    # Events
    "SlugDecision",
    "SluggingHook",
    "SluggedHook",
]
