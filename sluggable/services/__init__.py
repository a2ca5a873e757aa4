"""Slug building, uniqueness and lifecycle services."""

from sluggable.services.config_resolver import ConfigResolver
from sluggable.services.observer import SluggableObserver, install
from sluggable.services.slug_service import SlugService
from sluggable.services.uniqueness import UniquenessResolver, generate_suffix, parse_suffix

__all__ = [
    "ConfigResolver",
    "SlugService",
    "UniquenessResolver",
    "generate_suffix",
    "parse_suffix",
    "SluggableObserver",
    "install",
]
