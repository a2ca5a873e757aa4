"""Utility functions and helpers."""

from sluggable.utils.config_loader import load_settings
from sluggable.utils.data import data_get
from sluggable.utils.logging import get_logger, setup_logging
from sluggable.utils.slug import SlugEngine, SlugEngineRegistry

__all__ = [
    "setup_logging",
    "get_logger",
    "load_settings",
    "data_get",
    "SlugEngine",
    "SlugEngineRegistry",
]
