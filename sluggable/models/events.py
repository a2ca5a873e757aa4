"""Lifecycle hook types for the slugging observer."""

from collections.abc import Callable
from enum import StrEnum
from typing import Any


class SlugDecision(StrEnum):
    """Result of a pre-slugging hook."""

    PROCEED = "proceed"
    ABORT = "abort"


# (record, event name) -> decision; None means PROCEED
SluggingHook = Callable[[Any, str], SlugDecision | None]

# (record, whether the slug changed)
SluggedHook = Callable[[Any, bool], None]
