"""Configuration models for slug fields."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from sluggable.constants import DEFAULT_SEPARATOR


class SlugFieldConfig(BaseModel):
    """Configuration for a single sluggable attribute.

    Keys use the camelCase aliases of the published configuration
    (``maxLength``, ``uniqueSuffix``, ...); snake_case names are accepted too.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    source: str | list[str] | None = Field(
        default=None,
        description="Attribute path(s) to build the slug from; None uses str(record)",
    )
    separator: str = Field(default=DEFAULT_SEPARATOR)
    max_length: int | None = Field(
        default=None, alias="maxLength", description="Truncate generated slug (characters)"
    )
    method: Any = Field(
        default=None, description="Callable (text, separator) -> slug replacing the engine"
    )
    unique: bool = Field(default=True)
    unique_suffix: Any = Field(
        default=None,
        alias="uniqueSuffix",
        description="Callable (slug, separator, peers) -> suffix",
    )
    on_update: bool = Field(
        default=False, alias="onUpdate", description="Re-slug on every save"
    )
    reserved: Any = Field(
        default=None, description="None, a list of forbidden slugs, or a callable(record)"
    )
    include_trashed: bool = Field(
        default=False,
        alias="includeTrashed",
        description="Include soft-deleted peers when checking uniqueness",
    )

    @property
    def sources(self) -> list[str] | None:
        """Source attribute paths as a list, or None for the record's string form."""
        if self.source is None:
            return None
        if isinstance(self.source, str):
            return [self.source]
        return list(self.source)


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default=None, description="Optional log file")
    rotation: str = Field(default="50 MB", description="Log rotation size/time")
    retention: str = Field(default="14 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class SluggableSettings(BaseModel):
    """Process-wide settings: slug defaults plus logging."""

    defaults: SlugFieldConfig = Field(default_factory=SlugFieldConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
