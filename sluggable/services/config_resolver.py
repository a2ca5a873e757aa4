"""Resolution of per-attribute slug configuration."""

from collections.abc import Mapping
from pathlib import Path
from threading import Lock
from typing import Any

from sluggable.models.config import SlugFieldConfig
from sluggable.utils.config_loader import load_settings
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)

# snake_case field name -> published camelCase key
_ALIASES = {
    name: field.alias
    for name, field in SlugFieldConfig.model_fields.items()
    if field.alias is not None
}


class ConfigResolver:
    """
    Merges per-attribute overrides over the process-wide defaults.

    The default snapshot is loaded lazily on first use and kept until
    ``reset()``; the merged configurations are never cached.
    """

    def __init__(
        self,
        defaults: SlugFieldConfig | Mapping[str, Any] | None = None,
        settings_path: Path | str | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            defaults: Explicit defaults; takes precedence over ``settings_path``
            settings_path: YAML settings file whose ``defaults`` section is used
        """
        self._explicit_defaults = defaults
        self._settings_path = settings_path
        self._defaults: SlugFieldConfig | None = None
        self._lock = Lock()

    @property
    def defaults(self) -> SlugFieldConfig:
        """Memoized default configuration."""
        if self._defaults is None:
            with self._lock:
                if self._defaults is None:
                    self._defaults = self._load_defaults()
        return self._defaults

    def _load_defaults(self) -> SlugFieldConfig:
        if isinstance(self._explicit_defaults, SlugFieldConfig):
            return self._explicit_defaults
        if self._explicit_defaults is not None:
            return SlugFieldConfig.model_validate(dict(self._explicit_defaults))
        if self._settings_path is not None:
            return load_settings(self._settings_path).defaults

        logger.debug("Using built-in slug defaults")
        return SlugFieldConfig()

    def resolve(
        self, overrides: SlugFieldConfig | Mapping[str, Any] | None = None
    ) -> SlugFieldConfig:
        """
        Shallow-merge overrides onto the defaults.

        Args:
            overrides: Per-attribute options; keys may be camelCase or snake_case

        Returns:
            Fully populated configuration

        Examples:
            >>> ConfigResolver().resolve({"source": "title", "maxLength": 20}).max_length
            20
        """
        if isinstance(overrides, SlugFieldConfig):
            overrides = overrides.model_dump(by_alias=True, exclude_unset=True)

        merged = self.defaults.model_dump(by_alias=True)
        for key, value in (overrides or {}).items():
            merged[_ALIASES.get(key, key)] = value

        return SlugFieldConfig.model_validate(merged)

    def reset(self) -> None:
        """Drop the memoized defaults so the next access reloads them."""
        with self._lock:
            self._defaults = None
