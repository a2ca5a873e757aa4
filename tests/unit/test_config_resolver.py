"""Unit tests for the configuration resolver."""

from pathlib import Path

import pytest
import yaml

from sluggable.models.config import SlugFieldConfig
from sluggable.services.config_resolver import ConfigResolver


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Settings file overriding a few defaults."""
    path = tmp_path / "sluggable.yaml"
    path.write_text(yaml.dump({"defaults": {"separator": "_", "maxLength": 30}}))
    return path


class TestConfigResolver:
    """Test ConfigResolver class."""

    def test_resolve_without_overrides(self) -> None:
        """Test built-in defaults are used."""
        assert ConfigResolver().resolve() == SlugFieldConfig()

    def test_resolve_overrides_win(self) -> None:
        """Test override keys win and missing keys fall back."""
        config = ConfigResolver().resolve({"source": "title", "maxLength": 12})
        assert config.source == "title"
        assert config.max_length == 12
        assert config.separator == "-"
        assert config.unique is True

    def test_resolve_snake_case_overrides(self) -> None:
        """Test snake_case override keys replace the camelCase defaults."""
        config = ConfigResolver(defaults={"maxLength": 50}).resolve({"max_length": 5})
        assert config.max_length == 5

    def test_resolve_is_shallow(self) -> None:
        """Test list values are replaced, not merged."""
        resolver = ConfigResolver(defaults={"reserved": ["admin", "login"]})
        assert resolver.resolve({"reserved": ["api"]}).reserved == ["api"]

    def test_resolve_keeps_callables(self) -> None:
        """Test callable options pass through unchanged."""

        def method(text: str, separator: str) -> str:
            return text

        assert ConfigResolver().resolve({"method": method}).method is method

    def test_resolve_from_config_instance(self) -> None:
        """Test a SlugFieldConfig override only applies the fields it sets."""
        resolver = ConfigResolver(defaults={"separator": "_"})
        config = resolver.resolve(SlugFieldConfig(source="name"))
        assert config.source == "name"
        assert config.separator == "_"

    def test_defaults_loaded_from_settings_file(self, settings_file: Path) -> None:
        """Test defaults come from the settings YAML."""
        config = ConfigResolver(settings_path=settings_file).resolve({"source": "title"})
        assert config.separator == "_"
        assert config.max_length == 30

    def test_defaults_memoized_until_reset(self, settings_file: Path) -> None:
        """Test the default snapshot is loaded once."""
        resolver = ConfigResolver(settings_path=settings_file)
        assert resolver.defaults.separator == "_"

        settings_file.write_text(yaml.dump({"defaults": {"separator": "."}}))
        assert resolver.defaults.separator == "_"

        resolver.reset()
        assert resolver.defaults.separator == "."

    def test_missing_settings_file(self, tmp_path: Path) -> None:
        """Test a missing settings file raises on first use."""
        resolver = ConfigResolver(settings_path=tmp_path / "missing.yaml")
        with pytest.raises(FileNotFoundError):
            resolver.resolve()
