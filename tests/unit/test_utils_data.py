"""Unit tests for nested attribute lookup."""

from types import SimpleNamespace

from sluggable.utils.data import data_get


class TestDataGet:
    """Test data_get function."""

    def test_attribute_lookup(self) -> None:
        """Test plain and nested attributes."""
        record = SimpleNamespace(title="Hello", author=SimpleNamespace(name="Ada"))
        assert data_get(record, "title") == "Hello"
        assert data_get(record, "author.name") == "Ada"

    def test_mapping_and_sequence_lookup(self) -> None:
        """Test mappings and numeric sequence segments."""
        record = SimpleNamespace(meta={"tags": ["python", "orm"]})
        assert data_get(record, "meta.tags.1") == "orm"

    def test_missing_segments(self) -> None:
        """Test any missing segment yields the default."""
        record = SimpleNamespace(author=None, meta={"tags": []})
        assert data_get(record, "author.name") is None
        assert data_get(record, "missing") is None
        assert data_get(record, "meta.tags.0") is None
        assert data_get(record, "meta.tags.first") is None
        assert data_get(record, "meta.other", default="") == ""

    def test_string_is_not_indexed(self) -> None:
        """Test strings are treated as leaf values."""
        assert data_get({"title": "abc"}, "title.0") is None
