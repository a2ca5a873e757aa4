"""Unit tests for suffix computation."""

import pytest

from sluggable.services.uniqueness import generate_suffix, parse_suffix


class TestParseSuffix:
    """Test parse_suffix function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("3", 3), ("12", 12), ("12-draft", 12), ("", 0), ("bar", 0), ("-", 0)],
    )
    def test_parse_suffix(self, value: str, expected: int) -> None:
        """Test leading integers are parsed and anything else is 0."""
        assert parse_suffix(value) == expected


class TestGenerateSuffix:
    """Test generate_suffix function."""

    def test_suffix_is_highest_plus_one(self) -> None:
        """Test gaps are not filled."""
        peers = {1: "foo", 2: "foo-1", 3: "foo-3"}
        assert generate_suffix("foo", "-", peers) == "4"

    def test_suffix_for_single_peer(self) -> None:
        """Test first collision gets suffix 1."""
        assert generate_suffix("hello-world", "-", {1: "hello-world"}) == "1"

    def test_non_numeric_peers_count_as_zero(self) -> None:
        """Test unrelated longer slugs do not raise the counter."""
        peers = {1: "foo", 2: "foo-bar", 3: "foo-baz"}
        assert generate_suffix("foo", "-", peers) == "1"

    def test_other_separator(self) -> None:
        """Test suffixes are read after the configured separator."""
        peers = {1: "foo", 2: "foo_7"}
        assert generate_suffix("foo", "_", peers) == "8"

    def test_own_exact_slug_keeps_last_segment(self) -> None:
        """Test a record already holding the exact slug keeps its last segment."""
        peers = {1: "foo-2", 5: "foo-2-1"}
        assert generate_suffix("foo-2", "-", peers, record_key=1) == "2"

    def test_other_record_exact_slug(self) -> None:
        """Test the exact slug held by another record is counted normally."""
        peers = {1: "foo-2", 5: "foo-2-1"}
        assert generate_suffix("foo-2", "-", peers, record_key=9) == "2"
