"""Unit tests for the slug engine."""

from sluggable.models.capabilities import CustomizesSlugEngine
from sluggable.utils.slug import SlugEngine, SlugEngineRegistry


class Plain:
    """Record type without engine customization."""


class Other:
    """Second plain record type."""


class Customized(CustomizesSlugEngine):
    """Record type adding a replacement rule."""

    calls = 0

    def customize_slug_engine(self, engine: SlugEngine, attribute: str) -> SlugEngine:
        Customized.calls += 1
        return engine.add_rule("&", "and")


class TestSlugEngine:
    """Test SlugEngine class."""

    def test_basic_slug_generation(self) -> None:
        """Test basic slug generation."""
        engine = SlugEngine()
        assert engine.slugify("Hello World") == "hello-world"
        assert engine.slugify("Hello, World!") == "hello-world"

    def test_slug_with_special_characters(self) -> None:
        """Test slug generation with special characters."""
        engine = SlugEngine()
        assert engine.slugify("AI & ML: The Future!") == "ai-ml-the-future"
        assert engine.slugify("Test (2024) - Part 1") == "test-2024-part-1"

    def test_slug_with_separator(self) -> None:
        """Test custom separators."""
        engine = SlugEngine()
        assert engine.slugify("Hello World", "_") == "hello_world"
        assert engine.slugify("Hello World", ".") == "hello.world"

    def test_slug_with_unicode(self) -> None:
        """Test transliteration of unicode characters."""
        assert SlugEngine().slugify("Café résumé") == "cafe-resume"

    def test_slug_only_special_chars(self) -> None:
        """Test text without slug characters gives an empty slug."""
        assert SlugEngine().slugify("!!!???") == ""

    def test_slug_rules_and_stopwords(self) -> None:
        """Test replacement rules and stopwords."""
        engine = SlugEngine().add_rule("&", "and").add_stopwords("the")
        assert engine.slugify("Salt & Pepper") == "salt-and-pepper"
        assert engine.slugify("The Lord of the Rings") == "lord-of-rings"

    def test_slug_keeps_case(self) -> None:
        """Test lowercase can be disabled."""
        assert SlugEngine(lowercase=False).slugify("Hello World") == "Hello-World"


class TestSlugEngineRegistry:
    """Test SlugEngineRegistry class."""

    def test_registry_memoizes_per_type_and_attribute(self) -> None:
        """Test one engine per (type, attribute)."""
        registry = SlugEngineRegistry()
        first = registry.get(Plain(), "slug")

        assert registry.get(Plain(), "slug") is first
        assert registry.get(Plain(), "code") is not first
        assert registry.get(Other(), "slug") is not first
        assert len(registry) == 3

    def test_registry_customizes_once(self) -> None:
        """Test customization runs on first creation only."""
        Customized.calls = 0
        registry = SlugEngineRegistry()

        engine = registry.get(Customized(), "slug")
        registry.get(Customized(), "slug")

        assert Customized.calls == 1
        assert engine.slugify("Fish & Chips") == "fish-and-chips"

    def test_registry_reset(self) -> None:
        """Test reset drops memoized engines."""
        registry = SlugEngineRegistry()
        first = registry.get(Plain(), "slug")
        registry.reset()

        assert len(registry) == 0
        assert registry.get(Plain(), "slug") is not first

    def test_registry_custom_factory(self) -> None:
        """Test engines come from the given factory."""
        registry = SlugEngineRegistry(factory=lambda: SlugEngine(lowercase=False))
        assert registry.get(Plain(), "slug").slugify("Hello World") == "Hello-World"
