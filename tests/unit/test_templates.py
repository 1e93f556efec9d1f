"""Unit tests for template composition."""

import pytest

from mirage_datagen.shared.exceptions import EmptyInputError, TemplateResolutionError
from mirage_datagen.shared.random_service import RandomService
from mirage_datagen.shared.templates import TemplateEngine, find_tokens


@pytest.fixture
def engine() -> TemplateEngine:
    return TemplateEngine(RandomService(seed=42))


class Counter:
    """Generator that returns successive numbered values."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"{self.prefix}{self.calls}"


class TestFindTokens:
    """Test placeholder scanning."""

    def test_tokens_in_order_of_appearance(self):
        assert find_tokens("{{b}} and {{a}} then {{b}}") == ["b", "a"]

    def test_whitespace_inside_braces_ignored(self):
        assert find_tokens("{{ city }}") == ["city"]

    def test_no_tokens(self):
        assert find_tokens("plain text") == []

    @pytest.mark.parametrize("pattern", ["{{}}", "{{two words}}", "{{a-b}}"])
    def test_malformed_placeholder_raises(self, pattern):
        with pytest.raises(TemplateResolutionError):
            find_tokens(pattern)

    @pytest.mark.parametrize("pattern", ["{{open", "close}}", "{{a}} {{b"])
    def test_unbalanced_braces_raise(self, pattern):
        with pytest.raises(TemplateResolutionError, match="Unbalanced"):
            find_tokens(pattern)


class TestResolve:
    """Test token substitution."""

    def test_literal_pattern_unchanged(self, engine):
        """A pattern without tokens is returned as-is and invokes nothing."""
        generator = Counter("x")
        assert engine.resolve("No tokens here", {"a": generator}) == "No tokens here"
        assert generator.calls == 0

    def test_tokens_substituted(self, engine):
        result = engine.resolve(
            "{{streets}} {{street_suffixes}} No: {{building_number}}",
            {
                "streets": lambda: "Atatürk",
                "street_suffixes": lambda: "Caddesi",
                "building_number": lambda: "12",
            },
        )
        assert result == "Atatürk Caddesi No: 12"

    def test_only_referenced_generators_called(self, engine):
        used = Counter("u")
        unused = Counter("n")
        engine.resolve("{{used}}", {"used": used, "unused": unused})
        assert used.calls == 1
        assert unused.calls == 0

    def test_repeated_token_shares_one_value(self, engine):
        """Each distinct token is generated once per resolution."""
        generator = Counter("v")
        assert engine.resolve("{{a}}-{{a}}-{{ a }}", {"a": generator}) == "v1-v1-v1"
        assert generator.calls == 1

    def test_unknown_token_raises(self, engine):
        with pytest.raises(TemplateResolutionError) as exc_info:
            engine.resolve("{{cities}}, {{planets}}", {"cities": lambda: "Paris"})
        assert exc_info.value.token == "planets"

    def test_generator_error_propagates(self, engine):
        def failing():
            raise LookupError("no data")

        with pytest.raises(LookupError):
            engine.resolve("{{a}}", {"a": failing})

    def test_fragments_not_rescanned(self, engine):
        """Generated values containing braces are substituted literally."""
        result = engine.resolve("[{{a}}]", {"a": lambda: "{{b}}"})
        assert result == "[{{b}}]"

    def test_values_stringified(self, engine):
        assert engine.resolve("No {{n}}", {"n": lambda: 7}) == "No 7"

    def test_nested_composition(self, engine):
        """A generator may compose another pattern one level down."""
        street = lambda: engine.resolve("{{name}} St", {"name": lambda: "Main"})  # noqa: E731
        assert engine.resolve("{{street}}, Boston", {"street": street}) == "Main St, Boston"


class TestCompose:
    """Test pattern choice plus resolution."""

    def test_compose_picks_from_patterns(self, engine):
        patterns = ["A {{x}}", "B {{x}}"]
        results = {engine.compose(patterns, {"x": lambda: "1"}) for _ in range(50)}
        assert results == {"A 1", "B 1"}

    def test_compose_empty_patterns_raise(self, engine):
        with pytest.raises(EmptyInputError):
            engine.compose([], {})
