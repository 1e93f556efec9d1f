"""
Property-based tests for the generation primitives.

Kept apart from the example-based modules so those still run when
hypothesis is not installed.
"""

import pytest

_hyp = pytest.importorskip("hypothesis")
from hypothesis import given
from hypothesis import strategies as st

from mirage_datagen.config.models import MirageConfig
from mirage_datagen.shared.random_service import RandomService
from mirage_datagen.shared.templates import TemplateEngine

SEEDS = st.integers(0, 2**32 - 1)


class TestRandomServiceProperties:
    """Bounds and shape guarantees of the random service."""

    @given(items=st.lists(st.integers(), min_size=1, max_size=30), seed=SEEDS)
    def test_uniform_element_is_member(self, items, seed):
        assert RandomService(seed).uniform_element(items) in items

    @given(low=st.integers(-10_000, 10_000), span=st.integers(0, 10_000), seed=SEEDS)
    def test_bounded_int_within_bounds(self, low, span, seed):
        value = RandomService(seed).bounded_int(low, low + span)
        assert low <= value <= low + span

    @given(
        low=st.floats(-1e6, 1e6, allow_nan=False),
        span=st.floats(0, 1e6, allow_nan=False),
        seed=SEEDS,
    )
    def test_bounded_double_within_bounds(self, low, span, seed):
        high = low + span
        value = RandomService(seed).bounded_double(low, high)
        assert low <= value <= high

    @given(
        low=st.floats(allow_nan=False, allow_infinity=False),
        high=st.floats(allow_nan=False, allow_infinity=False),
        seed=SEEDS,
    )
    def test_bounded_double_any_finite_pair(self, low, high, seed):
        """Holds across the whole float range, including spans that overflow."""
        low, high = min(low, high), max(low, high)
        value = RandomService(seed).bounded_double(low, high)
        assert low <= value <= high

    @given(pattern=st.text(alphabet="#ab- ", max_size=40), seed=SEEDS)
    def test_expand_pattern_shape_preserved(self, pattern, seed):
        """Same length; '#' positions hold digits, others are copied."""
        result = RandomService(seed).expand_pattern(pattern)
        assert len(result) == len(pattern)
        for original, expanded in zip(pattern, result):
            if original == "#":
                assert expanded.isdigit()
            else:
                assert expanded == original


class TestTemplateProperties:

    @given(words=st.lists(st.from_regex(r"[a-z]{1,8}", fullmatch=True), min_size=1, max_size=5))
    def test_no_placeholders_remain(self, words):
        """A fully resolved pattern contains no braces."""
        engine = TemplateEngine(RandomService(seed=1))
        pattern = " ".join(f"{{{{{word}}}}}" for word in words)
        generators = {word: (lambda w=word: w.upper()) for word in words}

        result = engine.resolve(pattern, generators)

        assert "{{" not in result and "}}" not in result


class TestConfigProperties:

    @given(seed=SEEDS)
    def test_seed_range_accepted(self, seed):
        """Every 32-bit unsigned seed is accepted."""
        assert MirageConfig(seed=seed).seed == seed
