"""
Primitive randomness for data generation.

All draws go through a private ``random.Random`` instance so a seeded service
is reproducible and independent from the global ``random`` module state.
"""

import math
import random
from collections.abc import Sequence
from typing import TypeVar

from .exceptions import EmptyInputError, InvalidRangeError

T = TypeVar("T")

DIGIT_PLACEHOLDER = "#"
DIGITS = "0123456789"


class RandomService:
    """
    Random selection and synthesis helpers.

    Args:
        seed: Optional seed for reproducible sequences of draws
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def reseed(self, seed: int | None) -> None:
        """Restart the underlying source from a new seed."""
        self.seed = seed
        self._rng.seed(seed)

    def uniform_element(self, sequence: Sequence[T]) -> T:
        """
        Pick one element with equal probability.

        Raises:
            EmptyInputError: If the sequence is empty
        """
        if not sequence:
            raise EmptyInputError()
        return sequence[self._rng.randrange(len(sequence))]

    def bounded_int(self, minimum: int, maximum: int) -> int:
        """
        Return an integer in ``[minimum, maximum]`` inclusive.

        Raises:
            InvalidRangeError: If minimum > maximum
        """
        if minimum > maximum:
            raise InvalidRangeError("Minimum must not exceed maximum", minimum, maximum)
        return self._rng.randint(minimum, maximum)

    def bounded_double(self, minimum: float, maximum: float) -> float:
        """
        Return a float in ``[minimum, maximum]``.

        Raises:
            InvalidRangeError: If either bound is not finite or minimum > maximum
        """
        if not (math.isfinite(minimum) and math.isfinite(maximum)):
            raise InvalidRangeError("Bounds must be finite numbers", minimum, maximum)
        if minimum > maximum:
            raise InvalidRangeError("Minimum must not exceed maximum", minimum, maximum)
        if minimum == maximum:
            return minimum
        r = self._rng.random()
        # (maximum - minimum) can overflow to inf near the float limits
        value = minimum * (1.0 - r) + maximum * r
        return min(max(value, minimum), maximum)

    def weighted_boolean(self, p_true: float) -> bool:
        """
        Return True with probability ``p_true``.

        Raises:
            InvalidRangeError: If p_true is outside [0, 1]
        """
        if math.isnan(p_true) or not 0.0 <= p_true <= 1.0:
            raise InvalidRangeError(f"Probability must be within [0, 1], got {p_true}")
        return self._rng.random() < p_true

    def expand_pattern(self, pattern: str) -> str:
        """
        Replace every ``#`` in the pattern with a random decimal digit.

        Each placeholder is drawn independently; other characters are copied
        unchanged.

        Examples:
            >>> RandomService(seed=1).expand_pattern("TR-##")  # doctest: +SKIP
            'TR-29'
        """
        return "".join(
            self._rng.choice(DIGITS) if char == DIGIT_PLACEHOLDER else char
            for char in pattern
        )
