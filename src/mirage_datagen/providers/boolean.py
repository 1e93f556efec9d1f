"""Booleans and their locale wording."""

from .base import BaseProvider


class BooleanProvider(BaseProvider):
    CATEGORY = "boolean"

    def boolean(self, p_true: float = 0.5) -> bool:
        """
        True with probability ``p_true``.

        Raises:
            InvalidRangeError: If p_true is outside [0, 1]
        """
        return self.random.weighted_boolean(p_true)

    def yes_no(self) -> str:
        """A locale word for a random answer, e.g. ``Evet`` or ``Hayır``."""
        return self.pick("true_words" if self.boolean() else "false_words")
