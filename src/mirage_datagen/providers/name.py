"""Person name fields."""

import re
import unicodedata

from .base import BaseProvider

USERNAME_SEPARATORS = (".", "_", "-", "")

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def ascii_handle(text: str) -> str:
    """
    Reduce a name to lowercase ASCII letters and digits.

    Accents are stripped by decomposition; characters with no ASCII base
    (e.g. Cyrillic) are dropped rather than transliterated.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    return _NON_ALNUM.sub("", decomposed.encode("ascii", "ignore").decode("ascii").lower())


class NameProvider(BaseProvider):
    CATEGORY = "name"

    def first_name(self) -> str:
        return self.pick("first_names")

    def last_name(self) -> str:
        return self.pick("last_names")

    def prefix(self) -> str:
        return self.pick("prefixes")

    def suffix(self) -> str:
        return self.pick("suffixes")

    def job_title(self) -> str:
        return self.pick("titles")

    def gender(self) -> str:
        return self.pick("gender")

    def full_name(self) -> str:
        return self.compose(
            "full_patterns",
            {
                "prefixes": self.prefix,
                "first_names": self.first_name,
                "last_names": self.last_name,
                "suffixes": self.suffix,
            },
        )

    def username(self) -> str:
        """Handle like ``ayse.yilmaz42``; falls back to ``user`` for non-Latin names."""
        first = ascii_handle(self.first_name())
        last = ascii_handle(self.last_name())

        if first and last:
            handle = f"{first}{self.random.uniform_element(USERNAME_SEPARATORS)}{last}"
        else:
            handle = first or last or "user"

        if self.random.weighted_boolean(0.5):
            handle = f"{handle}{self.random.bounded_int(1, 99)}"
        return handle
