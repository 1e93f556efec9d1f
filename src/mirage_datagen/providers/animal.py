"""Animal names."""

from .base import BaseProvider


class AnimalProvider(BaseProvider):
    CATEGORY = "animal"

    def name(self) -> str:
        return self.pick("names")
