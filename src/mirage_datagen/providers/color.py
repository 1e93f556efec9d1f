"""Color names and CSS color notations."""

from .base import BaseProvider


class ColorProvider(BaseProvider):
    CATEGORY = "color"

    def name(self) -> str:
        return self.pick("names")

    def _channel(self) -> int:
        return self.random.bounded_int(0, 255)

    def hex(self) -> str:
        return f"#{self.random.bounded_int(0, 0xFFFFFF):06x}"

    def rgb(self) -> str:
        return f"rgb({self._channel()}, {self._channel()}, {self._channel()})"

    def rgba(self) -> str:
        """RGB plus an alpha below one, e.g. ``rgba(12, 200, 31, 0.45)``."""
        alpha = self.random.bounded_double(0.0, 0.99)
        return f"rgba({self._channel()}, {self._channel()}, {self._channel()}, {alpha:.2f})"

    def hsl(self) -> str:
        hue = self.random.bounded_int(0, 359)
        saturation = self.random.bounded_int(0, 100)
        lightness = self.random.bounded_int(0, 100)
        return f"hsl({hue}, {saturation}%, {lightness}%)"
