"""Commerce fields: departments, products, prices and promotion codes."""

import string

from .base import BaseProvider

PROMOTION_PREFIX = "PROMO"


class CommerceProvider(BaseProvider):
    CATEGORY = "commerce"

    def department(self) -> str:
        return self.pick("departments")

    def material(self) -> str:
        return self.pick("materials")

    def product_adjective(self) -> str:
        return self.pick("product_adjectives")

    def product(self) -> str:
        return self.pick("products")

    def product_name(self) -> str:
        return self.compose(
            "product_name_patterns",
            {
                "product_adjectives": self.product_adjective,
                "materials": self.material,
                "products": self.product,
            },
        )

    def price(self, minimum: float = 1.0, maximum: float = 1000.0) -> str:
        """
        Price with two decimals, e.g. ``249.90``.

        Raises:
            InvalidRangeError: If the bounds are not finite or minimum > maximum
        """
        return f"{self.random.bounded_double(minimum, maximum):.2f}"

    def promotion_code(self) -> str:
        """Code like ``PROMO-KXQT-4821``."""
        letters = "".join(self.random.uniform_element(string.ascii_uppercase) for _ in range(4))
        return f"{PROMOTION_PREFIX}-{letters}-{self.random.expand_pattern('####')}"
