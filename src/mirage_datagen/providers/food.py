"""Food fields."""

from .base import BaseProvider


class FoodProvider(BaseProvider):
    CATEGORY = "food"

    def dish(self) -> str:
        return self.pick("dishes")

    def ingredient(self) -> str:
        return self.pick("ingredients")

    def spice(self) -> str:
        return self.pick("spices")

    def description(self) -> str:
        return self.compose(
            "description_patterns",
            {
                "dishes": self.dish,
                "ingredients": self.ingredient,
                "spices": self.spice,
            },
        )
