"""Address fields: cities, streets, postal codes, composed addresses and coordinates."""

from .base import BaseProvider


def format_coordinate(value: float) -> str:
    """Format with at most six decimals and no trailing zeros."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class AddressProvider(BaseProvider):
    CATEGORY = "address"

    def city(self) -> str:
        return self.pick("cities")

    def street_name(self) -> str:
        return self.pick("streets")

    def street_suffix(self) -> str:
        return self.pick("street_suffixes")

    def district(self) -> str:
        return self.pick("districts")

    def state(self) -> str:
        return self.pick("states")

    def state_abbr(self) -> str:
        # Not every locale has abbreviations; the list may be present but empty
        return self.pick("state_abbrs")

    def country(self) -> str:
        return self.pick("countries")

    def country_code(self) -> str:
        return self.pick("country_codes")

    def zip_code(self) -> str:
        return self.numerify("postal_codes")

    def postal_code(self) -> str:
        return self.zip_code()

    def building_number(self) -> str:
        return self.pick("building_number")

    def street_number(self) -> str:
        return str(self.random.bounded_int(1, 999))

    def street_address(self) -> str:
        """Street line built from ``street_patterns``."""
        return self.compose(
            "street_patterns",
            {
                "streets": self.street_name,
                "street_suffixes": self.street_suffix,
                "building_number": self.building_number,
                "building": lambda: self.pick("building"),
                "apartment": lambda: self.pick("apartment"),
            },
        )

    def full_address(self) -> str:
        """
        Complete address built from ``full_patterns``.

        The ``{{street_patterns}}`` token composes a street line one level down.
        """
        return self.compose(
            "full_patterns",
            {
                "street_patterns": self.street_address,
                "districts": self.district,
                "cities": self.city,
                "states": self.state,
                "postal_codes": self.postal_code,
                "countries": self.country,
            },
        )

    def latitude(self) -> str:
        return format_coordinate(self.random.bounded_double(-90.0, 90.0))

    def longitude(self) -> str:
        return format_coordinate(self.random.bounded_double(-180.0, 180.0))

    def coordinates(self) -> str:
        return f"{self.latitude()}, {self.longitude()}"
