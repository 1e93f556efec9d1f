"""
Product and publication identifiers.

Codes are synthesized from ``#`` digit patterns and carry valid check digits;
they need no locale data.
"""

import string

from .base import BaseProvider

ISBN_PREFIXES = ("978", "979")
ASIN_PREFIX = "B0"
ASIN_ALPHABET = string.ascii_uppercase + string.digits


def ean_check_digit(digits: str) -> str:
    """
    Check digit for an EAN-13 / ISBN-13 body of twelve digits.

    Digits are weighted 1, 3, 1, 3, ... from the left.
    """
    total = sum(int(digit) * (3 if index % 2 else 1) for index, digit in enumerate(digits))
    return str((10 - total % 10) % 10)


def issn_check_digit(digits: str) -> str:
    """Check character for a seven-digit ISSN body; ``X`` stands for ten."""
    total = sum(int(digit) * weight for digit, weight in zip(digits, range(8, 1, -1)))
    check = (11 - total % 11) % 11
    return "X" if check == 10 else str(check)


class CodeProvider(BaseProvider):
    CATEGORY = "code"

    def ean(self) -> str:
        """Thirteen-digit EAN with a valid check digit."""
        body = self.random.expand_pattern("#" * 12)
        return body + ean_check_digit(body)

    def isbn(self) -> str:
        """ISBN-13 in the 978/979 Bookland ranges, without hyphens."""
        prefix = self.random.uniform_element(ISBN_PREFIXES)
        body = prefix + self.random.expand_pattern("#" * 9)
        return body + ean_check_digit(body)

    def issn(self) -> str:
        body = self.random.expand_pattern("#######")
        return f"{body[:4]}-{body[4:]}{issn_check_digit(body)}"

    def asin(self) -> str:
        """Ten-character Amazon-style identifier, e.g. ``B07XQ2M9KZ``."""
        tail = "".join(self.random.uniform_element(ASIN_ALPHABET) for _ in range(8))
        return ASIN_PREFIX + tail
