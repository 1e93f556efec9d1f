"""
Supported locales for fake data generation.

Each locale is a language and country combination that selects which data
documents are loaded. The set is fixed; adding a locale means shipping its
data directory with a release.
"""

from enum import Enum

from .exceptions import UnsupportedLocaleError


class Locale(str, Enum):
    """Locale identifier in ``language_COUNTRY`` form."""

    TR_TR = "tr_TR"
    EN_US = "en_US"
    DE_DE = "de_DE"
    FR_FR = "fr_FR"
    ES_ES = "es_ES"
    IT_IT = "it_IT"
    RU_RU = "ru_RU"

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: "str | Locale | None") -> "Locale":
        """
        Look up a locale by code, ignoring case.

        Args:
            code: Locale code such as ``"en_US"`` (or a Locale instance)

        Returns:
            Locale: The matching locale

        Raises:
            UnsupportedLocaleError: If the code is None or not supported
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, str):
            for locale in cls:
                if locale.value.lower() == code.strip().lower():
                    return locale
        raise UnsupportedLocaleError(code)

    @classmethod
    def codes(cls) -> list[str]:
        """Return all supported locale codes."""
        return [locale.value for locale in cls]


DEFAULT_LOCALE = Locale.TR_TR

# Every other locale is validated against this one.
REFERENCE_LOCALE = Locale.TR_TR
