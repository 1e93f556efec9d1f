"""
Generation entry point.

``Mirage`` binds one locale session, one random source and one template
engine, and hands out category providers that share them::

    fake = Mirage("en_US", seed=7)
    fake.address.full_address()
    fake.name.full_name()
"""

import logging

from .config.models import MirageConfig
from .config.settings import load_config_with_fallback
from .providers.address import AddressProvider
from .providers.animal import AnimalProvider
from .providers.base import BaseProvider
from .providers.book import BookProvider
from .providers.boolean import BooleanProvider
from .providers.code import CodeProvider
from .providers.color import ColorProvider
from .providers.commerce import CommerceProvider
from .providers.company import CompanyProvider
from .providers.food import FoodProvider
from .providers.internet import InternetProvider
from .providers.name import NameProvider
from .providers.phone import PhoneNumberProvider
from .providers.registry import PROVIDER_CLASSES, generate
from .shared.data_store import LocaleDataStore, LocaleSession, get_default_store
from .shared.document_loader import DocumentResolver
from .shared.exceptions import UnsupportedLocaleError
from .shared.locale import Locale
from .shared.random_service import RandomService
from .shared.templates import TemplateEngine

logger = logging.getLogger(__name__)


def resolve_locale(locale: Locale | str | None, fallback: Locale) -> Locale:
    """Return the requested locale, or ``fallback`` when it is missing or unsupported."""
    if locale is None:
        return fallback
    try:
        return Locale.from_code(locale)
    except UnsupportedLocaleError:
        logger.warning(f"Unsupported locale {locale!r}, falling back to {fallback}")
        return fallback


class Mirage:
    """
    Fake data generator for one locale.

    Args:
        locale: Locale or locale code; the configured default if None or unsupported
        seed: Seed for reproducible output; overrides ``config.seed``
        config: Configuration; loaded with the usual fallbacks if omitted
        store: Table store to share; built from the configuration if omitted
    """

    def __init__(
        self,
        locale: Locale | str | None = None,
        seed: int | None = None,
        config: MirageConfig | None = None,
        store: LocaleDataStore | None = None,
    ):
        self.config = config or load_config_with_fallback()

        if store is None:
            if self.config.data_path is None and self.config.use_packaged_data:
                store = get_default_store()
            else:
                store = LocaleDataStore(
                    DocumentResolver(self.config.data_path, self.config.use_packaged_data)
                )

        self.session = LocaleSession(resolve_locale(locale, self.config.locale), store)
        self.random = RandomService(seed if seed is not None else self.config.seed)
        self.templates = TemplateEngine(self.random)
        self._providers: dict[str, BaseProvider] = {}

        logger.debug(f"Mirage initialized for locale {self.session.current_locale}")

    @property
    def locale(self) -> Locale:
        return self.session.current_locale

    def set_locale(self, locale: Locale | str) -> None:
        """
        Switch locale for all providers of this instance.

        Raises:
            UnsupportedLocaleError: If the code is not supported
        """
        self.session.set_locale(locale)

    def provider(self, category: str) -> BaseProvider:
        """
        Return the provider for a category, creating it on first use.

        Providers that draw fragments from other categories receive this
        instance's providers for them, so every provider shares one set.

        Raises:
            KeyError: If the category is unknown
        """
        if category not in self._providers:
            provider_class = PROVIDER_CLASSES[category]
            siblings = {
                argument: self.provider(sibling)
                for argument, sibling in provider_class.SIBLINGS.items()
            }
            self._providers[category] = provider_class(
                self.session, self.random, self.templates, **siblings
            )
        return self._providers[category]

    @property
    def address(self) -> AddressProvider:
        return self.provider("address")

    @property
    def name(self) -> NameProvider:
        return self.provider("name")

    @property
    def phone(self) -> PhoneNumberProvider:
        return self.provider("phone")

    @property
    def company(self) -> CompanyProvider:
        return self.provider("company")

    @property
    def food(self) -> FoodProvider:
        return self.provider("food")

    @property
    def internet(self) -> InternetProvider:
        return self.provider("internet")

    @property
    def code(self) -> CodeProvider:
        return self.provider("code")

    @property
    def commerce(self) -> CommerceProvider:
        return self.provider("commerce")

    @property
    def color(self) -> ColorProvider:
        return self.provider("color")

    @property
    def boolean(self) -> BooleanProvider:
        return self.provider("boolean")

    @property
    def animal(self) -> AnimalProvider:
        return self.provider("animal")

    @property
    def book(self) -> BookProvider:
        return self.provider("book")

    def generate(self, category: str, field: str) -> str:
        """
        Generate one registered field, e.g. ``generate("address", "city")``.

        Raises:
            KeyError: If the category or field is not registered
        """
        return generate(self.provider(category), field)

    def __repr__(self) -> str:
        return f"Mirage(locale={self.locale.code!r})"
