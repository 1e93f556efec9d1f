"""Shared engine pieces: locales, randomness, data tables, caching and templates."""

from mirage_datagen.shared.data_store import LocaleDataStore, LocaleSession, get_default_store
from mirage_datagen.shared.lazy_cache import LazyValueCache
from mirage_datagen.shared.locale import DEFAULT_LOCALE, REFERENCE_LOCALE, Locale
from mirage_datagen.shared.random_service import RandomService
from mirage_datagen.shared.templates import TemplateEngine

__all__ = [
    "DEFAULT_LOCALE",
    "REFERENCE_LOCALE",
    "LazyValueCache",
    "Locale",
    "LocaleDataStore",
    "LocaleSession",
    "RandomService",
    "TemplateEngine",
    "get_default_store",
]
