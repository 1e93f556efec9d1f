"""
Locale-scoped data tables.

The store keeps one parsed table per (locale, category) for the life of the
process. Tables are read-only once loaded and a document is parsed at most
once, including when it turns out to be absent.

Lookups on the store take an explicit locale. ``LocaleSession`` pins a locale
for one logical session (a ``Mirage`` instance, a request) so independent
sessions can share the table cache without sharing a "current locale".
"""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .document_loader import DocumentResolver, is_valid_document_name
from .exceptions import MissingDataError
from .locale import DEFAULT_LOCALE, Locale

logger = logging.getLogger(__name__)

CategoryTable = Mapping[str, tuple[str, ...]]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def normalize_table(category: str, document: dict[str, Any]) -> dict[str, tuple[str, ...]]:
    """
    Turn a parsed document into a field -> entries mapping.

    The document body is either wrapped in a single ``<category>:`` root key or
    is the field mapping itself. List fields become tuples of strings, a scalar
    field (a single format pattern) becomes a one-entry tuple and a null field
    becomes an empty tuple. Null or nested list entries and nested mappings
    are dropped with a debug log.
    """
    body = document
    if len(document) == 1 and isinstance(document.get(category), dict):
        body = document[category]

    fields: dict[str, tuple[str, ...]] = {}
    for key, value in body.items():
        name = str(key)
        if isinstance(value, list):
            entries = tuple(str(entry) for entry in value if _is_scalar(entry))
            dropped = len(value) - len(entries)
            if dropped:
                logger.debug(
                    f"Dropped {dropped} null or non-scalar entries from {category}.{name}"
                )
            fields[name] = entries
        elif _is_scalar(value):
            fields[name] = (str(value),)
        elif value is None:
            fields[name] = ()
        else:
            logger.debug(f"Skipping non-list field {category}.{name}")
    return fields


class LocaleDataStore:
    """
    Process-wide cache of locale data tables.

    Args:
        resolver: Document resolver used to locate and parse documents
    """

    def __init__(self, resolver: DocumentResolver | None = None):
        self.resolver = resolver or DocumentResolver()
        self._tables: dict[tuple[Locale, str], CategoryTable | None] = {}
        self._lock = threading.Lock()

    def get_table(self, locale: Locale, category: str) -> CategoryTable | None:
        """
        Return the table for (locale, category), loading it on first access.

        Returns:
            Read-only field mapping, or None when the category has no document

        Raises:
            DocumentLoadError: If the document exists but cannot be read or parsed
        """
        if not is_valid_document_name(category):
            return None

        key = (locale, category)
        with self._lock:
            if key in self._tables:
                logger.debug(f"Table cache hit for {locale}/{category}")
                return self._tables[key]

            document = self.resolver.load(category, locale)
            if document is None:
                table = None
            else:
                table = MappingProxyType(normalize_table(category, document))
                logger.debug(f"Cached {len(table)} fields for {locale}/{category}")

            self._tables[key] = table
            return table

    def has_field(self, locale: Locale, category: str, field: str) -> bool:
        """Check whether a field exists and is non-empty; never raises for absence."""
        table = self.get_table(locale, category)
        if table is None:
            return False
        return bool(table.get(field))

    def get_list_data(self, locale: Locale, category: str, field: str) -> tuple[str, ...]:
        """
        Return the entries of a field.

        Returns:
            Immutable tuple of entries, shared with the cache

        Raises:
            MissingDataError: If the category, the field or its entries are missing
        """
        table = self.get_table(locale, category)
        if table is None:
            raise MissingDataError(category, field, locale, MissingDataError.MISSING_CATEGORY)
        if field not in table:
            raise MissingDataError(category, field, locale, MissingDataError.MISSING_FIELD)

        entries = table[field]
        if not entries:
            raise MissingDataError(category, field, locale, MissingDataError.EMPTY_FIELD)
        return entries

    def loaded_tables(self) -> list[tuple[Locale, str]]:
        """List the (locale, category) pairs that have a loaded document."""
        with self._lock:
            return [key for key, table in self._tables.items() if table is not None]

    def clear(self) -> None:
        """Drop every cached table."""
        with self._lock:
            self._tables.clear()
        logger.debug("Locale table cache cleared")


_default_store: LocaleDataStore | None = None
_default_store_lock = threading.Lock()


def get_default_store() -> LocaleDataStore:
    """Return the process-wide store, creating it on first use."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = LocaleDataStore()
        return _default_store


def reset_default_store() -> None:
    """Forget the process-wide store so the next call builds a fresh one."""
    global _default_store
    with _default_store_lock:
        _default_store = None


class LocaleSession:
    """
    A locale context bound to a data store.

    Args:
        locale: Locale (or code) to start with
        store: Store to read tables from; the process-wide store by default
    """

    def __init__(
        self,
        locale: Locale | str = DEFAULT_LOCALE,
        store: LocaleDataStore | None = None,
    ):
        self.store = store or get_default_store()
        self._locale = Locale.from_code(locale)

    @property
    def current_locale(self) -> Locale:
        return self._locale

    def get_current_locale(self) -> Locale:
        return self._locale

    def set_locale(self, locale: Locale | str) -> None:
        """Switch the active locale; tables already cached for any locale are kept."""
        self._locale = Locale.from_code(locale)
        logger.debug(f"Session locale set to {self._locale}")

    def has_field(self, category: str, field: str) -> bool:
        return self.store.has_field(self._locale, category, field)

    def get_list_data(self, category: str, field: str) -> tuple[str, ...]:
        return self.store.get_list_data(self._locale, category, field)

    def __repr__(self) -> str:
        return f"LocaleSession(locale={self._locale.code!r})"
