"""
Base provider infrastructure.

Provides the pieces every category provider shares: locale-bound table
access, per-instance lazy caching of field entries, random picks and template
composition.
"""

import logging
from collections.abc import Mapping

from ..shared.data_store import LocaleSession
from ..shared.lazy_cache import LazyValueCache
from ..shared.locale import Locale
from ..shared.random_service import RandomService
from ..shared.templates import Generator, TemplateEngine

logger = logging.getLogger(__name__)


class BaseProvider:
    """
    Base class for category providers.

    Subclasses set ``CATEGORY`` to the name of their data document and expose
    one method per generated field. ``SIBLINGS`` maps constructor keyword
    arguments to the categories of providers the subclass draws fragments
    from, so a factory can hand it the instances it already holds.

    Args:
        session: Locale session the provider reads tables through
        random_service: Source of randomness shared with sibling providers
        templates: Template engine; one is built on ``random_service`` if omitted
    """

    CATEGORY: str = ""
    SIBLINGS: dict[str, str] = {}

    def __init__(
        self,
        session: LocaleSession,
        random_service: RandomService,
        templates: TemplateEngine | None = None,
    ):
        self.session = session
        self.random = random_service
        self.templates = templates or TemplateEngine(random_service)
        self._lazy = LazyValueCache()

    @property
    def locale(self) -> Locale:
        return self.session.current_locale

    def has_data(self, field: str, category: str | None = None) -> bool:
        """Check whether the current locale has non-empty data for a field."""
        return self.session.has_field(category or self.CATEGORY, field)

    def values(self, field: str, category: str | None = None) -> tuple[str, ...]:
        """
        Return a field's entries for the current locale.

        Raises:
            MissingDataError: If the locale has no data for the field
        """
        category = category or self.CATEGORY
        # Keyed by locale so a session switch never serves another locale's list
        key = f"{self.locale.code}:{category}.{field}"
        return self._lazy.load(key, lambda: self.session.get_list_data(category, field))

    def pick(self, field: str, category: str | None = None) -> str:
        """Pick one entry of a field uniformly."""
        return self.random.uniform_element(self.values(field, category))

    def numerify(self, field: str) -> str:
        """Pick a format pattern from a field and expand its ``#`` digits."""
        return self.random.expand_pattern(self.pick(field))

    def compose(self, field: str, generators: Mapping[str, Generator]) -> str:
        """Pick a template pattern from a field and resolve its tokens."""
        return self.templates.compose(self.values(field), generators)
