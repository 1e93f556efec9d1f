"""Company fields."""

from ..shared.data_store import LocaleSession
from ..shared.random_service import RandomService
from ..shared.templates import TemplateEngine
from .base import BaseProvider
from .name import NameProvider


class CompanyProvider(BaseProvider):
    """
    Company names, suffixes, industries and catch phrases.

    Company name patterns may reference ``{{last_names}}``, which is generated
    by the name provider of the same session.
    """

    CATEGORY = "company"
    SIBLINGS = {"names": "name"}

    def __init__(
        self,
        session: LocaleSession,
        random_service: RandomService,
        templates: TemplateEngine | None = None,
        names: NameProvider | None = None,
    ):
        super().__init__(session, random_service, templates)
        self.names = names or NameProvider(session, random_service, self.templates)

    def suffix(self) -> str:
        return self.pick("suffixes")

    def industry(self) -> str:
        return self.pick("industries")

    def catch_phrase(self) -> str:
        return self.pick("catch_phrases")

    def name(self) -> str:
        return self.compose(
            "name_patterns",
            {
                "last_names": self.names.last_name,
                "suffixes": self.suffix,
                "industries": self.industry,
            },
        )
