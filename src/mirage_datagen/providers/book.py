"""Book fields."""

from ..shared.data_store import LocaleSession
from ..shared.random_service import RandomService
from ..shared.templates import TemplateEngine
from .base import BaseProvider
from .code import CodeProvider
from .name import NameProvider


class BookProvider(BaseProvider):
    """Titles, genres and publishers from data; authors and ISBNs from siblings."""

    CATEGORY = "book"
    SIBLINGS = {"names": "name", "codes": "code"}

    def __init__(
        self,
        session: LocaleSession,
        random_service: RandomService,
        templates: TemplateEngine | None = None,
        names: NameProvider | None = None,
        codes: CodeProvider | None = None,
    ):
        super().__init__(session, random_service, templates)
        self.names = names or NameProvider(session, random_service, self.templates)
        self.codes = codes or CodeProvider(session, random_service, self.templates)

    def title(self) -> str:
        return self.pick("titles")

    def genre(self) -> str:
        return self.pick("genres")

    def publisher(self) -> str:
        return self.pick("publishers")

    def author(self) -> str:
        return self.names.full_name()

    def isbn(self) -> str:
        return self.codes.isbn()
