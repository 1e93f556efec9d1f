"""
Internet fields: usernames, domains, email addresses, URLs and credentials.

Handles and domain labels are plain ASCII. Person names are reduced with
``ascii_handle``; a name with no ASCII form (e.g. Cyrillic) is replaced by one
of the locale's ``words``.
"""

import string

from ..shared.data_store import LocaleSession
from ..shared.random_service import RandomService
from ..shared.templates import TemplateEngine
from .base import BaseProvider
from .name import NameProvider, ascii_handle

FREE_EMAIL_SHARE = 0.5
MAC_SEPARATORS = (":", "-")
PASSWORD_ALPHABET = string.ascii_letters + string.digits + "!@$%&*?+-_="


class InternetProvider(BaseProvider):
    """
    Internet identities for the current locale.

    Username and domain patterns may reference ``{{first_names}}`` and
    ``{{last_names}}``, generated by the name provider of the same session.
    """

    CATEGORY = "internet"
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

    def _first_handle(self) -> str:
        return ascii_handle(self.names.first_name()) or self.domain_word()

    def _last_handle(self) -> str:
        return ascii_handle(self.names.last_name()) or self.domain_word()

    def domain_word(self) -> str:
        return self.pick("words")

    def domain_suffix(self) -> str:
        return self.pick("domain_suffixes")

    def free_email_domain(self) -> str:
        return self.pick("free_email_domains")

    def username(self) -> str:
        """Lowercase handle such as ``ayse.yilmaz42``."""
        handle = self.compose(
            "username_patterns",
            {"first_names": self._first_handle, "last_names": self._last_handle},
        )
        return self.random.expand_pattern(handle)

    def domain_name(self) -> str:
        return self.compose(
            "domain_patterns",
            {
                "words": self.domain_word,
                "last_names": self._last_handle,
                "domain_suffixes": self.domain_suffix,
            },
        )

    def email(self) -> str:
        """Address at a free mail provider or at a generated company domain."""
        if self.random.weighted_boolean(FREE_EMAIL_SHARE):
            domain = self.free_email_domain()
        else:
            domain = self.domain_name()
        return f"{self.username()}@{domain}"

    def free_email(self) -> str:
        return f"{self.username()}@{self.free_email_domain()}"

    def url(self) -> str:
        return self.compose(
            "url_patterns",
            {"domain_name": self.domain_name, "words": self.domain_word},
        )

    def mac_address(self) -> str:
        separator = self.random.uniform_element(MAC_SEPARATORS)
        return separator.join(f"{self.random.bounded_int(0, 255):02x}" for _ in range(6))

    def password(self, min_length: int = 8, max_length: int = 16) -> str:
        """
        Random password drawn from letters, digits and symbols.

        Raises:
            InvalidRangeError: If min_length > max_length
        """
        length = self.random.bounded_int(min_length, max_length)
        return "".join(self.random.uniform_element(PASSWORD_ALPHABET) for _ in range(length))
