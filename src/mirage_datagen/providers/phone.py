"""Phone number fields generated from ``#`` digit formats."""

from .base import BaseProvider

LOCAL_FORMAT_FIELDS = ("landline_formats", "cell_phone_formats")


class PhoneNumberProvider(BaseProvider):
    CATEGORY = "phone"

    def cell_phone(self) -> str:
        return self.numerify("cell_phone_formats")

    def landline(self) -> str:
        return self.numerify("landline_formats")

    def international(self) -> str:
        return self.numerify("international_formats")

    def phone_number(self) -> str:
        """
        Either a landline or a cell number, whichever formats the locale has.

        Raises:
            MissingDataError: If the locale has neither kind of format
        """
        available = [field for field in LOCAL_FORMAT_FIELDS if self.has_data(field)]
        if not available:
            # Surface the store's error for the primary format list
            self.values(LOCAL_FORMAT_FIELDS[0])
        return self.numerify(self.random.uniform_element(available))
