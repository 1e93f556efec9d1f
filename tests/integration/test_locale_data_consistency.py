"""
Integration tests over the packaged locale data.

Every shipped locale must match the reference locale's structure and carry
data for every required field, so each registered generator works in every
locale except where a field is documented as optional.
"""

import pytest

from mirage_datagen import Mirage
from mirage_datagen.config.models import MirageConfig
from mirage_datagen.providers.registry import FIELD_REGISTRY
from mirage_datagen.schema.validator import SchemaValidator
from mirage_datagen.shared.data_store import LocaleSession
from mirage_datagen.shared.exceptions import MissingDataError
from mirage_datagen.shared.locale import Locale

pytestmark = pytest.mark.integration

REQUIRED_FIELDS = {
    "address": [
        "cities",
        "streets",
        "street_suffixes",
        "districts",
        "states",
        "countries",
        "country_codes",
        "postal_codes",
        "building_number",
        "building",
        "apartment",
        "street_patterns",
        "full_patterns",
    ],
    "name": ["first_names", "last_names", "prefixes", "suffixes", "titles", "gender", "full_patterns"],
    "phone": ["landline_formats", "cell_phone_formats", "international_formats"],
    "company": ["suffixes", "industries", "catch_phrases", "name_patterns"],
    "food": ["dishes", "ingredients", "spices", "description_patterns"],
    "internet": [
        "free_email_domains",
        "domain_suffixes",
        "words",
        "username_patterns",
        "domain_patterns",
        "url_patterns",
    ],
    "commerce": [
        "departments",
        "product_adjectives",
        "materials",
        "products",
        "product_name_patterns",
    ],
    "color": ["names"],
    "boolean": ["true_words", "false_words"],
    "animal": ["names"],
    "book": ["titles", "genres", "publishers"],
}

REFERENCE_DOCUMENTS = [
    "address",
    "animal",
    "book",
    "boolean",
    "color",
    "commerce",
    "company",
    "food",
    "internet",
    "name",
    "phone",
]

# Fields whose values legitimately contain "#"
LITERAL_HASH_FIELDS = {("color", "hex")}

LOCALES_WITHOUT_STATE_ABBRS = {Locale.TR_TR, Locale.RU_RU}


@pytest.fixture(scope="module")
def validator() -> SchemaValidator:
    return SchemaValidator(config=MirageConfig())


class TestPackagedSchema:
    """Every packaged locale validates cleanly against the reference locale."""

    def test_reference_documents(self, validator):
        assert validator.reference_documents() == REFERENCE_DOCUMENTS

    @pytest.mark.parametrize("locale", list(Locale), ids=Locale.codes())
    def test_locale_valid(self, validator, locale):
        results = validator.validate_locale(locale)

        assert len(results) == len(REFERENCE_DOCUMENTS)
        for result in results:
            assert result.is_valid(), str(result)


class TestRequiredFields:
    """Required fields are present and non-empty for every locale."""

    @pytest.mark.parametrize("locale", list(Locale), ids=Locale.codes())
    def test_required_fields(self, locale):
        session = LocaleSession(locale)
        for category, fields in REQUIRED_FIELDS.items():
            for field in fields:
                assert session.has_field(category, field), f"{locale}: {category}.{field}"
                entries = session.get_list_data(category, field)
                assert entries
                assert isinstance(entries, tuple)

    @pytest.mark.parametrize("locale", list(Locale), ids=Locale.codes())
    def test_building_numbers_in_range(self, locale):
        entries = LocaleSession(locale).get_list_data("address", "building_number")
        assert all(1 <= int(entry) <= 50 for entry in entries)

    @pytest.mark.parametrize("locale", list(Locale), ids=Locale.codes())
    def test_postal_codes_are_digit_formats(self, locale):
        for entry in LocaleSession(locale).get_list_data("address", "postal_codes"):
            assert set(entry) <= set("#-")
            assert "#" in entry


class TestEveryFieldGenerates:
    """Every registered field produces a value in every locale."""

    @pytest.mark.parametrize("locale", list(Locale), ids=Locale.codes())
    def test_all_registered_fields(self, locale):
        fake = Mirage(locale, seed=1, config=MirageConfig())

        for category, fields in FIELD_REGISTRY.items():
            for field in fields:
                if (category, field) == ("address", "state_abbr") and locale in LOCALES_WITHOUT_STATE_ABBRS:
                    with pytest.raises(MissingDataError):
                        fake.generate(category, field)
                    continue

                value = fake.generate(category, field)
                assert isinstance(value, str) and value, f"{locale}: {category}.{field}"
                assert "{{" not in value, f"{locale}: {category}.{field}"
                if (category, field) not in LITERAL_HASH_FIELDS:
                    assert "#" not in value, f"{locale}: {category}.{field}"
