"""Unit tests for locating and parsing data documents."""

import pytest

from mirage_datagen.shared.document_loader import DocumentResolver, is_valid_document_name
from mirage_datagen.shared.exceptions import DocumentLoadError, DocumentParsingError
from mirage_datagen.shared.locale import Locale


class TestDocumentNames:
    """Test document name screening."""

    @pytest.mark.parametrize("name", ["address", "phone_numbers", "name-2"])
    def test_plain_names_accepted(self, name):
        assert is_valid_document_name(name)

    @pytest.mark.parametrize("name", ["", "../address", "a/b", "address.yaml", "a b"])
    def test_path_like_names_rejected(self, name):
        assert not is_valid_document_name(name)


class TestDocumentResolver:
    """Test resolution strategies and parsing."""

    def test_missing_document_is_absent(self, resolver):
        """No strategy hit means None, never an exception."""
        assert resolver.find("address", Locale.EN_US) is None
        assert resolver.load("address", Locale.EN_US) is None

    def test_data_path_document_found(self, resolver, write_document):
        write_document("en_US", "address", {"address": {"cities": ["Boston"]}})

        source = resolver.find("address", Locale.EN_US)

        assert source is not None
        assert not source.packaged
        assert resolver.load("address", Locale.EN_US) == {"address": {"cities": ["Boston"]}}

    def test_yml_extension_found(self, resolver, write_document):
        write_document("en_US", "food", {"food": {"dishes": ["Pie"]}}, extension=".yml")
        assert resolver.load("food", Locale.EN_US) == {"food": {"dishes": ["Pie"]}}

    def test_yaml_preferred_over_yml(self, resolver, write_document):
        write_document("en_US", "food", {"food": {"dishes": ["yml"]}}, extension=".yml")
        write_document("en_US", "food", {"food": {"dishes": ["yaml"]}})
        assert resolver.load("food", Locale.EN_US)["food"]["dishes"] == ["yaml"]

    def test_working_directory_data_found(self, tmp_path, monkeypatch):
        """``./data/<locale>`` is searched when no data path is configured."""
        monkeypatch.chdir(tmp_path)
        directory = tmp_path / "data" / "de_DE"
        directory.mkdir(parents=True)
        (directory / "phone.yaml").write_text("phone:\n  landline_formats: ['030 ####']\n")

        resolver = DocumentResolver(use_packaged_data=False)

        assert resolver.load("phone", Locale.DE_DE) == {
            "phone": {"landline_formats": ["030 ####"]}
        }

    def test_key_order_preserved(self, resolver, write_document):
        write_document("en_US", "name", "name:\n  zeta: [a]\n  alpha: [b]\n  mid: [c]\n")
        document = resolver.load("name", Locale.EN_US)
        assert list(document["name"]) == ["zeta", "alpha", "mid"]

    def test_empty_document_is_empty_mapping(self, resolver, write_document):
        write_document("en_US", "empty", "")
        assert resolver.load("empty", Locale.EN_US) == {}

    def test_malformed_yaml_raises(self, resolver, write_document):
        write_document("en_US", "broken", "address: [unclosed\n")
        with pytest.raises(DocumentParsingError):
            resolver.load("broken", Locale.EN_US)

    def test_non_mapping_root_raises(self, resolver, write_document):
        write_document("en_US", "listy", "- a\n- b\n")
        with pytest.raises(DocumentParsingError, match="root must be a mapping"):
            resolver.load("listy", Locale.EN_US)

    def test_parsing_error_is_load_error(self, resolver, write_document):
        write_document("en_US", "broken", "a: b: c\n")
        with pytest.raises(DocumentLoadError):
            resolver.load("broken", Locale.EN_US)

    def test_latin1_fallback(self, resolver, data_dir):
        """Documents that are not valid UTF-8 are decoded as Latin-1."""
        directory = data_dir / "fr_FR"
        directory.mkdir()
        (directory / "food.yaml").write_bytes("food:\n  dishes: [Crêpe]\n".encode("latin-1"))

        assert resolver.load("food", Locale.FR_FR) == {"food": {"dishes": ["Crêpe"]}}

    def test_invalid_name_is_absent(self, resolver, write_document):
        write_document("en_US", "address", {"address": {}})
        assert resolver.find("../en_US/address", Locale.EN_US) is None

    def test_list_documents(self, resolver, write_document, data_dir):
        write_document("en_US", "phone", {"phone": {}})
        write_document("en_US", "address", {"address": {}}, extension=".yml")
        (data_dir / "en_US" / "notes.txt").write_text("ignored")

        assert resolver.list_documents(Locale.EN_US) == ["address", "phone"]
        assert resolver.list_documents(Locale.RU_RU) == []

    def test_packaged_documents_listed(self):
        resolver = DocumentResolver()
        names = resolver.list_documents(Locale.TR_TR)
        assert {"address", "company", "food", "name", "phone"} <= set(names)

    def test_packaged_document_loaded(self):
        source = DocumentResolver().find("address", Locale.EN_US)
        assert source is not None
        assert source.packaged
        assert str(source).startswith("package:")

    def test_data_path_overrides_packaged(self, data_dir, write_document):
        write_document("en_US", "food", {"food": {"dishes": ["Override"]}})
        resolver = DocumentResolver(data_dir)
        assert resolver.load("food", Locale.EN_US) == {"food": {"dishes": ["Override"]}}
