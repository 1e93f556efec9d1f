"""
Data document resolution and parsing.

Locale data lives in one YAML document per (locale, category). Documents are
looked up on the filesystem first (an explicitly configured data directory,
then ``./data`` under the working directory) and, when not found there, in the
data shipped inside the package. A document that no strategy can find is
reported as absent rather than as an error.
"""

import logging
import re
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

import yaml

from .exceptions import DocumentLoadError, DocumentParsingError
from .locale import Locale

logger = logging.getLogger(__name__)

PACKAGE_NAME = "mirage_datagen"
PACKAGED_DATA_DIR = "data"
DOCUMENT_EXTENSIONS = (".yaml", ".yml")

_DOCUMENT_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class DocumentSource:
    """Where a document was found."""

    name: str
    locale: Locale
    location: Path | Traversable
    packaged: bool = False

    def __str__(self) -> str:
        prefix = "package:" if self.packaged else ""
        return f"{prefix}{self.location}"


def is_valid_document_name(name: str) -> bool:
    """Document names are plain identifiers; paths and empty names are rejected."""
    return isinstance(name, str) and bool(_DOCUMENT_NAME.match(name))


class DocumentResolver:
    """
    Locates and parses locale data documents.

    Args:
        data_path: Optional data directory holding ``<locale>/<name>.yaml``
        use_packaged_data: Whether to fall back to data shipped in the package
        encoding: Preferred text encoding for documents
    """

    def __init__(
        self,
        data_path: str | Path | None = None,
        use_packaged_data: bool = True,
        encoding: str = "utf-8",
    ):
        self.data_path = Path(data_path) if data_path else None
        self.use_packaged_data = use_packaged_data
        self.encoding = encoding

    def _search_dirs(self, locale: Locale) -> list[Path]:
        search_dirs = []
        if self.data_path is not None:
            search_dirs.append(self.data_path / locale.code)
        search_dirs.append(Path.cwd() / "data" / locale.code)
        return search_dirs

    def _packaged_dir(self, locale: Locale) -> Traversable | None:
        if not self.use_packaged_data:
            return None
        try:
            return resources.files(PACKAGE_NAME) / PACKAGED_DATA_DIR / locale.code
        except ModuleNotFoundError:
            logger.warning(f"Packaged data for {PACKAGE_NAME} is not available")
            return None

    def find(self, name: str, locale: Locale) -> DocumentSource | None:
        """
        Find a document, trying each strategy and extension in turn.

        Returns:
            DocumentSource for the first hit, or None when the document is absent
        """
        if not is_valid_document_name(name):
            logger.debug(f"Rejected document name {name!r}")
            return None

        for directory in self._search_dirs(locale):
            for extension in DOCUMENT_EXTENSIONS:
                path = directory / f"{name}{extension}"
                if path.is_file():
                    return DocumentSource(name, locale, path)

        packaged_dir = self._packaged_dir(locale)
        if packaged_dir is not None:
            for extension in DOCUMENT_EXTENSIONS:
                resource = packaged_dir / f"{name}{extension}"
                if resource.is_file():
                    return DocumentSource(name, locale, resource, packaged=True)

        logger.debug(f"Document {name} not found for locale {locale}")
        return None

    def _read_text(self, source: DocumentSource, encodings: list[str] | None = None) -> str:
        """
        Read a document's text, trying several encodings if needed.

        Raises:
            DocumentLoadError: If the document cannot be read or decoded
        """
        encodings = encodings or [self.encoding, "utf-8", "latin-1"]

        try:
            raw = source.location.read_bytes()
        except OSError as e:
            raise DocumentLoadError("Unable to read document", str(source), e)

        last_error = None
        for encoding in encodings:
            try:
                return raw.decode(encoding)
            except (UnicodeDecodeError, LookupError) as e:
                last_error = e
                continue

        raise DocumentLoadError(
            f"Unable to decode document with encodings: {', '.join(encodings)}",
            str(source),
            last_error,
        )

    def parse(self, source: DocumentSource) -> dict[str, Any]:
        """
        Parse a located document into an ordered mapping.

        An empty document parses to an empty mapping.

        Raises:
            DocumentLoadError: If the document cannot be read
            DocumentParsingError: If the YAML is malformed or its root is not a mapping
        """
        text = self._read_text(source)
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentParsingError(str(source), original_error=e)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DocumentParsingError(
                str(source),
                f"Document root must be a mapping, got {type(data).__name__}",
            )
        return data

    def load(self, name: str, locale: Locale) -> dict[str, Any] | None:
        """
        Find and parse a document.

        Returns:
            The parsed mapping, or None when the document is absent
        """
        source = self.find(name, locale)
        if source is None:
            return None

        logger.info(f"Loading data document {name} for {locale} from {source}")
        return self.parse(source)

    def list_documents(self, locale: Locale) -> list[str]:
        """
        List document names available for a locale across all strategies.

        Returns:
            Sorted document names without extension
        """
        names: set[str] = set()

        for directory in self._search_dirs(locale):
            if directory.is_dir():
                names.update(
                    path.stem
                    for path in directory.iterdir()
                    if path.is_file() and path.suffix in DOCUMENT_EXTENSIONS
                )

        packaged_dir = self._packaged_dir(locale)
        if packaged_dir is not None and packaged_dir.is_dir():
            for resource in packaged_dir.iterdir():
                stem, dot, suffix = resource.name.rpartition(".")
                if dot and f".{suffix}" in DOCUMENT_EXTENSIONS and resource.is_file():
                    names.add(stem)

        return sorted(name for name in names if is_valid_document_name(name))
