"""
Pytest configuration and fixtures for mirage data generator tests.

Provides temporary locale data directories, isolated stores and a clean
process-wide cache for every test.
"""

import sys
from pathlib import Path

import pytest
import yaml

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from mirage_datagen.config.models import MirageConfig  # noqa: E402
from mirage_datagen.shared.data_store import LocaleDataStore, reset_default_store  # noqa: E402
from mirage_datagen.shared.document_loader import DocumentResolver  # noqa: E402

CONFIG_ENV_VARS = (
    "MIRAGE_CONFIG_FILE",
    "MIRAGE_LOCALE",
    "MIRAGE_SEED",
    "MIRAGE_DATA_PATH",
    "MIRAGE_USE_PACKAGED_DATA",
    "MIRAGE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables from leaking into tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def fresh_default_store():
    """Start and finish every test with an empty process-wide table cache."""
    reset_default_store()
    yield
    reset_default_store()


@pytest.fixture
def data_dir(tmp_path, monkeypatch) -> Path:
    """
    Empty data directory for hand-written documents.

    The working directory is moved to a separate empty folder so the
    ``./data`` lookup never finds stray documents.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    root = tmp_path / "locales"
    root.mkdir()
    return root


@pytest.fixture
def write_document(data_dir):
    """Write ``data`` as ``<data_dir>/<locale>/<name><extension>``."""

    def _write(locale: str, name: str, data, extension: str = ".yaml") -> Path:
        directory = data_dir / locale
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name}{extension}"
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(
                yaml.safe_dump(data, allow_unicode=True, sort_keys=False), encoding="utf-8"
            )
        return path

    return _write


@pytest.fixture
def resolver(data_dir) -> DocumentResolver:
    """Resolver that only sees documents written to ``data_dir``."""
    return DocumentResolver(data_dir, use_packaged_data=False)


@pytest.fixture
def store(resolver) -> LocaleDataStore:
    return LocaleDataStore(resolver)


@pytest.fixture
def isolated_config(data_dir) -> MirageConfig:
    """Configuration reading only from ``data_dir``."""
    return MirageConfig(data_path=str(data_dir), use_packaged_data=False)


@pytest.fixture
def packaged_config() -> MirageConfig:
    """Configuration reading the data shipped with the package."""
    return MirageConfig()
