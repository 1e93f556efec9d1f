"""Locale-aware synthetic data generation."""

from mirage_datagen.mirage import Mirage
from mirage_datagen.shared.locale import Locale

__all__ = ["Locale", "Mirage"]

__version__ = "0.1.0"
