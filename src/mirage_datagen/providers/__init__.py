"""Category providers built on the shared generation engine."""

from .address import AddressProvider
from .animal import AnimalProvider
from .base import BaseProvider
from .boolean import BooleanProvider
from .book import BookProvider
from .code import CodeProvider
from .color import ColorProvider
from .commerce import CommerceProvider
from .company import CompanyProvider
from .food import FoodProvider
from .internet import InternetProvider
from .name import NameProvider
from .phone import PhoneNumberProvider
from .registry import FIELD_REGISTRY, PROVIDER_CLASSES

__all__ = [
    "AddressProvider",
    "AnimalProvider",
    "BaseProvider",
    "BookProvider",
    "BooleanProvider",
    "CodeProvider",
    "ColorProvider",
    "CommerceProvider",
    "CompanyProvider",
    "FIELD_REGISTRY",
    "FoodProvider",
    "InternetProvider",
    "NameProvider",
    "PROVIDER_CLASSES",
    "PhoneNumberProvider",
]
