"""
Explicit registry of the generatable field surface.

Each category maps to its provider class and to the field generators it
exposes, so tools can enumerate every field without inspecting providers at
runtime.
"""

from collections.abc import Callable
from typing import Any

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

PROVIDER_CLASSES: dict[str, type[BaseProvider]] = {
    "address": AddressProvider,
    "name": NameProvider,
    "phone": PhoneNumberProvider,
    "company": CompanyProvider,
    "food": FoodProvider,
    "internet": InternetProvider,
    "code": CodeProvider,
    "commerce": CommerceProvider,
    "color": ColorProvider,
    "boolean": BooleanProvider,
    "animal": AnimalProvider,
    "book": BookProvider,
}

FIELD_REGISTRY: dict[str, dict[str, Callable[[Any], str]]] = {
    "address": {
        "city": AddressProvider.city,
        "street_name": AddressProvider.street_name,
        "street_suffix": AddressProvider.street_suffix,
        "street_address": AddressProvider.street_address,
        "street_number": AddressProvider.street_number,
        "building_number": AddressProvider.building_number,
        "district": AddressProvider.district,
        "zip_code": AddressProvider.zip_code,
        "postal_code": AddressProvider.postal_code,
        "state": AddressProvider.state,
        "state_abbr": AddressProvider.state_abbr,
        "country": AddressProvider.country,
        "country_code": AddressProvider.country_code,
        "full_address": AddressProvider.full_address,
        "latitude": AddressProvider.latitude,
        "longitude": AddressProvider.longitude,
        "coordinates": AddressProvider.coordinates,
    },
    "name": {
        "first_name": NameProvider.first_name,
        "last_name": NameProvider.last_name,
        "full_name": NameProvider.full_name,
        "prefix": NameProvider.prefix,
        "suffix": NameProvider.suffix,
        "job_title": NameProvider.job_title,
        "gender": NameProvider.gender,
        "username": NameProvider.username,
    },
    "phone": {
        "phone_number": PhoneNumberProvider.phone_number,
        "cell_phone": PhoneNumberProvider.cell_phone,
        "landline": PhoneNumberProvider.landline,
        "international": PhoneNumberProvider.international,
    },
    "company": {
        "name": CompanyProvider.name,
        "suffix": CompanyProvider.suffix,
        "industry": CompanyProvider.industry,
        "catch_phrase": CompanyProvider.catch_phrase,
    },
    "food": {
        "dish": FoodProvider.dish,
        "ingredient": FoodProvider.ingredient,
        "spice": FoodProvider.spice,
        "description": FoodProvider.description,
    },
    "internet": {
        "username": InternetProvider.username,
        "email": InternetProvider.email,
        "free_email": InternetProvider.free_email,
        "free_email_domain": InternetProvider.free_email_domain,
        "domain_name": InternetProvider.domain_name,
        "domain_word": InternetProvider.domain_word,
        "domain_suffix": InternetProvider.domain_suffix,
        "url": InternetProvider.url,
        "mac_address": InternetProvider.mac_address,
        "password": InternetProvider.password,
    },
    "code": {
        "isbn": CodeProvider.isbn,
        "ean": CodeProvider.ean,
        "issn": CodeProvider.issn,
        "asin": CodeProvider.asin,
    },
    "commerce": {
        "department": CommerceProvider.department,
        "material": CommerceProvider.material,
        "product_adjective": CommerceProvider.product_adjective,
        "product": CommerceProvider.product,
        "product_name": CommerceProvider.product_name,
        "price": CommerceProvider.price,
        "promotion_code": CommerceProvider.promotion_code,
    },
    "color": {
        "name": ColorProvider.name,
        "hex": ColorProvider.hex,
        "rgb": ColorProvider.rgb,
        "rgba": ColorProvider.rgba,
        "hsl": ColorProvider.hsl,
    },
    "boolean": {
        "yes_no": BooleanProvider.yes_no,
    },
    "animal": {
        "name": AnimalProvider.name,
    },
    "book": {
        "title": BookProvider.title,
        "author": BookProvider.author,
        "publisher": BookProvider.publisher,
        "genre": BookProvider.genre,
        "isbn": BookProvider.isbn,
    },
}


def categories() -> list[str]:
    return list(FIELD_REGISTRY)


def fields_for(category: str) -> list[str]:
    """
    List the registered fields of a category.

    Raises:
        KeyError: If the category is not registered
    """
    return list(FIELD_REGISTRY[category])


def generate(provider: BaseProvider, field: str) -> str:
    """
    Run one registered field generator on a provider.

    Raises:
        KeyError: If the provider's category has no such field
    """
    return FIELD_REGISTRY[provider.CATEGORY][field](provider)
