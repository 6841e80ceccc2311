"""Locale SubCountry: ISO 3166-2 subdivision names and codes, with FIPS 10-4 cross references."""

from locale_subcountry.config import UNKNOWN
from locale_subcountry.dataset import Dataset, MalformedDatasetError, get_default_dataset, load_dataset, parse_dataset
from locale_subcountry.lookup import (
    Catalog,
    InvalidCountryError,
    LookupResult,
    LookupStatus,
    SubCountry,
    World,
    clean_lookup_key,
    resolve,
)

__all__ = [
    "UNKNOWN",
    "Catalog",
    "Dataset",
    "InvalidCountryError",
    "LookupResult",
    "LookupStatus",
    "MalformedDatasetError",
    "SubCountry",
    "World",
    "clean_lookup_key",
    "get_default_dataset",
    "load_dataset",
    "parse_dataset",
    "resolve",
]
