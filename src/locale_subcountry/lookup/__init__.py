"""Country catalog and per-country subdivision lookups."""

from .catalog import Catalog
from .normalize import clean_lookup_key
from .result import LookupResult, LookupStatus
from .subcountry import InvalidCountryError, SubCountry, resolve
from .world import World

__all__ = [
    "Catalog",
    "InvalidCountryError",
    "LookupResult",
    "LookupStatus",
    "SubCountry",
    "World",
    "clean_lookup_key",
    "resolve",
]
