"""Dataset parsing and the in-memory lookup tables."""

from .loader import (
    MalformedDatasetError,
    default_dataset_path,
    get_default_dataset,
    load_dataset,
    parse_dataset,
    reset_default_dataset,
)
from .records import CountryRecord, Dataset, SubcountryRecord, SubcountryTables

__all__ = [
    "CountryRecord",
    "Dataset",
    "MalformedDatasetError",
    "SubcountryRecord",
    "SubcountryTables",
    "default_dataset_path",
    "get_default_dataset",
    "load_dataset",
    "parse_dataset",
    "reset_default_dataset",
]
