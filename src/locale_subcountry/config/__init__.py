"""Configuration constants for dataset loading and lookups."""

from .dataset_format import (
    COUNTRY_FIELDS,
    COUNTRY_TAG,
    ROOT_TAG,
    SUBCOUNTRY_FIELDS,
    SUBCOUNTRY_TAG,
)
from .defaults import COUNTRY_CODE_LENGTH, DATASET_ENV_VAR, DEFAULT_DATASET_PATH, UNKNOWN

__all__ = [
    "COUNTRY_CODE_LENGTH",
    "COUNTRY_FIELDS",
    "COUNTRY_TAG",
    "DATASET_ENV_VAR",
    "DEFAULT_DATASET_PATH",
    "ROOT_TAG",
    "SUBCOUNTRY_FIELDS",
    "SUBCOUNTRY_TAG",
    "UNKNOWN",
]
