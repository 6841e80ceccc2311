"""Utility modules for locale-subcountry."""

from locale_subcountry.utils.validators import VALIDATION_RULES, validate_dataset

__all__ = ["VALIDATION_RULES", "validate_dataset"]
