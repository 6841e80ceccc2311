"""
Per-country resolver for subdivision names, ISO 3166-2 codes and FIPS 10-4 codes.

A SubCountry handle holds the canonical country name and code plus a
reference to the shared, read-only tables of the loaded dataset.

Query conventions:
    - "unknown" when the query applies but nothing matched
    - None when the country has no subdivisions (code, full_name and
      the listing methods only)
The lookup_* variants return a LookupResult that keeps the two apart.
"""

import logging

from locale_subcountry.config import COUNTRY_CODE_LENGTH
from locale_subcountry.dataset import Dataset, get_default_dataset
from locale_subcountry.lookup.normalize import clean_lookup_key
from locale_subcountry.lookup.result import LookupResult

logger = logging.getLogger(__name__)


class InvalidCountryError(ValueError):
    """Raised when a country code or name is not in the dataset."""


def _resolve_country(country_or_code: str, dataset: Dataset) -> tuple[str, str]:
    """Return the canonical (name, code) pair for a country code or name.

    Codes are case-insensitive; names must match the stored title case.
    """
    if len(country_or_code) == COUNTRY_CODE_LENGTH:
        code = country_or_code.upper()
        name = dataset.country_by_code.get(code)
        if name is None:
            msg = f"Invalid country code: {code} chosen"
            raise InvalidCountryError(msg)
        return name, code

    code = dataset.country_by_name.get(country_or_code)
    if code is None:
        msg = f"Invalid country name: {country_or_code} chosen, names must be in title case"
        raise InvalidCountryError(msg)
    return country_or_code, code


class SubCountry:
    """Subdivision lookups scoped to one country."""

    def __init__(self, country_or_code: str, dataset: Dataset | None = None) -> None:
        """
        Resolve a country by ISO 3166-1 alpha-2 code or full name.

        Args:
            country_or_code: Two letter code (any case) or title case country name
            dataset: Tables to query. Defaults to the process-wide dataset.

        Raises:
            InvalidCountryError: If the country is not in the dataset
        """
        self._dataset = dataset if dataset is not None else get_default_dataset()
        self._country, self._country_code = _resolve_country(country_or_code, self._dataset)
        self._tables = self._dataset.tables_for(self._country)

    @classmethod
    def resolve(cls, country_or_code: str, dataset: Dataset | None = None) -> "SubCountry | None":
        """Like the constructor, but logs a warning and returns None for an unknown country."""
        try:
            return cls(country_or_code, dataset)
        except InvalidCountryError as e:
            logger.warning(str(e))
            return None

    def country(self) -> str:
        return self._country

    def country_code(self) -> str:
        return self._country_code

    def has_sub_countries(self) -> bool:
        """True if at least one subdivision of this country has a code."""
        return bool(self._tables.code_to_name)

    def lookup_code(self, full_name: str) -> LookupResult:
        """
        Find the ISO 3166-2 code for a subdivision name.

        Tries an exact match on the cleaned name first, then a case-insensitive
        scan over all names of this country in dataset order.
        """
        if not self.has_sub_countries():
            return LookupResult.not_applicable()

        full_name = clean_lookup_key(full_name)
        code = self._tables.name_to_code.get(full_name)
        if code is not None:
            return LookupResult.found(code)

        wanted = full_name.upper()
        for name, code in self._tables.name_to_code.items():
            if name.upper() == wanted:
                logger.debug(f"Case-insensitive match for {full_name!r} in {self._country}: {name!r}")
                return LookupResult.found(code)

        return LookupResult.not_found()

    def lookup_full_name(self, code: str, upper_case: bool = False) -> LookupResult:
        """Find the subdivision name for an ISO 3166-2 code (case-insensitive)."""
        if not self.has_sub_countries():
            return LookupResult.not_applicable()

        code = clean_lookup_key(code).upper()
        full_name = self._tables.code_to_name.get(code)
        if full_name is None:
            return LookupResult.not_found()
        if upper_case:
            full_name = full_name.upper()
        return LookupResult.found(full_name)

    def lookup_category(self, code: str) -> LookupResult:
        # Codes are matched case-sensitively here, unlike full_name
        return self._lookup(self._tables.category, clean_lookup_key(code))

    def lookup_regional_division(self, code: str) -> LookupResult:
        return self._lookup(self._tables.regional_division, clean_lookup_key(code))

    def lookup_fips10_4_code(self, code: str) -> LookupResult:
        return self._lookup(self._tables.iso_to_secondary, clean_lookup_key(code).upper())

    def lookup_iso3166_2_code(self, fips_code: str) -> LookupResult:
        return self._lookup(self._tables.secondary_to_iso, clean_lookup_key(fips_code))

    @staticmethod
    def _lookup(table, key: str) -> LookupResult:
        value = table.get(key)
        if value is None:
            return LookupResult.not_found()
        return LookupResult.found(value)

    def code(self, full_name: str) -> str | None:
        """ISO 3166-2 code for a name, "unknown" if no match, None if the country has no subdivisions."""
        return self.lookup_code(full_name).to_value()

    def full_name(self, code: str, upper_case: bool = False) -> str | None:
        """
        Subdivision name for a code.

        The "unknown" sentinel is never upper-cased, even with upper_case=True.
        """
        return self.lookup_full_name(code, upper_case).to_value()

    def category(self, code: str) -> str:
        return self.lookup_category(code).to_value()

    def regional_division(self, code: str) -> str:
        return self.lookup_regional_division(code).to_value()

    def FIPS10_4_code(self, code: str) -> str:  # noqa: N802
        return self.lookup_fips10_4_code(code).to_value()

    def ISO3166_2_code(self, fips_code: str) -> str:  # noqa: N802
        return self.lookup_iso3166_2_code(fips_code).to_value()

    def all_codes(self) -> list[str] | None:
        if not self.has_sub_countries():
            return None
        return sorted(self._tables.code_to_name)

    def all_full_names(self) -> list[str] | None:
        if not self.has_sub_countries():
            return None
        return sorted(self._tables.name_to_code)

    def code_full_name_hash(self) -> dict[str, str] | None:
        if not self.has_sub_countries():
            return None
        return dict(self._tables.code_to_name)

    def full_name_code_hash(self) -> dict[str, str] | None:
        if not self.has_sub_countries():
            return None
        return dict(self._tables.name_to_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubCountry):
            return NotImplemented
        return self._country_code == other._country_code

    def __hash__(self) -> int:
        return hash(self._country_code)

    def __repr__(self) -> str:
        return f"SubCountry(country={self._country!r}, code={self._country_code!r})"


def resolve(country_or_code: str, dataset: Dataset | None = None) -> SubCountry | None:
    """Resolve a country code or name to a SubCountry handle, or None if unknown."""
    return SubCountry.resolve(country_or_code, dataset)
