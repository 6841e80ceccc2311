"""Record types and the immutable lookup tables built from the dataset."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _frozen(mapping: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class CountryRecord:
    name: str
    code: str


@dataclass(frozen=True)
class SubcountryRecord:
    name: str
    code: str | None = None
    category: str | None = None
    regional_division: str | None = None
    secondary_code: str | None = None


@dataclass(frozen=True)
class SubcountryTables:
    """
    Lookup tables for the subdivisions of one country.

    Only records that declare a code appear in the name/code and FIPS tables.
    Category and regional division tables are keyed by ISO 3166-2 code; records
    without a code are filed under the empty string.
    """

    records: tuple[SubcountryRecord, ...] = ()
    code_to_name: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    name_to_code: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    category: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    regional_division: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    secondary_to_iso: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    iso_to_secondary: Mapping[str, str] = field(default_factory=lambda: _frozen({}))

    @classmethod
    def from_records(cls, records: list[SubcountryRecord]) -> "SubcountryTables":
        """
        Index subcountry records in dataset order.

        When two records share a name, the later one wins in name_to_code.
        """
        code_to_name: dict[str, str] = {}
        name_to_code: dict[str, str] = {}
        category: dict[str, str] = {}
        regional_division: dict[str, str] = {}
        secondary_to_iso: dict[str, str] = {}
        iso_to_secondary: dict[str, str] = {}

        for record in records:
            key = record.code or ""
            if record.category:
                category[key] = record.category
            if record.regional_division:
                regional_division[key] = record.regional_division
            if record.code is None:
                continue
            code_to_name[record.code] = record.name
            name_to_code[record.name] = record.code
            if record.secondary_code:
                secondary_to_iso[record.secondary_code] = record.code
                iso_to_secondary[record.code] = record.secondary_code

        return cls(
            records=tuple(records),
            code_to_name=_frozen(code_to_name),
            name_to_code=_frozen(name_to_code),
            category=_frozen(category),
            regional_division=_frozen(regional_division),
            secondary_to_iso=_frozen(secondary_to_iso),
            iso_to_secondary=_frozen(iso_to_secondary),
        )


EMPTY_TABLES = SubcountryTables()


@dataclass(frozen=True)
class Dataset:
    """Process-wide country and subcountry tables. Never mutated after load."""

    countries: tuple[CountryRecord, ...]
    country_by_code: Mapping[str, str]
    country_by_name: Mapping[str, str]
    subcountries: Mapping[str, SubcountryTables]

    @classmethod
    def build(
        cls,
        countries: list[CountryRecord],
        subcountries: dict[str, list[SubcountryRecord]],
    ) -> "Dataset":
        """Build lookup tables from parsed country and subcountry records.

        Args:
            countries: Country records in dataset order
            subcountries: Subcountry records grouped by parent country name

        Returns:
            Dataset with read-only tables
        """
        country_by_code: dict[str, str] = {}
        country_by_name: dict[str, str] = {}
        for country in countries:
            country_by_code[country.code] = country.name
            country_by_name[country.name] = country.code

        tables = {name: SubcountryTables.from_records(records) for name, records in subcountries.items()}

        return cls(
            countries=tuple(countries),
            country_by_code=_frozen(country_by_code),
            country_by_name=_frozen(country_by_name),
            subcountries=MappingProxyType(tables),
        )

    def tables_for(self, country_name: str) -> SubcountryTables:
        """Return the subcountry tables for a country, empty if it has none."""
        return self.subcountries.get(country_name, EMPTY_TABLES)

    @property
    def subcountry_count(self) -> int:
        return sum(len(tables.records) for tables in self.subcountries.values())
