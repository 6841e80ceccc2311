"""Dataset quality validation against the ISO 3166 databases shipped with pycountry."""

import logging
from collections import Counter
from collections.abc import Callable

import pycountry

from locale_subcountry.dataset import Dataset

logger = logging.getLogger(__name__)


def _error(rule: str, table: str, message: str, severity: str = "error") -> dict:
    return {"rule": rule, "table": table, "message": message, "severity": severity}


def _check_duplicate_country_codes(dataset: Dataset) -> list[dict]:
    counts = Counter(country.code for country in dataset.countries)
    return [
        _error("duplicate_country_code", "countries", f"Country code {code} appears {n} times")
        for code, n in counts.items()
        if n > 1
    ]


def _check_duplicate_country_names(dataset: Dataset) -> list[dict]:
    counts = Counter(country.name for country in dataset.countries)
    return [
        _error("duplicate_country_name", "countries", f"Country name {name!r} appears {n} times")
        for name, n in counts.items()
        if n > 1
    ]


def _check_duplicate_subcountry_codes(dataset: Dataset) -> list[dict]:
    errors = []
    for country, tables in dataset.subcountries.items():
        counts = Counter(record.code for record in tables.records if record.code is not None)
        errors.extend(
            _error("duplicate_subcountry_code", country, f"Subcountry code {code} appears {n} times")
            for code, n in counts.items()
            if n > 1
        )
    return errors


def _check_ambiguous_subcountry_names(dataset: Dataset) -> list[dict]:
    errors = []
    for country, tables in dataset.subcountries.items():
        codes_by_name: dict[str, list[str]] = {}
        for record in tables.records:
            if record.code is not None:
                codes_by_name.setdefault(record.name, []).append(record.code)
        for name, codes in codes_by_name.items():
            if len(codes) > 1:
                errors.append(
                    _error(
                        "ambiguous_subcountry_name",
                        country,
                        f"Name {name!r} is shared by codes {', '.join(codes)}; {codes[-1]} wins name lookups",
                        severity="warning",
                    )
                )
    return errors


def _check_unknown_country_codes(dataset: Dataset) -> list[dict]:
    return [
        _error("unknown_country_code", "countries", f"{country.code} ({country.name}) is not an ISO 3166-1 code")
        for country in dataset.countries
        if pycountry.countries.get(alpha_2=country.code) is None
    ]


def _check_unknown_subcountry_codes(dataset: Dataset) -> list[dict]:
    errors = []
    for country in dataset.countries:
        for record in dataset.tables_for(country.name).records:
            if record.code is None:
                continue
            iso_code = f"{country.code}-{record.code}"
            if pycountry.subdivisions.get(code=iso_code) is None:
                errors.append(
                    _error(
                        "unknown_subcountry_code",
                        country.name,
                        f"{iso_code} ({record.name}) is not an ISO 3166-2 code",
                        severity="warning",
                    )
                )
    return errors


VALIDATION_RULES: dict[str, Callable[[Dataset], list[dict]]] = {
    "duplicate_country_code": _check_duplicate_country_codes,
    "duplicate_country_name": _check_duplicate_country_names,
    "duplicate_subcountry_code": _check_duplicate_subcountry_codes,
    "ambiguous_subcountry_name": _check_ambiguous_subcountry_names,
    "unknown_country_code": _check_unknown_country_codes,
    "unknown_subcountry_code": _check_unknown_subcountry_codes,
}


def validate_dataset(dataset: Dataset, validation_rules: list[str] | None = None) -> list[dict]:
    """Validate the loaded country and subcountry tables.

    Args:
        dataset: Dataset to check.
        validation_rules: Optional list of rule names from VALIDATION_RULES.
            If None, runs all rules.

    Returns:
        List of validation error dictionaries. Empty list means validation passed.
        Each error dict contains: rule, table, message, severity.

    Raises:
        ValueError: If an unknown rule name is requested.
    """
    rules = validation_rules if validation_rules is not None else list(VALIDATION_RULES)
    unknown = [rule for rule in rules if rule not in VALIDATION_RULES]
    if unknown:
        msg = f"Unknown validation rules: {', '.join(unknown)}"
        raise ValueError(msg)

    errors: list[dict] = []
    for rule in rules:
        found = VALIDATION_RULES[rule](dataset)
        logger.debug(f"Rule {rule}: {len(found)} findings")
        errors.extend(found)

    return errors
