"""
Loader for the subcountry XML dataset.

Parses the whole resource in one pass into the country and subcountry
tables. The dataset is expected to be internally consistent, so any
unrecognised element or stray text aborts the load.
"""

import logging
import os
import xml.etree.ElementTree as ET
from functools import lru_cache
from pathlib import Path

from locale_subcountry.config import (
    COUNTRY_FIELDS,
    COUNTRY_TAG,
    DATASET_ENV_VAR,
    DEFAULT_DATASET_PATH,
    ROOT_TAG,
    SUBCOUNTRY_FIELDS,
    SUBCOUNTRY_TAG,
)
from locale_subcountry.dataset.records import CountryRecord, Dataset, SubcountryRecord

logger = logging.getLogger(__name__)


class MalformedDatasetError(ValueError):
    """Raised when the dataset does not follow the country/subcountry grammar."""

    def __init__(self, country: str | None, line: str, level: str = "country"):
        self.country = country
        self.line = line
        self.level = level
        super().__init__(f"Badly formed {level} data in {country or '<unnamed country>'}\nData: {line}")


def _fragment(element: ET.Element) -> str:
    """Serialize an element without its trailing text, for error messages."""
    text = ET.tostring(element, encoding="unicode")
    if element.tail and text.endswith(element.tail):
        text = text[: -len(element.tail)]
    return text.strip()


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def _check_attributes(element: ET.Element, country: str | None, level: str) -> None:
    """Reject attributes; all data is carried in element text."""
    if element.attrib:
        attrs = " ".join(f'{key}="{value}"' for key, value in element.attrib.items())
        raise MalformedDatasetError(country, f"<{element.tag} {attrs}>", level)


def _field_value(element: ET.Element, country: str | None, level: str) -> str | None:
    """Return the stripped text of a leaf field, or None when empty."""
    _check_attributes(element, country, level)
    if len(element):
        raise MalformedDatasetError(country, _fragment(element), level)
    if _is_blank(element.text):
        return None
    return element.text.strip()


def _check_stray_text(block: ET.Element, country: str | None, level: str) -> None:
    """Reject non-blank text sitting directly inside a country or subcountry block."""
    _check_attributes(block, country, level)
    if not _is_blank(block.text):
        raise MalformedDatasetError(country, block.text.strip(), level)
    for child in block:
        if not _is_blank(child.tail):
            raise MalformedDatasetError(country, child.tail.strip(), level)


def _parse_subcountry(block: ET.Element, country: str | None) -> SubcountryRecord:
    _check_stray_text(block, country, SUBCOUNTRY_TAG)

    fields: dict[str, str | None] = {}
    for child in block:
        attr = SUBCOUNTRY_FIELDS.get(child.tag)
        if attr is None:
            raise MalformedDatasetError(country, _fragment(child), SUBCOUNTRY_TAG)
        fields[attr] = _field_value(child, country, SUBCOUNTRY_TAG)

    if not fields.get("name"):
        raise MalformedDatasetError(country, _fragment(block), SUBCOUNTRY_TAG)

    return SubcountryRecord(**fields)


def _parse_country(block: ET.Element) -> tuple[CountryRecord, list[SubcountryRecord]]:
    # The name is needed for error messages before the rest of the block is read
    name_element = block.find("name")
    country_name = name_element.text.strip() if name_element is not None and name_element.text else None

    _check_stray_text(block, country_name, COUNTRY_TAG)

    fields: dict[str, str | None] = {}
    subcountries: list[SubcountryRecord] = []
    for child in block:
        if child.tag == SUBCOUNTRY_TAG:
            subcountries.append(_parse_subcountry(child, country_name))
        elif child.tag in COUNTRY_FIELDS:
            fields[child.tag] = _field_value(child, country_name, COUNTRY_TAG)
        else:
            raise MalformedDatasetError(country_name, _fragment(child), COUNTRY_TAG)

    if not fields.get("name") or not fields.get("code"):
        raise MalformedDatasetError(country_name, _fragment(block), COUNTRY_TAG)

    return CountryRecord(name=fields["name"], code=fields["code"]), subcountries


def parse_dataset(text: str) -> Dataset:
    """
    Parse dataset XML into lookup tables.

    Args:
        text: Full XML document

    Returns:
        Dataset holding the country and subcountry tables

    Raises:
        MalformedDatasetError: If the document is not well formed or
            deviates from the country/subcountry grammar
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        line_no, column = e.position
        lines = text.splitlines()
        bad_line = lines[line_no - 1].strip() if 0 < line_no <= len(lines) else ""
        raise MalformedDatasetError(None, f"{bad_line} (line {line_no}, column {column})") from e

    if root.tag != ROOT_TAG:
        raise MalformedDatasetError(None, f"<{root.tag}>")
    _check_attributes(root, None, COUNTRY_TAG)
    if not _is_blank(root.text):
        raise MalformedDatasetError(None, root.text.strip())

    countries: list[CountryRecord] = []
    subcountries: dict[str, list[SubcountryRecord]] = {}

    for block in root:
        if block.tag != COUNTRY_TAG:
            raise MalformedDatasetError(None, _fragment(block))
        if not _is_blank(block.tail):
            raise MalformedDatasetError(None, block.tail.strip())

        country, records = _parse_country(block)
        countries.append(country)
        if records:
            subcountries.setdefault(country.name, []).extend(records)

    dataset = Dataset.build(countries, subcountries)
    logger.info(f"Loaded {len(countries)} countries and {dataset.subcountry_count} subcountries")
    return dataset


def load_dataset(path: str | Path) -> Dataset:
    """Read and parse a dataset file.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedDatasetError: If the file content is malformed
    """
    path = Path(path)
    if not path.exists():
        msg = f"Subcountry dataset not found: {path}"
        raise FileNotFoundError(msg)

    logger.debug(f"Reading subcountry dataset: {path}")
    return parse_dataset(path.read_text(encoding="utf-8"))


def default_dataset_path() -> Path:
    """Return the dataset path from the environment, or the bundled file."""
    override = os.environ.get(DATASET_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_DATASET_PATH


@lru_cache(maxsize=1)
def get_default_dataset() -> Dataset:
    """Load the default dataset once per process."""
    return load_dataset(default_dataset_path())


def reset_default_dataset() -> None:
    """Drop the cached default dataset so the next access reloads it."""
    get_default_dataset.cache_clear()
