"""Shared pytest fixtures for locale-subcountry tests."""

from pathlib import Path

import pytest

from locale_subcountry.dataset import Dataset, parse_dataset, reset_default_dataset

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<countries>
  <country>
    <name>Australia</name>
    <code>AU</code>
    <subcountry>
      <name>Australian Capital Territory</name>
      <code>ACT</code>
      <category>territory</category>
      <FIPS>01</FIPS>
    </subcountry>
    <subcountry>
      <name>New South Wales</name>
      <code>NSW</code>
      <category>state</category>
      <FIPS>02</FIPS>
    </subcountry>
    <subcountry>
      <name>Queensland</name>
      <code>QLD</code>
      <category>state</category>
      <FIPS>04</FIPS>
    </subcountry>
  </country>
  <country>
    <name>United Kingdom</name>
    <code>GB</code>
    <subcountry>
      <name>Scotland</name>
      <code>SCT</code>
      <category>country</category>
    </subcountry>
    <subcountry>
      <name>Dumfries and Galloway</name>
      <code>DGY</code>
      <category>council area</category>
      <regional_division>SCT</regional_division>
    </subcountry>
    <subcountry>
      <name>Mercia</name>
      <category>historic kingdom</category>
      <regional_division>ENG</regional_division>
    </subcountry>
  </country>
  <country>
    <name>Rivendell</name>
    <code>RV</code>
    <subcountry>
      <name>Last Homely House</name>
      <code>LHH</code>
    </subcountry>
    <subcountry>
      <name>Last Homely House</name>
      <code>LH2</code>
    </subcountry>
  </country>
  <country>
    <name>Singapore</name>
    <code>SG</code>
  </country>
</countries>
"""


@pytest.fixture
def sample_xml() -> str:
    """Small dataset covering coded, uncoded and ambiguous subcountries."""
    return SAMPLE_XML


@pytest.fixture
def sample_dataset() -> Dataset:
    """Parsed sample dataset."""
    return parse_dataset(SAMPLE_XML)


@pytest.fixture
def sample_dataset_path(tmp_path: Path) -> Path:
    """Sample dataset written to a temporary file."""
    path = tmp_path / "subcountry.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path


@pytest.fixture
def fresh_default_dataset():
    """Clear the cached default dataset before and after a test."""
    reset_default_dataset()
    yield
    reset_default_dataset()
