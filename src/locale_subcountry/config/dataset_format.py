"""
Element names of the subcountry XML dataset.

Structure:
    <countries>
      <country>
        <name>Australia</name>
        <code>AU</code>
        <subcountry>
          <name>New South Wales</name>
          <code>NSW</code>
          <category>state</category>
          <FIPS>02</FIPS>
        </subcountry>
      </country>
    </countries>

Any element not listed here inside a country or subcountry is treated
as corruption.
"""

ROOT_TAG = "countries"
COUNTRY_TAG = "country"
SUBCOUNTRY_TAG = "subcountry"

COUNTRY_FIELDS = frozenset({"name", "code"})

# Maps XML element name -> SubcountryRecord attribute
SUBCOUNTRY_FIELDS: dict[str, str] = {
    "name": "name",
    "code": "code",
    "category": "category",
    "regional_division": "regional_division",
    "FIPS": "secondary_code",
}
