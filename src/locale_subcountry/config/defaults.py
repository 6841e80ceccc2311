"""
Default settings for the lookup layer.

The bundled dataset can be replaced at runtime by pointing
LOCALE_SUBCOUNTRY_DATASET at another file in the same format.
"""

from pathlib import Path

# Returned by query methods when a lookup applies but finds nothing
UNKNOWN = "unknown"

# Identifiers of this length are treated as ISO 3166-1 alpha-2 codes
COUNTRY_CODE_LENGTH = 2

DEFAULT_DATASET_PATH = Path(__file__).resolve().parents[1] / "data" / "subcountry.xml"

DATASET_ENV_VAR = "LOCALE_SUBCOUNTRY_DATASET"
