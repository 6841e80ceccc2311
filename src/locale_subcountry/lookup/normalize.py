"""Input normalization applied before every name or code lookup."""

import re

_PERIOD = re.compile(r"\.")
_MULTI_SPACE = re.compile(r"  +")


def clean_lookup_key(value: str) -> str:
    """Strip periods, collapse repeated spaces and trim one space at each end.

    Input without a period or space is returned unchanged. Case, other
    punctuation and diacritics are left alone.
    """
    if "." not in value and " " not in value:
        return value

    value = _PERIOD.sub("", value)
    value = _MULTI_SPACE.sub(" ", value)
    if value.startswith(" "):
        value = value[1:]
    if value.endswith(" "):
        value = value[:-1]
    return value
