"""Tagged results for subcountry queries."""

from dataclasses import dataclass
from enum import Enum

from locale_subcountry.config import UNKNOWN


class LookupStatus(Enum):
    FOUND = "found"
    # The query applies to this country but nothing matched
    NOT_FOUND = "not_found"
    # The country has no subdivisions, so the query does not apply
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus
    value: str | None = None

    @classmethod
    def found(cls, value: str) -> "LookupResult":
        return cls(LookupStatus.FOUND, value)

    @classmethod
    def not_found(cls) -> "LookupResult":
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def not_applicable(cls) -> "LookupResult":
        return cls(LookupStatus.NOT_APPLICABLE)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def to_value(self) -> str | None:
        """Collapse to the plain return convention: value, "unknown" or None."""
        if self.status is LookupStatus.FOUND:
            return self.value
        if self.status is LookupStatus.NOT_FOUND:
            return UNKNOWN
        return None
