"""Read-only catalog capability shared by the world and per-country views."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Catalog(Protocol):
    def all_codes(self) -> list[str] | None: ...

    def all_full_names(self) -> list[str] | None: ...

    def code_full_name_hash(self) -> dict[str, str] | None: ...

    def full_name_code_hash(self) -> dict[str, str] | None: ...
