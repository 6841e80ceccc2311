"""ISO 3166-1 country catalog."""

from locale_subcountry.dataset import Dataset, get_default_dataset


class World:
    """Country names and codes from the loaded dataset."""

    def __init__(self, dataset: Dataset | None = None) -> None:
        self._dataset = dataset if dataset is not None else get_default_dataset()

    def all_codes(self) -> list[str]:
        """All country codes, sorted ascending."""
        return sorted(self._dataset.country_by_code)

    def all_full_names(self) -> list[str]:
        """All country names, sorted ascending."""
        return sorted(self._dataset.country_by_name)

    def code_full_name_hash(self) -> dict[str, str]:
        return dict(self._dataset.country_by_code)

    def full_name_code_hash(self) -> dict[str, str]:
        return dict(self._dataset.country_by_name)

    def __repr__(self) -> str:
        return f"World(countries={len(self._dataset.country_by_code)})"
