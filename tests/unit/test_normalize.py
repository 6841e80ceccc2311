"""Tests for lookup key normalization."""

import pytest

from locale_subcountry.lookup.normalize import clean_lookup_key


class TestCleanLookupKey:
    """Tests for clean_lookup_key function."""

    def test_passes_through_without_period_or_space(self):
        assert clean_lookup_key("Queensland") == "Queensland"
        assert clean_lookup_key("N-S-W") == "N-S-W"

    def test_strips_periods(self):
        assert clean_lookup_key("N.S.W.") == "NSW"

    def test_collapses_repeated_spaces(self):
        assert clean_lookup_key("New   South  Wales") == "New South Wales"

    def test_trims_one_space_each_end(self):
        assert clean_lookup_key(" Victoria ") == "Victoria"

    def test_trailing_space(self):
        assert clean_lookup_key("New South Wales ") == "New South Wales"

    def test_leading_run_collapses_then_trims(self):
        assert clean_lookup_key("   Tasmania") == "Tasmania"

    def test_period_removal_before_space_collapse(self):
        assert clean_lookup_key("St. . Helena") == "St Helena"

    def test_keeps_case_and_other_punctuation(self):
        assert clean_lookup_key("hawke's bay, nz") == "hawke's bay, nz"

    def test_tabs_are_not_spaces(self):
        assert clean_lookup_key("\tQLD") == "\tQLD"

    def test_empty_string(self):
        assert clean_lookup_key("") == ""

    @pytest.mark.parametrize(
        "value",
        ["New South Wales ", "  A.. B  ", ". x .", " ", "..", "Dumfries and Galloway", "a .b. c"],
    )
    def test_idempotent(self, value):
        once = clean_lookup_key(value)
        assert clean_lookup_key(once) == once
