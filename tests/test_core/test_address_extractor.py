"""Tests for locality extraction from display labels."""

import pytest

from app.core.geocoding.extractor import (
    extract_city,
    extract_components,
    extract_county,
    extract_state,
)

SPRINGFIELD = "123 Main St, Springfield, Clarke County, GA, USA"


class TestExtractCity:
    """Tests for extract_city."""

    def test_skips_house_number_segment(self):
        assert extract_city(SPRINGFIELD) == "Springfield"

    def test_skips_county_and_short_segments(self):
        label = "GA, Fulton County, Atlanta, United States"
        assert extract_city(label) == "Atlanta"

    def test_only_scans_first_three_segments(self):
        label = "12 Oak Ln, Cobb County, US, Marietta, GA"
        assert extract_city(label) == ""

    @pytest.mark.parametrize("label", ["", "GA", "1 A St, B, C"])
    def test_returns_empty_when_nothing_qualifies(self, label):
        assert extract_city(label) == ""


class TestExtractCounty:
    """Tests for extract_county."""

    def test_returns_name_before_county(self):
        assert extract_county(SPRINGFIELD) == "Clarke"

    def test_multi_word_county(self):
        label = "Hazlehurst, Jeff Davis County, Georgia, United States"
        assert extract_county(label) == "Jeff Davis"

    def test_missing_county(self):
        assert extract_county("Atlanta, GA, USA") == ""


class TestExtractState:
    """Tests for extract_state."""

    def test_returns_state_code(self):
        assert extract_state(SPRINGFIELD) == "GA"

    def test_scans_from_the_end(self):
        assert extract_state("GA Ave, Springfield, AL, US") == "US"

    def test_ignores_spelled_out_state(self):
        label = "Savannah, Chatham County, Georgia, 31401, United States"
        assert extract_state(label) == ""


def test_extract_components():
    """All three fields are extracted from one label."""
    assert extract_components(SPRINGFIELD) == ("Springfield", "Clarke", "GA")
    assert extract_components("") == ("", "", "")
