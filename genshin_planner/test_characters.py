"""
Unit tests for characters.py - Roster normalization and name lookup.
"""
import pytest
from characters import Character, find_character, normalize_character, normalize_roster
from constants import PLACEHOLDER_IMAGE

AMBER = {
    "id": "amber", "name_kr": "엠버", "name_en": "Amber", "element": "Pyro",
    "weapon": "Bow", "region": "Mondstadt", "day": "Monday", "image": "images/amber.png",
}


class TestNormalizeCharacter:
    """Tests for normalize_character."""

    def test_full_record(self):
        c = normalize_character(AMBER)
        assert c.id == "amber"
        assert c.name == "엠버"
        assert c.name_en == "Amber"
        assert c.element == "Pyro"
        assert c.weapon == "Bow"
        assert c.image == "images/amber.png"
        assert c.region == "mond"
        assert c.day == "mon"
        assert c.talent_book.key == "freedom"

    def test_english_name_fallback(self):
        """Blank Korean names should fall back to the English name."""
        c = normalize_character({**AMBER, "name_kr": "   "})
        assert c.name == "Amber"
        c = normalize_character({**AMBER, "name_kr": None})
        assert c.name == "Amber"

    def test_missing_fields_degrade(self):
        """Missing fields should become empty strings, image the placeholder."""
        c = normalize_character({"id": "traveler", "name_en": "Traveler"})
        assert c.element == ""
        assert c.weapon == ""
        assert c.region == ""
        assert c.day == ""
        assert c.image == PLACEHOLDER_IMAGE
        assert c.talent_book is None

    def test_unmapped_day_has_no_book(self):
        c = normalize_character({**AMBER, "day": "Thursday"})
        assert c.day == "thu"
        assert c.talent_book is None

    def test_unknown_region_kept(self):
        c = normalize_character({**AMBER, "region": "Snezhnaya"})
        assert c.region == "snezhnaya"
        assert c.talent_book is None

    def test_numeric_id_becomes_string(self):
        assert normalize_character({**AMBER, "id": 10000021}).id == "10000021"

    @pytest.mark.parametrize("raw", [None, "amber", 42, ["amber"]])
    def test_non_mapping_skipped(self, raw):
        assert normalize_character(raw) is None


class TestNormalizeRoster:
    """Tests for normalize_roster."""

    def test_keeps_order_and_skips_junk(self):
        rows = [AMBER, "junk", {**AMBER, "id": "lisa", "name_kr": "리사", "day": "wed"}]
        roster = normalize_roster(rows)
        assert [c.id for c in roster] == ["amber", "lisa"]
        assert roster[1].talent_book.key == "ballad"

    def test_empty(self):
        assert normalize_roster([]) == []
        assert normalize_roster(None) == []


class TestFindCharacter:
    """Tests for find_character."""

    @pytest.fixture
    def roster(self):
        return [
            Character(id="amber", name="엠버", name_en="Amber"),
            Character(id="hu_tao", name="호두", name_en="Hu Tao"),
        ]

    def test_by_display_name(self, roster):
        assert find_character(roster, "엠버").id == "amber"

    def test_by_english_name_any_case(self, roster):
        assert find_character(roster, "hu tao").id == "hu_tao"
        assert find_character(roster, "  AMBER ").id == "amber"

    def test_no_partial_match(self, roster):
        assert find_character(roster, "Amb") is None

    def test_blank_keyword(self, roster):
        assert find_character(roster, "") is None
        assert find_character(roster, "   ") is None
        assert find_character(roster, None) is None
