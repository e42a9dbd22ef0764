"""
Unit tests for constants.py - Tiers, selector options, icons and number helpers.
"""
import pytest
from constants import (
    # Enums
    Tier,
    TalentTrack,
    # Data tables
    TIER_ORDER,
    TIER_LABELS_KR,
    LEVEL_ANCHORS,
    TALENT_RANKS,
    ICON_HEROWIT,
    # Helper functions
    format_number,
    resolve_icon,
    to_number,
)


class TestTierEnum:
    """Tests for Tier enum."""

    def test_tier_values(self):
        """Tier values should be the book name keys."""
        assert Tier.LOW.value == "teachings"
        assert Tier.MID.value == "guide"
        assert Tier.HIGH.value == "philosophies"

    def test_tier_slots(self):
        assert [t.slot for t in TIER_ORDER] == ["low", "mid", "high"]

    def test_all_tiers_have_labels(self):
        for tier in Tier:
            assert tier in TIER_LABELS_KR


class TestTalentTrack:
    """Tests for TalentTrack enum."""

    def test_prefixes(self):
        assert [t.value for t in TalentTrack] == ["na", "skill", "burst"]


class TestSelectorOptions:
    """Tests for level / rank option sets."""

    def test_level_anchors(self):
        assert LEVEL_ANCHORS == (1, 20, 40, 50, 60, 70, 80, 90)
        assert list(LEVEL_ANCHORS) == sorted(LEVEL_ANCHORS)

    def test_talent_ranks(self):
        assert TALENT_RANKS == tuple(range(1, 11))


class TestToNumber:
    """Tests for to_number."""

    @pytest.mark.parametrize("value,expected", [
        (5, 5), (2.5, 2.5), ("12500", 12500), (" 7 ", 7), ("1.5", 1.5),
    ])
    def test_numeric(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "nan", float("nan"), True, [1]])
    def test_invalid_is_zero(self, value):
        assert to_number(value) == 0

    def test_integer_strings_stay_int(self):
        assert isinstance(to_number("3"), int)


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize("value,expected", [
        (0, "0"), (None, "0"), (999, "999"), (1_676_000, "1,676,000"),
        (12500.0, "12,500"), (1234.5, "1,234.5"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestResolveIcon:
    """Tests for resolve_icon."""

    def test_no_root_returns_first(self):
        assert resolve_icon(ICON_HEROWIT) == ICON_HEROWIT[0]
        assert resolve_icon("images/icons/mora.png") == "images/icons/mora.png"

    def test_first_existing_candidate(self, tmp_path):
        target = tmp_path / ICON_HEROWIT[2]
        target.parent.mkdir(parents=True)
        target.write_bytes(b"")
        assert resolve_icon(ICON_HEROWIT, str(tmp_path)) == ICON_HEROWIT[2]

    def test_none_exist(self, tmp_path):
        assert resolve_icon(ICON_HEROWIT, str(tmp_path)) == ICON_HEROWIT[0]

    def test_empty_candidates(self):
        assert resolve_icon([]) == ""
