"""
Unit tests for working_list.py - Add / update / remove / clear commands.
"""
from dataclasses import FrozenInstanceError

import pytest
from characters import Character
from talent_books import resolve_series
from working_list import (
    RosterEntry,
    WorkingListError,
    add_character,
    clear_list,
    new_entry,
    remove_entry,
    update_entry,
)
from constants import TalentTrack

AMBER = Character(
    id="amber", name="엠버", name_en="Amber", element="Pyro",
    image="images/amber.png", region="mond", day="mon",
    talent_book=resolve_series("mond", "mon"),
)
XIAO = Character(
    id="xiao", name="소", name_en="Xiao", element="Anemo",
    region="liyue", day="mon", talent_book=resolve_series("liyue", "mon"),
)


class TestAddCharacter:
    """Tests for add_character / new_entry."""

    def test_defaults(self):
        """New entries should plan level 1 -> 90 and talents 1 -> 6."""
        entry = new_entry(AMBER, now_ms=1700000000000)
        assert entry.uid == "amber-1700000000000"
        assert entry.character_id == "amber"
        assert (entry.level_current, entry.level_target) == (1, 90)
        for track in TalentTrack:
            assert entry.talent_range(track) == (1, 6)
        assert entry.talent_book.key == "freedom"
        assert entry.region == "mond"
        assert entry.name == "엠버"

    def test_appends_without_mutating(self):
        original = []
        updated = add_character(original, AMBER, now_ms=1)
        assert original == []
        assert len(updated) == 1

    def test_rejects_duplicate(self):
        entries = add_character([], AMBER, now_ms=1)
        with pytest.raises(WorkingListError):
            add_character(entries, AMBER, now_ms=2)

    def test_rejects_unknown(self):
        with pytest.raises(WorkingListError):
            add_character([], None)

    def test_generated_uid(self):
        entry = add_character([], XIAO)[0]
        assert entry.uid.startswith("xiao-")


class TestUpdateEntry:
    """Tests for update_entry."""

    @pytest.fixture
    def entries(self):
        entries = add_character([], AMBER, now_ms=1)
        return add_character(entries, XIAO, now_ms=2)

    def test_patches_only_target(self, entries):
        updated = update_entry(entries, "amber-1", level_current=40, burst_target=10)
        assert updated[0].level_current == 40
        assert updated[0].burst_target == 10
        assert updated[1] == entries[1]

    def test_original_untouched(self, entries):
        update_entry(entries, "amber-1", na_target=9)
        assert entries[0].na_target == 6

    def test_coerces_and_clips(self, entries):
        updated = update_entry(entries, "xiao-2", level_target="95", skill_current=0, na_target=12.0)
        assert updated[1].level_target == 90
        assert updated[1].skill_current == 1
        assert updated[1].na_target == 10

    def test_rejects_non_numeric(self, entries):
        with pytest.raises(WorkingListError):
            update_entry(entries, "xiao-2", level_target="max")

    @pytest.mark.parametrize("value", ["inf", "-inf", "1e999", float("inf")])
    def test_rejects_infinite(self, entries, value):
        """Values too large for an int should fail like any other bad input."""
        with pytest.raises(WorkingListError):
            update_entry(entries, "xiao-2", level_target=value)

    def test_rejects_unknown_field(self, entries):
        with pytest.raises(WorkingListError):
            update_entry(entries, "xiao-2", character_id="amber")

    def test_rejects_unknown_uid(self, entries):
        with pytest.raises(WorkingListError):
            update_entry(entries, "nobody-0", level_target=80)


class TestRemoveAndClear:
    """Tests for remove_entry / clear_list."""

    def test_remove(self):
        entries = add_character(add_character([], AMBER, now_ms=1), XIAO, now_ms=2)
        remaining = remove_entry(entries, "amber-1")
        assert [e.character_id for e in remaining] == ["xiao"]

    def test_remove_unknown(self):
        with pytest.raises(WorkingListError):
            remove_entry([], "amber-1")

    def test_clear(self):
        assert clear_list() == []


class TestRosterEntry:
    """Tests for RosterEntry."""

    def test_talent_range(self):
        entry = RosterEntry(uid="u", character_id="c", na_current=2, na_target=8,
                            skill_current=3, skill_target=9, burst_current=4, burst_target=10)
        assert entry.talent_range(TalentTrack.NORMAL_ATTACK) == (2, 8)
        assert entry.talent_range(TalentTrack.SKILL) == (3, 9)
        assert entry.talent_range(TalentTrack.BURST) == (4, 10)

    def test_frozen(self):
        entry = RosterEntry(uid="u", character_id="c")
        with pytest.raises(FrozenInstanceError):
            entry.level_target = 80
