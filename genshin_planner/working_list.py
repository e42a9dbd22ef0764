"""
Genshin Ascension Planner - Working List
========================================
The user's list of characters being planned, and the commands that edit it.

Commands never mutate an entry in place: each one returns a new list, with
patched entries rebuilt through dataclasses.replace. Totals are then
recomputed from scratch by cost_calculator.refresh_totals.

The "one entry per character" rule lives here in add_character. The cost
functions accept any list, duplicates included.
"""

import time
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence

from characters import Character
from constants import (
    DEFAULT_LEVEL_CURRENT, DEFAULT_LEVEL_TARGET,
    DEFAULT_RANK_CURRENT, DEFAULT_RANK_TARGET,
    MAX_LEVEL, MAX_RANK, MIN_LEVEL, MIN_RANK,
    PLACEHOLDER_IMAGE, TalentTrack,
)
from talent_books import SeriesDescriptor


class WorkingListError(ValueError):
    """Raised when a working-list command is rejected."""
    pass


@dataclass(frozen=True)
class RosterEntry:
    """One character on the working list with its selected ranges."""
    uid: str
    character_id: str
    name: str = ""
    element: str = ""
    image: str = PLACEHOLDER_IMAGE
    level_current: int = DEFAULT_LEVEL_CURRENT
    level_target: int = DEFAULT_LEVEL_TARGET
    na_current: int = DEFAULT_RANK_CURRENT
    na_target: int = DEFAULT_RANK_TARGET
    skill_current: int = DEFAULT_RANK_CURRENT
    skill_target: int = DEFAULT_RANK_TARGET
    burst_current: int = DEFAULT_RANK_CURRENT
    burst_target: int = DEFAULT_RANK_TARGET
    talent_book: Optional[SeriesDescriptor] = None
    region: str = ""

    def talent_range(self, track: TalentTrack) -> tuple:
        """(current, target) ranks for one talent track."""
        prefix = track.value
        return getattr(self, f"{prefix}_current"), getattr(self, f"{prefix}_target")


LEVEL_FIELDS = ("level_current", "level_target")
RANK_FIELDS = (
    "na_current", "na_target",
    "skill_current", "skill_target",
    "burst_current", "burst_target",
)

# Editable field -> (min, max)
FIELD_LIMITS: Dict[str, tuple] = {
    **{name: (MIN_LEVEL, MAX_LEVEL) for name in LEVEL_FIELDS},
    **{name: (MIN_RANK, MAX_RANK) for name in RANK_FIELDS},
}


def _make_uid(character_id: str, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{character_id}-{now_ms}"


def _clip(field_name: str, value: Any) -> int:
    low, high = FIELD_LIMITS[field_name]
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise WorkingListError(f"{field_name} must be a number, got {value!r}")
    return max(low, min(number, high))


def new_entry(character: Character, now_ms: Optional[int] = None) -> RosterEntry:
    """Entry for a freshly added character: level 1 -> 90, talents 1 -> 6."""
    return RosterEntry(
        uid=_make_uid(character.id, now_ms),
        character_id=character.id,
        name=character.name,
        element=character.element,
        image=character.image,
        talent_book=character.talent_book,
        region=character.region,
    )


def add_character(
    entries: Sequence[RosterEntry],
    character: Optional[Character],
    now_ms: Optional[int] = None,
) -> List[RosterEntry]:
    """Append a character, rejecting unknown characters and duplicates."""
    if character is None:
        raise WorkingListError("Character is not in the roster")
    if any(entry.character_id == character.id for entry in entries):
        raise WorkingListError(f"{character.name} is already on the list")
    return list(entries) + [new_entry(character, now_ms)]


def update_entry(entries: Sequence[RosterEntry], uid: str, **fields: Any) -> List[RosterEntry]:
    """
    Patch the level/rank fields of one entry.

    Values are coerced to int and clipped to their allowed range.
    """
    unknown = set(fields) - set(FIELD_LIMITS)
    if unknown:
        raise WorkingListError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

    changes = {name: _clip(name, value) for name, value in fields.items()}
    updated = []
    found = False
    for entry in entries:
        if entry.uid == uid:
            entry = replace(entry, **changes)
            found = True
        updated.append(entry)
    if not found:
        raise WorkingListError(f"No entry with uid {uid!r}")
    return updated


def remove_entry(entries: Sequence[RosterEntry], uid: str) -> List[RosterEntry]:
    remaining = [entry for entry in entries if entry.uid != uid]
    if len(remaining) == len(entries):
        raise WorkingListError(f"No entry with uid {uid!r}")
    return remaining


def clear_list() -> List[RosterEntry]:
    return []
