"""
Genshin Ascension Planner - Character Roster
============================================
Normalizes raw characters.json records into Character objects and looks
characters up by name.

Raw records are expected to carry id, name_kr/name_en, element, weapon,
region, day and image. Missing or malformed fields degrade to empty strings
(or no talent book) instead of raising.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from constants import PLACEHOLDER_IMAGE
from talent_books import SeriesDescriptor, lookup_series, normalize_day, normalize_region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Character:
    """A playable character with its resolved talent book series."""
    id: str
    name: str
    name_en: str = ""
    element: str = ""
    weapon: str = ""
    image: str = PLACEHOLDER_IMAGE
    region: str = ""
    day: str = ""
    talent_book: Optional[SeriesDescriptor] = None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_character(raw: Any) -> Optional[Character]:
    """
    Build a Character from one raw roster record.

    Returns None for records that are not mappings. The display name is the
    Korean name when present, otherwise the English name.
    """
    if not isinstance(raw, Mapping):
        logger.debug(f"Skipping roster row that is not an object: {raw!r}")
        return None

    region = normalize_region(raw.get("region"))
    day = normalize_day(raw.get("day"))
    name_kr = _text(raw.get("name_kr"))
    name_en = _text(raw.get("name_en"))

    return Character(
        id=_text(raw.get("id")),
        name=name_kr or name_en,
        name_en=name_en,
        element=_text(raw.get("element")),
        weapon=_text(raw.get("weapon")),
        image=_text(raw.get("image")) or PLACEHOLDER_IMAGE,
        region=region,
        day=day,
        talent_book=lookup_series(region, day),
    )


def normalize_roster(rows: Optional[Iterable[Any]]) -> List[Character]:
    """Normalize every usable record, keeping file order."""
    characters = []
    for raw in rows or []:
        character = normalize_character(raw)
        if character is not None:
            characters.append(character)
    return characters


def find_character(characters: Iterable[Character], keyword: str) -> Optional[Character]:
    """
    Find a character by display or English name.

    Matching is exact after trimming and ignores case. A blank keyword
    matches nothing.
    """
    needle = (keyword or "").strip().lower()
    if not needle:
        return None
    for character in characters:
        if character.name and character.name.lower() == needle:
            return character
        if character.name_en and character.name_en.lower() == needle:
            return character
    return None
