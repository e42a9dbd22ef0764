"""
Genshin Ascension Planner - Shared Constants
============================================
Enums, selector option sets, icon paths and small helpers used across modules.
"""

import os
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, Union


# =============================================================================
# ENUMS
# =============================================================================

class Tier(Enum):
    """Talent book tiers within one series, lowest to highest."""
    LOW = "teachings"
    MID = "guide"
    HIGH = "philosophies"

    @property
    def slot(self) -> str:
        """Attribute name used by cost records ('low', 'mid', 'high')."""
        return TIER_SLOTS[self]


class TalentTrack(Enum):
    """The three upgradeable talents of a character."""
    NORMAL_ATTACK = "na"
    SKILL = "skill"
    BURST = "burst"


# =============================================================================
# TIERS
# =============================================================================

TIER_ORDER: Tuple[Tier, ...] = (Tier.LOW, Tier.MID, Tier.HIGH)

TIER_SLOTS: Dict[Tier, str] = {
    Tier.LOW: "low",
    Tier.MID: "mid",
    Tier.HIGH: "high",
}

TIER_LABELS_KR: Dict[Tier, str] = {
    Tier.LOW: "가르침",
    Tier.MID: "인도",
    Tier.HIGH: "철학",
}

TRACK_DISPLAY_NAMES: Dict[TalentTrack, str] = {
    TalentTrack.NORMAL_ATTACK: "Normal Attack",
    TalentTrack.SKILL: "Elemental Skill",
    TalentTrack.BURST: "Elemental Burst",
}


# =============================================================================
# SELECTOR OPTIONS
# =============================================================================

# Level checkpoints at which segment costs are known
LEVEL_ANCHORS: Tuple[int, ...] = (1, 20, 40, 50, 60, 70, 80, 90)
MIN_LEVEL = 1
MAX_LEVEL = 90

TALENT_RANKS: Tuple[int, ...] = tuple(range(1, 11))
MIN_RANK = 1
MAX_RANK = 10

# New working-list entries start here
DEFAULT_LEVEL_CURRENT = 1
DEFAULT_LEVEL_TARGET = 90
DEFAULT_RANK_CURRENT = 1
DEFAULT_RANK_TARGET = 6


# =============================================================================
# ICONS
# =============================================================================

PLACEHOLDER_IMAGE = "images/placeholder.png"
ICON_MORA = "images/icons/mora.png"
ICON_XP = "images/icons/xp.png"
ICON_CROWN = "images/icons/crown.png"
ICON_HEROWIT: Tuple[str, ...] = (
    "images/icons/herowit.png",
    "images/icons/hero_wit.png",
    "images/icons/exp_book_purple.png",
    "images/icons/exp_book.png",
)


def resolve_icon(candidates: Union[str, Sequence[str]], root: Optional[str] = None) -> str:
    """
    Pick the first icon path that exists under root.

    Falls back to the first candidate when none exist (or no root is given),
    so callers always get a path back.
    """
    paths = [candidates] if isinstance(candidates, str) else list(candidates)
    if not paths:
        return ""
    if root:
        for path in paths:
            if os.path.exists(os.path.join(root, path)):
                return path
    return paths[0]


# =============================================================================
# HELPERS
# =============================================================================

def to_number(value: Any) -> float:
    """
    Coerce a cost-table cell to a number.

    Accepts ints, floats and numeric strings. Anything missing or
    non-numeric becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value if value == value else 0  # NaN
    try:
        text = str(value).strip()
        if not text:
            return 0
        number = float(text)
    except ValueError:
        return 0
    if number != number:
        return 0
    return int(number) if number.is_integer() else number


def format_number(value: Optional[float]) -> str:
    """Format a resource amount with thousands separators."""
    if not value:
        return "0"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"
