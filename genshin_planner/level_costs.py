"""
Genshin Ascension Planner - Character Level Costs
=================================================
Experience, mora and Hero's Wit needed to raise a character between levels.

Costs are only known per segment between two level anchors
(1, 20, 40, 50, 60, 70, 80, 90). A range that starts or ends between anchors
is widened out to the enclosing anchors and charged every segment it
touches, so 25 -> 35 costs the same as 20 -> 40. This is a known
approximation of the real per-level curve.

Last Updated: October 2026
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from constants import LEVEL_ANCHORS, MAX_LEVEL, MIN_LEVEL


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class LevelCostSegment:
    """Total cost of leveling from one anchor to the next."""
    from_level: int
    to_level: int
    total_xp: int
    total_mora: int
    hero_wit: int


@dataclass(frozen=True)
class LevelCost:
    """Result of a level range calculation."""
    xp: int = 0
    mora: int = 0
    hero: int = 0


# =============================================================================
# COST TABLE
# =============================================================================

# Contiguous, ascending, covering [1, 90]
LEVEL_COST_TABLE: Tuple[LevelCostSegment, ...] = (
    LevelCostSegment(1, 20, total_xp=120_175, total_mora=28_000, hero_wit=7),
    LevelCostSegment(20, 40, total_xp=578_325, total_mora=112_000, hero_wit=28),
    LevelCostSegment(40, 50, total_xp=573_100, total_mora=116_000, hero_wit=29),
    LevelCostSegment(50, 60, total_xp=859_525, total_mora=172_000, hero_wit=43),
    LevelCostSegment(60, 70, total_xp=1_196_525, total_mora=240_000, hero_wit=60),
    LevelCostSegment(70, 80, total_xp=1_611_875, total_mora=320_000, hero_wit=80),
    LevelCostSegment(80, 90, total_xp=3_423_125, total_mora=688_000, hero_wit=172),
)


# =============================================================================
# ANCHOR SNAPPING
# =============================================================================

def snap_floor_anchor(level: int, anchors: Sequence[int] = LEVEL_ANCHORS) -> int:
    """
    Largest anchor <= level.

    Walks the anchors in order and keeps the last one not above level.
    Levels below every anchor fall back to MIN_LEVEL.
    """
    if level in anchors:
        return level
    snapped = MIN_LEVEL
    for anchor in anchors:
        if anchor <= level:
            snapped = anchor
    return snapped


def snap_ceiling_anchor(level: int, anchors: Sequence[int] = LEVEL_ANCHORS) -> int:
    """
    Smallest anchor >= level.

    Levels above every anchor fall back to MAX_LEVEL.
    """
    if level in anchors:
        return level
    snapped = MAX_LEVEL
    for anchor in anchors:
        if anchor >= level:
            snapped = min(snapped, anchor)
    return snapped


# =============================================================================
# CALCULATION
# =============================================================================

def calc_level_cost(
    current: int,
    target: int,
    table: Sequence[LevelCostSegment] = LEVEL_COST_TABLE,
    anchors: Sequence[int] = LEVEL_ANCHORS,
) -> LevelCost:
    """
    Cost of leveling from current to target.

    Returns zero cost when target <= current. Otherwise both ends are snapped
    outward to anchors and every segment overlapping the open interval
    (floor, ceiling) is charged in full.
    """
    if target <= current:
        return LevelCost()

    floor = snap_floor_anchor(current, anchors)
    ceiling = snap_ceiling_anchor(target, anchors)

    xp = mora = hero = 0
    for segment in table:
        if segment.to_level > floor and segment.from_level < ceiling:
            xp += segment.total_xp
            mora += segment.total_mora
            hero += segment.hero_wit
    return LevelCost(xp=xp, mora=mora, hero=hero)


def level_cost_rows(table: Sequence[LevelCostSegment] = LEVEL_COST_TABLE) -> List[Dict[str, object]]:
    """Segment table with running totals, for the reference page."""
    rows: List[Dict[str, object]] = []
    cum_xp = cum_mora = cum_hero = 0
    for segment in table:
        cum_xp += segment.total_xp
        cum_mora += segment.total_mora
        cum_hero += segment.hero_wit
        rows.append({
            "Levels": f"{segment.from_level} → {segment.to_level}",
            "EXP": segment.total_xp,
            "Mora": segment.total_mora,
            "Hero's Wit": segment.hero_wit,
            "Cumulative EXP": cum_xp,
            "Cumulative Mora": cum_mora,
            "Cumulative Hero's Wit": cum_hero,
        })
    return rows
