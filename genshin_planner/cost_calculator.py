"""
Genshin Ascension Planner - Cost Calculator
===========================================
Combines level and talent costs per character, and folds them over the
working list into overall totals plus talent book totals per series.

Usage:
    tables = CostTables(talent_steps=parse_talent_steps(rows))
    cost = calc_character_cost(entry, tables)
    totals, series = refresh_totals(entries, tables)

Every call recomputes from the entries it is given; nothing is cached.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from constants import LEVEL_ANCHORS, TIER_ORDER, TRACK_DISPLAY_NAMES, TalentTrack
from level_costs import LEVEL_COST_TABLE, LevelCost, LevelCostSegment, calc_level_cost
from talent_costs import BookCounts, TalentCost, TalentStep, calc_talent_cost
from working_list import RosterEntry


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class CostTables:
    """Every table the calculators read, bundled so callers can inject them."""
    talent_steps: Tuple[TalentStep, ...] = ()
    level_segments: Tuple[LevelCostSegment, ...] = LEVEL_COST_TABLE
    level_anchors: Tuple[int, ...] = LEVEL_ANCHORS


@dataclass(frozen=True)
class CostTotals:
    """Resources needed by one character, or by the whole list."""
    mora: float = 0
    xp: int = 0
    hero_books: int = 0
    books: BookCounts = field(default_factory=BookCounts)
    crown: float = 0

    def __add__(self, other: "CostTotals") -> "CostTotals":
        if not isinstance(other, CostTotals):
            return NotImplemented
        return CostTotals(
            mora=self.mora + other.mora,
            xp=self.xp + other.xp,
            hero_books=self.hero_books + other.hero_books,
            books=self.books + other.books,
            crown=self.crown + other.crown,
        )


# Grouping key: (series key, series display name, region)
SeriesKey = Tuple[str, str, str]


@dataclass
class SeriesTotals:
    """Talent books needed for one series, summed over the list."""
    key: str
    name: str
    region: str
    sums: Dict[str, float] = field(
        default_factory=lambda: {tier.value: 0 for tier in TIER_ORDER}
    )
    icons: Dict[str, str] = field(default_factory=dict)

    def add(self, books: BookCounts) -> None:
        for tier in TIER_ORDER:
            self.sums[tier.value] += getattr(books, tier.slot)


EMPTY_TOTALS = CostTotals()


# =============================================================================
# PER CHARACTER
# =============================================================================

def calc_track_costs(entry: RosterEntry, tables: CostTables) -> Dict[TalentTrack, TalentCost]:
    """Talent cost for each of the three tracks."""
    costs = {}
    for track in TalentTrack:
        current, target = entry.talent_range(track)
        costs[track] = calc_talent_cost(current, target, tables.talent_steps)
    return costs


def calc_entry_level_cost(entry: RosterEntry, tables: CostTables) -> LevelCost:
    return calc_level_cost(
        entry.level_current, entry.level_target,
        tables.level_segments, tables.level_anchors,
    )


def calc_character_cost(entry: RosterEntry, tables: CostTables) -> CostTotals:
    """
    Total resources for one entry.

    Mora is level mora plus the three talent tracks; experience and Hero's
    Wit come from leveling only; books and crowns from talents only.
    """
    level = calc_entry_level_cost(entry, tables)
    tracks = calc_track_costs(entry, tables).values()

    books = BookCounts()
    crown = 0
    mora = level.mora
    for cost in tracks:
        books = books + cost.books
        crown += cost.crown
        mora += cost.mora

    return CostTotals(
        mora=mora,
        xp=level.xp,
        hero_books=level.hero,
        books=books,
        crown=crown,
    )


def cost_breakdown_rows(entry: RosterEntry, tables: CostTables) -> List[Dict[str, object]]:
    """One row for leveling and one per talent track, for the card's detail table."""
    level = calc_entry_level_cost(entry, tables)
    rows: List[Dict[str, object]] = [{
        "Upgrade": "Level",
        "From": entry.level_current,
        "To": entry.level_target,
        "Mora": level.mora,
        "EXP": level.xp,
        "Hero's Wit": level.hero,
        "Teachings": 0,
        "Guide": 0,
        "Philosophies": 0,
        "Crown": 0,
    }]
    for track, cost in calc_track_costs(entry, tables).items():
        current, target = entry.talent_range(track)
        rows.append({
            "Upgrade": TRACK_DISPLAY_NAMES[track],
            "From": current,
            "To": target,
            "Mora": cost.mora,
            "EXP": 0,
            "Hero's Wit": 0,
            "Teachings": cost.books.low,
            "Guide": cost.books.mid,
            "Philosophies": cost.books.high,
            "Crown": cost.crown,
        })
    return rows


# =============================================================================
# WHOLE LIST
# =============================================================================

def refresh_totals(
    entries: Sequence[RosterEntry],
    tables: CostTables,
) -> Tuple[CostTotals, Dict[SeriesKey, SeriesTotals]]:
    """
    Recompute overall totals and per-series book totals for the list.

    Entries without a talent book count toward the overall totals only.
    Series are keyed by (key, name, region) and kept in first-seen order.
    """
    totals = EMPTY_TOTALS
    series: Dict[SeriesKey, SeriesTotals] = {}

    for entry in entries:
        cost = calc_character_cost(entry, tables)
        totals = totals + cost

        book = entry.talent_book
        if book is None:
            continue
        region = entry.region or ""
        group_key = (book.key, book.name_kr, region)
        if group_key not in series:
            series[group_key] = SeriesTotals(
                key=book.key,
                name=book.name_kr,
                region=region,
                icons={tier.value: book.tiers[tier].image for tier in TIER_ORDER},
            )
        series[group_key].add(cost.books)

    return totals, series
