"""
Genshin Ascension Planner - Talent Costs
========================================
Mora, talent books and Crowns of Insight needed to raise one talent.

The step table comes from book_cost.json. A step is only charged when it
lies entirely inside the requested rank range; steps that straddle either
end contribute nothing. With one row per rank transition this matches a
plain overlap check, but containment is what the table granularity needs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from constants import to_number


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class BookCounts:
    """Talent books per tier."""
    low: int = 0
    mid: int = 0
    high: int = 0

    def __add__(self, other: "BookCounts") -> "BookCounts":
        if not isinstance(other, BookCounts):
            return NotImplemented
        return BookCounts(
            low=self.low + other.low,
            mid=self.mid + other.mid,
            high=self.high + other.high,
        )

    def total(self) -> int:
        return self.low + self.mid + self.high


@dataclass(frozen=True)
class TalentStep:
    """One row of the talent cost table (from_rank -> to_rank)."""
    from_rank: float
    to_rank: float
    book_low: float = 0
    book_mid: float = 0
    book_high: float = 0
    mora: float = 0
    crown: float = 0

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "TalentStep":
        """Build a step from a raw JSON row, coercing every field to a number."""
        return cls(
            from_rank=to_number(row.get("from")),
            to_rank=to_number(row.get("to")),
            book_low=to_number(row.get("book_low")),
            book_mid=to_number(row.get("book_mid")),
            book_high=to_number(row.get("book_high")),
            mora=to_number(row.get("mora")),
            crown=to_number(row.get("crown")),
        )


@dataclass(frozen=True)
class TalentCost:
    """Result of a talent range calculation."""
    mora: float = 0
    crown: float = 0
    books: BookCounts = field(default_factory=BookCounts)


# =============================================================================
# PARSING
# =============================================================================

def parse_talent_steps(rows: Iterable[Any]) -> Tuple[TalentStep, ...]:
    """
    Convert raw book_cost.json rows into TalentSteps.

    Rows that are not mappings are dropped; malformed numbers become 0.
    """
    if not rows:
        return ()
    return tuple(TalentStep.from_dict(row) for row in rows if isinstance(row, Mapping))


# =============================================================================
# CALCULATION
# =============================================================================

def calc_talent_cost(from_rank: int, to_rank: int, steps: Sequence[TalentStep]) -> TalentCost:
    """
    Cost of raising one talent from from_rank to to_rank.

    Returns zero cost when to_rank <= from_rank.
    """
    if to_rank <= from_rank:
        return TalentCost()

    mora = crown = 0
    low = mid = high = 0
    for step in steps:
        if step.from_rank >= from_rank and step.to_rank <= to_rank:
            mora += step.mora
            crown += step.crown
            low += step.book_low
            mid += step.book_mid
            high += step.book_high
    return TalentCost(mora=mora, crown=crown, books=BookCounts(low=low, mid=mid, high=high))


def talent_step_rows(steps: Sequence[TalentStep]) -> List[Dict[str, object]]:
    """Step table formatted for the reference page."""
    return [
        {
            "Ranks": f"{step.from_rank:g} → {step.to_rank:g}",
            "Teachings": step.book_low,
            "Guide": step.book_mid,
            "Philosophies": step.book_high,
            "Mora": step.mora,
            "Crown": step.crown,
        }
        for step in steps
    ]
