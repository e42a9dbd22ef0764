"""
Genshin Ascension Planner - Talent Book Series
==============================================
Maps a character's region and domain day to the talent book series they use.

Each region has three series, one per domain rotation. Only the Monday,
Tuesday and Wednesday columns are filled in; Thursday-Sunday repeat the same
series in game but are left unmapped here, so characters recorded with
those days resolve to no series.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from constants import TIER_LABELS_KR, TIER_ORDER, Tier


# =============================================================================
# ALIASES
# =============================================================================

DAY_ALIAS: Mapping[str, str] = MappingProxyType({
    "mon": "mon", "monday": "mon", "m": "mon",
    "tue": "tue", "tuesday": "tue", "t": "tue",
    "wed": "wed", "wednesday": "wed", "wen": "wed", "w": "wed",
    "thu": "thu", "thursday": "thu", "th": "thu",
    "fri": "fri", "friday": "fri", "f": "fri",
    "sat": "sat", "saturday": "sat", "s": "sat",
    "sun": "sun", "sunday": "sun",
})

REGION_ALIAS: Mapping[str, str] = MappingProxyType({
    "mond": "mond", "mondstadt": "mond",
    "liyue": "liyue",
    "inazma": "inazuma", "inazuma": "inazuma",
    "sumeru": "sumeru",
    "fontaine": "fontaine",
    "natlan": "natlan",
})


# =============================================================================
# SERIES TABLE
# =============================================================================

@dataclass(frozen=True)
class SeriesInfo:
    """Static series identity: stable key plus Korean display name."""
    key: str
    name_kr: str


def _days(mon: SeriesInfo, tue: SeriesInfo, wed: SeriesInfo) -> Mapping[str, SeriesInfo]:
    return MappingProxyType({"mon": mon, "tue": tue, "wed": wed})


# region -> day -> series
TALENT_BOOKS: Mapping[str, Mapping[str, SeriesInfo]] = MappingProxyType({
    "mond": _days(
        SeriesInfo("freedom", "자유"),
        SeriesInfo("resistance", "투쟁"),
        SeriesInfo("ballad", "시"),
    ),
    "liyue": _days(
        SeriesInfo("prosperity", "번영"),
        SeriesInfo("diligence", "근면"),
        SeriesInfo("gold", "황금"),
    ),
    "inazuma": _days(
        SeriesInfo("transience", "부세"),
        SeriesInfo("elegance", "풍아"),
        SeriesInfo("light", "천광"),
    ),
    "sumeru": _days(
        SeriesInfo("admonition", "훈계"),
        SeriesInfo("ingenuity", "창의"),
        SeriesInfo("praxis", "실천"),
    ),
    "fontaine": _days(
        SeriesInfo("equity", "공정"),
        SeriesInfo("judgment", "심판"),
        SeriesInfo("order", "질서"),
    ),
    # Natlan names are placeholders until the localized labels are confirmed
    "natlan": _days(
        SeriesInfo("conflict", "(예시1)"),
        SeriesInfo("war", "(예시2)"),
        SeriesInfo("rule", "(예시3)"),
    ),
})


# =============================================================================
# DESCRIPTORS
# =============================================================================

@dataclass(frozen=True)
class SeriesTier:
    """One tier of a series as shown in the UI."""
    key: str
    label_kr: str
    image: str


@dataclass(frozen=True)
class SeriesDescriptor:
    """Talent book series resolved for a (region, day) pair."""
    key: str
    name_kr: str
    region: str
    image: str
    tiers: Mapping[Tier, SeriesTier]

    @property
    def name(self) -> str:
        return self.name_kr

    @property
    def tier_images(self) -> Dict[str, str]:
        """Tier slot ('low', 'mid', 'high') -> image path."""
        return {tier.slot: self.tiers[tier].image for tier in TIER_ORDER}


def series_image_path(region: str, series_key: str) -> str:
    return f"images/books/{region}_{series_key}.png"


def series_tier_image_path(region: str, series_key: str, tier_key: str) -> str:
    return f"images/books/{region}_{series_key}_{tier_key}.png"


# =============================================================================
# RESOLUTION
# =============================================================================

def _clean(value: Any) -> str:
    if not value:
        return ""
    return str(value).strip().lower()


def normalize_day(value: Any) -> str:
    """Canonical day token; unknown spellings pass through, blanks become ''."""
    raw = _clean(value)
    return DAY_ALIAS.get(raw, raw)


def normalize_region(value: Any) -> str:
    """Canonical region token; unknown spellings pass through, blanks become ''."""
    raw = _clean(value)
    return REGION_ALIAS.get(raw, raw)


def build_series_descriptor(region: str, info: SeriesInfo) -> SeriesDescriptor:
    tiers = {
        tier: SeriesTier(
            key=tier.value,
            label_kr=TIER_LABELS_KR[tier],
            image=series_tier_image_path(region, info.key, tier.value),
        )
        for tier in TIER_ORDER
    }
    return SeriesDescriptor(
        key=info.key,
        name_kr=info.name_kr,
        region=region,
        image=series_image_path(region, info.key),
        tiers=MappingProxyType(tiers),
    )


def lookup_series(
    region: str,
    day: str,
    table: Mapping[str, Mapping[str, SeriesInfo]] = TALENT_BOOKS,
) -> Optional[SeriesDescriptor]:
    """Series for already-normalized region/day tokens, or None."""
    if not region or not day:
        return None
    info = table.get(region, {}).get(day)
    if info is None:
        return None
    return build_series_descriptor(region, info)


def resolve_series(
    region: Any,
    day: Any,
    table: Mapping[str, Mapping[str, SeriesInfo]] = TALENT_BOOKS,
) -> Optional[SeriesDescriptor]:
    """
    Normalize raw region/day strings and look up their series.

    Unknown regions, unmapped days and blanks all give None; this never raises.
    """
    return lookup_series(normalize_region(region), normalize_day(day), table)
