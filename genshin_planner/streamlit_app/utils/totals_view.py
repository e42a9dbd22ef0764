"""
Totals Panel Components

Builds the rows, tables and Plotly chart shown in the totals panel from the
output of refresh_totals. Kept free of Streamlit calls so it can be tested
directly.
"""

from typing import Dict, List, NamedTuple, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go

from constants import (
    ICON_CROWN, ICON_HEROWIT, ICON_MORA, ICON_XP,
    TIER_LABELS_KR, TIER_ORDER, format_number, resolve_icon,
)
from cost_calculator import CostTables, CostTotals, SeriesKey, SeriesTotals, calc_character_cost
from working_list import RosterEntry

# Bar colors per tier (teachings, guide, philosophies)
TIER_COLORS = {
    "teachings": "#6fcf97",
    "guide": "#56ccf2",
    "philosophies": "#bb6bd9",
}


class TotalsRow(NamedTuple):
    label: str
    value: str
    icon: str


def base_total_rows(totals: CostTotals, assets_root: Optional[str] = None) -> List[TotalsRow]:
    """Mora, experience, Hero's Wit and crown rows."""
    return [
        TotalsRow("모라", format_number(totals.mora), resolve_icon(ICON_MORA, assets_root)),
        TotalsRow("경험치", format_number(totals.xp), resolve_icon(ICON_XP, assets_root)),
        TotalsRow("영웅의 경험", format_number(totals.hero_books), resolve_icon(ICON_HEROWIT, assets_root)),
        TotalsRow("왕관", format_number(totals.crown), resolve_icon(ICON_CROWN, assets_root)),
    ]


def series_total_rows(series: Dict[SeriesKey, SeriesTotals]) -> List[TotalsRow]:
    """Three rows per series ("자유의 가르침", ...), in first-seen order."""
    rows = []
    for group in series.values():
        for tier in TIER_ORDER:
            rows.append(TotalsRow(
                f"{group.name}의 {TIER_LABELS_KR[tier]}",
                format_number(group.sums.get(tier.value, 0)),
                group.icons.get(tier.value, ""),
            ))
    return rows


def character_summary_frame(entries: Sequence[RosterEntry], tables: CostTables) -> pd.DataFrame:
    """One row per working-list entry with its full cost."""
    records = []
    for entry in entries:
        cost = calc_character_cost(entry, tables)
        records.append({
            "Character": entry.name,
            "Series": entry.talent_book.name_kr if entry.talent_book else "-",
            "Level": f"{entry.level_current} → {entry.level_target}",
            "Mora": cost.mora,
            "EXP": cost.xp,
            "Hero's Wit": cost.hero_books,
            "Teachings": cost.books.low,
            "Guide": cost.books.mid,
            "Philosophies": cost.books.high,
            "Crown": cost.crown,
        })
    columns = ["Character", "Series", "Level", "Mora", "EXP", "Hero's Wit",
               "Teachings", "Guide", "Philosophies", "Crown"]
    return pd.DataFrame(records, columns=columns)


def create_series_chart(series: Dict[SeriesKey, SeriesTotals], height: int = 320) -> go.Figure:
    """
    Grouped bar chart of talent books needed per series.

    Args:
        series: Mapping returned by refresh_totals
        height: Chart height in pixels

    Returns:
        Plotly Figure ready for st.plotly_chart()
    """
    names = [group.name for group in series.values()]
    fig = go.Figure()
    for tier in TIER_ORDER:
        fig.add_trace(go.Bar(
            name=TIER_LABELS_KR[tier],
            x=names,
            y=[group.sums.get(tier.value, 0) for group in series.values()],
            marker_color=TIER_COLORS[tier.value],
            hovertemplate="%{x} " + TIER_LABELS_KR[tier] + ": %{y:,}<extra></extra>",
        ))

    fig.update_layout(
        barmode="group",
        height=height,
        margin=dict(l=20, r=20, t=30, b=20),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color="#ddd"),
        legend=dict(orientation="h", y=1.12),
        yaxis=dict(title="Books", gridcolor="#333"),
    )
    return fig
