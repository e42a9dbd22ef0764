"""
Genshin Ascension Planner - Streamlit Web App
Main entry point: character search, working list cards and totals panel.
"""
import logging
import os
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from characters import find_character
from constants import LEVEL_ANCHORS, TALENT_RANKS, format_number
from cost_calculator import calc_character_cost, cost_breakdown_rows, refresh_totals
from working_list import (
    LEVEL_FIELDS, RANK_FIELDS, WorkingListError,
    add_character, clear_list, remove_entry, update_entry,
)
from utils.data_loader import APP_DIR
from utils.logging_setup import setup_logging
from utils.session import init_session_state, show_load_error
from utils.totals_view import (
    base_total_rows, character_summary_frame, create_series_chart, series_total_rows,
)

setup_logging()
logger = logging.getLogger(__name__)

# Page config
st.set_page_config(
    page_title="Genshin Ascension Planner",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for dark theme
st.markdown("""
<style>
    .stApp {
        background-color: #1a1a2e;
    }
    .main-title {
        color: #ffd27f;
        font-size: 2.5em;
        font-weight: bold;
        text-align: center;
        margin-bottom: 10px;
    }
    .sub-title {
        color: #888;
        text-align: center;
        margin-bottom: 30px;
    }
    .char-sub {
        color: #aaa;
        font-size: 0.9em;
    }
    .total-value {
        color: #ffd700;
        font-weight: bold;
    }
</style>
""", unsafe_allow_html=True)

# Selector labels per editable field
FIELD_LABELS = {
    "level_current": "현재 레벨",
    "level_target": "목표 레벨",
    "na_current": "일반공격 현재",
    "na_target": "일반공격 목표",
    "skill_current": "원소전투 현재",
    "skill_target": "원소전투 목표",
    "burst_current": "원소폭발 현재",
    "burst_target": "원소폭발 목표",
}


def asset_path(path: str):
    """Absolute path for an image under the app directory, or None if missing."""
    if not path:
        return None
    full = os.path.join(APP_DIR, path)
    return full if os.path.exists(full) else None


def show_icon(path: str, width: int = 18):
    full = asset_path(path)
    if full:
        st.image(full, width=width)


def search_section(characters):
    """Character search box with Add / Clear buttons."""
    names = [c.name for c in characters]
    col1, col2, col3 = st.columns([4, 1, 1])

    with col1:
        keyword = st.selectbox(
            "캐릭터 검색",
            options=names,
            index=None,
            placeholder="캐릭터 이름 입력 (한글/영문)",
            key="search",
        )

    with col2:
        st.write("")
        if st.button("➕ 추가", key="btn_add", disabled=not characters):
            if keyword:
                try:
                    st.session_state.working_list = add_character(
                        st.session_state.working_list,
                        find_character(characters, keyword),
                    )
                    st.rerun()
                except WorkingListError as e:
                    logger.info(f"Rejected add of {keyword!r}: {e}")
                    st.warning(str(e))

    with col3:
        st.write("")
        if st.button("🗑️ 전체 삭제", key="btn_clear"):
            st.session_state.confirm_clear = True

    if st.session_state.confirm_clear:
        st.warning("모든 캐릭터를 삭제할까요?")
        yes_col, no_col, _ = st.columns([1, 1, 4])
        with yes_col:
            if st.button("삭제", key="clear_yes"):
                st.session_state.working_list = clear_list()
                st.session_state.confirm_clear = False
                st.rerun()
        with no_col:
            if st.button("취소", key="clear_no"):
                st.session_state.confirm_clear = False
                st.rerun()


def character_card(entry, tables):
    """Render one working-list card and apply any selector changes."""
    with st.container(border=True):
        img_col, info_col, action_col = st.columns([1, 6, 1])

        with img_col:
            image = asset_path(entry.image)
            if image:
                st.image(image, width=64)
            else:
                st.markdown("### 👤")

        with info_col:
            st.markdown(f"**{entry.name}**")
            sub = entry.element or "-"
            book = entry.talent_book
            if book:
                tiers = " / ".join(book.tiers[t].label_kr for t in book.tiers)
                sub += f" · {book.name_kr} ({tiers})"
            st.markdown(f'<span class="char-sub">{sub}</span>', unsafe_allow_html=True)
            if book:
                icon_cols = st.columns(8)
                with icon_cols[0]:
                    show_icon(book.image, width=24)
                for col, tier in zip(icon_cols[1:], book.tiers):
                    with col:
                        show_icon(book.tiers[tier].image, width=20)

        with action_col:
            if st.button("✖", key=f"remove_{entry.uid}", help="목록에서 제거"):
                st.session_state.working_list = remove_entry(st.session_state.working_list, entry.uid)
                st.rerun()

        selected = {}
        field_cols = st.columns(len(LEVEL_FIELDS) + len(RANK_FIELDS))
        for col, field_name in zip(field_cols, LEVEL_FIELDS + RANK_FIELDS):
            options = list(LEVEL_ANCHORS) if field_name in LEVEL_FIELDS else list(TALENT_RANKS)
            current = getattr(entry, field_name)
            with col:
                selected[field_name] = st.selectbox(
                    FIELD_LABELS[field_name],
                    options=options,
                    index=options.index(current) if current in options else 0,
                    key=f"{entry.uid}_{field_name}",
                )

        changes = {k: v for k, v in selected.items() if v != getattr(entry, k)}
        if changes:
            st.session_state.working_list = update_entry(
                st.session_state.working_list, entry.uid, **changes
            )
            entry = next(e for e in st.session_state.working_list if e.uid == entry.uid)

        cost = calc_character_cost(entry, tables)
        mora_col, books_col = st.columns(2)
        with mora_col:
            st.metric("필요 모라", format_number(cost.mora))
        with books_col:
            st.metric("필요 특성 책", format_number(cost.books.total()))
        with st.expander("상세 내역", expanded=False):
            st.dataframe(pd.DataFrame(cost_breakdown_rows(entry, tables)), hide_index=True, width='stretch')


def totals_panel(entries, tables):
    """Sidebar totals: base resources, then per-series tier rows."""
    totals, series = refresh_totals(entries, tables)

    with st.sidebar:
        st.markdown("### 합계")
        for row in base_total_rows(totals, APP_DIR) + series_total_rows(series):
            icon_col, label_col, value_col = st.columns([1, 4, 3])
            with icon_col:
                show_icon(row.icon)
            with label_col:
                st.markdown(row.label)
            with value_col:
                st.markdown(f'<span class="total-value">{row.value}</span>', unsafe_allow_html=True)

    return totals, series


def main():
    """Main entry point."""
    init_session_state()
    data = st.session_state.game_data
    tables = data.tables

    st.markdown('<div class="main-title">📚 Genshin Ascension Planner</div>', unsafe_allow_html=True)
    st.markdown('<div class="sub-title">레벨업과 특성 육성에 필요한 재료 계산기</div>', unsafe_allow_html=True)

    show_load_error()
    if data.is_empty:
        st.info("불러온 캐릭터 데이터가 없습니다.")
    else:
        search_section(data.characters)
    st.divider()

    entries = st.session_state.working_list
    if not entries:
        st.info("목록이 비어 있습니다. 캐릭터를 검색해서 추가하세요.")
    for entry in list(entries):
        character_card(entry, tables)

    totals, series = totals_panel(st.session_state.working_list, tables)

    if st.session_state.working_list:
        st.divider()
        st.subheader("Summary")
        st.dataframe(
            character_summary_frame(st.session_state.working_list, tables),
            hide_index=True,
            width='stretch',
        )
        if series:
            st.plotly_chart(create_series_chart(series), use_container_width=True)


if __name__ == "__main__":
    main()
