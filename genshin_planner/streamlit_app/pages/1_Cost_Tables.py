"""
Cost Tables Page
Reference tables for level segments and talent steps, plus a quick range calculator.
"""
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import LEVEL_ANCHORS, TALENT_RANKS, format_number
from level_costs import calc_level_cost, level_cost_rows
from talent_costs import calc_talent_cost, talent_step_rows
from utils.logging_setup import setup_logging
from utils.session import init_session_state, show_load_error

setup_logging()

st.set_page_config(page_title="Cost Tables", page_icon="📖", layout="wide")

init_session_state()
data = st.session_state.game_data
show_load_error()

st.title("📖 Cost Tables")
st.markdown("Level and talent costs used by the planner.")

st.divider()

# Quick calculator
st.subheader("Quick Calculator")

col1, col2, col3, col4 = st.columns(4)

with col1:
    level_from = st.selectbox("Current Level", options=list(LEVEL_ANCHORS), index=0)
with col2:
    level_to = st.selectbox("Target Level", options=list(LEVEL_ANCHORS), index=len(LEVEL_ANCHORS) - 1)
with col3:
    rank_from = st.selectbox("Current Talent", options=list(TALENT_RANKS), index=0)
with col4:
    rank_to = st.selectbox("Target Talent", options=list(TALENT_RANKS), index=len(TALENT_RANKS) - 1)

level = calc_level_cost(level_from, level_to)
talent = calc_talent_cost(rank_from, rank_to, data.talent_steps)

result_cols = st.columns(4)
with result_cols[0]:
    st.metric("Level Mora", format_number(level.mora))
with result_cols[1]:
    st.metric("EXP", format_number(level.xp))
with result_cols[2]:
    st.metric("Hero's Wit", format_number(level.hero))
with result_cols[3]:
    st.metric("Talent Mora (one talent)", format_number(talent.mora))

st.caption(
    f"Talent books: {format_number(talent.books.low)} / {format_number(talent.books.mid)} / "
    f"{format_number(talent.books.high)} · Crowns: {format_number(talent.crown)}"
)

st.divider()

col1, col2 = st.columns(2)

with col1:
    st.subheader("Level Segments")
    st.dataframe(pd.DataFrame(level_cost_rows()), width='stretch', hide_index=True)

with col2:
    st.subheader("Talent Steps")
    if data.talent_steps:
        st.dataframe(pd.DataFrame(talent_step_rows(data.talent_steps)), width='stretch', hide_index=True)
    else:
        st.info("No talent cost data loaded.")

st.info("""
**Notes:**
- Level costs are only known between anchor levels; a partial range is charged for every segment it touches
- Talent steps are charged only when the whole step lies inside the selected range
- Thursday-Sunday domain days are not mapped to a talent book series
""")
