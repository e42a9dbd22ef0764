"""
Session state helpers shared by the app and its pages.
Game data is loaded once per session; the working list lives in session state.
"""
import logging

import streamlit as st

from utils.data_loader import DataLoadError, GameData, load_game_data

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "데이터 로딩 실패: 데이터 파일 경로를 확인해주세요."


def init_session_state():
    """Initialize session state variables."""
    if 'working_list' not in st.session_state:
        st.session_state.working_list = []
    if 'confirm_clear' not in st.session_state:
        st.session_state.confirm_clear = False
    ensure_game_data()


def ensure_game_data() -> GameData:
    """
    Load game data on first use in this session.

    A failed load is recorded once and leaves the app with empty data.
    """
    if 'game_data' not in st.session_state:
        try:
            st.session_state.game_data = load_game_data()
            st.session_state.load_error = None
        except DataLoadError as e:
            logger.error(f"Startup data load failed: {e}", exc_info=True)
            st.session_state.game_data = GameData()
            st.session_state.load_error = str(e)
    return st.session_state.game_data


def show_load_error():
    """Display the load failure, if any."""
    error = st.session_state.get('load_error')
    if error:
        st.error(f"{LOAD_ERROR_MESSAGE}\n\n{error}")
