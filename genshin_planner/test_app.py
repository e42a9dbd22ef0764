"""
Tests for streamlit_app/app.py - Startup behavior with good and missing data.
"""
import sys
from pathlib import Path

# Add paths for imports
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent / "streamlit_app"))

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).parent / "streamlit_app" / "app.py")


@pytest.fixture(autouse=True)
def clear_overrides(monkeypatch):
    for key in ("GENSHIN_DATA_DIR", "GENSHIN_CHARACTERS_PATH", "GENSHIN_BOOK_COST_PATH"):
        monkeypatch.delenv(key, raising=False)


def run_app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


class TestStartup:
    """Tests for the first run of the app."""

    def test_missing_data_degrades_to_empty(self, tmp_path, monkeypatch):
        """A failed load should show one error and leave the app running with no data."""
        monkeypatch.setenv("GENSHIN_DATA_DIR", str(tmp_path))
        at = run_app()
        assert not at.exception
        assert len(at.error) == 1
        assert "file not found" in at.error[0].value
        data = at.session_state.game_data
        assert data.characters == []
        assert data.talent_steps == ()
        assert at.session_state.load_error
        assert at.session_state.working_list == []

    def test_bundled_data_loads(self):
        at = run_app()
        assert not at.exception
        assert len(at.error) == 0
        assert at.session_state.game_data.characters
        assert at.session_state.load_error is None

    def test_added_character_card(self):
        """Adding a character should show its mora and talent book previews."""
        at = run_app()
        at.selectbox(key="search").set_value("엠버").run()
        at.button(key="btn_add").click().run()
        assert not at.exception
        assert [e.character_id for e in at.session_state.working_list] == ["amber"]
        metrics = {m.label: m.value for m in at.metric}
        # Level 1 -> 90 plus three talents 1 -> 6
        assert metrics["필요 모라"] == "2,043,500"
        assert metrics["필요 특성 책"] == "72"
