"""
Loads the character roster and talent cost table used by the calculator.
Both JSON files are read once, concurrently, when a session starts.
"""
import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from characters import Character, normalize_roster
from cost_calculator import CostTables
from talent_costs import TalentStep, parse_talent_steps

logger = logging.getLogger(__name__)

# Bundled data directory (streamlit_app/data)
APP_DIR = os.path.dirname(os.path.dirname(__file__))
DEFAULT_DATA_DIR = os.path.join(APP_DIR, "data")

CHARACTERS_FILE = "characters.json"
BOOK_COST_FILE = "book_cost.json"


class DataLoadError(RuntimeError):
    """Raised when a startup data file cannot be read or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass
class GameData:
    """Everything loaded at startup."""
    characters: List[Character] = field(default_factory=list)
    talent_steps: Tuple[TalentStep, ...] = ()

    @property
    def tables(self) -> CostTables:
        return CostTables(talent_steps=self.talent_steps)

    @property
    def is_empty(self) -> bool:
        return not self.characters and not self.talent_steps


# =============================================================================
# CONFIGURATION
# =============================================================================

def _get_setting(secret_key: str, env_key: str) -> str:
    """Read a setting from Streamlit secrets, falling back to the environment."""
    try:
        import streamlit as st
        return st.secrets.get(secret_key, os.environ.get(env_key, ""))
    except Exception:
        return os.environ.get(env_key, "")


def get_data_dir() -> str:
    return _get_setting("DATA_DIR", "GENSHIN_DATA_DIR") or DEFAULT_DATA_DIR


def get_data_paths() -> Tuple[str, str]:
    """(characters path, book cost path) after applying overrides."""
    data_dir = get_data_dir()
    characters_path = (
        _get_setting("CHARACTERS_PATH", "GENSHIN_CHARACTERS_PATH")
        or os.path.join(data_dir, CHARACTERS_FILE)
    )
    book_cost_path = (
        _get_setting("BOOK_COST_PATH", "GENSHIN_BOOK_COST_PATH")
        or os.path.join(data_dir, BOOK_COST_FILE)
    )
    return characters_path, book_cost_path


# =============================================================================
# LOADING
# =============================================================================

def fetch_json(path: str) -> List[Any]:
    """
    Read a JSON file whose top level must be a list.

    Raises DataLoadError for missing files, unreadable files, bad JSON or a
    payload of the wrong shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError:
        raise DataLoadError(path, "file not found")
    except json.JSONDecodeError as e:
        raise DataLoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})")
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError(path, str(e))

    if not isinstance(payload, list):
        raise DataLoadError(path, f"expected a list, got {type(payload).__name__}")
    return payload


def load_game_data(
    characters_path: Optional[str] = None,
    book_cost_path: Optional[str] = None,
) -> GameData:
    """
    Load and normalize both data files.

    The two reads run side by side. If either fails the whole load fails;
    no partial data is returned.
    """
    default_characters, default_book_cost = get_data_paths()
    characters_path = characters_path or default_characters
    book_cost_path = book_cost_path or default_book_cost

    logger.info(f"Loading roster from {characters_path} and costs from {book_cost_path}")
    with ThreadPoolExecutor(max_workers=2) as pool:
        raw_characters = pool.submit(fetch_json, characters_path)
        raw_book_cost = pool.submit(fetch_json, book_cost_path)
        character_rows = raw_characters.result()
        book_cost_rows = raw_book_cost.result()

    data = GameData(
        characters=normalize_roster(character_rows),
        talent_steps=parse_talent_steps(book_cost_rows),
    )
    logger.info(
        f"Loaded {len(data.characters)} characters and {len(data.talent_steps)} talent steps"
    )
    return data
