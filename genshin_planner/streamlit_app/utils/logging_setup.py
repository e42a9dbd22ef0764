"""
Logging configuration for the Streamlit app.
Streamlit re-runs the script on every interaction, so setup must be idempotent.
"""
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "genshin_planner"


def setup_logging(level: str = None) -> None:
    """Attach one stream handler to the root logger (once per process)."""
    level_name = (level or os.environ.get("GENSHIN_LOG_LEVEL", "INFO")).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
