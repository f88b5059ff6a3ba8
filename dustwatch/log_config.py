"""
Logging setup for the DustWatch System.

Modules log through logging.getLogger(__name__); the dashboard calls
configure_logging() once at start-up.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the process.

    Args:
        level: Level name (DEBUG, INFO, ...); unknown names fall back to INFO
        log_file: Optional path of a file that receives the same records
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    # force=True so a Streamlit rerun does not stack duplicate handlers
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, handlers=handlers, force=True)
