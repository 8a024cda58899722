"""
logging_setup.py

Configure application-wide logging to both console and file.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from config import LOG_DIR, LOG_LEVEL

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"


def init_logging(log_path: str | None = None) -> str:
    """
    Initialize root logger with console and file handlers.

    Streamlit re-executes the app script on every interaction, so calling
    this more than once only replaces the handlers installed earlier.

    Args:
        log_path: Optional path to log file. If None, creates LOG_DIR/viewer_YYYYMMDD.log

    Returns:
        Path to the log file
    """
    if not log_path:
        os.makedirs(LOG_DIR, exist_ok=True)
        log_path = os.path.join(LOG_DIR, f"viewer_{datetime.now().strftime('%Y%m%d')}.log")

    root_logger = logging.getLogger()
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_viewer_handler", False):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    for handler in (console_handler, file_handler):
        handler.setLevel(level)
        handler._viewer_handler = True
        root_logger.addHandler(handler)

    logging.getLogger(__name__).info("Logging initialized -> %s", log_path)
    return log_path
