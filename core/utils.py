"""
Utility functions for the query runner
"""

import os
import sys
import logging
from datetime import datetime
from typing import Any, Iterable, Optional

from bson import json_util


# ============== LOGGING SETUP ==============

def setup_logging(level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
    """Setup logging configuration"""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    root_logger.addHandler(console_handler)

    # File handler
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(
            os.path.join(log_dir, f"queries_{datetime.now().strftime('%Y%m%d')}.log"),
            encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        root_logger.addHandler(file_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("motor").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


# ============== FORMATTING ==============

def format_documents(docs: Iterable[Any]) -> str:
    """Render documents as indented extended JSON (ObjectIds included)"""
    return json_util.dumps(list(docs), indent=2)


def format_duration_ms(millis: float) -> str:
    """Format a duration given in milliseconds"""
    if millis < 1000:
        return f"{int(millis)}ms"
    return f"{millis / 1000:.2f}s"
