"""
Configuration Management - Bookstore Query Runner
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_bool_env(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable"""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 't', 'y', 'yes')


def get_int_env(key: str, default: int = 0) -> int:
    """Get integer from environment variable"""
    try:
        return int(os.getenv(key, default))
    except (ValueError, TypeError):
        return default


def get_float_env(key: str, default: float = 0.0) -> float:
    """Get float from environment variable"""
    try:
        return float(os.getenv(key, default))
    except (ValueError, TypeError):
        return default


def get_str_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get stripped string from environment variable, empty counts as unset"""
    val = os.getenv(key)
    if val is None or not val.strip():
        return default
    return val.strip()


# ============== MONGODB CONFIGURATION ==============
MONGODB_URI = get_str_env("MONGODB_URI", "mongodb://127.0.0.1:27017")
MONGODB_DB_NAME = get_str_env("MONGODB_DB_NAME", "plp_bookstore")
MONGODB_COLLECTION = get_str_env("MONGODB_COLLECTION", "books")
MONGODB_CONNECT_TIMEOUT_MS = get_int_env("MONGODB_CONNECT_TIMEOUT_MS", 5000)
MONGODB_SERVER_SELECTION_TIMEOUT_MS = get_int_env("MONGODB_SERVER_SELECTION_TIMEOUT_MS", 5000)

# ============== LOGGING ==============
LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO")
LOG_DIR = get_str_env("LOG_DIR", "logs")
LOG_TO_FILE = get_bool_env("LOG_TO_FILE", True)

# ============== SAMPLE INPUTS ==============
SAMPLE_GENRE = get_str_env("SAMPLE_GENRE", "Fiction")
SAMPLE_AFTER_YEAR = get_int_env("SAMPLE_AFTER_YEAR", 1950)
SAMPLE_AUTHOR = get_str_env("SAMPLE_AUTHOR", "George Orwell")
SAMPLE_TITLE = get_str_env("SAMPLE_TITLE", "1984")
SAMPLE_NEW_PRICE = get_float_env("SAMPLE_NEW_PRICE", 11.99)
SAMPLE_IN_STOCK_AFTER_YEAR = get_int_env("SAMPLE_IN_STOCK_AFTER_YEAR", 2010)
PAGE_SIZE = get_int_env("PAGE_SIZE", 5)
DELETE_TITLE = get_str_env("DELETE_TITLE")  # delete step is skipped when unset


@dataclass(frozen=True)
class RunnerSettings:
    """Sample inputs fed to the query catalog"""

    genre: str = "Fiction"
    after_year: int = 1950
    author: str = "George Orwell"
    title: str = "1984"
    new_price: float = 11.99
    in_stock_after_year: int = 2010
    page_size: int = 5
    delete_title: Optional[str] = None

    @classmethod
    def from_config(cls) -> 'RunnerSettings':
        return cls(
            genre=SAMPLE_GENRE,
            after_year=SAMPLE_AFTER_YEAR,
            author=SAMPLE_AUTHOR,
            title=SAMPLE_TITLE,
            new_price=SAMPLE_NEW_PRICE,
            in_stock_after_year=SAMPLE_IN_STOCK_AFTER_YEAR,
            page_size=PAGE_SIZE,
            delete_title=DELETE_TITLE,
        )


# ============== VALIDATION ==============
def validate_config():
    """Validate critical configuration"""
    errors = []

    if not MONGODB_URI:
        errors.append("MONGODB_URI is required")
    elif not MONGODB_URI.startswith(("mongodb://", "mongodb+srv://")):
        errors.append("MONGODB_URI must start with mongodb:// or mongodb+srv://")

    if not MONGODB_DB_NAME or not MONGODB_COLLECTION:
        errors.append("MONGODB_DB_NAME and MONGODB_COLLECTION must not be empty")

    if PAGE_SIZE <= 0:
        errors.append("PAGE_SIZE must be a positive integer")

    if SAMPLE_NEW_PRICE < 0:
        errors.append("SAMPLE_NEW_PRICE must not be negative")

    if errors:
        raise ValueError("\n".join(errors))


# Validate on import
validate_config()
