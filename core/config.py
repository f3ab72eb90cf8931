# Purpose: This file defines configuration constants for the application.
# It centralizes defaults (secret key, locale, logging) and the navigation
# conventions (default group/order, which attributes reach the frontend)
# so they can be adjusted without modifying the core application code.

"""
Configuration settings for the Flask application.
"""

from pathlib import Path
from typing import List

# Project root (core/ lives one level below it)
BASE_DIR = Path(__file__).resolve().parent.parent

# Flask defaults; overridden by the app_config section of settings.yaml
SECRET_KEY = "dev"  # CHANGE for production!
LOCALE = "en"
LOG_LEVEL = "DEBUG"
LOG_FILE = "app.log"
LOG_MAX_BYTES = 1024 * 1024 * 10  # 10 MB
LOG_BACKUP_COUNT = 5

# --- Navigation ---
# Bucket for top-level entries registered without a 'group' attribute
DEFAULT_NAV_GROUP = "ungrouped"

# Effective rank of entries without an 'order' attribute (sorts last)
DEFAULT_NAV_ORDER = 999

# Attributes copied from an entry onto its MenuItem when set
NAV_PASSTHROUGH_FIELDS: List[str] = [
    "action",
    "type",
    "external",
    "newPage",
    "class",
    "badge",
]

# Python package holding the optional feature modules (modules/<Name>/navigation.py)
MODULES_PACKAGE = "modules"
