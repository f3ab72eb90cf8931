"""
Settings loader module.
Provides centralized access to all configuration settings from the combined settings.yaml file.
"""

import os
import yaml
from pathlib import Path
import logging

from core.config import DEFAULT_NAV_GROUP, DEFAULT_NAV_ORDER

logger = logging.getLogger(__name__)

# Path to the combined settings file
# Always resolve relative to the project root (parent of core/), unless overridden
_CORE_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _CORE_DIR.parent
SETTINGS_FILE = Path(os.getenv("APP_SETTINGS_FILE", _PROJECT_ROOT / "settings.yaml"))

# Cache for loaded settings to avoid repeated file reads
_settings_cache = None
_cache_mtime = None


def load_settings():
    """
    Load settings from the combined YAML file with caching.
    Returns the full settings dictionary.
    """
    global _settings_cache, _cache_mtime

    try:
        settings_path = Path(SETTINGS_FILE)

        # Check if we need to reload (file changed or not cached)
        if settings_path.exists():
            current_mtime = settings_path.stat().st_mtime
            if _settings_cache is None or _cache_mtime != current_mtime:
                with open(settings_path, "r") as f:
                    _settings_cache = yaml.safe_load(f) or {}
                _cache_mtime = current_mtime
                logger.info(f"Loaded settings from {settings_path}")
            return _settings_cache
        else:
            logger.warning(f"Settings file {settings_path} not found, using defaults")
            return {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading settings: {e}")
        return {}


def get_app_config():
    """Get application configuration settings."""
    settings = load_settings()
    return settings.get("app_config") or {}


def get_module_statuses():
    """
    Get the module enablement record (module name -> enabled flag).

    Order follows the settings file; non-boolean values are coerced.
    """
    settings = load_settings()
    modules = settings.get("modules") or {}
    if not isinstance(modules, dict):
        logger.warning(f"Ignoring 'modules' setting, expected a mapping but got {type(modules).__name__}")
        return {}
    return {str(name): bool(enabled) for name, enabled in modules.items()}


def get_enabled_modules():
    """Names of the modules marked enabled, in settings order."""
    return [name for name, enabled in get_module_statuses().items() if enabled]


def get_navigation_settings():
    """Get navigation defaults (default group bucket and default order rank)."""
    settings = load_settings()
    nav = settings.get("navigation") or {}
    return {
        "default_group": nav.get("default_group", DEFAULT_NAV_GROUP),
        "default_order": nav.get("default_order", DEFAULT_NAV_ORDER),
    }


def reload_settings():
    """Force reload of settings from disk."""
    global _settings_cache, _cache_mtime
    _settings_cache = None
    _cache_mtime = None
    logger.info("Settings cache cleared, will reload on next access")
