# Purpose: Request-scoped wiring for the navigation registry.
# Each request gets its own Navigation, created and loaded on first use and
# cached on flask.g, so registrations never leak between concurrent requests.

import logging
from typing import Any, Dict

from flask import current_app, g

from core.navigation import Navigation
from core.settings_loader import get_enabled_modules, get_navigation_settings

logger = logging.getLogger(__name__)


def create_navigation() -> Navigation:
    """Build an empty registry using the configured navigation defaults."""
    nav_settings = get_navigation_settings()
    return Navigation(
        default_group=nav_settings["default_group"],
        default_order=nav_settings["default_order"],
    )


def get_navigation() -> Navigation:
    """Return the current request's registry, loading it on first access."""
    navigation = g.get("navigation")
    if navigation is None:
        navigation = create_navigation().load()
        g.navigation = navigation
        logger.debug(f"Navigation loaded for request with {len(navigation)} entries")
    return navigation


def shared_props() -> Dict[str, Any]:
    """Props shared with every page payload."""
    return {
        "locale": current_app.config.get("LOCALE", "en"),
        "modules": get_enabled_modules(),
        "navigation": get_navigation().tree_grouped(),
    }
