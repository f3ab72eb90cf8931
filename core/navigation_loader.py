# Purpose: Populate a Navigation registry from its registration sources.
# The core source (core/navigation_config.py) always runs first; then, for each
# module marked enabled in the module enablement record, that module's
# modules/<Name>/navigation.py register_navigation(registry) is called.
# Missing sources are skipped silently: most modules contribute no navigation.

from __future__ import annotations

import importlib
import logging
from typing import Callable, Dict, Optional

from core.config import MODULES_PACKAGE

logger = logging.getLogger(__name__)

RegisterFn = Callable[..., None]


def _core_source() -> Optional[RegisterFn]:
    from core.navigation_config import register_navigation

    return register_navigation


def _default_module_statuses() -> Dict[str, bool]:
    from core.settings_loader import get_module_statuses

    return get_module_statuses()


class NavigationLoader:
    """Runs registration sources against a registry. Performs no deduplication."""

    def __init__(
        self,
        core_source: Optional[Callable[[], Optional[RegisterFn]]] = _core_source,
        module_statuses: Optional[Callable[[], Dict[str, bool]]] = None,
        module_package: str = MODULES_PACKAGE,
    ):
        self.core_source = core_source
        self.module_statuses = module_statuses or _default_module_statuses
        self.module_package = module_package

    def load(self, registry):
        register = self.core_source() if self.core_source else None
        if register is not None:
            register(registry)
            logger.debug("Loaded core navigation")

        for module_name, enabled in self.module_statuses().items():
            if not enabled:
                logger.debug(f"Skipping navigation for disabled module '{module_name}'")
                continue
            register = self.module_source(module_name)
            if register is None:
                continue
            register(registry)
            logger.debug(f"Loaded navigation for module '{module_name}'")

        return registry

    def module_source(self, module_name: str) -> Optional[RegisterFn]:
        """Return modules.<name>.navigation.register_navigation (name lowercased), or None if absent."""
        target = f"{self.module_package}.{module_name.lower()}.navigation"
        try:
            module = importlib.import_module(target)
        except ModuleNotFoundError as e:
            # Only a missing source is tolerated; broken imports inside it must surface
            if e.name and (target == e.name or target.startswith(e.name + ".")):
                logger.debug(f"No navigation source for module '{module_name}' ({target})")
                return None
            logger.error(f"Failed importing navigation for module '{module_name}': {e}", exc_info=True)
            raise
        except Exception as e:
            logger.error(f"Failed importing navigation for module '{module_name}': {e}", exc_info=True)
            raise

        register = getattr(module, "register_navigation", None)
        if register is None or not callable(register):
            logger.debug(f"Module '{module_name}' navigation has no register_navigation()")
            return None
        return register
