# Purpose: Navigation contributed by the Settings module.

from core.current_user import is_authenticated
from core.navigation import Navigation, Section


def _settings(section: Section) -> None:
    section.set_attributes({"group": "settings", "slug": "settings", "order": 0})

    section.add("Profile", "/settings/profile", attributes={"slug": "settings-profile", "order": 0})
    section.add("Password", "/settings/password", attributes={"slug": "settings-password", "order": 10})
    section.add("Appearance", "/settings/appearance", attributes={"order": 20})


def register_navigation(navigation: Navigation) -> None:
    navigation.add_when(is_authenticated, "Settings", "/settings", _settings)
