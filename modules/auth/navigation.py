# Purpose: Navigation contributed by the Auth module (user menu).

from core.current_user import is_authenticated
from core.navigation import Navigation


def register_navigation(navigation: Navigation) -> None:
    navigation.add_when(
        is_authenticated,
        "Profile",
        "/settings/profile",
        lambda section: section.set_attributes({"group": "user", "slug": "profile", "order": 0}),
    )

    # Rendered as a button; the frontend posts to the logout endpoint itself
    navigation.add_when(
        is_authenticated,
        "Log out",
        "#",
        lambda section: section.set_attributes(
            {"group": "user", "slug": "logout", "action": "logout", "order": 100}
        ),
    )

    navigation.add_when(
        lambda: not is_authenticated(),
        "Log in",
        "/auth/login",
        lambda section: section.set_attributes({"group": "landing", "slug": "login", "order": 10}),
    )
