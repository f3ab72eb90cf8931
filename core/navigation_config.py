# Purpose: Core navigation entries, registered before any module navigation.
# This file defines register_navigation(), the core registration source the
# NavigationLoader runs on every request.
#
# Navigation is organized by UI region through the 'group' attribute:
# - main: primary sidebar links
# - secondary: footer of the sidebar (project links, admin panel)
# - landing: anchor links on the public landing page
#
# Landing anchors use 'external': True so the frontend renders a plain <a>
# instead of a client-side router link (router links don't handle fragments).

from flask import url_for

from core.current_user import is_admin, is_authenticated
from core.navigation import Navigation, Section

GITHUB_URL = "https://github.com/sauce-base/saucebase"
DOCS_URL = "https://sauce-base.github.io/docs/"
ADMIN_URL = "/admin"

ADMIN_LINK_CLASS = (
    "bg-yellow-500/10 text-yellow-600 hover:bg-yellow-500/20 "
    "hover:text-yellow-700 dark:hover:text-yellow-400"
)


def register_navigation(navigation: Navigation) -> None:
    navigation.add(
        "Dashboard",
        url_for("main.dashboard"),
        lambda section: section.set_attributes({"group": "main", "slug": "dashboard", "order": 0}),
    )

    # --- Secondary ---
    navigation.add(
        "Star us on Github",
        GITHUB_URL,
        lambda section: section.set_attributes(
            {"group": "secondary", "slug": "github", "external": True, "newPage": True, "order": 0}
        ),
    )

    navigation.add(
        "Documentation",
        DOCS_URL,
        lambda section: section.set_attributes(
            {"group": "secondary", "slug": "documentation", "external": True, "newPage": True, "order": 0}
        ),
    )

    def _admin(section: Section) -> None:
        section.set_attributes(
            {
                "group": "secondary",
                "slug": "admin",
                "order": 10,
                "external": True,
                "newPage": True,
                "class": ADMIN_LINK_CLASS,
            }
        )

    navigation.add_when(lambda: is_authenticated() and is_admin(), "Admin", ADMIN_URL, _admin)

    # --- Landing page ---
    navigation.add(
        "Features",
        "/#features",
        lambda section: section.set_attributes(
            {"group": "landing", "slug": "features", "external": True, "order": 0}
        ),
    )

    navigation.add(
        "FAQ",
        "/#faq",
        lambda section: section.set_attributes({"group": "landing", "slug": "faq", "external": True, "order": 1}),
    )

    navigation.add(
        "Docs",
        DOCS_URL,
        lambda section: section.set_attributes(
            {"group": "landing", "slug": "documentation", "external": True, "newPage": True, "order": 2}
        ),
    )
