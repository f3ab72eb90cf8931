# Purpose: Navigation contributed by the Billing module.

from core.current_user import is_admin, is_authenticated, is_subscriber
from core.navigation import Navigation, Section


def _billing(section: Section) -> None:
    section.set_attributes({"group": "main", "slug": "billing", "order": 20})

    section.add("Subscription", "/billing/subscription", attributes={"order": 0})
    section.add(
        "Invoices",
        "/billing/invoices",
        lambda child: child.set_attributes({"when": lambda: is_subscriber() or is_admin(), "order": 10}),
    )


def register_navigation(navigation: Navigation) -> None:
    navigation.add_when(is_authenticated, "Billing", "/billing", _billing)

    navigation.add_when(
        lambda: is_authenticated() and not is_subscriber(),
        "Upgrade",
        "/billing/plans",
        lambda section: section.set_attributes(
            {"group": "secondary", "slug": "upgrade", "order": 5, "badge": {"content": "Pro", "variant": "default"}}
        ),
    )
