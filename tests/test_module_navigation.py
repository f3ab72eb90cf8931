# Purpose: Tests for the navigation contributed by the bundled modules, per user role.

import pytest
from flask import Flask, g

from core.navigation import Navigation
from modules.auth.navigation import register_navigation as register_auth
from modules.billing.navigation import register_navigation as register_billing
from modules.settings.navigation import register_navigation as register_settings


@pytest.fixture
def as_user():
    """Push an app context with g.user set to a user holding the given roles."""
    app = Flask(__name__)
    contexts = []

    def _as_user(*roles):
        ctx = app.app_context()
        ctx.push()
        contexts.append(ctx)
        g.user = {"roles": list(roles)} if roles else None

    yield _as_user
    for ctx in reversed(contexts):
        ctx.pop()


def _build(*registers):
    navigation = Navigation(current_url=lambda: "http://localhost/billing/invoices")
    for register in registers:
        register(navigation)
    return navigation.tree_grouped()


def test_billing_hidden_for_anonymous(as_user):
    as_user()

    grouped = _build(register_billing)

    assert grouped == {"main": [], "secondary": []}


def test_billing_for_plain_user_offers_upgrade(as_user):
    as_user("user")

    grouped = _build(register_billing)

    billing = grouped["main"][0]
    assert [c["title"] for c in billing["children"]] == ["Subscription"]
    upgrade = grouped["secondary"][0]
    assert upgrade["badge"] == {"content": "Pro", "variant": "default"}


def test_billing_for_subscriber_shows_invoices(as_user):
    as_user("user", "subscriber")

    grouped = _build(register_billing)

    children = grouped["main"][0]["children"]
    assert [c["title"] for c in children] == ["Subscription", "Invoices"]
    assert children[1]["active"] is True
    assert grouped["main"][0]["active"] is False
    assert grouped["secondary"] == []


def test_settings_and_auth_for_user(as_user):
    as_user("user")

    grouped = _build(register_auth, register_settings)

    assert [i["slug"] for i in grouped["user"]] == ["profile", "logout"]
    assert grouped["landing"] == []
    slugs = [c["slug"] for c in grouped["settings"][0]["children"]]
    assert slugs == ["settings-profile", "settings-password", "appearance"]
