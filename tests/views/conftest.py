# Purpose: Pytest fixtures shared across view tests.

import pytest
from flask import g


@pytest.fixture
def login(app):
    """Install a before_request hook that signs in a user with the given roles."""

    def _login(*roles):
        @app.before_request
        def _set_user():
            g.user = {"name": "Test User", "roles": list(roles)}

    return _login
