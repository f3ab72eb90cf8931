# This file defines the routes related to the main, top-level pages of the application.
# It handles the landing page and the dashboard; both return page payloads
# that include the shared navigation.

"""
Blueprint for main application routes, like the index page.
"""
from flask import Blueprint, Response

from views.page_helpers import render_page

# Define the blueprint for main routes
main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index() -> Response:
    """Public landing page."""
    return render_page("Index")


@main_bp.route("/dashboard")
def dashboard() -> Response:
    return render_page("Dashboard")


@main_bp.route("/hello")
def hello() -> str:
    return "Hello, World! App factory is working."
