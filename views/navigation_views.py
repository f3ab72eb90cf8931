# Purpose: JSON endpoints exposing the grouped navigation for the current request.

import logging

from flask import Blueprint, Response, jsonify

from core.navigation_service import get_navigation

logger = logging.getLogger(__name__)

navigation_bp = Blueprint("navigation_bp", __name__, url_prefix="/api/navigation")


@navigation_bp.route("", methods=["GET"])
def navigation_tree() -> Response:
    """All navigation groups as MenuItems."""
    return jsonify(get_navigation().tree_grouped())


@navigation_bp.route("/<group>", methods=["GET"])
def navigation_group(group: str):
    """A single navigation group; 404 when no entry was registered under it."""
    grouped = get_navigation().tree_grouped()
    if group not in grouped:
        logger.info(f"Navigation group '{group}' requested but not registered")
        return jsonify({"status": "error", "message": f"Unknown navigation group '{group}'"}), 404
    return jsonify(grouped[group])
