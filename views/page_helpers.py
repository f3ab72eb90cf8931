# Purpose: Helpers for building page payloads returned by view functions.
# Every page carries the shared props (locale, enabled modules, navigation)
# merged underneath its own props, mirroring what the frontend expects.

from typing import Any, Dict, Optional

from flask import Response, jsonify, request

from core.navigation_service import shared_props


def render_page(component: str, props: Optional[Dict[str, Any]] = None) -> Response:
    """Return the JSON page object for a frontend page component."""
    page_props = shared_props()
    page_props.update(props or {})
    return jsonify({"component": component, "props": page_props, "url": request.full_path.rstrip("?")})
