# Purpose: Request-scoped access to the signed-in user for navigation 'when' predicates.
# Authentication itself lives outside this project; whatever authenticates the
# request stores the user on flask.g.user (a mapping or object with a 'roles' field).

from enum import Enum
from typing import Any, List, Optional

from flask import g, has_app_context


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"
    SUBSCRIBER = "subscriber"  # additive, held alongside USER

    @classmethod
    def from_string(cls, name: Optional[str]) -> "Role":
        """Unknown or empty role names fall back to USER."""
        try:
            return cls(name)
        except ValueError:
            return cls.USER


def current_user() -> Optional[Any]:
    if not has_app_context():
        return None
    return g.get("user")


def _roles(user: Any) -> List[Role]:
    raw = user.get("roles", []) if isinstance(user, dict) else getattr(user, "roles", [])
    if isinstance(raw, str):
        raw = [raw]
    return [Role.from_string(str(getattr(r, "value", r))) for r in raw or []]


def is_authenticated() -> bool:
    return current_user() is not None


def has_role(role: Role) -> bool:
    user = current_user()
    if user is None:
        return False
    return role in _roles(user)


def is_admin() -> bool:
    return has_role(Role.ADMIN)


def is_subscriber() -> bool:
    return has_role(Role.SUBSCRIBER)
