"""Reusable decorators for controllers."""

from __future__ import annotations

from functools import wraps
from typing import Callable, Iterable, TypeVar

from flask import jsonify

from sassy.core.auth.permissions import Action, Resource, Role, has_permission
from sassy.core.auth.session import get_session

F = TypeVar("F", bound=Callable)


def _unauthorized():
    return jsonify({"ok": False, "error": "unauthorized"}), 401


def _forbidden():
    return jsonify({"ok": False, "error": "forbidden"}), 403


def require_roles(allowed_roles: Iterable[Role | str]):
    """Enforce that the session user holds one of the given roles."""
    allowed = {Role(role) for role in allowed_roles}

    def decorator(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args, **kwargs):  # type: ignore[misc]
            user = get_session().user
            if user is None:
                return _unauthorized()
            if user.role not in allowed:
                return _forbidden()
            return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def require_permission(resource: Resource, action: Action):
    """Enforce the permission matrix for the session user."""

    def decorator(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args, **kwargs):  # type: ignore[misc]
            user = get_session().user
            if user is None:
                return _unauthorized()
            if not has_permission(user.role, resource, action):
                return _forbidden()
            return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
