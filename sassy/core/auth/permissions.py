"""Role/resource/action permission matrix.

The matrix is plain data shared by the route guards and any view that decides
which controls to show. Lookups fail closed: anything not listed is denied.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Type, TypeVar


class Role(str, Enum):
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"


class Resource(str, Enum):
    PRODUCTS = "products"
    TEAM = "team"
    MEDIA = "media"
    USERS = "users"


class Action(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


_CRUD = frozenset(Action)

PERMISSIONS: Mapping[Role, Mapping[Resource, frozenset]] = MappingProxyType(
    {
        Role.ADMIN: MappingProxyType(
            {
                Resource.PRODUCTS: _CRUD,
                Resource.TEAM: _CRUD,
                Resource.MEDIA: _CRUD,
                Resource.USERS: _CRUD,
            }
        ),
        Role.EDITOR: MappingProxyType(
            {
                Resource.PRODUCTS: frozenset({Action.READ, Action.UPDATE}),
                Resource.TEAM: frozenset({Action.CREATE, Action.READ, Action.UPDATE}),
                Resource.MEDIA: frozenset({Action.READ, Action.UPDATE}),
                Resource.USERS: frozenset(),
            }
        ),
    }
)

E = TypeVar("E", bound=Enum)


def _coerce(enum_cls: Type[E], value: Any) -> Optional[E]:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def has_permission(role: Any, resource: Any, action: Any) -> bool:
    """Return True only when the matrix grants ``action`` on ``resource`` to ``role``."""
    role_ = _coerce(Role, role)
    resource_ = _coerce(Resource, resource)
    action_ = _coerce(Action, action)
    if role_ is None or resource_ is None or action_ is None:
        return False
    return action_ in PERMISSIONS.get(role_, {}).get(resource_, frozenset())


def can_manage_users(role: Any) -> bool:
    return has_permission(role, Resource.USERS, Action.READ)


def can_delete(role: Any, resource: Any) -> bool:
    return has_permission(role, resource, Action.DELETE)


def allowed_actions(role: Any) -> dict[str, list[str]]:
    """Serialize the actions a role holds, e.g. for the ``/me`` payload."""
    role_ = _coerce(Role, role)
    if role_ is None:
        return {}
    grants = PERMISSIONS.get(role_, {})
    return {
        resource.value: sorted(action.value for action in grants.get(resource, frozenset()))
        for resource in Resource
    }
