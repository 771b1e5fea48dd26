"""Authentication service layer."""

from __future__ import annotations

from typing import Optional

from sassy.core.auth.password import verify_password
from sassy.core.auth.session import CookieSession, SessionUser
from sassy.core.users.models import User
from sassy.core.users.services import get_user_by_name


def authenticate_user(name: str, password: str) -> Optional[User]:
    """Return the user if credentials are valid."""
    user = get_user_by_name(name)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def start_session(session: CookieSession, user: User) -> SessionUser:
    """Write the identity snapshot into the session and persist it."""
    session.user = SessionUser(id=user.id, name=user.name, role=user.role_enum)
    session.save()
    return session.user
