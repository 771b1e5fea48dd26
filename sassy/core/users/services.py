"""Staff user service layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from sassy.core.auth.password import hash_password
from sassy.core.auth.permissions import Role
from sassy.core.users.models import User
from sassy.core.users.schemas import UserCreateRequest
from sassy.extensions import db

logger = logging.getLogger(__name__)


def get_user(user_id: str) -> Optional[User]:
    return db.session.get(User, user_id)


def get_user_by_name(name: str) -> Optional[User]:
    return User.query.filter_by(name=name).first()


def list_users() -> List[User]:
    return User.query.order_by(User.created_at.asc()).all()


def count_users() -> int:
    return User.query.count()


def create_user(payload: UserCreateRequest) -> User:
    name = payload.name
    if get_user_by_name(name):
        raise ValueError("name_taken")
    user = User(
        name=name,
        password_hash=hash_password(payload.password),
        role=payload.role.value,
    )
    db.session.add(user)
    db.session.commit()
    logger.info("Created user %s with role %s", user.id, user.role)
    return user


def update_role(user_id: str, role: Role, *, acting_user_id: str) -> Optional[User]:
    """Change a user's role; nobody may change their own."""
    if user_id == acting_user_id:
        raise ValueError("cannot_change_own_role")
    user = get_user(user_id)
    if not user:
        return None
    user.role = role.value
    db.session.commit()
    logger.info("User %s changed role of %s to %s", acting_user_id, user_id, role.value)
    return user


def delete_user(user_id: str, *, acting_user_id: str) -> bool:
    """Delete a user that authors no products. Returns False if missing."""
    from sassy.domains.catalog.models.product_models import Product  # local import to avoid cycle

    if user_id == acting_user_id:
        raise ValueError("cannot_delete_self")
    user = get_user(user_id)
    if not user:
        return False
    if Product.query.filter_by(author_id=user_id).first():
        raise ValueError("user_has_products")
    db.session.delete(user)
    db.session.commit()
    logger.info("User %s deleted user %s", acting_user_id, user_id)
    return True
