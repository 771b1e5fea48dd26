"""Team member CRUD."""

from __future__ import annotations

import logging
from typing import List, Optional

from sassy.domains.team.models import TeamMember
from sassy.domains.team.schemas import TeamMemberCreate
from sassy.extensions import db

logger = logging.getLogger(__name__)


def list_team_members() -> List[TeamMember]:
    return TeamMember.query.order_by(TeamMember.created_at.asc()).all()


def get_team_member(member_id: str) -> Optional[TeamMember]:
    return db.session.get(TeamMember, member_id)


def create_team_member(payload: TeamMemberCreate) -> TeamMember:
    member = TeamMember(name=payload.name, image=payload.image or None)
    db.session.add(member)
    db.session.commit()
    logger.info("Created team member %s", member.id)
    return member


def update_team_member(member_id: str, **fields) -> Optional[TeamMember]:
    member = get_team_member(member_id)
    if not member:
        return None
    if fields.get("name"):
        member.name = fields["name"]
    if "image" in fields:
        member.image = fields["image"] or None
    db.session.commit()
    return member


def delete_team_member(member_id: str) -> bool:
    member = get_team_member(member_id)
    if not member:
        return False
    db.session.delete(member)
    db.session.commit()
    logger.info("Deleted team member %s", member_id)
    return True
