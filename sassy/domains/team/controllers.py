"""Team member API."""

from __future__ import annotations

from flask import Blueprint, jsonify

from sassy.core.auth.permissions import Action, Resource
from sassy.core.utils.decorators import require_permission
from sassy.core.utils.validation import jsonable_errors, parse_json
from sassy.domains.team.schemas import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate
from sassy.domains.team.services import (
    create_team_member,
    delete_team_member,
    get_team_member,
    list_team_members,
    update_team_member,
)

team_api_bp = Blueprint("team_api", __name__)


def _serialize(member) -> dict:
    return TeamMemberResponse.model_validate(member).model_dump(mode="json")


def _validation_error(exc):
    return jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}), 400


@team_api_bp.get("")
@require_permission(Resource.TEAM, Action.READ)
def api_list_team():
    return jsonify({"ok": True, "items": [_serialize(m) for m in list_team_members()]})


@team_api_bp.post("")
@require_permission(Resource.TEAM, Action.CREATE)
def api_create_team_member():
    data, err = parse_json(TeamMemberCreate)
    if err:
        return _validation_error(err)
    return jsonify({"ok": True, "member": _serialize(create_team_member(data))}), 201


@team_api_bp.get("/<member_id>")
@require_permission(Resource.TEAM, Action.READ)
def api_get_team_member(member_id: str):
    member = get_team_member(member_id)
    if not member:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "member": _serialize(member)})


@team_api_bp.patch("/<member_id>")
@require_permission(Resource.TEAM, Action.UPDATE)
def api_update_team_member(member_id: str):
    data, err = parse_json(TeamMemberUpdate)
    if err:
        return _validation_error(err)
    member = update_team_member(member_id, **data.model_dump(exclude_unset=True))
    if not member:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "member": _serialize(member)})


@team_api_bp.delete("/<member_id>")
@require_permission(Resource.TEAM, Action.DELETE)
def api_delete_team_member(member_id: str):
    if not delete_team_member(member_id):
        return jsonify({"ok": False, "error": "not_found"}), 404
    return "", 204
