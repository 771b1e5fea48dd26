from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

from sassy.domains.team.models import TeamMember
from sassy.extensions import db


def test_editor_creates_and_updates_members(editor_client):
    resp = editor_client.post("/api/team-members", json={"name": "Wanjiru", "image": "/media/teams/w.png"})
    assert resp.status_code == 201
    member = resp.get_json()["member"]
    assert member["name"] == "Wanjiru"

    resp = editor_client.patch(f"/api/team-members/{member['id']}", json={"image": None})
    assert resp.status_code == 200
    assert resp.get_json()["member"]["image"] is None
    assert resp.get_json()["member"]["name"] == "Wanjiru"

    items = editor_client.get("/api/team-members").get_json()["items"]
    assert [m["id"] for m in items] == [member["id"]]


def test_editor_cannot_delete_members(editor_client):
    member = TeamMember(name="Achieng")
    db.session.add(member)
    db.session.commit()
    assert editor_client.delete(f"/api/team-members/{member.id}").status_code == 403


def test_admin_deletes_member(admin_client):
    member = TeamMember(name="Otieno")
    db.session.add(member)
    db.session.commit()
    assert admin_client.delete(f"/api/team-members/{member.id}").status_code == 204
    assert admin_client.get(f"/api/team-members/{member.id}").status_code == 404
    assert admin_client.delete(f"/api/team-members/{member.id}").status_code == 404


def test_team_validation_and_auth(client, editor_client):
    assert client.get("/api/team-members").status_code == 401
    resp = editor_client.post("/api/team-members", json={"name": ""})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"
    assert editor_client.patch("/api/team-members/team_missing", json={"name": "x"}).status_code == 404


def test_blank_member_names_are_rejected(editor_client):
    resp = editor_client.post("/api/team-members", json={"name": "   "})
    assert resp.status_code == 400
    assert TeamMember.query.count() == 0

    member = editor_client.post("/api/team-members", json={"name": "  Njeri "}).get_json()["member"]
    assert member["name"] == "Njeri"
    resp = editor_client.patch(f"/api/team-members/{member['id']}", json={"name": "  "})
    assert resp.status_code == 400
    assert db.session.get(TeamMember, member["id"]).name == "Njeri"
