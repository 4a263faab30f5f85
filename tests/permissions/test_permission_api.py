from constants.permissions import DEFAULT_PERMISSION_KEYS
from extensions.database import db
from models import Permission


def test_duplicate_key_conflicts_and_keeps_one(api):
    payload = {"key": "vwprj", "name": "view_projects", "description": "Can view projects"}
    assert api("POST", "/api/permissions", payload)[0] == 201

    status, body = api("POST", "/api/permissions", {**payload, "name": "other name"})

    assert status == 409
    assert body["error"] == "conflict"
    assert body["data"] == {"field": "key"}
    _, body = api("GET", "/api/permissions", params={"filterBy": "key", "filterTerm": "vwprj"})
    assert body["total"] == 1


def test_permission_requires_all_fields(api):
    status, body = api("POST", "/api/permissions", {"key": "abc", "name": "abc"})

    assert status == 400
    assert body["data"] == {"missing": ["description"]}


def test_permission_key_is_immutable(api, make_permission):
    permission = make_permission(key="keep")

    status, _ = api("PUT", f"/api/permissions/{permission['id']}", {"key": "changed"})
    assert status == 400

    status, body = api("PUT", f"/api/permissions/{permission['id']}", {"key": "keep", "description": "new text"})
    assert status == 200
    assert body["data"]["description"] == "new text"


def test_rename_to_taken_name_conflicts(api, make_permission):
    make_permission(name="taken")
    other = make_permission()

    status, _ = api("PUT", f"/api/permissions/{other['id']}", {"name": "taken"})

    assert status == 409


def test_permissions_in_use_endpoint(api, make_permission, make_role):
    used = make_permission(key="used")
    make_permission(key="idle")
    make_role(permissions=[used["id"]])
    make_role(permissions=[used["id"]])

    status, body = api("GET", "/api/permissions/in-use")

    assert status == 200
    assert [p["key"] for p in body["data"]["permissions"]] == ["used"]


def test_seed_permissions_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-permissions"])
    assert result.exit_code == 0
    assert "created 8" in result.output

    result = runner.invoke(args=["seed-permissions"])
    assert "created 0" in result.output
    assert {p.key for p in db.session.query(Permission).all()} == DEFAULT_PERMISSION_KEYS


def test_reset_permissions_restores_deleted_defaults(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["seed-permissions"])
    permission = db.session.query(Permission).filter_by(key="vwprj").one()
    permission.soft_delete()
    db.session.commit()

    result = runner.invoke(args=["reset-permissions"])

    assert result.exit_code == 0
    assert "restored 1" in result.output
    assert db.session.query(Permission).filter_by(key="vwprj").one().is_deleted is False


def test_permissions_in_use_command(app, make_permission, make_role):
    used = make_permission(key="inuse")
    make_role(permissions=[used["id"]])

    result = app.test_cli_runner().invoke(args=["permissions-in-use"])

    assert result.exit_code == 0
    assert "inuse" in result.output
