import uuid

import pytest

from app import create_app
from extensions.database import db


def random_text(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


@pytest.fixture()
def app():
    """Flask app on an in-memory database; schema created per test."""
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def api(client):
    """
    Call an endpoint, return (http status, body).
    body is the json_response payload {"code", "message", "data"[, "error"]},
    or for list and search the envelope itself {"total", "page", "totalPages", <items>}
    """
    def _call(method: str, path: str, json_data=None, params=None):
        resp = client.open(path, method=method, json=json_data, query_string=params)
        return resp.status_code, resp.get_json()
    return _call


@pytest.fixture()
def make_project(api):
    def _create(name: str = None, description: str = "sample project"):
        status, body = api("POST", "/api/projects", {"name": name or random_text("Project"), "description": description})
        assert status == 201, f"create project failed: {body}"
        return body["data"]
    return _create


@pytest.fixture()
def make_test_plan(api, make_project):
    def _create(name: str = None, project_id: int = None, **extra):
        if project_id is None:
            project_id = make_project()["id"]
        payload = {"name": name or random_text("Plan"), "project_id": project_id, **extra}
        status, body = api("POST", "/api/test-plans", payload)
        assert status == 201, f"create test plan failed: {body}"
        return body["data"]
    return _create


@pytest.fixture()
def make_test_step(api, make_test_plan):
    def _create(name: str = None, test_plan_id: int = None, **extra):
        if test_plan_id is None:
            test_plan_id = make_test_plan()["id"]
        payload = {"name": name or random_text("Step"), "test_plan_id": test_plan_id, **extra}
        status, body = api("POST", "/api/test-steps", payload)
        assert status == 201, f"create test step failed: {body}"
        return body["data"]
    return _create


@pytest.fixture()
def make_permission(api):
    def _create(key: str = None, name: str = None, description: str = "test permission"):
        suffix = uuid.uuid4().hex[:6]
        payload = {"key": key or f"k{suffix}", "name": name or f"perm_{suffix}", "description": description}
        status, body = api("POST", "/api/permissions", payload)
        assert status == 201, f"create permission failed: {body}"
        return body["data"]
    return _create


@pytest.fixture()
def make_role(api):
    def _create(name: str = None, key: str = None, permissions=None):
        suffix = uuid.uuid4().hex[:6]
        payload = {
            "name": name or f"Role {suffix}",
            "key": key or f"r{suffix}",
            "permissions": permissions or [],
        }
        status, body = api("POST", "/api/roles", payload)
        assert status == 201, f"create role failed: {body}"
        return body["data"]
    return _create


@pytest.fixture()
def make_user(api):
    def _create(name: str = None, email: str = None, roles=None, password: str = "Test123!", **extra):
        suffix = uuid.uuid4().hex[:8]
        payload = {
            "name": name or f"user {suffix}",
            "email": email or f"user_{suffix}@example.com",
            "password": password,
            "roles": roles or [],
            **extra,
        }
        status, body = api("POST", "/api/users", payload)
        assert status == 201, f"create user failed: {body}"
        return body["data"]
    return _create
