# -*- coding: utf-8 -*-
"""Test plan endpoints: project reference checks and expansion."""


def test_list_plans_expands_project(api, make_project):
    project = make_project(name="Alpha", description="first project")
    status, body = api("POST", "/api/test-plans", {"name": "Smoke", "project_id": project["id"]})
    assert status == 201
    plan_id = body["data"]["id"]

    status, body = api("GET", "/api/test-plans")

    assert status == 200
    assert (body["total"], body["page"], body["totalPages"]) == (1, 1, 1)
    plan = body["testPlans"][0]
    assert plan["id"] == plan_id
    assert plan["project_id"] == {"id": project["id"], "name": "Alpha", "description": "first project"}


def test_create_plan_with_missing_project_creates_nothing(api):
    status, body = api("POST", "/api/test-plans", {"name": "Orphan", "project_id": 999})

    assert status == 400
    assert body["error"] == "validation_error"
    assert body["data"]["invalid"] == [999]

    _, body = api("GET", "/api/test-plans")
    assert body["total"] == 0


def test_create_plan_rejects_soft_deleted_project(api, make_project):
    project_id = make_project()["id"]
    api("DELETE", f"/api/projects/{project_id}")

    status, body = api("POST", "/api/test-plans", {"name": "Late", "project_id": project_id})

    assert status == 400
    assert body["message"] == "Invalid project_id provided"


def test_create_plan_requires_name_and_project(api):
    status, body = api("POST", "/api/test-plans", {})

    assert status == 400
    assert body["data"] == {"missing": ["name", "project_id"]}


def test_created_by_must_be_a_user(api, make_project, make_user):
    project_id = make_project()["id"]
    user = make_user()

    status, body = api("POST", "/api/test-plans", {"name": "p", "project_id": project_id, "created_by": 4242})
    assert status == 400

    status, body = api("POST", "/api/test-plans", {"name": "p", "project_id": project_id, "created_by": user["id"]})
    assert status == 201
    assert body["data"]["created_by"] == user["id"]


def test_plan_detail_lists_live_steps(api, make_test_plan, make_test_step):
    plan_id = make_test_plan()["id"]
    kept = make_test_step(name="open app", test_plan_id=plan_id, expected_result="home screen")
    dropped = make_test_step(name="close app", test_plan_id=plan_id)
    api("DELETE", f"/api/test-steps/{dropped['id']}")

    status, body = api("GET", f"/api/test-plans/{plan_id}")

    assert status == 200
    assert body["data"]["steps"] == [{"id": kept["id"], "name": "open app", "expected_result": "home screen"}]


def test_move_plan_to_other_project(api, make_project, make_test_plan):
    plan = make_test_plan()
    target = make_project(name="Target")

    status, body = api("PUT", f"/api/test-plans/{plan['id']}", {"project_id": target["id"]})
    assert status == 200
    assert body["data"]["project_id"]["name"] == "Target"

    status, body = api("PUT", f"/api/test-plans/{plan['id']}", {"project_id": "not-an-id"})
    assert status == 400


def test_filter_plans_by_project_id(api, make_project, make_test_plan):
    first, second = make_project()["id"], make_project()["id"]
    make_test_plan(project_id=first)
    make_test_plan(project_id=first)
    make_test_plan(project_id=second)

    _, body = api("GET", "/api/test-plans", params={"filterBy": "project_id", "filterTerm": str(second)})

    assert body["total"] == 1
    assert body["testPlans"][0]["project_id"]["id"] == second


def test_unexpanded_steps_skip_deleted_ids(api, make_test_plan, make_test_step):
    plan_id = make_test_plan()["id"]
    kept = make_test_step(test_plan_id=plan_id)
    dropped = make_test_step(test_plan_id=plan_id)
    api("DELETE", f"/api/test-steps/{dropped['id']}")

    _, body = api("GET", "/api/test-plans")

    assert body["testPlans"][0]["steps"] == [kept["id"]]
