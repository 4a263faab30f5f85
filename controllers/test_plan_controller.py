from flask import Blueprint

from controllers.request_helpers import flag_arg, include_deleted_arg, json_body, list_query_from_request, page_response
from services.test_plan_service import TestPlanService
from utils.response import json_response


test_plan_bp = Blueprint("test_plan", __name__, url_prefix="/api/test-plans")


@test_plan_bp.post("")
def create_test_plan():
    data = json_body()
    plan = TestPlanService.create(
        name=data.get("name"),
        project_id=data.get("project_id"),
        description=data.get("description"),
        created_by=data.get("created_by"),
    )
    return json_response(message="Test plan created", data=TestPlanService.to_document(plan), code=201)


@test_plan_bp.get("")
def list_test_plans():
    return page_response(TestPlanService.list(list_query_from_request()), "testPlans")


@test_plan_bp.get("/<int:plan_id>")
def get_test_plan(plan_id: int):
    plan = TestPlanService.get(plan_id, include_deleted=include_deleted_arg())
    return json_response(data=TestPlanService.to_document(plan))


@test_plan_bp.put("/<int:plan_id>")
def update_test_plan(plan_id: int):
    data = json_body()
    plan = TestPlanService.update(
        plan_id,
        name=data.get("name"),
        description=data.get("description"),
        project_id=data.get("project_id"),
    )
    return json_response(message="Test plan updated", data=TestPlanService.to_document(plan))


@test_plan_bp.delete("/<int:plan_id>")
def delete_test_plan(plan_id: int):
    if flag_arg("undelete"):
        return restore_test_plan(plan_id)
    plan = TestPlanService.delete(plan_id)
    return json_response(message="Test plan deleted", data=plan.to_document())


@test_plan_bp.post("/<int:plan_id>/restore")
def restore_test_plan(plan_id: int):
    plan = TestPlanService.restore(plan_id)
    return json_response(message="Test plan restored", data=TestPlanService.to_document(plan))
