from flask import Blueprint

from controllers.request_helpers import flag_arg, include_deleted_arg, json_body, list_query_from_request, page_response
from services.test_step_execution_service import TestStepExecutionService
from utils.response import json_response


execution_bp = Blueprint("test_step_execution", __name__, url_prefix="/api/test-step-executions")


@execution_bp.post("")
def create_execution():
    data = json_body()
    execution = TestStepExecutionService.create(
        test_step_id=data.get("test_step_id"),
        executed_by=data.get("executed_by"),
        status=data.get("status"),
        actual_result=data.get("actual_result"),
        notes=data.get("notes"),
        executed_at=data.get("executed_at"),
    )
    return json_response(
        message="Test step execution created",
        data=TestStepExecutionService.to_document(execution),
        code=201,
    )


@execution_bp.get("")
def list_executions():
    return page_response(TestStepExecutionService.list(list_query_from_request()), "testStepExecutions")


@execution_bp.get("/<int:execution_id>")
def get_execution(execution_id: int):
    execution = TestStepExecutionService.get(execution_id, include_deleted=include_deleted_arg())
    return json_response(data=TestStepExecutionService.to_document(execution))


@execution_bp.put("/<int:execution_id>")
def update_execution(execution_id: int):
    data = json_body()
    execution = TestStepExecutionService.update(
        execution_id,
        status=data.get("status"),
        actual_result=data.get("actual_result"),
        notes=data.get("notes"),
        executed_by=data.get("executed_by"),
        executed_at=data.get("executed_at"),
    )
    return json_response(message="Test step execution updated", data=TestStepExecutionService.to_document(execution))


@execution_bp.delete("/<int:execution_id>")
def delete_execution(execution_id: int):
    if flag_arg("undelete"):
        return restore_execution(execution_id)
    execution = TestStepExecutionService.delete(execution_id)
    return json_response(message="Test step execution deleted", data=execution.to_document())


@execution_bp.post("/<int:execution_id>/restore")
def restore_execution(execution_id: int):
    execution = TestStepExecutionService.restore(execution_id)
    return json_response(message="Test step execution restored", data=TestStepExecutionService.to_document(execution))
