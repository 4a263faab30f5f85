from flask import Blueprint

from controllers.request_helpers import (
    default_page_size,
    flag_arg,
    include_deleted_arg,
    json_body,
    list_query_from_request,
    page_response,
)
from services.project_service import ProjectService
from services.query_builder import ListQuery
from utils.response import json_response


project_bp = Blueprint("project", __name__, url_prefix="/api/projects")


@project_bp.post("")
def create_project():
    data = json_body()
    project = ProjectService.create(name=data.get("name"), description=data.get("description"))
    return json_response(message="Project created", data=ProjectService.to_document(project), code=201)


@project_bp.get("")
def list_projects():
    page = ProjectService.list(list_query_from_request())
    return page_response(page, "projects")


@project_bp.post("/search")
def search_projects():
    # body: {"pagination": {...}, "filters": [{"key", "term"}], "sort": [{"field", "order"}]}
    list_query = ListQuery.from_search(json_body(), default_limit=default_page_size())
    page = ProjectService.search(list_query)
    return page_response(page, "projects", request=list_query.describe())


@project_bp.get("/<int:project_id>")
def get_project(project_id: int):
    project = ProjectService.get(project_id, include_deleted=include_deleted_arg())
    return json_response(data=ProjectService.to_document(project))


@project_bp.put("/<int:project_id>")
def update_project(project_id: int):
    data = json_body()
    project = ProjectService.update(
        project_id,
        name=data.get("name"),
        description=data.get("description"),
    )
    return json_response(message="Project updated", data=ProjectService.to_document(project))


@project_bp.delete("/<int:project_id>")
def delete_project(project_id: int):
    if flag_arg("undelete"):
        return restore_project(project_id)
    project = ProjectService.delete(project_id)
    return json_response(message="Project deleted", data=ProjectService.to_document(project))


@project_bp.post("/<int:project_id>/restore")
def restore_project(project_id: int):
    project = ProjectService.restore(project_id)
    return json_response(message="Project restored", data=ProjectService.to_document(project))
