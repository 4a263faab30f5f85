from flask import Blueprint

from controllers.request_helpers import flag_arg, include_deleted_arg, json_body, list_query_from_request, page_response
from services.role_service import RoleService
from utils.response import json_response


role_bp = Blueprint("role", __name__, url_prefix="/api/roles")


@role_bp.post("")
def create_role():
    data = json_body()
    role = RoleService.create(
        name=data.get("name"),
        key=data.get("key"),
        description=data.get("description"),
        permissions=data.get("permissions"),
    )
    return json_response(message="Role created", data=RoleService.to_document(role), code=201)


@role_bp.get("")
def list_roles():
    return page_response(RoleService.list(list_query_from_request()), "roles")


@role_bp.get("/<int:role_id>")
def get_role(role_id: int):
    role = RoleService.get(role_id, include_deleted=include_deleted_arg())
    return json_response(data=RoleService.to_document(role))


@role_bp.put("/<int:role_id>")
def update_role(role_id: int):
    data = json_body()
    role = RoleService.update(
        role_id,
        name=data.get("name"),
        key=data.get("key"),
        description=data.get("description"),
        permissions=data.get("permissions"),
    )
    return json_response(message="Role updated", data=RoleService.to_document(role))


@role_bp.delete("/<int:role_id>")
def delete_role(role_id: int):
    if flag_arg("undelete"):
        return restore_role(role_id)
    role = RoleService.delete(role_id)
    return json_response(message="Role deleted", data=role.to_document())


@role_bp.post("/<int:role_id>/restore")
def restore_role(role_id: int):
    role = RoleService.restore(role_id)
    return json_response(message="Role restored", data=RoleService.to_document(role))
