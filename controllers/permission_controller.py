from flask import Blueprint

from controllers.request_helpers import flag_arg, include_deleted_arg, json_body, list_query_from_request, page_response
from services.permission_service import PermissionService
from utils.response import json_response


permission_bp = Blueprint("permission", __name__, url_prefix="/api/permissions")


@permission_bp.post("")
def create_permission():
    data = json_body()
    permission = PermissionService.create(
        key=data.get("key"),
        name=data.get("name"),
        description=data.get("description"),
    )
    return json_response(message="Permission created", data=permission.to_document(), code=201)


@permission_bp.get("")
def list_permissions():
    return page_response(PermissionService.list(list_query_from_request()), "permissions")


@permission_bp.get("/in-use")
def list_permissions_in_use():
    """Permissions referenced by at least one role."""
    permissions = PermissionService.in_use()
    return json_response(data={"permissions": [p.to_document() for p in permissions]})


@permission_bp.get("/<int:permission_id>")
def get_permission(permission_id: int):
    permission = PermissionService.get(permission_id, include_deleted=include_deleted_arg())
    return json_response(data=permission.to_document())


@permission_bp.put("/<int:permission_id>")
def update_permission(permission_id: int):
    data = json_body()
    permission = PermissionService.update(
        permission_id,
        key=data.get("key"),
        name=data.get("name"),
        description=data.get("description"),
    )
    return json_response(message="Permission updated", data=permission.to_document())


@permission_bp.delete("/<int:permission_id>")
def delete_permission(permission_id: int):
    if flag_arg("undelete"):
        return restore_permission(permission_id)
    permission = PermissionService.delete(permission_id)
    return json_response(message="Permission deleted", data=permission.to_document())


@permission_bp.post("/<int:permission_id>/restore")
def restore_permission(permission_id: int):
    permission = PermissionService.restore(permission_id)
    return json_response(message="Permission restored", data=permission.to_document())
