# controllers/user_controller.py
from flask import Blueprint

from controllers.request_helpers import flag_arg, include_deleted_arg, json_body, list_query_from_request, page_response
from services.user_service import UserService
from utils.response import json_response

user_bp = Blueprint("user", __name__, url_prefix="/api/users")


@user_bp.post("")
def create_user():
    data = json_body()
    user = UserService.create(
        name=data.get("name"),
        email=data.get("email"),
        password=data.get("password"),
        roles=data.get("roles"),
        provider=data.get("provider"),
        oauth_id=data.get("oauth_id"),
    )
    return json_response(message="User created", data=UserService.to_document(user), code=201)


@user_bp.get("")
def list_users():
    return page_response(UserService.list(list_query_from_request()), "users")


@user_bp.get("/<int:user_id>")
def get_user(user_id: int):
    """User with expanded roles and effectivePermissions."""
    return json_response(data=UserService.get_with_permissions(user_id, include_deleted=include_deleted_arg()))


@user_bp.get("/<int:user_id>/permissions")
def get_user_permissions(user_id: int):
    return json_response(data={"effectivePermissions": UserService.effective_permissions(user_id)})


@user_bp.put("/<int:user_id>")
def update_user(user_id: int):
    data = json_body()
    user = UserService.update(
        user_id,
        name=data.get("name"),
        email=data.get("email"),
        password=data.get("password"),
        roles=data.get("roles"),
        provider=data.get("provider"),
        oauth_id=data.get("oauth_id"),
    )
    return json_response(message="User updated", data=UserService.to_document(user))


@user_bp.delete("/<int:user_id>")
def delete_user(user_id: int):
    # ?undelete=true restores instead
    if flag_arg("undelete"):
        return restore_user(user_id)
    user = UserService.delete(user_id)
    return json_response(message="User deleted", data=user.to_document())


@user_bp.post("/<int:user_id>/restore")
def restore_user(user_id: int):
    user = UserService.restore(user_id)
    return json_response(message="User restored", data=UserService.to_document(user))
