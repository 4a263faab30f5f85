from typing import Optional, Sequence

from models.permission import Permission
from models.role import Role
from repositories.role_repository import RoleRepository
from services.document_service import DocumentService
from services.integrity import ensure_unique, resolve_references
from services.query_builder import Expand, ListConfig
from utils.validators import clean_text


class RoleService(DocumentService):
    """
    Roles bundle permissions.
    - name and key are unique.
    - every permission id must resolve to a live permission; one bad id
      rejects the whole request.
    """

    repository = RoleRepository
    label = "Role"
    list_config = ListConfig(default_sort="created_at")
    list_expand = (Expand("permissions", ("key", "name")),)
    detail_expand = list_expand

    @classmethod
    def create(
        cls,
        name: Optional[str],
        key: Optional[str],
        description: Optional[str] = None,
        permissions: Optional[Sequence] = None,
    ) -> Role:
        name, key = clean_text(name), clean_text(key)
        cls._require({"name": name, "key": key}, "name", "key")
        resolved = resolve_references(Permission, permissions, "permissions")
        ensure_unique(Role, {"name": name, "key": key}, label=cls.label)

        role = RoleRepository.create(name=name, key=key, description=description, permissions=resolved)
        return cls._save(role, "created")

    @classmethod
    def update(
        cls,
        role_id: int,
        name: Optional[str] = None,
        key: Optional[str] = None,
        description: Optional[str] = None,
        permissions: Optional[Sequence] = None,
    ) -> Role:
        changes = {}
        name, key = clean_text(name), clean_text(key)
        if name is not None:
            changes["name"] = name
        if key is not None:
            changes["key"] = key
        if description is not None:
            changes["description"] = description
        if permissions is not None:
            changes["permissions"] = resolve_references(Permission, permissions, "permissions")
        cls._require_changes(changes)

        role = cls.get(role_id, expand=())
        ensure_unique(Role, {"name": name, "key": key}, exclude_id=role.id, label=cls.label)
        RoleRepository.update(role, **changes)
        return cls._save(role, "updated")
