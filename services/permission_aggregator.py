# -*- coding: utf-8 -*-
"""
permission_aggregator.py
--------------------------------------------------------------------
Effective permissions of a user: the set of permission keys reachable
through any of the user's roles, duplicates collapsed.

Soft-deleted roles and permissions still count by default, matching how
references have always been expanded. Pass include_deleted=False (or set
EFFECTIVE_PERMISSIONS_INCLUDE_DELETED=0) to leave them out.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Set

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from models.permission import Permission
from models.role import Role, role_permission
from models.user import User
from utils.exceptions import NotFoundError, StorageError


def _get(obj: Any, name: str, default=None):
    """Attribute of a model row or key of an expanded document."""
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _is_deleted(obj: Any) -> bool:
    return bool(_get(obj, "is_deleted", False))


def collect_keys(roles: Iterable[Any], include_deleted: bool = True) -> Set[str]:
    """
    Union of permission keys over ``roles``.

    Roles may be Role rows or documents whose ``permissions`` were expanded
    to permission documents carrying ``key``. A role without permissions
    contributes nothing; no roles gives an empty set.
    """
    keys: Set[str] = set()
    for role in roles or ():
        if role is None or (not include_deleted and _is_deleted(role)):
            continue
        for permission in _get(role, "permissions") or ():
            if not isinstance(permission, (dict, Permission)):
                raise TypeError("role permissions must be expanded before aggregation")
            if not include_deleted and _is_deleted(permission):
                continue
            key = _get(permission, "key")
            if key:
                keys.add(key)
    return keys


class PermissionAggregator:

    def __init__(self, session: Session, include_deleted: bool = True):
        self.session = session
        self.include_deleted = include_deleted

    def effective_permissions(self, user: Any) -> Set[str]:
        """``user`` is a User row or a document with roles expanded two levels deep."""
        return collect_keys(_get(user, "roles") or (), include_deleted=self.include_deleted)

    def for_user(self, user_id: int) -> Set[str]:
        stmt = (
            select(User)
            .options(selectinload(User.roles).selectinload(Role.permissions))
            .where(User.id == user_id, User.is_deleted == False)  # noqa: E712
        )
        try:
            user = self.session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("Loading user roles failed") from e
        if user is None:
            raise NotFoundError("User not found")
        return self.effective_permissions(user)

    def permissions_in_use(self) -> List[Permission]:
        """Distinct permissions referenced by at least one role."""
        used_ids = select(role_permission.c.permission_id).distinct()
        if not self.include_deleted:
            used_ids = (
                used_ids.join(Role, Role.id == role_permission.c.role_id)
                .where(Role.is_deleted == False)  # noqa: E712
            )
        stmt = select(Permission).where(Permission.id.in_(used_ids)).order_by(Permission.id)
        if not self.include_deleted:
            stmt = stmt.where(Permission.is_deleted == False)  # noqa: E712
        try:
            return list(self.session.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise StorageError("Loading permissions in use failed") from e
