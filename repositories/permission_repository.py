from __future__ import annotations

from typing import Dict, Iterable

from sqlalchemy import select

from extensions.database import db
from models.permission import Permission
from repositories.base_repository import DocumentRepository


class PermissionRepository(DocumentRepository):
    model = Permission

    @staticmethod
    def find_by_keys(keys: Iterable[str]) -> Dict[str, Permission]:
        """{key: permission}, soft-deleted rows included."""
        keys = {k for k in keys if k}
        if not keys:
            return {}
        stmt = select(Permission).where(Permission.key.in_(keys))
        return {p.key: p for p in db.session.execute(stmt).scalars().all()}
