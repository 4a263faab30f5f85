# -*- coding: utf-8 -*-
"""services/permission_service.py
--------------------------------------------------------------------
Permission catalogue.
- key and name are unique across live and soft-deleted rows.
- key is the permission's identity and cannot be changed after creation.
- seed_defaults() inserts the built-in catalogue (constants.permissions).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from flask import current_app

from constants.permissions import DEFAULT_PERMISSIONS
from extensions.database import db
from models.permission import Permission
from repositories.permission_repository import PermissionRepository
from services.document_service import DocumentService
from services.integrity import commit_or_conflict, ensure_unique
from services.permission_aggregator import PermissionAggregator
from services.query_builder import ListConfig
from utils.exceptions import ValidationError
from utils.validators import clean_text

logger = logging.getLogger(__name__)


class PermissionService(DocumentService):
    repository = PermissionRepository
    label = "Permission"
    list_config = ListConfig(default_sort="created_at")

    @classmethod
    def create(cls, key: Optional[str], name: Optional[str], description: Optional[str]) -> Permission:
        key, name, description = clean_text(key), clean_text(name), clean_text(description)
        cls._require(
            {"key": key, "name": name, "description": description},
            "key", "name", "description",
        )
        ensure_unique(Permission, {"key": key, "name": name}, label=cls.label)
        permission = PermissionRepository.create(key=key, name=name, description=description)
        return cls._save(permission, "created")

    @classmethod
    def update(
        cls,
        permission_id: int,
        key: Optional[str] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Permission:
        permission = cls.get(permission_id)
        key = clean_text(key)
        if key is not None and key != permission.key:
            raise ValidationError("Permission key cannot be changed", data={"field": "key"})

        changes = {}
        name = clean_text(name)
        if name is not None:
            changes["name"] = name
        description = clean_text(description)
        if description is not None:
            changes["description"] = description
        cls._require_changes(changes)

        ensure_unique(Permission, {"name": changes.get("name")}, exclude_id=permission.id, label=cls.label)
        PermissionRepository.update(permission, **changes)
        return cls._save(permission, "updated")

    @staticmethod
    def in_use() -> List[Permission]:
        include_deleted = current_app.config.get("EFFECTIVE_PERMISSIONS_INCLUDE_DELETED", True)
        return PermissionAggregator(db.session, include_deleted=include_deleted).permissions_in_use()

    @staticmethod
    def seed_defaults(restore_deleted: bool = False) -> Tuple[List[str], List[str]]:
        """
        Insert missing default permissions.
        :param restore_deleted: also bring back soft-deleted defaults
        :return: (created keys, restored keys)
        """
        existing = PermissionRepository.find_by_keys(p["key"] for p in DEFAULT_PERMISSIONS)
        created, restored = [], []
        for spec in DEFAULT_PERMISSIONS:
            current = existing.get(spec["key"])
            if current is None:
                PermissionRepository.create(**spec)
                created.append(spec["key"])
            elif restore_deleted and current.is_deleted:
                PermissionRepository.restore(current)
                restored.append(spec["key"])
        commit_or_conflict("Permission")
        logger.info("default permissions seeded: created=%s restored=%s", created, restored)
        return created, restored
