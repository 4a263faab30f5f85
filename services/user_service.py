# services/user_service.py
import logging
from typing import List, Optional, Sequence

from flask import current_app

from constants.execution import DEFAULT_AUTH_PROVIDER, validate_auth_provider
from extensions.database import db
from models.role import Role
from models.user import User
from repositories.user_repository import UserRepository
from services.document_service import DocumentService
from services.integrity import ensure_unique, resolve_references
from services.permission_aggregator import PermissionAggregator
from services.query_builder import Expand, ListConfig
from utils.exceptions import ValidationError
from utils.password import hash_password
from utils.validators import clean_text, normalize_email, validate_email

logger = logging.getLogger(__name__)

ROLES_EXPAND = Expand("roles", ("name", "key"), nested=(Expand("permissions", ("key",)),))


class UserService(DocumentService):
    repository = UserRepository
    label = "User"
    list_config = ListConfig(default_sort="created_at")
    list_expand = (ROLES_EXPAND,)
    detail_expand = (
        Expand("roles", ("name", "key"), nested=(Expand("permissions", ("key", "name")),)),
    )

    @staticmethod
    def _aggregator() -> PermissionAggregator:
        include_deleted = current_app.config.get("EFFECTIVE_PERMISSIONS_INCLUDE_DELETED", True)
        return PermissionAggregator(db.session, include_deleted=include_deleted)

    @staticmethod
    def _clean_email(email) -> str:
        email = normalize_email(email) if isinstance(email, str) else email
        if not isinstance(email, str) or not validate_email(email):
            raise ValidationError("Invalid email format", data={"field": "email"})
        return email

    @classmethod
    def create(
        cls,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str] = None,
        roles: Optional[Sequence] = None,
        provider: Optional[str] = None,
        oauth_id: Optional[str] = None,
    ) -> User:
        name = clean_text(name)
        cls._require({"name": name, "email": email}, "name", "email")
        email = cls._clean_email(email)
        provider = provider or DEFAULT_AUTH_PROVIDER
        validate_auth_provider(provider)

        resolved = resolve_references(Role, roles, "roles")
        ensure_unique(User, {"email": email}, label=cls.label)

        user = UserRepository.create(
            name=name,
            email=email,
            password=hash_password(password) if password else None,
            provider=provider,
            oauth_id=oauth_id,
            roles=resolved,
        )
        return cls._save(user, "created")

    @classmethod
    def update(
        cls,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        roles: Optional[Sequence] = None,
        provider: Optional[str] = None,
        oauth_id: Optional[str] = None,
    ) -> User:
        changes = {}
        name = clean_text(name)
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = cls._clean_email(email)
        if password:
            changes["password"] = hash_password(password)
        if provider is not None:
            validate_auth_provider(provider)
            changes["provider"] = provider
        if oauth_id is not None:
            changes["oauth_id"] = oauth_id
        if roles is not None:
            changes["roles"] = resolve_references(Role, roles, "roles")
        cls._require_changes(changes)

        user = cls.get(user_id, expand=())
        ensure_unique(User, {"email": changes.get("email")}, exclude_id=user.id, label=cls.label)
        UserRepository.update(user, **changes)
        return cls._save(user, "updated")

    @classmethod
    def effective_permissions(cls, user_id: int) -> List[str]:
        return sorted(cls._aggregator().for_user(user_id))

    @classmethod
    def get_with_permissions(cls, user_id: int, include_deleted: bool = False) -> dict:
        """User document with expanded roles and the sorted effective permission keys."""
        user = cls.get(user_id, include_deleted=include_deleted)
        doc = cls.to_document(user)
        doc["effectivePermissions"] = sorted(cls._aggregator().effective_permissions(user))
        return doc
