from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from services.integrity import commit_or_conflict
from services.query_builder import DEFAULT_LIST_CONFIG, Expand, ListConfig, ListQuery, Page
from utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Read / list / soft delete / restore shared by every entity service.
    Subclasses set the repository, the label used in messages and the
    expansions applied to list and detail reads, then add create / update.
    """

    repository = None
    label = "Document"
    list_config: ListConfig = DEFAULT_LIST_CONFIG
    list_expand: Tuple[Expand, ...] = ()
    detail_expand: Tuple[Expand, ...] = ()

    @staticmethod
    def _require(data: Dict[str, Any], *names: str):
        missing = [n for n in names if data.get(n) in (None, "", [])]
        if missing:
            raise ValidationError(
                f"{' and '.join(missing)} {'is' if len(missing) == 1 else 'are'} required",
                data={"missing": missing},
            )

    @staticmethod
    def _require_changes(changes: Dict[str, Any]):
        if not changes:
            raise ValidationError("At least one field must be provided for update")

    @classmethod
    def get(cls, doc_id: int, include_deleted: bool = False, expand: Optional[Sequence[Expand]] = None):
        obj = cls.repository.get_by_id(
            doc_id,
            include_deleted=include_deleted,
            expand=cls.detail_expand if expand is None else expand,
        )
        if obj is None:
            raise NotFoundError(f"{cls.label} not found")
        return obj

    @classmethod
    def to_document(cls, obj) -> Dict[str, Any]:
        return obj.to_document(cls.detail_expand)

    @classmethod
    def list(cls, list_query: ListQuery) -> Page:
        return cls.repository.list(list_query, expand=cls.list_expand, config=cls.list_config)

    @classmethod
    def _save(cls, obj, action: str):
        commit_or_conflict(cls.label)
        logger.info("%s %s id=%s", cls.label, action, obj.id)
        return obj

    @classmethod
    def delete(cls, doc_id: int):
        obj = cls.get(doc_id, expand=())
        cls.repository.soft_delete(obj)
        return cls._save(obj, "soft deleted")

    @classmethod
    def restore(cls, doc_id: int):
        obj = cls.repository.get_by_id(doc_id, include_deleted=True)
        if obj is None or not obj.is_deleted:
            raise NotFoundError(f"{cls.label} not found")
        cls.repository.restore(obj)
        return cls._save(obj, "restored")
