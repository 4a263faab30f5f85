from __future__ import annotations

from typing import Any, Optional, Sequence

from extensions.database import db
from services.query_builder import (
    DEFAULT_LIST_CONFIG,
    Expand,
    ListConfig,
    ListQuery,
    Page,
    QueryBuilder,
)
from utils.datetime_helpers import utcnow


class DocumentRepository:
    """
    Persistence for one model.
    - Pure reads and writes; business rules live in the services.
    - Writes never commit; the service commits once per operation.
    """

    model = None

    @classmethod
    def _builder(cls) -> QueryBuilder:
        return QueryBuilder(db.session)

    @classmethod
    def create(cls, **fields) -> Any:
        obj = cls.model(**fields)
        db.session.add(obj)
        return obj

    @classmethod
    def get_by_id(
        cls,
        doc_id: int,
        include_deleted: bool = False,
        expand: Sequence[Expand] = (),
    ) -> Optional[Any]:
        return cls._builder().find_one(cls.model, doc_id, expand=expand, include_deleted=include_deleted)

    @classmethod
    def list(
        cls,
        list_query: ListQuery,
        expand: Sequence[Expand] = (),
        config: ListConfig = DEFAULT_LIST_CONFIG,
    ) -> Page:
        return cls._builder().query(cls.model, list_query, expand=expand, config=config)

    @staticmethod
    def update(obj, **fields):
        for name, value in fields.items():
            setattr(obj, name, value)
        # association-only or same-value changes issue no UPDATE, so onupdate never fires
        if fields:
            obj.updated_at = utcnow()
        return obj

    @staticmethod
    def soft_delete(obj):
        obj.soft_delete()
        db.session.flush()

    @staticmethod
    def restore(obj):
        obj.restore()
        db.session.flush()

