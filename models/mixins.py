# models/mixins.py
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from sqlalchemy import func, DateTime
from extensions.database import db
from utils.datetime_helpers import utcnow, datetime_to_iso
from datetime import datetime

COMMON_TABLE_ARGS = {
    "mysql_engine": "InnoDB",
    "mysql_charset": "utf8mb4",
    "mysql_collate": "utf8mb4_unicode_ci",
}


class TimestampMixin:
    created_at = db.Column(DateTime, nullable=False, default=utcnow, server_default=func.now(), index=True)
    updated_at = db.Column(
        DateTime, nullable=False, default=utcnow, server_default=func.now(), onupdate=utcnow, index=True
    )


class SoftDeleteMixin:
    """Soft delete: rows are flagged, never removed."""
    is_deleted = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default="0",
        index=True,
        comment="soft delete flag"
    )
    deleted_at = db.Column(
        DateTime,
        comment="soft delete time"
    )

    def soft_delete(self):
        self.is_deleted = True
        self.deleted_at = utcnow()

    def restore(self):
        self.is_deleted = False
        self.deleted_at = None


def _serialize_value(value):
    if isinstance(value, datetime):
        return datetime_to_iso(value)
    return value


class DocumentMixin:
    """
    Renders a row as a plain document (dict).

    __references__ maps a document field to the relationship holding the
    referenced row(s), e.g. {"project_id": "project"} or {"roles": "roles"}.
    Unexpanded, a reference renders as the id (or list of ids); expanded, it is
    replaced by the referenced document(s).

    __hidden_fields__ never leave the model and cannot be filtered or sorted on.
    """

    __references__: Dict[str, str] = {}
    __hidden_fields__: Tuple[str, ...] = ()

    @classmethod
    def reference_attr(cls, field: str) -> str:
        try:
            return cls.__references__[field]
        except KeyError:
            raise ValueError(f"{cls.__name__} has no reference field {field!r}")

    def to_document(self, expand: Sequence[Any] = (), fields: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        :param expand: expansion specs (field / select_fields / nested /
            include_deleted), see services.query_builder.Expand
        :param fields: restrict the output to ``id`` plus these fields
        """
        wanted = set(fields) if fields else None
        doc: Dict[str, Any] = {}
        for column in self.__table__.columns:
            key = column.key
            if key in self.__hidden_fields__:
                continue
            if wanted is not None and key != "id" and key not in wanted:
                continue
            doc[key] = _serialize_value(getattr(self, key))

        for field, rel in self.__references__.items():
            if field in doc or (wanted is not None and field not in wanted):
                continue
            value = getattr(self, rel)
            if isinstance(value, (list, tuple, set)):
                # soft-deleted members are dropped; a single reference keeps its id
                doc[field] = [item.id for item in value if not getattr(item, "is_deleted", False)]
            else:
                doc[field] = value.id if value is not None else None

        for spec in expand or ():
            doc[spec.field] = self._expand_reference(spec)
        return doc

    def _expand_reference(self, spec):
        value = getattr(self, self.reference_attr(spec.field))
        select_fields = spec.select_fields or None

        def visible(row):
            return spec.include_deleted or not getattr(row, "is_deleted", False)

        if isinstance(value, (list, tuple, set)):
            return [
                row.to_document(spec.nested, select_fields)
                for row in value
                if visible(row)
            ]
        if value is None or not visible(value):
            return None
        return value.to_document(spec.nested, select_fields)


# Base for every persisted entity
class BaseModelMixin(DocumentMixin, TimestampMixin, SoftDeleteMixin):
    pass
