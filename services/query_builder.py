# -*- coding: utf-8 -*-
"""
query_builder.py
--------------------------------------------------------------------
Generic list-query engine shared by every list endpoint.

- ListQuery: typed descriptor (page / limit / sort / filter / deleted
  visibility). Raw request values are coerced once, when it is built.
- ListConfig: per-entity defaults (sort field, soft-delete visibility).
- Expand: a reference field to inline into every returned document.
- QueryBuilder: count + windowed select against one model.
- Page: result with the {total, page, totalPages, <items>} envelope.

Database failures surface as StorageError. Nothing here retries or writes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import String, asc, cast, desc, false, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from utils.exceptions import StorageError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
ORDER_ASC = "asc"
ORDER_DESC = "desc"

# camelCase names used by existing clients
FIELD_ALIASES = {
    "_id": "id",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "isDeleted": "is_deleted",
}

_TRUE_VALUES = ("1", "true", "t", "yes", "on")
_FALSE_VALUES = ("0", "false", "f", "no", "off")


def parse_bool(raw) -> bool:
    """Query-string boolean; raises ValueError on anything unrecognised."""
    if isinstance(raw, bool):
        return raw
    low = str(raw).strip().lower()
    if low in _TRUE_VALUES:
        return True
    if low in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _to_int(raw, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _normalize_order(raw, default: str = ORDER_ASC) -> str:
    if raw is None:
        return default
    low = str(raw).strip().lower()
    return low if low in (ORDER_ASC, ORDER_DESC) else ORDER_ASC


def _text_or_none(raw) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw)
    return text if text.strip() else None


@dataclass(frozen=True)
class ListQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: Optional[str] = None
    order: str = ORDER_ASC
    filter_by: Optional[str] = None
    filter_term: Optional[str] = None
    # None -> entity default from ListConfig
    include_deleted: Optional[bool] = None
    # extra criteria used by the multi-field search
    filters: Tuple[Tuple[str, str], ...] = ()
    sort: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self):
        # page < 1 is read as the first page; limit < 1 as the default size
        object.__setattr__(self, "page", max(_to_int(self.page, DEFAULT_PAGE), 1))
        limit = _to_int(self.limit, DEFAULT_LIMIT)
        object.__setattr__(self, "limit", limit if limit >= 1 else DEFAULT_LIMIT)
        object.__setattr__(self, "order", _normalize_order(self.order))

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def criteria(self) -> List[Tuple[str, str]]:
        """Every (field, term) pair where both halves are present."""
        pairs = []
        if self.filter_by and self.filter_term:
            pairs.append((self.filter_by, self.filter_term))
        pairs.extend((f, t) for f, t in self.filters if f and t)
        return pairs

    @classmethod
    def from_args(cls, args: Mapping[str, Any], default_limit: int = DEFAULT_LIMIT) -> "ListQuery":
        """
        Build from query-string params (werkzeug MultiDict or plain dict):
          page, limit, sortBy, order, filterBy, filterTerm, includeDeleted
        Unparseable numbers fall back to defaults, as request.args.get(type=int) does.
        """
        include_raw = args.get("includeDeleted")
        include_deleted = None
        if include_raw is not None:
            try:
                include_deleted = parse_bool(include_raw)
            except ValueError:
                include_deleted = None
        return cls(
            page=_to_int(args.get("page"), DEFAULT_PAGE),
            limit=_to_int(args.get("limit"), default_limit),
            sort_by=_text_or_none(args.get("sortBy")),
            order=args.get("order") or ORDER_ASC,
            filter_by=_text_or_none(args.get("filterBy")),
            filter_term=_text_or_none(args.get("filterTerm")),
            include_deleted=include_deleted,
        )

    @classmethod
    def from_search(cls, body: Mapping[str, Any], default_limit: int = DEFAULT_LIMIT) -> "ListQuery":
        """
        Build from a search body:
          {"pagination": {"page", "limit"},
           "filters": [{"key", "term"}],
           "sort": [{"field", "order"}],
           "includeDeleted": bool}
        A sort entry without an order sorts descending.
        """
        pagination = body.get("pagination") or {}
        if not isinstance(pagination, Mapping):
            pagination = {}
        filters = []
        for item in body.get("filters") or []:
            if isinstance(item, Mapping):
                key, term = _text_or_none(item.get("key")), _text_or_none(item.get("term"))
                if key and term:
                    filters.append((key, term))
        sort = []
        for item in body.get("sort") or []:
            if isinstance(item, Mapping) and _text_or_none(item.get("field")):
                sort.append((str(item["field"]), _normalize_order(item.get("order"), ORDER_DESC)))
        include_deleted = body.get("includeDeleted")
        return cls(
            page=_to_int(pagination.get("page"), DEFAULT_PAGE),
            limit=_to_int(pagination.get("limit"), default_limit),
            filters=tuple(filters),
            sort=tuple(sort),
            include_deleted=include_deleted if isinstance(include_deleted, bool) else None,
        )

    def describe(self) -> Dict[str, Any]:
        """Normalised request echoed back by the search endpoint."""
        return {
            "pagination": {"page": self.page, "limit": self.limit},
            "filters": [{"key": k, "term": t} for k, t in self.criteria()],
            "sort": [{"field": f, "order": o} for f, o in self.sort],
        }


@dataclass(frozen=True)
class ListConfig:
    default_sort: str = "created_at"
    include_deleted: bool = False


DEFAULT_LIST_CONFIG = ListConfig()


@dataclass(frozen=True)
class Expand:
    """
    Inline the document(s) behind a reference field.

    select_fields limits the expanded document to id + those fields; nested
    expands references of the expanded document (User -> roles -> permissions).
    include_deleted=False drops soft-deleted referenced rows from the output.
    """
    field: str
    select_fields: Tuple[str, ...] = ()
    nested: Tuple["Expand", ...] = ()
    include_deleted: bool = True


@dataclass
class Page:
    total: int
    page: int
    limit: int
    items: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        if not self.total:
            return 0
        return math.ceil(self.total / self.limit)

    def to_envelope(self, items_key: str = "items") -> Dict[str, Any]:
        return {
            "total": self.total,
            "page": self.page,
            "totalPages": self.total_pages,
            items_key: self.items,
        }


def resolve_column(model, name: Optional[str]):
    """Column for a document field name, or None when it cannot be queried."""
    if not name:
        return None
    name = FIELD_ALIASES.get(name, name)
    if name in getattr(model, "__hidden_fields__", ()):
        return None
    return model.__table__.columns.get(name)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def loader_options(model, expand: Sequence[Expand], parent=None) -> list:
    """selectinload chains for the requested expansions, nested ones included."""
    options = []
    for spec in expand or ():
        attr = getattr(model, model.reference_attr(spec.field))
        loader = parent.selectinload(attr) if parent is not None else selectinload(attr)
        options.append(loader)
        if spec.nested:
            target = attr.property.mapper.class_
            options.extend(loader_options(target, spec.nested, loader))
    return options


class QueryBuilder:
    """Read-only; one instance per storage session."""

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def build_conditions(model, list_query: ListQuery, config: ListConfig = DEFAULT_LIST_CONFIG) -> list:
        conditions = []
        include_deleted = (
            list_query.include_deleted
            if list_query.include_deleted is not None
            else config.include_deleted
        )
        if not include_deleted and hasattr(model, "is_deleted"):
            conditions.append(model.is_deleted == False)  # noqa: E712
        for name, term in list_query.criteria():
            column = resolve_column(model, name)
            if column is None:
                # unknown field: no document can match
                conditions.append(false())
                continue
            conditions.append(
                cast(column, String).ilike(f"%{_escape_like(term)}%", escape="\\")
            )
        return conditions

    @staticmethod
    def build_order(model, list_query: ListQuery, config: ListConfig = DEFAULT_LIST_CONFIG) -> list:
        requested = list(list_query.sort) or [(list_query.sort_by, list_query.order)]
        clauses = []
        last_order = ORDER_ASC
        for name, order in requested:
            column = resolve_column(model, name)
            if column is None:
                column = resolve_column(model, config.default_sort)
            if column is None:
                continue
            direction = desc if order == ORDER_DESC else asc
            clauses.append(direction(column))
            last_order = order
        # id breaks ties so pages never overlap
        clauses.append(desc(model.id) if last_order == ORDER_DESC else asc(model.id))
        return clauses

    def query(
        self,
        model,
        list_query: ListQuery,
        expand: Sequence[Expand] = (),
        config: ListConfig = DEFAULT_LIST_CONFIG,
    ) -> Page:
        conditions = self.build_conditions(model, list_query, config)

        count_stmt = select(func.count()).select_from(model)
        stmt = select(model)
        if conditions:
            count_stmt = count_stmt.where(*conditions)
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(*self.build_order(model, list_query, config))
        stmt = stmt.offset(list_query.skip).limit(list_query.limit)
        options = loader_options(model, expand)
        if options:
            stmt = stmt.options(*options)

        try:
            total = self.session.execute(count_stmt).scalar() or 0
            rows = self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise StorageError(f"List query on {model.__tablename__} failed") from e

        return Page(
            total=total,
            page=list_query.page,
            limit=list_query.limit,
            items=[row.to_document(expand) for row in rows],
        )

    def find_one(
        self,
        model,
        doc_id,
        expand: Sequence[Expand] = (),
        include_deleted: bool = False,
    ):
        stmt = select(model).where(model.id == doc_id)
        if not include_deleted and hasattr(model, "is_deleted"):
            stmt = stmt.where(model.is_deleted == False)  # noqa: E712
        options = loader_options(model, expand)
        if options:
            stmt = stmt.options(*options)
        try:
            return self.session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"Lookup on {model.__tablename__} failed") from e

