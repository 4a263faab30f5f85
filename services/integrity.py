# -*- coding: utf-8 -*-
"""
integrity.py
--------------------------------------------------------------------
Uniqueness and reference checks run by every create / update before any
write is issued. The database has unique constraints but no soft-delete
aware foreign keys, so references are resolved here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions.database import db
from utils.exceptions import ConflictError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def _parse_id(raw) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    return None


def ensure_unique(model, values: Dict[str, Any], exclude_id: Optional[int] = None, label: str = None):
    """
    Raise ConflictError when another row already holds one of ``values``.
    Soft-deleted rows count: the unique constraints cover them too.
    """
    label = label or model.__name__
    for name, value in values.items():
        if value is None:
            continue
        stmt = select(model.id).where(getattr(model, name) == value)
        if exclude_id is not None:
            stmt = stmt.where(model.id != exclude_id)
        try:
            taken = db.session.execute(stmt.limit(1)).first()
        except SQLAlchemyError as e:
            raise StorageError("Uniqueness check failed") from e
        if taken:
            logger.info("conflict on %s.%s=%r", model.__tablename__, name, value)
            raise ConflictError(f"{label} {name} already exists", data={"field": name})


def resolve_reference(model, raw_id, field: str):
    """The live row referenced by ``raw_id`` or ValidationError."""
    return resolve_references(model, [raw_id], field)[0]


def resolve_references(model, raw_ids: Sequence[Any], field: str) -> List[Any]:
    """
    Resolve every id to an existing, non-deleted row.
    All-or-nothing: one bad id rejects the whole list, and the error lists
    each offending value.
    """
    if raw_ids is None:
        return []
    if not isinstance(raw_ids, (list, tuple)):
        raise ValidationError(f"{field} must be a list of ids", data={"field": field})

    parsed: List[int] = []
    invalid: List[Any] = []
    for raw in raw_ids:
        ref_id = _parse_id(raw)
        if ref_id is None:
            invalid.append(raw)
        elif ref_id not in parsed:
            parsed.append(ref_id)

    found = {}
    if parsed:
        stmt = select(model).where(model.id.in_(parsed), model.is_deleted == False)  # noqa: E712
        try:
            found = {row.id: row for row in db.session.execute(stmt).scalars()}
        except SQLAlchemyError as e:
            raise StorageError(f"Resolving {field} failed") from e
    invalid.extend(ref_id for ref_id in parsed if ref_id not in found)

    if invalid:
        raise ValidationError(
            f"Invalid {field} provided",
            data={"field": field, "invalid": invalid},
        )
    return [found[ref_id] for ref_id in parsed]


def commit_or_conflict(label: str):
    """
    Commit the session. A unique violation raised by the database (two
    concurrent writers both passed ensure_unique) becomes ConflictError.
    """
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.warning("commit of %s hit a constraint: %s", label, e.orig)
        raise ConflictError(f"{label} violates a unique constraint")
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("commit of %s failed", label)
        raise StorageError("Database error") from e
