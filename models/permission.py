# -*- coding: utf-8 -*-
"""
permission.py
--------------------------------------------------------------------
Permission: leaf entity. `key` is the short machine code (e.g. "vwprj"),
`name` the human label; both are globally unique.
"""

from extensions.database import db
from .mixins import BaseModelMixin, COMMON_TABLE_ARGS


class Permission(BaseModelMixin, db.Model):
    __tablename__ = "permission"
    __table_args__ = (COMMON_TABLE_ARGS,)

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(32), nullable=False, unique=True)
    name = db.Column(db.String(128), nullable=False, unique=True)
    description = db.Column(db.Text, nullable=False)

    def __repr__(self):
        return f"<Permission id={self.id} key={self.key}>"
