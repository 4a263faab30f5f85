# -*- coding: utf-8 -*-
"""
role.py
--------------------------------------------------------------------
Role: a named bundle of Permissions (many-to-many through role_permission).
name and key are globally unique.
"""

from extensions.database import db
from .mixins import BaseModelMixin, COMMON_TABLE_ARGS


role_permission = db.Table(
    "role_permission",
    db.Column("role_id", db.Integer, db.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
    db.Column("permission_id", db.Integer, db.ForeignKey("permission.id", ondelete="CASCADE"), primary_key=True),
)


class Role(BaseModelMixin, db.Model):
    __tablename__ = "role"
    __table_args__ = (COMMON_TABLE_ARGS,)
    __references__ = {"permissions": "permissions"}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False, unique=True)
    key = db.Column(db.String(32), nullable=False, unique=True)
    description = db.Column(db.Text)

    permissions = db.relationship(
        "Permission",
        secondary=role_permission,
        order_by="Permission.id",
        backref=db.backref("roles", lazy="select"),
    )

    def __repr__(self):
        return f"<Role id={self.id} key={self.key}>"
