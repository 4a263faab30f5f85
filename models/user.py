# -*- coding: utf-8 -*-
"""
user.py
--------------------------------------------------------------------
User entity.
- roles: many-to-many with Role through user_role; effective permissions are
  derived from roles on every read, never stored.
- password holds a werkzeug hash; absent for OAuth-provisioned users
  (provider google / github with oauth_id).
"""

from extensions.database import db
from constants.execution import DEFAULT_AUTH_PROVIDER
from .mixins import BaseModelMixin, COMMON_TABLE_ARGS


user_role = db.Table(
    "user_role",
    db.Column("user_id", db.Integer, db.ForeignKey("user.id", ondelete="CASCADE"), primary_key=True),
    db.Column("role_id", db.Integer, db.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
)


class User(BaseModelMixin, db.Model):
    __tablename__ = "user"
    __table_args__ = (COMMON_TABLE_ARGS,)
    __references__ = {"roles": "roles"}
    __hidden_fields__ = ("password",)

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(120), nullable=False, unique=True, index=True)
    password = db.Column(db.String(255))
    provider = db.Column(db.String(16), nullable=False, default=DEFAULT_AUTH_PROVIDER,
                         server_default=DEFAULT_AUTH_PROVIDER)
    oauth_id = db.Column(db.String(128))

    roles = db.relationship(
        "Role",
        secondary=user_role,
        order_by="Role.id",
        backref=db.backref("users", lazy="select"),
    )

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"
