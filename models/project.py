# -*- coding: utf-8 -*-
"""
project.py
--------------------------------------------------------------------
Project: the root entity. Owns nothing, referenced by TestPlan.project_id.
"""

from extensions.database import db
from .mixins import BaseModelMixin, COMMON_TABLE_ARGS


class Project(BaseModelMixin, db.Model):
    __tablename__ = "project"
    __table_args__ = (COMMON_TABLE_ARGS,)

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text)

    test_plans = db.relationship("TestPlan", back_populates="project")

    def __repr__(self):
        return f"<Project id={self.id} name={self.name}>"
