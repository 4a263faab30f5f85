# -*- coding: utf-8 -*-
"""
test_step.py
--------------------------------------------------------------------
TestStep: one action inside a TestPlan with its expected outcome.
"""

from extensions.database import db
from .mixins import BaseModelMixin, COMMON_TABLE_ARGS


class TestStep(BaseModelMixin, db.Model):
    __tablename__ = "test_step"
    __table_args__ = (COMMON_TABLE_ARGS,)
    __references__ = {"test_plan_id": "test_plan"}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    description = db.Column(db.Text)
    expected_result = db.Column(db.Text)
    test_plan_id = db.Column(db.Integer, db.ForeignKey("test_plan.id"), nullable=False, index=True)

    test_plan = db.relationship("TestPlan", back_populates="steps")
    executions = db.relationship("TestStepExecution", back_populates="test_step")
