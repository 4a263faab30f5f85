# -*- coding: utf-8 -*-
"""
execution.py
--------------------------------------------------------------------
TestStepExecution: one recorded run of a TestStep.
- status: not_executed / pass / fail / skipped (constants.execution).
- executed_by is optional; automated runs may have no user.
- executed_at defaults to the insert time and can be backdated.
"""

from extensions.database import db
from constants.execution import DEFAULT_EXECUTION_STATUS
from utils.datetime_helpers import utcnow
from .mixins import BaseModelMixin, COMMON_TABLE_ARGS


class TestStepExecution(BaseModelMixin, db.Model):
    __tablename__ = "test_step_execution"
    __table_args__ = (
        db.Index("ix_test_step_execution_step_status", "test_step_id", "status"),
        COMMON_TABLE_ARGS,
    )
    __references__ = {
        "test_step_id": "test_step",
        "executed_by": "executor",
    }

    id = db.Column(db.Integer, primary_key=True)
    test_step_id = db.Column(db.Integer, db.ForeignKey("test_step.id"), nullable=False)
    executed_by = db.Column(db.Integer, db.ForeignKey("user.id"))
    executed_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    status = db.Column(db.String(32), nullable=False, default=DEFAULT_EXECUTION_STATUS,
                       server_default=DEFAULT_EXECUTION_STATUS)
    actual_result = db.Column(db.Text)
    notes = db.Column(db.Text)

    test_step = db.relationship("TestStep", back_populates="executions")
    executor = db.relationship("User", backref=db.backref("executions", passive_deletes=True))
