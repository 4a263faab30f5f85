# -*- coding: utf-8 -*-
"""
__init__.py
--------------------------------------------------------------------
Imports every model in one place so that:
- Flask-Migrate/Alembic sees all tables.
- Callers can write: from models import TestPlan, Role
Models only import each other through relationship strings; keep the
imports here to avoid cycles.
"""

from .mixins import TimestampMixin, SoftDeleteMixin, DocumentMixin, BaseModelMixin
from .user import User, user_role
from .permission import Permission
from .role import Role, role_permission
from .project import Project
from .test_plan import TestPlan
from .test_step import TestStep
from .execution import TestStepExecution

__all__ = [
    "TimestampMixin", "SoftDeleteMixin", "DocumentMixin", "BaseModelMixin",
    "User", "user_role", "Permission", "Role", "role_permission",
    "Project", "TestPlan", "TestStep", "TestStepExecution",
]
