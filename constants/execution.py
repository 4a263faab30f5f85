# -*- coding: utf-8 -*-
"""constants/execution.py
--------------------------------------------------------------------
Enumerations for test step executions and user identity providers.

- ExecutionStatus: result of running a single test step.
- AuthProvider: where a user's identity comes from.
Both expose values() plus validate_* helpers for the service layer.
"""

from enum import Enum

from utils.exceptions import ValidationError


class ExecutionStatus(Enum):
    NOT_EXECUTED = "not_executed"
    PASS = "pass"
    FAIL = "fail"
    SKIPPED = "skipped"

    @classmethod
    def values(cls) -> list[str]:
        return [m.value for m in cls]


DEFAULT_EXECUTION_STATUS = ExecutionStatus.NOT_EXECUTED.value


class AuthProvider(Enum):
    LOCAL = "local"
    GOOGLE = "google"
    GITHUB = "github"

    @classmethod
    def values(cls) -> list[str]:
        return [m.value for m in cls]


DEFAULT_AUTH_PROVIDER = AuthProvider.LOCAL.value


def validate_execution_status(status: str):
    if status not in ExecutionStatus.values():
        raise ValidationError(
            f"status must be one of {ExecutionStatus.values()}",
            data={"field": "status"},
        )


def validate_auth_provider(provider: str):
    if provider not in AuthProvider.values():
        raise ValidationError(
            f"provider must be one of {AuthProvider.values()}",
            data={"field": "provider"},
        )
