# utils/exceptions.py
from typing import Any, Optional
from werkzeug.exceptions import HTTPException


class BizError(HTTPException):
    code: int  # HTTP status
    message: str  # human readable message
    data: Optional[Any]  # extra payload (field names, invalid ids, ...)
    error: str = "biz_error"  # machine readable kind

    def __init__(self, message: str = "Business error", code: int = 400, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(description=message)


class ValidationError(BizError):
    """Missing required field, unresolved reference or empty partial update."""
    error = "validation_error"

    def __init__(self, message: str = "Validation failed", data: Any = None):
        super().__init__(message, code=400, data=data)


class NotFoundError(BizError):
    error = "not_found"

    def __init__(self, message: str = "Not found", data: Any = None):
        super().__init__(message, code=404, data=data)


class ConflictError(BizError):
    """A unique field (name / key / email) is already taken."""
    error = "conflict"

    def __init__(self, message: str = "Conflict", data: Any = None):
        super().__init__(message, code=409, data=data)


class StorageError(BizError):
    """The database call itself failed; never retried here."""
    error = "storage_error"

    def __init__(self, message: str = "Database error", data: Any = None):
        super().__init__(message, code=500, data=data)
