"""Domain error taxonomy.

Services raise these; the handlers registered in ``petcare.main`` turn them
into JSON responses. Messages are safe to show to clients.
"""
from typing import Any, Dict, List, Optional


class PetCareError(Exception):
    """Base class for all domain errors."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class ValidationError(PetCareError):
    """Malformed or missing input."""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        if errors is None:
            errors = [{"field": field, "msg": message, "type": "value_error"}]
        self.errors = errors


class AuthError(PetCareError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = 401
    error_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotFoundError(PetCareError):
    """Entity absent, or not accessible to the caller."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class ConflictError(PetCareError):
    """Duplicate unique value or an invalid state transition."""

    status_code = 409
    error_code = "CONFLICT"


class StoreError(PetCareError):
    """The persistence layer failed."""

    status_code = 500
    error_code = "STORE_ERROR"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
