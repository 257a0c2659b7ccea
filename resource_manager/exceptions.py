"""
Application errors.

Raise these from services and decorators instead of building responses by
hand; the handler registered in ``create_app`` turns them into the standard
``{status, message, data}`` envelope with the matching HTTP status code.

Usage:
    from resource_manager.exceptions import NotFoundError

    if engineer is None:
        raise NotFoundError("Engineer not found")
"""

from typing import Any, Optional


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, data: Any = None):
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)


# ============================================
# Client errors (400)
# ============================================

class ValidationError(ApiError):
    """A required field is missing or a value is malformed"""

    status_code = 400
    default_message = "Invalid request data"


class ConflictError(ApiError):
    """The resource already exists (e.g. duplicate email on signup)"""

    status_code = 400
    default_message = "Resource already exists"


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(ApiError):
    """Missing, malformed or expired bearer token"""

    status_code = 401
    default_message = "Authentication required please provide a token"


class AuthorizationError(ApiError):
    """Credentials were checked and rejected"""

    status_code = 401
    default_message = "Not authorized"


# ============================================
# Resource Errors (404-type)
# ============================================

class NotFoundError(ApiError):
    """Entity looked up by id does not exist"""

    status_code = 404
    default_message = "Resource not found"
