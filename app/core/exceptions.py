"""
Domain errors raised by the visitor services.
Routers translate these into HTTP responses.
"""


class VisitorManagementError(Exception):
    """Base class for errors raised by the service layer."""


class DuplicateCredentialError(VisitorManagementError):
    """A QR token or OTP is already held by another visitor."""

    def __init__(self, field: str, value: str = None):
        self.field = field
        self.value = value
        if value is None:
            message = f"Could not issue a unique {field}"
        else:
            message = f"A visitor with {field} '{value}' already exists"
        super().__init__(message)
