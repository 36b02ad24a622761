"""Custom exception classes for the hiring API."""

from fastapi import status


class HiringApiError(Exception):
    """Base exception for the hiring API."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class RoleNotFoundError(HiringApiError):
    """Raised when a requested role does not exist."""
    pass


class RoleConflictError(HiringApiError):
    """Raised when a role id is already taken."""
    pass


class RoleValidationError(HiringApiError):
    """Raised when a role creation request fails validation."""
    pass


class FeatureDisabledError(HiringApiError):
    """Raised when an operation is switched off by a feature flag."""

    def __init__(
        self,
        feature: str,
        message: str = "This feature is currently disabled",
        status_code: int = status.HTTP_503_SERVICE_UNAVAILABLE,
    ):
        self.feature = feature
        self.status_code = status_code
        super().__init__(message)

