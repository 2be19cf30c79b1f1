"""Domain exceptions for the Pixico application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PixicoException(Exception):
    """Base exception for all Pixico application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PixicoException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(PixicoException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(PixicoException):
    """Raised when the user lacks the role required for the operation."""

    def __init__(
        self,
        required_role: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional required role and message.

        Args:
            required_role: Role the operation needs (e.g. 'admin').
            message: Human-readable message; replaced when required_role is given.
        """
        details: dict[str, Any] = {}
        if required_role:
            message = f"Forbidden: {required_role} access required"
            details["required_role"] = required_role
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(PixicoException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'prompt', 'blog').
            resource_id: The ID or slug that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateResourceException(PixicoException):
    """Raised when a unique field (slug, email, prompt code) is already taken."""

    def __init__(self, resource_type: str, field: str, value: str) -> None:
        super().__init__(
            f"{resource_type} with {field} '{value}' already exists",
            "DUPLICATE_RESOURCE",
            {"resource_type": resource_type, "field": field, "value": value},
        )


class PromptCodeExhaustedException(PixicoException):
    """Raised when no free 4-digit prompt code could be allocated."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            "Could not allocate a unique prompt code",
            "PROMPT_CODE_EXHAUSTED",
            {"attempts": attempts},
        )


class ServiceNotConfiguredException(PixicoException):
    """Raised when an operation needs an external service that is not configured."""

    def __init__(self, service: str, message: str | None = None) -> None:
        super().__init__(
            message or f"{service} is not configured",
            "SERVICE_UNAVAILABLE",
            {"service": service},
        )


class UpstreamServiceException(PixicoException):
    """Raised when a third-party API (e.g. the LLM provider) fails."""

    def __init__(self, service: str, reason: str, status_code: int | None = None) -> None:
        details: dict[str, Any] = {"service": service, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"{service} request failed: {reason}",
            "UPSTREAM_ERROR",
            details,
        )
