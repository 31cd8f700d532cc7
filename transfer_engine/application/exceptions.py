"""
Application layer exceptions.

Every error leaving a use case is an ``ApplicationError``. ``to_dict``
renders it in the same ``{success, data, message}`` shape the ledger uses,
so an embedding application can hand it to its own surface unchanged.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from transfer_engine.domain.value_objects.transfer_outcome import RejectionReason


def _details(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    default_code = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            message: Human-readable (Turkish) error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"

    def to_dict(self) -> dict[str, Any]:
        """Failure envelope: ``success`` false, code and details under ``data``."""
        return {
            "success": False,
            "data": {"code": self.error_code, **self.details},
            "message": self.message,
        }


class NotFoundError(ApplicationError):
    """Raised when an account named by the caller is not among the user's accounts."""

    default_code = "NOT_FOUND"

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            details=_details(resource_type=resource_type, resource_id=resource_id),
        )


class ValidationError(ApplicationError):
    """Raised when caller input cannot be turned into a request."""

    default_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
    ):
        """
        Initialize validation error.

        Args:
            message: Human-readable error message
            field: Field that failed validation
            value: Invalid value, stored as text
            constraint: Code of the violated constraint
        """
        super().__init__(
            message,
            details=_details(
                field=field,
                value=None if value is None else str(value),
                constraint=constraint,
            ),
        )


class BusinessRuleViolationError(ApplicationError):
    """Raised when a business rule is violated."""

    default_code = "BUSINESS_RULE_VIOLATION"

    def __init__(self, message: str = "Business rule violated", rule: Optional[str] = None):
        super().__init__(message, details=_details(rule=rule))


class TransferRejectedError(BusinessRuleViolationError):
    """
    Raised when the resolver rejects a transfer.

    ``reason`` is the resolver's RejectionReason; ``details["rule"]`` holds
    its wire value (e.g. ``"InsufficientFunds"``).
    """

    default_code = "TRANSFER_REJECTED"

    def __init__(self, reason: "RejectionReason", message: str):
        self.reason = reason
        super().__init__(message, rule=reason.value)


class ExternalServiceError(ApplicationError):
    """Raised when a call to the ledger (or another collaborator) fails."""

    default_code = "EXTERNAL_SERVICE_ERROR"

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ):
        """
        Initialize external service error.

        Args:
            message: Human-readable error message
            service: Name of the external service
            status_code: Transport status code if applicable
            error_code: Machine-readable error code
        """
        super().__init__(
            message,
            error_code,
            _details(service=service, status_code=status_code),
        )
