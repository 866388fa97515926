"""Domain error codes shared by every app."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    INVALID_ENTITY_ID = "INVALID_ENTITY_ID"
    INVALID_PHONE_NUMBER = "INVALID_PHONE_NUMBER"
    PAYMENT_GATEWAY_ERROR = "PAYMENT_GATEWAY_ERROR"
    PAYMENT_NOT_FOUND = "PAYMENT_NOT_FOUND"
    STORAGE_QUOTA_EXCEEDED = "STORAGE_QUOTA_EXCEEDED"
    FILE_REJECTED = "FILE_REJECTED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EntityNotFoundError(DomainError):
    """Raised when a record is not found."""

    def __init__(self, topic: str, entity_id: str) -> None:
        super().__init__(
            code=ErrorCode.ENTITY_NOT_FOUND,
            message=f"{topic.capitalize()} record not found",
        )
        object.__setattr__(self, "entity_id", entity_id)


class InvalidEntityIdError(DomainError):
    """Raised when a record ID is malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ENTITY_ID,
            message="Invalid ID format",
        )


class InvalidPhoneNumberError(DomainError):
    """Raised when a phone number is not a valid Kenyan MSISDN."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PHONE_NUMBER,
            message="Please enter a valid Kenyan phone number (e.g., 0712345678 or 254712345678)",
        )


class PaymentGatewayError(DomainError):
    """Raised when the mobile-money gateway rejects or fails a call."""

    def __init__(self, message: str = "Payment service unavailable") -> None:
        super().__init__(code=ErrorCode.PAYMENT_GATEWAY_ERROR, message=message)


class PaymentNotFoundError(DomainError):
    """Raised when no payment flow matches a checkout request id."""

    def __init__(self, checkout_request_id: str) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_NOT_FOUND,
            message="Payment request not found",
        )
        object.__setattr__(self, "checkout_request_id", checkout_request_id)


class StorageQuotaExceededError(DomainError):
    """Raised when an upload would not fit in the local file store."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_QUOTA_EXCEEDED,
            message="Not enough storage space for this file",
        )


class FileRejectedError(DomainError):
    """Raised when an upload fails type or size checks."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.FILE_REJECTED, message=message)
