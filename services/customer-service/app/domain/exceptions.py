"""
Custom exceptions for the customer service domain.

A missing customer is not an error: repository lookups return ``None``
for it. These exceptions cover malformed input and storage failures only.
"""

from typing import Any, Optional


class CustomerServiceException(Exception):
    """Base exception for all customer service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidIdentifierException(CustomerServiceException):
    """Raised when a customer identifier cannot be parsed."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Invalid customer identifier: {identifier}",
            details={"identifier": identifier},
        )


class ValidationException(CustomerServiceException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )


class StorageException(CustomerServiceException):
    """Raised when the document store is unreachable or rejects an operation."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Storage {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )


class DataIntegrityException(CustomerServiceException):
    """Raised when a stored document is missing required fields."""

    def __init__(self, entity: str, reason: str):
        message = f"Data integrity error for {entity}: {reason}"
        super().__init__(message=message, details={"entity": entity, "reason": reason})
