# src/hello_service/exceptions.py

"""
Shared custom exceptions for the hello service.

Exception Hierarchy:
- HelloServiceError (base)
  - ConfigurationError
  - ResponseSerializationError
  - InvalidResponseError
"""

from typing import Any, Dict, Optional


class HelloServiceError(Exception):
    """Base exception for all hello service errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}
        self.correlation_id = correlation_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "correlation_id": self.correlation_id,
        }


class ConfigurationError(HelloServiceError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


class ResponseSerializationError(HelloServiceError):
    """Raised when the response body cannot be rendered as JSON."""

    def __init__(self, reason: str, **kwargs):
        message = f"Response body is not JSON-serializable: {reason}"
        context = {"reason": reason}
        if "context" in kwargs:
            context.update(kwargs.pop("context"))
        super().__init__(
            message, error_code="RESPONSE_SERIALIZATION_FAILED", context=context, **kwargs
        )


class InvalidResponseError(HelloServiceError):
    """Raised when a response envelope does not have the expected shape."""

    def __init__(self, message: str, **kwargs):
        if "error_code" not in kwargs:
            kwargs["error_code"] = "INVALID_RESPONSE"
        super().__init__(message, **kwargs)


def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, HelloServiceError):
        return error.to_dict()
    return {
        "error_type": error.__class__.__name__,
        "message": str(error),
    }
