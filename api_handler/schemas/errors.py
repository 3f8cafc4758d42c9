"""
Error taxonomy for the API handler.

Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes surfaced to callers."""

    NETWORK_ERROR = "NETWORK_ERROR"


DEFAULT_ERROR_MESSAGE = "An error occurred while making the request."


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class ApiError(BaseModel):
    """
    Structured error shape returned to callers that prefer data over exceptions.

    `details` holds the original failure object unmodified, so arbitrary
    types are allowed.
    """

    model_config = ConfigDict(
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.NETWORK_ERROR],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: Any = Field(
        default=None,
        description="Original failure that caused this error",
    )

    def to_exception(self) -> "ApiHandlerException":
        """Convert this error model to a raisable exception."""
        if self.code == ErrorCodes.NETWORK_ERROR:
            return NetworkException(message=self.message, details=self.details)
        return ApiHandlerException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ApiHandlerException(Exception):
    """
    Base exception for all API handler errors.

    Carries the same three fields as ApiError and converts to it.
    """

    def __init__(
        self,
        message: str,
        code: str = "API_HANDLER_ERROR",
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def to_error_model(self) -> ApiError:
        """Convert this exception to an ApiError model."""
        return ApiError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class NetworkException(ApiHandlerException):
    """Raised for any failure while performing or decoding a request."""

    def __init__(
        self,
        message: str | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(
            message=message or DEFAULT_ERROR_MESSAGE,
            code=ErrorCodes.NETWORK_ERROR,
            details=details,
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> "NetworkException":
        """Wrap an arbitrary failure, keeping it as `details`."""
        return cls(message=str(exc) or None, details=exc)
