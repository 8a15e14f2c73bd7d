"""
Call Results
============
Explicit outcome of a pipeline call: success payload or structured failure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from ..exceptions import (
    ApiError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    UpbitError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    """Response with status below 400, body already unwrapped."""
    status_code: int
    data: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.data

    def raise_for_status(self) -> "ApiSuccess[T]":
        return self


@dataclass(frozen=True)
class ApiFailure:
    """Response with status 400 or above, returned rather than raised."""
    status_code: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False

    @property
    def error_name(self) -> Optional[str]:
        """Upbit error code, e.g. ``invalid_query_payload``."""
        error = self.body.get("error") if isinstance(self.body, dict) else None
        return error.get("name") if isinstance(error, dict) else None

    @property
    def error_message(self) -> Optional[str]:
        error = self.body.get("error") if isinstance(self.body, dict) else None
        return error.get("message") if isinstance(error, dict) else None

    def to_exception(self) -> UpbitError:
        """Map the failure onto the exception hierarchy."""
        status = self.status_code
        message = self.error_message or f"HTTP {status} Error"
        if status in (401, 403):
            return AuthenticationError(message, status_code=status, details=self.body)
        if status == 404:
            return NotFoundError(message, status_code=status, details=self.body)
        if status == 429:
            return RateLimitError(message, status_code=status, details=self.body)
        if status >= 500:
            return ServiceUnavailableError(message, status_code=status, details=self.body)
        return ApiError(message, status_code=status, details=self.body)

    def raise_for_status(self):
        raise self.to_exception()

    def unwrap(self):
        raise self.to_exception()


ApiResult = Union[ApiSuccess[T], ApiFailure]
