from typing import Optional, Any


class UpbitError(Exception):
    """Base exception for all upbit-core errors."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(f"{message} (Status: {status_code})" if status_code else message)


class ConfigurationError(UpbitError):
    """Raised when credentials cannot be used for signing."""
    pass


class ValidationError(UpbitError):
    """Raised when request parameters are rejected before any network call."""
    pass


class ServiceUnavailableError(UpbitError):
    """Raised when Upbit is unreachable or answers with a 5xx."""
    pass


class ServiceTimeoutError(ServiceUnavailableError):
    """Raised specifically on timeouts."""
    pass


class ApiError(UpbitError):
    """Raised from a failed result when the caller asks for it."""
    pass


class AuthenticationError(ApiError):
    """Raised when Upbit rejects the token (401/403)."""
    pass


class NotFoundError(ApiError):
    """Raised when the requested resource is not found (404)."""
    pass


class RateLimitError(ApiError):
    """Raised when Upbit throttles the caller (429)."""
    pass
