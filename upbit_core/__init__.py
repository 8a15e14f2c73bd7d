"""
upbit-core
==========
Signed request pipeline and client for the Upbit REST API.
"""

__version__ = "0.1.0"

# Config
from upbit_core.config import UpbitConfig

# Auth
from upbit_core.auth import (
    Credentials,
    TokenSigner,
    canonical_query_string,
    hash_query,
    decode_token,
    create_auth_headers,
)

# HTTP
from upbit_core.http import (
    BaseUpbitClient,
    RequestDescriptor,
    RequestPipeline,
    signing_middleware,
    ApiSuccess,
    ApiFailure,
    ApiResult,
)

# Client
from upbit_core.client import UpbitClient

# Errors
from upbit_core.exceptions import (
    UpbitError,
    ConfigurationError,
    ValidationError,
    ServiceUnavailableError,
    ServiceTimeoutError,
    ApiError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
)

# Logging
from upbit_core.logging import setup_logging, get_logger, mask_key

__all__ = [
    # Config
    "UpbitConfig",
    # Auth
    "Credentials",
    "TokenSigner",
    "canonical_query_string",
    "hash_query",
    "decode_token",
    "create_auth_headers",
    # HTTP
    "BaseUpbitClient",
    "RequestDescriptor",
    "RequestPipeline",
    "signing_middleware",
    "ApiSuccess",
    "ApiFailure",
    "ApiResult",
    # Client
    "UpbitClient",
    # Errors
    "UpbitError",
    "ConfigurationError",
    "ValidationError",
    "ServiceUnavailableError",
    "ServiceTimeoutError",
    "ApiError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    # Logging
    "setup_logging",
    "get_logger",
    "mask_key",
]
