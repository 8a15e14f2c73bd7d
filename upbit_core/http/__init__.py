from .client import BaseUpbitClient
from .descriptor import RequestDescriptor
from .pipeline import Middleware, RequestPipeline, signing_middleware
from .result import ApiFailure, ApiResult, ApiSuccess

__all__ = [
    "BaseUpbitClient",
    "RequestDescriptor",
    "Middleware",
    "RequestPipeline",
    "signing_middleware",
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
]
