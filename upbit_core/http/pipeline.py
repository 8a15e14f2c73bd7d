"""
Request Pipeline
================
Outbound middleware, dispatch and outcome classification for API calls.
"""

import json
from typing import Any, Callable, Optional, Sequence

import httpx
import structlog

from ..auth.headers import create_auth_headers
from ..auth.query import clean_params
from ..auth.token import TokenSigner
from ..exceptions import ServiceTimeoutError, ServiceUnavailableError, UpbitError
from .descriptor import RequestDescriptor
from .result import ApiFailure, ApiResult, ApiSuccess

Middleware = Callable[[RequestDescriptor], RequestDescriptor]

ERROR_STATUS_THRESHOLD = 400


def signing_middleware(signer: TokenSigner) -> Middleware:
    """
    Build the middleware that attaches a bearer assertion to every call.

    The cleaned ``params`` is what gets signed, the same value the pipeline
    later transmits as query or body.
    """
    def sign(descriptor: RequestDescriptor) -> RequestDescriptor:
        params = clean_params(descriptor.params) or None
        return descriptor.with_headers(create_auth_headers(signer, params))

    return sign


def _response_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


class RequestPipeline:
    """
    Applies middleware, dispatches through httpx and classifies the response.

    Holds no per-call state, so concurrent calls need no coordination.
    Transport failures (timeouts, refused connections) are raised; HTTP
    error statuses come back as ``ApiFailure``.
    """

    def __init__(
        self,
        transport: httpx.AsyncClient,
        middleware: Sequence[Middleware] = (),
        logger: Optional[Any] = None,
    ):
        self.transport = transport
        self.middleware = tuple(middleware)
        self.logger = logger or structlog.get_logger("upbit_core.http")

    def prepare(self, descriptor: RequestDescriptor) -> RequestDescriptor:
        """Run every outbound middleware in order."""
        for step in self.middleware:
            descriptor = step(descriptor)
        return descriptor

    def build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        return self.transport.build_request(
            descriptor.method,
            descriptor.url,
            headers=dict(descriptor.headers),
            json=descriptor.body(),
        )

    def classify(self, response: httpx.Response) -> ApiResult:
        """Unwrap successful bodies; hand back error responses as data."""
        body = _response_body(response)
        if response.status_code < ERROR_STATUS_THRESHOLD:
            return ApiSuccess(status_code=response.status_code, data=body)
        return ApiFailure(
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
        )

    def _map_exception(self, exc: httpx.HTTPError) -> UpbitError:
        """Map httpx exceptions to upbit-core exceptions."""
        if isinstance(exc, httpx.TimeoutException):
            return ServiceTimeoutError("Request timed out")
        if isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
            return ServiceUnavailableError(f"Failed to connect: {str(exc)}")
        return UpbitError(f"Unexpected transport error: {str(exc)}")

    async def send(self, descriptor: RequestDescriptor) -> ApiResult:
        """
        Execute one call.

        Args:
            descriptor: The call as built by the endpoint method

        Returns:
            ApiSuccess or ApiFailure

        Raises:
            ConfigurationError: If signing fails
            ServiceUnavailableError: On transport failures
        """
        prepared = self.prepare(descriptor)
        request = self.build_request(prepared)

        self.logger.info(
            "Upbit request",
            method=prepared.method,
            url=str(request.url),
            payload=dict(prepared.params) if prepared.params else None,
        )

        try:
            response = await self.transport.send(request)
        except httpx.HTTPError as e:
            self.logger.warning(
                "Upbit request failed",
                method=prepared.method,
                path=prepared.path,
                error=str(e),
            )
            raise self._map_exception(e) from e

        result = self.classify(response)
        self.logger.info(
            "Upbit response",
            status_code=response.status_code,
            body=result.data if isinstance(result, ApiSuccess) else result.body,
        )
        return result
