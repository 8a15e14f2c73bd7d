import httpx
from typing import Any, Dict, Optional, Sequence

from ..auth.models import Credentials
from ..auth.token import TokenSigner
from ..config import DEFAULT_BASE_URL
from ..logging import mask_key
from .descriptor import RequestDescriptor
from .pipeline import Middleware, RequestPipeline, signing_middleware
from .result import ApiResult


class BaseUpbitClient:
    """
    Async HTTP client that signs every call with the holder's credentials.

    Features:
    - Per-request JWT assertion bound to the exact parameters sent.
    - Connection pooling (via httpx.AsyncClient).
    - Explicit ApiSuccess / ApiFailure results instead of raised HTTP errors.

    Each instance owns its credentials, so clients for several accounts can
    run side by side.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        middleware: Sequence[Middleware] = (),
        logger: Optional[Any] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._signer = TokenSigner(Credentials(access_key=access_key, secret_key=secret_key))

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )
        # Signing runs last so extra middleware cannot change params after they are hashed
        self.pipeline = RequestPipeline(
            self.client,
            middleware=[*middleware, signing_middleware(self._signer)],
            logger=logger,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(access_key={mask_key(self.access_key)!r}, base_url={self.base_url!r})"

    @property
    def access_key(self) -> str:
        return self._signer.credentials.access_key

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiResult:
        return await self.pipeline.send(RequestDescriptor(method=method, path=path, params=params))

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResult:
        return await self.request("GET", path, params)

    async def post(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResult:
        return await self.request("POST", path, params)

    async def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResult:
        return await self.request("DELETE", path, params)
