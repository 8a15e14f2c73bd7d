"""
Upbit Client
============
Endpoint methods over the signing pipeline.

Every method validates its arguments before any network call, then issues
exactly one signed request. Successful payloads are parsed into pydantic
models; error responses come back as ``ApiFailure`` untouched.
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import TypeAdapter
from pydantic import ValidationError as ModelValidationError

from .config import UpbitConfig
from .exceptions import ApiError, ValidationError
from .http.client import BaseUpbitClient
from .http.result import ApiResult, ApiSuccess
from .models import (
    Account,
    ApiKey,
    DepositAddress,
    MarketCode,
    MinuteCandle,
    Order,
    OrderChance,
    WalletStatus,
)

MINUTE_CANDLE_UNITS = (1, 3, 5, 10, 30, 60, 240)
MAX_CANDLE_COUNT = 200
ORDER_SIDES = ("bid", "ask")
ORDER_TYPES = ("limit", "price", "market")
# "price" is a market buy, "market" a market sell
MARKET_ORDER_SIDES = {"price": "bid", "market": "ask"}


def _parse(result: ApiResult, model: Any) -> ApiResult:
    if not isinstance(result, ApiSuccess) or result.data is None:
        return result
    try:
        data = TypeAdapter(model).validate_python(result.data)
    except ModelValidationError as e:
        raise ApiError(
            "Unexpected response payload",
            status_code=result.status_code,
            details=result.data,
        ) from e
    return ApiSuccess(status_code=result.status_code, data=data)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class UpbitClient(BaseUpbitClient):
    """
    Client for the Upbit REST API.

    Usage:
        async with UpbitClient(access_key, secret_key) as upbit:
            result = await upbit.get_accounts()
            if result.ok:
                for account in result.data:
                    ...
    """

    @classmethod
    def from_config(cls: Type["UpbitClient"], config: Optional[UpbitConfig] = None, **kwargs) -> "UpbitClient":
        config = config or UpbitConfig()
        return cls(
            access_key=config.access_key,
            secret_key=config.secret_key,
            base_url=config.base_url,
            timeout=config.timeout,
            **kwargs,
        )

    # Exchange

    async def get_api_keys(self) -> ApiResult:
        """List API keys and their expiry dates."""
        return _parse(await self.get("/v1/api_keys"), List[ApiKey])

    async def get_wallet_status(self) -> ApiResult:
        """Deposit/withdrawal availability and block state per currency."""
        return _parse(await self.get("/v1/status/wallet"), List[WalletStatus])

    async def get_deposit_addresses(self, currency: Optional[str] = None) -> ApiResult:
        params = {"currency": currency} if currency else None
        return _parse(await self.get("/v1/deposits/coin_addresses", params), List[DepositAddress])

    async def get_accounts(self) -> ApiResult:
        """Balances held by the account."""
        return _parse(await self.get("/v1/accounts"), List[Account])

    async def get_order_chance(self, market: str) -> ApiResult:
        if not market:
            raise ValidationError("market is required")
        return _parse(await self.get("/v1/orders/chance", {"market": market}), OrderChance)

    async def place_order(
        self,
        market: str,
        side: str,
        ord_type: str,
        volume: Optional[str] = None,
        price: Optional[str] = None,
    ) -> ApiResult:
        """
        Place an order.

        Args:
            market: Market code, e.g. ``KRW-BTC``
            side: ``bid`` (buy) or ``ask`` (sell)
            ord_type: ``limit``, ``price`` (market buy) or ``market`` (market sell)
            volume: Order volume; required for ``limit`` and ``market``
            price: Order price; required for ``limit`` and ``price``

        Raises:
            ValidationError: If the combination cannot be a valid order
        """
        if not market:
            raise ValidationError("market is required")
        if side not in ORDER_SIDES:
            raise ValidationError(f"Invalid side: {side}")
        if ord_type not in ORDER_TYPES:
            raise ValidationError(f"Invalid ord_type: {ord_type}")
        if ord_type in MARKET_ORDER_SIDES and side != MARKET_ORDER_SIDES[ord_type]:
            raise ValidationError(f"{ord_type} orders must have side {MARKET_ORDER_SIDES[ord_type]}")
        if ord_type in ("limit", "market") and volume is None:
            raise ValidationError(f"volume is required for {ord_type} orders")
        if ord_type in ("limit", "price") and price is None:
            raise ValidationError(f"price is required for {ord_type} orders")

        params: Dict[str, Any] = {
            "market": market,
            "side": side,
            "ord_type": ord_type,
            "volume": volume,
            "price": price,
        }
        return _parse(await self.post("/v1/orders", params), Order)

    # Quotation

    async def get_market_codes(self) -> ApiResult:
        return _parse(await self.get("/v1/market/all"), List[MarketCode])

    async def get_minute_candles(
        self,
        market: str,
        unit: int = 1,
        to: Optional[str] = None,
        count: int = 1,
    ) -> ApiResult:
        """
        Minute candles for a market.

        Raises:
            ValidationError: If ``unit`` is unsupported or ``count`` is out of range
        """
        if not _is_int(unit) or not _is_int(count):
            raise ValidationError("unit and count must be integers")
        if unit not in MINUTE_CANDLE_UNITS:
            raise ValidationError(f"Invalid unit: {unit}")
        if not 1 <= count <= MAX_CANDLE_COUNT:
            raise ValidationError(f"Invalid count: {count} (max {MAX_CANDLE_COUNT})")

        params = {"market": market, "count": count, "to": to}
        return _parse(await self.get(f"/v1/candles/minutes/{unit}", params), List[MinuteCandle])
