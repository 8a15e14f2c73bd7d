"""
Response Models
===============
Pydantic shapes for Upbit endpoint payloads.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class UpbitModel(BaseModel):
    # Upbit adds fields over time; unknown keys are kept, not rejected
    model_config = ConfigDict(extra="allow")


class ApiKey(UpbitModel):
    access_key: str
    expire_at: str


class Account(UpbitModel):
    currency: str
    balance: str
    locked: str
    avg_buy_price: str
    avg_buy_price_modified: bool
    unit_currency: str


class MarketCode(UpbitModel):
    market: str
    korean_name: str
    english_name: str


class WalletStatus(UpbitModel):
    currency: str
    wallet_state: str
    block_state: Optional[str] = None
    block_height: Optional[int] = None
    block_updated_at: Optional[str] = None
    block_elapsed_minutes: Optional[int] = None


class DepositAddress(UpbitModel):
    currency: str
    deposit_address: Optional[str] = None
    secondary_address: Optional[str] = None


class Order(UpbitModel):
    uuid: str
    side: str
    ord_type: str
    price: Optional[str] = None
    state: str
    market: str
    created_at: str
    volume: Optional[str] = None
    remaining_volume: Optional[str] = None
    reserved_fee: str
    remaining_fee: str
    paid_fee: str
    locked: str
    executed_volume: str
    trades_count: int


class MarketConstraint(UpbitModel):
    currency: str
    price_unit: Optional[str] = None
    min_total: float


class ChanceMarket(UpbitModel):
    id: str
    name: str
    order_types: List[str] = []
    order_sides: List[str]
    bid: MarketConstraint
    ask: MarketConstraint
    max_total: Optional[str] = None
    state: Optional[str] = None


class OrderChance(UpbitModel):
    bid_fee: str
    ask_fee: str
    maker_bid_fee: Optional[str] = None
    maker_ask_fee: Optional[str] = None
    market: ChanceMarket
    bid_account: Account
    ask_account: Account


class MinuteCandle(UpbitModel):
    market: str
    candle_date_time_utc: str
    candle_date_time_kst: str
    opening_price: float
    high_price: float
    low_price: float
    trade_price: float
    timestamp: int
    candle_acc_trade_price: float
    candle_acc_trade_volume: float
    unit: int
