"""
Polymarket Adapter - Types.

============================================================
PURPOSE
============================================================
All type definitions shared by the Polymarket adapter.

CRITICAL PRINCIPLE:
    "The adapter never owns strategy decisions."
    "It stores, reports and cancels what the host submits."

============================================================
"""

from datetime import datetime
from typing import Optional, Dict, Any
from dataclasses import dataclass, field
from enum import Enum
from decimal import Decimal


# ============================================================
# EXCHANGE IDENTITY
# ============================================================

class ExchangeName(Enum):
    """Exchanges known to the host."""

    BINANCE = "binance"
    POLYMARKET = "polymarket"

    def __str__(self) -> str:
        return self.value

    def is_valid(self) -> bool:
        """Check if this is a supported exchange."""
        return self in _FOOTER_ICONS

    @classmethod
    def from_string(cls, name: str) -> "ExchangeName":
        """
        Resolve an exchange name.

        Args:
            name: Exchange name (case-insensitive)

        Returns:
            ExchangeName

        Raises:
            ValueError: If the exchange is unknown
        """
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported exchange: {name}")

    def footer_icon(self) -> str:
        """Favicon URL used in notification footers."""
        return _FOOTER_ICONS.get(self, "")


_FOOTER_ICONS: Dict[ExchangeName, str] = {
    ExchangeName.BINANCE: "https://bin.bnbstatic.com/static/images/common/favicon.ico",
    ExchangeName.POLYMARKET: "https://polymarket.com/favicon.ico",
}


def format_decimal(value: Decimal) -> str:
    """Plain notation without trailing zeros (10, not 1E+1)."""
    return f"{value.normalize():f}"


# ============================================================
# ORDER TYPES
# ============================================================

class OrderSide(Enum):
    """Order side."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    """Order type."""

    MARKET = "MARKET"
    """Execute at current market price."""

    LIMIT = "LIMIT"
    """Execute at specified price or better."""


class TimeInForce(Enum):
    """Time in force for orders."""

    GTC = "GTC"
    """Good Till Canceled."""

    IOC = "IOC"
    """Immediate Or Cancel."""

    FOK = "FOK"
    """Fill Or Kill."""


class OrderStatus(Enum):
    """
    Order lifecycle status.

    State Machine:

        NEW (working) ──cancel──► CANCELED (terminal)

    Fills, rejections and expiry are not simulated.
    """

    NEW = "NEW"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition is possible."""
        return self == OrderStatus.CANCELED

    @property
    def is_working(self) -> bool:
        """Check if the order rests on the book."""
        return self == OrderStatus.NEW


# ============================================================
# MARKET
# ============================================================

@dataclass(frozen=True)
class Market:
    """
    Tradable instrument definition.

    Frozen: the catalog is loaded once and only read afterwards.
    """

    symbol: str
    """Unique catalog key."""

    local_symbol: str = ""
    """Venue-local identifier (token / market id mapping)."""

    exchange: Optional[ExchangeName] = None
    """Venue stamped during catalog normalization."""

    base_currency: str = ""
    quote_currency: str = ""

    # Precision
    price_precision: int = 0
    volume_precision: int = 0
    quote_precision: int = 0

    # Trading rules
    tick_size: Decimal = Decimal("0")
    step_size: Decimal = Decimal("0")
    min_notional: Decimal = Decimal("0")
    min_quantity: Decimal = Decimal("0")


# ============================================================
# ORDERS
# ============================================================

@dataclass
class SubmitOrder:
    """Order intent handed over by the host."""

    symbol: str
    """Trading symbol."""

    side: OrderSide
    """Order side."""

    order_type: OrderType
    """Order type."""

    quantity: Decimal
    """Order quantity."""

    price: Decimal = Decimal("0")
    """Limit price."""

    time_in_force: TimeInForce = TimeInForce.GTC
    """Time in force."""

    tag: str = ""
    """Free-form tag, usually the strategy id."""

    client_order_id: Optional[str] = None
    """Client order ID."""


@dataclass
class Order:
    """
    Order with its current lifecycle state.

    Owned by the order ledger; callers only ever get copies.
    """

    symbol: str
    side: OrderSide
    order_type: OrderType
    quantity: Decimal
    price: Decimal
    time_in_force: TimeInForce

    order_id: int
    """Ledger-assigned identifier, starting at 1."""

    exchange: ExchangeName = ExchangeName.POLYMARKET
    tag: str = ""
    client_order_id: Optional[str] = None

    status: OrderStatus = OrderStatus.NEW
    original_status: str = "NEW"
    """Venue-style status text."""

    is_working: bool = True
    executed_quantity: Decimal = Decimal("0")

    creation_time: datetime = field(default_factory=datetime.utcnow)
    update_time: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def from_submit(
        cls,
        request: SubmitOrder,
        order_id: int,
        now: datetime,
        exchange: ExchangeName = ExchangeName.POLYMARKET,
    ) -> "Order":
        """Build a freshly accepted (NEW, working) order."""
        return cls(
            symbol=request.symbol,
            side=request.side,
            order_type=request.order_type,
            quantity=request.quantity,
            price=request.price,
            time_in_force=request.time_in_force,
            order_id=order_id,
            exchange=exchange,
            tag=request.tag,
            client_order_id=request.client_order_id,
            creation_time=now,
            update_time=now,
        )

    def log_fields(self) -> Dict[str, Any]:
        """Structured fields for log records."""
        return {
            "exchange": self.exchange.value,
            "order_id": self.order_id,
            "symbol": self.symbol,
            "side": self.side.value,
            "order_type": self.order_type.value,
            "price": format_decimal(self.price),
            "quantity": format_decimal(self.quantity),
            "time_in_force": self.time_in_force.value,
            "status": self.status.value,
            "tag": self.tag,
        }

    def __str__(self) -> str:
        return (
            f"ORDER #{self.order_id} {self.symbol} {self.side.value} "
            f"{self.order_type.value} {format_decimal(self.quantity)} "
            f"@ {format_decimal(self.price)} -> {self.status.value}"
        )


# ============================================================
# MARKET DATA
# ============================================================

@dataclass
class Ticker:
    """Placeholder ticker; no real quote is fetched."""

    time: datetime
    buy: Decimal = Decimal("0")
    sell: Decimal = Decimal("0")
    last: Decimal = Decimal("0")
    open: Decimal = Decimal("0")
    high: Decimal = Decimal("0")
    low: Decimal = Decimal("0")
    volume: Decimal = Decimal("0")


@dataclass
class KLine:
    """Closed candle delivered by a market-data session."""

    exchange: ExchangeName
    symbol: str
    interval: str
    open: Decimal
    close: Decimal
    high: Decimal = Decimal("0")
    low: Decimal = Decimal("0")
    volume: Decimal = Decimal("0")
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


# ============================================================
# ACCOUNT
# ============================================================

@dataclass
class Balance:
    """Balance for a single currency."""

    currency: str
    available: Decimal = Decimal("0")
    locked: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        """Total balance."""
        return self.available + self.locked


@dataclass
class ExchangeFee:
    """Maker/taker fee rates."""

    maker_fee_rate: Decimal = Decimal("0")
    taker_fee_rate: Decimal = Decimal("0")


@dataclass
class Account:
    """
    Account snapshot.

    Rebuilt on every query; never shared between calls.
    """

    balances: Dict[str, Balance] = field(default_factory=dict)
    has_fee_rate: bool = False
    maker_fee_rate: Decimal = Decimal("0")
    taker_fee_rate: Decimal = Decimal("0")

    def update_balances(self, balances: Dict[str, Balance]) -> None:
        """Merge balances into the snapshot."""
        self.balances.update(balances)

    def get_balance(self, currency: str) -> Balance:
        """Get balance for a currency, zero if absent."""
        return self.balances.get(currency, Balance(currency=currency))
