"""
Polymarket Adapter - BTC Up/Down Connectivity Strategy.

============================================================
PURPOSE
============================================================
Cross-venue strategy used to smoke-test the adapter:
- Binance session: BTCUSDT 15m candles decide up or down
- Polymarket session: buys the matching YES / NO market

Orders go through the Polymarket adapter, so with the default
dry-run mode nothing reaches a real venue.

============================================================
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from .base import ExchangeAdapter
from .errors import PolymarketAdapterError
from .types import (
    KLine,
    Order,
    OrderSide,
    OrderType,
    SubmitOrder,
    TimeInForce,
    format_decimal,
)


STRATEGY_ID = "polymarket-btc15m-updown"

logger = logging.getLogger(__name__)


@dataclass
class UpDownStrategy:
    """
    Buys YES when a candle closes above its open, NO otherwise.

    quantity = quote_amount / entry_price
    """

    binance_session: str = ""
    """Market-data session name."""

    polymarket_session: str = ""
    """Trading session name."""

    source_symbol: str = ""
    interval: str = ""

    yes_symbol: str = ""
    no_symbol: str = ""

    entry_price: Decimal = Decimal("0")
    """Probability price, usually in (0, 1)."""

    quote_amount: Decimal = Decimal("0")
    """USDC spent per signal."""

    def __post_init__(self):
        self._trading: Optional[ExchangeAdapter] = None

    @property
    def id(self) -> str:
        return STRATEGY_ID

    def defaults(self) -> None:
        """Fill unset fields."""
        if not self.binance_session:
            self.binance_session = "binance"
        if not self.polymarket_session:
            self.polymarket_session = "polymarket"
        if not self.source_symbol:
            self.source_symbol = "BTCUSDT"
        if not self.interval:
            self.interval = "15m"
        if not self.yes_symbol:
            self.yes_symbol = "PM_BTC_15M_UP_YES_USDC"
        if not self.no_symbol:
            self.no_symbol = "PM_BTC_15M_UP_NO_USDC"
        if self.entry_price == 0:
            self.entry_price = Decimal("0.5")
        if self.quote_amount == 0:
            self.quote_amount = Decimal("5")

    def validate(self) -> None:
        """
        Check settings.

        Raises:
            ValueError: If a setting is missing or invalid
        """
        if not self.binance_session or not self.polymarket_session:
            raise ValueError("binance_session/polymarket_session is required")
        if not self.source_symbol:
            raise ValueError("source_symbol is required")
        if not self.interval:
            raise ValueError("interval is required")
        if not self.yes_symbol or not self.no_symbol:
            raise ValueError("yes_symbol/no_symbol is required")
        if self.entry_price <= 0:
            raise ValueError("entry_price must be positive")
        if self.quote_amount <= 0:
            raise ValueError("quote_amount must be positive")

    def bind(self, sessions: Dict[str, ExchangeAdapter]) -> None:
        """
        Apply defaults, validate and attach the trading session.

        Raises:
            ValueError: If settings are invalid or a session is missing
        """
        self.defaults()
        self.validate()

        if self.binance_session not in sessions:
            raise ValueError(f"binance session {self.binance_session!r} not found")
        if self.polymarket_session not in sessions:
            raise ValueError(f"polymarket session {self.polymarket_session!r} not found")

        self._trading = sessions[self.polymarket_session]

    async def handle_kline_closed(self, kline: KLine) -> Optional[Order]:
        """
        React to a closed candle.

        Returns:
            Created order, or None if the candle was ignored or the
            submission failed
        """
        if self._trading is None:
            raise RuntimeError("strategy is not bound to sessions")

        if kline.symbol != self.source_symbol or kline.interval != self.interval:
            return None

        up = kline.close > kline.open
        target_symbol = self.yes_symbol if up else self.no_symbol
        quantity = self.quote_amount / self.entry_price

        logger.info(
            "signal generated, submitting polymarket order",
            extra={
                "source": self.source_symbol,
                "interval": self.interval,
                "open": format_decimal(kline.open),
                "close": format_decimal(kline.close),
                "target_symbol": target_symbol,
                "entry_price": format_decimal(self.entry_price),
                "quote_amount": format_decimal(self.quote_amount),
                "order_quantity": format_decimal(quantity),
            },
        )

        try:
            return await self._trading.submit_order(SubmitOrder(
                symbol=target_symbol,
                side=OrderSide.BUY,
                order_type=OrderType.LIMIT,
                price=self.entry_price,
                quantity=quantity,
                time_in_force=TimeInForce.GTC,
                tag=STRATEGY_ID,
            ))
        except PolymarketAdapterError as exc:
            logger.error(f"failed to submit polymarket order: {exc}")
            return None
