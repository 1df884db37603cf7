"""
Polymarket Adapter - Exchange Adapter Base.

============================================================
PURPOSE
============================================================
Abstract interface the host trading pipeline drives.

DESIGN PRINCIPLES:
- Exchange-agnostic interface
- Clean separation from strategy logic
- Fully testable with in-memory implementations

============================================================
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .types import (
    Account,
    Balance,
    ExchangeFee,
    ExchangeName,
    KLine,
    Market,
    Order,
    SubmitOrder,
    Ticker,
)


class ExchangeAdapter(ABC):
    """
    Abstract interface for exchange adapters.

    Implementations:
    - PolymarketExchange: dry-run Polymarket shim
    """

    @property
    @abstractmethod
    def name(self) -> ExchangeName:
        """Get exchange identifier."""
        pass

    @property
    @abstractmethod
    def platform_fee_currency(self) -> str:
        """Currency fees are charged in."""
        pass

    @abstractmethod
    def default_fee_rates(self) -> ExchangeFee:
        """Fee rates used when the account carries none."""
        pass

    @abstractmethod
    def new_stream(self):
        """Create a market-data / user-data stream."""
        pass

    # --------------------------------------------------------
    # MARKET DATA
    # --------------------------------------------------------

    @abstractmethod
    async def query_markets(self) -> Dict[str, Market]:
        """Get all tradable markets by symbol."""
        pass

    @abstractmethod
    async def query_ticker(self, symbol: str) -> Ticker:
        """Get ticker for symbol."""
        pass

    @abstractmethod
    async def query_tickers(self, *symbols: str) -> Dict[str, Ticker]:
        """
        Get tickers for several symbols.

        Raises on the first per-symbol failure.
        """
        pass

    @abstractmethod
    async def query_klines(
        self,
        symbol: str,
        interval: str,
        limit: Optional[int] = None,
    ) -> List[KLine]:
        """Get historical candles."""
        pass

    # --------------------------------------------------------
    # ACCOUNT OPERATIONS
    # --------------------------------------------------------

    @abstractmethod
    async def query_account(self) -> Account:
        """Get current account snapshot."""
        pass

    @abstractmethod
    async def query_account_balances(self) -> Dict[str, Balance]:
        """Get balances by currency."""
        pass

    # --------------------------------------------------------
    # ORDER OPERATIONS
    # --------------------------------------------------------

    @abstractmethod
    async def submit_order(self, order: SubmitOrder) -> Order:
        """
        Submit an order.

        Args:
            order: Order intent

        Returns:
            Created order
        """
        pass

    @abstractmethod
    async def query_open_orders(self, symbol: str = "") -> List[Order]:
        """
        Get working orders.

        Args:
            symbol: Specific symbol, or empty for all
        """
        pass

    @abstractmethod
    async def cancel_orders(self, *orders: Order) -> None:
        """Cancel the given orders."""
        pass
