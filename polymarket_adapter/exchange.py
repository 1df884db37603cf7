"""
Polymarket Adapter - Exchange Facade.

============================================================
PURPOSE
============================================================
Minimal Polymarket exchange adapter so the host pipeline can
initialize sessions, discover markets and place orders.

CURRENT CAPABILITIES:
- Market catalog from POLYMARKET_MARKETS_FILE or
  POLYMARKET_MARKETS_JSON (built-in examples otherwise)
- Dry-run order submission (default on) into an in-memory
  ledger, open-order queries and cancellation
- Account snapshot seeded from POLYMARKET_BALANCE_USDC

NOT IMPLEMENTED:
- CLOB authentication and order signing (live trading)
- Candle data (use a Binance session as the kline source)
- Real tickers

CONCURRENCY:
    One lock guards the catalog build and every ledger access.
    No call awaits anything, so coroutines never suspend.

============================================================
"""

import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from .base import ExchangeAdapter
from .catalog import MarketMap, build_catalog
from .config import AdapterConfig, SETTLEMENT_CURRENCY
from .errors import UnsupportedOperationError
from .gate import SubmissionGate
from .ledger import InMemoryOrderLedger, OrderStore
from .stream import PolymarketStream
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


logger = logging.getLogger(__name__)


class PolymarketExchange(ExchangeAdapter):
    """
    Polymarket exchange adapter (dry-run shim).

    Owns the market catalog and the order ledger. A fresh instance
    starts with an empty ledger and an unbuilt catalog.
    """

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
    ):
        """
        Initialize adapter.

        Args:
            config: Fixed configuration. When omitted, the environment
                is read at each call that needs configuration.
        """
        self._config = config

        self._lock = threading.Lock()
        self._markets: Optional[MarketMap] = None
        self._store: OrderStore = InMemoryOrderLedger(
            lock=self._lock,
            exchange=ExchangeName.POLYMARKET,
        )
        self._gate = SubmissionGate(self._store)

    def _current_config(self) -> AdapterConfig:
        if self._config is not None:
            return self._config
        return AdapterConfig.from_env()

    # --------------------------------------------------------
    # IDENTITY
    # --------------------------------------------------------

    @property
    def name(self) -> ExchangeName:
        return ExchangeName.POLYMARKET

    @property
    def platform_fee_currency(self) -> str:
        return SETTLEMENT_CURRENCY

    def default_fee_rates(self) -> ExchangeFee:
        return ExchangeFee(
            maker_fee_rate=Decimal("0"),
            taker_fee_rate=Decimal("0"),
        )

    def new_stream(self) -> PolymarketStream:
        return PolymarketStream()

    # --------------------------------------------------------
    # MARKET DATA
    # --------------------------------------------------------

    async def query_markets(self) -> Dict[str, Market]:
        """
        Get the market catalog.

        Built on the first successful call and cached for the life
        of this instance; later configuration changes are ignored.

        Raises:
            CatalogIOError: If the catalog file cannot be read
            CatalogDecodeError: If the catalog JSON is invalid
        """
        with self._lock:
            if self._markets is None:
                self._markets = build_catalog(self._current_config())
                logger.info(f"Polymarket market catalog loaded: {len(self._markets)} markets")
            return dict(self._markets)

    async def query_ticker(self, symbol: str) -> Ticker:
        # Placeholder; no quote is fetched.
        return Ticker(time=datetime.utcnow())

    async def query_tickers(self, *symbols: str) -> Dict[str, Ticker]:
        tickers: Dict[str, Ticker] = {}
        for symbol in symbols:
            tickers[symbol] = await self.query_ticker(symbol)
        return tickers

    async def query_klines(
        self,
        symbol: str,
        interval: str,
        limit: Optional[int] = None,
    ) -> List[KLine]:
        raise UnsupportedOperationError(
            "polymarket: query_klines is not implemented "
            "(use a Binance session as the kline source)",
            operation="query_klines",
        )

    # --------------------------------------------------------
    # ACCOUNT OPERATIONS
    # --------------------------------------------------------

    async def query_account(self) -> Account:
        """Build a fresh account snapshot."""
        config = self._current_config()
        account = Account()

        if config.balance_usdc is not None:
            account.update_balances({
                SETTLEMENT_CURRENCY: Balance(
                    currency=SETTLEMENT_CURRENCY,
                    available=config.balance_usdc,
                ),
            })

        account.has_fee_rate = True
        account.maker_fee_rate = Decimal("0")
        account.taker_fee_rate = Decimal("0")
        return account

    async def query_account_balances(self) -> Dict[str, Balance]:
        account = await self.query_account()
        return dict(account.balances)

    # --------------------------------------------------------
    # ORDER OPERATIONS
    # --------------------------------------------------------

    async def submit_order(self, order: SubmitOrder) -> Order:
        """
        Submit an order through the dry-run gate.

        Raises:
            UnsupportedOperationError: If dry-run is disabled
        """
        dry_run = self._current_config().dry_run
        return self._gate.submit(order, dry_run=dry_run)

    async def query_open_orders(self, symbol: str = "") -> List[Order]:
        return self._store.list_open(symbol)

    async def cancel_orders(self, *orders: Order) -> None:
        """
        Cancel orders. References to unknown orders are ignored, so
        this never fails.
        """
        canceled = self._store.cancel(order.order_id for order in orders)
        logger.debug(f"Canceled {canceled} of {len(orders)} referenced orders")

    def get_order(self, order_id: int) -> Optional[Order]:
        """Direct lookup of any order ever issued, working or not."""
        return self._store.get(order_id)
