"""
Polymarket Exchange Tests.

============================================================
PURPOSE
============================================================
Tests for the adapter facade the host pipeline drives.

TEST CATEGORIES:
- Catalog tests: Lazy build, caching, fallback
- Market data tests: Tickers, klines
- Account tests: Balance seeding, fee rates
- Order tests: Dry-run / live, open orders, cancellation

============================================================
"""

from datetime import datetime
from decimal import Decimal

import pytest

from polymarket_adapter import (
    AdapterConfig,
    Account,
    CatalogDecodeError,
    CatalogIOError,
    ENV_BALANCE_USDC,
    ENV_DRY_RUN,
    ENV_MARKETS_FILE,
    ENV_MARKETS_JSON,
    ExchangeAdapter,
    ExchangeName,
    Order,
    OrderSide,
    OrderStatus,
    OrderType,
    PolymarketExchange,
    PolymarketStream,
    SubmitOrder,
    Ticker,
    TimeInForce,
    UnsupportedOperationError,
)


def make_request(symbol: str = "PM_BTC_15M_UP_YES_USDC") -> SubmitOrder:
    return SubmitOrder(
        symbol=symbol,
        side=OrderSide.BUY,
        order_type=OrderType.LIMIT,
        price=Decimal("0.5"),
        quantity=Decimal("10"),
        time_in_force=TimeInForce.GTC,
    )


@pytest.fixture
def exchange():
    return PolymarketExchange()


# ============================================================
# IDENTITY TESTS
# ============================================================

class TestIdentity:
    """Tests for adapter identity."""

    def test_is_exchange_adapter(self, exchange):
        assert isinstance(exchange, ExchangeAdapter)

    def test_name(self, exchange):
        assert exchange.name == ExchangeName.POLYMARKET

    def test_platform_fee_currency(self, exchange):
        assert exchange.platform_fee_currency == "USDC"

    def test_default_fee_rates(self, exchange):
        fees = exchange.default_fee_rates()

        assert fees.maker_fee_rate == Decimal("0")
        assert fees.taker_fee_rate == Decimal("0")

    def test_new_stream(self, exchange):
        assert isinstance(exchange.new_stream(), PolymarketStream)


# ============================================================
# CATALOG TESTS
# ============================================================

class TestQueryMarkets:
    """Tests for query_markets."""

    @pytest.mark.asyncio
    async def test_default_catalog(self, exchange):
        """Test built-in markets without configuration."""
        markets = await exchange.query_markets()

        assert set(markets) == {"PM_BTC_15M_UP_YES_USDC", "PM_BTC_15M_UP_NO_USDC"}
        assert all(m.exchange == ExchangeName.POLYMARKET for m in markets.values())

    @pytest.mark.asyncio
    async def test_inline_json_from_env(self, exchange, clean_env):
        """Test catalog from POLYMARKET_MARKETS_JSON."""
        clean_env.setenv(
            ENV_MARKETS_JSON,
            '[{"symbol":"X","baseCurrency":"X","quoteCurrency":"USDC"}]',
        )

        markets = await exchange.query_markets()

        assert set(markets) == {"X"}
        assert markets["X"].base_currency == "X"
        assert markets["X"].quote_currency == "USDC"

    @pytest.mark.asyncio
    async def test_file_from_env(self, exchange, clean_env, tmp_path):
        """Test catalog from POLYMARKET_MARKETS_FILE."""
        path = tmp_path / "markets.json"
        path.write_text('{"F": {"symbol": "F"}}')
        clean_env.setenv(ENV_MARKETS_FILE, str(path))

        markets = await exchange.query_markets()

        assert set(markets) == {"F"}

    @pytest.mark.asyncio
    async def test_cached_despite_env_change(self, exchange, clean_env):
        """Test the catalog is built once per instance."""
        first = await exchange.query_markets()

        clean_env.setenv(ENV_MARKETS_JSON, '[{"symbol": "LATE"}]')
        second = await exchange.query_markets()

        assert first == second
        assert "LATE" not in second

    @pytest.mark.asyncio
    async def test_fresh_instance_rebuilds(self, exchange, clean_env):
        """Test a new instance sees the current configuration."""
        await exchange.query_markets()
        clean_env.setenv(ENV_MARKETS_JSON, '[{"symbol": "LATE"}]')

        markets = await PolymarketExchange().query_markets()

        assert set(markets) == {"LATE"}

    @pytest.mark.asyncio
    async def test_returned_mapping_is_copy(self, exchange):
        """Test callers cannot alter the cached catalog."""
        markets = await exchange.query_markets()
        markets.clear()

        assert len(await exchange.query_markets()) == 2

    @pytest.mark.asyncio
    async def test_explicit_config(self):
        """Test fixed configuration overrides the environment."""
        exchange = PolymarketExchange(AdapterConfig(markets_json='{"C": {"symbol": "C"}}'))

        markets = await exchange.query_markets()

        assert set(markets) == {"C"}

    @pytest.mark.asyncio
    async def test_decode_error_propagates(self, exchange, clean_env):
        """Test invalid JSON fails the query."""
        clean_env.setenv(ENV_MARKETS_JSON, "[{]")

        with pytest.raises(CatalogDecodeError):
            await exchange.query_markets()

    @pytest.mark.asyncio
    async def test_failed_build_not_cached(self, exchange, clean_env):
        """Test a failed build is retried on the next query."""
        clean_env.setenv(ENV_MARKETS_JSON, '[{"symbol": ""}]')
        with pytest.raises(CatalogDecodeError):
            await exchange.query_markets()

        clean_env.setenv(ENV_MARKETS_JSON, '[{"symbol": "OK"}]')

        assert set(await exchange.query_markets()) == {"OK"}

    @pytest.mark.asyncio
    async def test_io_error_propagates(self, exchange, clean_env, tmp_path):
        """Test unreadable file fails the query."""
        clean_env.setenv(ENV_MARKETS_FILE, str(tmp_path / "nope.json"))

        with pytest.raises(CatalogIOError):
            await exchange.query_markets()


# ============================================================
# MARKET DATA TESTS
# ============================================================

class TestMarketData:
    """Tests for tickers and klines."""

    @pytest.mark.asyncio
    async def test_query_ticker_placeholder(self, exchange):
        """Test ticker carries the current time only."""
        before = datetime.utcnow()
        ticker = await exchange.query_ticker("ANY")

        assert isinstance(ticker, Ticker)
        assert ticker.time >= before
        assert ticker.last == Decimal("0")

    @pytest.mark.asyncio
    async def test_query_tickers(self, exchange):
        tickers = await exchange.query_tickers("A", "B")

        assert set(tickers) == {"A", "B"}

    @pytest.mark.asyncio
    async def test_query_tickers_empty(self, exchange):
        assert await exchange.query_tickers() == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("symbol,interval", [
        ("BTCUSDT", "15m"),
        ("PM_BTC_15M_UP_YES_USDC", "1h"),
        ("", ""),
    ])
    async def test_query_klines_unsupported(self, exchange, symbol, interval):
        """Test candle queries always fail."""
        with pytest.raises(UnsupportedOperationError, match="Binance"):
            await exchange.query_klines(symbol, interval)


# ============================================================
# ACCOUNT TESTS
# ============================================================

class TestAccount:
    """Tests for account snapshots."""

    @pytest.mark.asyncio
    async def test_no_balance_configured(self, exchange):
        account = await exchange.query_account()

        assert isinstance(account, Account)
        assert account.balances == {}
        assert account.has_fee_rate is True
        assert account.maker_fee_rate == Decimal("0")
        assert account.taker_fee_rate == Decimal("0")

    @pytest.mark.asyncio
    async def test_balance_from_env(self, exchange, clean_env):
        clean_env.setenv(ENV_BALANCE_USDC, " 125.50 ")

        account = await exchange.query_account()

        assert account.get_balance("USDC").available == Decimal("125.50")

    @pytest.mark.asyncio
    async def test_invalid_balance_ignored(self, exchange, clean_env):
        clean_env.setenv(ENV_BALANCE_USDC, "lots")

        account = await exchange.query_account()

        assert account.balances == {}

    @pytest.mark.asyncio
    async def test_balance_re_read_each_call(self, exchange, clean_env):
        """Test snapshots follow the current environment."""
        clean_env.setenv(ENV_BALANCE_USDC, "10")
        first = await exchange.query_account()

        clean_env.setenv(ENV_BALANCE_USDC, "20")
        second = await exchange.query_account()

        assert first.get_balance("USDC").available == Decimal("10")
        assert second.get_balance("USDC").available == Decimal("20")

    @pytest.mark.asyncio
    async def test_snapshots_independent(self, exchange, clean_env):
        clean_env.setenv(ENV_BALANCE_USDC, "10")
        first = await exchange.query_account()
        first.balances.clear()

        second = await exchange.query_account()

        assert "USDC" in second.balances

    @pytest.mark.asyncio
    async def test_query_account_balances(self, exchange, clean_env):
        clean_env.setenv(ENV_BALANCE_USDC, "7")

        balances = await exchange.query_account_balances()

        assert set(balances) == {"USDC"}
        assert balances["USDC"].currency == "USDC"


# ============================================================
# ORDER TESTS
# ============================================================

class TestOrders:
    """Tests for order submission, queries and cancellation."""

    @pytest.mark.asyncio
    async def test_dry_run_by_default(self, exchange):
        """Test unset flag means dry-run."""
        order = await exchange.submit_order(make_request())

        assert isinstance(order, Order)
        assert order.order_id == 1
        assert order.exchange == ExchangeName.POLYMARKET
        assert order.status == OrderStatus.NEW

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["true", "1", "TRUE", "yes", "maybe", ""])
    async def test_dry_run_truthy_or_unparseable(self, exchange, clean_env, value):
        """Test truthy and unparseable flags keep dry-run on."""
        clean_env.setenv(ENV_DRY_RUN, value)

        order = await exchange.submit_order(make_request())

        assert order.is_working is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["false", "0", "False", "no", " off "])
    async def test_live_mode_rejected(self, exchange, clean_env, value):
        """Test disabling dry-run always fails submission."""
        clean_env.setenv(ENV_DRY_RUN, value)

        with pytest.raises(UnsupportedOperationError, match=ENV_DRY_RUN):
            await exchange.submit_order(make_request())

        assert await exchange.query_open_orders() == []

    @pytest.mark.asyncio
    async def test_live_mode_from_config(self):
        exchange = PolymarketExchange(AdapterConfig(dry_run=False))

        with pytest.raises(UnsupportedOperationError):
            await exchange.submit_order(make_request())

    @pytest.mark.asyncio
    async def test_ids_strictly_increasing(self, exchange):
        ids = [(await exchange.submit_order(make_request())).order_id for _ in range(4)]

        assert ids == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_open_orders_filter(self, exchange):
        yes = await exchange.submit_order(make_request("PM_BTC_15M_UP_YES_USDC"))
        no = await exchange.submit_order(make_request("PM_BTC_15M_UP_NO_USDC"))

        all_open = await exchange.query_open_orders()
        yes_open = await exchange.query_open_orders("PM_BTC_15M_UP_YES_USDC")

        assert {o.order_id for o in all_open} == {yes.order_id, no.order_id}
        assert [o.order_id for o in yes_open] == [yes.order_id]

    @pytest.mark.asyncio
    async def test_cancel_orders(self, exchange):
        """Test canceled orders leave the open list."""
        order = await exchange.submit_order(make_request())

        await exchange.cancel_orders(order)

        assert await exchange.query_open_orders() == []
        assert await exchange.query_open_orders(order.symbol) == []
        stored = exchange.get_order(order.order_id)
        assert stored.status == OrderStatus.CANCELED
        assert stored.is_working is False

    @pytest.mark.asyncio
    async def test_cancel_unknown_is_noop(self, exchange):
        """Test unknown references never fail."""
        order = await exchange.submit_order(make_request())
        ghost = Order(
            symbol="GHOST",
            side=OrderSide.BUY,
            order_type=OrderType.LIMIT,
            quantity=Decimal("1"),
            price=Decimal("0.1"),
            time_in_force=TimeInForce.GTC,
            order_id=999,
        )

        result = await exchange.cancel_orders(ghost)

        assert result is None
        assert [o.order_id for o in await exchange.query_open_orders()] == [order.order_id]
        assert exchange.get_order(999) is None

    @pytest.mark.asyncio
    async def test_cancel_nothing(self, exchange):
        await exchange.cancel_orders()

    @pytest.mark.asyncio
    async def test_fresh_instance_fresh_ledger(self, exchange):
        await exchange.submit_order(make_request())

        other = PolymarketExchange()
        order = await other.submit_order(make_request())

        assert order.order_id == 1
