"""
Polymarket Adapter Package.

============================================================
PURPOSE
============================================================
Exchange adapter shim that lets the host trading pipeline run
against Polymarket before the real CLOB protocol (auth, order
signing, token mapping) is integrated.

AUTHORITY BOUNDARIES:
    CAN:
        - Serve the market catalog
        - Accept dry-run orders into an in-memory ledger
        - Report and cancel open orders
        - Report a configured USDC balance

    MUST NOT:
        - Send anything to a real venue
        - Simulate fills

============================================================
MODULES
============================================================
- types: Markets, orders, tickers, account
- errors: Error taxonomy
- config: Environment configuration
- schemas: Catalog JSON schemas
- catalog: Market catalog loader
- ledger: In-memory order ledger
- gate: Dry-run / live submission gate
- base: Exchange adapter interface
- exchange: Polymarket adapter facade
- stream: No-op stream
- strategy: BTC up/down connectivity strategy
- cli: Command-line interface

============================================================
"""

# ============================================================
# TYPES
# ============================================================
from .types import (
    # Enums
    ExchangeName,
    OrderSide,
    OrderType,
    TimeInForce,
    OrderStatus,
    # Dataclasses
    Market,
    SubmitOrder,
    Order,
    Ticker,
    KLine,
    Balance,
    ExchangeFee,
    Account,
    format_decimal,
)

# ============================================================
# ERRORS
# ============================================================
from .errors import (
    ErrorCategory,
    PolymarketAdapterError,
    CatalogIOError,
    CatalogDecodeError,
    UnsupportedOperationError,
)

# ============================================================
# CONFIGURATION
# ============================================================
from .config import (
    AdapterConfig,
    ENV_MARKETS_FILE,
    ENV_MARKETS_JSON,
    ENV_DRY_RUN,
    ENV_BALANCE_USDC,
    SETTLEMENT_CURRENCY,
    parse_bool,
    parse_decimal,
)

# ============================================================
# CORE
# ============================================================
from .catalog import (
    load_catalog,
    build_catalog,
    decode_markets_json,
    normalize_markets,
    default_example_markets,
)
from .ledger import OrderStore, InMemoryOrderLedger
from .gate import SubmissionGate

# ============================================================
# ADAPTER
# ============================================================
from .base import ExchangeAdapter
from .exchange import PolymarketExchange
from .stream import PolymarketStream, ConnectionState
from .strategy import UpDownStrategy, STRATEGY_ID


__all__ = [
    # Types
    "ExchangeName",
    "OrderSide",
    "OrderType",
    "TimeInForce",
    "OrderStatus",
    "Market",
    "SubmitOrder",
    "Order",
    "Ticker",
    "KLine",
    "Balance",
    "ExchangeFee",
    "Account",
    "format_decimal",
    # Errors
    "ErrorCategory",
    "PolymarketAdapterError",
    "CatalogIOError",
    "CatalogDecodeError",
    "UnsupportedOperationError",
    # Config
    "AdapterConfig",
    "ENV_MARKETS_FILE",
    "ENV_MARKETS_JSON",
    "ENV_DRY_RUN",
    "ENV_BALANCE_USDC",
    "SETTLEMENT_CURRENCY",
    "parse_bool",
    "parse_decimal",
    # Core
    "load_catalog",
    "build_catalog",
    "decode_markets_json",
    "normalize_markets",
    "default_example_markets",
    "OrderStore",
    "InMemoryOrderLedger",
    "SubmissionGate",
    # Adapter
    "ExchangeAdapter",
    "PolymarketExchange",
    "PolymarketStream",
    "ConnectionState",
    "UpDownStrategy",
    "STRATEGY_ID",
]
