"""
Polymarket Adapter - Market Catalog Loader.

============================================================
PURPOSE
============================================================
Builds the market catalog from an externally supplied JSON
document, or from a built-in example catalog.

SOURCE PRECEDENCE:
1. POLYMARKET_MARKETS_FILE  - read file, decode JSON
2. POLYMARKET_MARKETS_JSON  - decode inline JSON
3. nothing configured       - empty result

ACCEPTED SHAPES (tried in this order):
1. Object mapping symbol -> market record
2. Array of market records, keyed by each record's symbol

============================================================
"""

import json
import logging
from dataclasses import replace
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from .config import AdapterConfig, ENV_MARKETS_FILE, ENV_MARKETS_JSON
from .errors import CatalogIOError, CatalogDecodeError
from .schemas import MarketRecord, MarketMapping, MarketArray
from .types import Market, ExchangeName


logger = logging.getLogger(__name__)


MarketMap = Dict[str, Market]


# ============================================================
# LOADING
# ============================================================

def load_catalog(config: AdapterConfig) -> MarketMap:
    """
    Load markets from the configured source.

    Args:
        config: Adapter configuration

    Returns:
        Markets by symbol; empty if no source is configured

    Raises:
        CatalogIOError: If the catalog file cannot be read
        CatalogDecodeError: If the payload matches no accepted shape
    """
    if config.markets_file:
        path = Path(config.markets_file)
        try:
            payload = path.read_bytes()
        except OSError as exc:
            raise CatalogIOError(
                f"polymarket: read {ENV_MARKETS_FILE} failed: {exc}",
                operation="load_catalog",
            ) from exc

        logger.info(f"Loading market catalog from {path}")
        return decode_markets_json(payload)

    if config.markets_json:
        logger.info(f"Loading market catalog from {ENV_MARKETS_JSON}")
        return decode_markets_json(config.markets_json)

    return {}


def build_catalog(config: AdapterConfig) -> MarketMap:
    """
    Load the catalog, falling back to the built-in example markets,
    and normalize every entry.
    """
    markets = load_catalog(config)

    if not markets:
        logger.info("No market catalog configured, using built-in example markets")
        markets = default_example_markets()

    return normalize_markets(markets)


# ============================================================
# DECODING
# ============================================================

def decode_markets_json(payload: Union[str, bytes]) -> MarketMap:
    """
    Decode a catalog document.

    The symbol-keyed mapping shape wins if it yields at least one
    market; otherwise the array shape is tried.

    Raises:
        CatalogDecodeError: If neither shape matches, or an array
            record has an empty symbol
    """
    try:
        document = json.loads(payload)
    except (ValueError, RecursionError) as exc:
        raise CatalogDecodeError(
            f"polymarket: decode markets json failed: {exc}",
            operation="decode_markets_json",
        ) from exc

    mapping, mapping_error = _decode_mapping(document)
    if mapping:
        return {symbol: record.to_market() for symbol, record in mapping.items()}

    records, array_error = _decode_array(document)
    if records is None:
        cause = mapping_error if mapping_error is not None else array_error
        detail = _describe(cause) if cause is not None else (
            "expected an object keyed by symbol or an array of markets"
        )
        raise CatalogDecodeError(
            f"polymarket: decode markets json failed: {detail}",
            operation="decode_markets_json",
        ) from cause

    markets: MarketMap = {}
    for index, record in enumerate(records):
        if not record.symbol:
            raise CatalogDecodeError(
                f"polymarket: market symbol is empty in json (record #{index})",
                operation="decode_markets_json",
            )
        markets[record.symbol] = record.to_market()

    return markets


def _decode_mapping(
    document: Any,
) -> Tuple[Optional[Dict[str, MarketRecord]], Optional[ValidationError]]:
    """Shape 1; (None, None) if the document is not an object."""
    if not isinstance(document, dict):
        return None, None
    try:
        return MarketMapping.validate_python(document), None
    except ValidationError as exc:
        logger.debug(f"Catalog is not a symbol-keyed mapping: {exc.error_count()} errors")
        return None, exc


def _decode_array(
    document: Any,
) -> Tuple[Optional[List[MarketRecord]], Optional[ValidationError]]:
    """Shape 2; (None, None) if the document is not an array."""
    if not isinstance(document, list):
        return None, None
    try:
        return MarketArray.validate_python(document), None
    except ValidationError as exc:
        logger.debug(f"Catalog is not an array of markets: {exc.error_count()} errors")
        return None, exc


def _describe(exc: ValidationError) -> str:
    """First validation error as 'location: message'."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"


# ============================================================
# NORMALIZATION
# ============================================================

def normalize_markets(markets: MarketMap) -> MarketMap:
    """Stamp the venue and backfill blank symbols from the map key."""
    return {
        symbol: replace(
            market,
            exchange=ExchangeName.POLYMARKET,
            symbol=market.symbol or symbol,
        )
        for symbol, market in markets.items()
    }


# ============================================================
# BUILT-IN CATALOG
# ============================================================

def default_example_markets() -> MarketMap:
    """
    Example BTC 15m up/down markets.

    Probability prices live in [0, 1], hence the 0.0001 tick.
    """
    markets: MarketMap = {}
    for symbol in ("PM_BTC_15M_UP_YES_USDC", "PM_BTC_15M_UP_NO_USDC"):
        markets[symbol] = Market(
            symbol=symbol,
            local_symbol=symbol,
            base_currency=symbol[: -len("_USDC")],
            quote_currency="USDC",
            price_precision=4,
            volume_precision=2,
            quote_precision=2,
            tick_size=Decimal("0.0001"),
            step_size=Decimal("0.01"),
            min_notional=Decimal("1"),
            min_quantity=Decimal("1"),
        )
    return markets
