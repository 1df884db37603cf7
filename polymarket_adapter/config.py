"""
Polymarket Adapter - Configuration.

============================================================
PURPOSE
============================================================
Environment-driven configuration for the adapter.

ENVIRONMENT:
- POLYMARKET_MARKETS_FILE  : JSON catalog file path
- POLYMARKET_MARKETS_JSON  : inline JSON catalog (ignored
                             when the file path is set)
- POLYMARKET_DRY_RUN       : dry-run flag (default: true)
- POLYMARKET_BALANCE_USDC  : USDC balance for the account
                             snapshot

All keys are optional.

============================================================
"""

import os
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Mapping


logger = logging.getLogger(__name__)


ENV_MARKETS_FILE = "POLYMARKET_MARKETS_FILE"
ENV_MARKETS_JSON = "POLYMARKET_MARKETS_JSON"
ENV_DRY_RUN = "POLYMARKET_DRY_RUN"
ENV_BALANCE_USDC = "POLYMARKET_BALANCE_USDC"

SETTLEMENT_CURRENCY = "USDC"

_TRUE_VALUES = {"1", "t", "true", "y", "yes", "on"}
_FALSE_VALUES = {"0", "f", "false", "n", "no", "off"}


# ============================================================
# PARSING HELPERS
# ============================================================

def parse_bool(value: Optional[str], default: bool) -> bool:
    """
    Parse a textual boolean.

    Args:
        value: Raw text (e.g. "true", "0", "Yes")
        default: Returned when the value is unset or unparseable

    Returns:
        Parsed boolean
    """
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    if normalized:
        logger.debug(f"Unparseable boolean {value!r}, using default {default}")
    return default


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    """Parse a decimal string, None if unset or invalid."""
    if value is None or not value.strip():
        return None
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        logger.debug(f"Unparseable decimal {value!r}, ignoring")
        return None
    if not parsed.is_finite():
        return None
    return parsed


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim whitespace; empty means unset."""
    if value is None:
        return None
    value = value.strip()
    return value or None


# ============================================================
# ADAPTER CONFIGURATION
# ============================================================

@dataclass
class AdapterConfig:
    """Configuration for the Polymarket adapter."""

    # Market catalog sources
    markets_file: Optional[str] = None
    """Path to a JSON catalog document."""

    markets_json: Optional[str] = None
    """Inline JSON catalog; ignored when markets_file is set."""

    # Trading mode
    dry_run: bool = True
    """Only accept orders into the in-memory ledger."""

    # Account
    balance_usdc: Optional[Decimal] = None
    """Seeds the USDC balance of account snapshots."""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AdapterConfig":
        """
        Create config from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            AdapterConfig
        """
        env = os.environ if environ is None else environ

        return cls(
            markets_file=_clean(env.get(ENV_MARKETS_FILE)),
            markets_json=_clean(env.get(ENV_MARKETS_JSON)),
            dry_run=parse_bool(env.get(ENV_DRY_RUN), default=True),
            balance_usdc=parse_decimal(env.get(ENV_BALANCE_USDC)),
        )
