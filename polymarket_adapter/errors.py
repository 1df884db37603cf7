"""
Polymarket Adapter - Error Taxonomy.

============================================================
PURPOSE
============================================================
Error classification for adapter failures.

ERROR CATEGORIES:
1. CATALOG_IO      - Market catalog file unreadable
2. CATALOG_DECODE  - Catalog JSON matches no accepted shape
3. UNSUPPORTED     - Operation has no implementation (live
                     trading, candle data)

Unknown order references on cancellation are NOT errors.

No error is retried internally; retry policy belongs to the
host.

============================================================
"""

from enum import Enum
from typing import Optional, Dict, Any


# ============================================================
# ERROR CATEGORIES
# ============================================================

class ErrorCategory(Enum):
    """Error category classification."""

    CATALOG_IO = "CATALOG_IO"
    """Catalog source could not be read."""

    CATALOG_DECODE = "CATALOG_DECODE"
    """Catalog payload could not be decoded."""

    UNSUPPORTED = "UNSUPPORTED"
    """Operation is not implemented for this venue."""


# ============================================================
# EXCEPTIONS
# ============================================================

class PolymarketAdapterError(Exception):
    """Base exception for the Polymarket adapter."""

    category: ErrorCategory = ErrorCategory.UNSUPPORTED
    code: str = "ADAPTER_ERROR"

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "category": self.category.value,
            "code": self.code,
            "message": self.message,
            "operation": self.operation,
        }


class CatalogIOError(PolymarketAdapterError):
    """Market catalog file could not be read."""

    category = ErrorCategory.CATALOG_IO
    code = "CATALOG_IO"


class CatalogDecodeError(PolymarketAdapterError):
    """Market catalog JSON is malformed or has an invalid record."""

    category = ErrorCategory.CATALOG_DECODE
    code = "CATALOG_DECODE"


class UnsupportedOperationError(PolymarketAdapterError):
    """Operation has no implementation on this venue."""

    category = ErrorCategory.UNSUPPORTED
    code = "UNSUPPORTED_OPERATION"
