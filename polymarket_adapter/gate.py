"""
Polymarket Adapter - Submission Gate.

============================================================
PURPOSE
============================================================
Decides whether a submitted order mutates the local ledger
(dry-run) or is rejected (live).

LIVE TRADING:
    No authenticated transport to the Polymarket CLOB exists.
    Live submissions always fail with UnsupportedOperationError.
    Real submission needs: CLOB endpoint, API key / order
    signing scheme, and the market -> token id mapping carried
    in Market.local_symbol.

============================================================
"""

import logging

from .config import ENV_DRY_RUN
from .errors import UnsupportedOperationError
from .ledger import OrderStore
from .types import Order, SubmitOrder


logger = logging.getLogger(__name__)


class SubmissionGate:
    """Routes order submissions according to the trading mode."""

    def __init__(self, store: OrderStore):
        """
        Initialize gate.

        Args:
            store: Ledger receiving dry-run orders
        """
        self._store = store

    def submit(self, request: SubmitOrder, dry_run: bool) -> Order:
        """
        Submit an order.

        Args:
            request: Order intent
            dry_run: Whether dry-run mode is active

        Returns:
            Created order (copy)

        Raises:
            UnsupportedOperationError: If dry_run is False
        """
        if not dry_run:
            logger.warning(
                f"Rejected live order for {request.symbol}: real trading is not implemented"
            )
            raise UnsupportedOperationError(
                f"polymarket: real trading is not implemented yet; "
                f"set {ENV_DRY_RUN}=true to use dry-run",
                operation="submit_order",
            )

        created = self._store.submit(request)

        logger.info(
            f"polymarket(dry-run) order created: {created}",
            extra={"order": created.log_fields()},
        )
        return created
