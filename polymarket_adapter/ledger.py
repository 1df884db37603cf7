"""
Polymarket Adapter - Order Ledger.

============================================================
PURPOSE
============================================================
Thread-safe in-memory order book for dry-run trading.

STATE MACHINE:
    NEW (working) ──cancel──► CANCELED (terminal)

INVARIANTS:
- Order IDs start at 1, increase monotonically, never reused
- Orders are never removed; cancellation is a status change
- Callers receive copies, never the stored records

============================================================
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from .types import ExchangeName, Order, OrderStatus, SubmitOrder


logger = logging.getLogger(__name__)


# ============================================================
# ORDER STORE INTERFACE
# ============================================================

class OrderStore(ABC):
    """
    Storage capability for orders.

    Implementations:
    - InMemoryOrderLedger: volatile, process-local
    """

    @abstractmethod
    def submit(self, request: SubmitOrder) -> Order:
        """
        Accept an order as NEW/working.

        Returns:
            Copy of the stored order
        """
        pass

    @abstractmethod
    def get(self, order_id: int) -> Optional[Order]:
        """Copy of a stored order, or None if never issued."""
        pass

    @abstractmethod
    def list_open(self, symbol: Optional[str] = None) -> List[Order]:
        """
        Copies of all working orders.

        Args:
            symbol: Only orders for this symbol; empty/None for all

        Returns:
            Snapshot list, in no particular order
        """
        pass

    @abstractmethod
    def cancel(self, order_ids: Iterable[int]) -> int:
        """
        Cancel orders by ID. Unknown IDs are ignored.

        Returns:
            Number of working orders transitioned to CANCELED
        """
        pass


# ============================================================
# IN-MEMORY LEDGER
# ============================================================

class InMemoryOrderLedger(OrderStore):
    """
    Volatile order ledger.

    Every mutation and every multi-order read holds the shared
    lock. Atomicity across separate calls is not guaranteed.
    """

    def __init__(
        self,
        lock: Optional[threading.Lock] = None,
        exchange: ExchangeName = ExchangeName.POLYMARKET,
    ):
        """
        Initialize ledger.

        Args:
            lock: Lock shared with the owning adapter
            exchange: Venue stamped on created orders
        """
        self._lock = lock or threading.Lock()
        self._exchange = exchange
        self._next_order_id = 1
        self._orders: Dict[int, Order] = {}

    def submit(self, request: SubmitOrder) -> Order:
        with self._lock:
            order_id = self._next_order_id
            self._next_order_id += 1

            order = Order.from_submit(
                request,
                order_id=order_id,
                now=datetime.utcnow(),
                exchange=self._exchange,
            )
            self._orders[order_id] = order
            return copy.copy(order)

    def get(self, order_id: int) -> Optional[Order]:
        with self._lock:
            order = self._orders.get(order_id)
            return copy.copy(order) if order is not None else None

    def list_open(self, symbol: Optional[str] = None) -> List[Order]:
        with self._lock:
            return [
                copy.copy(order)
                for order in self._orders.values()
                if order.is_working and (not symbol or order.symbol == symbol)
            ]

    def cancel(self, order_ids: Iterable[int]) -> int:
        count = 0
        with self._lock:
            now = datetime.utcnow()
            for order_id in order_ids:
                order = self._orders.get(order_id)
                if order is None:
                    logger.debug(f"Cancel ignored for unknown order #{order_id}")
                    continue

                if order.is_working:
                    count += 1
                order.status = OrderStatus.CANCELED
                order.original_status = "CANCELED"
                order.is_working = False
                order.update_time = now
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
