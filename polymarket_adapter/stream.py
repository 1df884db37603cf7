"""
Polymarket Adapter - Stream Stub.

============================================================
PURPOSE
============================================================
Minimal stream satisfying the host's stream contract.

connect() opens no websocket; it only reports "connected" so
the host's connectivity checks pass. Sufficient for setups
where another venue supplies market data and Polymarket is
the trading side only.

============================================================
"""

import logging
from enum import Enum
from typing import Callable, Dict, List


logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """Stream connection states."""

    DISCONNECTED = "DISCONNECTED"
    CONNECTED = "CONNECTED"


class PolymarketStream:
    """No-op stream that is always connected after connect()."""

    def __init__(self):
        self._state = ConnectionState.DISCONNECTED
        self._callbacks: Dict[str, List[Callable[[], None]]] = {
            "connect": [],
            "start": [],
            "disconnect": [],
        }

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state == ConnectionState.CONNECTED

    # --------------------------------------------------------
    # CALLBACKS
    # --------------------------------------------------------

    def on_connect(self, callback: Callable[[], None]) -> None:
        self._callbacks["connect"].append(callback)

    def on_start(self, callback: Callable[[], None]) -> None:
        self._callbacks["start"].append(callback)

    def on_disconnect(self, callback: Callable[[], None]) -> None:
        self._callbacks["disconnect"].append(callback)

    def _emit(self, event: str) -> None:
        for callback in self._callbacks[event]:
            callback()

    # --------------------------------------------------------
    # CONNECTION
    # --------------------------------------------------------

    async def connect(self) -> None:
        """Mark connected and fire connect, then start."""
        self._state = ConnectionState.CONNECTED
        logger.info("Polymarket stream connected (no-op)")
        self._emit("connect")
        self._emit("start")

    async def close(self) -> None:
        """Mark disconnected and fire disconnect."""
        self._state = ConnectionState.DISCONNECTED
        logger.info("Polymarket stream closed")
        self._emit("disconnect")
