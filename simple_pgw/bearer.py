"""EPS bearers with per-direction rate limiting."""

from __future__ import annotations

import threading
import time
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pdn_connection import PdnConnection

BYTES_PER_MBPS = 125_000
RESET_INTERVAL = 1.0


def mbps_to_bytes(mbps: float) -> int:
    """Convert a rate in megabits per second to bytes per second."""
    if mbps < 0:
        raise ValueError(f"rate must not be negative: {mbps}")
    return int(mbps * BYTES_PER_MBPS)


class Direction(Enum):
    UPLINK = "uplink"
    DOWNLINK = "downlink"


class Bearer:
    """A data-plane bearer belonging to a PDN connection.

    A limit of zero bytes per second means the direction is unlimited.
    Counters are cleared by ``reset_counters`` and also whenever a check
    happens at least one second after the last reset.
    """

    def __init__(self, dp_teid: int, pdn: PdnConnection) -> None:
        self.dp_teid = dp_teid
        self.pdn = pdn
        self.sgw_dp_teid = 0
        self._limits = dict.fromkeys(Direction, 0)
        self._used = dict.fromkeys(Direction, 0)
        self._lock = threading.Lock()
        self._last_reset = time.monotonic()

    def set_rate_limits(self, uplink_mbps: float, downlink_mbps: float) -> None:
        """Set the uplink and downlink limits in megabits per second."""
        uplink = mbps_to_bytes(uplink_mbps)
        downlink = mbps_to_bytes(downlink_mbps)
        with self._lock:
            self._limits[Direction.UPLINK] = uplink
            self._limits[Direction.DOWNLINK] = downlink

    def check_uplink_limit(self, packet_size: int) -> bool:
        """Account an uplink packet; return False if it would exceed the limit."""
        return self._check(Direction.UPLINK, packet_size)

    def check_downlink_limit(self, packet_size: int) -> bool:
        """Account a downlink packet; return False if it would exceed the limit."""
        return self._check(Direction.DOWNLINK, packet_size)

    def reset_counters(self) -> None:
        """Clear the data counted in both directions."""
        with self._lock:
            self._reset_locked()

    def _reset_locked(self) -> None:
        for direction in Direction:
            self._used[direction] = 0
        self._last_reset = time.monotonic()

    def _check(self, direction: Direction, size: int) -> bool:
        with self._lock:
            limit = self._limits[direction]
            if limit == 0:
                return True
            if time.monotonic() - self._last_reset >= RESET_INTERVAL:
                self._reset_locked()
            if self._used[direction] + size > limit:
                return False
            self._used[direction] += size
            return True