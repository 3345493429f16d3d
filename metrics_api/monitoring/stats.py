"""Snapshot serving statistics.

Process-local singleton that counts served snapshots and feeds the
diagnostics endpoint.
"""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Optional

from prometheus_client import Counter

logger = logging.getLogger(__name__)

SNAPSHOTS_SERVED = Counter(
    "metrics_api_snapshots_served_total",
    "Total simulated snapshots served by /api/metrics",
)


class SnapshotStatsService:
    """Tracks how many snapshots this process has served.

    Thread-safe singleton; uvicorn may run sync handlers in a threadpool.
    """

    _instance: Optional["SnapshotStatsService"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._start_time = time.time()
        self._served = 0
        self._last_served_at: Optional[datetime] = None
        self._data_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "SnapshotStatsService":
        """Get singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton (for testing)."""
        with cls._lock:
            cls._instance = None

    def record_served(self) -> int:
        """Record one served snapshot and return the running total."""
        with self._data_lock:
            self._served += 1
            self._last_served_at = datetime.now(timezone.utc)
            total = self._served
        SNAPSHOTS_SERVED.inc()
        logger.debug("SNAPSHOT_SERVED total=%d", total)
        return total

    @property
    def served(self) -> int:
        with self._data_lock:
            return self._served

    def get_diagnostics(self) -> dict:
        """Get diagnostics report for API endpoint."""
        with self._data_lock:
            return {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "uptime_seconds": round(time.time() - self._start_time, 2),
                "snapshots_served": self._served,
                "last_served_at": (
                    self._last_served_at.isoformat() if self._last_served_at else None
                ),
            }


def get_snapshot_stats() -> SnapshotStatsService:
    """Get the snapshot stats service singleton."""
    return SnapshotStatsService.get_instance()
