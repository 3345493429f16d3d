"""Diagnostics endpoint for the metrics service.

Only aggregated process counters are exposed; snapshots are never retained.
"""

from __future__ import annotations

from fastapi import APIRouter

from ..monitoring import get_snapshot_stats
from ..schemas import DiagnosticsOut

router = APIRouter(tags=["diagnostics"])


@router.get("/api/diagnostics", response_model=DiagnosticsOut)
def get_diagnostics():
    """Get serving diagnostics.

    Example response:
    ```json
    {
        "timestamp": "2026-10-19T12:00:00+00:00",
        "uptime_seconds": 3600.5,
        "snapshots_served": 1200,
        "last_served_at": "2026-10-19T11:59:58.912345+00:00"
    }
    ```
    """
    return get_snapshot_stats().get_diagnostics()
