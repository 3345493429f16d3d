"""Endpoint de snapshots simulados."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from ..monitoring import get_snapshot_stats
from ..schemas import Snapshot
from ..simulation import RandomSource, generate_snapshot

router = APIRouter(tags=["metrics"])
logger = logging.getLogger(__name__)


def get_random_source(request: Request) -> RandomSource:
    """Fuente aleatoria de la app (inyectada en `create_app`)."""
    return request.app.state.random_source


@router.get("/api/metrics", response_model=Snapshot)
def get_metrics(rng: RandomSource = Depends(get_random_source)):
    """Devuelve un Snapshot nuevo en cada llamada.

    Sin parámetros, sin autenticación y sin estado: cada campo aleatorio se
    genera de forma independiente sobre su línea base.
    """
    snapshot = generate_snapshot(rng)
    total = get_snapshot_stats().record_served()
    logger.debug(
        "[METRICS] served=%d oil=%.3f gas=%.3f alerts=%d",
        total,
        snapshot.oil_production.current,
        snapshot.gas_production.current,
        snapshot.safety_metrics.active_alerts,
    )
    return snapshot
