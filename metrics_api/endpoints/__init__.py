"""Módulo de endpoints HTTP.

Contiene los endpoints del servicio de métricas organizados por función.
"""

from .health import router as health_router
from .metrics import router as metrics_router
from .diagnostics import router as diagnostics_router

__all__ = [
    "health_router",
    "metrics_router",
    "diagnostics_router",
]
