from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from common.config import Settings, get_settings
from .endpoints import diagnostics_router, health_router, metrics_router
from .simulation import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    random_source: Optional[RandomSource] = None,
) -> FastAPI:
    """Construye la app FastAPI del servicio de métricas.

    La fuente aleatoria se guarda en `app.state` y llega al endpoint por
    dependencia; los tests pueden pasar una `SequenceRandomSource`.
    """
    settings = settings or get_settings()

    app = FastAPI(title="ONGC Metrics Service", version="0.1.0")
    app.state.random_source = random_source or SystemRandomSource(settings.metrics_seed)

    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(diagnostics_router)
    app.mount("/prometheus", make_asgi_app())

    logger.info(
        "[API] app created seed=%s injected_source=%s",
        settings.metrics_seed,
        random_source is not None,
    )
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    logger.info("[API] serving on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
