from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _default_env_file() -> str:
    # .env en la raíz del repo; las variables reales del entorno tienen prioridad.
    repo_root = Path(__file__).resolve().parents[1]
    return str(repo_root / ".env")


@dataclass(frozen=True)
class Settings:
    api_host: str
    api_port: int
    metrics_seed: Optional[int]

    dashboard_metrics_url: str
    dashboard_poll_interval_ms: int
    dashboard_history_size: int
    dashboard_fetch_timeout_seconds: float

    log_level: str


def _optional_int(raw: str | None) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    return int(raw)


def get_settings() -> Settings:
    # Load env file (if present) but still allow overriding via real environment variables.
    env_file = os.getenv("ONGC_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    api_host = os.getenv("METRICS_API_HOST", "0.0.0.0")
    api_port = int(os.getenv("METRICS_API_PORT", "8000"))

    # Sin semilla: valores distintos en cada arranque.
    metrics_seed = _optional_int(os.getenv("METRICS_SEED"))

    dashboard_metrics_url = os.getenv(
        "DASHBOARD_METRICS_URL", f"http://localhost:{api_port}/api/metrics"
    )
    dashboard_poll_interval_ms = int(os.getenv("DASHBOARD_POLL_INTERVAL_MS", "3000"))
    dashboard_history_size = int(os.getenv("DASHBOARD_HISTORY_SIZE", "6"))
    dashboard_fetch_timeout_seconds = float(
        os.getenv("DASHBOARD_FETCH_TIMEOUT_SECONDS", "2.5")
    )

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    return Settings(
        api_host=api_host,
        api_port=api_port,
        metrics_seed=metrics_seed,
        dashboard_metrics_url=dashboard_metrics_url,
        dashboard_poll_interval_ms=dashboard_poll_interval_ms,
        dashboard_history_size=dashboard_history_size,
        dashboard_fetch_timeout_seconds=dashboard_fetch_timeout_seconds,
        log_level=log_level,
    )
