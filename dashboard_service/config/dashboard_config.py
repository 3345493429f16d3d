from __future__ import annotations

from dataclasses import dataclass

from common.config import Settings


@dataclass(frozen=True)
class DashboardConfig:
    """Configuración del view-model del dashboard.

    El timeout de la petición queda por debajo del periodo de sondeo para que,
    en condiciones normales, dos polls no se solapen.
    """

    # Periodo entre polls programados (el primero es inmediato al montar)
    poll_interval_ms: int = 3000

    # Nº de puntos retenidos para la gráfica de tendencia
    history_size: int = 6

    fetch_timeout_seconds: float = 2.5

    def __post_init__(self) -> None:
        if self.poll_interval_ms <= 0:
            raise ValueError(f"poll_interval_ms must be > 0, got {self.poll_interval_ms}")
        if self.history_size < 1:
            raise ValueError(f"history_size must be >= 1, got {self.history_size}")
        if self.fetch_timeout_seconds <= 0:
            raise ValueError(
                f"fetch_timeout_seconds must be > 0, got {self.fetch_timeout_seconds}"
            )

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "DashboardConfig":
        return cls(
            poll_interval_ms=settings.dashboard_poll_interval_ms,
            history_size=settings.dashboard_history_size,
            fetch_timeout_seconds=settings.dashboard_fetch_timeout_seconds,
        )


# Config por defecto utilizable en runners/tests
DEFAULT_DASHBOARD_CONFIG = DashboardConfig()
