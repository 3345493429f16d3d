"""View-model del dashboard: sondeo periódico + histórico acotado.

Ciclo: el temporizador dispara → fetch del Snapshot → se reemplaza el
Snapshot actual → se añade un punto (timestamp, oil, gas) al histórico →
se notifica a los suscriptores (re-render).

Decisiones de diseño:
- Fallo de fetch: se mantiene el Snapshot anterior y el histórico; se
  registra en `last_error` / `consecutive_failures`. Sin reintentos dentro
  del poll: el siguiente tick es el reintento.
- Polls solapados: si un tick llega con un poll en vuelo, se omite.
- Desmontaje: se cancela el temporizador y los polls aún no arrancados no
  emiten petición; los fetch en vuelo no se cancelan pero su resultado se
  descarta.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Literal, Optional, Set, Tuple

from prometheus_client import Counter

from metrics_api.schemas import Snapshot

from .config.dashboard_config import DEFAULT_DASHBOARD_CONFIG, DashboardConfig
from .history_buffer import HistoryBuffer, HistoryPoint
from .metrics_client import MetricsFetchError, MetricsFetcher
from .views import LocationEntry, location_breakdown, production_series

logger = logging.getLogger(__name__)

DASHBOARD_POLLS = Counter(
    "dashboard_polls_total",
    "Dashboard poll outcomes",
    ["status"],  # success, failed, skipped, discarded
)


class DashboardPhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


Subscriber = Callable[["DashboardViewModel"], None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DashboardViewModel:
    """Estado del dashboard alimentado por un `MetricsFetcher`.

    - `mount()` lanza un poll inmediato y programa uno cada
      `poll_interval_ms`.
    - `poll_once()` es un ciclo fetch-update completo.
    - `unmount()` cancela la programación; no se emiten más polls.

    Todo corre en un único event loop: la actualización del Snapshot y del
    histórico es la continuación síncrona del fetch resuelto, así que dos
    actualizaciones nunca se intercalan.
    """

    def __init__(
        self,
        fetcher: MetricsFetcher,
        cfg: DashboardConfig | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._cfg: DashboardConfig = cfg or DEFAULT_DASHBOARD_CONFIG
        self._clock = clock or _utc_now
        self._history = HistoryBuffer(capacity=self._cfg.history_size)

        self._phase = DashboardPhase.UNINITIALIZED
        self._snapshot: Optional[Snapshot] = None
        self._subscribers: List[Subscriber] = []

        self._timer_task: Optional[asyncio.Task] = None
        self._poll_tasks: Set[asyncio.Task] = set()
        self._in_flight = False
        self._mounted = False
        self._unmounted = False

        self._last_error: Optional[str] = None
        self._consecutive_failures = 0
        self._skipped_polls = 0
        self._polls_applied = 0

    # ------------------------------------------------------------------
    # Estado observable
    # ------------------------------------------------------------------

    @property
    def config(self) -> DashboardConfig:
        return self._cfg

    @property
    def phase(self) -> DashboardPhase:
        return self._phase

    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    @property
    def history(self) -> Tuple[HistoryPoint, ...]:
        return self._history.points()

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def consecutive_failures(self) -> int:
        return self._consecutive_failures

    @property
    def skipped_polls(self) -> int:
        return self._skipped_polls

    @property
    def polls_applied(self) -> int:
        return self._polls_applied

    def location_breakdown(self, metric: Literal["oil", "gas"] = "oil") -> List[LocationEntry]:
        if self._snapshot is None:
            return []
        return location_breakdown(self._snapshot, metric)

    def production_series(self) -> List[dict]:
        return production_series(self._history)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Registra un callback de re-render; devuelve la función para darse de baja."""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------

    def mount(self) -> None:
        """Poll inmediato + poll periódico. Requiere un event loop en marcha."""

        if self._mounted or self._unmounted:
            raise RuntimeError("DashboardViewModel can only be mounted once")

        asyncio.get_running_loop()

        self._mounted = True
        self._phase = DashboardPhase.LOADING
        logger.info(
            "[DASHBOARD] mount interval_ms=%d history_size=%d",
            self._cfg.poll_interval_ms,
            self._cfg.history_size,
        )

        self._spawn_poll()
        self._timer_task = asyncio.create_task(
            self._timer_loop(), name="dashboard-poll-timer"
        )

    async def unmount(self) -> None:
        if not self._mounted:
            return

        self._mounted = False
        self._unmounted = True

        if self._timer_task is not None:
            self._timer_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._timer_task
            self._timer_task = None

        logger.info(
            "[DASHBOARD] unmount applied=%d skipped=%d in_flight=%s",
            self._polls_applied,
            self._skipped_polls,
            self._in_flight,
        )

    async def drain(self) -> None:
        """Espera a que terminen los polls en vuelo (p.ej. antes de cerrar el cliente)."""

        if self._poll_tasks:
            await asyncio.gather(*list(self._poll_tasks), return_exceptions=True)

    # ------------------------------------------------------------------
    # Poll
    # ------------------------------------------------------------------

    async def poll_once(self) -> bool:
        """Un ciclo fetch-update. Devuelve True si se actualizó el estado."""

        # Desmontado: ni siquiera se emite la petición
        if self._unmounted:
            DASHBOARD_POLLS.labels(status="discarded").inc()
            logger.info("[POLL] DISCARDED dashboard unmounted, no request sent")
            return False

        if self._in_flight:
            self._skipped_polls += 1
            DASHBOARD_POLLS.labels(status="skipped").inc()
            logger.warning(
                "[POLL] SKIPPED previous poll still in flight skipped_total=%d",
                self._skipped_polls,
            )
            return False

        self._in_flight = True
        try:
            snapshot = await self._fetcher.fetch_snapshot()
        except MetricsFetchError as e:
            if self._unmounted:
                DASHBOARD_POLLS.labels(status="discarded").inc()
                logger.debug("[POLL] failure after unmount discarded err=%s", e)
                return False
            self._record_failure(e)
            return False
        finally:
            self._in_flight = False

        if self._unmounted:
            DASHBOARD_POLLS.labels(status="discarded").inc()
            logger.info("[POLL] DISCARDED result arrived after unmount")
            return False

        self._apply(snapshot)
        return True

    def _apply(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        point = HistoryPoint(
            timestamp=self._clock(),
            oil=snapshot.oil_production.current,
            gas=snapshot.gas_production.current,
        )
        evicted = self._history.append(point)

        self._phase = DashboardPhase.READY
        self._last_error = None
        self._consecutive_failures = 0
        self._polls_applied += 1
        DASHBOARD_POLLS.labels(status="success").inc()

        logger.info(
            "[POLL] ok oil=%.3f gas=%.3f history=%d/%d evicted=%s",
            point.oil,
            point.gas,
            len(self._history),
            self._history.capacity,
            evicted.timestamp.isoformat() if evicted else None,
        )

        for callback in list(self._subscribers):
            callback(self)

    def _record_failure(self, err: MetricsFetchError) -> None:
        self._last_error = str(err)
        self._consecutive_failures += 1
        DASHBOARD_POLLS.labels(status="failed").inc()
        logger.warning(
            "[POLL] FETCH_FAILED consecutive=%d keeping_previous=%s err=%s",
            self._consecutive_failures,
            self._snapshot is not None,
            err,
        )

    def _spawn_poll(self) -> None:
        task = asyncio.create_task(self.poll_once())
        self._poll_tasks.add(task)
        task.add_done_callback(self._on_poll_done)

    def _on_poll_done(self, task: asyncio.Task) -> None:
        self._poll_tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "[POLL] task failed err=%s",
                type(exc).__name__,
                exc_info=(type(exc), exc, exc.__traceback__),
            )

    async def _timer_loop(self) -> None:
        interval = self._cfg.poll_interval_seconds
        while True:
            await asyncio.sleep(interval)
            self._spawn_poll()
