from __future__ import annotations

import asyncio
import itertools
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Optional

import pytest

from dashboard_service.metrics_client import MetricsFetchError
from metrics_api.monitoring import SnapshotStatsService
from metrics_api.schemas import Snapshot
from metrics_api.simulation import SequenceRandomSource, generate_snapshot


def _build_snapshot(oil_current: float = 2.5, gas_current: float = 23.4) -> Snapshot:
    wire = generate_snapshot(SequenceRandomSource([0.5], cycle=True)).to_wire()
    wire["oilProduction"]["current"] = oil_current
    wire["gasProduction"]["current"] = gas_current
    return Snapshot.model_validate(wire)


class FakeFetcher:
    """Fetcher en memoria: el poll N devuelve oil=N, gas=10*N.

    - `fail_on`: números de llamada (1-indexed) que lanzan MetricsFetchError.
    - `gate`: si se pasa, cada fetch espera a que el evento se active.
    """

    def __init__(
        self,
        *,
        fail_on: Iterable[int] = (),
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.calls = 0
        self._fail_on = set(fail_on)
        self._gate = gate

    async def fetch_snapshot(self) -> Snapshot:
        self.calls += 1
        call = self.calls
        if self._gate is not None:
            await self._gate.wait()
        if call in self._fail_on:
            raise MetricsFetchError(f"simulated failure on call {call}")
        return _build_snapshot(oil_current=float(call), gas_current=float(call) * 10)


@pytest.fixture(autouse=True)
def reset_snapshot_stats():
    SnapshotStatsService.reset_instance()
    yield
    SnapshotStatsService.reset_instance()


@pytest.fixture
def make_snapshot() -> Callable[..., Snapshot]:
    return _build_snapshot


@pytest.fixture
def fake_fetcher_cls():
    return FakeFetcher


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Reloj determinista: avanza 3s en cada llamada."""
    start = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    counter = itertools.count()

    def _clock() -> datetime:
        return start + timedelta(seconds=3 * next(counter))

    return _clock
