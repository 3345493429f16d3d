from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Deque, Iterator, Optional, Tuple


@dataclass(frozen=True)
class HistoryPoint:
    """Punto de la serie temporal derivado de un poll correcto."""

    timestamp: datetime
    oil: float
    gas: float

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "oil": self.oil,
            "gas": self.gas,
        }


class HistoryBuffer:
    """Buffer FIFO acotado de puntos de producción.

    - Capacidad fija (por defecto 6); al añadir con el buffer lleno se
      descarta el punto más antiguo.
    - La iteración es cronológica: el más antiguo primero.
    - Pertenece a una única instancia del view-model; no es global.
    """

    def __init__(self, capacity: int = 6) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._points: Deque[HistoryPoint] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen or 0

    def append(self, point: HistoryPoint) -> Optional[HistoryPoint]:
        """Añade un punto y devuelve el desalojado, si lo hubo."""

        evicted = self._points[0] if len(self._points) == self.capacity else None
        self._points.append(point)
        return evicted

    def points(self) -> Tuple[HistoryPoint, ...]:
        return tuple(self._points)

    def latest(self) -> Optional[HistoryPoint]:
        return self._points[-1] if self._points else None

    def clear(self) -> None:
        self._points.clear()

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[HistoryPoint]:
        return iter(tuple(self._points))
