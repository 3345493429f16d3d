from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol


class RandomSource(Protocol):
    """Fuente de aleatoriedad que consume el generador de snapshots.

    El generador solo depende de esta interfaz; así los tests pueden
    inyectar secuencias deterministas sin tocar el módulo `random` global.
    """

    def random(self) -> float:
        """Devuelve un float uniforme en [0, 1)."""

        ...


class SystemRandomSource(RandomSource):
    """Implementación por defecto sobre `random.Random`.

    Con `seed` la secuencia es reproducible entre arranques (METRICS_SEED).
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def random(self) -> float:  # type: ignore[override]
        return self._rng.random()


class RandomSourceExhausted(RuntimeError):
    """La secuencia fija se ha agotado y no está en modo cíclico."""


class SequenceRandomSource(RandomSource):
    """Reproduce una secuencia fija de valores en [0, 1).

    - `cycle=False`: al agotarse lanza `RandomSourceExhausted`.
    - `cycle=True`: vuelve a empezar desde el primer valor.
    """

    def __init__(self, values: Iterable[float], *, cycle: bool = False) -> None:
        self._values: List[float] = [float(v) for v in values]
        if not self._values:
            raise ValueError("SequenceRandomSource requires at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"random value out of range [0, 1): {v}")
        self._cycle = cycle
        self._pos = 0
        self._draws = 0

    @property
    def consumed(self) -> int:
        """Número total de valores entregados."""
        return self._draws

    def random(self) -> float:  # type: ignore[override]
        if self._pos >= len(self._values):
            if not self._cycle:
                raise RandomSourceExhausted(
                    f"sequence exhausted after {len(self._values)} draws"
                )
            self._pos = 0
        value = self._values[self._pos]
        self._pos += 1
        self._draws += 1
        return value
