"""Simulación de telemetría: líneas base, fuente aleatoria y generador."""

from .baselines import DEFAULT_BASELINES, SimulationBaselines
from .generator import generate_snapshot
from .random_source import (
    RandomSource,
    RandomSourceExhausted,
    SequenceRandomSource,
    SystemRandomSource,
)

__all__ = [
    "DEFAULT_BASELINES",
    "SimulationBaselines",
    "generate_snapshot",
    "RandomSource",
    "RandomSourceExhausted",
    "SequenceRandomSource",
    "SystemRandomSource",
]
