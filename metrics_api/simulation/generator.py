"""Generador de snapshots simulados.

Cada campo aleatorio usa una extracción independiente de la `RandomSource`:
no hay correlación entre campos ni entre llamadas. El orden de extracción
sigue el orden del JSON (petróleo, gas, presión, pozos, medio ambiente,
seguridad) para que una secuencia fija se pueda mapear a campos concretos.
"""

from __future__ import annotations

import math
from typing import Optional

from ..schemas import (
    EnvironmentalMetrics,
    Production,
    ProductionLocations,
    SafetyMetrics,
    Snapshot,
    WellPressure,
    Wells,
)
from .baselines import DEFAULT_BASELINES, ProductionBaseline, SimulationBaselines
from .random_source import RandomSource, SystemRandomSource


def _symmetric(rng: RandomSource, baseline: float, spread: float) -> float:
    # baseline ± spread
    return baseline + (rng.random() * 2 * spread - spread)


def _upward(rng: RandomSource, baseline: float, spread: float) -> float:
    return baseline + rng.random() * spread


def _count(rng: RandomSource, upper: int) -> int:
    # Entero en [0, upper)
    return int(math.floor(rng.random() * upper))


def _production(rng: RandomSource, base: ProductionBaseline) -> Production:
    current = _symmetric(rng, base.current, base.current_spread)
    locations = ProductionLocations(
        mumbai_high=_upward(rng, base.mumbai_high, base.location_spread),
        krishna_godavari=_upward(rng, base.krishna_godavari, base.location_spread),
        cauvery=_upward(rng, base.cauvery, base.location_spread),
    )
    return Production(current=current, target=base.target, locations=locations)


def generate_snapshot(
    rng: Optional[RandomSource] = None,
    baselines: SimulationBaselines = DEFAULT_BASELINES,
) -> Snapshot:
    """Genera un Snapshot nuevo con variaciones aleatorias sobre las líneas base."""

    rng = rng or SystemRandomSource()

    oil = _production(rng, baselines.oil)
    gas = _production(rng, baselines.gas)

    wp = baselines.well_pressure
    well_pressure = WellPressure(
        average=_symmetric(rng, wp.average, wp.average_spread),
        critical=_count(rng, wp.critical_max),
        warning=_count(rng, wp.warning_max),
    )

    wb = baselines.wells
    wells = Wells(
        total=wb.total,
        active=wb.active_ceiling - _count(rng, wb.active_shortfall_max),
        maintenance=_count(rng, wb.maintenance_max),
        drilling=_count(rng, wb.drilling_max),
    )

    env = baselines.environmental
    environmental = EnvironmentalMetrics(
        carbon_emissions=_symmetric(rng, env.carbon_emissions, env.carbon_emissions_spread),
        water_usage=_symmetric(rng, env.water_usage, env.water_usage_spread),
        gas_flaring=_symmetric(rng, env.gas_flaring, env.gas_flaring_spread),
    )

    sb = baselines.safety
    safety = SafetyMetrics(
        days_without_incident=sb.days_without_incident,
        active_alerts=_count(rng, sb.active_alerts_max),
        inspections_due=_count(rng, sb.inspections_due_max),
    )

    return Snapshot(
        oil_production=oil,
        gas_production=gas,
        well_pressure=well_pressure,
        wells=wells,
        environmental_metrics=environmental,
        safety_metrics=safety,
    )
