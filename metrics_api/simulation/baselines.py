from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductionBaseline:
    """Línea base de producción (petróleo o gas) y sus rangos de variación.

    `current` varía simétricamente (± current_spread); las localizaciones
    solo suman hacia arriba: base + [0, location_spread).
    """

    current: float
    current_spread: float
    target: float
    mumbai_high: float
    krishna_godavari: float
    cauvery: float
    location_spread: float


@dataclass(frozen=True)
class WellPressureBaseline:
    average: float = 2340.0
    average_spread: float = 50.0
    # Conteos enteros en [0, max)
    critical_max: int = 3
    warning_max: int = 5


@dataclass(frozen=True)
class WellsBaseline:
    total: int = 150
    # active = active_ceiling - entero en [0, active_shortfall_max)
    active_ceiling: int = 142
    active_shortfall_max: int = 3
    maintenance_max: int = 8
    drilling_max: int = 4


@dataclass(frozen=True)
class EnvironmentalBaseline:
    carbon_emissions: float = 450.0
    carbon_emissions_spread: float = 10.0
    water_usage: float = 1200.0
    water_usage_spread: float = 50.0
    gas_flaring: float = 85.0
    gas_flaring_spread: float = 5.0


@dataclass(frozen=True)
class SafetyBaseline:
    days_without_incident: int = 145
    active_alerts_max: int = 4
    inspections_due_max: int = 6


# Millones de barriles por día
OIL_BASELINE = ProductionBaseline(
    current=2.5,
    current_spread=0.1,
    target=2.7,
    mumbai_high=1.2,
    krishna_godavari=0.8,
    cauvery=0.5,
    location_spread=0.1,
)

# Millones de metros cúbicos por día
GAS_BASELINE = ProductionBaseline(
    current=23.4,
    current_spread=1.0,
    target=25.0,
    mumbai_high=10.2,
    krishna_godavari=8.4,
    cauvery=4.8,
    location_spread=1.0,
)


@dataclass(frozen=True)
class SimulationBaselines:
    oil: ProductionBaseline = OIL_BASELINE
    gas: ProductionBaseline = GAS_BASELINE
    well_pressure: WellPressureBaseline = WellPressureBaseline()
    wells: WellsBaseline = WellsBaseline()
    environmental: EnvironmentalBaseline = EnvironmentalBaseline()
    safety: SafetyBaseline = SafetyBaseline()


# Config global por defecto para el endpoint de métricas
DEFAULT_BASELINES = SimulationBaselines()
