"""Vistas derivadas que consume el renderizado del dashboard.

Todas se recalculan a partir del último Snapshot (o del histórico) en cada
render; no guardan estado propio.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal, Tuple

from metrics_api.schemas import Production, Snapshot

from .history_buffer import HistoryPoint

LOCATION_NAMES: Tuple[str, str, str] = ("Mumbai High", "Krishna Godavari", "Cauvery")


@dataclass(frozen=True)
class LocationEntry:
    name: str
    value: float
    share: float  # fracción de la suma de las tres localizaciones


@dataclass(frozen=True)
class SummaryCard:
    title: str
    value: str
    detail: str


@dataclass(frozen=True)
class PanelItem:
    label: str
    value: str


@dataclass(frozen=True)
class MaintenanceTask:
    well: str
    task: str
    due: str
    priority: Literal["high", "medium", "low"]


MAINTENANCE_SCHEDULE: Tuple[MaintenanceTask, ...] = (
    MaintenanceTask("Well #A-123", "Pressure Valve Replacement", "Today", "high"),
    MaintenanceTask("Well #B-456", "Regular Inspection", "Tomorrow", "medium"),
    MaintenanceTask("Well #C-789", "Sensor Calibration", "Next Week", "low"),
)


def location_breakdown(
    snapshot: Snapshot, metric: Literal["oil", "gas"] = "oil"
) -> List[LocationEntry]:
    """Desglose por localización para las gráficas de barras y de tarta."""

    production: Production = (
        snapshot.oil_production if metric == "oil" else snapshot.gas_production
    )
    loc = production.locations
    values = (loc.mumbai_high, loc.krishna_godavari, loc.cauvery)
    total = sum(values)

    return [
        LocationEntry(name=name, value=value, share=(value / total) if total else 0.0)
        for name, value in zip(LOCATION_NAMES, values)
    ]


def production_series(history: Iterable[HistoryPoint]) -> List[dict]:
    return [p.to_dict() for p in history]


def summary_cards(snapshot: Snapshot) -> List[SummaryCard]:
    oil = snapshot.oil_production
    gas = snapshot.gas_production
    wp = snapshot.well_pressure
    wells = snapshot.wells

    return [
        SummaryCard(
            "Oil Production",
            f"{oil.current:.2f}M bbl/day",
            f"Target: {oil.target:g}M bbl/day",
        ),
        SummaryCard(
            "Gas Production",
            f"{gas.current:.1f} MCM/day",
            f"Target: {gas.target:g} MCM/day",
        ),
        SummaryCard("Well Pressure", f"{wp.average:.0f} PSI", f"{wp.critical} Critical"),
        SummaryCard(
            "Active Wells",
            f"{wells.active}/{wells.total}",
            f"{wells.maintenance} in maintenance",
        ),
    ]


def environmental_panel(snapshot: Snapshot) -> List[PanelItem]:
    env = snapshot.environmental_metrics
    return [
        PanelItem("Carbon Emissions", f"{env.carbon_emissions:.1f} kt CO2e"),
        PanelItem("Water Usage", f"{env.water_usage:.0f} m³/day"),
        PanelItem("Gas Flaring", f"{env.gas_flaring:.1f}%"),
    ]


def safety_panel(snapshot: Snapshot) -> List[PanelItem]:
    safety = snapshot.safety_metrics
    return [
        PanelItem("Days Without Incident", str(safety.days_without_incident)),
        PanelItem("Active Alerts", str(safety.active_alerts)),
        PanelItem("Inspections Due", str(safety.inspections_due)),
    ]


def header_alerts(snapshot: Snapshot) -> str:
    return f"{snapshot.safety_metrics.active_alerts} Active Alerts"
