from __future__ import annotations

from pydantic import BaseModel, Field


class _WireModel(BaseModel):
    # Atributos snake_case en Python, camelCase en el JSON.
    class Config:
        populate_by_name = True
        frozen = True


class ProductionLocations(_WireModel):
    mumbai_high: float = Field(..., alias="mumbaiHigh")
    krishna_godavari: float = Field(..., alias="krishnaGodavari")
    cauvery: float


class Production(_WireModel):
    current: float
    target: float
    locations: ProductionLocations


class WellPressure(_WireModel):
    average: float
    critical: int
    warning: int


class Wells(_WireModel):
    total: int
    active: int
    maintenance: int
    drilling: int


class EnvironmentalMetrics(_WireModel):
    carbon_emissions: float = Field(..., alias="carbonEmissions")
    water_usage: float = Field(..., alias="waterUsage")
    gas_flaring: float = Field(..., alias="gasFlaring")


class SafetyMetrics(_WireModel):
    days_without_incident: int = Field(..., alias="daysWithoutIncident")
    active_alerts: int = Field(..., alias="activeAlerts")
    inspections_due: int = Field(..., alias="inspectionsDue")


class Snapshot(_WireModel):
    """Conjunto de medidas simuladas devuelto por un único `GET /api/metrics`.

    No se valida consistencia entre campos: la suma por localización no tiene
    por qué coincidir con `current`, ni active + maintenance + drilling con
    `total`.
    """

    oil_production: Production = Field(..., alias="oilProduction")
    gas_production: Production = Field(..., alias="gasProduction")
    well_pressure: WellPressure = Field(..., alias="wellPressure")
    wells: Wells
    environmental_metrics: EnvironmentalMetrics = Field(..., alias="environmentalMetrics")
    safety_metrics: SafetyMetrics = Field(..., alias="safetyMetrics")

    def to_wire(self) -> dict:
        """Representación JSON-compatible con las claves camelCase."""
        return self.model_dump(by_alias=True)


class DiagnosticsOut(BaseModel):
    timestamp: str
    uptime_seconds: float
    snapshots_served: int
    last_served_at: str | None = None
