"""Tests del generador de snapshots y de las fuentes aleatorias.

Ejecutar:
    pytest tests/test_generator.py -v
"""

from __future__ import annotations

import pytest

from metrics_api.simulation import (
    RandomSourceExhausted,
    SequenceRandomSource,
    SystemRandomSource,
    generate_snapshot,
)

# Nº de extracciones aleatorias por snapshot
DRAWS_PER_SNAPSHOT = 19

WIRE_KEYS = {
    "oilProduction",
    "gasProduction",
    "wellPressure",
    "wells",
    "environmentalMetrics",
    "safetyMetrics",
}


# =============================================================================
# RANGOS
# =============================================================================

class TestSnapshotRanges:
    """Cada campo queda dentro de su línea base ± rango."""

    @pytest.mark.parametrize("seed", range(25))
    def test_fields_within_documented_ranges(self, seed):
        s = generate_snapshot(SystemRandomSource(seed))

        assert 2.4 <= s.oil_production.current <= 2.6
        assert s.oil_production.target == 2.7
        assert 1.2 <= s.oil_production.locations.mumbai_high < 1.3
        assert 0.8 <= s.oil_production.locations.krishna_godavari < 0.9
        assert 0.5 <= s.oil_production.locations.cauvery < 0.6

        assert 22.4 <= s.gas_production.current <= 24.4
        assert s.gas_production.target == 25.0
        assert 10.2 <= s.gas_production.locations.mumbai_high < 11.2
        assert 8.4 <= s.gas_production.locations.krishna_godavari < 9.4
        assert 4.8 <= s.gas_production.locations.cauvery < 5.8

        assert 2290 <= s.well_pressure.average <= 2390
        assert s.well_pressure.critical in range(0, 3)
        assert s.well_pressure.warning in range(0, 5)

        assert s.wells.total == 150
        assert s.wells.active in (140, 141, 142)
        assert s.wells.maintenance in range(0, 8)
        assert s.wells.drilling in range(0, 4)

        assert 440 <= s.environmental_metrics.carbon_emissions <= 460
        assert 1150 <= s.environmental_metrics.water_usage <= 1250
        assert 80 <= s.environmental_metrics.gas_flaring <= 90

        assert s.safety_metrics.days_without_incident == 145
        assert s.safety_metrics.active_alerts in range(0, 4)
        assert s.safety_metrics.inspections_due in range(0, 6)

    def test_lower_bounds_with_zero_draws(self):
        s = generate_snapshot(SequenceRandomSource([0.0], cycle=True))

        assert s.oil_production.current == pytest.approx(2.4)
        assert s.gas_production.current == pytest.approx(22.4)
        assert s.oil_production.locations.mumbai_high == pytest.approx(1.2)
        assert s.well_pressure.average == pytest.approx(2290)
        assert s.well_pressure.critical == 0
        assert s.wells.active == 142
        assert s.wells.maintenance == 0
        assert s.environmental_metrics.water_usage == pytest.approx(1150)
        assert s.safety_metrics.active_alerts == 0

    def test_upper_edge_with_near_one_draws(self):
        s = generate_snapshot(SequenceRandomSource([0.999999], cycle=True))

        assert s.oil_production.current == pytest.approx(2.6, abs=1e-5)
        assert s.well_pressure.critical == 2
        assert s.well_pressure.warning == 4
        # 142 - floor(0.999999 * 3) = 142 - 2
        assert s.wells.active == 140
        assert s.wells.maintenance == 7
        assert s.wells.drilling == 3
        assert s.safety_metrics.active_alerts == 3
        assert s.safety_metrics.inspections_due == 5


# =============================================================================
# ORDEN DE EXTRACCIÓN
# =============================================================================

class TestDrawOrder:
    """Una secuencia fija se mapea a campos concretos."""

    def test_consumes_one_draw_per_random_field(self):
        rng = SequenceRandomSource([0.5], cycle=True)
        generate_snapshot(rng)
        assert rng.consumed == DRAWS_PER_SNAPSHOT

    def test_draws_follow_wire_order(self):
        values = [0.0] * DRAWS_PER_SNAPSHOT
        values[0] = 0.75   # oil current
        values[4] = 0.25   # gas current
        values[8] = 0.9    # pressure average
        values[11] = 0.5   # wells active -> floor(1.5) = 1
        values[18] = 0.99  # inspections due -> floor(5.94) = 5
        s = generate_snapshot(SequenceRandomSource(values))

        assert s.oil_production.current == pytest.approx(2.5 + 0.05)
        assert s.gas_production.current == pytest.approx(23.4 - 0.5)
        assert s.well_pressure.average == pytest.approx(2340 + 40)
        assert s.wells.active == 141
        assert s.safety_metrics.inspections_due == 5

    def test_same_seed_is_reproducible(self):
        a = generate_snapshot(SystemRandomSource(7))
        b = generate_snapshot(SystemRandomSource(7))
        assert a == b


# =============================================================================
# FORMA DEL JSON
# =============================================================================

class TestWireShape:

    def test_wire_uses_camel_case_keys(self):
        wire = generate_snapshot(SystemRandomSource(1)).to_wire()

        assert set(wire) == WIRE_KEYS
        assert set(wire["oilProduction"]["locations"]) == {
            "mumbaiHigh",
            "krishnaGodavari",
            "cauvery",
        }
        assert set(wire["safetyMetrics"]) == {
            "daysWithoutIncident",
            "activeAlerts",
            "inspectionsDue",
        }

    def test_repeated_calls_share_shape_not_values(self):
        rng = SystemRandomSource()
        first = generate_snapshot(rng).to_wire()
        second = generate_snapshot(rng).to_wire()

        assert set(first) == set(second)
        for key in WIRE_KEYS:
            assert set(first[key]) == set(second[key])
        assert first["oilProduction"]["current"] != second["oilProduction"]["current"]

    def test_snapshot_is_immutable(self):
        s = generate_snapshot(SystemRandomSource(3))
        with pytest.raises(Exception):
            s.wells = None  # type: ignore[misc]


# =============================================================================
# FUENTES ALEATORIAS
# =============================================================================

class TestSequenceRandomSource:

    def test_rejects_values_out_of_range(self):
        with pytest.raises(ValueError):
            SequenceRandomSource([0.2, 1.0])

    def test_rejects_empty_sequence(self):
        with pytest.raises(ValueError):
            SequenceRandomSource([])

    def test_exhaustion_raises(self):
        rng = SequenceRandomSource([0.1] * (DRAWS_PER_SNAPSHOT - 1))
        with pytest.raises(RandomSourceExhausted):
            generate_snapshot(rng)

    def test_cycle_restarts_sequence(self):
        rng = SequenceRandomSource([0.1, 0.2], cycle=True)
        assert [rng.random() for _ in range(5)] == [0.1, 0.2, 0.1, 0.2, 0.1]
        assert rng.consumed == 5
