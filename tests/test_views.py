"""Tests de las vistas derivadas y del render de texto."""

from __future__ import annotations

import pytest

from dashboard_service.render import render_dashboard
from dashboard_service.view_model import DashboardViewModel
from dashboard_service.views import (
    LOCATION_NAMES,
    MAINTENANCE_SCHEDULE,
    environmental_panel,
    header_alerts,
    location_breakdown,
    production_series,
    safety_panel,
    summary_cards,
)
from metrics_api.simulation import SequenceRandomSource, generate_snapshot


@pytest.fixture
def centered_snapshot():
    # Todas las extracciones a 0.5
    return generate_snapshot(SequenceRandomSource([0.5], cycle=True))


class TestLocationBreakdown:

    def test_three_named_oil_entries(self, centered_snapshot):
        entries = location_breakdown(centered_snapshot)

        assert [e.name for e in entries] == list(LOCATION_NAMES)
        assert [e.value for e in entries] == pytest.approx([1.25, 0.85, 0.55])
        assert sum(e.share for e in entries) == pytest.approx(1.0)
        assert entries[0].share == pytest.approx(1.25 / 2.65)

    def test_gas_breakdown(self, centered_snapshot):
        entries = location_breakdown(centered_snapshot, "gas")
        assert [e.value for e in entries] == pytest.approx([10.7, 8.9, 5.3])

    def test_view_model_without_snapshot_has_empty_breakdown(self, fake_fetcher_cls):
        vm = DashboardViewModel(fake_fetcher_cls())
        assert vm.location_breakdown() == []


class TestCardsAndPanels:

    def test_summary_cards_formatting(self, centered_snapshot):
        cards = {c.title: c for c in summary_cards(centered_snapshot)}

        assert cards["Oil Production"].value == "2.50M bbl/day"
        assert cards["Oil Production"].detail == "Target: 2.7M bbl/day"
        assert cards["Gas Production"].value == "23.4 MCM/day"
        assert cards["Gas Production"].detail == "Target: 25 MCM/day"
        assert cards["Well Pressure"].value == "2340 PSI"
        assert cards["Well Pressure"].detail == "1 Critical"
        assert cards["Active Wells"].value == "141/150"
        assert cards["Active Wells"].detail == "4 in maintenance"

    def test_environmental_panel(self, centered_snapshot):
        items = {i.label: i.value for i in environmental_panel(centered_snapshot)}
        assert items == {
            "Carbon Emissions": "450.0 kt CO2e",
            "Water Usage": "1200 m³/day",
            "Gas Flaring": "85.0%",
        }

    def test_safety_panel_and_header(self, centered_snapshot):
        items = {i.label: i.value for i in safety_panel(centered_snapshot)}
        assert items == {
            "Days Without Incident": "145",
            "Active Alerts": "2",
            "Inspections Due": "3",
        }
        assert header_alerts(centered_snapshot) == "2 Active Alerts"

    def test_maintenance_schedule_is_static(self):
        assert [t.well for t in MAINTENANCE_SCHEDULE] == [
            "Well #A-123",
            "Well #B-456",
            "Well #C-789",
        ]
        assert MAINTENANCE_SCHEDULE[0].priority == "high"


class TestRender:

    def test_loading_before_first_snapshot(self, fake_fetcher_cls):
        vm = DashboardViewModel(fake_fetcher_cls())
        assert render_dashboard(vm) == "Loading..."

    @pytest.mark.asyncio
    async def test_render_after_polls(self, fake_fetcher_cls, ticking_clock):
        vm = DashboardViewModel(fake_fetcher_cls(fail_on={3}), clock=ticking_clock)
        await vm.poll_once()
        await vm.poll_once()
        await vm.poll_once()

        text = render_dashboard(vm)

        assert "ONGC Monitoring Dashboard" in text
        assert "Oil Production" in text
        assert "Mumbai High" in text
        assert "Well #C-789" in text
        assert "12:00:00  oil=1.00" in text
        assert "12:00:03  oil=2.00" in text
        assert "last poll failed (1x)" in text

    @pytest.mark.asyncio
    async def test_production_series(self, fake_fetcher_cls, ticking_clock):
        vm = DashboardViewModel(fake_fetcher_cls(), clock=ticking_clock)
        await vm.poll_once()
        await vm.poll_once()

        series = vm.production_series()
        assert series == production_series(vm.history)
        assert series[0] == {
            "timestamp": "2026-01-01T12:00:00+00:00",
            "oil": 1.0,
            "gas": 10.0,
        }
        assert series[1]["oil"] == 2.0
