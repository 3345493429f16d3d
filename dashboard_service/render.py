from __future__ import annotations

from typing import List

from .view_model import DashboardViewModel
from .views import (
    MAINTENANCE_SCHEDULE,
    environmental_panel,
    header_alerts,
    safety_panel,
    summary_cards,
)

TITLE = "ONGC Monitoring Dashboard"


def render_dashboard(vm: DashboardViewModel) -> str:
    """Render de texto plano del dashboard completo."""

    snapshot = vm.snapshot
    if snapshot is None:
        return "Loading..."

    lines: List[str] = [f"== {TITLE} ==  [{header_alerts(snapshot)}]", ""]

    for card in summary_cards(snapshot):
        lines.append(f"{card.title:<16} {card.value:<18} {card.detail}")
    lines.append("")

    lines.append("-- Environmental Metrics --")
    lines.extend(f"  {item.label:<22} {item.value}" for item in environmental_panel(snapshot))
    lines.append("-- Safety Metrics --")
    lines.extend(f"  {item.label:<22} {item.value}" for item in safety_panel(snapshot))
    lines.append("")

    lines.append("-- Real-time Production Trends --")
    for point in vm.history:
        lines.append(
            f"  {point.timestamp.strftime('%H:%M:%S')}  oil={point.oil:.2f}  gas={point.gas:.1f}"
        )
    lines.append("")

    lines.append("-- Production by Location (oil) --")
    for entry in vm.location_breakdown("oil"):
        lines.append(f"  {entry.name:<18} {entry.value:.3f}  ({entry.share:.0%})")
    lines.append("")

    lines.append("-- Maintenance Schedule --")
    for task in MAINTENANCE_SCHEDULE:
        lines.append(f"  [{task.priority:<6}] {task.well}: {task.task} (Due: {task.due})")

    if vm.last_error:
        lines.append("")
        lines.append(
            f"! last poll failed ({vm.consecutive_failures}x): {vm.last_error}"
        )

    return "\n".join(lines)
