"""CLI entry point for the console dashboard."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional

import httpx

from common.config import get_settings
from dashboard_service.config.dashboard_config import DashboardConfig
from dashboard_service.metrics_client import HttpMetricsClient
from dashboard_service.render import render_dashboard
from dashboard_service.view_model import DashboardViewModel

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    p = argparse.ArgumentParser(description="ONGC console dashboard (polls /api/metrics)")
    p.add_argument("--url", default=settings.dashboard_metrics_url)
    p.add_argument("--interval-ms", type=int, default=settings.dashboard_poll_interval_ms)
    p.add_argument("--history-size", type=int, default=settings.dashboard_history_size)
    p.add_argument("--timeout", type=float, default=settings.dashboard_fetch_timeout_seconds)
    p.add_argument(
        "--polls",
        type=int,
        default=None,
        help="stop after N applied updates (default: run until Ctrl-C)",
    )
    p.add_argument("--log-level", default=settings.log_level)
    return p


async def run_dashboard(
    url: str,
    cfg: DashboardConfig,
    *,
    max_polls: Optional[int] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> DashboardViewModel:
    """Monta el dashboard, imprime cada render y desmonta al terminar."""

    done = asyncio.Event()

    async with HttpMetricsClient(
        url, timeout_seconds=cfg.fetch_timeout_seconds, client=http_client
    ) as client:
        vm = DashboardViewModel(client, cfg)

        def _on_update(model: DashboardViewModel) -> None:
            print(render_dashboard(model), flush=True)
            print(flush=True)
            if max_polls is not None and model.polls_applied >= max_polls:
                done.set()

        vm.subscribe(_on_update)
        vm.mount()
        try:
            await done.wait()
        finally:
            await vm.unmount()
            await vm.drain()

    return vm


def main() -> None:
    args = _build_parser().parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    cfg = DashboardConfig(
        poll_interval_ms=args.interval_ms,
        history_size=args.history_size,
        fetch_timeout_seconds=args.timeout,
    )

    logger.info("Dashboard started url=%s", args.url)
    logger.info(
        "Config: interval=%dms, history=%d, timeout=%.1fs, polls=%s",
        cfg.poll_interval_ms,
        cfg.history_size,
        cfg.fetch_timeout_seconds,
        args.polls,
    )

    try:
        asyncio.run(run_dashboard(args.url, cfg, max_polls=args.polls))
    except KeyboardInterrupt:
        logger.info("Dashboard detenido por el usuario")


if __name__ == "__main__":
    main()
