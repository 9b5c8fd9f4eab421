"""Monitor command for the gofritai CLI."""

import logging

import typer

from gofritai.cli.context import get_app_context

logger = logging.getLogger(__name__)


def monitor(ctx: typer.Context) -> None:
    """Start monitoring daemon."""
    app_context = get_app_context(ctx)
    config = app_context.require_config()
    console = app_context.console

    console.print("🔄 Starting monitor daemon...")
    console.print(f"   Checking quotas every {config.monitor_interval_minutes} minutes")
    console.print(f"   Alerts enabled for >{config.alert_threshold_percent}% usage")

    logger.info("Quota polling is not available yet; monitor exits without checking")
