"""Main CLI entry point for gofritai."""

import logging

import typer

from gofritai.cli.commands import catalog, config, monitor, status
from gofritai.cli.context import AppContext, get_app_context
from gofritai.core.config import ConfigError
from gofritai.core.logging import configure_root_logging
from gofritai.core.provider import build_default_registry

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gofritai",
    help=(
        "Free Tier AI - Monitor and manage cloud free tiers\n\n"
        "GoFritAI helps you maximize free tier usage across cloud providers."
    ),
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("status")(status.status)
app.command("list")(catalog.list_providers)
app.command("show")(catalog.show_provider)
app.command("monitor")(monitor.monitor)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version(ctx: typer.Context) -> None:
    """Show version information."""
    from gofritai import __version__

    console = get_app_context(ctx).console
    console.print(f"[bold cyan]gofritai[/bold cyan] version [green]{__version__}[/green]")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """GoFritAI CLI."""
    if ctx.obj is None:
        ctx.obj = AppContext(registry=build_default_registry())
    app_context: AppContext = ctx.obj

    try:
        log_level = app_context.load_config().log_level
    except ConfigError:
        # Reported by the commands that read configuration
        log_level = None

    level = configure_root_logging(log_level, verbose=verbose)
    logger.debug(
        f"Starting '{ctx.invoked_subcommand}' with {len(app_context.registry)} providers "
        f"at log level {level}"
    )


if __name__ == "__main__":
    app()
