"""Status command for the gofritai CLI."""

import typer

from gofritai.cli.context import get_app_context
from gofritai.cli.presenters.status import StatusPresenter


def status(ctx: typer.Context) -> None:
    """Show status of all free tier services."""
    # TODO: derive rows from collected quota usage once the monitor records it
    StatusPresenter(console=get_app_context(ctx).console).present()
