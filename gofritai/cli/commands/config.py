"""Configuration commands for the gofritai CLI."""

import typer
from rich.table import Table

from gofritai.cli.context import get_app_context
from gofritai.core.config import ConfigError, ConfigSchema, load_env_var, validate_all

app = typer.Typer(help="Configuration management")


@app.command()
def show(ctx: typer.Context) -> None:
    """Show effective configuration values."""
    app_context = get_app_context(ctx)

    try:
        values = app_context.load_config().as_dict()
    except ConfigError:
        values = None

    table = Table(title="GoFritAI Configuration")
    table.add_column("Variable", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Description")

    for spec in sorted(ConfigSchema.all_specs().values(), key=lambda s: s.name):
        if values is not None:
            value = str(values[spec.name])
        else:
            # Mark which variables are broken
            try:
                value = str(load_env_var(spec))
            except ConfigError as e:
                value = f"[red]invalid: {e.value}[/red]"
        table.add_row(spec.name, value, spec.description)

    app_context.console.print(table)


@app.command()
def validate(ctx: typer.Context) -> None:
    """Validate configuration from the environment."""
    console = get_app_context(ctx).console

    errors = validate_all()
    if errors:
        for error in errors:
            console.print(f"[red]❌ {error}[/red]")
        raise typer.Exit(code=1)

    console.print("[green]✅ Configuration is valid[/green]")
