"""Objects shared by all CLI commands through the Typer context."""

from dataclasses import dataclass, field

import typer
from rich.console import Console

from gofritai.core.config import Config, ConfigError
from gofritai.core.provider import ProviderRegistry


@dataclass
class AppContext:
    """Dependencies handed to every command.

    The root callback fills in anything missing, so callers may pass a
    partially built context (e.g. a substitute registry) via ``obj=``.
    Configuration is loaded on first use so that commands which do not
    read it, and ``--help``, keep working when the environment is invalid.
    """

    registry: ProviderRegistry
    console: Console = field(default_factory=Console)
    error_console: Console = field(default_factory=lambda: Console(stderr=True))
    config: Config | None = None

    def load_config(self) -> Config:
        """Return the configuration, loading it from the environment once.

        Raises:
            ConfigError: If any variable is invalid.
        """
        if self.config is None:
            self.config = Config()
        return self.config

    def require_config(self) -> Config:
        """Return the configuration or stop the command with exit code 1."""
        try:
            return self.load_config()
        except ConfigError as e:
            self.error_console.print(f"[red]❌ Configuration error: {e}[/red]")
            raise typer.Exit(code=1) from e


def get_app_context(ctx: typer.Context) -> AppContext:
    app_context = ctx.find_object(AppContext)
    if app_context is None:
        raise RuntimeError("CLI context was not initialised by the root callback")
    return app_context
