"""Presenter for the free tier status overview."""

from dataclasses import dataclass

from rich.console import Console
from rich.table import Table


@dataclass(frozen=True)
class StatusSection:
    """One block of the status overview."""

    icon: str
    title: str
    rows: tuple[tuple[str, str], ...]  # (service, usage)


# Placeholder figures until live quota collection exists.
STATUS_SNAPSHOT: tuple[StatusSection, ...] = (
    StatusSection(
        icon="☁️ ",
        title="COMPUTE",
        rows=(
            ("Oracle ARM", "✅ 4 OCPU / 24GB (0% used)"),
            ("Fly.io", "✅ 3 VMs / 160GB (12% used)"),
            ("Render", "✅ 750h/mo (45% used)"),
        ),
    ),
    StatusSection(
        icon="🗄️ ",
        title="DATABASES",
        rows=(
            ("Supabase", "✅ 500MB (23% used)"),
            ("Turso", "✅ 9GB (5% used)"),
            ("Upstash", "✅ 10k cmd/day (78% used)"),
        ),
    ),
)


class StatusPresenter:
    """Presenter for the status command."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present(self, sections: tuple[StatusSection, ...] = STATUS_SNAPSHOT) -> None:
        self.console.print("📊 Free Tier Status")
        self.console.print("==================")
        self.console.print()

        for index, section in enumerate(sections):
            if index:
                self.console.print()
            self.console.print(f"{section.icon} [bold]{section.title}[/bold]")

            table = Table(show_header=False, box=None, pad_edge=False)
            table.add_column("Service", min_width=23, no_wrap=True)
            table.add_column("Usage")
            for service, usage in section.rows:
                table.add_row(f"   {service}", usage)
            self.console.print(table)
