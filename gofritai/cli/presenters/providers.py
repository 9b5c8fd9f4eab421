"""Presenters for provider display in CLI."""

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gofritai.core.provider import Category, Provider, ProviderRegistry

CATEGORY_COLORS = {
    Category.COMPUTE: "[cyan]",
    Category.DATABASE: "[green]",
    Category.STORAGE: "[yellow]",
    Category.LLM: "[magenta]",
    Category.AUTH: "[blue]",
    Category.MONITORING: "[white]",
    Category.SERVERLESS: "[red]",
}


def _credit_card_cell(provider: Provider) -> str:
    label = escape(f"[{provider.credit_card_label}]")
    return f"[dim]{label}[/dim]" if provider.requires_credit_card else label


class ProviderListPresenter:
    """Presenter for the provider catalogue, grouped by category.

    Grouping goes through ProviderRegistry.by_category so the output keeps
    declaration order inside each group. This class holds no filtering
    logic of its own beyond choosing which groups to show.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present(
        self,
        registry: ProviderRegistry,
        category: Category | None = None,
        no_credit_card: bool = False,
    ) -> int:
        """Print the catalogue and return how many providers were shown.

        Args:
            registry: Catalogue to read from.
            category: Only show this category when given.
            no_credit_card: Only show providers that need no credit card.
        """
        self.console.print("🆓 Supported Free Tier Providers")
        self.console.print("================================")
        self.console.print()

        allowed = {p.id for p in registry.no_credit_card()} if no_credit_card else None
        categories = (category,) if category is not None else registry.categories()

        shown = 0
        for cat in categories:
            providers = [
                p for p in registry.by_category(cat) if allowed is None or p.id in allowed
            ]
            if not providers:
                continue
            self._present_category(cat, providers)
            shown += len(providers)

        if shown == 0:
            self.console.print("[dim]No providers match the given filters.[/dim]")
        return shown

    def _present_category(self, category: Category, providers: Iterable[Provider]) -> None:
        color = CATEGORY_COLORS.get(category, "")
        reset = "[/]" if color else ""
        self.console.print(f"📦 {color}{category.label}{reset}")

        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column("Provider", no_wrap=True)
        table.add_column("Free Tier")
        table.add_column("Credit Card", no_wrap=True)

        for provider in providers:
            table.add_row(
                f"   {escape(provider.name)}",
                escape(provider.free_tier.description),
                _credit_card_cell(provider),
            )

        self.console.print(table)
        self.console.print()

    def present_json(self, providers: Iterable[Provider]) -> None:
        self.console.print_json(data=[p.to_dict() for p in providers])


class ProviderDetailPresenter:
    """Presenter for a single provider and its limits."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present(self, provider: Provider) -> None:
        table = Table(title=provider.name)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("ID", provider.id)
        table.add_row("Category", provider.category.value)
        table.add_row("Free Tier", escape(provider.free_tier.description))
        table.add_row("Duration", provider.free_tier.duration.value)
        table.add_row("Credit Card", provider.credit_card_label)
        table.add_row("URL", provider.url)
        if provider.api_endpoint:
            table.add_row("API Endpoint", provider.api_endpoint)

        if provider.free_tier.limits:
            limits = "\n".join(escape(limit.summary()) for limit in provider.free_tier.limits)
        else:
            limits = "[dim]none published[/dim]"
        table.add_row("Limits", limits)

        for key, value in provider.metadata.items():
            table.add_row(escape(key), escape(value))

        self.console.print(table)

    def present_json(self, provider: Provider) -> None:
        self.console.print_json(data=provider.to_dict())

    def present_not_found(self, provider_id: str) -> None:
        self.console.print(f"[red]❌ Unknown provider: {escape(provider_id)}[/red]")
