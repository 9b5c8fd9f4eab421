"""Catalogue commands for the gofritai CLI."""

import logging
from typing import Optional

import typer

from gofritai.cli.context import get_app_context
from gofritai.cli.presenters.providers import ProviderDetailPresenter, ProviderListPresenter
from gofritai.core.provider import Category

logger = logging.getLogger(__name__)


def list_providers(
    ctx: typer.Context,
    category: Optional[Category] = typer.Option(
        None, "--category", "-c", case_sensitive=False, help="Only show one category"
    ),
    no_cc: bool = typer.Option(False, "--no-cc", help="Only show providers without a credit card"),
    as_json: bool = typer.Option(False, "--json", help="Print providers as JSON"),
) -> None:
    """List all supported free tier providers."""
    app_context = get_app_context(ctx)
    registry = app_context.registry
    presenter = ProviderListPresenter(console=app_context.console)

    logger.debug(f"Listing providers (category={category}, no_cc={no_cc})")

    if as_json:
        providers = registry.by_category(category) if category else registry.list_all()
        if no_cc:
            allowed = {p.id for p in registry.no_credit_card()}
            providers = tuple(p for p in providers if p.id in allowed)
        presenter.present_json(providers)
        return

    presenter.present(registry, category=category, no_credit_card=no_cc)


def show_provider(
    ctx: typer.Context,
    provider_id: str = typer.Argument(..., help="Provider id, e.g. oracle-arm"),
    as_json: bool = typer.Option(False, "--json", help="Print the provider as JSON"),
) -> None:
    """Show one provider and its free tier limits."""
    app_context = get_app_context(ctx)
    presenter = ProviderDetailPresenter(console=app_context.console)

    provider = app_context.registry.get(provider_id)
    if provider is None:
        logger.debug(f"Provider '{provider_id}' not found")
        presenter.present_not_found(provider_id)
        raise typer.Exit(code=1)

    if as_json:
        presenter.present_json(provider)
    else:
        presenter.present(provider)
