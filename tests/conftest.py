"""Shared pytest configuration and fixtures for GoFritAI tests."""

import logging
from io import StringIO

import pytest
from rich.console import Console

from gofritai.core.config import ConfigSchema
from gofritai.core.provider import (
    Category,
    FreeTier,
    Limit,
    Period,
    Provider,
    ProviderRegistry,
    build_default_registry,
)


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "tests/unit/" in str(item.fspath) or "tests/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove GoFritAI settings so every test starts from the defaults."""
    for spec in ConfigSchema.all_specs().values():
        monkeypatch.delenv(spec.name, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("COLUMNS", "120")


@pytest.fixture
def registry() -> ProviderRegistry:
    """The built-in catalogue."""
    return build_default_registry()


@pytest.fixture
def small_registry() -> ProviderRegistry:
    """A hand-made catalogue used to check that registries are substitutable."""
    return ProviderRegistry(
        [
            Provider(
                id="alpha-db",
                name="Alpha DB",
                category=Category.DATABASE,
                free_tier=FreeTier(
                    description="1GB forever",
                    limits=(Limit(resource="storage", amount=1, unit="GB"),),
                ),
                requires_credit_card=False,
                url="https://alpha.example.com",
                metadata={"region": "eu-west"},
            ),
            Provider(
                id="beta-compute",
                name="Beta Compute",
                category=Category.COMPUTE,
                free_tier=FreeTier(
                    description="2 vCPU trial",
                    limits=(Limit(resource="hours", amount=100, unit="hours", period=Period.MONTH),),
                    duration="trial",
                ),
                requires_credit_card=True,
                url="https://beta.example.com",
            ),
            Provider(
                id="gamma-db",
                name="Gamma DB",
                category=Category.DATABASE,
                free_tier=FreeTier(description="5k reads/day"),
                requires_credit_card=False,
                url="https://gamma.example.com",
            ),
        ]
    )


@pytest.fixture
def console() -> Console:
    """Rich console writing to an in-memory buffer."""
    return Console(file=StringIO(), width=120)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers installed by configure_root_logging during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
