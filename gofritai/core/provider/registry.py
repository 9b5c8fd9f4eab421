"""Provider registry for querying the free tier catalogue."""

import logging
from collections.abc import Iterable, Iterator

from gofritai.core.provider.models import Category, Provider

logger = logging.getLogger(__name__)


class DuplicateProviderError(ValueError):
    """Raised when two providers in one catalogue share an id."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"Duplicate provider id '{provider_id}'")


class ProviderRegistry:
    """Immutable catalogue of free tier providers.

    Responsibilities:
    - Hold the providers in declaration order
    - Look up a provider by id
    - Filter providers by category or credit card requirement

    The registry is built once and never changes, so it can be shared
    between any number of readers. Pass a different iterable of providers
    to build a substitute catalogue, e.g. in tests.
    """

    def __init__(self, providers: Iterable[Provider]) -> None:
        """Build the registry, rejecting duplicate ids.

        Args:
            providers: Providers in declaration order.

        Raises:
            DuplicateProviderError: If two providers share an id.
        """
        self._providers: tuple[Provider, ...] = tuple(providers)

        seen: set[str] = set()
        for provider in self._providers:
            if provider.id in seen:
                raise DuplicateProviderError(provider.id)
            seen.add(provider.id)

        logger.debug(f"Provider registry built with {len(self._providers)} providers")

    def get(self, provider_id: str) -> Provider | None:
        """Get a provider by id.

        Args:
            provider_id: The slug of the provider to retrieve.

        Returns:
            The Provider if found, None otherwise.
        """
        for provider in self._providers:
            if provider.id == provider_id:
                return provider
        return None

    def by_category(self, category: Category | str) -> tuple[Provider, ...]:
        """Return all providers in a category, in declaration order.

        Args:
            category: A Category or its string value.

        Returns:
            A possibly empty tuple of providers.
        """
        category = Category(category)
        return tuple(p for p in self._providers if p.category is category)

    def no_credit_card(self) -> tuple[Provider, ...]:
        """Return the providers that can be used without a credit card."""
        return tuple(p for p in self._providers if not p.requires_credit_card)

    def categories(self) -> tuple[Category, ...]:
        """Return the categories with at least one provider, in enum order."""
        present = {p.category for p in self._providers}
        return tuple(c for c in Category if c in present)

    def list_all(self) -> tuple[Provider, ...]:
        return self._providers

    def exists(self, provider_id: str) -> bool:
        return self.get(provider_id) is not None

    def __contains__(self, provider_id: object) -> bool:
        return isinstance(provider_id, str) and self.exists(provider_id)

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)
