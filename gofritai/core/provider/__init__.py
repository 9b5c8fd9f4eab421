"""Free tier provider catalogue.

- models: Provider, FreeTier and Limit value types with their enumerations
- registry: ProviderRegistry, the read-only query surface over a catalogue
- catalogue: The built-in provider table and its registry factory
"""

from gofritai.core.provider.catalogue import DEFAULT_PROVIDERS, build_default_registry
from gofritai.core.provider.models import Category, Duration, FreeTier, Limit, Period, Provider
from gofritai.core.provider.registry import DuplicateProviderError, ProviderRegistry

__all__ = [
    "Category",
    "Duration",
    "Period",
    "Limit",
    "FreeTier",
    "Provider",
    "ProviderRegistry",
    "DuplicateProviderError",
    "DEFAULT_PROVIDERS",
    "build_default_registry",
]
