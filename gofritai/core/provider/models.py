"""Value types describing free tier providers and their quota limits.

All records are frozen dataclasses holding tuples and read-only mappings, so a
catalogue built from them cannot be changed after construction.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Category(str, Enum):
    """Kind of offering a provider makes."""

    COMPUTE = "compute"
    DATABASE = "database"
    STORAGE = "storage"
    LLM = "llm"
    AUTH = "auth"
    MONITORING = "monitoring"
    SERVERLESS = "serverless"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    Category.COMPUTE: "COMPUTE",
    Category.DATABASE: "DATABASES",
    Category.STORAGE: "STORAGE",
    Category.LLM: "LLM APIS",
    Category.AUTH: "AUTH",
    Category.MONITORING: "MONITORING",
    Category.SERVERLESS: "SERVERLESS",
}


class Duration(str, Enum):
    """Lifetime of a free tier offer."""

    FOREVER = "forever"
    TWELVE_MONTHS = "12mo"
    TRIAL = "trial"


class Period(str, Enum):
    """Reset cadence of a recurring limit."""

    MINUTE = "minute"
    DAY = "day"
    MONTH = "month"


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,}"


@dataclass(frozen=True)
class Limit:
    """One quantitative constraint of a free tier.

    Attributes:
        resource: Name of the constrained resource (e.g. "vcpu", "storage")
        amount: Quantity allowed
        unit: Unit of measure (e.g. "GB", "requests")
        period: Reset cadence, or None for a one-time cap
    """

    resource: str
    amount: float
    unit: str
    period: Period | None = None

    def __post_init__(self) -> None:
        if not self.resource:
            raise ValueError("Limit resource is required")
        if self.amount < 0:
            raise ValueError(f"Limit amount for '{self.resource}' must be non-negative")
        if self.period is not None and not isinstance(self.period, Period):
            object.__setattr__(self, "period", Period(self.period))

    def summary(self) -> str:
        """Render the limit as e.g. ``vcpu: 4 cores`` or ``requests: 30 requests/minute``."""
        text = f"{self.resource}: {_format_amount(self.amount)} {self.unit}"
        if self.period is not None:
            text = f"{text}/{self.period.value}"
        return text

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "resource": self.resource,
            "amount": self.amount,
            "unit": self.unit,
        }
        if self.period is not None:
            data["period"] = self.period.value
        return data


@dataclass(frozen=True)
class FreeTier:
    """Quota description attached to a provider."""

    description: str
    limits: tuple[Limit, ...] = ()
    duration: Duration = Duration.FOREVER

    def __post_init__(self) -> None:
        object.__setattr__(self, "limits", tuple(self.limits))
        if not isinstance(self.duration, Duration):
            object.__setattr__(self, "duration", Duration(self.duration))

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "limits": [limit.to_dict() for limit in self.limits],
            "duration": self.duration.value,
        }


@dataclass(frozen=True)
class Provider:
    """A single free tier offering.

    Attributes:
        id: Unique slug (e.g. "oracle-arm")
        name: Display name
        category: Offering category
        free_tier: Limits of the offer
        requires_credit_card: Whether signing up needs a credit card
        url: Provider home page
        api_endpoint: Base URL of the provider API, if any
        metadata: Free-form read-only annotations
    """

    id: str
    name: str
    category: Category
    free_tier: FreeTier
    requires_credit_card: bool
    url: str
    api_endpoint: str | None = None
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Provider id is required")
        if not self.name:
            raise ValueError(f"Name is required for provider '{self.id}'")
        if not self.url:
            raise ValueError(f"URL is required for provider '{self.id}'")
        if not isinstance(self.category, Category):
            try:
                object.__setattr__(self, "category", Category(self.category))
            except ValueError as e:
                raise ValueError(
                    f"Invalid category '{self.category}' for provider '{self.id}'"
                ) from e
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def credit_card_label(self) -> str:
        return "CC required" if self.requires_credit_card else "No CC"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "free_tier": self.free_tier.to_dict(),
            "requires_cc": self.requires_credit_card,
            "url": self.url,
        }
        if self.api_endpoint:
            data["api_endpoint"] = self.api_endpoint
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data
