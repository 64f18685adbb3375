"""Portfolio-level aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class PortfolioMetrics:
    """Headline metrics over the property collection."""

    total_properties: int
    occupancy_rate: int  # percentage (0-100)
    monthly_income: Decimal


@dataclass(frozen=True)
class StatusCounts:
    """Number of properties per status."""

    available: int
    rented: int
    reserved: int

    @property
    def total(self) -> int:
        return self.available + self.rented + self.reserved


@dataclass(frozen=True)
class PortfolioStatistics:
    """Key metrics for the landlord dashboard."""

    total_properties: int
    available_properties: int
    rented_properties: int
    reserved_properties: int
    occupancy_rate: int
    total_monthly_income: Decimal
    average_rent: Decimal
    properties_needing_attention: int


@dataclass(frozen=True)
class IncomeBreakdown:
    """Income figures mapped one-to-one from the payment summary."""

    expected_monthly: Decimal
    collected_this_month: Decimal
    pending_this_month: Decimal
    overdue_amount: Decimal


@dataclass(frozen=True)
class PropertyDistribution:
    """Property counts by type, city and status."""

    by_type: dict[str, int] = field(default_factory=dict)
    by_city: dict[str, int] = field(default_factory=dict)
    by_status: dict[str, int] = field(default_factory=dict)
