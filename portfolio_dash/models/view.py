"""View models consumed by the presentation layer."""

from dataclasses import dataclass
from decimal import Decimal

from portfolio_dash.models.enums import AttentionReason, Severity
from portfolio_dash.models.filters import PropertyFilters, SortOptions
from portfolio_dash.models.payment import PaymentSummary, RentPayment
from portfolio_dash.models.portfolio import IncomeBreakdown, PortfolioStatistics
from portfolio_dash.models.property import Property, PropertyWithStatus


@dataclass(frozen=True)
class LoadingState:
    is_loading: bool
    loading_message: str | None


@dataclass(frozen=True)
class ErrorState:
    has_error: bool
    error_message: str | None


@dataclass(frozen=True)
class AttentionItem:
    """Something on the portfolio that needs the landlord's attention."""

    property_id: str
    property_address: str
    reason: AttentionReason
    severity: Severity
    message: str
    action_label: str


@dataclass(frozen=True)
class QuickStats:
    """Dashboard headline numbers."""

    total_properties: int
    occupancy_rate: int
    monthly_income: Decimal
    needs_attention: int


@dataclass(frozen=True)
class PortfolioViewModel:
    """Complete derived snapshot of the portfolio dashboard.

    Every field is a pure function of the properties, payments, filters,
    loading flag, error message and reference time it was built from.
    """

    loading: LoadingState
    error: ErrorState

    # Core data
    properties: tuple[PropertyWithStatus, ...]
    filtered_properties: tuple[PropertyWithStatus, ...]
    payments: tuple[RentPayment, ...]

    # Key metrics
    statistics: PortfolioStatistics
    payment_summary: PaymentSummary
    income_breakdown: IncomeBreakdown

    # Filters & sorting
    filters: PropertyFilters
    sort: SortOptions

    # UI state
    has_properties: bool
    has_active_filters: bool
    show_empty_state: bool

    # Derived collections
    available_cities: tuple[str, ...]
    properties_needing_attention: tuple[PropertyWithStatus, ...]
    overdue_payments: tuple[RentPayment, ...]
    upcoming_lease_expiries: tuple[PropertyWithStatus, ...]
    attention_items: tuple[AttentionItem, ...]

    # Quick actions
    needs_attention_count: int
    overdue_payment_count: int
    expiring_soon_count: int

    @property
    def is_loading(self) -> bool:
        return self.loading.is_loading

    @property
    def has_error(self) -> bool:
        return self.error.has_error


@dataclass(frozen=True)
class PropertyDetailViewModel:
    """View model for a single property's detail page."""

    loading: LoadingState
    error: ErrorState
    property: Property | None
    current_payment: RentPayment | None
    payment_history: tuple[RentPayment, ...]
    has_property: bool
    has_tenant: bool
    days_until_lease_expiry: int | None
    needs_attention: bool
    attention_reasons: tuple[AttentionReason, ...]
