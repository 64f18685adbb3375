"""Domain models for the landlord portfolio dashboard."""

from portfolio_dash.models.enums import (
    AttentionReason,
    PaymentStatus,
    PropertySortField,
    PropertyStatus,
    PropertyType,
    Severity,
    SortDirection,
)
from portfolio_dash.models.filters import (
    DEFAULT_FILTERS,
    DEFAULT_SORT,
    PaymentFilters,
    PropertyFilters,
    SortOptions,
    quick_filters_from_params,
)
from portfolio_dash.models.payment import MonthlyPaymentOverview, PaymentSummary, RentPayment
from portfolio_dash.models.portfolio import (
    IncomeBreakdown,
    PortfolioMetrics,
    PortfolioStatistics,
    PropertyDistribution,
    StatusCounts,
)
from portfolio_dash.models.property import Property, PropertyWithStatus, Tenant
from portfolio_dash.models.view import (
    AttentionItem,
    ErrorState,
    LoadingState,
    PortfolioViewModel,
    PropertyDetailViewModel,
    QuickStats,
)

__all__ = [
    "AttentionItem",
    "AttentionReason",
    "DEFAULT_FILTERS",
    "DEFAULT_SORT",
    "ErrorState",
    "IncomeBreakdown",
    "LoadingState",
    "MonthlyPaymentOverview",
    "PaymentFilters",
    "PaymentStatus",
    "PaymentSummary",
    "PortfolioMetrics",
    "PortfolioStatistics",
    "PortfolioViewModel",
    "Property",
    "PropertyDetailViewModel",
    "PropertyDistribution",
    "PropertyFilters",
    "PropertySortField",
    "PropertyStatus",
    "PropertyType",
    "PropertyWithStatus",
    "QuickStats",
    "RentPayment",
    "Severity",
    "SortDirection",
    "SortOptions",
    "StatusCounts",
    "Tenant",
    "quick_filters_from_params",
]
