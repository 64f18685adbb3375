"""Portfolio view-model derivation.

``build_view_model`` is the single entry point the store calls. It takes raw
records plus UI state and returns a complete, immutable snapshot. The
reference time is resolved once per build, so every lease-related field in a
snapshot agrees with every other.
"""

from datetime import datetime
from typing import Sequence

from portfolio_dash.analytics.attention import (
    add_status_to_property,
    build_attention_items,
    needs_attention,
)
from portfolio_dash.analytics.filters import apply_filters, has_active_filters
from portfolio_dash.analytics.metrics import (
    calculate_average_rent,
    calculate_metrics,
    count_by_status,
)
from portfolio_dash.analytics.payments import calculate_payment_summary, is_overdue
from portfolio_dash.analytics.temporal import is_within_expiry_window
from portfolio_dash.models import (
    DEFAULT_SORT,
    ErrorState,
    IncomeBreakdown,
    LoadingState,
    PaymentSummary,
    PortfolioStatistics,
    PortfolioViewModel,
    Property,
    PropertyFilters,
    QuickStats,
    RentPayment,
    SortOptions,
)

LOADING_MESSAGE = "Loading portfolio data..."


def calculate_statistics(
    properties: Sequence[Property],
    payments: Sequence[RentPayment],
    reference: datetime | None = None,
) -> PortfolioStatistics:
    """Calculate dashboard statistics for the whole portfolio."""
    metrics = calculate_metrics(properties)
    status_counts = count_by_status(properties)
    average_rent = calculate_average_rent(properties)

    attention_count = sum(
        1 for prop in properties if needs_attention(prop, payments, reference)
    )

    return PortfolioStatistics(
        total_properties=metrics.total_properties,
        available_properties=status_counts.available,
        rented_properties=status_counts.rented,
        reserved_properties=status_counts.reserved,
        occupancy_rate=metrics.occupancy_rate,
        total_monthly_income=metrics.monthly_income,
        average_rent=average_rent,
        properties_needing_attention=attention_count,
    )


def build_income_breakdown(summary: PaymentSummary) -> IncomeBreakdown:
    """Map payment summary totals onto the income breakdown."""
    return IncomeBreakdown(
        expected_monthly=summary.total_expected,
        collected_this_month=summary.total_paid,
        pending_this_month=summary.total_pending,
        overdue_amount=summary.total_overdue,
    )


def build_view_model(
    properties: Sequence[Property],
    payments: Sequence[RentPayment],
    filters: PropertyFilters,
    loading: bool,
    error: str | None,
    *,
    reference_time: datetime | None = None,
    sort: SortOptions = DEFAULT_SORT,
) -> PortfolioViewModel:
    """Build the complete portfolio view model.

    Parameters
    ----------
    properties : Sequence[Property]
        Raw property records.
    payments : Sequence[RentPayment]
        Raw payment records.
    filters : PropertyFilters
        Current filter criteria.
    loading : bool
        Whether a load is in flight.
    error : str | None
        Last load error message, if any.
    reference_time : datetime | None
        Instant used for every lease classification (defaults to now).
    sort : SortOptions
        Sort hint passed through to the presentation layer.

    Returns
    -------
    PortfolioViewModel
        Snapshot fully determined by the arguments.
    """
    reference = reference_time if reference_time is not None else datetime.now()

    statistics = calculate_statistics(properties, payments, reference)
    payment_summary = calculate_payment_summary(payments)

    properties_with_status = tuple(
        add_status_to_property(prop, payments, reference) for prop in properties
    )
    filtered_properties = tuple(apply_filters(properties_with_status, filters))

    income_breakdown = build_income_breakdown(payment_summary)

    available_cities = tuple(sorted({prop.city for prop in properties_with_status}))
    properties_needing_attention = tuple(p for p in properties_with_status if p.needs_attention)
    overdue_payments = tuple(p for p in payments if is_overdue(p))
    upcoming_lease_expiries = tuple(
        p for p in properties_with_status if is_within_expiry_window(p.days_until_lease_expiry)
    )

    return PortfolioViewModel(
        loading=LoadingState(
            is_loading=loading,
            loading_message=LOADING_MESSAGE if loading else None,
        ),
        error=ErrorState(has_error=bool(error), error_message=error),
        properties=properties_with_status,
        filtered_properties=filtered_properties,
        payments=tuple(payments),
        statistics=statistics,
        payment_summary=payment_summary,
        income_breakdown=income_breakdown,
        filters=filters,
        sort=sort,
        has_properties=len(properties_with_status) > 0,
        has_active_filters=has_active_filters(filters),
        show_empty_state=len(filtered_properties) == 0,
        available_cities=available_cities,
        properties_needing_attention=properties_needing_attention,
        overdue_payments=overdue_payments,
        upcoming_lease_expiries=upcoming_lease_expiries,
        attention_items=tuple(build_attention_items(properties_needing_attention)),
        needs_attention_count=len(properties_needing_attention),
        overdue_payment_count=len(overdue_payments),
        expiring_soon_count=len(upcoming_lease_expiries),
    )


def build_quick_stats(vm: PortfolioViewModel) -> QuickStats:
    """Headline numbers for the dashboard tiles."""
    return QuickStats(
        total_properties=vm.statistics.total_properties,
        occupancy_rate=vm.statistics.occupancy_rate,
        monthly_income=vm.statistics.total_monthly_income,
        needs_attention=vm.needs_attention_count,
    )
