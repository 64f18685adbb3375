"""Pure derivation pipeline from raw portfolio records to view models."""

from portfolio_dash.analytics.attention import (
    ATTENTION_PRIORITY,
    AttentionFacts,
    add_status_to_property,
    build_attention_items,
    needs_attention,
    resolve_attention_reason,
)
from portfolio_dash.analytics.detail import build_property_detail
from portfolio_dash.analytics.filters import (
    apply_filters,
    apply_payment_filters,
    has_active_filters,
)
from portfolio_dash.analytics.metrics import (
    calculate_average_rent,
    calculate_distribution,
    calculate_metrics,
    count_by_status,
)
from portfolio_dash.analytics.payments import (
    calculate_payment_summary,
    has_overdue_payment,
    monthly_overview,
)
from portfolio_dash.analytics.temporal import (
    LEASE_EXPIRY_WINDOW_DAYS,
    days_until_expiry,
    is_expiring_soon,
    is_lease_expired,
)
from portfolio_dash.analytics.view_model import (
    build_income_breakdown,
    build_quick_stats,
    build_view_model,
    calculate_statistics,
)

__all__ = [
    "ATTENTION_PRIORITY",
    "AttentionFacts",
    "LEASE_EXPIRY_WINDOW_DAYS",
    "add_status_to_property",
    "apply_filters",
    "apply_payment_filters",
    "build_attention_items",
    "build_income_breakdown",
    "build_property_detail",
    "build_quick_stats",
    "build_view_model",
    "calculate_average_rent",
    "calculate_distribution",
    "calculate_metrics",
    "calculate_payment_summary",
    "calculate_statistics",
    "count_by_status",
    "days_until_expiry",
    "has_active_filters",
    "has_overdue_payment",
    "is_expiring_soon",
    "is_lease_expired",
    "monthly_overview",
    "needs_attention",
    "resolve_attention_reason",
]
