"""Aggregation over rent payments.

A payment's status is taken as given. Nothing here compares due dates to the
clock, so a pending payment past its due date is still pending.
"""

from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from portfolio_dash.models import (
    MonthlyPaymentOverview,
    PaymentStatus,
    PaymentSummary,
    Property,
    RentPayment,
)

ZERO = Decimal("0")


def is_overdue(payment: RentPayment) -> bool:
    """Check if a payment is flagged overdue."""
    return payment.status == PaymentStatus.OVERDUE


def has_overdue_payment(prop: Property, payments: Iterable[RentPayment]) -> bool:
    """Check if a property has at least one overdue payment."""
    return any(
        payment.property_id == prop.property_id and is_overdue(payment)
        for payment in payments
    )


def _total(payments: Iterable[RentPayment]) -> Decimal:
    return sum((payment.amount for payment in payments), ZERO)


def calculate_payment_summary(payments: Sequence[RentPayment]) -> PaymentSummary:
    """Sum payment amounts and counts per status.

    Parameters
    ----------
    payments : Sequence[RentPayment]
        All payments; none are excluded.

    Returns
    -------
    PaymentSummary
        ``total_expected`` covers every payment regardless of status, so it
        equals paid + pending + overdue.
    """
    by_status: dict[PaymentStatus, list[RentPayment]] = {status: [] for status in PaymentStatus}
    for payment in payments:
        by_status[PaymentStatus(payment.status)].append(payment)

    return PaymentSummary(
        total_expected=_total(payments),
        total_paid=_total(by_status[PaymentStatus.PAID]),
        total_pending=_total(by_status[PaymentStatus.PENDING]),
        total_overdue=_total(by_status[PaymentStatus.OVERDUE]),
        paid_count=len(by_status[PaymentStatus.PAID]),
        pending_count=len(by_status[PaymentStatus.PENDING]),
        overdue_count=len(by_status[PaymentStatus.OVERDUE]),
    )


def collection_rate(collected: Decimal, expected: Decimal) -> int:
    """Collected share of the expected amount as a rounded percentage."""
    if expected <= 0:
        return 0
    rate = collected * 100 / expected
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def monthly_overview(payments: Sequence[RentPayment]) -> list[MonthlyPaymentOverview]:
    """Group payments by billing month, oldest month first."""
    by_month: dict[str, list[RentPayment]] = defaultdict(list)
    for payment in payments:
        by_month[payment.month].append(payment)

    overview = []
    for month in sorted(by_month):
        month_payments = by_month[month]
        expected = _total(month_payments)
        collected = _total(p for p in month_payments if p.status == PaymentStatus.PAID)
        overview.append(
            MonthlyPaymentOverview(
                month=month,
                total_expected=expected,
                total_collected=collected,
                collection_rate=collection_rate(collected, expected),
                payments=tuple(month_payments),
            )
        )
    return overview
