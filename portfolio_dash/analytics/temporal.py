"""Time-relative lease classification.

All functions take an optional ``reference`` instant. When omitted the
current time is used, in the lease date's own timezone. A reference whose
awareness differs from the lease date's is converted first, so naive and
aware datetimes are never compared against each other.

A lease expiring at the reference instant (or less than a day before it, so
that the day count still rounds up to zero) is neither expiring soon nor
expired.
"""

import math
from datetime import datetime, timedelta

LEASE_EXPIRY_WINDOW_DAYS = 60

_ONE_DAY = timedelta(days=1)


def _resolve_reference(lease_expires: datetime, reference: datetime | None) -> datetime:
    if reference is None:
        return datetime.now(lease_expires.tzinfo)
    if (reference.tzinfo is None) == (lease_expires.tzinfo is None):
        return reference
    # Naive instants are read as local time
    if lease_expires.tzinfo is None:
        return reference.astimezone().replace(tzinfo=None)
    return reference.astimezone(lease_expires.tzinfo)


def days_until_expiry(
    lease_expires: datetime | None,
    reference: datetime | None = None,
) -> int | None:
    """Calculate whole days until lease expiry, rounding up.

    Parameters
    ----------
    lease_expires : datetime | None
        Lease expiration instant.
    reference : datetime | None
        Reference instant (defaults to now).

    Returns
    -------
    int | None
        Signed day count (negative once expired), or None without a lease date.
    """
    if lease_expires is None:
        return None

    today = _resolve_reference(lease_expires, reference)
    return math.ceil((lease_expires - today) / _ONE_DAY)


def is_expiring_soon(
    lease_expires: datetime | None,
    reference: datetime | None = None,
) -> bool:
    """Check whether a lease expires in the future, within 60 days."""
    if lease_expires is None:
        return False

    today = _resolve_reference(lease_expires, reference)
    window_end = today + timedelta(days=LEASE_EXPIRY_WINDOW_DAYS)
    return today < lease_expires <= window_end


def is_lease_expired(
    lease_expires: datetime | None,
    reference: datetime | None = None,
) -> bool:
    """Check whether a lease expired at least a day before ``reference``."""
    days = days_until_expiry(lease_expires, reference)
    return days is not None and days < 0


def is_within_expiry_window(days: int | None) -> bool:
    """Check an already-computed day count against the 60 day window.

    Used on annotated properties, where the day count is stored and the
    reference instant is no longer at hand.
    """
    return days is not None and 0 < days <= LEASE_EXPIRY_WINDOW_DAYS
