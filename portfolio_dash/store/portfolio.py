"""State container for the portfolio dashboard."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Callable, Iterator, Mapping, Sequence

from portfolio_dash.analytics.payments import calculate_payment_summary
from portfolio_dash.analytics.view_model import build_view_model, calculate_statistics
from portfolio_dash.models import (
    DEFAULT_FILTERS,
    PaymentSummary,
    PortfolioStatistics,
    PortfolioViewModel,
    Property,
    PropertyFilters,
    RentPayment,
    quick_filters_from_params,
)

logger = logging.getLogger(__name__)

Observer = Callable[[PortfolioViewModel], None]


class PortfolioStore:
    """Owns the raw portfolio data and UI flags, and derives the view model.

    Every mutator replaces one whole value and bumps a version counter.
    ``view_model`` is rebuilt lazily on the first read after a write.
    Observers registered with ``subscribe`` receive the fresh view model
    after each write, or once at the end of a ``batch()``.

    Parameters
    ----------
    clock : Callable[[], datetime] | None
        Source of the reference time for lease classification
        (default ``datetime.now``).
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or datetime.now

        self._properties: tuple[Property, ...] = ()
        self._payments: tuple[RentPayment, ...] = ()
        self._statistics: PortfolioStatistics | None = None
        self._payment_summary: PaymentSummary | None = None
        self._filters: PropertyFilters = DEFAULT_FILTERS
        self._loading = False
        self._error: str | None = None

        self._version = 0
        self._cached: tuple[int, PortfolioViewModel] | None = None
        self._observers: list[Observer] = []
        self._batch_depth = 0
        self._pending_notify = False
        self._load_generation = 0

    # Read-only state
    @property
    def properties(self) -> tuple[Property, ...]:
        return self._properties

    @property
    def payments(self) -> tuple[RentPayment, ...]:
        return self._payments

    @property
    def statistics(self) -> PortfolioStatistics | None:
        return self._statistics

    @property
    def payment_summary(self) -> PaymentSummary | None:
        return self._payment_summary

    @property
    def filters(self) -> PropertyFilters:
        return self._filters

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def version(self) -> int:
        return self._version

    def now(self) -> datetime:
        """Reference time used for lease classification."""
        return self._clock()

    @property
    def view_model(self) -> PortfolioViewModel:
        """Current view model, rebuilt only when an input has changed."""
        if self._cached is None or self._cached[0] != self._version:
            vm = build_view_model(
                self._properties,
                self._payments,
                self._filters,
                self._loading,
                self._error,
                reference_time=self.now(),
            )
            self._cached = (self._version, vm)
        return self._cached[1]

    # Mutators
    def set_properties(self, properties: Sequence[Property]) -> None:
        self._update(properties=tuple(properties))

    def set_payments(self, payments: Sequence[RentPayment]) -> None:
        self._update(payments=tuple(payments))

    def set_statistics(self, statistics: PortfolioStatistics | None) -> None:
        self._update(statistics=statistics)

    def set_payment_summary(self, payment_summary: PaymentSummary | None) -> None:
        self._update(payment_summary=payment_summary)

    def update_filters(self, **changes: Any) -> None:
        """Merge a partial filter update into the current filters."""
        self._update(filters=self._filters.merge(**changes))

    def reset_filters(self) -> None:
        self._update(filters=DEFAULT_FILTERS)

    def set_loading(self, loading: bool) -> None:
        self._update(loading=loading)

    def set_error(self, error: str | None) -> None:
        self._update(error=error)

    def apply_query_params(self, params: Mapping[str, str]) -> None:
        """Apply dashboard quick-stat links (``?needsAttention=true`` etc.).

        When any quick-stat flag is present the filters are reset first, so
        the link shows exactly that slice of the portfolio.
        """
        updates = quick_filters_from_params(params)
        if not updates:
            return
        with self.batch():
            self.reset_filters()
            self.update_filters(**updates)

    # Load lifecycle
    def begin_load(self) -> int:
        """Start a load and return its generation token.

        Only the most recent token may complete or fail the load; older
        responses are discarded.
        """
        self._load_generation += 1
        with self.batch():
            self.set_error(None)
            self.set_loading(True)
        logger.info(
            "Portfolio load %d started",
            self._load_generation,
            extra={"load_token": self._load_generation},
        )
        return self._load_generation

    def is_current_load(self, token: int) -> bool:
        return token == self._load_generation

    def complete_load(
        self,
        token: int,
        properties: Sequence[Property],
        payments: Sequence[RentPayment],
    ) -> bool:
        """Store a successful load result. Returns False for a stale token."""
        if not self.is_current_load(token):
            logger.warning(
                "Discarding stale portfolio load %d (current is %d)",
                token,
                self._load_generation,
                extra={"load_token": token},
            )
            return False

        with self.batch():
            self.set_properties(properties)
            self.set_payments(payments)
            self.set_statistics(
                calculate_statistics(self._properties, self._payments, self.now())
            )
            self.set_payment_summary(calculate_payment_summary(self._payments))
            self.set_loading(False)

        logger.info(
            "Portfolio load %d complete: %d properties, %d payments",
            token,
            len(self._properties),
            len(self._payments),
            extra={"load_token": token, "store_version": self._version},
        )
        return True

    def fail_load(self, token: int, message: str) -> bool:
        """Record a failed load. Returns False for a stale token."""
        if not self.is_current_load(token):
            logger.warning(
                "Ignoring failure of stale portfolio load %d", token, extra={"load_token": token}
            )
            return False

        with self.batch():
            self.set_error(message)
            self.set_loading(False)
        logger.warning(
            "Portfolio load %d failed: %s", token, message, extra={"load_token": token}
        )
        return True

    # Observers
    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Group several writes into one observer notification.

        Observers are notified only when the outermost block exits normally.
        """
        self._batch_depth += 1
        try:
            yield
        except BaseException:
            # Half-applied writes are never pushed to observers
            self._batch_depth -= 1
            if self._batch_depth == 0:
                self._pending_notify = False
            raise
        self._batch_depth -= 1
        if self._batch_depth == 0 and self._pending_notify:
            self._pending_notify = False
            self._notify()

    def _update(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self, f"_{name}", value)
        self._version += 1
        logger.debug("Store updated (%s), version %d", ", ".join(changes), self._version)

        if self._batch_depth:
            self._pending_notify = True
        else:
            self._notify()

    def _notify(self) -> None:
        if not self._observers:
            return
        vm = self.view_model
        for observer in list(self._observers):
            observer(vm)
