"""Console sink for inspecting dashboard snapshots."""

import json

from portfolio_dash.models import PortfolioViewModel
from portfolio_dash.sinks.serialization import to_dict


class ConsoleSink:
    """Print portfolio snapshots to stdout."""

    def __init__(self, pretty: bool = True, currency: str = "NOK") -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        currency : str
            Currency label for amounts in the summary.
        """
        self.pretty = pretty
        self.currency = currency

    def write_json(self, vm: PortfolioViewModel) -> None:
        """Print the full snapshot as JSON."""
        indent = 2 if self.pretty else None
        print(json.dumps(to_dict(vm), indent=indent, ensure_ascii=False, default=str))

    def write_summary(self, vm: PortfolioViewModel) -> None:
        """Print headline statistics and the filtered property list."""
        stats = vm.statistics
        summary = vm.payment_summary

        print(f"\n{'='*60}")
        print("Portfolio overview")
        print("=" * 60)
        if vm.is_loading:
            print(vm.loading.loading_message)
        if vm.has_error:
            print(f"Error: {vm.error.error_message}")

        print(f"  Properties:       {stats.total_properties}")
        print(
            f"  Rented/available/reserved: {stats.rented_properties}/"
            f"{stats.available_properties}/{stats.reserved_properties}"
        )
        print(f"  Occupancy:        {stats.occupancy_rate}%")
        print(f"  Monthly income:   {stats.total_monthly_income} {self.currency}")
        print(f"  Average rent:     {stats.average_rent} {self.currency}")
        print(f"  Collected:        {summary.total_paid} {self.currency}")
        print(f"  Pending:          {summary.total_pending} {self.currency}")
        print(f"  Overdue:          {summary.total_overdue} {self.currency}")

        if vm.attention_items:
            print(f"\nNeeds attention ({vm.needs_attention_count}):")
            for item in vm.attention_items:
                print(f"  [{item.severity.value:<6}] {item.message} -> {item.action_label}")

        print(f"\nProperties ({len(vm.filtered_properties)} of {len(vm.properties)}):")
        if vm.show_empty_state:
            print("  No properties match the current filters")
        for prop in vm.filtered_properties:
            tenant = prop.tenant.name if prop.tenant else "-"
            print(
                f"  {prop.address:<28} {prop.city:<12} {prop.status.value:<10} "
                f"{prop.monthly_rent:>8} {tenant}"
            )
