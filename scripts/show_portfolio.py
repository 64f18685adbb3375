#!/usr/bin/env python3
"""Load a portfolio and print its dashboard snapshot.

Examples::

    python scripts/show_portfolio.py --reference-date 2025-02-15
    python scripts/show_portfolio.py --source synthetic --properties 25 --seed 7 --needs-attention
    python scripts/show_portfolio.py --json --output-dir local/
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from datetime import datetime

from portfolio_dash.config import SOURCE_SAMPLE, SOURCE_SYNTHETIC, DashboardConfig
from portfolio_dash.exceptions import PortfolioError
from portfolio_dash.logging import setup_logging
from portfolio_dash.models import PropertyStatus, PropertyType
from portfolio_dash.sinks import ConsoleSink, JsonFileSink
from portfolio_dash.sources import PortfolioDataSource, load_portfolio
from portfolio_dash.store import PortfolioStore

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the landlord portfolio dashboard")
    parser.add_argument(
        "--source",
        choices=[SOURCE_SAMPLE, SOURCE_SYNTHETIC],
        default=None,
        help="Data source (default: PORTFOLIO_SOURCE or sample)",
    )
    parser.add_argument(
        "--properties",
        type=int,
        default=None,
        help="Number of synthetic properties to generate",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for synthetic data")
    parser.add_argument(
        "--reference-date",
        type=datetime.fromisoformat,
        default=None,
        help="Treat this ISO date as today (default: now)",
    )
    parser.add_argument("--search", default="", help="Search address, city or tenant")
    parser.add_argument(
        "--status", choices=[s.value for s in PropertyStatus], default=None
    )
    parser.add_argument(
        "--type", dest="property_type", choices=[t.value for t in PropertyType], default=None
    )
    parser.add_argument("--city", default=None)
    parser.add_argument("--overdue", action="store_true", help="Only properties with overdue rent")
    parser.add_argument(
        "--expiring-soon", action="store_true", help="Only leases expiring within 60 days"
    )
    parser.add_argument(
        "--needs-attention", action="store_true", help="Only properties needing attention"
    )
    parser.add_argument("--json", action="store_true", help="Print the full snapshot as JSON")
    parser.add_argument(
        "--output-dir", default=None, help="Also write the snapshot to <dir>/portfolio.json"
    )
    parser.add_argument("--no-latency", action="store_true", help="Skip the simulated delay")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = DashboardConfig.from_env()
        source_config = config.data_source
        if args.source:
            source_config = replace(source_config, source=args.source)
        if args.properties is not None:
            source_config = replace(source_config, num_properties=args.properties)
        if args.seed is not None:
            source_config = replace(source_config, seed=args.seed)
        if args.no_latency:
            source_config = replace(source_config, latency_seconds=0.0)
    except PortfolioError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.log_level, config.log_format)

    reference = args.reference_date
    store = PortfolioStore(clock=(lambda: reference) if reference else None)
    source = PortfolioDataSource.from_config(source_config, reference_time=reference)

    logger.info("Loading %s portfolio", source_config.source)
    asyncio.run(load_portfolio(store, source))

    store.update_filters(
        search_term=args.search,
        status=PropertyStatus(args.status) if args.status else None,
        property_type=PropertyType(args.property_type) if args.property_type else None,
        city=args.city,
        has_overdue_payment=args.overdue,
        lease_expiring_soon=args.expiring_soon,
        needs_attention=args.needs_attention,
    )
    vm = store.view_model

    console = ConsoleSink(currency=config.currency)
    if args.json:
        console.write_json(vm)
    else:
        console.write_summary(vm)

    if args.output_dir:
        path = JsonFileSink(args.output_dir, pretty=True).write_snapshot("portfolio", vm)
        logger.info("Snapshot written to %s", path)

    return 1 if vm.has_error else 0


if __name__ == "__main__":
    sys.exit(main())
