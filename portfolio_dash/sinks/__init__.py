"""Output sinks for exporting dashboard snapshots."""

from portfolio_dash.sinks.console import ConsoleSink
from portfolio_dash.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
