"""JSON file sink for exporting dashboard snapshots."""

import json
from pathlib import Path
from typing import Any

from portfolio_dash.exceptions import SinkError
from portfolio_dash.sinks.serialization import to_dict


class JsonFileSink:
    """Write snapshots to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty

    def write_snapshot(self, name: str, snapshot: Any) -> Path:
        """Write one snapshot (any dataclass) to ``<name>.json``."""
        file_path = self.output_dir / f"{name}.json"
        data = to_dict(snapshot)

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        return file_path
