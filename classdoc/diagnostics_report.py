"""Logic for writing the diagnostics of a run to a JSON report."""

import json
import time
from collections import Counter
from pathlib import Path
from typing import Any

from classdoc.diagnostic import Diagnostic

CURRENT_SCHEMA_VERSION = 1


class DiagnosticsReport:
    """Collects diagnostics and summarizes them per kind."""

    def __init__(
        self, config_hash: str, schema_version: int = CURRENT_SCHEMA_VERSION
    ) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.schema_version = schema_version
        self.results: list[Diagnostic] = []
        self.start_time = time.time()

    def add_all(self, diagnostics: list[Diagnostic]) -> None:
        """Add diagnostics in pipeline order."""
        self.results.extend(diagnostics)

    def to_dict(self) -> dict[str, Any]:
        """Build the report payload."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": self.schema_version,
                "total_items": len(self.results),
            },
            "diagnostics": [
                {
                    "kind": d.kind,
                    "message": d.message,
                    "class": d.class_name,
                    "member": d.member,
                    "filename": d.filename,
                    "linenr": d.linenr,
                }
                for d in self.results
            ],
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        kind_counts = Counter(d.kind for d in self.results)
        class_counts = Counter(d.class_name for d in self.results if d.class_name)
        return {
            "kind_counts": dict(sorted(kind_counts.items())),
            "most_affected_classes": [
                {"class": name, "count": count}
                for name, count in sorted(
                    class_counts.items(), key=lambda kv: (-kv[1], kv[0])
                )[:10]
            ],
        }
