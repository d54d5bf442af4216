"""Tests for the DiagnosticsReport logic."""

import json
from pathlib import Path

from classdoc.diagnostic import (
    DUPLICATE_DEFINITION,
    LINT,
    UNRESOLVED_REFERENCE,
    Diagnostic,
)
from classdoc.diagnostics_report import DiagnosticsReport


def test_diagnostics_report_generation(tmp_path: Path) -> None:
    """Verify that the diagnostics report is generated correctly."""
    report = DiagnosticsReport("hash123", 1)
    report.add_all(
        [
            Diagnostic(LINT, "No documentation for class A", class_name="A"),
            Diagnostic(
                UNRESOLVED_REFERENCE,
                "Class X referenced in extends of A not found",
                class_name="A",
                filename="a.yml",
                linenr=3,
            ),
            Diagnostic(
                DUPLICATE_DEFINITION,
                "method B#foo redefined",
                class_name="B",
                member="foo",
            ),
            Diagnostic(LINT, "Unattached warning"),
        ]
    )

    output_file = tmp_path / "report.json"
    report.generate_report(str(output_file))

    assert output_file.exists()
    content = json.loads(output_file.read_text(encoding="utf-8"))

    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["total_items"] == 4  # noqa: PLR2004
    assert content["diagnostics"][1]["filename"] == "a.yml"
    assert content["diagnostics"][2]["member"] == "foo"

    stats = content["stats"]
    assert stats["kind_counts"][LINT] == 2  # noqa: PLR2004
    assert stats["kind_counts"][UNRESOLVED_REFERENCE] == 1
    assert stats["most_affected_classes"] == [
        {"class": "A", "count": 2},
        {"class": "B", "count": 1},
    ]


def test_empty_report() -> None:
    """Verify that a report without diagnostics still has stats."""
    data = DiagnosticsReport("h").to_dict()
    assert data["meta"]["total_items"] == 0
    assert data["diagnostics"] == []
    assert data["stats"] == {"kind_counts": {}, "most_affected_classes": []}
