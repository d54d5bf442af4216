"""Command line entry point for building the resolved documentation model."""

import argparse
import json
import logging
from pathlib import Path

from classdoc.batch_parser import BatchParser
from classdoc.collect_input_files import collect_input_files
from classdoc.compute_config_hash import compute_config_hash
from classdoc.diagnostics_report import DiagnosticsReport
from classdoc.errors import ClassdocError, ParseFailure
from classdoc.load_config import load_config
from classdoc.relations_to_dict import relations_to_dict

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    """Execute the pipeline and write the requested outputs."""
    files = collect_input_files(args.inputs)
    if not files:
        msg = f"No fragment files found under: {', '.join(map(str, args.inputs))}"
        raise SystemExit(msg)

    config = load_config(args.config)
    batch = BatchParser(files, config, workers=args.workers)
    relations = batch.run()

    if args.report:
        report = DiagnosticsReport(compute_config_hash(config))
        report.add_all(relations.diagnostics)
        report.generate_report(args.report)
        logger.info("Diagnostics report written to %s", args.report)

    if args.out:
        data = relations_to_dict(relations, include_package_tree=args.package_tree)
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.info("Exported %d classes to %s", len(relations), args.out)

    print(
        f"Resolved {len(relations)} classes from {len(files)} files "
        f"({len(relations.diagnostics)} warnings)"
    )
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        description=(
            "Aggregate documentation fragments into a resolved, "
            "cross-referenced class model."
        ),
    )
    ap.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Fragment files or directories containing *.yml fragment files",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parse workers (default: CPU count)",
    )
    ap.add_argument("--out", type=Path, help="Write the resolved model as JSON")
    ap.add_argument("--report", help="Write a diagnostics report as JSON")
    ap.add_argument(
        "--package-tree",
        action="store_true",
        help="Include the package tree in the JSON export",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except ParseFailure as exc:
        logger.critical(
            "Error while parsing %s: %s",
            exc.filename,
            exc.cause,
            exc_info=exc if args.verbose else None,
        )
        return 1
    except ClassdocError as exc:
        logger.critical("%s", exc, exc_info=exc if args.verbose else None)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
