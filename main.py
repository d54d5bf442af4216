"""Build the resolved documentation model for the fragments in this checkout."""

import argparse
import sys
from pathlib import Path

from classdoc.cli import main as classdoc_main


def main() -> None:
    """Run the pipeline over ./fragments and write build/classes.json."""
    parser = argparse.ArgumentParser(
        description="Resolve documentation fragments into build/classes.json."
    )
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    argv = [
        str(root_dir / "fragments"),
        "--out",
        str(root_dir / "build" / "classes.json"),
        "--report",
        str(root_dir / "build" / "diagnostics.json"),
        "--package-tree",
    ]
    if args.config:
        argv.extend(["--config", args.config])
    if args.verbose:
        argv.append("--verbose")

    sys.exit(classdoc_main(argv))


if __name__ == "__main__":
    main()
