"""Development script to run checks (linting, tests) and the main application."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)  # noqa: S603
    except subprocess.CalledProcessError:
        print(f"\nFailed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally the main script."""
    parser = argparse.ArgumentParser(
        description="Run development checks and main script."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping main.py"
    )
    args = parser.parse_args()

    run_command(["ruff", "format"], "Ruff Formatting")
    run_command(["ruff", "check", "--fix"], "Ruff Linting & Fixes")
    run_command([sys.executable, "-m", "pytest"], "Tests")

    if args.ci:
        print("\nCI checks passed successfully. Skipping execution of main.py.")
        return

    run_command([sys.executable, "main.py"], "Main Entry Point")
    print("\nAll development checks and main script passed successfully.")


if __name__ == "__main__":
    main()
