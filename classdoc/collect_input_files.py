"""Logic for expanding command line inputs into an ordered file list."""

from collections.abc import Iterable
from pathlib import Path

FRAGMENT_SUFFIXES = (".yml", ".yaml")


def collect_input_files(inputs: Iterable[Path]) -> list[str]:
    """Expand directories recursively; keep explicit files in the given order."""
    files: list[str] = []
    for path in inputs:
        if path.is_dir():
            found = sorted(
                p for p in path.rglob("*") if p.suffix in FRAGMENT_SUFFIXES
            )
            files.extend(str(p) for p in found)
        else:
            files.append(str(path))
    return list(dict.fromkeys(files))
