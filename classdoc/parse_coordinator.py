"""Logic for parsing input files in parallel while preserving input order."""

import logging
import os
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Any

from classdoc.errors import ParseFailure
from classdoc.file_parse_result import FileParseResult
from classdoc.fragment import Fragment
from classdoc.progress import ProgressSink, safe_notify

logger = logging.getLogger(__name__)

Parser = Callable[[str, str, dict[str, Any]], Sequence[Fragment]]


def parse_file(
    filename: str,
    parser: Parser,
    config: dict[str, Any],
    progress: ProgressSink | None = None,
) -> FileParseResult:
    """Read and parse a single file, wrapping any failure in ParseFailure."""
    safe_notify(progress, "Parsing", filename)
    try:
        content = Path(filename).read_text(encoding="utf-8")
        fragments = tuple(parser(content, filename, config))
    except Exception as exc:
        raise ParseFailure(filename, exc) from exc
    return FileParseResult(filename=filename, fragments=fragments)


def parallel_parse(
    filenames: Sequence[str],
    parser: Parser,
    config: dict[str, Any],
    progress: ProgressSink | None = None,
    workers: int | None = None,
) -> list[FileParseResult]:
    """Parse all files using a bounded pool; results follow input order.

    The first failure cancels outstanding work and is re-raised.
    """
    if not filenames:
        return []
    max_workers = max(1, workers or config.get("workers") or os.cpu_count() or 1)
    if max_workers == 1:
        return [parse_file(f, parser, config, progress) for f in filenames]

    logger.debug("Parsing %d files with %d workers", len(filenames), max_workers)
    results: list[FileParseResult | None] = [None] * len(filenames)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: dict[Future[FileParseResult], int] = {
            executor.submit(parse_file, fname, parser, config, progress): index
            for index, fname in enumerate(filenames)
        }
        pending = set(futures)
        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                try:
                    results[futures[future]] = future.result()
                except ParseFailure:
                    executor.shutdown(wait=False, cancel_futures=True)
                    raise

    return [r for r in results if r is not None]
