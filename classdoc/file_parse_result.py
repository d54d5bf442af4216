"""Data model for the output of parsing one input file."""

from dataclasses import dataclass

from classdoc.fragment import Fragment


@dataclass(frozen=True)
class FileParseResult:
    """Ordered fragments produced by parsing a single file."""

    filename: str
    fragments: tuple[Fragment, ...]
