"""Exception types raised by the documentation pipeline."""


class ClassdocError(Exception):
    """Base class for fatal pipeline errors."""


class ParseFailure(ClassdocError):
    """A single input file could not be parsed. Aborts the whole run."""

    def __init__(self, filename: str, cause: BaseException) -> None:
        """Record the offending file and the underlying exception."""
        super().__init__(f"Error while parsing {filename}: {cause}")
        self.filename = filename
        self.cause = cause


class DuplicateClassError(ClassdocError):
    """Two classes with the same full name reached the relations graph."""

    def __init__(self, name: str) -> None:
        """Record the colliding class name."""
        super().__init__(f"Duplicate class name: {name}")
        self.name = name


class ConfigError(ClassdocError):
    """The configuration file is malformed."""
