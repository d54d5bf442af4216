"""Data models for recoverable problems found while resolving documentation."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

UNRESOLVED_REFERENCE = "UnresolvedReferenceWarning"
STRUCTURAL_CYCLE = "StructuralCycleWarning"
DUPLICATE_DEFINITION = "DuplicateDefinitionWarning"
LINT = "LintWarning"


@dataclass(frozen=True)
class Diagnostic:
    """A recovered problem attached to the final result."""

    kind: str
    message: str
    class_name: str | None = None
    member: str | None = None
    filename: str = ""
    linenr: int = 0

    def location(self) -> str:
        """Format the source location, if known."""
        if not self.filename:
            return ""
        return f"{self.filename}:{self.linenr}" if self.linenr else self.filename


class Diagnostics(list[Diagnostic]):
    """Ordered diagnostics collector that also logs every record."""

    def warn(
        self,
        kind: str,
        message: str,
        *,
        class_name: str | None = None,
        member: str | None = None,
        filename: str = "",
        linenr: int = 0,
    ) -> Diagnostic:
        """Record and log a diagnostic."""
        diag = Diagnostic(kind, message, class_name, member, filename, linenr)
        self.append(diag)
        where = diag.location()
        if where:
            logger.warning("%s: %s (%s)", kind, message, where)
        else:
            logger.warning("%s: %s", kind, message)
        return diag
