"""Enrichment pass removing classes and members flagged as ignored."""

import logging

from classdoc.aggregated_class import AggregatedClass

logger = logging.getLogger(__name__)


class IgnoredClasses:
    """Drops ignored classes so no later pass ever sees them."""

    def __init__(self, classes: dict[str, AggregatedClass]) -> None:
        """Initialize with the aggregated class mapping."""
        self.classes = classes

    def process_all(self) -> list[str]:
        """Remove ignored classes and members; return the removed class names.

        The names stay legal as ancestors: callers register them as external.
        """
        removed = sorted(name for name, cls in self.classes.items() if cls.ignore)
        for name in removed:
            logger.debug("Ignoring class %s", name)
            del self.classes[name]

        for cls in self.classes.values():
            for key in [k for k, m in cls.members.items() if m.ignore]:
                del cls.members[key]
        return removed
