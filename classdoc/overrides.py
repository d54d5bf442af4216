"""Enrichment pass folding override classes into the classes they patch."""

import logging
from dataclasses import replace

from classdoc.aggregated_class import AggregatedClass
from classdoc.aggregator import report_shadowed
from classdoc.diagnostic import UNRESOLVED_REFERENCE, Diagnostics

logger = logging.getLogger(__name__)


class Overrides:
    """Merges members of override classes into their targets."""

    def __init__(
        self, classes: dict[str, AggregatedClass], diagnostics: Diagnostics
    ) -> None:
        """Initialize with the mapping and the diagnostics collector."""
        self.classes = classes
        self.diagnostics = diagnostics

    def process_all(self) -> list[str]:
        """Apply all overrides in mapping order and remove the override classes.

        Returns the override class names so they can be registered as external.
        """
        overrides = [cls for cls in self.classes.values() if cls.override]
        for cls in overrides:
            self.apply(cls)
            del self.classes[cls.name]
        return [cls.name for cls in overrides]

    def apply(self, override: AggregatedClass) -> None:
        """Copy the members of one override class into its target."""
        target = self.classes.get(override.override or "")
        if target is None or target.override:
            self.diagnostics.warn(
                UNRESOLVED_REFERENCE,
                f"Class {override.override} not found for override {override.name}",
                class_name=override.name,
                filename=override.filename,
                linenr=override.linenr,
            )
            return

        logger.debug("Applying override %s to %s", override.name, target.name)
        for frag in override.members.values():
            frag = replace(frag, owner=target.name)
            previous = target.add_member(frag)
            if previous is not None:
                report_shadowed(self.diagnostics, target.name, previous, frag)
