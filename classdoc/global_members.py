"""Enrichment pass collecting members declared outside any class."""

from dataclasses import replace
from typing import Any

from classdoc.aggregated_class import AggregatedClass
from classdoc.aggregator import report_shadowed
from classdoc.diagnostic import Diagnostics
from classdoc.fragment import Fragment

GLOBAL_CLASS = "global"


class GlobalMembers:
    """Hoists orphan members into the reserved ``global`` class."""

    def __init__(
        self,
        classes: dict[str, AggregatedClass],
        orphans: list[Fragment],
        config: dict[str, Any],
        diagnostics: Diagnostics,
    ) -> None:
        """Initialize with the mapping and the orphan members in input order."""
        self.classes = classes
        self.orphans = orphans
        self.ignore_global = bool(config.get("ignore_global"))
        self.diagnostics = diagnostics

    def process_all(self) -> None:
        """Move non-ignored orphans into the global class, creating it when needed."""
        orphans = [frag for frag in self.orphans if not frag.ignore]
        if self.ignore_global or not orphans:
            return

        cls = self.classes.get(GLOBAL_CLASS)
        if cls is None:
            cls = AggregatedClass(
                name=GLOBAL_CLASS,
                doc="Global variables and functions.",
                placeholder=False,
            )
            self.classes[GLOBAL_CLASS] = cls
        for frag in orphans:
            frag = replace(frag, owner=GLOBAL_CLASS)
            previous = cls.add_member(frag)
            if previous is not None:
                report_shadowed(self.diagnostics, GLOBAL_CLASS, previous, frag)
