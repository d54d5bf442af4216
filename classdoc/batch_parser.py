"""Orchestration of the parse, aggregate, enrich, build and resolve stages."""

import logging
from collections.abc import Sequence
from typing import Any

from classdoc.accessors import Accessors
from classdoc.aggregated_class import AggregatedClass
from classdoc.aggregator import Aggregator
from classdoc.build_relations import build_relations
from classdoc.circular_deps import CircularDeps
from classdoc.diagnostic import Diagnostics
from classdoc.enums import Enums
from classdoc.file_parse_result import FileParseResult
from classdoc.framework_quirks import FrameworkQuirks
from classdoc.global_members import GlobalMembers
from classdoc.ignored_classes import IgnoredClasses
from classdoc.inherit_doc import InheritDoc
from classdoc.lint import Lint
from classdoc.load_fragments import load_fragments
from classdoc.overrides import Overrides
from classdoc.parse_coordinator import Parser, parallel_parse
from classdoc.progress import ProgressSink, safe_notify
from classdoc.relations import Relations
from classdoc.return_values import ReturnValues
from classdoc.versions import Versions

logger = logging.getLogger(__name__)


class BatchParser:
    """Parses all input files and returns the resolved Relations graph."""

    def __init__(
        self,
        input_files: Sequence[str],
        config: dict[str, Any],
        parser: Parser = load_fragments,
        progress: ProgressSink | None = None,
        workers: int | None = None,
    ) -> None:
        """Initialize with ordered input files and the effective config."""
        self.input_files = list(input_files)
        self.config = config
        self.parser = parser
        self.progress = progress if progress is not None else ProgressSink()
        self.workers = workers
        self.external_classes: set[str] = set(config.get("external_classes") or [])
        self.diagnostics = Diagnostics()
        self.parsed_files: list[FileParseResult] = []
        self.relations: Relations | None = None

    def run(self) -> Relations:
        """Run the whole pipeline. ParseFailure propagates to the caller."""
        self.parsed_files = parallel_parse(
            self.input_files, self.parser, self.config, self.progress, self.workers
        )
        classes = self.aggregate(self.parsed_files)
        self._stage("Building", "relations")
        self.relations = build_relations(
            classes, sorted(self.external_classes), self.diagnostics
        )
        self.apply_extra_processing(self.relations)
        logger.info(
            "Resolved %d classes with %d diagnostics",
            len(self.relations),
            len(self.diagnostics),
        )
        return self.relations

    def aggregate(
        self, parsed_files: Sequence[FileParseResult]
    ) -> dict[str, AggregatedClass]:
        """Fold the parsed files in input order and run the enrichment chain."""
        aggregation = self.config.get("aggregation") or {}
        policy = aggregation.get("class_attributes", "first")
        agr = Aggregator(self.diagnostics, policy)
        for file in parsed_files:
            safe_notify(self.progress, "Aggregating", file.filename)
            agr.aggregate(file)
        classes = agr.result()

        self._stage("Processing", "ignored classes")
        self.external_classes.update(IgnoredClasses(classes).process_all())
        self._stage("Processing", "global members")
        GlobalMembers(classes, agr.orphans, self.config, self.diagnostics).process_all()
        self._stage("Processing", "accessors")
        Accessors(classes).process_all()
        self._stage("Processing", "framework quirks")
        FrameworkQuirks(classes, self.config).process_all()
        self._stage("Processing", "enums")
        Enums(classes).process_all()
        # Override classes are registered as external after being applied
        self._stage("Processing", "overrides")
        self.external_classes.update(Overrides(classes, self.diagnostics).process_all())
        return classes

    def apply_extra_processing(self, relations: Relations) -> None:
        """Run the post-resolution chain over the built graph."""
        self._stage("Resolving", "circular dependencies")
        CircularDeps(relations).process_all()
        self._stage("Resolving", "inherited docs")
        InheritDoc(relations).process_all()
        self._stage("Resolving", "versions")
        Versions(relations, self.config).process_all()
        self._stage("Resolving", "return values")
        ReturnValues(relations).process_all()
        self._stage("Resolving", "lint")
        Lint(relations, self.config).process_all()

    def _stage(self, stage: str, identifier: str) -> None:
        safe_notify(self.progress, stage, identifier)
