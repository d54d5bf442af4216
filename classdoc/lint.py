"""Final pass reporting problems in the resolved model without changing it."""

from collections import Counter
from typing import Any

from classdoc.diagnostic import DUPLICATE_DEFINITION, LINT, Diagnostic
from classdoc.doc_class import DocClass, Member
from classdoc.relations import Relations

PARAM_KINDS = ("method", "event", "css_mixin")


class Lint:
    """Emits a lint warning for each problem found."""

    def __init__(self, relations: Relations, config: dict[str, Any]) -> None:
        """Initialize with the relations graph and the ``lint`` settings."""
        self.relations = relations
        settings = config.get("lint") or {}
        self.no_doc = bool(settings.get("no_doc"))
        self.param_docs = bool(settings.get("param_docs", True))
        self.found: list[Diagnostic] = []
        self.reported: Counter[tuple[str | None, str | None]] = Counter(
            (d.class_name, d.member)
            for d in relations.diagnostics
            if d.kind == DUPLICATE_DEFINITION
        )

    def process_all(self) -> list[Diagnostic]:
        """Check every class; return the warnings emitted by this pass."""
        for cls in self.relations:
            self.check_references(cls)
            self.check_shadowed(cls)
            if self.no_doc and not cls.doc and not cls.private:
                self._warn(cls, f"No documentation for class {cls.name}")
            for member in cls.members.values():
                self.check_member(cls, member)
        return self.found

    def check_references(self, cls: DocClass) -> None:
        """Warn about parents and mixins that are neither defined nor external."""
        refs = [("extends", cls.extends)] if cls.extends else []
        refs += [("mixins", m) for m in cls.mixins]
        for relation, name in refs:
            if name in self.relations.unresolved:
                self._warn(
                    cls,
                    f"Class {name} referenced in {relation} of {cls.name} not found",
                )

    def check_shadowed(self, cls: DocClass) -> None:
        """Warn about member definitions that lost to a later one.

        Definitions already reported as duplicates during aggregation are skipped.
        """
        for frag in cls.shadowed:
            if self.reported[(cls.name, frag.name)] > 0:
                self.reported[(cls.name, frag.name)] -= 1
                continue
            self._warn(
                cls,
                f"Duplicate {frag.tagname} {cls.name}#{frag.name}; "
                f"definition at {frag.filename}:{frag.linenr} ignored",
                member_name=frag.name,
            )

    def check_member(self, cls: DocClass, member: Member) -> None:
        """Check docs and parameter lists of one member."""
        if self.no_doc and not member.doc and not member.private:
            self._warn(cls, f"No documentation for {member.ref}", member)
        if member.kind not in PARAM_KINDS:
            return

        seen: set[str] = set()
        optional_seen = False
        for param in member.params:
            if param.name in seen:
                self._warn(
                    cls, f"Duplicate parameter {param.name} in {member.ref}", member
                )
            seen.add(param.name)
            if self.param_docs and not param.doc:
                self._warn(
                    cls, f"Undocumented parameter {param.name} of {member.ref}", member
                )
            if param.optional:
                optional_seen = True
            elif optional_seen:
                self._warn(
                    cls,
                    f"Required parameter {param.name} after optional in {member.ref}",
                    member,
                )

    def _warn(
        self,
        cls: DocClass,
        message: str,
        member: Member | None = None,
        member_name: str | None = None,
    ) -> None:
        diag = self.relations.diagnostics.warn(
            LINT,
            message,
            class_name=cls.name,
            member=member.name if member else member_name,
            filename=member.filename if member else cls.filename,
            linenr=member.linenr if member else cls.linenr,
        )
        self.found.append(diag)
