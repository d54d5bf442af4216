"""Post-resolution pass filling missing member docs from related classes."""

import logging

from classdoc.diagnostic import STRUCTURAL_CYCLE, UNRESOLVED_REFERENCE
from classdoc.doc_class import Member, MemberRef
from classdoc.fragment import InheritDocTarget
from classdoc.member_lookup import inheritance_order
from classdoc.relations import Relations

logger = logging.getLogger(__name__)


class InheritDoc:
    """Resolves doc inheritance for every member of every class.

    A member takes its doc from the first ancestor or mixin member with the
    same kind and name that has docs, or from the member named by an
    explicit ``inheritdoc`` target. Params and return descriptors are copied
    when the member lacks them.
    """

    def __init__(self, relations: Relations) -> None:
        """Initialize with the relations graph."""
        self.relations = relations
        self.resolved: set[MemberRef] = set()
        self.in_progress: set[MemberRef] = set()

    def process_all(self) -> None:
        """Resolve inherited docs for all members."""
        for cls in self.relations:
            for member in cls.members.values():
                self.resolve(member)

    def resolve(self, member: Member) -> None:
        """Resolve one member, resolving its source first."""
        ref = member.ref
        if ref in self.resolved:
            return
        if not self.needs_docs(member):
            self.resolved.add(ref)
            return
        if ref in self.in_progress:
            self._warn(
                STRUCTURAL_CYCLE, member, f"Circular @inheritdoc reference at {ref}"
            )
            return

        self.in_progress.add(ref)
        source = self.find_source(member)
        if source is not None:
            self.resolve(source)
            self.copy_docs(member, source)
        self.in_progress.discard(ref)
        self.resolved.add(ref)

    def find_source(self, member: Member) -> Member | None:
        """Find the member whose docs ``member`` should inherit."""
        target = member.inheritdoc
        if target is not None and (target.cls or target.member or target.kind):
            return self.find_explicit(member, target)

        for cls in inheritance_order(self.relations, member.owner):
            candidate = cls.get_member(member.kind, member.name)
            if candidate is None or candidate.ref in self.in_progress:
                continue
            self.resolve(candidate)
            if candidate.doc:
                return candidate

        if target is not None:
            self._warn(
                UNRESOLVED_REFERENCE,
                member,
                f"@inheritdoc on {member.ref}: no parent member found",
            )
        return None

    def needs_docs(self, member: Member) -> bool:
        """Check if a member takes part in doc inheritance."""
        return member.inheritdoc is not None or not member.doc

    def find_explicit(self, member: Member, target: InheritDocTarget) -> Member | None:
        """Find the member named by an explicit inheritdoc target."""
        cls_name = target.cls or member.owner
        name = target.member or member.name
        cls = self.relations.get(cls_name)
        found: Member | None = None
        if cls is not None:
            found = cls.get_member(target.kind or member.kind, name)
            if found is None and target.kind is None:
                candidates = cls.find_members(name)
                found = candidates[0] if candidates else None

        if found is None:
            self._warn(
                UNRESOLVED_REFERENCE,
                member,
                f"@inheritdoc on {member.ref}: target {cls_name}#{name} not found",
            )
            return None
        if found is member:
            self._warn(
                STRUCTURAL_CYCLE, member, f"@inheritdoc on {member.ref} names itself"
            )
            return None
        return found

    def copy_docs(self, member: Member, source: Member) -> None:
        """Copy docs the member is missing and record where they came from."""
        logger.debug("%s inherits docs from %s", member.ref, source.ref)
        if not member.doc:
            member.doc = source.doc
        if not member.params and source.params:
            member.params = list(source.params)
        if member.returns is None and source.returns is not None:
            member.returns = source.returns
        if not member.type and source.type:
            member.type = source.type
        member.inherited_from = source.ref

    def _warn(self, kind: str, member: Member, message: str) -> None:
        self.relations.diagnostics.warn(
            kind,
            message,
            class_name=member.owner,
            member=member.name,
            filename=member.filename,
            linenr=member.linenr,
        )
