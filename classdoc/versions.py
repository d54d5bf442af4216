"""Post-resolution pass settling the ``since`` version of classes and members."""

from typing import Any

from classdoc.doc_class import Member
from classdoc.member_lookup import inheritance_order
from classdoc.relations import Relations


class Versions:
    """Propagates explicit versions down the inheritance graph."""

    def __init__(self, relations: Relations, config: dict[str, Any]) -> None:
        """Initialize with the relations graph and the version settings."""
        self.relations = relations
        self.default_version = config.get("default_version")
        self.new_since = config.get("new_since")

    def process_all(self) -> None:
        """Resolve class versions first, then member versions."""
        for cls in self.relations:
            cls.resolved_since = cls.since or self.default_version

        for cls in self.relations:
            for member in cls.members.values():
                member.resolved_since = (
                    member.since
                    or self.inherited_since(member)
                    or cls.resolved_since
                )
                member.is_new = bool(
                    self.new_since and member.resolved_since == self.new_since
                )

    def inherited_since(self, member: Member) -> str | None:
        """Return the nearest explicit version of the same member upstream."""
        for cls in inheritance_order(self.relations, member.owner):
            candidate = cls.get_member(member.kind, member.name)
            if candidate is not None and candidate.since:
                return candidate.since
        return None
