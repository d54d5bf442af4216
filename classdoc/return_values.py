"""Post-resolution pass linking self-returning methods to their class."""

from dataclasses import replace

from classdoc.fragment import ReturnSpec
from classdoc.relations import Relations

SELF_TYPES = frozenset({"this"})
CONSTRUCTOR = "constructor"


class ReturnValues:
    """Rewrites ``this`` return types to the owning class name."""

    def __init__(self, relations: Relations) -> None:
        """Initialize with the relations graph."""
        self.relations = relations

    def process_all(self) -> None:
        """Normalize the return descriptor of every method."""
        for cls in self.relations:
            for member in cls.members.values():
                if member.kind != "method":
                    continue
                returns = member.returns
                if member.chainable:
                    member.returns = replace(
                        returns or ReturnSpec(doc="this"), type=cls.name
                    )
                elif returns is not None and returns.type.lower() in SELF_TYPES:
                    member.returns = replace(returns, type=cls.name)
                elif returns is None and member.name == CONSTRUCTOR:
                    member.returns = ReturnSpec(type=cls.name, doc="this")
