"""Data model for a class record accumulated from one or more files."""

from dataclasses import dataclass, field

from classdoc.fragment import EnumSpec, Fragment


@dataclass
class AggregatedClass:
    """Mutable class record built by the aggregator and enrichment passes."""

    name: str
    doc: str = ""
    extends: str | None = None
    mixins: list[str] = field(default_factory=list)
    alternate_names: list[str] = field(default_factory=list)
    ignore: bool = False
    singleton: bool = False
    private: bool = False
    since: str | None = None
    enum: EnumSpec | None = None
    override: str | None = None
    filename: str = ""
    linenr: int = 0
    placeholder: bool = True  # created by a member before its class fragment
    members: dict[tuple[str, str], Fragment] = field(default_factory=dict)
    shadowed: list[Fragment] = field(default_factory=list)

    def add_member(self, frag: Fragment) -> Fragment | None:
        """Insert or overwrite a member; return the definition it replaced."""
        previous = self.members.get(frag.key)
        if previous is not None:
            self.shadowed.append(previous)
        self.members[frag.key] = frag
        return previous

    def has_member(self, kind: str, name: str) -> bool:
        """Check if a member with the given key exists."""
        return (kind, name) in self.members
