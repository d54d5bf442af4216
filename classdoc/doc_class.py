"""Data models for resolved classes and their members."""

from dataclasses import dataclass, field

from classdoc.aggregated_class import AggregatedClass
from classdoc.fragment import EnumSpec, Fragment, InheritDocTarget, Param, ReturnSpec


@dataclass(frozen=True)
class MemberRef:
    """Reference to a member by owning class, kind and name."""

    cls: str
    kind: str
    name: str

    def __str__(self) -> str:
        """Format as ``Cls#kind-name``."""
        return f"{self.cls}#{self.kind}-{self.name}"


@dataclass
class Member:
    """A class member in the resolved model.

    ``doc``, ``params`` and ``returns`` may be filled in by doc inheritance;
    ``inherited_from``, ``resolved_since`` and ``is_new`` are derived fields.
    """

    name: str
    kind: str
    owner: str
    doc: str = ""
    params: list[Param] = field(default_factory=list)
    returns: ReturnSpec | None = None
    type: str = ""
    default: str | None = None
    static: bool = False
    private: bool = False
    chainable: bool = False
    inheritdoc: InheritDocTarget | None = None
    since: str | None = None
    filename: str = ""
    linenr: int = 0
    inherited_from: MemberRef | None = None
    resolved_since: str | None = None
    is_new: bool = False

    @property
    def key(self) -> tuple[str, str]:
        """Return the (kind, name) key."""
        return (self.kind, self.name)

    @property
    def ref(self) -> MemberRef:
        """Return a reference to this member."""
        return MemberRef(self.owner, self.kind, self.name)

    @classmethod
    def from_fragment(cls, frag: Fragment, owner: str) -> "Member":
        """Create a member from its winning fragment."""
        return cls(
            name=frag.name,
            kind=frag.tagname,
            owner=owner,
            doc=frag.doc,
            params=list(frag.params),
            returns=frag.returns,
            type=frag.type,
            default=frag.default,
            static=frag.static,
            private=frag.private,
            chainable=frag.chainable,
            inheritdoc=frag.inheritdoc,
            since=frag.since,
            filename=frag.filename,
            linenr=frag.linenr,
        )


@dataclass
class DocClass:
    """A documented class.

    Identity fields (name, extends, mixins) never change once the relations
    graph is built; traversal consults the graph, which may cut edges.
    """

    name: str
    extends: str | None = None
    mixins: tuple[str, ...] = ()
    alternate_names: tuple[str, ...] = ()
    doc: str = ""
    singleton: bool = False
    private: bool = False
    since: str | None = None
    enum: EnumSpec | None = None
    filename: str = ""
    linenr: int = 0
    members: dict[tuple[str, str], Member] = field(default_factory=dict)
    shadowed: tuple[Fragment, ...] = ()
    resolved_since: str | None = None

    def get_member(self, kind: str, name: str) -> Member | None:
        """Look up a member by kind and name."""
        return self.members.get((kind, name))

    def find_members(self, name: str) -> list[Member]:
        """Return members of any kind with the given name."""
        return [m for m in self.members.values() if m.name == name]

    @classmethod
    def from_aggregate(cls, agg: AggregatedClass) -> "DocClass":
        """Freeze an aggregated class record into a DocClass."""
        return cls(
            name=agg.name,
            extends=agg.extends,
            mixins=tuple(agg.mixins),
            alternate_names=tuple(agg.alternate_names),
            doc=agg.doc,
            singleton=agg.singleton,
            private=agg.private,
            since=agg.since,
            enum=agg.enum,
            filename=agg.filename,
            linenr=agg.linenr,
            members={
                key: Member.from_fragment(frag, agg.name)
                for key, frag in agg.members.items()
            },
            shadowed=tuple(agg.shadowed),
        )
