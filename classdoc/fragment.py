"""Data models for raw documentation fragments emitted by a parser."""

from dataclasses import dataclass, field

CLASS_TAG = "class"
MEMBER_KINDS = ("cfg", "property", "method", "event", "css_var", "css_mixin")


@dataclass(frozen=True)
class Param:
    """A documented parameter of a method or event."""

    name: str
    type: str = ""
    doc: str = ""
    optional: bool = False
    default: str | None = None


@dataclass(frozen=True)
class ReturnSpec:
    """A documented return value."""

    type: str = ""
    doc: str = ""


@dataclass(frozen=True)
class InheritDocTarget:
    """Explicit ``@inheritdoc`` reference; unset parts default to the member itself."""

    cls: str | None = None
    member: str | None = None
    kind: str | None = None


@dataclass(frozen=True)
class EnumValue:
    """A single value of an enumeration class."""

    name: str
    value: str | None = None
    doc: str = ""
    type: str = ""


@dataclass(frozen=True)
class EnumSpec:
    """Marks a class as an enumeration."""

    type: str = ""
    values: tuple[EnumValue, ...] = ()


@dataclass
class Fragment:
    """One documented entity: a class declaration or a member declaration."""

    tagname: str  # "class" or one of MEMBER_KINDS
    name: str
    owner: str | None = None  # owning class for members
    doc: str = ""
    extends: str | None = None
    mixins: list[str] = field(default_factory=list)
    alternate_names: list[str] = field(default_factory=list)
    ignore: bool = False
    singleton: bool = False
    static: bool = False
    private: bool = False
    params: list[Param] = field(default_factory=list)
    returns: ReturnSpec | None = None
    type: str = ""
    default: str | None = None
    inheritdoc: InheritDocTarget | None = None
    since: str | None = None
    accessor: bool = False
    evented: bool = False
    chainable: bool = False
    enum: EnumSpec | None = None
    override: str | None = None
    filename: str = ""
    linenr: int = 0

    @property
    def is_class(self) -> bool:
        """Check if the fragment declares a class."""
        return self.tagname == CLASS_TAG

    @property
    def key(self) -> tuple[str, str]:
        """Return the (kind, name) key used in member tables."""
        return (self.tagname, self.name)
