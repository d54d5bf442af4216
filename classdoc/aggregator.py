"""Logic for folding per-file fragments into one mapping of class records."""

from classdoc.aggregated_class import AggregatedClass
from classdoc.diagnostic import DUPLICATE_DEFINITION, Diagnostics
from classdoc.file_parse_result import FileParseResult
from classdoc.fragment import Fragment

SCALAR_ATTRIBUTES = ("doc", "extends", "since", "enum", "override")
FLAG_ATTRIBUTES = ("ignore", "singleton", "private")


class Aggregator:
    """Merges fragments of reopened classes in input order.

    The result depends only on file order and fragment order, so the order
    in which parse workers finished never matters.
    """

    def __init__(
        self,
        diagnostics: Diagnostics | None = None,
        class_attributes: str = "first",
    ) -> None:
        """Initialize an empty aggregation with the given merge policy."""
        self.classes: dict[str, AggregatedClass] = {}
        self.orphans: list[Fragment] = []
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.last_wins = class_attributes == "last"

    def aggregate(self, file: FileParseResult) -> None:
        """Fold every fragment of one file into the mapping."""
        for frag in file.fragments:
            if frag.is_class:
                self._merge_class(frag)
            elif frag.owner:
                self._merge_member(self._get_or_create(frag.owner), frag)
            else:
                self.orphans.append(frag)

    def result(self) -> dict[str, AggregatedClass]:
        """Return the aggregated class mapping."""
        return self.classes

    def _get_or_create(self, name: str) -> AggregatedClass:
        cls = self.classes.get(name)
        if cls is None:
            cls = AggregatedClass(name=name)
            self.classes[name] = cls
        return cls

    def _merge_class(self, frag: Fragment) -> None:
        cls = self._get_or_create(frag.name)
        for attr in SCALAR_ATTRIBUTES:
            value = getattr(frag, attr)
            if value and (self.last_wins or not getattr(cls, attr)):
                setattr(cls, attr, value)
        for attr in FLAG_ATTRIBUTES:
            if getattr(frag, attr):
                setattr(cls, attr, True)
        _extend_unique(cls.mixins, frag.mixins)
        _extend_unique(cls.alternate_names, frag.alternate_names)
        if cls.placeholder:
            cls.placeholder = False
            cls.filename = frag.filename
            cls.linenr = frag.linenr

    def _merge_member(self, cls: AggregatedClass, frag: Fragment) -> None:
        previous = cls.add_member(frag)
        if previous is not None:
            report_shadowed(self.diagnostics, cls.name, previous, frag)


def report_shadowed(
    diagnostics: Diagnostics, class_name: str, previous: Fragment, winner: Fragment
) -> None:
    """Record that ``winner`` replaced an earlier definition of the same member."""
    diagnostics.warn(
        DUPLICATE_DEFINITION,
        f"{previous.tagname} {class_name}#{previous.name} redefined at "
        f"{winner.filename}:{winner.linenr}; "
        f"definition at {previous.filename}:{previous.linenr} is shadowed",
        class_name=class_name,
        member=previous.name,
        filename=winner.filename,
        linenr=winner.linenr,
    )


def _extend_unique(target: list[str], values: list[str]) -> None:
    for v in values:
        if v not in target:
            target.append(v)
