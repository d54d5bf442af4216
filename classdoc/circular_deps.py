"""Post-resolution pass that breaks inheritance and mixin cycles."""

from classdoc.diagnostic import STRUCTURAL_CYCLE
from classdoc.relations import Relations

WHITE, GRAY, BLACK = 0, 1, 2


class CircularDeps:
    """Cuts the edge that closes each cycle so every graph walk terminates.

    Classes are visited in sorted name order, so the cut edge does not depend
    on input order.
    """

    def __init__(self, relations: Relations) -> None:
        """Initialize with the relations graph."""
        self.relations = relations

    def process_all(self) -> None:
        """Break all ``extends`` cycles, then all mixin cycles."""
        self.break_parent_cycles()
        self.break_mixin_cycles()

    def break_parent_cycles(self) -> None:
        """Walk each extends chain and cut the edge that revisits a class."""
        finished: set[str] = set()
        for name in sorted(c.name for c in self.relations):
            path: list[str] = []
            current: str | None = name
            while current is not None and current not in finished:
                if current in path:
                    closing = path[-1]
                    cycle = [*path[path.index(current) :], current]
                    self.relations.cut_parent(closing)
                    self._report(closing, "extends", cycle)
                    break
                path.append(current)
                current = self.relations.parent_of(current)
            finished.update(path)

    def break_mixin_cycles(self) -> None:
        """Depth-first search over mixins; cut every back edge."""
        color: dict[str, int] = {}
        for name in sorted(c.name for c in self.relations):
            if color.get(name, WHITE) == WHITE:
                self._visit_mixins(name, color, [])

    def _visit_mixins(self, name: str, color: dict[str, int], stack: list[str]) -> None:
        color[name] = GRAY
        stack.append(name)
        for mixin in self.relations.mixins_of(name):
            if mixin not in self.relations:
                continue
            state = color.get(mixin, WHITE)
            if state == GRAY:
                cycle = [*stack[stack.index(mixin) :], mixin]
                self.relations.cut_mixin(name, mixin)
                self._report(name, "mixins", cycle)
            elif state == WHITE:
                self._visit_mixins(mixin, color, stack)
        stack.pop()
        color[name] = BLACK

    def _report(self, name: str, relation: str, cycle: list[str]) -> None:
        cls = self.relations.get(name)
        self.relations.diagnostics.warn(
            STRUCTURAL_CYCLE,
            f"Circular {relation} dependency: {' -> '.join(cycle)}; "
            f"edge from {name} removed",
            class_name=name,
            filename=cls.filename if cls else "",
            linenr=cls.linenr if cls else 0,
        )
