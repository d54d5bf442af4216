"""The class graph: a name index plus inheritance and mixin traversal."""

from collections.abc import Iterable, Iterator

from classdoc.diagnostic import Diagnostics
from classdoc.doc_class import DocClass, Member
from classdoc.errors import DuplicateClassError


class Relations:
    """Name-addressed arena of classes.

    Edges are class names. Names referenced as parents or mixins but never
    defined act as memberless stub nodes: ``external_classes`` holds those
    registered as known, ``unresolved`` the rest.
    """

    def __init__(
        self,
        classes: Iterable[DocClass],
        external_classes: Iterable[str] = (),
        diagnostics: Diagnostics | None = None,
    ) -> None:
        """Index the classes; raise DuplicateClassError on a name collision."""
        self._classes: dict[str, DocClass] = {}
        for cls in classes:
            if cls.name in self._classes:
                raise DuplicateClassError(cls.name)
            self._classes[cls.name] = cls

        self._aliases: dict[str, str] = {}
        for cls in self._classes.values():
            for alias in cls.alternate_names:
                if alias not in self._classes:
                    self._aliases.setdefault(alias, cls.name)

        self.external_classes: set[str] = {
            name for name in external_classes if name not in self._classes
        }
        self.unresolved: set[str] = set()
        for cls in self._classes.values():
            for ref in self._references(cls):
                if not self.is_known(ref):
                    self.unresolved.add(ref)

        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.cut_parents: set[str] = set()
        self.cut_mixins: set[tuple[str, str]] = set()

    def __len__(self) -> int:
        """Return the number of locally defined classes."""
        return len(self._classes)

    def __iter__(self) -> Iterator[DocClass]:
        """Iterate over classes in build order."""
        return iter(self._classes.values())

    def __contains__(self, name: object) -> bool:
        """Check if a class is defined locally (aliases included)."""
        return isinstance(name, str) and self.get(name) is not None

    def classes(self) -> list[DocClass]:
        """Return every locally defined class."""
        return list(self._classes.values())

    def get(self, name: str) -> DocClass | None:
        """Look up a class by full name or alternate name."""
        cls = self._classes.get(name)
        if cls is None and name in self._aliases:
            cls = self._classes[self._aliases[name]]
        return cls

    def is_known(self, name: str) -> bool:
        """Check if a name is defined locally or registered as external."""
        return name in self._classes or name in self._aliases or (
            name in self.external_classes
        )

    def is_stub(self, name: str) -> bool:
        """Check if a name is a memberless stub node."""
        return name in self.external_classes or name in self.unresolved

    def get_member(self, class_name: str, kind: str, name: str) -> Member | None:
        """Look up a member of a locally defined class."""
        cls = self.get(class_name)
        return cls.get_member(kind, name) if cls else None

    def parent_of(self, name: str) -> str | None:
        """Return the parent name, or None at a root or a cut edge.

        Alternate names are resolved to the canonical class name.
        """
        cls = self.get(name)
        if cls is None or cls.name in self.cut_parents or not cls.extends:
            return None
        parent = self.get(cls.extends)
        return parent.name if parent else cls.extends

    def mixins_of(self, name: str) -> list[str]:
        """Return mixin names in declaration order, skipping cut edges."""
        cls = self.get(name)
        if cls is None:
            return []
        names = []
        for mixin in cls.mixins:
            target = self.get(mixin)
            resolved = target.name if target else mixin
            if (cls.name, resolved) not in self.cut_mixins and resolved not in names:
                names.append(resolved)
        return names

    def ancestor_names(self, name: str) -> list[str]:
        """Return parent, grandparent, ... including a trailing stub name."""
        names: list[str] = []
        seen = {name}
        current = self.parent_of(name)
        while current is not None and current not in seen:
            names.append(current)
            seen.add(current)
            current = self.parent_of(current)
        return names

    def ancestors(self, name: str) -> list[DocClass]:
        """Return the locally defined ancestors, nearest first."""
        return [c for c in map(self.get, self.ancestor_names(name)) if c is not None]

    def subclasses(self, name: str) -> list[DocClass]:
        """Return classes whose direct parent is ``name``."""
        target = self.get(name)
        canonical = target.name if target else name
        return [
            c for c in self._classes.values() if self.parent_of(c.name) == canonical
        ]

    def mixed_into(self, name: str) -> list[DocClass]:
        """Return classes that list ``name`` as a direct mixin."""
        target = self.get(name)
        canonical = target.name if target else name
        return [
            c for c in self._classes.values() if canonical in self.mixins_of(c.name)
        ]

    def cut_parent(self, name: str) -> None:
        """Treat the parent of ``name`` as absent from now on."""
        self.cut_parents.add(name)

    def cut_mixin(self, name: str, mixin: str) -> None:
        """Treat ``mixin`` as no longer mixed into ``name``."""
        self.cut_mixins.add((name, mixin))

    def _references(self, cls: DocClass) -> list[str]:
        refs = [cls.extends] if cls.extends else []
        return refs + list(cls.mixins)
