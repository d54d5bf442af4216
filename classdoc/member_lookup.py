"""Logic for walking the class graph in doc-inheritance order."""

from collections.abc import Iterator

from classdoc.doc_class import DocClass
from classdoc.relations import Relations


def inheritance_order(relations: Relations, name: str) -> Iterator[DocClass]:
    """Yield classes to search for an inherited member, excluding ``name`` itself.

    Ancestors come first, nearest first; then the mixins of the class and of
    each ancestor in declaration order, each mixin followed by its own
    ancestors. Every class is yielded at most once.
    """
    seen = {name}
    chain = [name, *relations.ancestor_names(name)]
    for ancestor in chain[1:]:
        cls = relations.get(ancestor)
        if cls is not None and cls.name not in seen:
            seen.add(cls.name)
            yield cls

    for owner in chain:
        for mixin in relations.mixins_of(owner):
            for candidate in [mixin, *relations.ancestor_names(mixin)]:
                cls = relations.get(candidate)
                if cls is not None and cls.name not in seen:
                    seen.add(cls.name)
                    yield cls
