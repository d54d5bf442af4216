"""Logic for turning the enriched class mapping into the relations graph."""

from collections.abc import Iterable

from classdoc.aggregated_class import AggregatedClass
from classdoc.diagnostic import Diagnostics
from classdoc.doc_class import DocClass
from classdoc.relations import Relations


def build_relations(
    classes: dict[str, AggregatedClass],
    external_classes: Iterable[str],
    diagnostics: Diagnostics | None = None,
) -> Relations:
    """Freeze every aggregated class and link them into Relations."""
    docs = [DocClass.from_aggregate(agg) for agg in classes.values()]
    return Relations(docs, external_classes, diagnostics)
