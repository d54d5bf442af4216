"""Tests for the relations graph and the graph builder."""

import pytest

from classdoc.aggregated_class import AggregatedClass
from classdoc.build_relations import build_relations
from classdoc.doc_class import DocClass, Member
from classdoc.errors import DuplicateClassError
from classdoc.fragment import Fragment
from classdoc.relations import Relations


def make_relations(*classes: DocClass, external: tuple[str, ...] = ()) -> Relations:
    """Build a relations graph from ready classes."""
    return Relations(classes, external)


def test_duplicate_class_names_rejected() -> None:
    """Verify that class names must be unique."""
    with pytest.raises(DuplicateClassError):
        make_relations(DocClass("A"), DocClass("A"))


def test_lookup_by_name_and_alternate_name() -> None:
    """Verify lookup by full name and by alternate class name."""
    rel = make_relations(DocClass("My.Panel", alternate_names=("My.OldPanel",)))
    assert rel.get("My.Panel") is rel.get("My.OldPanel")
    assert "My.OldPanel" in rel
    assert rel.get("Nope") is None


def test_external_and_unresolved_stubs() -> None:
    """Verify that references split into registered externals and unresolved."""
    rel = make_relations(
        DocClass("A", extends="Object", mixins=("Missing",)),
        DocClass("Object"),
        external=("Object", "Ext.Base"),
    )
    assert rel.external_classes == {"Ext.Base"}
    assert rel.unresolved == {"Missing"}
    assert rel.is_stub("Missing")
    assert not rel.is_stub("A")
    assert rel.is_known("Ext.Base")
    assert not rel.is_known("Missing")


def test_ancestors_and_subclasses() -> None:
    """Verify ancestor traversal, nearest first, ending at a stub."""
    rel = make_relations(
        DocClass("C", extends="B"),
        DocClass("B", extends="A"),
        DocClass("A", extends="Ext.Base"),
        external=("Ext.Base",),
    )
    assert rel.ancestor_names("C") == ["B", "A", "Ext.Base"]
    assert [c.name for c in rel.ancestors("C")] == ["B", "A"]
    assert [c.name for c in rel.subclasses("A")] == ["B"]
    assert rel.parent_of("A") == "Ext.Base"


def test_parent_by_alternate_name_is_canonical() -> None:
    """Verify that an alternate name in extends resolves to the real class."""
    rel = make_relations(
        DocClass("Child", extends="Old.Base"),
        DocClass("New.Base", alternate_names=("Old.Base",)),
    )
    assert rel.parent_of("Child") == "New.Base"
    assert not rel.unresolved


def test_mixins_and_mixed_into() -> None:
    """Verify mixin traversal in declaration order."""
    rel = make_relations(
        DocClass("A", mixins=("M2", "M1", "M2")),
        DocClass("M1"),
        DocClass("M2"),
    )
    assert rel.mixins_of("A") == ["M2", "M1"]
    assert [c.name for c in rel.mixed_into("M1")] == ["A"]


def test_cut_edges_are_not_traversed() -> None:
    """Verify that cut edges disappear from traversal but not from the class."""
    a = DocClass("A", extends="B", mixins=("M",))
    rel = make_relations(a, DocClass("B"), DocClass("M"))
    rel.cut_parent("A")
    rel.cut_mixin("A", "M")
    assert rel.parent_of("A") is None
    assert rel.mixins_of("A") == []
    assert a.extends == "B"


def test_ancestor_walk_terminates_on_uncut_cycle() -> None:
    """Verify that even an unbroken cycle cannot hang ancestor traversal."""
    rel = make_relations(DocClass("A", extends="B"), DocClass("B", extends="A"))
    assert rel.ancestor_names("A") == ["B"]


def test_build_relations_freezes_members() -> None:
    """Verify conversion of aggregated records into DocClass objects."""
    agg = AggregatedClass("A", extends="Base", placeholder=False)
    agg.add_member(Fragment("method", "run", owner="A", doc="Runs."))
    rel = build_relations({"A": agg}, ["Base"])

    cls = rel.get("A")
    assert cls is not None
    run = cls.get_member("method", "run")
    assert isinstance(run, Member)
    assert run.owner == "A"
    assert run.doc == "Runs."
    assert rel.external_classes == {"Base"}
