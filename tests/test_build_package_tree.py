"""Tests for the package tree builder."""

from classdoc.build_package_tree import build_package_tree, package_name, short_name
from classdoc.doc_class import DocClass


def test_short_name_keeps_nested_classes_together() -> None:
    """Verify that trailing capitalized segments form the short name."""
    assert short_name("Ext.form.Panel.Item") == "Panel.Item"
    assert short_name("Ext.Panel") == "Panel"
    assert short_name("Ext") == "Ext"


def test_package_name() -> None:
    """Verify that the package is what remains after the short name."""
    assert package_name("Ext.form.Panel.Item") == "Ext.form"
    assert package_name("Ext.form") == "Ext"
    assert package_name("Ext") == ""


def test_tree_sorts_packages_before_classes() -> None:
    """Verify the nesting and ordering of the tree."""
    classes = [
        DocClass(name="Ext.form.field.Text"),
        DocClass(name="Ext.Panel"),
        DocClass(name="Ext.form.Basic"),
        DocClass(name="Ext.data", singleton=True),
        DocClass(name="Ext.form.action"),
    ]
    tree = build_package_tree(classes)

    (ext,) = tree["children"]
    assert ext["text"] == "Ext"
    assert [c["text"] for c in ext["children"]] == ["form", "data", "Panel"]

    form = ext["children"][0]
    assert [c["text"] for c in form["children"]] == ["field", "action", "Basic"]
    assert form["children"][1]["leaf"] is True
    assert form["children"][0]["children"][0]["url"] == "/api/Ext.form.field.Text"

    data = ext["children"][1]
    assert data["iconCls"] == "icon-singleton"


def test_tree_icon_override() -> None:
    """Verify that explicit icons win over the default choice."""
    tree = build_package_tree(
        [DocClass(name="App.Main")], api_root="/docs", icons={"App.Main": "x"}
    )
    leaf = tree["children"][0]["children"][0]
    assert leaf == {
        "text": "Main",
        "url": "/docs/App.Main",
        "iconCls": "x",
        "leaf": True,
    }
