"""Logic for building a package hierarchy tree of classes."""

import re
from typing import Any

from classdoc.doc_class import DocClass

CAPITALIZED_RE = re.compile(r"^[A-Z]")


def short_name(name: str) -> str:
    """Extract the class part of a full name.

    Trailing capitalized segments stay together, so ``Ext.form.Panel.Item``
    gives ``Panel.Item``.
    """
    parts = name.split(".")
    short = parts.pop()
    while len(parts) > 1 and CAPITALIZED_RE.match(parts[-1]):
        short = parts.pop() + "." + short
    return short


def package_name(name: str) -> str:
    """Return the package containing a class or package name."""
    return name[: -len(short_name(name)) - 1] if "." in name else ""


def build_package_tree(
    classes: list[DocClass], api_root: str = "/api", icons: dict[str, str] | None = None
) -> dict[str, Any]:
    """Build a nested tree with package nodes sorted before class nodes."""
    root: dict[str, Any] = {"text": "Root", "children": []}
    packages: dict[str, dict[str, Any]] = {"": root}

    def add_package(name: str) -> dict[str, Any]:
        parent_name = package_name(name)
        parent = packages.get(parent_name) or add_package(parent_name)
        pkg = {"text": short_name(name), "iconCls": "icon-pkg", "children": []}
        parent["children"].append(pkg)
        packages[name] = pkg
        return pkg

    for cls in classes:
        parent_name = package_name(cls.name)
        parent = packages.get(parent_name) or add_package(parent_name)
        parent["children"].append(
            {
                "text": short_name(cls.name),
                "url": f"{api_root}/{cls.name}",
                "iconCls": (icons or {}).get(cls.name, class_icon(cls)),
                "leaf": True,
            }
        )

    sort_tree(root)
    return root


def class_icon(cls: DocClass) -> str:
    """Pick the tree icon for a class."""
    if cls.singleton:
        return "icon-singleton"
    return "icon-class"


def sort_tree(node: dict[str, Any]) -> None:
    """Sort children recursively: packages first, then case-insensitive by text."""
    node["children"].sort(key=lambda c: (bool(c.get("leaf")), c["text"].lower()))
    for child in node["children"]:
        if "children" in child:
            sort_tree(child)
