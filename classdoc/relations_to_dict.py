"""Logic for exporting the resolved model as JSON-ready data."""

from dataclasses import asdict
from typing import Any

from classdoc.build_package_tree import build_package_tree
from classdoc.doc_class import DocClass, Member
from classdoc.relations import Relations


def member_to_dict(member: Member) -> dict[str, Any]:
    """Convert a member to plain data."""
    return {
        "name": member.name,
        "tagname": member.kind,
        "owner": member.owner,
        "doc": member.doc,
        "params": [asdict(p) for p in member.params],
        "return": asdict(member.returns) if member.returns else None,
        "type": member.type,
        "default": member.default,
        "static": member.static,
        "private": member.private,
        "inherited_from": str(member.inherited_from) if member.inherited_from else None,
        "since": member.resolved_since,
        "new": member.is_new,
    }


def class_to_dict(relations: Relations, cls: DocClass) -> dict[str, Any]:
    """Convert a class, including its resolved relations, to plain data."""
    return {
        "name": cls.name,
        "extends": relations.parent_of(cls.name),
        "superclasses": list(reversed(relations.ancestor_names(cls.name))),
        "subclasses": sorted(c.name for c in relations.subclasses(cls.name)),
        "mixins": relations.mixins_of(cls.name),
        "mixedInto": sorted(c.name for c in relations.mixed_into(cls.name)),
        "alternateClassNames": list(cls.alternate_names),
        "doc": cls.doc,
        "singleton": cls.singleton,
        "private": cls.private,
        "since": cls.resolved_since,
        "enum": asdict(cls.enum) if cls.enum else None,
        "members": [member_to_dict(m) for m in cls.members.values()],
    }


def relations_to_dict(
    relations: Relations, *, include_package_tree: bool = False
) -> dict[str, Any]:
    """Convert the whole graph, stubs and diagnostics to plain data."""
    classes = sorted(relations.classes(), key=lambda c: c.name)
    data: dict[str, Any] = {
        "classes": [class_to_dict(relations, c) for c in classes],
        "external": sorted(relations.external_classes),
        "unresolved": sorted(relations.unresolved),
        "diagnostics": [asdict(d) for d in relations.diagnostics],
    }
    if include_package_tree:
        data["packageTree"] = build_package_tree(classes)
    return data
