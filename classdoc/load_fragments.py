"""Logic for loading pre-extracted documentation fragments from YAML.

A document is a mapping with a ``fragments`` list. It may start with a
``### YamlMime:ClassdocFragments`` header line, which is stripped before
parsing.

This is the parser shipped with the project. Any callable with the same
``(content, filename, config) -> list[Fragment]`` signature can replace it.
"""

from collections.abc import Iterable
from typing import Any

import yaml

from classdoc.as_text import as_text
from classdoc.fragment import (
    CLASS_TAG,
    MEMBER_KINDS,
    EnumSpec,
    EnumValue,
    Fragment,
    InheritDocTarget,
    Param,
    ReturnSpec,
)
from classdoc.strip_yaml_mime_header import strip_yaml_mime_header


def load_fragments(
    content: str, filename: str, config: dict[str, Any] | None = None
) -> list[Fragment]:
    """Parse a fragment document into an ordered list of fragments."""
    del config  # the YAML format has no tunables
    doc = yaml.safe_load(strip_yaml_mime_header(content)) or {}
    if not isinstance(doc, dict):
        msg = "fragment document must be a mapping"
        raise ValueError(msg)

    fragments: list[Fragment] = []
    current_class: str | None = None
    for index, entry in enumerate(iter_fragment_entries(doc)):
        frag = fragment_from_entry(entry, filename, index)
        if frag.is_class:
            current_class = frag.name
        elif frag.owner is None and not entry.get("global"):
            frag.owner = current_class
        fragments.append(frag)
    return fragments


def iter_fragment_entries(doc: dict[str, Any]) -> Iterable[dict[str, Any]]:
    """Iterate over the fragment entries of a document."""
    entries = doc.get("fragments") or []
    if not isinstance(entries, list):
        msg = "'fragments' must be a list"
        raise ValueError(msg)
    for it in entries:
        if not isinstance(it, dict):
            msg = f"fragment entry must be a mapping, got {type(it).__name__}"
            raise ValueError(msg)
        yield it


def fragment_from_entry(entry: dict[str, Any], filename: str, index: int) -> Fragment:
    """Convert one YAML mapping into a Fragment."""
    tagname = as_text(entry.get("tagname"))
    name = as_text(entry.get("name"))
    if not tagname or not name:
        msg = f"fragment #{index} needs both 'tagname' and 'name'"
        raise ValueError(msg)
    if tagname != CLASS_TAG and tagname not in MEMBER_KINDS:
        msg = f"fragment #{index} has unknown tagname {tagname!r}"
        raise ValueError(msg)

    returns = entry.get("return")
    return Fragment(
        tagname=tagname,
        name=name,
        owner=as_text(entry.get("owner")) or None,
        doc=as_text(entry.get("doc")),
        extends=as_text(entry.get("extends")) or None,
        mixins=_name_list(entry.get("mixins")),
        alternate_names=_name_list(entry.get("alternateNames")),
        ignore=bool(entry.get("ignore")),
        singleton=bool(entry.get("singleton")),
        static=bool(entry.get("static")),
        private=bool(entry.get("private")),
        params=[_param(p) for p in entry.get("params") or []],
        returns=_return_spec(returns) if returns is not None else None,
        type=as_text(entry.get("type")),
        default=_optional_text(entry.get("default")),
        inheritdoc=_inheritdoc(entry.get("inheritdoc")),
        since=_optional_text(entry.get("since")),
        accessor=bool(entry.get("accessor")),
        evented=bool(entry.get("evented")),
        chainable=bool(entry.get("chainable")),
        enum=_enum_spec(entry.get("enum")),
        override=as_text(entry.get("override")) or None,
        filename=filename,
        linenr=int(entry.get("linenr") or 0),
    )


def parse_inheritdoc(text: str) -> InheritDocTarget:
    """Parse the ``Cls#kind-member`` shorthand; every part is optional."""
    cls, _, member = text.strip().partition("#")
    kind = None
    if "-" in member:
        prefix, _, rest = member.partition("-")
        if prefix in MEMBER_KINDS:
            kind, member = prefix, rest
    return InheritDocTarget(cls=cls or None, member=member or None, kind=kind)


def _optional_text(v: object) -> str | None:
    text = as_text(v)
    return text or None


def _name_list(v: object) -> list[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [v.strip()] if v.strip() else []
    return [as_text(x) for x in v if as_text(x)]  # type: ignore[attr-defined]


def _param(p: Any) -> Param:
    if isinstance(p, str):
        return Param(name=p)
    return Param(
        name=as_text(p.get("name")),
        type=as_text(p.get("type")),
        doc=as_text(p.get("doc")),
        optional=bool(p.get("optional")),
        default=_optional_text(p.get("default")),
    )


def _return_spec(r: Any) -> ReturnSpec:
    if isinstance(r, str):
        return ReturnSpec(type=r.strip())
    return ReturnSpec(type=as_text(r.get("type")), doc=as_text(r.get("doc")))


def _inheritdoc(v: Any) -> InheritDocTarget | None:
    if v is None or v is False:
        return None
    if v is True:
        return InheritDocTarget()
    if isinstance(v, str):
        return parse_inheritdoc(v)
    return InheritDocTarget(
        cls=_optional_text(v.get("cls")),
        member=_optional_text(v.get("member")),
        kind=_optional_text(v.get("kind")),
    )


def _enum_spec(v: Any) -> EnumSpec | None:
    if not v:
        return None
    if v is True:
        return EnumSpec()
    values = []
    for raw in v.get("values") or []:
        if isinstance(raw, str):
            values.append(EnumValue(name=raw, value=f'"{raw}"'))
        else:
            values.append(
                EnumValue(
                    name=as_text(raw.get("name")),
                    value=_optional_text(raw.get("value")),
                    doc=as_text(raw.get("doc")),
                    type=as_text(raw.get("type")),
                )
            )
    return EnumSpec(type=as_text(v.get("type")), values=tuple(values))
