"""Enrichment pass expanding enumeration classes into static properties."""

from dataclasses import replace

from classdoc.aggregated_class import AggregatedClass
from classdoc.fragment import EnumSpec, Fragment

DEFAULT_ENUM_TYPE = "String"


class Enums:
    """Gives every enum class one static property per declared value."""

    def __init__(self, classes: dict[str, AggregatedClass]) -> None:
        """Initialize with the aggregated class mapping."""
        self.classes = classes

    def process_all(self) -> None:
        """Expand all enum classes."""
        for cls in self.classes.values():
            if cls.enum is not None:
                self.process(cls)

    def process(self, cls: AggregatedClass) -> None:
        """Expand one enum class and settle its value type."""
        enum = cls.enum or EnumSpec()
        enum_type = enum.type or self.infer_type(cls, enum)
        cls.enum = replace(enum, type=enum_type)

        for value in enum.values:
            if cls.has_member("property", value.name):
                continue
            prop = Fragment(
                tagname="property",
                name=value.name,
                owner=cls.name,
                doc=value.doc,
                type=value.type or enum_type,
                default=value.value,
                static=True,
                filename=cls.filename,
                linenr=cls.linenr,
            )
            cls.members[prop.key] = prop

    def infer_type(self, cls: AggregatedClass, enum: EnumSpec) -> str:
        """Take the type of the first typed value or documented property."""
        for value in enum.values:
            if value.type:
                return value.type
        for member in cls.members.values():
            if member.tagname == "property" and member.type:
                return member.type
        return DEFAULT_ENUM_TYPE
