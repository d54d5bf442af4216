"""Enrichment pass synthesizing getter, setter and change-event members."""

from dataclasses import replace

from classdoc.aggregated_class import AggregatedClass
from classdoc.fragment import Fragment, Param, ReturnSpec

ACCESSOR_KINDS = ("cfg", "property")


def upcase_first(name: str) -> str:
    """Capitalize only the first character."""
    return name[:1].upper() + name[1:]


class Accessors:
    """Creates ``get<Name>``/``set<Name>`` methods for accessor properties."""

    def __init__(self, classes: dict[str, AggregatedClass]) -> None:
        """Initialize with the aggregated class mapping."""
        self.classes = classes

    def process_all(self) -> None:
        """Add accessors to every class."""
        for cls in self.classes.values():
            self.process(cls)

    def process(self, cls: AggregatedClass) -> None:
        """Add missing accessor members to one class."""
        accessor_props = [
            m
            for m in cls.members.values()
            if m.tagname in ACCESSOR_KINDS and m.accessor
        ]
        for prop in accessor_props:
            for generated in (self.getter(prop), self.setter(prop)):
                if not cls.has_member(generated.tagname, generated.name):
                    cls.members[generated.key] = generated
            if prop.evented:
                event = self.change_event(prop)
                if not cls.has_member(event.tagname, event.name):
                    cls.members[event.key] = event

    def getter(self, prop: Fragment) -> Fragment:
        """Build the getter method for a property."""
        return self._generated(
            prop,
            tagname="method",
            name="get" + upcase_first(prop.name),
            doc=f"Returns the value of {self._link(prop)}.",
            params=[],
            returns=ReturnSpec(type=prop.type),
        )

    def setter(self, prop: Fragment) -> Fragment:
        """Build the setter method for a property."""
        return self._generated(
            prop,
            tagname="method",
            name="set" + upcase_first(prop.name),
            doc=f"Sets the value of {self._link(prop)}.",
            params=[Param(name=prop.name, type=prop.type, doc="The new value.")],
            returns=None,
        )

    def change_event(self, prop: Fragment) -> Fragment:
        """Build the change event fired by an evented property."""
        return self._generated(
            prop,
            tagname="event",
            name=prop.name.lower() + "change",
            doc=f"Fires when the {self._link(prop)} configuration is changed.",
            params=[
                Param(name="this", type=prop.owner or "Object", doc="The instance."),
                Param(name="value", type=prop.type, doc="The new value being set."),
                Param(name="oldValue", type=prop.type, doc="The existing value."),
            ],
            returns=None,
        )

    def _link(self, prop: Fragment) -> str:
        return f"{{@link #{prop.tagname}-{prop.name}}}"

    def _generated(self, prop: Fragment, **changes: object) -> Fragment:
        return replace(
            prop,
            type="",
            default=None,
            accessor=False,
            evented=False,
            chainable=False,
            inheritdoc=None,
            **changes,
        )
