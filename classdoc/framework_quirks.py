"""Enrichment pass applying version-pinned framework corrections.

Each rule is registered by name in ``QUIRK_RULES``. A rule decides from the
config and the class mapping whether it applies, then rewrites members in
place.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from classdoc.aggregated_class import AggregatedClass
from classdoc.fragment import Param

logger = logging.getLogger(__name__)

EXT4_OPTIONS_PARAM = Param(
    name="eOpts",
    type="Object",
    doc="The options object passed to Ext.util.Observable.addListener.",
)

QuirkRule = Callable[[dict[str, AggregatedClass], Any], bool]


def ext4_events(classes: dict[str, AggregatedClass], setting: Any) -> bool:
    """Append the Ext JS 4 listener options parameter to every event.

    ``setting`` True forces the rule, False disables it and None enables it
    only when ``Ext.Base`` is among the documented classes.
    """
    enabled = "Ext.Base" in classes if setting is None else bool(setting)
    if not enabled:
        return False
    for cls in classes.values():
        for key, member in cls.members.items():
            if member.tagname != "event":
                continue
            if any(p.name == EXT4_OPTIONS_PARAM.name for p in member.params):
                continue
            cls.members[key] = replace(
                member, params=[*member.params, EXT4_OPTIONS_PARAM]
            )
    return True


QUIRK_RULES: dict[str, QuirkRule] = {
    "ext4_events": ext4_events,
}


class FrameworkQuirks:
    """Runs every configured quirk rule in registration order."""

    def __init__(
        self,
        classes: dict[str, AggregatedClass],
        config: dict[str, Any],
        rules: dict[str, QuirkRule] | None = None,
    ) -> None:
        """Initialize with the mapping and the ``framework_quirks`` settings."""
        self.classes = classes
        self.settings = config.get("framework_quirks") or {}
        self.rules = QUIRK_RULES if rules is None else rules

    def process_all(self) -> list[str]:
        """Apply the rules; return the names of rules that changed anything."""
        applied = []
        for name, rule in self.rules.items():
            if rule(self.classes, self.settings.get(name)):
                logger.debug("Applied framework quirk %s", name)
                applied.append(name)
        return applied
