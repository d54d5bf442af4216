"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from classdoc.deep_merge import deep_merge
from classdoc.errors import ConfigError

CLASS_ATTRIBUTE_POLICIES = ("first", "last")

DEFAULT_CONFIG: dict[str, Any] = {
    "workers": None,
    "external_classes": ["Object", "String", "Number", "Boolean", "Function"],
    "ignore_global": False,
    "framework_quirks": {
        "ext4_events": None,
    },
    "aggregation": {
        "class_attributes": "first",
    },
    "default_version": None,
    "new_since": None,
    "lint": {
        "no_doc": False,
        "param_docs": True,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file must contain a mapping: {path}"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)

    policy = config["aggregation"].get("class_attributes")
    if policy not in CLASS_ATTRIBUTE_POLICIES:
        msg = f"Unknown aggregation.class_attributes policy: {policy!r}"
        raise ConfigError(msg)
    return config
