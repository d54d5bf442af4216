"""End-to-end tests for the batch parser pipeline."""

import json
import random
import time
from pathlib import Path
from typing import Any

import pytest

from classdoc.batch_parser import BatchParser
from classdoc.diagnostic import (
    DUPLICATE_DEFINITION,
    LINT,
    STRUCTURAL_CYCLE,
    UNRESOLVED_REFERENCE,
)
from classdoc.doc_class import MemberRef
from classdoc.errors import ParseFailure
from classdoc.fragment import Fragment
from classdoc.global_members import GLOBAL_CLASS
from classdoc.load_config import load_config
from classdoc.load_fragments import load_fragments
from classdoc.relations_to_dict import relations_to_dict


def write(tmp_path: Path, name: str, content: str) -> str:
    """Write a fragment file and return its path."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def run(files: list[str], **overrides: Any) -> BatchParser:
    """Run the pipeline over the files with default config plus overrides."""
    config = load_config(None)
    config.update(overrides)
    batch = BatchParser(files, config, workers=1)
    batch.run()
    return batch


def jittery_parser(
    content: str, filename: str, config: dict[str, Any]
) -> list[Fragment]:
    """Parse like the YAML loader, finishing in random order."""
    time.sleep(random.uniform(0, 0.005))  # noqa: S311
    return load_fragments(content, filename, config)


@pytest.fixture
def project(tmp_path: Path) -> list[str]:
    """Create a small project touching every pipeline stage."""
    return [
        write(
            tmp_path,
            "01_base.yml",
            """
fragments:
  - {tagname: class, name: App.Base, doc: Base class., since: "1.0"}
  - {tagname: method, name: bar, doc: hello, since: "1.1",
      params: [{name: x, doc: X.}]}
  - {tagname: method, name: foo, doc: x}
  - {tagname: method, name: setup, doc: Sets up., return: this}
""",
        ),
        write(
            tmp_path,
            "02_child.yml",
            """
fragments:
  - {tagname: class, name: App.Child, extends: App.Base, mixins: [App.Mixin]}
  - {tagname: method, name: bar}
  - {tagname: cfg, name: title, type: String, doc: Title., accessor: true}
  - {tagname: class, name: App.Mixin}
  - {tagname: event, name: ready, doc: Ready., params: [{name: me, doc: Me.}]}
  - {tagname: class, name: App.Hidden, ignore: true}
  - {tagname: class, name: App.Sub, extends: App.Hidden, doc: Extends ignored.}
""",
        ),
        write(
            tmp_path,
            "03_reopen.yml",
            """
fragments:
  - {tagname: class, name: App.Base}
  - {tagname: method, name: foo, doc: y}
  - {tagname: method, name: log, doc: Logs., global: true}
  - {tagname: class, name: App.Patch, override: App.Base}
  - {tagname: method, name: baz, doc: first}
  - {tagname: class, name: App.Patch2, override: App.Base}
  - {tagname: method, name: baz, doc: second}
  - {tagname: class, name: App.Loop1, extends: App.Loop2}
  - {tagname: class, name: App.Loop2, extends: App.Loop1}
""",
        ),
    ]


def test_merge_precedence(project: list[str]) -> None:
    """Verify that the later file wins and a duplicate is recorded."""
    batch = run(project)
    relations = batch.relations
    assert relations is not None
    foo = relations.get_member("App.Base", "method", "foo")
    assert foo is not None
    assert foo.doc == "y"
    dupes = [
        d for d in relations.diagnostics
        if d.kind == DUPLICATE_DEFINITION and d.member == "foo"
    ]
    assert len(dupes) == 1
    assert not [
        d for d in relations.diagnostics if d.kind == LINT and d.member == "foo"
    ]


def test_inheritance_round_trip(project: list[str]) -> None:
    """Verify that an empty member doc is inherited from the parent."""
    relations = run(project).relations
    assert relations is not None
    bar = relations.get_member("App.Child", "method", "bar")
    assert bar is not None
    assert bar.doc == "hello"
    assert bar.inherited_from == MemberRef("App.Base", "method", "bar")
    assert [p.name for p in bar.params] == ["x"]


def test_override_idempotence(project: list[str]) -> None:
    """Verify that two overrides of the same method leave the later one."""
    batch = run(project)
    relations = batch.relations
    assert relations is not None
    base = relations.get("App.Base")
    assert base is not None
    assert [m.name for m in base.members.values()].count("baz") == 1
    assert base.members[("method", "baz")].doc == "second"
    names = {c.name for c in relations.classes()}
    assert "App.Patch" not in names
    assert "App.Patch2" not in names
    assert {"App.Patch", "App.Patch2"} <= batch.external_classes


def test_ignored_class_exclusion(project: list[str]) -> None:
    """Verify that ignored classes vanish but stay legal ancestors."""
    relations = run(project).relations
    assert relations is not None
    assert "App.Hidden" not in {c.name for c in relations.classes()}
    assert relations.parent_of("App.Sub") == "App.Hidden"
    assert "App.Hidden" not in relations.unresolved
    assert not [
        d for d in relations.diagnostics
        if d.class_name == "App.Sub" and "not found" in d.message
    ]


def test_acyclicity(project: list[str]) -> None:
    """Verify that every extends walk terminates within the class count."""
    relations = run(project).relations
    assert relations is not None
    for cls in relations:
        steps = 0
        current = relations.parent_of(cls.name)
        while current is not None:
            steps += 1
            assert steps <= len(relations)
            current = relations.parent_of(current)
    assert STRUCTURAL_CYCLE in {d.kind for d in relations.diagnostics}


def test_enrichment_results_visible(project: list[str]) -> None:
    """Verify accessors, global members and return values end to end."""
    relations = run(project).relations
    assert relations is not None
    assert relations.get_member("App.Child", "method", "getTitle") is not None
    assert relations.get_member(GLOBAL_CLASS, "method", "log") is not None
    setup = relations.get_member("App.Base", "method", "setup")
    assert setup is not None
    assert setup.returns is not None
    assert setup.returns.type == "App.Base"
    ready = relations.get_member("App.Mixin", "event", "ready")
    assert ready is not None
    assert [p.name for p in ready.params] == ["me"]


def test_ext4_quirk_applied_through_config(project: list[str]) -> None:
    """Verify that the framework quirk setting reaches the pass."""
    relations = run(project, framework_quirks={"ext4_events": True}).relations
    assert relations is not None
    ready = relations.get_member("App.Mixin", "event", "ready")
    assert ready is not None
    assert [p.name for p in ready.params] == ["me", "eOpts"]


def test_versions_propagate(project: list[str]) -> None:
    """Verify that versions flow from class to members."""
    relations = run(project, default_version="0.5").relations
    assert relations is not None
    bar = relations.get_member("App.Child", "method", "bar")
    assert bar is not None
    assert bar.resolved_since == "1.1"
    foo = relations.get_member("App.Base", "method", "foo")
    assert foo is not None
    assert foo.resolved_since == "1.0"
    child = relations.get("App.Child")
    assert child is not None
    assert child.resolved_since == "0.5"


def test_determinism_across_worker_counts(project: list[str]) -> None:
    """Verify that results do not depend on parse scheduling."""
    outputs = set()
    for workers in (1, 2, 3, 8):
        batch = BatchParser(
            project, load_config(None), parser=jittery_parser, workers=workers
        )
        relations = batch.run()
        outputs.add(json.dumps(relations_to_dict(relations), sort_keys=True))
    assert len(outputs) == 1


def test_parse_failure_aborts(project: list[str], tmp_path: Path) -> None:
    """Verify that a broken file aborts the whole run without output."""
    broken = write(tmp_path, "04_broken.yml", "fragments:\n  - {tagname: class}\n")
    batch = BatchParser([*project, broken], load_config(None), workers=2)
    with pytest.raises(ParseFailure) as excinfo:
        batch.run()
    assert excinfo.value.filename == broken
    assert batch.relations is None


def test_missing_override_target_is_recovered(tmp_path: Path) -> None:
    """Verify that an unknown override target does not stop the run."""
    f = write(
        tmp_path,
        "patch.yml",
        "fragments:\n  - {tagname: class, name: P, override: Gone}\n"
        "  - {tagname: method, name: m, doc: M.}\n",
    )
    relations = run([f]).relations
    assert relations is not None
    assert len(relations) == 0
    assert [d.kind for d in relations.diagnostics] == [UNRESOLVED_REFERENCE]
