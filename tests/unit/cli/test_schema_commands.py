"""Tests for the `epiphany schema` CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from epiphany.cli._dispatcher import build_parser, main
from helpers.schema_files import write_entity, write_intent


@pytest.fixture
def library(isolated_project_env: Path) -> Path:
    root = isolated_project_env
    write_entity(root, "exercise", {"validation_type": "text_match", "known_phrases": ["Squat"]})
    write_entity(root, "metric", {"validation_type": "text_match", "known_phrases": ["Rep"]})
    write_entity(root, "weighted_lift", {"validation_type": "regex"})
    write_intent(root, "track_exercise", {"track_exercise": {"required_entities": ["exercise"]}})
    return root


def _json_out(capsys) -> dict:
    return json.loads(capsys.readouterr().out)


def test_parser_discovers_schema_commands() -> None:
    parser = build_parser()
    args = parser.parse_args(["schema", "entities", "--json"])
    assert args.domain == "schema"
    assert args.command == "entities"
    assert callable(args._func)


def test_no_domain_prints_help(capsys) -> None:
    assert main([]) == 0
    assert "schema" in capsys.readouterr().out


def test_entities_json(library: Path, capsys) -> None:
    assert main(["schema", "entities", "--json"]) == 0
    out = _json_out(capsys)
    assert out["count"] == 3
    assert [e["type"] for e in out["entity_types"]] == ["exercise", "metric", "weighted_lift"]


def test_entities_text_match_filter(library: Path, capsys) -> None:
    assert main(["schema", "entities", "--text-match", "--json"]) == 0
    assert _json_out(capsys)["count"] == 2


def test_entities_named(library: Path, capsys) -> None:
    assert main(["schema", "entities", "metric", "weighted_lift", "--json"]) == 0
    assert [e["type"] for e in _json_out(capsys)["entity_types"]] == ["metric", "weighted_lift"]


def test_entities_text(library: Path, capsys) -> None:
    assert main(["schema", "entities"]) == 0
    out = capsys.readouterr().out
    assert "Entity types (3):" in out
    assert "exercise [text_match] (1 known phrases)" in out


def test_intents_json(library: Path, capsys) -> None:
    assert main(["schema", "intents", "--json"]) == 0
    out = _json_out(capsys)
    assert out["intent_types"] == [
        {
            "type": "track_exercise",
            "required_entities": ["exercise"],
            "optional_entities": [],
            "keywords_boost": [],
        }
    ]


def test_phrases(library: Path, capsys) -> None:
    assert main(["schema", "phrases", "metric", "--json"]) == 0
    out = _json_out(capsys)
    assert out["entity_type"] == "metric"
    assert set(out["phrases"]) == {"rep", "reps"}


def test_phrases_unknown_entity(library: Path, capsys) -> None:
    assert main(["schema", "phrases", "nope", "--json"]) == 1
    err = json.loads(capsys.readouterr().err)
    assert err["error"] == "phrases_error"
    assert err["context"]["available"] == ["exercise", "metric", "weighted_lift"]


def test_validate_ok(library: Path, capsys) -> None:
    assert main(["schema", "validate", "--json"]) == 0
    out = _json_out(capsys)
    assert out == {"status": "success", "entity_types": 3, "intent_types": 1}


def test_validate_reports_schema_violation(library: Path, capsys) -> None:
    write_intent(library, "broken", {"required_entities": ["exercise"]})
    assert main(["schema", "validate"]) == 1
    assert "Schema violation" in capsys.readouterr().err


def test_validate_reports_malformed_json(library: Path, capsys) -> None:
    (library / "lib" / "epiphany" / "entity_types" / "bad.json").write_text("{", encoding="utf-8")
    assert main(["schema", "validate"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_repo_root_flag(library: Path, tmp_path_factory, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
    monkeypatch.delenv("EPIPHANY_PROJECT_ROOT")
    assert main(["schema", "entities", "--repo-root", str(library), "--json"]) == 0
    assert _json_out(capsys)["count"] == 3
