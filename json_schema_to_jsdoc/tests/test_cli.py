"""CLI tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from click.testing import CliRunner

from json_schema_to_jsdoc.json_schema_to_jsdoc import json_schema_to_jsdoc

SCHEMAS = Path(__file__).parent / "test_data" / "schemas"


def test_cli_displays_help() -> None:
    result = CliRunner().invoke(json_schema_to_jsdoc, ["--help"])

    assert result.exit_code == 0
    assert "PATH" in result.output
    assert "OUTPUT" in result.output


def test_converts_sample(tmp_path: Path) -> None:
    output = tmp_path / "out" / "sample.js"

    result = CliRunner().invoke(json_schema_to_jsdoc, [str(SCHEMAS / "sample.schema.json"), str(output)])

    assert result.exit_code == 0, result.output
    assert "Converted JSON schema to JSDoc file:" in result.output
    assert output.read_text() == (SCHEMAS / "sample.js").read_text()


def test_missing_input_file(tmp_path: Path) -> None:
    output = tmp_path / "out.js"

    result = CliRunner().invoke(json_schema_to_jsdoc, [str(tmp_path / "absent.json"), str(output)])

    assert result.exit_code != 0
    assert "does not exist" in result.output
    assert not output.exists()


def test_missing_arguments() -> None:
    result = CliRunner().invoke(json_schema_to_jsdoc, [])
    assert result.exit_code != 0
    assert "Missing argument" in result.output

    result = CliRunner().invoke(json_schema_to_jsdoc, [str(SCHEMAS / "sample.schema.json")])
    assert result.exit_code != 0
    assert "Missing argument" in result.output


def test_error_mode_refuses_overwrite(tmp_path: Path) -> None:
    output = tmp_path / "sample.js"
    output.write_text("keep me")

    result = CliRunner().invoke(
        json_schema_to_jsdoc,
        ["--mode", "error", str(SCHEMAS / "sample.schema.json"), str(output)],
    )

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert output.read_text() == "keep me"


def test_config_file(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"typedef_suffix": "Shape"}))
    output = tmp_path / "sample.js"

    result = CliRunner().invoke(
        json_schema_to_jsdoc,
        ["-c", str(config), str(SCHEMAS / "sample.schema.json"), str(output)],
    )

    assert result.exit_code == 0, result.output
    assert "/** @type {PersonShape} */ \nlet Person = {}; \n" in output.read_text()


def test_dump_dereferenced(tmp_path: Path) -> None:
    output = tmp_path / "sample.js"
    dumped = tmp_path / "sample.deref.schema.json"

    result = CliRunner().invoke(
        json_schema_to_jsdoc,
        ["--dump-dereferenced", str(dumped), str(SCHEMAS / "sample.schema.json"), str(output)],
    )

    assert result.exit_code == 0, result.output
    schema = json.loads(dumped.read_text())
    assert schema["properties"]["Location"]["properties"]["zip"]["description"] == "A zip code"
    assert "$ref" not in dumped.read_text()


def test_bad_reference_is_reported(tmp_path: Path) -> None:
    schema = tmp_path / "broken.schema.json"
    schema.write_text(json.dumps({"properties": {"A": {"$ref": "#/definitions/Nope"}}}))
    output = tmp_path / "broken.js"

    result = CliRunner().invoke(json_schema_to_jsdoc, [str(schema), str(output)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not output.exists()


def test_invalid_json_is_reported(tmp_path: Path) -> None:
    schema = tmp_path / "broken.schema.json"
    schema.write_text("{not json")

    result = CliRunner().invoke(json_schema_to_jsdoc, [str(schema), str(tmp_path / "broken.js")])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_verbose_logs_properties(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="json_schema_to_jsdoc")

    result = CliRunner().invoke(
        json_schema_to_jsdoc,
        ["-v", str(SCHEMAS / "sample.schema.json"), str(tmp_path / "sample.js")],
    )

    assert result.exit_code == 0, result.output
    assert "--location" in caplog.messages
    assert "----street" in caplog.messages


def test_error_mode_refusal_skips_dump(tmp_path: Path) -> None:
    output = tmp_path / "sample.js"
    output.write_text("keep me")
    dumped = tmp_path / "sample.deref.schema.json"

    result = CliRunner().invoke(
        json_schema_to_jsdoc,
        ["--mode", "error", "--dump-dereferenced", str(dumped), str(SCHEMAS / "sample.schema.json"), str(output)],
    )

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert output.read_text() == "keep me"
    assert not dumped.exists()
