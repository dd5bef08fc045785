"""Tests for the migration-gate command line."""

import io
import json

from migration_gate.cli import main


def test_valid_file(tmp_path, capsys):
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"cloudName": "acme", "apiKey": "k1", "apiSecret": "0123456789"}))

    assert main(["validate", str(path)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["valid"] is True
    assert output["request"]["apiSecretMasked"] == "****6789"
    assert "0123456789" not in json.dumps(output)


def test_invalid_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"apiKey": "k1", "apiSecret": "short"}'))

    assert main(["validate"]) == 1

    output = json.loads(capsys.readouterr().out)
    assert [(v["field"], v["error_type"]) for v in output["violations"]] == [
        ("cloudName", "required"),
        ("apiSecret", "min_length"),
    ]


def test_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert main(["validate", str(path)]) == 2


def test_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "validate" in capsys.readouterr().out


def test_missing_file(tmp_path, caplog):
    assert main(["validate", str(tmp_path / "nope.json")]) == 2
    assert "Could not read payload" in caplog.text


def test_directory_instead_of_file(tmp_path):
    assert main(["validate", str(tmp_path)]) == 2


def test_non_utf8_file(tmp_path, caplog):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"cloudName": "\xff"}')
    assert main(["validate", str(path)]) == 2
    assert "not valid UTF-8" in caplog.text
