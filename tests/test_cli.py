"""Tests for the tavsa command-line interface."""

import io

import pytest

from tavsa_editor.cli import main
from tavsa_editor.config import CONFIG_ENV_VAR


@pytest.fixture
def db_args(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return ["--db", str(tmp_path / "tavsa.db")]


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: tavsa" in capsys.readouterr().out


def test_add_and_list(db_args, capsys):
    assert main(db_args + ["add", "auto", "katrna", "to go"]) == 0
    assert "Added [1] katrna (verb): to go" in capsys.readouterr().out

    assert main(db_args + ["list"]) == 0
    assert "katrna: to go" in capsys.readouterr().out


def test_list_empty(db_args, capsys):
    assert main(db_args + ["list"]) == 0
    assert "Dictionary is empty." in capsys.readouterr().out


def test_add_invalid_type(db_args, capsys):
    assert main(db_args + ["add", "auto", "zint", "thing"]) == 1
    assert "[ERROR] Invalid word type" in capsys.readouterr().err


def test_import_from_file(db_args, tmp_path, capsys):
    batch = tmp_path / "batch.txt"
    batch.write_text("house=tokurna\nbird=amirna\n")
    assert main(db_args + ["import", "verb", str(batch)]) == 0
    assert "Imported 2 word(s), ids 1-2." in capsys.readouterr().out


def test_import_from_stdin(db_args, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("house=tokurna"))
    assert main(db_args + ["import", "verb"]) == 0
    assert "ids 1-1" in capsys.readouterr().out


def test_import_malformed(db_args, tmp_path, capsys):
    batch = tmp_path / "batch.txt"
    batch.write_text("house=tokurna birdamirna")
    assert main(db_args + ["import", "verb", str(batch)]) == 1
    assert "Malformed token #2" in capsys.readouterr().err

    assert main(db_args + ["list"]) == 0
    assert "Dictionary is empty." in capsys.readouterr().out


def test_import_missing_file(db_args, tmp_path, capsys):
    assert main(db_args + ["import", "verb", str(tmp_path / "nope.txt")]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_import_undecodable_file(db_args, tmp_path, capsys):
    batch = tmp_path / "batch.txt"
    batch.write_bytes(b"\xff\xfe=\x80")
    assert main(db_args + ["import", "verb", str(batch)]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_delete(db_args, capsys):
    main(db_args + ["add", "noun", "zint", "thing"])
    assert main(db_args + ["delete", "1"]) == 0
    assert main(db_args + ["delete", "1"]) == 0
    out = capsys.readouterr().out
    assert "Deleted word 1." in out
    assert "No word with id 1." in out


def test_analyze(db_args, capsys):
    assert main(db_args + ["analyze", "katrna"]) == 0
    out = capsys.readouterr().out
    assert "lexeme:  kat" in out
    assert "subject: tr" in out
    assert "ci:      ka" in out


def test_analyze_no_marker(db_args, capsys):
    assert main(db_args + ["analyze", "zint"]) == 0
    assert "zint: no decomposition" in capsys.readouterr().out


def test_analyze_noun(db_args, capsys):
    assert main(db_args + ["analyze", "katrna", "--type", "noun"]) == 1
    assert "not implemented" in capsys.readouterr().err


def test_config_file(tmp_path, monkeypatch, capsys):
    db_path = tmp_path / "from-config.db"
    config = tmp_path / "tavsa.yaml"
    config.write_text(f"database: {db_path}\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
    assert main(["add", "noun", "zint", "thing"]) == 0
    assert db_path.exists()


def test_bad_config(tmp_path, capsys):
    config = tmp_path / "tavsa.yaml"
    config.write_text("port: 3000\n")
    assert main(["--config", str(config), "list"]) == 1
    assert "Unknown config keys: port" in capsys.readouterr().err
