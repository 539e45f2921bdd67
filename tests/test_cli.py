"""
Tests for the command line entry point.
"""
import json

import pytest

import cli
import config


@pytest.fixture
def state_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setattr(cli, "STATE_FILE", str(tmp_path / "data" / "state.pkl"))
    return tmp_path


@pytest.fixture
def picks_file(tmp_path, chalk_picks):
    path = tmp_path / "picks.json"
    path.write_text(json.dumps({"picks": chalk_picks, "tieBreaker": 150}))
    return path


def test_no_tournament_loaded(state_dir, capsys):
    assert cli.main(["show"]) == 1
    assert "No tournament loaded" in capsys.readouterr().out


def test_load_then_validate(state_dir, tournament_file, picks_file, capsys):
    assert cli.main(["load-tournament", "--file", str(tournament_file)]) == 0
    assert cli.main(["validate", "--picks", str(picks_file)]) == 0
    assert "valid and ready to submit" in capsys.readouterr().out


def test_validate_failure_exit_code(state_dir, tournament_file, picks_file, capsys):
    cli.main(["load-tournament", "--file", str(tournament_file)])
    assert cli.main(["validate", "--picks", str(picks_file), "--tie-breaker", "5"]) == 1
    assert "Tie breaker must be between 50 and 500" in capsys.readouterr().out


def test_malformed_tournament_reported(state_dir, tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"regions": []}))
    assert cli.main(["load-tournament", "--file", str(path)]) == 1
    assert "ERROR: Expected 4 regions" in capsys.readouterr().out


def test_pick_updates_file(state_dir, tournament_file, picks_file):
    cli.main(["load-tournament", "--file", str(tournament_file)])
    assert cli.main(["pick", "--picks", str(picks_file), "--game", "top-left-r64-1", "--team", "east-16"]) == 0
    saved = json.loads(picks_file.read_text())
    assert saved["picks"]["top-left-r64-1"] == "east-16"
    assert "championship" not in saved["picks"]
    assert saved["tieBreaker"] == 150


def test_export_csv(state_dir, tournament_file, picks_file, tmp_path):
    cli.main(["load-tournament", "--file", str(tournament_file)])
    out = tmp_path / "export.csv"
    assert cli.main(["export", "--picks", str(picks_file), "--format", "csv", "--output", str(out)]) == 0
    assert len(out.read_text().splitlines()) == 64
