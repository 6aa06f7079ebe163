import json

from typer.testing import CliRunner

from gedcom_tree.cli import app

runner = CliRunner()


def test_layout_prints_json(family_path):
    result = runner.invoke(app, ["layout", str(family_path)])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["summary"] == "7 individuals | 8 connections"
    assert len(data["nodes"]) == 7


def test_layout_writes_file(family_path, tmp_path):
    out = tmp_path / "layout.json"
    result = runner.invoke(app, ["layout", str(family_path), "--out", str(out), "--pretty"])

    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["generations"]["@I6@"] == 2


def test_layout_missing_file_fails(tmp_path):
    result = runner.invoke(app, ["layout", str(tmp_path / "missing.ged")])
    assert result.exit_code != 0


def test_stats(family_path):
    result = runner.invoke(app, ["stats", str(family_path)])

    assert result.exit_code == 0, result.output
    assert "GEDCOM Statistics" in result.stdout
    assert "Individuals" in result.stdout
    assert "7 individuals | 8 connections" in result.stdout


def test_search_lists_matches(family_path):
    result = runner.invoke(app, ["search", str(family_path), "smith"])

    assert result.exit_code == 0, result.output
    assert "@I1@" in result.stdout
    assert "@I6@" in result.stdout
    assert "@I2@" not in result.stdout


def test_search_without_matches_exits_nonzero(family_path):
    result = runner.invoke(app, ["search", str(family_path), "zzz"])

    assert result.exit_code == 1
    assert "No individuals match" in result.stdout
