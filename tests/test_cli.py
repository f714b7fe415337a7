"""Tests for the console runner."""

import pytest
from click.testing import CliRunner

from wanderer.cli import main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("WANDERER_LOG_FILE", str(tmp_path / "wanderer.log"))
    return CliRunner()


def test_default_run(runner):
    result = runner.invoke(main, ["--world", "simple", "--strategy", "last", "--turns", "2"])
    assert result.exit_code == 0, result.output
    assert "Turn 2" in result.output
    assert "Skip turn" in result.output
    assert "No turns left" in result.output


def test_scripted_run_reaches_goal(runner):
    result = runner.invoke(
        main,
        [
            "--world", "simple",
            "--strategy", "scripted",
            "--script", "Move north",
            "--script", "Move east",
            "--goal", "Room 3",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Room 2 -> Room 3" in result.output
    assert "goal has been reached" in result.output


def test_interactive_quit(runner):
    result = runner.invoke(
        main, ["--world", "simple", "--strategy", "interactive"], input="1\nq\n"
    )
    assert result.exit_code == 0, result.output
    assert "1. Move north" in result.output
    assert "Room 1 -> Room 2" in result.output
    assert "Goodbye!" in result.output


def test_random_run_with_seed(runner):
    args = ["--world", "dungeon", "--strategy", "random", "--seed", "4", "--turns", "5"]
    first = runner.invoke(main, args)
    second = runner.invoke(main, args)
    assert first.exit_code == 0, first.output
    assert first.output == second.output


def test_unknown_world(runner):
    result = runner.invoke(main, ["--world", "atlantis"])
    assert result.exit_code != 0
    assert "atlantis" in result.output


def test_unknown_goal(runner):
    result = runner.invoke(main, ["--world", "simple", "--goal", "Moon"])
    assert result.exit_code != 0
    assert "Moon" in result.output


def test_missing_world_file(runner, tmp_path):
    result = runner.invoke(main, ["--world", str(tmp_path / "nope.json")])
    assert result.exit_code == 1
    assert "nope.json" in result.output
    assert not isinstance(result.exception, OSError)


def test_malformed_world_file(runner, tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]")
    result = runner.invoke(main, ["--world", str(path)])
    assert result.exit_code == 1
    assert "JSON object" in result.output
