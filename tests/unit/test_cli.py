"""Tests for CLI commands."""

import json
import tomllib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from framesync._version import get_version
from framesync.cli import app
from framesync.core.artifacts import load_artifact, save_artifact
from framesync.core.ir import Text
from framesync.reconcile import find_child


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def design_file(tmp_path: Path) -> Path:
    path = tmp_path / "menu.json"
    path.write_text(
        json.dumps(
            {
                "name": "Menu",
                "type": "FRAME",
                "layoutMode": "VERTICAL",
                "overflowDirection": "VERTICAL_SCROLLING",
                "clipsContent": True,
                "children": [
                    {"name": "Play", "type": "INSTANCE"},
                    {"name": "Quit", "type": "INSTANCE"},
                ],
            }
        )
    )
    return path


def test_version(cli_runner):
    result = cli_runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "framesync" in result.stdout


def test_version_matches_pyproject(cli_runner):
    pyproject = Path(__file__).parents[2] / "pyproject.toml"
    with pyproject.open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]

    result = cli_runner.invoke(app, ["--version"])

    assert get_version() == expected
    assert expected in result.stdout


def test_layout_prints_tree(cli_runner, design_file, tmp_path):
    result = cli_runner.invoke(app, ["layout", str(design_file), "--project", str(tmp_path)])

    assert result.exit_code == 0
    assert "Menu [RectTransform, RectMask2D, ScrollRect]" in result.stdout
    assert "Menu_ScrollContent [RectTransform, ContentSizeFitter, VerticalLayoutGroup]" in result.stdout
    assert "    Play [RectTransform]" in result.stdout


def test_layout_respects_manifest(cli_runner, design_file, tmp_path):
    (tmp_path / "framesync.toml").write_text("[import]\nenable_auto_layout = false\n")

    result = cli_runner.invoke(app, ["layout", str(design_file), "--project", str(tmp_path)])

    assert result.exit_code == 0
    assert "VerticalLayoutGroup" not in result.stdout


def test_layout_writes_artifact(cli_runner, design_file, tmp_path):
    output = tmp_path / "out" / "Menu.json"

    result = cli_runner.invoke(
        app, ["layout", str(design_file), "--project", str(tmp_path), "-o", str(output)]
    )

    assert result.exit_code == 0
    assert load_artifact(output).name == "Menu"


def test_merge_preserves_customizations(cli_runner, screen_factory, tmp_path):
    old = screen_factory()
    find_child(old, "Header").get_component(Text).text = "Hand edited"
    old_path = tmp_path / "old.json"
    new_path = tmp_path / "new.json"
    out_path = tmp_path / "merged.json"
    save_artifact(old, old_path)
    save_artifact(screen_factory(), new_path)

    result = cli_runner.invoke(
        app,
        ["merge", str(old_path), str(new_path), "--project", str(tmp_path), "-o", str(out_path)],
    )

    assert result.exit_code == 0
    assert "fields_written: 1" in result.stdout
    merged = load_artifact(out_path)
    assert find_child(merged, "Header").get_component(Text).text == "Hand edited"


def test_merge_without_matching_root_fails(cli_runner, screen_factory, tmp_path):
    old = screen_factory()
    old.name = "Other"
    old_path = tmp_path / "old.json"
    new_path = tmp_path / "new.json"
    save_artifact(old, old_path)
    save_artifact(screen_factory(), new_path)

    result = cli_runner.invoke(
        app, ["merge", str(old_path), str(new_path), "--project", str(tmp_path)]
    )

    assert result.exit_code == 1


def test_missing_design_file(cli_runner, tmp_path):
    result = cli_runner.invoke(
        app, ["layout", str(tmp_path / "nope.json"), "--project", str(tmp_path)]
    )

    assert result.exit_code == 1


def test_example_project_layout(cli_runner):
    project = Path(__file__).parents[2] / "examples" / "main_menu"

    result = cli_runner.invoke(
        app, ["layout", str(project / "main_menu.json"), "--project", str(project)]
    )

    assert result.exit_code == 0
    assert "MainMenu [RectTransform, VerticalLayoutGroup]" in result.stdout
    assert "Levels [RectTransform, RectMask2D, ScrollRect]" in result.stdout
    assert "Levels_ScrollContent [RectTransform, ContentSizeFitter, GridLayoutGroup]" in result.stdout
