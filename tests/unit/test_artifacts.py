"""Tests for artifact storage."""

import json
from pathlib import Path

import pytest

from framesync.core.artifacts import (
    load_artifact,
    load_design,
    object_from_dict,
    save_artifact,
)
from framesync.core.errors import ArtifactError
from framesync.core.ir import Button, LayoutMode, Text, VerticalLayoutGroup


class TestArtifacts:
    def test_saved_hierarchy_loads_back(self, screen, artifacts_dir: Path):
        path = artifacts_dir / "Screen.json"

        save_artifact(screen, path)
        loaded = load_artifact(path)

        assert loaded.name == "Screen"
        assert [c.name for c in loaded.children] == ["Header", "List"]
        header, list_obj = loaded.children
        assert header.get_component(Text).font_size == 24
        assert list_obj.get_component(VerticalLayoutGroup).spacing == 4.0
        assert list_obj.children[0].get_component(Button).on_click == ["Screen.open_item"]
        assert list_obj.children[0].parent is list_obj

    def test_unknown_component_kind(self):
        with pytest.raises(ArtifactError) as exc_info:
            object_from_dict({"name": "Odd", "components": [{"kind": "Teleporter"}]})

        assert exc_info.value.node == "Odd"

    def test_invalid_component_fields(self):
        with pytest.raises(ArtifactError):
            object_from_dict({"name": "X", "components": [{"kind": "Text", "font_size": "big"}]})

    def test_missing_name(self):
        with pytest.raises(ArtifactError):
            object_from_dict({"components": []})

    def test_invalid_json(self, artifacts_dir: Path):
        path = artifacts_dir / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ArtifactError):
            load_artifact(path)

    def test_load_design_document(self, tmp_path: Path):
        path = tmp_path / "design.json"
        path.write_text(
            json.dumps(
                {
                    "id": "1:2",
                    "name": "Menu",
                    "layoutMode": "VERTICAL",
                    "children": [{"id": "1:3", "name": "Play", "type": "INSTANCE"}],
                }
            )
        )

        node = load_design(path)

        assert node.layout_mode == LayoutMode.VERTICAL
        assert node.children[0].name == "Play"
