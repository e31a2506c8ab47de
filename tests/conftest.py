"""Shared pytest fixtures for framesync tests."""

from pathlib import Path

import pytest

from framesync.core import ir
from framesync.core.manifest import ImportSettings


@pytest.fixture
def settings() -> ImportSettings:
    """Import settings with auto-layout enabled."""
    return ImportSettings(enable_auto_layout=True)


@pytest.fixture
def host() -> ir.RuntimeObject:
    """A bare runtime object to lay out."""
    return ir.RuntimeObject(name="Frame")


def build_screen() -> ir.RuntimeObject:
    """
    Build a small generated screen:

        Screen [Image]
          Header [Text]
          List [VerticalLayoutGroup]
            Item [Button]
    """
    item = ir.RuntimeObject(name="Item", components=[ir.Button(on_click=["Screen.open_item"])])
    list_obj = ir.RuntimeObject(
        name="List",
        components=[ir.VerticalLayoutGroup(spacing=4.0)],
        children=[item],
    )
    header = ir.RuntimeObject(name="Header", components=[ir.Text(text="Title", font_size=24)])
    return ir.RuntimeObject(
        name="Screen",
        components=[ir.Image(color="#202020FF")],
        children=[header, list_obj],
    )


@pytest.fixture
def screen() -> ir.RuntimeObject:
    """A freshly generated screen hierarchy."""
    return build_screen()


@pytest.fixture
def screen_factory():
    """Callable building independent copies of the generated screen."""
    return build_screen


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Directory for stored artifacts."""
    path = tmp_path / "screens"
    path.mkdir()
    return path
