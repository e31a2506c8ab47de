"""Tests for runtime objects and their components."""

import pytest

from framesync.core.errors import ComponentConflictError, FramesyncError
from framesync.core.ir import (
    CanvasGroup,
    GridLayoutGroup,
    HorizontalLayoutGroup,
    Image,
    LayoutGroup,
    RectTransform,
    RuntimeObject,
    ScrollRect,
    Text,
    VerticalLayoutGroup,
)


class TestSingleInstanceComponents:
    def test_second_rect_transform_rejected(self, host):
        with pytest.raises(ComponentConflictError) as exc_info:
            host.add_component(RectTransform)

        assert exc_info.value.node == "Frame"

    @pytest.mark.parametrize("kind", [Image, Text, ScrollRect])
    def test_second_instance_rejected(self, host, kind):
        host.add_component(kind)

        with pytest.raises(ComponentConflictError):
            host.add_component(kind)

        assert len(host.get_components(kind)) == 1

    def test_layout_groups_exclude_each_other(self, host):
        host.add_component(VerticalLayoutGroup)

        with pytest.raises(ComponentConflictError):
            host.add_component("HorizontalLayoutGroup")
        with pytest.raises(ComponentConflictError):
            host.add_component(GridLayoutGroup())

        assert [type(g) for g in host.get_components(LayoutGroup)] == [VerticalLayoutGroup]

    def test_conflicting_component_reports_blocker(self, host):
        group = host.add_component(HorizontalLayoutGroup)

        assert host.conflicting_component(GridLayoutGroup) is group
        assert host.conflicting_component(CanvasGroup) is None

    def test_repeatable_components_allowed(self, host):
        host.add_component(CanvasGroup(alpha=0.5))
        host.add_component(CanvasGroup(alpha=0.25))

        assert [g.alpha for g in host.get_components(CanvasGroup)] == [0.5, 0.25]

    def test_exclusive_base(self):
        assert GridLayoutGroup.exclusive_base() is LayoutGroup
        assert Image.exclusive_base() is Image
        assert CanvasGroup.exclusive_base() is None


class TestRectTransform:
    def test_created_on_construction(self):
        obj = RuntimeObject(name="Panel")

        assert isinstance(obj.components[0], RectTransform)

    def test_missing_after_destroy(self):
        obj = RuntimeObject(name="Panel")
        obj.destroy()

        with pytest.raises(FramesyncError):
            obj.rect_transform
