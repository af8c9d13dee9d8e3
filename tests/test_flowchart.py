"""Tests for FlowchartController, the owner of the flowchart state."""

from __future__ import annotations

import pytest

from core.flowchart import FlowchartController
from core.layout import box_width
from core.tree import iter_nodes


@pytest.fixture
def controller(counter_ids) -> FlowchartController:
    return FlowchartController(id_factory=counter_ids)


def _editing_ids(ctl: FlowchartController):
    return [n.id for n, _d in iter_nodes(ctl.tree) if n.editing]


def test_add_child_returns_new_id(controller) -> None:
    assert controller.add_child("root") == "n1"
    assert controller.add_child("root") == "n2"
    assert [c.label for c in controller.tree.children] == ["Button 1", "Button 2"]


def test_add_child_missing_parent(controller) -> None:
    before = controller.tree
    assert controller.add_child("ghost") is None
    assert controller.tree is before


def test_edit_cycle_commit(controller) -> None:
    """Idle -> Editing -> commit -> Idle with the typed label."""

    child = controller.add_child("root")
    assert controller.begin_edit(child) is True
    assert controller.editing_id == child
    assert controller.edit_text == "Button 1"

    controller.set_edit_text("  Check input  ")
    assert controller.commit_edit() is True

    node = controller.node(child)
    assert node.label == "Check input"
    assert node.editing is False
    assert controller.editing_id is None
    assert controller.edit_text == ""


def test_whitespace_commit_reverts(controller) -> None:
    child = controller.add_child("root")
    controller.begin_edit(child)
    controller.commit_edit(child, "  ")
    assert controller.node(child).label == "Button 1"
    assert controller.node(child).editing is False


def test_cancel_restores_after_typing(controller) -> None:
    controller.begin_edit("root")
    controller.set_edit_text("Something else entirely")
    controller.cancel_edit()

    assert controller.node("root").label == "Start"
    assert controller.node("root").editing is False
    assert controller.is_editing is False


def test_single_editor(controller) -> None:
    """Starting a second edit commits the first one."""

    a = controller.add_child("root")
    b = controller.add_child("root")

    controller.begin_edit(a)
    controller.set_edit_text("First")
    controller.begin_edit(b)

    assert _editing_ids(controller) == [b]
    assert controller.node(a).label == "First"
    assert controller.editing_id == b
    assert controller.edit_text == "Button 2"


def test_begin_edit_same_node_twice(controller) -> None:
    controller.begin_edit("root")
    controller.set_edit_text("typed")
    assert controller.begin_edit("root") is False
    assert controller.edit_text == "typed"


def test_edit_buffer_drives_width(controller) -> None:
    controller.begin_edit("root")
    controller.set_edit_text("A label that keeps growing")
    assert controller.layout().width == pytest.approx(box_width("A label that keeps growing"))

    controller.cancel_edit()
    assert controller.layout().width == box_width("Start")


def test_set_edit_text_without_edit(controller) -> None:
    assert controller.set_edit_text("x") is False
    assert controller.edit_text == ""


def test_missing_ids_never_corrupt(controller) -> None:
    controller.add_child("root")
    before = controller.tree

    assert controller.begin_edit("ghost") is False
    assert controller.commit_edit("ghost", "x") is False
    assert controller.cancel_edit("ghost") is False
    assert controller.toggle_visibility("ghost") is False
    assert controller.commit_edit() is False
    assert controller.tree is before


def test_toggle_visibility(controller) -> None:
    controller.add_child("root")
    assert controller.toggle_visibility("root") is True
    assert controller.layout().child_row is None
    assert len(controller.tree.children) == 1

    controller.toggle_visibility("root")
    assert controller.layout().child_row is not None


def test_truncate_mode(controller) -> None:
    assert controller.set_truncate_mode(False) is False
    assert controller.set_truncate_mode(True) is True
    assert controller.truncate is True
    assert controller.toggle_truncate() is True
    assert controller.truncate is False


def test_truncate_applies_to_layout(controller) -> None:
    label = "This label is well over twenty characters"
    controller.begin_edit("root")
    controller.commit_edit("root", label)

    controller.set_truncate_mode(True)
    layout = controller.layout()
    assert layout.display_text == label[:20] + "..."
    assert layout.tooltip == label


def test_scene_is_rederived(controller) -> None:
    first = controller.scene()
    controller.add_child("root")
    second = controller.scene()

    assert len(first.boxes) == 1
    assert len(second.boxes) == 2
    assert controller.scene() == second


def test_events_are_logged(controller, verbose_log) -> None:
    controller.add_child("root")
    controller.toggle_visibility("root")
    controller.set_truncate_mode(True)

    text = "\n".join(verbose_log.messages())
    assert "Added child 'n1' under 'root'" in text
    assert "Children of 'root' hidden" in text
    assert "Truncate long text: on" in text
    assert "[flowchart.py]" in text
