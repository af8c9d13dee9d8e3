"""Tests for placing a layout into boxes, controls and connector lines."""

from __future__ import annotations

import pytest

from core.constants import BOX_H
from core.edit import toggle_visibility
from core.layout import layout_node
from core.scene import Hit, build_scene, hit_test
from core.tree import insert_child, new_root


def _kinds(scene):
    return [s.kind for s in scene.segments]


def test_root_only_scene() -> None:
    """A lone root is one box, one add control and no lines."""

    scene = build_scene(layout_node(new_root()))

    assert [b.node_id for b in scene.boxes] == ["root"]
    assert [(c.node_id, c.part) for c in scene.controls] == [("root", "add")]
    assert scene.segments == []

    box = scene.boxes[0]
    assert (box.x, box.y, box.width, box.height) == (0.0, 0.0, 8, BOX_H)
    assert box.text == "Start"


def test_two_children_lines(counter_ids) -> None:
    """Drop connector, a 20 rem spine, ticks at 0 and 14, one connector per child."""

    tree = insert_child(insert_child(new_root(), "root", counter_ids), "root", counter_ids)
    layout = layout_node(tree)
    scene = build_scene(layout)

    assert sorted(_kinds(scene)) == ["above", "above", "drop", "spine", "tick", "tick"]

    spine = next(s for s in scene.segments if s.kind == "spine")
    assert spine.x2 - spine.x1 == pytest.approx(20)
    center = layout.extent_width / 2
    assert (spine.x1 + spine.x2) / 2 == pytest.approx(center)

    ticks = [s.x1 - spine.x1 for s in scene.segments if s.kind == "tick"]
    assert ticks == pytest.approx([0, 14])

    children = [scene.box_for("n1"), scene.box_for("n2")]
    assert children[0].x < children[1].x
    assert children[0].y == children[1].y > scene.box_for("root").y


def test_toggle_control_for_parents(counter_ids) -> None:
    tree = insert_child(new_root(), "root", counter_ids)
    scene = build_scene(layout_node(tree))

    toggle = next(c for c in scene.controls if c.part == "toggle")
    root_box = scene.box_for("root")
    assert toggle.node_id == "root"
    assert toggle.active is True
    assert toggle.x + toggle.size <= root_box.x


def test_hidden_children_leave_scene(counter_ids) -> None:
    tree = insert_child(insert_child(new_root(), "root", counter_ids), "n1", counter_ids)

    shown = build_scene(layout_node(tree))
    hidden = build_scene(layout_node(toggle_visibility(tree, "n1")))

    assert hidden.box_for("n2") is None
    assert hidden.box_for("n1") is not None
    assert hidden.height < shown.height
    toggle = next(c for c in hidden.controls if c.node_id == "n1" and c.part == "toggle")
    assert toggle.active is False

    restored = build_scene(layout_node(toggle_visibility(toggle_visibility(tree, "n1"), "n1")))
    assert restored == shown


def test_origin_offsets_everything() -> None:
    base = build_scene(layout_node(new_root()))
    moved = build_scene(layout_node(new_root()), origin_x=2, origin_y=3)
    assert moved.boxes[0].x == base.boxes[0].x + 2
    assert moved.boxes[0].y == base.boxes[0].y + 3


def test_hit_test(counter_ids) -> None:
    tree = insert_child(new_root(), "root", counter_ids)
    scene = build_scene(layout_node(tree))

    box = scene.box_for("n1")
    assert hit_test(scene, box.x + 1, box.y + 1) == Hit("n1", "box")

    add = next(c for c in scene.controls if c.node_id == "root" and c.part == "add")
    assert hit_test(scene, add.x + add.size / 2, add.y + add.size / 2) == Hit("root", "add")

    toggle = next(c for c in scene.controls if c.part == "toggle")
    assert hit_test(scene, toggle.x + 0.1, toggle.y + 0.1) == Hit("root", "toggle")

    assert hit_test(scene, -5, -5) is None
