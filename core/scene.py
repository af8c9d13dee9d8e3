from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.constants import (
    BOX_H,
    CONNECTOR_ABOVE_H,
    CONNECTOR_ABOVE_GAP,
    ADD_GAP,
    ADD_SIZE,
    CHILD_ROW_MARGIN,
    DROP_CONNECTOR_H,
    TICK_H,
    TICK_GAP,
    TOGGLE_SIZE,
)
from core.layout import NodeLayout

__all__ = ["Box", "Control", "Segment", "Scene", "Hit", "build_scene", "hit_test"]

# Hit parts
PART_BOX = "box"
PART_TOGGLE = "toggle"
PART_ADD = "add"


@dataclass(frozen=True)
class Box:
    node_id: str
    x: float
    y: float
    width: float
    height: float
    text: str
    tooltip: Optional[str]
    editing: bool
    depth: int

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


@dataclass(frozen=True)
class Control:
    """A round button next to a box: the eye toggle or the add-child plus."""
    node_id: str
    part: str
    x: float
    y: float
    size: float
    active: bool = True

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.size and self.y <= py < self.y + self.size


@dataclass(frozen=True)
class Segment:
    kind: str          # "above", "drop", "spine" or "tick"
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass
class Scene:
    """Absolute draw list for one layout pass, in rem."""
    boxes: List[Box] = field(default_factory=list)
    controls: List[Control] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0

    def box_for(self, node_id: str) -> Optional[Box]:
        return next((b for b in self.boxes if b.node_id == node_id), None)


@dataclass(frozen=True)
class Hit:
    node_id: str
    part: str

# ---------------------------------------------------------------------------

def _place(nl: NodeLayout, cx: float, top: float, scene: Scene) -> None:
    """Place `nl` with its column centered on cx and its top edge at `top`."""
    y = top

    if nl.connector_above:
        scene.segments.append(Segment("above", cx, y, cx, y + CONNECTOR_ABOVE_H))
        y += CONNECTOR_ABOVE_H + CONNECTOR_ABOVE_GAP

    header_left = cx - nl.header_width / 2
    if nl.show_toggle:
        scene.controls.append(Control(
            node_id=nl.node_id,
            part=PART_TOGGLE,
            x=header_left,
            y=y + (BOX_H - TOGGLE_SIZE) / 2,
            size=TOGGLE_SIZE,
            active=nl.children_visible,
        ))

    scene.boxes.append(Box(
        node_id=nl.node_id,
        x=header_left + nl.box_offset,
        y=y,
        width=nl.width,
        height=BOX_H,
        text=nl.display_text,
        tooltip=nl.tooltip,
        editing=nl.editing,
        depth=nl.depth,
    ))
    y += BOX_H + ADD_GAP

    scene.controls.append(Control(nl.node_id, PART_ADD, cx - ADD_SIZE / 2, y, ADD_SIZE))
    y += ADD_SIZE

    row = nl.child_row
    if row is None:
        return

    y += CHILD_ROW_MARGIN
    scene.segments.append(Segment("drop", cx, y, cx, y + DROP_CONNECTOR_H))
    y += DROP_CONNECTOR_H

    if row.spine_length is not None:
        spine_left = cx - row.spine_length / 2
        scene.segments.append(Segment("spine", spine_left, y, spine_left + row.spine_length, y))
        for offset in row.tick_offsets:
            tx = spine_left + offset
            scene.segments.append(Segment("tick", tx, y, tx, y + TICK_H))
        y += TICK_GAP

    for child, offset in zip(row.children, row.child_offsets):
        _place(child, cx + offset, y, scene)

def build_scene(layout: NodeLayout, origin_x: float = 0.0, origin_y: float = 0.0) -> Scene:
    """
    Turn a layout tree into absolute boxes, controls and line segments.
    The whole flowchart's bounding box starts at (origin_x, origin_y).
    """
    scene = Scene(width=layout.extent_width, height=layout.extent_height)
    _place(layout, origin_x + layout.extent_width / 2, origin_y, scene)
    return scene

def hit_test(scene: Scene, x: float, y: float) -> Optional[Hit]:
    """Find what sits under (x, y). Controls win over boxes."""
    for control in scene.controls:
        if control.contains(x, y):
            return Hit(control.node_id, control.part)
    for box in scene.boxes:
        if box.contains(x, y):
            return Hit(box.node_id, PART_BOX)
    return None
