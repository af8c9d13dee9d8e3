'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from core.constants import (
    MIN_WIDTH,
    CHAR_WIDTH,
    PADDING,
    BOX_H,
    TRUNCATE_AT,
    ELLIPSIS,
    CHILD_SPACING,
    SPINE_PAD,
    CHILD_GAP,
    CONNECTOR_ABOVE_H,
    CONNECTOR_ABOVE_GAP,
    ADD_GAP,
    ADD_SIZE,
    CHILD_ROW_MARGIN,
    DROP_CONNECTOR_H,
    TICK_GAP,
    TOGGLE_SIZE,
    TOGGLE_GAP,
)
from core.tree import Node

__all__ = [
    "NodeLayout",
    "ChildRow",
    "display_text",
    "tooltip_text",
    "box_width",
    "spine_length",
    "tick_offsets",
    "layout_node",
]

# (node_id, live edit text) for the node currently being edited
EditBuffer = Tuple[str, str]


@dataclass(frozen=True)
class ChildRow:
    """
    Geometry of the row of children under a parent.

    spine_length  – horizontal spine, None for a single child
    tick_offsets  – x of each tick measured from the spine's left end
    child_offsets – x of each child's center relative to the parent center
    """
    spine_length: Optional[float]
    tick_offsets: Tuple[float, ...]
    child_offsets: Tuple[float, ...]
    children: Tuple["NodeLayout", ...]
    width: float
    height: float


@dataclass(frozen=True)
class NodeLayout:
    node_id: str
    depth: int
    display_text: str
    tooltip: Optional[str]
    width: float
    editing: bool
    connector_above: bool
    show_toggle: bool
    children_visible: bool
    child_row: Optional[ChildRow]
    header_width: float
    extent_width: float
    extent_height: float

    @property
    def box_offset(self) -> float:
        """Box left edge relative to the header's left edge."""
        return TOGGLE_SIZE + TOGGLE_GAP if self.show_toggle else 0.0

# ---------------------------------------------------------------------------

def display_text(label: str, truncate: bool) -> str:
    if not truncate or len(label) <= TRUNCATE_AT:
        return label
    return label[:TRUNCATE_AT] + ELLIPSIS

def tooltip_text(label: str, truncate: bool) -> Optional[str]:
    """Full label for hover, only when the display text was cut."""
    if truncate and len(label) > TRUNCATE_AT:
        return label
    return None

def box_width(text: str) -> float:
    return max(MIN_WIDTH, len(text) * CHAR_WIDTH + PADDING)

def spine_length(child_count: int) -> Optional[float]:
    if child_count < 2:
        return None
    return (child_count - 1) * CHILD_SPACING + SPINE_PAD

def tick_offsets(child_count: int) -> Tuple[float, ...]:
    if child_count < 2:
        return ()
    return tuple(index * CHILD_SPACING for index in range(child_count))

def _sizing_text(node: Node, truncate: bool, edit: Optional[EditBuffer]) -> str:
    if node.editing:
        if edit is not None and edit[0] == node.id:
            return edit[1]
        return node.label
    return display_text(node.label, truncate)

def _child_offsets(children: Tuple[NodeLayout, ...]) -> Tuple[Tuple[float, ...], float]:
    """Pack children left to right and center the group on zero."""
    total = sum(c.extent_width for c in children) + CHILD_GAP * (len(children) - 1)
    left = -total / 2
    offsets = []
    for child in children:
        offsets.append(left + child.extent_width / 2)
        left += child.extent_width + CHILD_GAP
    return tuple(offsets), total

def _layout_children(node: Node, depth: int, truncate: bool,
                     edit: Optional[EditBuffer]) -> Optional[ChildRow]:
    if node.is_leaf or not node.children_visible:
        return None

    children = tuple(
        layout_node(child, depth + 1, truncate, edit) for child in node.children
    )
    offsets, row_w = _child_offsets(children)
    spine = spine_length(len(children))

    height = CHILD_ROW_MARGIN + DROP_CONNECTOR_H
    if spine is not None:
        height += TICK_GAP
    height += max(c.extent_height for c in children)

    return ChildRow(
        spine_length=spine,
        tick_offsets=tick_offsets(len(children)),
        child_offsets=offsets,
        children=children,
        width=max(row_w, spine or 0.0),
        height=height,
    )

def layout_node(node: Node, depth: int = 0, truncate: bool = False,
                edit: Optional[EditBuffer] = None) -> NodeLayout:
    """
    Lay out `node` and its visible descendants.

    Pure: the same (node, depth, truncate, edit) always yields an equal
    NodeLayout. `edit` carries the live text of the node being edited so
    its box follows the typing rather than the committed label.
    """
    width = box_width(_sizing_text(node, truncate, edit))
    show_toggle = not node.is_leaf
    header_w = width + (TOGGLE_SIZE + TOGGLE_GAP if show_toggle else 0.0)

    child_row = _layout_children(node, depth, truncate, edit)

    height = BOX_H + ADD_GAP + ADD_SIZE
    if depth > 0:
        height += CONNECTOR_ABOVE_H + CONNECTOR_ABOVE_GAP
    if child_row is not None:
        height += child_row.height

    return NodeLayout(
        node_id=node.id,
        depth=depth,
        display_text=display_text(node.label, truncate),
        tooltip=tooltip_text(node.label, truncate),
        width=width,
        editing=node.editing,
        connector_above=depth > 0,
        show_toggle=show_toggle,
        children_visible=node.children_visible,
        child_row=child_row,
        header_width=header_w,
        extent_width=max(header_w, child_row.width if child_row else 0.0),
        extent_height=height,
    )
