'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Callable, Optional

from core.log import Log
from core.tree import Node, new_root, find_node, insert_child
from core.edit import begin_edit, commit_edit, cancel_edit, toggle_visibility
from core.layout import NodeLayout, layout_node
from core.scene import Scene, build_scene

__all__ = ["FlowchartController"]

class FlowchartController:
    """
    Single owner of the flowchart state: the current tree, the truncate flag
    and the one active edit (if any). Every event replaces the tree with a
    new one; layout() and scene() derive geometry from scratch each call.

    Mutators return True when the state changed.
    """

    def __init__(self, root: Optional[Node] = None, truncate: bool = False,
                 id_factory: Optional[Callable[[], str]] = None):
        self.tree: Node = root if root is not None else new_root()
        self.truncate: bool = bool(truncate)
        self.editing_id: Optional[str] = None
        self.edit_text: str = ""
        self._id_factory = id_factory

    # --- queries ---
    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def node(self, node_id: str) -> Optional[Node]:
        return find_node(self.tree, node_id)

    # --- editing ---
    def begin_edit(self, node_id: str) -> bool:
        node = self.node(node_id)
        if node is None:
            return False
        if self.editing_id == node_id:
            return False

        # Only one editor at a time: finish the current one first
        if self.editing_id is not None:
            self.commit_edit()

        self.tree = begin_edit(self.tree, node_id)
        self.editing_id = node_id
        self.edit_text = node.label
        Log.debug(f"Begin edit of '{node_id}'", 1)
        return True

    def set_edit_text(self, text: str) -> bool:
        """Update the live edit buffer; only the editing box's width follows it."""
        if self.editing_id is None:
            return False
        self.edit_text = text
        return True

    def commit_edit(self, node_id: Optional[str] = None, text: Optional[str] = None) -> bool:
        node_id = node_id or self.editing_id
        if node_id is None or self.node(node_id) is None:
            return False
        if text is None:
            text = self.edit_text if node_id == self.editing_id else ""

        before = self.tree
        self.tree = commit_edit(self.tree, node_id, text)
        self._end_edit(node_id)
        Log.debug(f"Commit edit of '{node_id}': {self.node(node_id).label!r}", 1)
        return self.tree != before

    def cancel_edit(self, node_id: Optional[str] = None) -> bool:
        node_id = node_id or self.editing_id
        if node_id is None or self.node(node_id) is None:
            return False

        before = self.tree
        self.tree = cancel_edit(self.tree, node_id)
        self._end_edit(node_id)
        Log.debug(f"Cancel edit of '{node_id}'", 1)
        return self.tree != before

    def _end_edit(self, node_id: str) -> None:
        if self.editing_id == node_id:
            self.editing_id = None
            self.edit_text = ""

    # --- structure / visibility ---
    def add_child(self, parent_id: str) -> Optional[str]:
        """Append a new child under parent_id. Returns the new id, or None."""
        before = self.tree
        self.tree = insert_child(self.tree, parent_id, self._id_factory)
        if self.tree is before:
            Log.debug(f"Add child ignored; no node '{parent_id}'", 2)
            return None

        new_id = self.node(parent_id).children[-1].id
        Log.debug(f"Added child '{new_id}' under '{parent_id}'", 1)
        return new_id

    def toggle_visibility(self, node_id: str) -> bool:
        before = self.tree
        self.tree = toggle_visibility(self.tree, node_id)
        if self.tree is before:
            return False
        shown = self.node(node_id).children_visible
        Log.debug(f"Children of '{node_id}' {'shown' if shown else 'hidden'}", 1)
        return True

    def set_truncate_mode(self, truncate: bool) -> bool:
        truncate = bool(truncate)
        if truncate == self.truncate:
            return False
        self.truncate = truncate
        Log.debug(f"Truncate long text: {'on' if truncate else 'off'}", 1)
        return True

    def toggle_truncate(self) -> bool:
        return self.set_truncate_mode(not self.truncate)

    # --- geometry ---
    def layout(self) -> NodeLayout:
        edit = (self.editing_id, self.edit_text) if self.editing_id else None
        return layout_node(self.tree, 0, self.truncate, edit)

    def scene(self, origin_x: float = 0.0, origin_y: float = 0.0) -> Scene:
        return build_scene(self.layout(), origin_x, origin_y)
