from __future__ import annotations

from typing import Optional

from core.tree import Node, find_node, update

__all__ = [
    "clean_label",
    "begin_edit",
    "commit_edit",
    "cancel_edit",
    "toggle_visibility",
]

def clean_label(text: str) -> Optional[str]:
    """Trimmed label, or None if nothing but whitespace is left."""
    text = (text or "").strip()
    return text or None

def begin_edit(tree: Node, node_id: str) -> Node:
    return update(tree, node_id, {"editing": True})

def commit_edit(tree: Node, node_id: str, text: str) -> Node:
    """
    Finish an edit. A non-empty trimmed text becomes the label; an empty
    one is discarded and the previous label stays. Either way editing ends.
    """
    label = clean_label(text)
    if label is None:
        return update(tree, node_id, {"editing": False})
    return update(tree, node_id, {"label": label, "editing": False})

def cancel_edit(tree: Node, node_id: str) -> Node:
    # The label is only written on commit, so dropping the flag restores it.
    return update(tree, node_id, {"editing": False})

def toggle_visibility(tree: Node, node_id: str) -> Node:
    node = find_node(tree, node_id)
    if node is None:
        return tree
    return update(tree, node_id, {"children_visible": not node.children_visible})
