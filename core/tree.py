from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from core.constants import ROOT_ID, ROOT_LABEL, CHILD_LABEL_FMT

__all__ = [
    "Node",
    "IdCollisionError",
    "new_root",
    "update",
    "insert_child",
    "find_node",
    "iter_nodes",
    "node_ids",
    "path_to",
    "parent_of",
    "count_nodes",
]

# Fields a patch may touch. Anything else would change identity or shape.
PATCHABLE = frozenset({"label", "editing", "children_visible"})

# Retries before giving up on a fresh id
_MAX_ID_ATTEMPTS = 16


@dataclass(slots=True, frozen=True)
class Node:
    """
    One box in the flowchart.

    • id               – opaque, unique, never reused
    • label            – display text
    • children         – ordered children, left to right in creation order
    • editing          – label is being edited
    • children_visible – child subtree is drawn (does not change the shape)
    """
    id: str
    label: str
    children: Tuple["Node", ...] = ()
    editing: bool = False
    children_visible: bool = True

    @property
    def is_leaf(self) -> bool:
        return not self.children


class IdCollisionError(RuntimeError):
    """A freshly generated node id already exists in the tree."""


def new_root(label: str = ROOT_LABEL) -> Node:
    return Node(id=ROOT_ID, label=label)

# ---------- traversal ----------

def iter_nodes(tree: Node, depth: int = 0) -> Iterator[Tuple[Node, int]]:
    """Pre-order walk yielding (node, depth)."""
    yield tree, depth
    for child in tree.children:
        yield from iter_nodes(child, depth + 1)

def node_ids(tree: Node) -> Set[str]:
    return {node.id for node, _depth in iter_nodes(tree)}

def count_nodes(tree: Node) -> int:
    return sum(1 for _ in iter_nodes(tree))

def find_node(tree: Node, node_id: str) -> Optional[Node]:
    """Depth-first search for node_id. Returns None if absent."""
    if tree.id == node_id:
        return tree
    for child in tree.children:
        found = find_node(child, node_id)
        if found is not None:
            return found
    return None

def path_to(tree: Node, node_id: str) -> List[Node]:
    """Nodes from root down to node_id inclusive; empty if absent."""
    if tree.id == node_id:
        return [tree]
    for child in tree.children:
        sub = path_to(child, node_id)
        if sub:
            return [tree] + sub
    return []

def parent_of(tree: Node, node_id: str) -> Optional[Node]:
    path = path_to(tree, node_id)
    return path[-2] if len(path) > 1 else None

# ---------- path-copying rebuild ----------

def _rebuild(node: Node, node_id: str, transform: Callable[[Node], Node]) -> Node:
    """
    Apply transform to the node with node_id and copy only its ancestors.
    Returns `node` itself when node_id is not in this subtree.
    """
    if node.id == node_id:
        return transform(node)

    for i, child in enumerate(node.children):
        new_child = _rebuild(child, node_id, transform)
        if new_child is not child:
            children = node.children[:i] + (new_child,) + node.children[i + 1:]
            return replace(node, children=children)

    return node

def update(tree: Node, node_id: str, patch: Dict[str, Any]) -> Node:
    """
    Shallow-merge `patch` into the node with node_id.

    A missing id leaves the tree untouched. Only label, editing and
    children_visible may be patched; update never changes the tree shape.
    """
    bad = set(patch) - PATCHABLE
    if bad:
        raise ValueError(f"Cannot patch node fields: {', '.join(sorted(bad))}")

    return _rebuild(tree, node_id, lambda node: replace(node, **patch))

def _default_id() -> str:
    return f"node-{uuid.uuid4().hex[:12]}"

def _fresh_id(tree: Node, id_factory: Callable[[], str]) -> str:
    taken = node_ids(tree)
    for _attempt in range(_MAX_ID_ATTEMPTS):
        candidate = id_factory()
        if candidate not in taken:
            return candidate
    raise IdCollisionError(f"Could not generate a unique node id after {_MAX_ID_ATTEMPTS} attempts")

def insert_child(tree: Node, parent_id: str,
                 id_factory: Optional[Callable[[], str]] = None) -> Node:
    """
    Append a new leaf under parent_id, labeled "Button {n+1}" where n is the
    parent's current child count. A missing parent leaves the tree untouched.
    """
    if find_node(tree, parent_id) is None:
        return tree

    child_id = _fresh_id(tree, id_factory or _default_id)

    def _append(parent: Node) -> Node:
        child = Node(
            id=child_id,
            label=CHILD_LABEL_FMT.format(n=len(parent.children) + 1),
        )
        return replace(parent, children=parent.children + (child,))

    return _rebuild(tree, parent_id, _append)
