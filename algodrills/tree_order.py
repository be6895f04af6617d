"""Pre-order, post-order and level-order walks over an n-ary tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class TreeNode:
    """A tree node with a string label and any number of ordered children."""

    id: str
    children: list[TreeNode] = field(default_factory=list)


def _pre(node: TreeNode) -> Iterator[str]:
    yield node.id
    for child in node.children:
        yield from _pre(child)


def _post(node: TreeNode) -> Iterator[str]:
    for child in node.children:
        yield from _post(child)
    yield node.id


def pre_order(root: TreeNode) -> str:
    """Return the labels joined in pre-order: each node before its children."""
    return "".join(_pre(root))


def post_order(root: TreeNode) -> str:
    """Return the labels joined in post-order: each node after its children."""
    return "".join(_post(root))


def level_order(root: TreeNode) -> str:
    """Return the labels joined level by level, left to right within a level."""
    labels: list[str] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        labels.append(node.id)
        queue.extend(node.children)
    return "".join(labels)