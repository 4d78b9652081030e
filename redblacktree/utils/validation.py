"""Structural checks for trees built through ``Tree.put``."""

from __future__ import annotations

from ..core.node import Node, is_red, size_of


def black_height(node: Node | None) -> int:
    """Black links from ``node`` down to any empty slot of a balanced subtree."""
    height = 0
    while node is not None:
        if not is_red(node):
            height += 1
        node = node.left
    return height


def check_invariants(tree) -> list[str]:
    """Return a description of every broken invariant; empty when valid."""
    problems: list[str] = []
    root = tree.root
    if root is None:
        return problems
    if is_red(root):
        problems.append(f"root {root.key!r} is red")
    _check(root, None, None, problems)
    if tree.size() != _count(root):
        problems.append(f"size() reports {tree.size()} but tree holds {_count(root)} nodes")
    return problems


def _check(node: Node | None, low, high, problems: list[str]) -> int:
    """Validate the subtree and return its black height."""
    if node is None:
        return 0
    key = node.key
    if low is not None and not low < key:
        problems.append(f"key {key!r} is not greater than {low!r}")
    if high is not None and not key < high:
        problems.append(f"key {key!r} is not less than {high!r}")

    if is_red(node) and (is_red(node.left) or is_red(node.right)):
        problems.append(f"red node {key!r} has a red child")
    if is_red(node.right) and not is_red(node.left):
        problems.append(f"node {key!r} leans right")

    expected = 1 + size_of(node.left) + size_of(node.right)
    if node.size != expected:
        problems.append(f"node {key!r} caches size {node.size}, expected {expected}")

    left = _check(node.left, low, key, problems)
    right = _check(node.right, key, high, problems)
    if left != right:
        problems.append(f"black height differs under {key!r}: {left} != {right}")
    return max(left, right) + (0 if is_red(node) else 1)


def _count(node: Node | None) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)
