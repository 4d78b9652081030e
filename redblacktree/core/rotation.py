from __future__ import annotations

from .node import RED, Node, size_of


def rotate_left(h: Node | None) -> Node | None:
    """Turn the right link of ``h`` into a left link.

    Returns the new local root. The caller relinks it into the parent
    slot (or the tree root). ``h`` without a right child is returned
    unchanged, and ``None`` yields ``None``.
    """
    if h is None or h.right is None:
        return h
    x = h.right
    h.right = x.left
    x.left = h
    x.color = h.color
    h.color = RED
    x.size = h.size
    h.size = 1 + size_of(h.left) + size_of(h.right)
    return x


def rotate_right(h: Node | None) -> Node | None:
    """Mirror image of :func:`rotate_left`."""
    if h is None or h.left is None:
        return h
    x = h.left
    h.left = x.right
    x.right = h
    x.color = h.color
    h.color = RED
    x.size = h.size
    h.size = 1 + size_of(h.left) + size_of(h.right)
    return x
