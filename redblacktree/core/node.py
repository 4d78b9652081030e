from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

RED = True
BLACK = False


class Direction(Enum):
    """Branch taken from a parent to reach a child."""

    NODIR = "nodir"
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.name


class Node(Generic[K, V]):
    """Vertex of a left-leaning red-black tree.

    A node owns its two children. There is no parent pointer; the parent
    of a node is always found again by descending from the root.
    """

    __slots__ = ("key", "value", "color", "left", "right", "size")

    def __init__(self, key: K, value: V, color: bool = RED) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.left: Node[K, V] | None = None
        self.right: Node[K, V] | None = None
        self.size = 1

    def update_size(self) -> None:
        self.size = 1 + size_of(self.left) + size_of(self.right)

    def __repr__(self) -> str:
        color = "red" if self.color is RED else "black"
        return f"Node({self.key!r}, {color}, size={self.size})"


def is_red(node: Node | None) -> bool:
    """Return ``True`` only for a present red node; ``None`` counts as black."""
    if node is None:
        return False
    return node.color is RED


def size_of(node: Node | None) -> int:
    return 0 if node is None else node.size
