from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator

from ..utils.event_logger import EventLogger
from .node import BLACK, RED, Direction, K, Node, V, is_red
from .rotation import rotate_left, rotate_right
from .visitor import CollectingVisitor, InorderVisitor, Visitor, as_visitor

logger = logging.getLogger(__name__)


class Tree(Generic[K, V]):
    """Ordered key/value index backed by a left-leaning red-black tree.

    Insertion splits 4-nodes on the way down and restores the left lean
    with rotations on the way back up, so every path from the root to an
    empty slot crosses the same number of black links.

    The tree is not thread safe; callers sharing one instance must
    serialise access themselves.
    """

    def __init__(
        self,
        *,
        trace: bool = False,
        event_logger: EventLogger | None = None,
    ) -> None:
        self.root: Node[K, V] | None = None
        self.trace = trace
        self.event_logger = event_logger

    # —— Diagnostics ——
    def _trace(self, msg: str) -> None:
        if not self.trace:
            return
        if self.event_logger:
            self.event_logger.log(msg)
        else:
            logger.debug(msg)

    # —— Insertion ——
    def put(self, key: K, value: V) -> None:
        """Insert ``key`` or overwrite its value in O(log n)."""
        # Separate lookup first: the insert descent splits 4-nodes on its
        # way down, so an overwrite must never take that path.
        node = self._find(key)
        if node is not None:
            node.value = value
            self._trace(f"put {key!r}: value replaced")
            return
        self.root = self._put(self.root, key, value)
        self.root.color = BLACK

    def _put(self, h: Node[K, V] | None, key: K, value: V) -> Node[K, V]:
        if h is None:
            self._trace(f"put {key!r}: new red node")
            return Node(key, value, RED)

        if is_red(h.left) and is_red(h.right):
            self._trace(f"flip colors at {h.key!r}")
            h.color = RED
            h.left.color = BLACK
            h.right.color = BLACK

        if key < h.key:
            h.left = self._put(h.left, key, value)
        else:
            h.right = self._put(h.right, key, value)

        if is_red(h.right) and not is_red(h.left):
            self._trace(f"rotate left at {h.key!r}")
            h = rotate_left(h)
        if is_red(h.left) and is_red(h.left.left):
            self._trace(f"rotate right at {h.key!r}")
            h = rotate_right(h)

        h.update_size()
        return h

    # —— Lookup ——
    def _find(self, key: K) -> Node[K, V] | None:
        x = self.root
        while x is not None:
            if key == x.key:
                return x
            x = x.left if key < x.key else x.right
        return None

    def get(self, key: K) -> tuple[bool, V | None]:
        """Return ``(True, value)`` when ``key`` is present, else ``(False, None)``."""
        node = self._find(key)
        if node is None:
            return False, None
        return True, node.value

    def get_parent(self, key: K) -> tuple[bool, Node[K, V] | None, Direction]:
        """Locate the parent of ``key`` by descending from the root.

        Returns ``(found, parent, direction)``. The root has no parent,
        so it reports ``(True, None, NODIR)``. On a miss, ``parent`` is
        the last node visited and ``direction`` the branch the key would
        have taken from it.
        """
        parent: Node[K, V] | None = None
        direction = Direction.NODIR
        x = self.root
        while x is not None:
            if key == x.key:
                return True, parent, direction
            parent = x
            if key < x.key:
                direction = Direction.LEFT
                x = x.left
            else:
                direction = Direction.RIGHT
                x = x.right
        return False, parent, direction

    def __contains__(self, key: K) -> bool:
        return self._find(key) is not None

    # —— Rotations on nodes of this tree ——
    def rotate_left(self, node: Node[K, V] | None) -> Node[K, V] | None:
        """Rotate ``node`` left in place and relink the result into the tree."""
        return self._rotate(node, rotate_left, node is not None and node.right is not None)

    def rotate_right(self, node: Node[K, V] | None) -> Node[K, V] | None:
        """Rotate ``node`` right in place and relink the result into the tree."""
        return self._rotate(node, rotate_right, node is not None and node.left is not None)

    def _rotate(
        self,
        node: Node[K, V] | None,
        rotation: Callable[[Node | None], Node | None],
        possible: bool,
    ) -> Node[K, V] | None:
        if not possible:
            return node
        found, parent, direction = self.get_parent(node.key)
        if parent is None:
            current = self.root
        elif direction is Direction.LEFT:
            current = parent.left
        else:
            current = parent.right
        if not found or current is not node:
            raise ValueError(f"node {node.key!r} does not belong to this tree")

        x = rotation(node)
        self._trace(f"{rotation.__name__} at {node.key!r} -> {x.key!r}")
        if parent is None:
            self.root = x
        elif direction is Direction.LEFT:
            parent.left = x
        else:
            parent.right = x
        return x

    # —— Traversal ——
    def walk(self, visitor: Visitor | Callable[[Node], Any]) -> None:
        """In-order traversal calling ``visitor`` for every position.

        ``visit`` runs once per node in key order; the optional hooks
        ``enter``, ``leave`` and ``absent`` expose the tree shape.
        """
        v = as_visitor(visitor)
        self._walk(
            self.root,
            v.visit,
            getattr(v, "enter", None),
            getattr(v, "leave", None),
            getattr(v, "absent", None),
        )

    def _walk(self, node, visit, enter, leave, absent) -> None:
        if node is None:
            if absent:
                absent()
            return
        if enter:
            enter(node)
        self._walk(node.left, visit, enter, leave, absent)
        visit(node)
        self._walk(node.right, visit, enter, leave, absent)
        if leave:
            leave(node)

    def inorder(self) -> list[tuple[K, V]]:
        """Return all ``(key, value)`` pairs sorted by key."""
        collector = CollectingVisitor()
        self.walk(collector)
        return collector.items

    def scan(self, start: K | None = None, end: K | None = None) -> Iterator[tuple[K, V]]:
        """Yield pairs with ``start <= key < end``; either bound may be ``None``."""
        stack: list[Node[K, V]] = []
        x = self.root
        while stack or x is not None:
            if x is not None:
                if start is not None and x.key < start:
                    # Whole left subtree is below the range.
                    x = x.right
                    continue
                stack.append(x)
                x = x.left
                continue
            x = stack.pop()
            if end is not None and not x.key < end:
                return
            yield x.key, x.value
            x = x.right

    # —— Utilities ——
    def size(self) -> int:
        return 0 if self.root is None else self.root.size

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        visitor = InorderVisitor()
        self.walk(visitor)
        return str(visitor)
