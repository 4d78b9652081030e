from __future__ import annotations

from typing import Any, Callable

from .node import Node


class Visitor:
    """Callback contract consumed by :meth:`Tree.walk`.

    Only :meth:`visit` is required. ``enter``/``leave`` bracket the
    subtree of a present node and ``absent`` marks an empty child
    position; visitors that only care about the sorted contents can
    ignore them.
    """

    def visit(self, node: Node) -> None:
        raise NotImplementedError

    def enter(self, node: Node) -> None:
        pass

    def leave(self, node: Node) -> None:
        pass

    def absent(self) -> None:
        pass


class FunctionVisitor(Visitor):
    """Adapts a plain ``fn(node)`` callable to the visitor contract."""

    def __init__(self, fn: Callable[[Node], Any]) -> None:
        self.fn = fn

    def visit(self, node: Node) -> None:
        self.fn(node)


class InorderVisitor(Visitor):
    """Renders the tree shape, e.g. ``((.3.)7(.8.))``; ``.`` is an empty slot."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def enter(self, node: Node) -> None:
        self._parts.append("(")

    def visit(self, node: Node) -> None:
        self._parts.append(str(node.key))

    def leave(self, node: Node) -> None:
        self._parts.append(")")

    def absent(self) -> None:
        self._parts.append(".")

    def __str__(self) -> str:
        return "".join(self._parts)


class CollectingVisitor(Visitor):
    """Accumulates ``(key, value)`` pairs in key order."""

    def __init__(self) -> None:
        self.items: list[tuple[Any, Any]] = []

    def visit(self, node: Node) -> None:
        self.items.append((node.key, node.value))


def as_visitor(visitor: Visitor | Callable[[Node], Any]) -> Visitor:
    if hasattr(visitor, "visit"):
        return visitor  # type: ignore[return-value]
    if callable(visitor):
        return FunctionVisitor(visitor)
    raise TypeError(f"{visitor!r} is neither a visitor nor callable")
