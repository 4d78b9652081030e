from .core import (
    BLACK,
    RED,
    CollectingVisitor,
    Direction,
    FunctionVisitor,
    InorderVisitor,
    Node,
    Tree,
    Visitor,
    is_red,
    rotate_left,
    rotate_right,
)
from .mem_table import MemTable
from .serialization import TreeSerializer
from .utils import EventLogger, black_height, check_invariants

NODIR = Direction.NODIR
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT


def new_tree(**kwargs) -> Tree:
    """Return an empty :class:`Tree`."""
    return Tree(**kwargs)
