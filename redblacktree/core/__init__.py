from .node import BLACK, RED, Direction, Node, is_red, size_of
from .rotation import rotate_left, rotate_right
from .tree import Tree
from .visitor import CollectingVisitor, FunctionVisitor, InorderVisitor, Visitor
