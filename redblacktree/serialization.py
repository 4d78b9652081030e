import msgpack

from .core.tree import Tree
from .core.visitor import Visitor


class _PairPacker(Visitor):
    def __init__(self) -> None:
        self.pairs = []

    def visit(self, node) -> None:
        self.pairs.append([node.key, node.value])


def _freeze_key(key):
    # MessagePack has no tuple type; composite keys come back as lists.
    if isinstance(key, list):
        return tuple(_freeze_key(part) for part in key)
    return key


class TreeSerializer:
    """MessagePack snapshot of a tree's contents in key order.

    Composite keys are restored as tuples so the rebuilt tree stays
    comparable with the keys it was built from.
    """

    @staticmethod
    def dumps(tree: Tree) -> bytes:
        """Serialize every ``(key, value)`` pair of ``tree`` to bytes."""
        packer = _PairPacker()
        tree.walk(packer)
        return msgpack.packb(packer.pairs, use_bin_type=True)

    @staticmethod
    def loads(data: bytes) -> list:
        """Deserialize bytes produced by :meth:`dumps` into sorted pairs."""
        if not data:
            return []
        return [(_freeze_key(key), value) for key, value in msgpack.unpackb(data, raw=False)]

    @classmethod
    def load_into(cls, tree: Tree, data: bytes) -> Tree:
        for key, value in cls.loads(data):
            tree.put(key, value)
        return tree
