import logging

from .core.tree import Tree
from .utils.event_logger import EventLogger

logger = logging.getLogger(__name__)


class MemTable:
    """Sorted MemTable backed by a left-leaning red-black tree.

    ``max_size`` is a capacity hint: ``put`` never refuses a key, callers
    check :meth:`is_full` to decide when to drain the table.
    """

    def __init__(
        self,
        max_size: int,
        *,
        event_logger: EventLogger | None = None,
        trace: bool = False,
    ) -> None:
        self.max_size = max_size
        self.event_logger = event_logger
        self.trace = trace
        self._tree = self._new_tree()
        self._log(f"MemTable (LLRB) inicializado, capacidade máxima {self.max_size} itens.")

    def _new_tree(self) -> Tree:
        return Tree(trace=self.trace, event_logger=self.event_logger)

    def _log(self, msg: str) -> None:
        if self.event_logger:
            self.event_logger.log(msg)
        else:
            logger.info(msg)

    def put(self, key, value):
        self._tree.put(key, value)

    def get(self, key):
        found, value = self._tree.get(key)
        return value if found else None

    def is_full(self):
        return len(self._tree) >= self.max_size

    def clear(self):
        self._tree = self._new_tree()
        self._log("MemTable: limpo.")

    def get_sorted_items(self):
        """Retorna todos os pares (k, v) ordenados por chave para flush."""
        return self._tree.inorder()

    def scan(self, start=None, end=None):
        """Return pairs with ``start <= key < end`` in key order."""
        return list(self._tree.scan(start, end))

    @property
    def tree(self) -> Tree:
        return self._tree

    def __contains__(self, key):
        return key in self._tree

    def __len__(self):
        return len(self._tree)
