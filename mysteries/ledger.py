"""
Clue Ledger - ordered, duplicate-free record of the clues the player has found.

Backed by an unbalanced binary search tree keyed on the clue text. The clue
vocabulary is fixed by the case file, so the tree never grows past a handful
of nodes and rebalancing is not worth the code.
"""

import logging
from typing import Callable, Iterator, List, Optional

logger = logging.getLogger(__name__)


class _ClueNode:
    __slots__ = ("clue", "left", "right")

    def __init__(self, clue: str):
        self.clue = clue
        self.left: Optional["_ClueNode"] = None
        self.right: Optional["_ClueNode"] = None


class ClueLedger:
    """Clues collected during a session, iterated in ascending order."""

    def __init__(self):
        self._root: Optional[_ClueNode] = None
        self._size = 0

    def add(self, clue: Optional[str]) -> bool:
        """Store ``clue`` once. Returns True only when the clue was not known yet."""
        if not clue:
            return False
        if self._root is None:
            self._root = _ClueNode(clue)
            self._size = 1
            logger.debug("Ledger started with %r", clue)
            return True

        node = self._root
        while True:
            if clue == node.clue:
                return False
            if clue < node.clue:
                if node.left is None:
                    node.left = _ClueNode(clue)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _ClueNode(clue)
                    break
                node = node.right
        self._size += 1
        logger.debug("Ledger recorded %r (%d clues)", clue, self._size)
        return True

    def __iter__(self) -> Iterator[str]:
        stack: List[_ClueNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.clue
            node = node.right

    def for_each(self, visit: Callable[[str], None]) -> None:
        for clue in self:
            visit(clue)

    def __contains__(self, clue: object) -> bool:
        if not isinstance(clue, str):
            return False
        node = self._root
        while node is not None:
            if clue == node.clue:
                return True
            node = node.left if clue < node.clue else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def clear(self) -> int:
        """Drop every node. Returns the number of nodes released."""
        released = 0
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = node.right = None
            released += 1
        self._root = None
        self._size = 0
        return released

    def __repr__(self) -> str:
        return f"ClueLedger({list(self)!r})"
