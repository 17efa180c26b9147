from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class Room:
    """A location in the mansion. Holds at most one clue and two optional exits."""

    __slots__ = ("_name", "_clue", "_left", "_right")

    def __init__(self, name: str, clue: Optional[str] = None):
        self._name = name or ""
        self._clue = clue or None
        self._left: Optional[Room] = None
        self._right: Optional[Room] = None

    def link(self, left: Optional[Room] = None, right: Optional[Room] = None) -> Room:
        if left is not None:
            self._left = left
        if right is not None:
            self._right = right
        return self

    @property
    def name(self) -> str:
        return self._name

    @property
    def clue(self) -> Optional[str]:
        return self._clue

    @property
    def left(self) -> Optional[Room]:
        return self._left

    @property
    def right(self) -> Optional[Room]:
        return self._right

    def child(self, direction: Direction) -> Optional[Room]:
        if direction is Direction.LEFT:
            return self._left
        if direction is Direction.RIGHT:
            return self._right
        raise ValueError(f"Unknown direction: {direction!r}")

    def __repr__(self) -> str:
        return f"Room({self._name!r}, clue={self._clue!r})"


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Pre-order walk (room, left subtree, right subtree)."""
    stack: List[Room] = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def release_tree(root: Optional[Room]) -> int:
    """Unlink every room below ``root`` once and return how many were released."""
    released = 0
    stack: List[Room] = [root] if root is not None else []
    while stack:
        room = stack.pop()
        if room._left is not None:
            stack.append(room._left)
        if room._right is not None:
            stack.append(room._right)
        room._left = None
        room._right = None
        released += 1
    return released
