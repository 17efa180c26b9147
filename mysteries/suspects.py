import logging
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BUCKETS = 103
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def djb2(text: str) -> int:
    h = 5381
    for byte in text.encode("utf-8"):
        h = ((h << 5) + h + byte) & _MASK_64  # h * 33 + byte
    return h


class _Entry:
    __slots__ = ("clue", "suspect", "next")

    def __init__(self, clue: str, suspect: str, next_entry: Optional["_Entry"]):
        self.clue = clue
        self.suspect = suspect
        self.next = next_entry


class SuspectIndex:
    """Maps a clue to the suspect it incriminates. Chained hash table."""

    def __init__(self, bucket_count: int = DEFAULT_BUCKETS):
        if bucket_count < 1:
            raise ValueError("bucket_count must be positive")
        self._buckets: List[Optional[_Entry]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]], bucket_count: int = DEFAULT_BUCKETS) -> "SuspectIndex":
        index = cls(bucket_count)
        for clue, suspect in pairs:
            index.put(clue, suspect)
        return index

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def _slot(self, clue: str) -> int:
        return djb2(clue) % len(self._buckets)

    def put(self, clue: Optional[str], suspect: Optional[str]) -> None:
        if not clue or suspect is None:
            return
        slot = self._slot(clue)
        entry = self._buckets[slot]
        while entry is not None:
            if entry.clue == clue:
                if entry.suspect != suspect:
                    logger.debug("Clue %r now points at %r (was %r)", clue, suspect, entry.suspect)
                entry.suspect = suspect
                return
            entry = entry.next
        self._buckets[slot] = _Entry(clue, suspect, self._buckets[slot])
        self._size += 1

    def get(self, clue: Optional[str]) -> Optional[str]:
        if not clue:
            return None
        entry = self._buckets[self._slot(clue)]
        while entry is not None:
            if entry.clue == clue:
                return entry.suspect
            entry = entry.next
        return None

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.get(clue) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[Tuple[str, str]]:
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.clue, entry.suspect
                entry = entry.next

    def clear(self) -> int:
        released = 0
        for slot, head in enumerate(self._buckets):
            entry = head
            while entry is not None:
                following = entry.next
                entry.next = None
                entry = following
                released += 1
            self._buckets[slot] = None
        self._size = 0
        return released
