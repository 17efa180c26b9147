"""Resolve a declarative room table into a linked mansion map.

Each row is a mapping with ``name``, an optional ``clue`` and optional
``left`` / ``right`` room names. The first row is the entrance.
"""
import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from locations.rooms import Room, iter_rooms

logger = logging.getLogger(__name__)


def _child_name(row: Mapping, key: str) -> Optional[str]:
    value = row.get(key)
    return value or None


def build_map(rows: Iterable[Mapping]) -> Room:
    rows = list(rows)
    if not rows:
        raise ValueError("Room table is empty")

    rooms: Dict[str, Room] = {}
    for row in rows:
        name = row.get("name")
        if not name:
            raise ValueError(f"Room row without a name: {dict(row)}")
        if name in rooms:
            raise ValueError(f"Duplicate room name: {name}")
        rooms[name] = Room(name, row.get("clue"))

    root_name = rows[0]["name"]
    parents: Dict[str, str] = {}
    for row in rows:
        links = {}
        for key in ("left", "right"):
            target = _child_name(row, key)
            if target is None:
                continue
            if target not in rooms:
                raise ValueError(f"Room {row['name']} links {key} to unknown room {target}")
            if target == root_name:
                raise ValueError(f"Room {row['name']} links back to the entrance {root_name}")
            if target in parents:
                raise ValueError(
                    f"Room {target} is reachable from both {parents[target]} and {row['name']}"
                )
            parents[target] = row["name"]
            links[key] = rooms[target]
        rooms[row["name"]].link(**links)

    root = rooms[root_name]
    unreachable = set(rooms) - {room.name for room in iter_rooms(root)}
    if unreachable:
        raise ValueError(f"Rooms not reachable from {root_name}: {sorted(unreachable)}")
    logger.debug("Built map with %d rooms rooted at %s", len(rooms), root_name)
    return root


def describe_map(root: Room, indent: int = 0) -> List[str]:
    lines = [f"{'  ' * indent}{root.name}" + (f" [{root.clue}]" if root.clue else "")]
    for child in (root.left, root.right):
        if child is not None:
            lines.extend(describe_map(child, indent + 1))
    return lines


def main():
    parser = argparse.ArgumentParser(description="Print the room tree of a case file")
    parser.add_argument("path", help="Path to a case JSON file")
    args = parser.parse_args()

    with Path(args.path).open(encoding="utf-8") as handle:
        data = json.load(handle)
    root = build_map(data.get("rooms", []))
    for line in describe_map(root):
        print(line)


if __name__ == "__main__":
    main()
