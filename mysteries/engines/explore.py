import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from locations.rooms import Direction, Room
from mysteries.ledger import ClueLedger

logger = logging.getLogger(__name__)

MENU = "Where to? (e = left, d = right, s = leave the mansion)"
NO_CLUE = "No clue in this room."
NO_ROOM = {
    Direction.LEFT: "There is no room to the left. Choose another action.",
    Direction.RIGHT: "There is no room to the right. Choose another action.",
}
LEAVING = "Leaving the mansion, time for the verdict..."
INVALID = "Invalid option. Use 'e', 'd' or 's'."


class Command(str, Enum):
    LEFT = "e"
    RIGHT = "d"
    LEAVE = "s"
    INVALID = "?"


class Outcome(str, Enum):
    MOVED = "moved"
    NO_ROOM = "no_room"
    LEFT_MANSION = "left_mansion"
    INVALID = "invalid"


_DIRECTIONS = {Command.LEFT: Direction.LEFT, Command.RIGHT: Direction.RIGHT}


def parse_command(line: Optional[str]) -> Command:
    """Map a raw input line to a command. End of input counts as leaving."""
    if line is None:
        return Command.LEAVE
    stripped = line.strip()
    if not stripped:
        return Command.INVALID
    try:
        return Command(stripped[0].lower())
    except ValueError:
        return Command.INVALID


@dataclass
class RoomReport:
    name: str
    clue: Optional[str]
    new_clue: bool
    has_left: bool
    has_right: bool

    def lines(self) -> List[str]:
        lines = [f"You are in: {self.name}"]
        if self.clue:
            lines.append(f'You found a clue: "{self.clue}"')
        else:
            lines.append(NO_CLUE)
        return lines


class ExplorationEngine:
    """Walks the mansion downward from the entrance, filing clues in the ledger."""

    def __init__(self, root: Room, ledger: ClueLedger):
        if root is None:
            raise ValueError("Exploration needs an entrance room")
        self.current = root
        self.ledger = ledger
        self.finished = False
        self.visited: List[str] = [root.name]

    def enter(self) -> RoomReport:
        room = self.current
        new_clue = self.ledger.add(room.clue) if room.clue else False
        if new_clue:
            logger.debug("Clue %r found in %s", room.clue, room.name)
        return RoomReport(
            name=room.name,
            clue=room.clue,
            new_clue=new_clue,
            has_left=room.left is not None,
            has_right=room.right is not None,
        )

    def describe(self) -> RoomReport:
        room = self.current
        return RoomReport(
            name=room.name,
            clue=room.clue,
            new_clue=False,
            has_left=room.left is not None,
            has_right=room.right is not None,
        )

    def handle(self, command: Command) -> Outcome:
        if self.finished:
            raise RuntimeError("Exploration already finished")
        if command is Command.LEAVE:
            self.finished = True
            logger.debug("Left the mansion from %s", self.current.name)
            return Outcome.LEFT_MANSION
        direction = _DIRECTIONS.get(command)
        if direction is None:
            return Outcome.INVALID
        target = self.current.child(direction)
        if target is None:
            return Outcome.NO_ROOM
        logger.debug("Moved %s from %s to %s", direction.value, self.current.name, target.name)
        self.current = target
        self.visited.append(target.name)
        return Outcome.MOVED

    def message_for(self, command: Command, outcome: Outcome) -> Optional[str]:
        if outcome is Outcome.NO_ROOM:
            return NO_ROOM[_DIRECTIONS[command]]
        if outcome is Outcome.LEFT_MANSION:
            return LEAVING
        if outcome is Outcome.INVALID:
            return INVALID
        return None

    def run(self, read_line: Callable[[], Optional[str]], emit: Callable[[str], None]) -> int:
        """Play turns until the player leaves. Returns the number of turns taken."""
        turns = 0
        while not self.finished:
            report = self.enter()
            emit("")
            for line in report.lines():
                emit(line)
            emit(MENU)
            command = parse_command(read_line())
            outcome = self.handle(command)
            turns += 1
            message = self.message_for(command, outcome)
            if message:
                emit(message)
        return turns
