"""
Game session - owns the mansion map, the clue ledger and the suspect index
for one playthrough and releases all three when the game ends.
"""

import logging
from typing import Callable, List, Optional

from locations.builders.build_map import build_map
from locations.rooms import Room, release_tree
from mysteries.engines.explore import Command, ExplorationEngine, Outcome, RoomReport, parse_command
from mysteries.engines.verdict import DEFAULT_THRESHOLD, Verdict, judge
from mysteries.ledger import ClueLedger
from mysteries.suspects import DEFAULT_BUCKETS, SuspectIndex
from service.models import CaseFile

logger = logging.getLogger(__name__)

NO_CLUES = "You did not collect any clues."


class GameSession:
    def __init__(self, case: CaseFile, threshold: int = DEFAULT_THRESHOLD,
                 bucket_count: int = DEFAULT_BUCKETS):
        self.case = case
        self.threshold = threshold
        self.root: Optional[Room] = build_map(room.model_dump() for room in case.rooms)
        self.ledger = ClueLedger()
        self.index = SuspectIndex.from_pairs(
            ((link.clue, link.suspect) for link in case.suspects), bucket_count
        )
        self.engine = ExplorationEngine(self.root, self.ledger)
        self.verdict: Optional[Verdict] = None
        self.closed = False
        logger.info("Session started for case %s", case.id)

    @property
    def phase(self) -> str:
        if self.verdict is not None:
            return "complete"
        if self.engine.finished:
            return "accusation"
        return "exploring"

    def enter(self) -> RoomReport:
        return self.engine.enter()

    def look(self) -> RoomReport:
        return self.engine.describe()

    def move(self, raw_command: Optional[str]) -> tuple:
        """One exploration turn. Returns (outcome, message, report of the current room)."""
        command = parse_command(raw_command)
        outcome = self.engine.handle(command)
        message = self.engine.message_for(command, outcome)
        report = self.engine.enter() if outcome is Outcome.MOVED else self.engine.describe()
        return outcome, message, report

    def explore(self, read_line: Callable[[], Optional[str]], emit: Callable[[str], None]) -> int:
        return self.engine.run(read_line, emit)

    def clue_lines(self) -> List[str]:
        if not self.ledger:
            return [NO_CLUES]
        return [f" - {clue}" for clue in self.ledger]

    def accuse(self, accused: Optional[str]) -> Verdict:
        if not self.engine.finished:
            self.engine.handle(Command.LEAVE)
        self.verdict = judge(self.ledger, self.index, accused, self.threshold)
        return self.verdict

    def close(self) -> None:
        if self.closed:
            return
        rooms = release_tree(self.root)
        clues = self.ledger.clear()
        links = self.index.clear()
        self.engine.visited.clear()
        self.root = None
        self.closed = True
        logger.info("Session for case %s released %d rooms, %d clues, %d suspect links",
                    self.case.id, rooms, clues, links)

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
