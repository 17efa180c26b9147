import logging
from dataclasses import dataclass
from typing import Optional

from mysteries.ledger import ClueLedger
from mysteries.suspects import SuspectIndex

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 2


def score(ledger: ClueLedger, index: SuspectIndex, accused: Optional[str]) -> int:
    """Count the collected clues whose indexed suspect is exactly ``accused``."""
    if not accused:
        return 0
    count = 0
    for clue in ledger:
        if index.get(clue) == accused:
            count += 1
    return count


def is_sustained(count: int, threshold: int = DEFAULT_THRESHOLD) -> bool:
    return count >= threshold


@dataclass
class Verdict:
    accused: str
    count: int
    sustained: bool

    def lines(self):
        lines = [f"The investigation found {self.count} clue(s) pointing at '{self.accused}'."]
        if self.sustained:
            lines.append("Outcome: the evidence holds. Your accusation is SUSTAINED. Well done, detective!")
        else:
            lines.append("Outcome: not enough evidence. Your accusation is NOT SUSTAINED.")
        return lines


def judge(ledger: ClueLedger, index: SuspectIndex, accused: Optional[str],
          threshold: int = DEFAULT_THRESHOLD) -> Verdict:
    count = score(ledger, index, accused)
    verdict = Verdict(accused=accused or "", count=count, sustained=is_sustained(count, threshold))
    logger.info("Accused %r with %d corroborating clue(s): sustained=%s", verdict.accused, count, verdict.sustained)
    return verdict
