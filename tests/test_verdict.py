import pytest

from mysteries.engines.verdict import is_sustained, judge, score
from mysteries.ledger import ClueLedger
from mysteries.suspects import SuspectIndex


@pytest.fixture()
def index():
    return SuspectIndex.from_pairs([
        ("footprint", "Black"),
        ("torn page", "Green"),
        ("hair", "Green"),
    ])


def _ledger(*clues):
    ledger = ClueLedger()
    for clue in clues:
        ledger.add(clue)
    return ledger


def test_one_matching_clue_is_not_sustained(index):
    ledger = _ledger("footprint", "hair")
    count = score(ledger, index, "Green")

    assert count == 1
    assert not is_sustained(count)


def test_two_matching_clues_are_sustained(index):
    ledger = _ledger("footprint", "hair", "torn page")
    verdict = judge(ledger, index, "Green")

    assert verdict.count == 2
    assert verdict.sustained
    assert "SUSTAINED" in verdict.lines()[-1]


@pytest.mark.parametrize("accused", ["Green", "Black", "Nobody", "", None])
def test_empty_ledger_scores_zero(index, accused):
    assert score(ClueLedger(), index, accused) == 0


@pytest.mark.parametrize("accused", ["Green", "Black", "green", "Green ", "", None])
def test_score_is_bounded_by_ledger_size(index, accused):
    ledger = _ledger("footprint", "hair", "torn page", "unknown clue")
    count = score(ledger, index, accused)

    assert 0 <= count <= len(ledger)


def test_unknown_clues_and_case_mismatch_do_not_count(index):
    ledger = _ledger("unknown clue", "hair", "torn page")

    assert score(ledger, index, "green") == 0
    assert score(ledger, index, "Green") == 2


def test_empty_accusation_never_matches():
    index = SuspectIndex()
    index.put("blank", "")
    ledger = _ledger("blank")

    assert score(ledger, index, "") == 0
    assert score(ledger, index, None) == 0


def test_threshold_is_configurable(index):
    ledger = _ledger("footprint")
    verdict = judge(ledger, index, "Black", threshold=1)

    assert verdict.count == 1
    assert verdict.sustained
    assert "NOT SUSTAINED" in judge(ledger, index, "Black").lines()[-1]
