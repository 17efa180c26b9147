import pytest

from mysteries.ledger import ClueLedger


@pytest.mark.parametrize("times", [1, 2, 100])
def test_repeated_insert_keeps_one_entry(times):
    ledger = ClueLedger()
    results = [ledger.add("footprint") for _ in range(times)]

    assert len(ledger) == 1
    assert list(ledger) == ["footprint"]
    assert results[0] is True
    assert not any(results[1:])


def test_in_order_traversal_is_sorted():
    ledger = ClueLedger()
    for clue in ["zeta", "alpha", "mu"]:
        ledger.add(clue)

    assert list(ledger) == ["alpha", "mu", "zeta"]


def test_traversal_is_restartable():
    ledger = ClueLedger()
    for clue in ["b", "a", "c"]:
        ledger.add(clue)

    assert list(ledger) == list(ledger) == ["a", "b", "c"]


def test_order_is_independent_of_insertion_order():
    clues = ["torn page", "footprint", "hair", "Zebra", "apple", "ápice"]
    forward, backward = ClueLedger(), ClueLedger()
    for clue in clues:
        forward.add(clue)
    for clue in reversed(clues):
        backward.add(clue)

    expected = sorted(clues, key=lambda c: c.encode("utf-8"))
    assert list(forward) == list(backward) == expected


def test_empty_and_missing_clues_are_ignored():
    ledger = ClueLedger()
    assert ledger.add("") is False
    assert ledger.add(None) is False
    assert len(ledger) == 0
    assert not ledger
    assert list(ledger) == []


def test_for_each_visits_in_order():
    ledger = ClueLedger()
    for clue in ["mu", "alpha", "zeta", "beta"]:
        ledger.add(clue)
    seen = []
    ledger.for_each(seen.append)

    assert seen == ["alpha", "beta", "mu", "zeta"]


def test_membership():
    ledger = ClueLedger()
    ledger.add("hair")
    ledger.add("footprint")

    assert "hair" in ledger
    assert "torn page" not in ledger
    assert 42 not in ledger


def test_degenerate_insertion_order_still_iterates():
    ledger = ClueLedger()
    clues = [f"clue-{i:04d}" for i in range(1500)]
    for clue in clues:
        ledger.add(clue)

    assert len(ledger) == 1500
    assert list(ledger) == clues


def test_clear_releases_every_node():
    ledger = ClueLedger()
    for clue in ["b", "a", "c", "d"]:
        ledger.add(clue)

    assert ledger.clear() == 4
    assert len(ledger) == 0
    assert list(ledger) == []
    assert ledger.clear() == 0
