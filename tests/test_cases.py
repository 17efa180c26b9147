import json

import pytest

from service.cases import CaseFileError, CaseNotFoundError, list_cases, load_case, validate_case_data


def test_default_mansion_case_loads(settings):
    case = load_case(settings=settings)

    assert case.id == "mansion"
    assert case.rooms[0].name == "Hall"
    assert len(case.rooms) == 7
    assert {link.suspect for link in case.suspects} == {"Mr. Black", "Mrs. Green", "Cook", "Baroness"}
    assert "mansion" in list_cases(settings)


def test_case_by_path(case_root):
    case = load_case(case_root / "cases" / "manor.json")
    assert case.id == "manor"


def test_missing_case(case_root):
    with pytest.raises(CaseNotFoundError):
        load_case("nope")


def test_schema_violation(case_root):
    path = case_root / "cases" / "broken.json"
    path.write_text(json.dumps({"id": "broken", "title": "x", "rooms": []}), encoding="utf-8")

    with pytest.raises(CaseFileError, match="invalid"):
        load_case("broken")


def test_invalid_json(case_root):
    (case_root / "cases" / "garbled.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(CaseFileError, match="not valid JSON"):
        load_case("garbled")


def test_topology_errors_are_reported(settings):
    data = {
        "id": "loop",
        "title": "Loop",
        "rooms": [{"name": "Hall", "left": "A"}, {"name": "A", "left": "Hall"}],
        "suspects": [],
    }
    errors = validate_case_data(data, settings)

    assert errors and "entrance" in errors[0]
