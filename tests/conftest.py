import json
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

MANOR_CASE = {
    "id": "manor",
    "title": "Test Case",
    "intro": ["Test intro."],
    "rooms": [
        {"name": "Hall", "clue": "footprint", "left": "Library", "right": "Attic"},
        {"name": "Library", "clue": "hair", "left": "Cellar"},
        {"name": "Attic", "clue": "torn page"},
        {"name": "Cellar"},
    ],
    "suspects": [
        {"clue": "footprint", "suspect": "Black"},
        {"clue": "torn page", "suspect": "Green"},
        {"clue": "hair", "suspect": "Green"},
    ],
}


def _write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


@pytest.fixture()
def settings(monkeypatch):
    monkeypatch.setenv("DETECTIVE_QUEST_REPO_ROOT", str(ROOT))
    monkeypatch.delenv("DETECTIVE_QUEST_VERDICT_THRESHOLD", raising=False)
    from service.config import get_settings

    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture()
def case_root(tmp_path, monkeypatch):
    """A throwaway repo root holding the schema and one small case."""
    (tmp_path / "schemas").mkdir()
    schema = (ROOT / "schemas" / "case.schema.json").read_text(encoding="utf-8")
    (tmp_path / "schemas" / "case.schema.json").write_text(schema, encoding="utf-8")
    _write_json(tmp_path / "cases" / "manor.json", MANOR_CASE)

    monkeypatch.setenv("DETECTIVE_QUEST_REPO_ROOT", str(tmp_path))
    monkeypatch.setenv("DETECTIVE_QUEST_DEFAULT_CASE", "manor")
    from service.config import get_settings

    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture()
def manor_case():
    from service.models import CaseFile

    return CaseFile.model_validate(MANOR_CASE)


@pytest.fixture()
def client(settings):
    from fastapi.testclient import TestClient
    from service.app import app, reset_game

    reset_game()
    with TestClient(app) as test_client:
        yield test_client
    reset_game()
