import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import jsonschema
from pydantic import ValidationError

from locations.builders.build_map import build_map
from .config import Settings, get_settings
from .models import CaseFile

logger = logging.getLogger(__name__)


class CaseFileError(ValueError):
    """A case file is missing, malformed, or describes an impossible mansion."""


class CaseNotFoundError(CaseFileError):
    pass


def list_cases(settings: Settings) -> List[str]:
    if not settings.cases_path.exists():
        return []
    return sorted(p.stem for p in settings.cases_path.glob("*.json"))


def resolve_case_path(name_or_path: Union[str, Path], settings: Settings) -> Path:
    candidate = Path(name_or_path)
    if candidate.suffix == ".json":
        return candidate
    return settings.cases_path / f"{name_or_path}.json"


def _load_schema(settings: Settings) -> Dict:
    with settings.case_schema_path.open(encoding="utf-8") as f:
        return json.load(f)


def validate_case_data(data: Dict, settings: Settings) -> List[str]:
    """Validate raw case data. Return a list of error messages, empty when valid."""
    try:
        jsonschema.validate(data, _load_schema(settings))
    except jsonschema.ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path)
        return [f"{location}: {e.message}" if location else e.message]
    try:
        case = CaseFile.model_validate(data)
    except ValidationError as e:
        return [err["msg"] for err in e.errors()]
    try:
        build_map(room.model_dump() for room in case.rooms)
    except ValueError as e:
        return [str(e)]
    return []


def load_case(name_or_path: Optional[Union[str, Path]] = None, settings: Optional[Settings] = None) -> CaseFile:
    settings = settings or get_settings()
    path = resolve_case_path(name_or_path or settings.default_case, settings)
    if not path.exists():
        raise CaseNotFoundError(f"Case file not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CaseFileError(f"Case file {path} is not valid JSON: {e}") from e

    errors = validate_case_data(data, settings)
    if errors:
        raise CaseFileError(f"Case file {path} is invalid: {'; '.join(errors)}")

    case = CaseFile.model_validate(data)
    room_clues = {room.clue for room in case.rooms if room.clue}
    orphans = [link.clue for link in case.suspects if link.clue not in room_clues]
    if orphans:
        logger.warning("Case %s links clues found in no room: %s", case.id, orphans)
    logger.info("Loaded case %s from %s (%d rooms)", case.id, path, len(case.rooms))
    return case
