"""HTTP surface for a single in-memory Detective Quest game."""
import logging
import re
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException

from mysteries.engines.explore import RoomReport
from mysteries.session import GameSession
from .cases import CaseFileError, CaseNotFoundError, list_cases, load_case
from .config import Settings, get_settings
from .models import (
    AccuseRequest, CluesResponse, GameState, MoveRequest, MoveResponse,
    NewGameRequest, RoomView, VerdictResponse,
)

logger = logging.getLogger(__name__)

_CASE_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")

app = FastAPI(
    title="Detective Quest",
    description="Explore the mansion, collect clues and accuse a suspect",
)

# One player, one game; replaced on every /game/new.
_current: Optional[GameSession] = None


def get_settings_dep() -> Settings:
    return get_settings()


def reset_game() -> None:
    global _current
    if _current is not None:
        _current.close()
    _current = None


def _require_game() -> GameSession:
    if _current is None:
        raise HTTPException(status_code=404, detail="No game in progress. POST /game/new first.")
    return _current


def _room_view(report: RoomReport) -> RoomView:
    return RoomView(
        name=report.name,
        clue=report.clue,
        new_clue=report.new_clue,
        has_left=report.has_left,
        has_right=report.has_right,
    )


def _state(session: GameSession) -> GameState:
    return GameState(
        case_id=session.case.id,
        phase=session.phase,
        room=_room_view(session.look()),
        clues_collected=len(session.ledger),
        visited=list(session.engine.visited),
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "service": "detective-quest"}


@app.get("/cases")
def cases(settings: Settings = Depends(get_settings_dep)) -> dict:
    return {"cases": list_cases(settings), "default": settings.default_case}


@app.post("/game/new", status_code=201)
def new_game(request: Optional[NewGameRequest] = None, settings: Settings = Depends(get_settings_dep)) -> GameState:
    global _current
    case_name = request.case if request else None
    if case_name is not None and not _CASE_PATTERN.match(case_name):
        raise HTTPException(status_code=400, detail="Invalid case name. Use letters, numbers, hyphens, or underscores.")
    try:
        case = load_case(case_name, settings)
    except CaseFileError as exc:
        status = 404 if isinstance(exc, CaseNotFoundError) else 400
        raise HTTPException(status_code=status, detail=str(exc))
    reset_game()
    _current = GameSession(case, threshold=settings.verdict_threshold, bucket_count=settings.hash_buckets)
    _current.enter()
    logger.info("New game started for case %s", case.id)
    return _state(_current)


@app.get("/game/state")
def game_state() -> GameState:
    return _state(_require_game())


@app.post("/game/move")
def move(request: MoveRequest) -> MoveResponse:
    session = _require_game()
    if session.phase != "exploring":
        raise HTTPException(status_code=409, detail="Exploration is over")
    outcome, message, report = session.move(request.command)
    return MoveResponse(
        outcome=outcome.value,
        message=message,
        room=_room_view(report),
        phase=session.phase,
    )


@app.get("/game/clues")
def clues() -> CluesResponse:
    session = _require_game()
    collected = list(session.ledger)
    return CluesResponse(clues=collected, count=len(collected))


@app.post("/game/accuse")
def accuse(request: AccuseRequest) -> VerdictResponse:
    session = _require_game()
    if session.phase == "complete":
        raise HTTPException(status_code=409, detail="Game already complete")
    verdict = session.accuse(request.suspect)
    return VerdictResponse(
        accused=verdict.accused,
        count=verdict.count,
        sustained=verdict.sustained,
        threshold=session.threshold,
        lines=verdict.lines(),
    )
