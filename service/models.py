from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class RoomSpec(BaseModel):
    name: str = Field(min_length=1)
    clue: Optional[str] = None
    left: Optional[str] = None
    right: Optional[str] = None


class SuspectLink(BaseModel):
    clue: str = Field(min_length=1)
    suspect: str = Field(min_length=1)


class CaseFile(BaseModel):
    id: str
    title: str
    intro: List[str] = Field(default_factory=list)
    rooms: List[RoomSpec] = Field(min_length=1)
    suspects: List[SuspectLink]


class RoomView(BaseModel):
    name: str
    clue: Optional[str] = None
    new_clue: bool
    has_left: bool
    has_right: bool


class NewGameRequest(BaseModel):
    case: Optional[str] = None


class GameState(BaseModel):
    case_id: str
    phase: Literal["exploring", "accusation", "complete"]
    room: RoomView
    clues_collected: int
    visited: List[str]


class MoveRequest(BaseModel):
    command: str


class MoveResponse(BaseModel):
    outcome: str
    message: Optional[str] = None
    room: RoomView
    phase: str


class CluesResponse(BaseModel):
    clues: List[str]
    count: int


class AccuseRequest(BaseModel):
    suspect: str = ""


class VerdictResponse(BaseModel):
    accused: str
    count: int
    sustained: bool
    threshold: int
    lines: List[str]
