"""
Explorer data models.

- Choice: Player decision offered at a room (left, right, exit)
- ExplorerState: Navigation state, AT_ROOM or one of the terminal states
- ExplorationEvent: One piece of output emitted by the explorer, in order
- ExplorationResult: Summary handed back once exploration has finished
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from mansion.core.maps.models import Side


class Choice(str, Enum):
    """Decision the player can make at a room."""

    LEFT = "left"
    RIGHT = "right"
    EXIT = "exit"

    @property
    def side(self) -> Optional[Side]:
        if self is Choice.LEFT:
            return Side.LEFT
        if self is Choice.RIGHT:
            return Side.RIGHT
        return None


# Accepted spellings, matched after lower-casing. The single letters e/d/s
# follow the Portuguese esquerda/direita/sair.
CHOICE_ALIASES: Dict[str, Choice] = {
    "left": Choice.LEFT,
    "l": Choice.LEFT,
    "e": Choice.LEFT,
    "esquerda": Choice.LEFT,
    "right": Choice.RIGHT,
    "r": Choice.RIGHT,
    "d": Choice.RIGHT,
    "direita": Choice.RIGHT,
    "exit": Choice.EXIT,
    "quit": Choice.EXIT,
    "q": Choice.EXIT,
    "s": Choice.EXIT,
    "sair": Choice.EXIT,
}


def parse_choice(token: str) -> Optional[Choice]:
    """Normalize a raw token case-insensitively; None when it is not a choice."""
    return CHOICE_ALIASES.get(token.strip().lower())


class ExplorerState(str, Enum):
    """State of the navigation state machine."""

    AT_ROOM = "at_room"
    TERMINATED_AT_LEAF = "terminated_at_leaf"
    EXITED = "exited"
    EMPTY_MAP = "empty_map"
    INPUT_FAILURE = "input_failure"

    @property
    def is_terminal(self) -> bool:
        return self is not ExplorerState.AT_ROOM

    @property
    def is_abnormal(self) -> bool:
        return self is ExplorerState.INPUT_FAILURE


class EventKind(str, Enum):
    """Kind of output emitted by the explorer."""

    STARTED = "started"
    EMPTY_MAP = "empty_map"
    ROOM = "room"
    LEAF_REACHED = "leaf_reached"
    CHOICES = "choices"
    MOVED = "moved"
    PATH_MISSING = "path_missing"
    INVALID_OPTION = "invalid_option"
    EXITED = "exited"
    INPUT_FAILED = "input_failed"


class ExplorationEvent(BaseModel):
    """Single output item; rendering and wording belong to the output capability."""

    kind: EventKind
    room: Optional[str] = None
    choices: List[Choice] = Field(default_factory=list)
    side: Optional[Side] = None
    token: Optional[str] = None
    message: Optional[str] = None


class ExplorationResult(BaseModel):
    """Outcome of a finished exploration."""

    outcome: ExplorerState
    final_room: Optional[str] = None
    path: List[str] = Field(default_factory=list)
    steps: int = 0  # tokens read
    invalid_attempts: int = 0
    blocked_attempts: int = 0

    @property
    def is_abnormal(self) -> bool:
        return self.outcome.is_abnormal

    def describe(self) -> str:
        """Human-readable one-line summary."""
        where = f" at {self.final_room}" if self.final_room else ""
        return f"{self.outcome.value}{where} after {self.steps} choice(s)"


__all__ = [
    "Choice",
    "CHOICE_ALIASES",
    "parse_choice",
    "ExplorerState",
    "EventKind",
    "ExplorationEvent",
    "ExplorationResult",
]
