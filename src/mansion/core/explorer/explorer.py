"""
Navigation state machine.

Walks the player through the room tree from the root until a leaf is
reached, the player exits, the map turns out to be empty or the input
capability stops producing tokens. The tree is only read, never modified.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from mansion.core.errors import ChoiceReadError
from mansion.core.explorer.models import (
    Choice,
    EventKind,
    ExplorationEvent,
    ExplorationResult,
    ExplorerState,
    parse_choice,
)
from mansion.core.maps.layout import DEFAULT_TITLE
from mansion.core.maps.models import Room

logger = logging.getLogger(__name__)

EventSink = Callable[[ExplorationEvent], None]


class ChoiceReader(Protocol):
    """Input capability: one token per call, or ChoiceReadError."""

    def read_token(self) -> str: ...

    def discard_line(self) -> None: ...


def _ignore(event: ExplorationEvent) -> None:
    pass


class Explorer:
    """
    Drives a player through a room tree.

    The machine starts in AT_ROOM(root) and every step() runs one
    display/prompt/dispatch cycle. Exploration-time problems (missing path,
    invalid token, input failure) are handled here and reported as events;
    callers only see the final ExplorationResult.
    """

    def __init__(self, reader: ChoiceReader, emit: Optional[EventSink] = None):
        self.reader = reader
        self.emit = emit or _ignore
        self.state = ExplorerState.AT_ROOM
        self.current: Optional[Room] = None
        self.path: List[str] = []
        self.steps = 0
        self.invalid_attempts = 0
        self.blocked_attempts = 0

    def start(self, root: Optional[Room], title: str = DEFAULT_TITLE) -> ExplorerState:
        """Enter the initial state for ``root``; an absent root ends immediately."""
        self.current = root
        self.path = []
        self.steps = 0
        self.invalid_attempts = 0
        self.blocked_attempts = 0

        if root is None:
            self.state = ExplorerState.EMPTY_MAP
            self.emit(ExplorationEvent(kind=EventKind.EMPTY_MAP))
            logger.info("Mansion map is empty, nothing to explore")
            return self.state

        self.state = ExplorerState.AT_ROOM
        self.path.append(root.name)
        self.emit(ExplorationEvent(kind=EventKind.STARTED, message=title))
        return self.state

    def step(self) -> ExplorerState:
        """Run one cycle in AT_ROOM(current) and return the resulting state."""
        if self.state.is_terminal:
            return self.state
        current = self.current
        if current is None:
            raise RuntimeError("Explorer.step() called before start()")

        self.emit(ExplorationEvent(kind=EventKind.ROOM, room=current.name))

        if current.is_leaf:
            self.state = ExplorerState.TERMINATED_AT_LEAF
            self.emit(ExplorationEvent(kind=EventKind.LEAF_REACHED, room=current.name))
            return self.state

        offered = self.offered_choices(current)
        self.emit(ExplorationEvent(kind=EventKind.CHOICES, room=current.name, choices=offered))

        try:
            token = self.reader.read_token()
        except ChoiceReadError as exc:
            self.state = ExplorerState.INPUT_FAILURE
            self.emit(ExplorationEvent(kind=EventKind.INPUT_FAILED, room=current.name, message=str(exc)))
            logger.warning("Input failed at %s: %s", current.name, exc)
            return self.state
        self.steps += 1

        choice = parse_choice(token)
        if choice is None:
            self.invalid_attempts += 1
            self.emit(ExplorationEvent(kind=EventKind.INVALID_OPTION, room=current.name, token=token))
            self.reader.discard_line()
            return self.state

        if choice is Choice.EXIT:
            self.state = ExplorerState.EXITED
            self.emit(ExplorationEvent(kind=EventKind.EXITED, room=current.name))
            return self.state

        side = choice.side
        target = current.child(side)
        if target is None:
            self.blocked_attempts += 1
            self.emit(ExplorationEvent(kind=EventKind.PATH_MISSING, room=current.name, side=side))
            return self.state

        logger.debug("Moving %s from %s to %s", side.value, current.name, target.name)
        self.current = target
        self.path.append(target.name)
        self.emit(ExplorationEvent(kind=EventKind.MOVED, room=target.name, side=side))
        return self.state

    def explore(self, root: Optional[Room], title: str = DEFAULT_TITLE) -> ExplorationResult:
        """Run the machine from ``root`` to a terminal state."""
        self.start(root, title)
        while not self.state.is_terminal:
            self.step()
        result = self.result()
        logger.info("Exploration finished: %s", result.describe())
        return result

    def result(self) -> ExplorationResult:
        return ExplorationResult(
            outcome=self.state,
            final_room=self.current.name if self.current is not None else None,
            path=list(self.path),
            steps=self.steps,
            invalid_attempts=self.invalid_attempts,
            blocked_attempts=self.blocked_attempts,
        )

    @staticmethod
    def offered_choices(room: Room) -> List[Choice]:
        """Left/right for each present child, exit always."""
        choices = []
        if room.left is not None:
            choices.append(Choice.LEFT)
        if room.right is not None:
            choices.append(Choice.RIGHT)
        choices.append(Choice.EXIT)
        return choices


__all__ = ["Explorer", "ChoiceReader", "EventSink"]
