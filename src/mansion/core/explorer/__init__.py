"""
Mansion exploration module.

Components:
- Explorer: Navigation state machine over a room tree
- ChoiceReader: Input capability protocol (one token per call)
- ExplorationEvent / ExplorationResult: Output items and final summary

Example:
    from mansion.core.explorer import Explorer
    from mansion.io.readers import ScriptedChoiceReader

    explorer = Explorer(ScriptedChoiceReader(["left", "left", "left"]), emit=print)
    result = explorer.explore(mansion.root)
"""

from mansion.core.explorer.explorer import ChoiceReader, EventSink, Explorer
from mansion.core.explorer.models import (
    CHOICE_ALIASES,
    Choice,
    EventKind,
    ExplorationEvent,
    ExplorationResult,
    ExplorerState,
    parse_choice,
)

__all__ = [
    "Explorer",
    "ChoiceReader",
    "EventSink",
    "Choice",
    "CHOICE_ALIASES",
    "parse_choice",
    "ExplorerState",
    "EventKind",
    "ExplorationEvent",
    "ExplorationResult",
]
