"""Exploration Service: builds a mansion, runs one exploration and releases it."""

from __future__ import annotations

import logging
from typing import Optional

from mansion.core.explorer import ChoiceReader, EventSink, ExplorationResult, Explorer
from mansion.core.maps import Mansion, MansionLayout, build_mansion

logger = logging.getLogger(__name__)


class ExplorationService:
    """
    High-level service for a single playthrough.

    Owns the full lifecycle of the room tree: build once, explore read-only,
    release once in post-order whatever the terminal state was.
    """

    def __init__(self, reader: ChoiceReader, emit: Optional[EventSink] = None):
        """
        Initialize exploration service.

        Args:
            reader: Input capability producing choice tokens
            emit: Output capability receiving exploration events
        """
        self.reader = reader
        self.emit = emit
        # Latest playthrough, kept so callers can report its release counters
        self.last_mansion: Optional[Mansion] = None

    def explore_mansion(self, mansion: Mansion) -> ExplorationResult:
        """
        Explore an already built mansion and release it afterwards.

        Raises:
            MansionReleasedError: If the mansion was released before
        """
        self.last_mansion = mansion
        with mansion:
            result = Explorer(self.reader, self.emit).explore(mansion.root, title=mansion.title)
        logger.info("Mansion '%s' released, %d room(s) still live", mansion.title, mansion.live_rooms)
        return result

    def run(self, layout: MansionLayout) -> ExplorationResult:
        """
        Build the mansion described by ``layout`` and explore it.

        Raises:
            RoomAllocationError: If the tree cannot be built (fatal)
        """
        return self.explore_mansion(build_mansion(layout))


__all__ = ["ExplorationService"]
