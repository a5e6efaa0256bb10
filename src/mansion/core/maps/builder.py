"""
Tree builder for mansion maps.

Creates rooms from a validated layout and attaches them strictly downward,
then hands the root to a Mansion container that owns the whole tree.
"""

from __future__ import annotations

import logging
from typing import List

from mansion.core.errors import RoomAllocationError
from mansion.core.maps.layout import MansionLayout
from mansion.core.maps.mansion import Mansion
from mansion.core.maps.models import Room, Side
from mansion.utils.logging import log_calls

logger = logging.getLogger(__name__)


def create_room(name: str) -> Room:
    """
    Allocate a new room with no children.

    The name is truncated to the label capacity if needed.

    Raises:
        RoomAllocationError: If the room cannot be allocated. Not recoverable.
    """
    try:
        return Room(name)
    except MemoryError as exc:
        raise RoomAllocationError(name) from exc


def attach(parent: Room, side: Side, child: Room) -> None:
    """Set the ``side`` link of ``parent`` to ``child``."""
    if side == Side.LEFT:
        parent.left = child
    else:
        parent.right = child


@log_calls()
def build_mansion(layout: MansionLayout) -> Mansion:
    """
    Build the room tree described by ``layout``.

    Args:
        layout: A validated layout (see MansionLayout invariants)

    Returns:
        Mansion owning the root, or an empty Mansion for an empty layout

    Raises:
        RoomAllocationError: If any room cannot be allocated
    """
    if layout.is_empty:
        logger.info("Layout '%s' has no rooms, building empty mansion", layout.name)
        return Mansion(None, allocated=0, title=layout.name)

    rooms: List[Room] = [create_room(name) for name in layout.rooms]
    for link in layout.links:
        attach(rooms[link.parent], link.side, rooms[link.child])

    logger.info("Built mansion '%s' with %d room(s)", layout.name, len(rooms))
    return Mansion(rooms[layout.root], allocated=len(rooms), title=layout.name)


__all__ = ["create_room", "attach", "build_mansion"]
