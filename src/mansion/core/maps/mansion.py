"""
Root-owning container for a room tree.

The Mansion owns the root room and, through it, every room in the tree.
Releasing the mansion walks the tree once in post-order, clearing each room's
links after both of its subtrees have been released.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from mansion.core.errors import MansionReleasedError
from mansion.core.maps.layout import DEFAULT_TITLE
from mansion.core.maps.models import Room

logger = logging.getLogger(__name__)


def iter_post_order(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room of the subtree, children (left, right) before their parent."""
    if root is None:
        return
    stack: List[Tuple[Room, bool]] = [(root, False)]
    while stack:
        room, expanded = stack.pop()
        if expanded:
            yield room
            continue
        stack.append((room, True))
        # Right pushed first so the left subtree is emitted first
        if room.right is not None:
            stack.append((room.right, False))
        if room.left is not None:
            stack.append((room.left, False))


class Mansion:
    """
    Owner of a mansion's room tree.

    Tracks how many rooms were allocated and how many have been released so
    callers can check that teardown returned to baseline.

    Use as a context manager to release the tree when the block exits:

        with build_mansion(layout) as mansion:
            explorer.explore(mansion.root)
    """

    def __init__(self, root: Optional[Room], *, allocated: Optional[int] = None, title: str = DEFAULT_TITLE):
        self._root = root
        self.title = title
        self.allocated = allocated if allocated is not None else sum(1 for _ in iter_post_order(root))
        self.released = 0
        self._is_released = False

    @property
    def root(self) -> Optional[Room]:
        if self._is_released:
            raise MansionReleasedError("Mansion has already been released")
        return self._root

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @property
    def is_released(self) -> bool:
        return self._is_released

    @property
    def live_rooms(self) -> int:
        """Rooms allocated but not yet released."""
        return self.allocated - self.released

    def rooms(self) -> List[Room]:
        """All rooms in post-order."""
        return list(iter_post_order(self.root))

    def release(self) -> List[Room]:
        """
        Release the whole tree in a single post-order pass.

        Returns:
            The released rooms in release order

        Raises:
            MansionReleasedError: If the mansion was already released
        """
        if self._is_released:
            raise MansionReleasedError("Mansion has already been released")

        released: List[Room] = []
        for room in iter_post_order(self._root):
            room.left = None
            room.right = None
            released.append(room)
            self.released += 1

        self._root = None
        self._is_released = True
        logger.info("Released %d room(s), %d still live", len(released), self.live_rooms)
        return released

    def __repr__(self) -> str:
        return f"Mansion(title={self.title!r}, allocated={self.allocated}, released={self.released})"

    def __enter__(self) -> Mansion:
        if self._is_released:
            raise MansionReleasedError("Mansion has already been released")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


__all__ = ["Mansion", "iter_post_order"]
