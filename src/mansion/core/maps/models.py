"""
Room tree data models.

A mansion map is a binary tree of rooms:
- Room: a node with a display name and optional left/right children
- Side: which child link of a room is addressed

Each child link is either absent or exclusively owned by its parent. There
are no back references, so a subtree is owned by exactly one room.

Tree Structure (default layout):
    Hall de entrada
    ├── Sala de Estar
    │   ├── Cozinha
    │   │   ├── Despensa
    │   │   └── Copa
    │   │       └── (right) Varanda Secreta
    │   └── Jardim de Inverno
    └── (right) Biblioteca
        └── (right) Quarto Principal
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Label buffer size, one slot reserved for the terminator.
MAX_NAME_LENGTH = 50


class Side(str, Enum):
    """Child link of a room."""

    LEFT = "left"
    RIGHT = "right"


def sanitize_name(name: str) -> str:
    """Strip NUL characters and truncate to ``MAX_NAME_LENGTH - 1`` characters."""
    if not isinstance(name, str):
        raise TypeError(f"Room name must be a string, got {type(name).__name__}")
    return name.replace("\x00", "")[: MAX_NAME_LENGTH - 1]


@dataclass(eq=False)
class Room:
    """
    A room (tree node) of the mansion.

    Rooms compare by identity: the name is a display label only and plays no
    part in equality or ordering.
    """

    name: str
    left: Optional[Room] = field(default=None, repr=False)
    right: Optional[Room] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.name = sanitize_name(self.name)

    @property
    def is_leaf(self) -> bool:
        """A room without paths to explore ends the journey."""
        return self.left is None and self.right is None

    def child(self, side: Side) -> Optional[Room]:
        return self.left if side == Side.LEFT else self.right

    def children(self) -> List[Room]:
        """Present children, left before right."""
        return [c for c in (self.left, self.right) if c is not None]


__all__ = ["MAX_NAME_LENGTH", "Side", "Room", "sanitize_name"]
