"""
Declarative mansion layouts.

A layout lists room names and the parent/side/child links between them by
index. It is validated up front so the builder can stay generic and never
has to check for cycles, shared children or detached rooms.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, Field, model_validator

from mansion.core.maps.models import Side

DEFAULT_TITLE = "Detective Quest"


class RoomLink(BaseModel):
    """Attach ``rooms[child]`` to the ``side`` link of ``rooms[parent]``."""

    parent: int = Field(ge=0)
    side: Side
    child: int = Field(ge=0)


class MansionLayout(BaseModel):
    """
    Static description of a mansion map.

    Invariants enforced on validation:
    - every link index refers to an existing room
    - each room has at most one parent, the root has none
    - a parent never uses the same side twice
    - every room is reachable from the root (single tree, no cycles)
    """

    name: str = DEFAULT_TITLE
    rooms: List[str] = Field(default_factory=list)
    root: int = Field(default=0, ge=0)
    links: List[RoomLink] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_tree(self) -> MansionLayout:
        count = len(self.rooms)
        if count == 0:
            if self.links:
                raise ValueError("links given for a layout without rooms")
            if self.root != 0:
                raise ValueError("root must be 0 for a layout without rooms")
            return self
        if self.root >= count:
            raise ValueError(f"root index {self.root} out of range (rooms: {count})")

        parent_of: Dict[int, int] = {}
        used_sides: Set[Tuple[int, Side]] = set()
        for link in self.links:
            for idx in (link.parent, link.child):
                if idx >= count:
                    raise ValueError(f"room index {idx} out of range (rooms: {count})")
            if link.parent == link.child:
                raise ValueError(f"room {link.child} cannot be its own child")
            if link.child == self.root:
                raise ValueError(f"root room {self.root} cannot have a parent")
            if link.child in parent_of:
                raise ValueError(f"room {link.child} already has parent {parent_of[link.child]}")
            if (link.parent, link.side) in used_sides:
                raise ValueError(f"room {link.parent} already has a {link.side.value} child")
            parent_of[link.child] = link.parent
            used_sides.add((link.parent, link.side))

        unreachable = sorted(set(range(count)) - self.reachable_indices())
        if unreachable:
            raise ValueError(f"rooms not reachable from root: {unreachable}")
        return self

    def reachable_indices(self) -> Set[int]:
        if not self.rooms:
            return set()
        children: Dict[int, List[int]] = {}
        for link in self.links:
            children.setdefault(link.parent, []).append(link.child)
        seen = {self.root}
        stack = [self.root]
        while stack:
            for child in children.get(stack.pop(), []):
                if child not in seen:
                    seen.add(child)
                    stack.append(child)
        return seen

    def child_index(self, parent: int, side: Side) -> Optional[int]:
        for link in self.links:
            if link.parent == parent and link.side == side:
                return link.child
        return None

    def leaf_indices(self) -> List[int]:
        parents = {link.parent for link in self.links}
        return [idx for idx in range(len(self.rooms)) if idx not in parents]

    @property
    def is_empty(self) -> bool:
        return not self.rooms


DEFAULT_LAYOUT = MansionLayout(
    rooms=[
        "Hall de entrada",  # 0, root
        "Sala de Estar",  # 1
        "Biblioteca",  # 2
        "Cozinha",  # 3
        "Jardim de Inverno",  # 4
        "Quarto Principal",  # 5
        "Despensa",  # 6
        "Copa",  # 7
        "Varanda Secreta",  # 8
    ],
    root=0,
    links=[
        RoomLink(parent=0, side=Side.LEFT, child=1),
        RoomLink(parent=0, side=Side.RIGHT, child=2),
        RoomLink(parent=1, side=Side.LEFT, child=3),
        RoomLink(parent=1, side=Side.RIGHT, child=4),
        RoomLink(parent=2, side=Side.RIGHT, child=5),
        RoomLink(parent=3, side=Side.LEFT, child=6),
        RoomLink(parent=3, side=Side.RIGHT, child=7),
        RoomLink(parent=7, side=Side.RIGHT, child=8),
    ],
)


__all__ = ["DEFAULT_TITLE", "DEFAULT_LAYOUT", "MansionLayout", "RoomLink"]
