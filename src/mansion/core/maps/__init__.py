"""
Mansion map module.

Provides the room tree, its declarative layout and the builder/owner pair
that creates and releases it.

Components:
- Room: Node of the binary room tree
- Side: Left or right child link
- MansionLayout: Validated room names plus parent/side/child links
- Mansion: Root-owning container with post-order release
- build_mansion: Builds a Mansion from a layout

Example:
    from mansion.core.maps import DEFAULT_LAYOUT, build_mansion

    with build_mansion(DEFAULT_LAYOUT) as mansion:
        print(mansion.root.name)
"""

from mansion.core.maps.builder import attach, build_mansion, create_room
from mansion.core.maps.layout import DEFAULT_LAYOUT, DEFAULT_TITLE, MansionLayout, RoomLink
from mansion.core.maps.mansion import Mansion, iter_post_order
from mansion.core.maps.models import MAX_NAME_LENGTH, Room, Side, sanitize_name

__all__ = [
    "Room",
    "Side",
    "MAX_NAME_LENGTH",
    "sanitize_name",
    "MansionLayout",
    "RoomLink",
    "DEFAULT_LAYOUT",
    "DEFAULT_TITLE",
    "Mansion",
    "iter_post_order",
    "build_mansion",
    "create_room",
    "attach",
]
