"""
Tests for mansion layout validation.
"""

import pytest
from pydantic import ValidationError

from mansion.core.maps.layout import DEFAULT_LAYOUT, MansionLayout, RoomLink
from mansion.core.maps.models import Side


def _link(parent, side, child):
    return {"parent": parent, "side": side, "child": child}


class TestDefaultLayout:
    """Tests for the built-in mansion."""

    def test_default_layout_rooms(self):
        """The default layout has nine rooms rooted at the hall."""
        assert DEFAULT_LAYOUT.rooms[DEFAULT_LAYOUT.root] == "Hall de entrada"
        assert len(DEFAULT_LAYOUT.rooms) == 9
        assert len(DEFAULT_LAYOUT.links) == len(DEFAULT_LAYOUT.rooms) - 1

    def test_default_layout_leaves(self):
        """The four dead-end rooms are the leaves."""
        leaves = {DEFAULT_LAYOUT.rooms[i] for i in DEFAULT_LAYOUT.leaf_indices()}

        assert leaves == {"Despensa", "Varanda Secreta", "Jardim de Inverno", "Quarto Principal"}

    def test_child_index(self):
        """child_index() finds linked children by side."""
        assert DEFAULT_LAYOUT.child_index(0, Side.LEFT) == 1
        assert DEFAULT_LAYOUT.child_index(2, Side.LEFT) is None


class TestLayoutValidation:
    """Tests for layout invariants."""

    def test_empty_layout_valid(self):
        """A layout without rooms is valid and empty."""
        layout = MansionLayout()

        assert layout.is_empty
        assert layout.reachable_indices() == set()

    def test_side_parsed_from_string(self):
        """Sides given as strings become Side values."""
        layout = MansionLayout(rooms=["A", "B"], links=[_link(0, "left", 1)])

        assert layout.links[0] == RoomLink(parent=0, side=Side.LEFT, child=1)

    def test_unknown_side_rejected(self):
        """Sides other than left/right are rejected."""
        with pytest.raises(ValidationError):
            MansionLayout(rooms=["A", "B"], links=[_link(0, "up", 1)])

    def test_index_out_of_range(self):
        """Link indices must point at existing rooms."""
        with pytest.raises(ValidationError, match="out of range"):
            MansionLayout(rooms=["A", "B"], links=[_link(0, "left", 5)])

    def test_root_out_of_range(self):
        """Root index must point at an existing room."""
        with pytest.raises(ValidationError, match="root index"):
            MansionLayout(rooms=["A"], root=3)

    def test_self_child_rejected(self):
        """A room cannot be its own child."""
        with pytest.raises(ValidationError, match="own child"):
            MansionLayout(rooms=["A"], links=[_link(0, "left", 0)])

    def test_shared_child_rejected(self):
        """A room cannot be owned by two parents."""
        with pytest.raises(ValidationError, match="already has parent"):
            MansionLayout(
                rooms=["A", "B", "C"],
                links=[_link(0, "left", 1), _link(0, "right", 2), _link(1, "left", 2)],
            )

    def test_same_side_twice_rejected(self):
        """A parent uses each side at most once."""
        with pytest.raises(ValidationError, match="already has a left child"):
            MansionLayout(rooms=["A", "B", "C"], links=[_link(0, "left", 1), _link(0, "left", 2)])

    def test_root_with_parent_rejected(self):
        """The root cannot be attached under another room."""
        with pytest.raises(ValidationError, match="cannot have a parent"):
            MansionLayout(rooms=["A", "B"], links=[_link(0, "left", 1), _link(1, "left", 0)])

    def test_cycle_detached_from_root_rejected(self):
        """A cycle among non-root rooms leaves them unreachable."""
        with pytest.raises(ValidationError, match="not reachable"):
            MansionLayout(rooms=["A", "B", "C"], links=[_link(1, "left", 2), _link(2, "left", 1)])

    def test_detached_room_rejected(self):
        """A room no link reaches is rejected."""
        with pytest.raises(ValidationError, match="not reachable"):
            MansionLayout(rooms=["A", "B", "C"], links=[_link(0, "left", 1)])

    def test_links_without_rooms_rejected(self):
        """Links need rooms to point at."""
        with pytest.raises(ValidationError):
            MansionLayout(rooms=[], links=[_link(0, "left", 1)])

    def test_non_zero_root(self):
        """Any room may be designated as root."""
        layout = MansionLayout(rooms=["Leaf", "Root"], root=1, links=[_link(1, "right", 0)])

        assert layout.reachable_indices() == {0, 1}
        assert layout.leaf_indices() == [0]
