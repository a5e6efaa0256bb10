"""
Tests for the root-owning Mansion container and its teardown.
"""

import pytest

from mansion.core.errors import MansionReleasedError
from mansion.core.maps import DEFAULT_LAYOUT, Mansion, MansionLayout, Room, build_mansion, iter_post_order


class TestPostOrder:
    """Tests for iter_post_order."""

    def test_children_before_parent(self, mansion):
        """No room comes before any of its children."""
        order = list(iter_post_order(mansion.root))
        position = {id(room): idx for idx, room in enumerate(order)}

        for room in order:
            for child in room.children():
                assert position[id(child)] < position[id(room)]

    def test_each_room_once(self, mansion):
        """Every room is visited exactly once."""
        order = list(iter_post_order(mansion.root))

        assert len(order) == 9
        assert len({id(room) for room in order}) == 9

    def test_parent_links_equal_rooms_minus_one(self, mansion):
        """A tree has one parent link fewer than rooms."""
        rooms = mansion.rooms()

        assert sum(len(room.children()) for room in rooms) == len(rooms) - 1

    def test_left_subtree_first(self, mansion):
        """Left subtree is walked before the right one."""
        names = [room.name for room in iter_post_order(mansion.root)]

        assert names == [
            "Despensa",
            "Varanda Secreta",
            "Copa",
            "Cozinha",
            "Jardim de Inverno",
            "Sala de Estar",
            "Quarto Principal",
            "Biblioteca",
            "Hall de entrada",
        ]

    def test_empty_tree(self):
        """An absent root yields nothing."""
        assert list(iter_post_order(None)) == []

    def test_deep_tree_no_recursion_limit(self):
        """A degenerate chain deeper than the recursion limit is walked iteratively."""
        root = Room("0")
        current = root
        for i in range(1, 5000):
            current.left = Room(str(i))
            current = current.left

        assert sum(1 for _ in iter_post_order(root)) == 5000


class TestRelease:
    """Tests for Mansion.release."""

    def test_release_returns_to_baseline(self, mansion):
        """Allocation and release counters match after release."""
        released = mansion.release()

        assert len(released) == mansion.allocated
        assert len({id(room) for room in released}) == mansion.allocated
        assert mansion.live_rooms == 0
        assert mansion.is_released

    def test_release_clears_links(self, mansion):
        """Released rooms no longer point at children."""
        released = mansion.release()

        assert all(room.left is None and room.right is None for room in released)

    def test_release_is_post_order(self, mansion):
        """Release order is post-order."""
        expected = [room.name for room in iter_post_order(mansion.root)]

        assert [room.name for room in mansion.release()] == expected

    def test_double_release_rejected(self, mansion):
        """A second release is rejected and counts stay put."""
        mansion.release()

        with pytest.raises(MansionReleasedError):
            mansion.release()
        assert mansion.released == mansion.allocated

    def test_root_unavailable_after_release(self, mansion):
        """The root cannot be reached after release."""
        mansion.release()

        with pytest.raises(MansionReleasedError):
            _ = mansion.root

    def test_context_manager_releases_once(self):
        """Leaving the with block releases the tree."""
        with build_mansion(DEFAULT_LAYOUT) as mansion:
            assert mansion.live_rooms == 9

        assert mansion.is_released
        assert mansion.live_rooms == 0

    def test_context_manager_releases_on_error(self):
        """Teardown runs even when the block raises."""
        mansion = build_mansion(DEFAULT_LAYOUT)

        with pytest.raises(KeyError):
            with mansion:
                raise KeyError("boom")
        assert mansion.live_rooms == 0

    def test_empty_mansion_release(self):
        """Releasing an empty mansion releases nothing."""
        mansion = build_mansion(MansionLayout())

        assert mansion.release() == []
        assert mansion.live_rooms == 0

    def test_subtree_release_only_counts_subtree(self):
        """Counting rooms of a hand-built subtree covers descendants and no more."""
        root = Room("root", left=Room("a", left=Room("b")), right=Room("c"))
        sub = Mansion(root.left)

        assert sub.allocated == 2
        assert [room.name for room in sub.release()] == ["b", "a"]
        assert root.right.name == "c"
