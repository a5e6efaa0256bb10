from __future__ import annotations

"""Error types raised while building, exploring and releasing a mansion."""


class MansionError(RuntimeError):
    """Base class for mansion errors."""


class RoomAllocationError(MansionError):
    """A room could not be allocated. Fatal: the build is aborted."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Memory allocation failed while creating room '{name}'")


class ChoiceReadError(MansionError):
    """The input capability could not produce a choice token."""


class MansionReleasedError(MansionError):
    """The mansion has already been released."""


__all__ = [
    "MansionError",
    "RoomAllocationError",
    "ChoiceReadError",
    "MansionReleasedError",
]
