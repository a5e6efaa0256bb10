"""Service Layer: Exploration orchestration."""

from __future__ import annotations

from .exploration_service import ExplorationService

__all__ = [
    "ExplorationService",
]
