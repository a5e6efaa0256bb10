"""
Shared fixtures for mansion tree tests.
"""

from typing import List

import pytest

from mansion.core.explorer import ExplorationEvent
from mansion.core.maps import DEFAULT_LAYOUT, Mansion, build_mansion


@pytest.fixture
def mansion() -> Mansion:
    """Fresh default mansion for every test; trees are released by tests that need it."""
    return build_mansion(DEFAULT_LAYOUT)


@pytest.fixture
def events() -> List[ExplorationEvent]:
    """Collecting output capability: pass ``events.append`` as ``emit``."""
    return []
