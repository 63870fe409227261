"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dragonsweeper import Board, BoardConfig, Cell


# ============================================================================
# Test Doubles
# ============================================================================

class ScriptedRng:
    """Random source that returns a fixed sequence of integers."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)

    def integers(self, high: int) -> int:
        value = self._values.pop(0)
        assert 0 <= value < high
        return value


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at t=100s."""
    return FakeClock()


@pytest.fixture
def default_board() -> Board:
    """Create a small level 1 board (20x20, 50 dragons)."""
    return Board(rng=np.random.default_rng(7))


@pytest.fixture
def empty_board() -> Board:
    """Create a 3x3 board with no dragons for flood testing."""
    return Board(BoardConfig(3, 3, 0))


@pytest.fixture
def one_dragon_board(clock: FakeClock) -> Board:
    """3x3 board whose single dragon will land on (0, 0)."""
    return Board(BoardConfig(3, 3, 1), rng=ScriptedRng([0, 0]), clock=clock)


@pytest.fixture
def two_dragon_board(clock: FakeClock) -> Board:
    """
    3x3 board whose dragons will land on (0, 0) and (0, 2).

    Adjacent counts once placed:
        * 2 *
        1 2 1
        0 0 0
    """
    return Board(
        BoardConfig(3, 3, 2), rng=ScriptedRng([0, 0, 0, 2]), clock=clock
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def dragon_cell() -> Cell:
    """Create a cell holding a dragon."""
    return Cell(is_dragon=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """Small preset at level 1."""
    return BoardConfig.from_size_class("small", 1)


@pytest.fixture
def scripted_rng():
    """Factory for random sources with a fixed sequence of integers."""
    return ScriptedRng
