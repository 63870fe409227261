"""
Cell module for DragonSweeper.

Represents individual cells on the board with their status
(covered/revealed/flagged) and content (dragon/adjacency count).
"""
from enum import Enum, auto
from dataclasses import dataclass

from .view import CellView


# ============================================================================
# Constants
# ============================================================================

# Legacy adjacency value meaning "this cell is itself a dragon"
DRAGON = 42


class CellStatus(Enum):
    """Possible visual states of a cell."""

    COVERED = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the DragonSweeper grid.

    Attributes:
        is_dragon: Whether this cell hides a dragon.
        adjacent_dragons: Count of dragons in neighboring cells (0-8).
        status: Current visual status (covered, revealed, or flagged).
    """

    is_dragon: bool = False
    adjacent_dragons: int = 0
    status: CellStatus = CellStatus.COVERED

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it was already
            revealed or is flagged.
        """
        if self.status != CellStatus.COVERED:
            return False
        self.status = CellStatus.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.status == CellStatus.REVEALED:
            return False
        if self.status == CellStatus.COVERED:
            self.status = CellStatus.FLAGGED
        else:
            self.status = CellStatus.COVERED
        return True

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.status == CellStatus.COVERED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.status == CellStatus.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.status == CellStatus.FLAGGED

    @property
    def adjacency(self) -> int:
        """Adjacency as a single value: DRAGON for a dragon, else the count."""
        if self.is_dragon:
            return DRAGON
        return self.adjacent_dragons

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent dragon count
            9: Revealed dragon
        """
        if self.status == CellStatus.COVERED:
            return -1
        if self.status == CellStatus.FLAGGED:
            return -2
        if self.is_dragon:
            return 9
        return self.adjacent_dragons

    def to_view(self) -> CellView:
        """Display category for this cell."""
        if self.status == CellStatus.FLAGGED:
            return CellView.FLAGGED
        if self.status == CellStatus.COVERED:
            return CellView.COVERED
        if self.is_dragon:
            return CellView.DRAGON
        return CellView.count(self.adjacent_dragons)
