"""
Pointer-to-grid mapping for DragonSweeper.

Translates host cursor coordinates into board cells.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import BoardConfig


# Default host screen, in pixels
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720


@dataclass(frozen=True)
class BoardLayout:
    """
    Placement of the board on the host screen.

    Attributes:
        origin_x: Screen x of the board's first column.
        origin_y: Screen y of the board's first row.
        cell_size: Cell edge length in pixels.
        width: Number of columns.
        height: Number of rows.
    """

    origin_x: float
    origin_y: float
    cell_size: int
    width: int
    height: int

    @classmethod
    def for_config(
        cls, config: BoardConfig, screen_height: int = SCREEN_HEIGHT
    ) -> "BoardLayout":
        """Two cells in from the left edge, centred vertically."""
        board_h = config.height * config.cell_size
        return cls(
            origin_x=2 * config.cell_size,
            origin_y=screen_height / 2 - board_h / 2,
            cell_size=config.cell_size,
            width=config.width,
            height=config.height,
        )

    @property
    def pixel_width(self) -> int:
        return self.width * self.cell_size

    @property
    def pixel_height(self) -> int:
        return self.height * self.cell_size

    def to_grid(self, x: float, y: float) -> Tuple[int, int]:
        """Map a cursor position to (row, col), which may be off the board."""
        col = math.floor((x - self.origin_x) / self.cell_size)
        row = math.floor((y - self.origin_y) / self.cell_size)
        return row, col

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Get the cell under a cursor position.

        Returns:
            (row, col) tuple, or None if the cursor is off the board.
        """
        row, col = self.to_grid(x, y)
        if 0 <= row < self.height and 0 <= col < self.width:
            return row, col
        return None

    def cell_origin(self, row: int, col: int) -> Tuple[float, float]:
        """Screen position of a cell's corner."""
        return (
            self.origin_x + col * self.cell_size,
            self.origin_y + row * self.cell_size,
        )
