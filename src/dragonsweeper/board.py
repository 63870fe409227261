"""
Board module for DragonSweeper.

Implements the game board with deferred dragon placement, flood-fill
revealing, flag/chord input handling and game state management.
"""
import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellStatus
from .config import BoardConfig
from .events import ClickEvent
from .layout import BoardLayout
from .view import CellView

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


def _default_config() -> BoardConfig:
    return BoardConfig.from_size_class("small", 1)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    DragonSweeper game board.

    Owns the grid of cells and every change made to it. Hosts drive it
    with one update() per frame and read it back through the view
    accessors.

    Attributes:
        config: Board dimensions and dragon count.
        rng: Random source for dragon placement; anything with a
            numpy Generator style integers() method.
        clock: Returns the current time in seconds.
    """

    config: BoardConfig = field(default_factory=_default_config)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _layout: Optional[BoardLayout] = field(default=None, repr=False)
    _game_state: GameState = GameState.PLAYING
    _dragons_placed: bool = False
    _cells_revealed: int = 0
    _start_time: Optional[float] = field(default=None, repr=False)
    _end_time: Optional[float] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create an empty grid and clear all per-game state."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._layout = BoardLayout.for_config(self.config)
        self._game_state = GameState.PLAYING
        self._dragons_placed = False
        self._cells_revealed = 0
        self._start_time = None
        self._end_time = None

    def configure(self, size_class: str, level: int = 1) -> None:
        """
        Start a fresh game on a preset board.

        Args:
            size_class: Preset name, e.g. "small".
            level: Difficulty level; dragons = base count * level.

        Raises:
            ValueError: If the size class or level is invalid. The
                current game is left untouched in that case.
        """
        config = BoardConfig.from_size_class(size_class, level)
        self.config = config
        self._init_grid()
        logger.info(
            "Configured %s board %dx%d with %d dragons",
            size_class, config.width, config.height, config.num_dragons,
        )

    def reset(self) -> None:
        """Reset board to initial state for a new game of the same size."""
        self._init_grid()

    def spawn_dragons(self, safe_row: int, safe_col: int) -> bool:
        """
        Place dragons randomly, keeping one cell dragon-free.

        Args:
            safe_row: Row of the cell that must stay safe.
            safe_col: Column of the cell that must stay safe.

        Returns:
            True if dragons were placed, False if already placed.

        Raises:
            ValueError: If the safe cell is off the board.
        """
        if self._dragons_placed:
            return False
        if not self._is_valid_position(safe_row, safe_col):
            raise ValueError(f"Safe cell ({safe_row}, {safe_col}) is off the board")

        placed = 0
        while placed < self.config.num_dragons:
            row = int(self.rng.integers(self.config.height))
            col = int(self.rng.integers(self.config.width))
            if (row, col) == (safe_row, safe_col):
                continue
            cell = self._grid[row][col]
            if cell.is_dragon:
                continue
            cell.is_dragon = True
            for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                self._grid[neighbor_row][neighbor_col].adjacent_dragons += 1
            placed += 1

        self._dragons_placed = True
        self._start_time = self.clock()
        logger.debug(
            "Spawned %d dragons avoiding (%d, %d)", placed, safe_row, safe_col
        )
        return True

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, row: int, col: int, force_neighbors: bool = False) -> int:
        """
        Reveal a cell and flood outwards through empty cells.

        Cells with no adjacent dragons open all their neighbors, so a
        connected empty region is revealed along with its numbered
        border. A forced call leaves the cell itself alone and opens
        its neighbors whatever its count.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.
            force_neighbors: Open the neighbors of an already revealed cell.

        Returns:
            Number of cells newly revealed.
        """
        if self._game_state != GameState.PLAYING:
            return 0

        revealed = 0
        detonated = None
        queue = deque([(row, col, force_neighbors)])
        while queue:
            cur_row, cur_col, forced = queue.popleft()
            if not self._is_valid_position(cur_row, cur_col):
                continue
            cell = self._grid[cur_row][cur_col]
            if not forced:
                if not cell.reveal():
                    continue
                revealed += 1
                if cell.is_dragon:
                    detonated = detonated or (cur_row, cur_col)
                    continue
                self._cells_revealed += 1
            if forced or cell.adjacent_dragons == 0:
                for neighbor in self._get_neighbors(cur_row, cur_col):
                    queue.append((neighbor[0], neighbor[1], False))

        if detonated is not None:
            self._lose(*detonated)
        else:
            self._check_win_condition()
        return revealed

    def chord(self, row: int, col: int) -> int:
        """
        Clear around a revealed cell.

        Every covered neighbor is revealed; flagged neighbors and the
        cell itself are left as they are.

        Returns:
            Number of cells newly revealed.
        """
        cell = self.get_cell(row, col)
        if cell is None or not cell.is_revealed:
            return 0
        return self.uncover(row, col, force_neighbors=True)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        if not self._grid[row][col].toggle_flag():
            return False
        self._check_win_condition()
        return True

    def handle_click(
        self, row: int, col: int, left: bool = False, right: bool = False
    ) -> bool:
        """
        Apply one click to a board cell.

        Both buttons over a revealed cell chord it, the right button
        alone flags, the left button alone reveals (placing dragons on
        the first reveal of the game).

        Returns:
            True if the board changed.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False

        if left and right:
            return self.chord(row, col) > 0
        if right:
            return self.toggle_flag(row, col)
        if left:
            # Flagged or revealed targets reveal nothing, so they must not start the game
            if not self._dragons_placed and self._grid[row][col].is_covered:
                self.spawn_dragons(row, col)
            return self.uncover(row, col) > 0
        return False

    def update(self, click: Optional[ClickEvent]) -> bool:
        """
        Process this frame's pointer input.

        Args:
            click: Pointer event, or None when nothing was clicked.

        Returns:
            True if the board changed.
        """
        if click is None or not click.is_click:
            return False
        position = self._layout.cell_at(click.x, click.y)
        if position is None:
            return False
        row, col = position
        return self.handle_click(row, col, left=click.left, right=click.right)

    # ========================================================================
    # End Conditions
    # ========================================================================

    def _lose(self, row: int, col: int) -> None:
        """End the game and show every dragon that was not flagged."""
        self._game_state = GameState.LOST
        self._end_time = self.clock()
        for grid_row in self._grid:
            for cell in grid_row:
                if cell.is_dragon and cell.is_covered:
                    cell.status = CellStatus.REVEALED
        logger.info("Dragon uncovered at (%d, %d); game lost", row, col)

    def _check_win_condition(self) -> None:
        """Win when every safe cell is revealed or exactly the dragons are flagged."""
        if not self._dragons_placed or self._game_state != GameState.PLAYING:
            return
        safe_cells = self.config.total_cells - self.config.num_dragons
        if self._cells_revealed >= safe_cells or self._all_dragons_flagged():
            self._game_state = GameState.WON
            self._end_time = self.clock()
            logger.info("All dragons found; game won")

    def _all_dragons_flagged(self) -> bool:
        """Check if the flagged cells are exactly the dragon cells."""
        for grid_row in self._grid:
            for cell in grid_row:
                if cell.is_flagged != cell.is_dragon:
                    return False
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def dragons_placed(self) -> bool:
        return self._dragons_placed

    @property
    def layout(self) -> BoardLayout:
        return self._layout

    @property
    def flagged_count(self) -> int:
        return sum(cell.is_flagged for grid_row in self._grid for cell in grid_row)

    @property
    def dragons_remaining(self) -> int:
        """Dragons still to flag; negative if the player over-flags."""
        return self.config.num_dragons - self.flagged_count

    @property
    def elapsed_seconds(self) -> float:
        """Seconds since dragons were placed, frozen once the game ends."""
        if self._start_time is None:
            return 0.0
        end = self._end_time if self._end_time is not None else self.clock()
        return max(0.0, end - self._start_time)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def status(self, row: int, col: int) -> Optional[CellStatus]:
        """Get status at position, or None if invalid."""
        cell = self.get_cell(row, col)
        return cell.status if cell is not None else None

    def cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Get display category at position, or None if invalid."""
        cell = self.get_cell(row, col)
        return cell.to_view() if cell is not None else None

    def get_view(self) -> List[List[CellView]]:
        """Display category for every cell, row by row."""
        return [[cell.to_view() for cell in grid_row] for grid_row in self._grid]

    def dragon_positions(self) -> List[Tuple[int, int]]:
        """Positions of all placed dragons."""
        return [
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_dragon
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = covered
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed dragon
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are covered.
        """
        actions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if self._grid[row][col].status == CellStatus.COVERED:
                    actions.append((row, col))
        return actions

    def summary(self) -> Dict[str, Any]:
        """Board metrics as a plain dictionary."""
        return {
            "width": self.config.width,
            "height": self.config.height,
            "dragons": self.config.num_dragons,
            "cell_size": self.config.cell_size,
            "game_state": self._game_state.name,
        }

    def __str__(self) -> str:
        return str(self.summary())
