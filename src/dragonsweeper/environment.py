"""
Gymnasium environment wrapper for DragonSweeper.

Drives the board headlessly, one click per step, for scripted players
and agents.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board
from .config import BoardConfig
from .events import ClickEvent
from .view import render_text


# Click kinds, in action-space order
REVEAL = 0
FLAG = 1
CHORD = 2
NUM_CLICK_KINDS = 3


# ============================================================================
# DragonSweeper Environment
# ============================================================================

class DragonSweeperEnv(gym.Env):
    """
    Gymnasium environment for DragonSweeper.

    Observation:
        2D array where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent dragon count
        - 9 = revealed dragon

    Actions:
        Discrete action space of size 3 * width * height.
        Action a is click kind a // cells (reveal, flag, chord) at
        cell a % cells, i.e. (cell // width, cell % width).

    Rewards:
        - +1 for each click that reveals safe cells
        - +10 for winning the game
        - -10 for uncovering a dragon
        - 0 for toggling a flag
        - -0.1 for a click that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the DragonSweeper environment.

        Args:
            config: Board configuration (default: small board, level 1).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig.from_size_class("small")
        self.board = Board(self.config)
        self.render_mode = render_mode
        self._num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(NUM_CLICK_KINDS * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new game.

        Args:
            seed: Random seed for dragon placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.rng = self.np_random
        self.board.reset()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one click.

        Args:
            action: Encoded click kind and cell.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        kind, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._apply_click(kind, row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[int, int, int]:
        """Convert a flat action to (kind, row, col)."""
        kind, cell = divmod(int(action), self._num_cells)
        row, col = divmod(cell, self.config.width)
        return kind, row, col

    def encode_action(self, kind: int, row: int, col: int) -> int:
        """Convert (kind, row, col) to a flat action."""
        return kind * self._num_cells + row * self.config.width + col

    def _apply_click(self, kind: int, row: int, col: int) -> float:
        """
        Send the click through the board's input path and score it.

        Returns:
            Reward value.
        """
        click = ClickEvent.at_cell(
            row,
            col,
            self.board.layout,
            left=kind in (REVEAL, CHORD),
            right=kind in (FLAG, CHORD),
        )
        if not self.board.update(click):
            return -0.1

        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        if kind == FLAG:
            return 0.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        info = self.board.summary()
        info.update({
            "steps": self._steps,
            "dragons_remaining": self.board.dragons_remaining,
            "covered": len(self.board.get_valid_actions()),
        })
        return info

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.board)
        if self.render_mode == "human":
            print(render_text(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Returns:
            Boolean array where True = useful action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self.board.get_cell(row, col)
                if cell.is_covered:
                    mask[self.encode_action(REVEAL, row, col)] = True
                if not cell.is_revealed:
                    mask[self.encode_action(FLAG, row, col)] = True
                elif cell.adjacent_dragons > 0:
                    mask[self.encode_action(CHORD, row, col)] = True
        return mask
