"""
DragonSweeper game module.

Provides the board state machine for a Minesweeper-style game where the
mines are dragons, plus the input, layout and view adapters around it.
"""
from .cell import Cell, CellStatus, DRAGON
from .config import BoardConfig, SizePreset, SIZE_PRESETS
from .events import ClickEvent
from .layout import BoardLayout
from .view import CellView, format_elapsed, render_text
from .board import Board, GameState
from .environment import DragonSweeperEnv

__all__ = [
    "Cell",
    "CellStatus",
    "DRAGON",
    "BoardConfig",
    "SizePreset",
    "SIZE_PRESETS",
    "ClickEvent",
    "BoardLayout",
    "CellView",
    "format_elapsed",
    "render_text",
    "Board",
    "GameState",
    "DragonSweeperEnv",
]
