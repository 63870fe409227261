"""
Render-side queries for DragonSweeper.

Display categories for cells plus small text helpers used by hosts
that draw the board.
"""
from enum import Enum
from typing import List


# ============================================================================
# Display Categories
# ============================================================================

class CellView(Enum):
    """What a host should draw for a cell."""

    COVERED = "covered"
    FLAGGED = "flagged"
    DRAGON = "dragon"
    COUNT_0 = 0
    COUNT_1 = 1
    COUNT_2 = 2
    COUNT_3 = 3
    COUNT_4 = 4
    COUNT_5 = 5
    COUNT_6 = 6
    COUNT_7 = 7
    COUNT_8 = 8

    @classmethod
    def count(cls, adjacent: int) -> "CellView":
        """Category for a revealed cell with `adjacent` neighboring dragons."""
        if not 0 <= adjacent <= 8:
            raise ValueError(f"Adjacent dragon count out of range: {adjacent}")
        return cls(adjacent)

    @property
    def is_count(self) -> bool:
        return isinstance(self.value, int)


_TEXT_GLYPHS = {
    CellView.COVERED: ".",
    CellView.FLAGGED: "F",
    CellView.DRAGON: "*",
    CellView.COUNT_0: " ",
}


# ============================================================================
# Text Helpers
# ============================================================================

def format_elapsed(seconds: float) -> str:
    """Format elapsed play time as HH:MM:SS."""
    secs = int(seconds)
    return "%02d:%02d:%02d" % ((secs // 3600) % 60, (secs // 60) % 60, secs % 60)


def glyph(view: CellView) -> str:
    """Single character for a cell category."""
    if view in _TEXT_GLYPHS:
        return _TEXT_GLYPHS[view]
    return str(view.value)


def render_text(board) -> str:
    """
    Render a board as a text grid with a status line.

    Args:
        board: Board to render.

    Returns:
        Multi-line string, one line per board row.
    """
    lines: List[str] = []
    header = "   " + " ".join(str(col % 10) for col in range(board.config.width))
    lines.append(header)
    for row, cells in enumerate(board.get_view()):
        lines.append("%2d " % row + " ".join(glyph(view) for view in cells))
    lines.append(
        f"{board.dragons_remaining} Dragons To Find | "
        f"{format_elapsed(board.elapsed_seconds)} | {board.game_state.name}"
    )
    return "\n".join(lines)
