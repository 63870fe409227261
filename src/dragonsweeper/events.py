"""
Input events delivered to the board by its host.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .layout import BoardLayout


@dataclass(frozen=True)
class ClickEvent:
    """
    One frame's pointer input.

    Attributes:
        left: Left button pressed.
        right: Right button pressed.
        x: Cursor x in screen pixels.
        y: Cursor y in screen pixels.
    """

    left: bool = False
    right: bool = False
    x: float = 0.0
    y: float = 0.0

    @property
    def is_chord(self) -> bool:
        """Both buttons pressed together."""
        return self.left and self.right

    @property
    def is_click(self) -> bool:
        """Any button pressed."""
        return self.left or self.right

    @classmethod
    def at_cell(
        cls,
        row: int,
        col: int,
        layout: "BoardLayout",
        left: bool = False,
        right: bool = False,
    ) -> "ClickEvent":
        """Build an event with the cursor in the middle of a cell."""
        x, y = layout.cell_origin(row, col)
        half = layout.cell_size / 2
        return cls(left=left, right=right, x=x + half, y=y + half)
