"""
Board configuration for DragonSweeper.

Size presets and validated board dimensions.
"""
from dataclasses import dataclass
from typing import Dict


# ============================================================================
# Size Presets
# ============================================================================

@dataclass(frozen=True)
class SizePreset:
    """
    Grid metrics for one size class.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        base_dragons: Dragons per level.
        cell_size: Cell edge length in pixels.
    """

    width: int
    height: int
    base_dragons: int
    cell_size: int


SIZE_PRESETS: Dict[str, SizePreset] = {
    "small": SizePreset(width=20, height=20, base_dragons=50, cell_size=30),
}


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a DragonSweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_dragons: Total dragons to place.
        cell_size: Cell edge length in pixels, for pointer mapping.
        size_class: Preset name the config was built from, if any.
        level: Difficulty level multiplier.
    """

    width: int = 20
    height: int = 20
    num_dragons: int = 50
    cell_size: int = 30
    size_class: str = "custom"
    level: int = 1

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.cell_size < 1:
            raise ValueError("Cell size must be positive")
        if self.level < 1:
            raise ValueError("Level must be at least 1")
        if self.num_dragons < 0:
            raise ValueError("Number of dragons cannot be negative")
        # One cell stays safe for the first click, one more keeps placement finite
        max_dragons = self.width * self.height - 2
        if self.num_dragons > max_dragons:
            raise ValueError(f"Too many dragons (max {max_dragons})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @classmethod
    def from_size_class(cls, size_class: str, level: int = 1) -> "BoardConfig":
        """
        Build a config from a named preset.

        Args:
            size_class: Preset name, e.g. "small".
            level: Difficulty level; dragons = base count * level.

        Returns:
            Validated board configuration.

        Raises:
            ValueError: If the size class is unknown or the level
                yields an impossible dragon count.
        """
        preset = SIZE_PRESETS.get(size_class)
        if preset is None:
            known = ", ".join(sorted(SIZE_PRESETS))
            raise ValueError(f"Unknown size class {size_class!r} (known: {known})")
        if level < 1:
            raise ValueError("Level must be at least 1")
        return cls(
            width=preset.width,
            height=preset.height,
            num_dragons=preset.base_dragons * level,
            cell_size=preset.cell_size,
            size_class=size_class,
            level=level,
        )
