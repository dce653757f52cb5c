"""
Editor settings.

Fixed parameters of a level grid: its extent, the world size of one lattice
step, and defaults applied to new squares.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..model.orientation import Orientation


@dataclass
class EditorSettings:
    """Settings for one editing session.

    Attributes:
        grid_size: Extent of the grid. Coordinates run from -grid_size//2 to
            grid_size//2 on every axis.
        cell_size: World size of one lattice step.
        paper_thickness: Thickness given to the centre square (new squares
            copy it from the template square).
        center_orientation: Plane of the centre square.
        default_orientation: Plane selected when a session starts.
    """
    grid_size: int = 10
    cell_size: float = 1.0
    paper_thickness: float = 0.001
    center_orientation: Orientation = Orientation.XZ
    default_orientation: Orientation = Orientation.XZ

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")

    @property
    def bound(self) -> int:
        """Largest valid absolute coordinate on any axis."""
        return self.grid_size // 2
