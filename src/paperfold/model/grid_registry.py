"""
Grid registry: the authoritative map from lattice coordinates to squares.

The registry owns square registration and the joint arena. It does not know
how joints are computed (see editor.adjacency) and it never destroys a square
on its own; remove_reference() only forgets it.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..config.settings import EditorSettings
from .data_model import GridCoord, JointArena, ORIGIN, Square
from .orientation import Axis, Orientation, normal_axis

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]


class GridError(Exception):
    """Base class for registry misuse."""

    def __init__(self, coord: GridCoord, message: str):
        self.coord = coord
        super().__init__(message)


class OccupiedCellError(GridError):
    """A square is already registered at the coordinate."""

    def __init__(self, coord: GridCoord):
        super().__init__(coord, f"Cell {coord} is already occupied")


class OutOfRangeError(GridError):
    """The coordinate lies outside the grid bound."""

    def __init__(self, coord: GridCoord, bound: int):
        self.bound = bound
        super().__init__(coord, f"Cell {coord} is outside the grid bound of +/-{bound}")


class MissingCenterError(GridError):
    """The registry was cleared and has no centre square."""

    def __init__(self):
        super().__init__(ORIGIN, "The registry has no center square; call reset() first")


class GridRegistry:
    """Sparse registry of squares on a bounded cubic lattice.

    A centre square is created at (0, 0, 0) on construction. It is
    registered like any other square; protecting it from removal is enforced
    by the adjacency engine, which refuses to remove anything at the centre
    coordinate.
    """

    def __init__(self, settings: Optional[EditorSettings] = None):
        self.settings = settings or EditorSettings()
        self._cells: Dict[GridCoord, str] = {}
        self._squares: Dict[str, Square] = {}
        self.joints = JointArena()
        self._center_id: Optional[str] = None
        self._create_center()

    def _create_center(self):
        center = Square.create(ORIGIN, self.settings.center_orientation,
                               paper_thickness=self.settings.paper_thickness)
        self.set_square_at(ORIGIN, center)
        self._center_id = center.id

    # ---------------------------------------------------------------
    # Bounds
    # ---------------------------------------------------------------

    @property
    def bound(self) -> int:
        return self.settings.bound

    @property
    def center_coord(self) -> GridCoord:
        return ORIGIN

    def in_bounds(self, coord: GridCoord) -> bool:
        b = self.bound
        return all(-b <= c <= b for c in coord)

    def clamp(self, coord: GridCoord) -> GridCoord:
        b = self.bound
        return GridCoord(*(max(-b, min(b, c)) for c in coord))

    # ---------------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------------

    def square_at(self, coord: GridCoord) -> Optional[Square]:
        """Square registered at coord, or None."""
        square_id = self._cells.get(coord)
        if square_id is None:
            return None
        return self._squares[square_id]

    def square_by_id(self, square_id: str) -> Optional[Square]:
        return self._squares.get(square_id)

    def center(self) -> Square:
        """The centre square. Exists until clear() is called.

        Raises:
            MissingCenterError: the registry was cleared
        """
        if self._center_id is None:
            raise MissingCenterError()
        return self._squares[self._center_id]

    def is_center(self, square: Square) -> bool:
        return square.id == self._center_id

    def squares(self) -> List[Square]:
        return list(self._squares.values())

    def occupied_cells(self) -> Dict[GridCoord, str]:
        """Map of all occupied cells to their square ids."""
        return dict(self._cells)

    def __len__(self) -> int:
        return len(self._squares)

    def __contains__(self, coord: GridCoord) -> bool:
        return coord in self._cells

    # ---------------------------------------------------------------
    # Mutation
    # ---------------------------------------------------------------

    def set_square_at(self, coord: GridCoord, square: Square):
        """Register a square at an unoccupied, in-range coordinate.

        Raises:
            OutOfRangeError: coord lies outside the grid bound
            OccupiedCellError: another square is already registered there
        """
        if not self.in_bounds(coord):
            raise OutOfRangeError(coord, self.bound)
        if coord in self._cells:
            raise OccupiedCellError(coord)
        self._cells[coord] = square.id
        self._squares[square.id] = square

    def remove_reference(self, coord: GridCoord) -> Optional[Square]:
        """Forget the square at coord without touching its joints.

        Returns:
            The square that was registered there, or None
        """
        square_id = self._cells.pop(coord, None)
        if square_id is None:
            return None
        return self._squares.pop(square_id)

    def clear(self):
        """Drop every square (the centre too) and every joint."""
        self._cells.clear()
        self._squares.clear()
        self.joints.clear()
        self._center_id = None
        logger.debug("Registry cleared")

    def reset(self):
        """Clear the registry and recreate the centre square."""
        self.clear()
        self._create_center()

    # ---------------------------------------------------------------
    # World space
    # ---------------------------------------------------------------

    def absolute_position(self, coord: GridCoord) -> Vec3:
        """World position of a lattice coordinate."""
        pos = np.asarray(coord.to_tuple(), dtype=float) * self.settings.cell_size
        return tuple(float(v) for v in pos)

    def axis_parities(self, orientation: Orientation) -> Tuple[int, int, int]:
        """Parity (0 even, 1 odd) of each axis for squares in this plane.

        Squares are two steps wide, so squares sharing a plane with the
        centre sit on even cells. An axis is odd exactly when it is the
        normal of the plane or the normal of the centre's plane, not both.
        With an XZ centre: XZ=(even, even, even), YZ=(odd, odd, even),
        XY=(even, odd, odd).
        """
        own = normal_axis(orientation)
        center = normal_axis(self.settings.center_orientation)
        return tuple(int((axis == own) != (axis == center)) for axis in (Axis.X, Axis.Y, Axis.Z))

    def is_aligned(self, coord: GridCoord, orientation: Orientation) -> bool:
        """True if a square of this orientation at coord lines up with the centre."""
        return all(c % 2 == p for c, p in zip(coord, self.axis_parities(orientation)))

    def nearest_square_pos(self, world_pos: Iterable[float],
                           orientation: Orientation) -> GridCoord:
        """Nearest square-aligned coordinate to a world position.

        Each axis snaps to the nearest integer of the parity the plane
        requires (see axis_parities), then clamps to the largest in-range
        value of that parity.
        """
        world = tuple(world_pos)
        scaled = np.asarray(world, dtype=float) / self.settings.cell_size
        parities = np.asarray(self.axis_parities(orientation))
        snapped = 2 * np.rint((scaled - parities) / 2) + parities

        limits = np.where(self.bound % 2 == parities, self.bound, self.bound - 1)
        snapped = np.clip(snapped, -limits, limits).astype(int)
        coord = GridCoord(*(int(v) for v in snapped))
        logger.debug(f"Snapped {world} on {orientation} plane to {coord}")
        return coord
