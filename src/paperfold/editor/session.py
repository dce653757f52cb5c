"""
Editor session: the state a level designer edits against.

Holds the selected orientation, the reference plane new squares are picked
on, and the template square new squares copy their paper settings from.
Placement and removal are delegated to the AdjacencyEngine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..config.settings import EditorSettings
from ..model.data_model import GridCoord, Square
from ..model.grid_registry import GridRegistry
from ..model.orientation import Orientation, normal_axis, orientation_from_angles, plane_angles
from ..validation import ValidationResult, validate_registry
from .adjacency import AdjacencyEngine
from .results import EditResult, ErrorCode

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class ReferencePlane:
    """Placement of the editing plane visual."""
    orientation: Orientation
    offset: int                 # Lattice position along the normal axis
    position: Vec3              # World position of the plane origin
    angles: Vec3                # Euler angles of the plane mesh
    visible: bool = False


class EditorSession:
    """Interactive editing state over one grid registry."""

    def __init__(self, registry: Optional[GridRegistry] = None,
                 settings: Optional[EditorSettings] = None):
        if registry is None:
            registry = GridRegistry(settings)
        self.registry = registry
        self.engine = AdjacencyEngine(registry)
        self.orientation = registry.settings.default_orientation
        self.plane_offset = self._aligned_offset(self.orientation, 0)
        self.plane_visible = False
        self._closed = False
        self._template: Square = registry.center()
        self.reference_plane = self._compute_plane()

    # ---------------------------------------------------------------
    # Editing
    # ---------------------------------------------------------------

    def place_square(self, coord, orientation: Optional[Orientation] = None) -> EditResult:
        """Place a square, returning the full outcome."""
        coord = GridCoord.of(coord)
        if self._closed:
            return self._rejected_closed(coord)
        orientation = orientation or self.orientation
        result = self.engine.place_square(coord, orientation,
                                          paper_thickness=self._template.paper_thickness)
        if not result.success:
            logger.warning(f"Add rejected at {coord}: {result.error}")
        return result

    def delete_square(self, coord) -> EditResult:
        """Remove a square, returning the full outcome."""
        coord = GridCoord.of(coord)
        if self._closed:
            return self._rejected_closed(coord)
        result = self.engine.remove_square(coord)
        if not result.success:
            logger.warning(f"Remove rejected at {coord}: {result.error}")
            return result
        if result.square is self._template:
            self._template = self.registry.center()
        return result

    def _rejected_closed(self, coord: GridCoord) -> EditResult:
        logger.warning(f"Edit rejected at {coord}: the session was torn down")
        return EditResult.rejected(coord, ErrorCode.SESSION_CLOSED, "The session was torn down")

    def add_square(self, coord) -> bool:
        """Place a square with the current orientation. True if one was created."""
        return self.place_square(coord).success

    def remove_square(self, coord) -> bool:
        """Remove the square at coord. True if one was removed."""
        return self.delete_square(coord).success

    # ---------------------------------------------------------------
    # Template
    # ---------------------------------------------------------------

    @property
    def template(self) -> Square:
        """Square new squares copy their paper settings from."""
        return self._template

    def set_template(self, coord) -> bool:
        square = self.registry.square_at(GridCoord.of(coord))
        if square is None:
            return False
        self._template = square
        return True

    # ---------------------------------------------------------------
    # Reference plane
    # ---------------------------------------------------------------

    def set_reference_plane(self, orientation: Orientation, offset: int) -> ReferencePlane:
        """Select the editing plane.

        The offset is clamped into the grid, then moved one step towards the
        origin if squares of this orientation cannot sit at it.
        """
        self.orientation = orientation
        self.plane_offset = self._aligned_offset(orientation, offset)
        self.reference_plane = self._compute_plane()
        return self.reference_plane

    def _aligned_offset(self, orientation: Orientation, offset: int) -> int:
        bound = self.registry.bound
        offset = max(-bound, min(bound, int(offset)))
        parity = self.registry.axis_parities(orientation)[normal_axis(orientation).value]
        if (offset - parity) % 2:
            offset += -1 if offset > 0 else 1
        return offset

    def show_plane(self) -> ReferencePlane:
        self.plane_visible = True
        self.reference_plane = self._compute_plane()
        return self.reference_plane

    def hide_plane(self) -> ReferencePlane:
        self.plane_visible = False
        self.reference_plane = self._compute_plane()
        return self.reference_plane

    def _compute_plane(self) -> ReferencePlane:
        return ReferencePlane(
            orientation=self.orientation,
            offset=self.plane_offset,
            position=self.pos_on_plane((0.0, 0.0, 0.0)),
            angles=plane_angles(self.orientation),
            visible=self.plane_visible,
        )

    def pos_on_plane(self, approx_pos: Iterable[float]) -> Vec3:
        """Project a world point onto the reference plane along its normal."""
        pos = [float(v) for v in approx_pos]
        axis = normal_axis(self.orientation)
        pos[axis.value] = self.plane_offset * self.registry.settings.cell_size
        return tuple(pos)

    # ---------------------------------------------------------------
    # Picking
    # ---------------------------------------------------------------

    def nearest_square_pos(self, world_pos: Iterable[float],
                           orientation: Optional[Orientation] = None) -> GridCoord:
        return self.registry.nearest_square_pos(world_pos, orientation or self.orientation)

    def coord_from_plane_point(self, world_pos: Iterable[float]) -> GridCoord:
        """Lattice coordinate for a point picked on the reference plane."""
        return self.nearest_square_pos(self.pos_on_plane(world_pos))

    def coord_from_square_pick(self, world_pos: Iterable[float],
                               angles: Vec3) -> Tuple[GridCoord, Orientation]:
        """Coordinate and orientation of a picked square, from its transform."""
        orientation = orientation_from_angles(angles)
        return self.nearest_square_pos(world_pos, orientation), orientation

    # ---------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------

    def square_at(self, coord) -> Optional[Square]:
        return self.registry.square_at(GridCoord.of(coord))

    def center(self) -> Square:
        return self.registry.center()

    def absolute_position(self, coord) -> Vec3:
        return self.registry.absolute_position(GridCoord.of(coord))

    def validate(self, fail_fast: bool = False) -> ValidationResult:
        return validate_registry(self.registry, fail_fast=fail_fast)

    def teardown(self):
        """Drop every square and joint. Later edits are rejected with SESSION_CLOSED."""
        self.registry.clear()
        self._closed = True
        logger.debug("Session torn down")
