"""
Joint adjacency engine.

Keeps the square <-> joint graph consistent while squares are placed and
removed.

Placement rule:
A square is two lattice steps wide, so for a square at c with orientation o
each signed tangent t points at one of its edges, whose midpoint is c + t.
Any square sharing that edge sits at one of:
- c + 2t       same plane, straight across the edge
- c + t + n    folded up out of the plane (n = normal of o)
- c + t - n    folded down out of the plane
Every occupied candidate gets a joint at absolute(c) + t.

Removal detaches every joint of the square from both sides before the square
leaves the registry, so no joint ever references a missing square.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ..model.data_model import GridCoord, Joint, Square
from ..model.grid_registry import GridRegistry
from ..model.orientation import Axis, Orientation, normal, tangents
from .results import EditResult, ErrorCode

logger = logging.getLogger(__name__)


# Capsule axis of a joint, keyed by (square orientation, axis of the tangent
# being bridged). Always the in-plane axis orthogonal to the tangent.
JOINT_AXES: Dict[Tuple[Orientation, Axis], Axis] = {
    (Orientation.XZ, Axis.X): Axis.Z,
    (Orientation.XZ, Axis.Z): Axis.X,
    (Orientation.XY, Axis.X): Axis.Y,
    (Orientation.XY, Axis.Y): Axis.X,
    (Orientation.YZ, Axis.Y): Axis.Z,
    (Orientation.YZ, Axis.Z): Axis.Y,
}


def joint_axis(orientation: Orientation, offset: GridCoord) -> Axis:
    """Capsule axis for a joint anchored on a square of this orientation."""
    return JOINT_AXES[(orientation, Axis.of(offset))]


def neighbor_candidates(coord: GridCoord, orientation: Orientation) -> List[Tuple[GridCoord, GridCoord]]:
    """All cells that could share an edge with a square at coord.

    Returns:
        List of (tangent offset, candidate coordinate) pairs, three per
        signed tangent direction
    """
    n = normal(orientation)
    candidates = []
    for t in tangents(orientation):
        for neighbor in (coord + 2 * t, coord + t + n, coord + t - n):
            candidates.append((t, neighbor))
    return candidates


class AdjacencyEngine:
    """Places and removes squares on a registry, wiring joints as it goes."""

    def __init__(self, registry: GridRegistry):
        self.registry = registry

    # ---------------------------------------------------------------
    # Joints
    # ---------------------------------------------------------------

    def attach_joints(self, square: Square) -> List[Joint]:
        """Create a joint to every registered square sharing an edge.

        The square must already be registered. Each candidate cell holds at
        most one square, so no pair is joined twice through the same edge.
        """
        created = []
        for offset, neighbor_coord in neighbor_candidates(square.coord, square.orientation):
            neighbor = self.registry.square_at(neighbor_coord)
            if neighbor is None:
                continue
            logger.debug(f"Neighbor detected at {neighbor_coord}")
            created.append(self._add_joint(square, neighbor, offset))
        return created

    def _add_joint(self, square: Square, neighbor: Square, offset: GridCoord) -> Joint:
        anchor_pos = self.registry.absolute_position(square.coord)
        cell = self.registry.settings.cell_size
        position = tuple(p + d * cell for p, d in zip(anchor_pos, offset))

        joint = self.registry.joints.create(
            position=position,
            axis=joint_axis(square.orientation, offset),
            anchor=square.coord,
            offset=offset,
            square_a=square.id,
            square_b=neighbor.id,
        )
        square.joint_ids.append(joint.id)
        neighbor.joint_ids.append(joint.id)
        logger.debug(f"Joint {joint.id} at {position} bridges {square.coord} and {neighbor.coord}")
        return joint

    def detach_all_joints(self, square: Square) -> List[int]:
        """Remove every joint of a square from both sides and discard it.

        Returns:
            Ids of the discarded joints
        """
        removed = []
        for joint_id in list(square.joint_ids):
            joint = self.registry.joints.discard(joint_id)
            if joint is None:
                continue
            other = self.registry.square_by_id(joint.other(square.id))
            if other is not None and joint_id in other.joint_ids:
                other.joint_ids.remove(joint_id)
            removed.append(joint_id)
            logger.debug(f"Detached joint {joint_id} from {square.coord}")
        square.joint_ids.clear()
        return removed

    # ---------------------------------------------------------------
    # Editing
    # ---------------------------------------------------------------

    def place_square(self, coord: GridCoord, orientation: Orientation,
                     paper_thickness: Optional[float] = None) -> EditResult:
        """Create a square at coord and join it to its neighbours."""
        if not self.registry.in_bounds(coord):
            logger.warning(f"Cannot add square at {coord}: outside the grid")
            return EditResult.rejected(coord, ErrorCode.OUT_OF_RANGE,
                                       f"{coord} is outside the grid bound of +/-{self.registry.bound}")
        if self.registry.square_at(coord) is not None:
            return EditResult.rejected(coord, ErrorCode.OCCUPIED_CELL,
                                       f"A square already exists at {coord}")

        if paper_thickness is None:
            paper_thickness = self.registry.settings.paper_thickness
        square = Square.create(coord, orientation, paper_thickness=paper_thickness)
        self.registry.set_square_at(coord, square)
        logger.info(f"Added square at {coord} ({orientation})")

        joints = self.attach_joints(square)
        return EditResult(
            success=True,
            error=ErrorCode.OK,
            coord=coord,
            square=square,
            joints_created=[j.id for j in joints],
        )

    def remove_square(self, coord: GridCoord) -> EditResult:
        """Detach all joints of the square at coord, then unregister it."""
        if not self.registry.in_bounds(coord):
            return EditResult.rejected(coord, ErrorCode.OUT_OF_RANGE,
                                       f"{coord} is outside the grid bound of +/-{self.registry.bound}")
        square = self.registry.square_at(coord)
        if square is None:
            return EditResult.rejected(coord, ErrorCode.EMPTY_CELL, f"No square at {coord}")
        if self.registry.is_center(square) or coord == self.registry.center_coord:
            logger.warning("The center square cannot be removed")
            return EditResult.rejected(coord, ErrorCode.PROTECTED_CELL,
                                       "The center square cannot be removed")

        removed = self.detach_all_joints(square)
        self.registry.remove_reference(coord)
        logger.info(f"Removed square at {coord}")
        return EditResult(
            success=True,
            error=ErrorCode.OK,
            coord=coord,
            square=square,
            joints_removed=removed,
        )
