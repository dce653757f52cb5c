"""
Data model for the paper level editor.

Defines the core data structures for a foldable paper level:
- GridCoord: Lattice position (x, y, z integers)
- Square: One paper tile placed at a grid coordinate in one plane
- Joint: Fold hinge bridging exactly two squares
- JointArena: Id-indexed store of live joints

Squares and joints never hold references to each other. A square keeps the
ids of its joints and a joint keeps the ids of its two squares; the registry
resolves both.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .orientation import Axis, Orientation


@dataclass(frozen=True)
class GridCoord:
    """Integer lattice coordinate."""
    x: int
    y: int
    z: int

    def __add__(self, other: 'GridCoord') -> 'GridCoord':
        return GridCoord(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'GridCoord') -> 'GridCoord':
        return GridCoord(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'GridCoord':
        return GridCoord(-self.x, -self.y, -self.z)

    def __mul__(self, factor: int) -> 'GridCoord':
        return GridCoord(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y, self.z))

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    @staticmethod
    def of(value) -> 'GridCoord':
        """Build from a GridCoord or any 3-sequence of integral numbers.

        Raises:
            ValueError: a component is not integral (snap world positions
                with GridRegistry.nearest_square_pos instead)
        """
        if isinstance(value, GridCoord):
            return value
        components = []
        for v in value:
            if int(v) != v:
                raise ValueError(f"Grid coordinates must be integral, got {tuple(value)}")
            components.append(int(v))
        x, y, z = components
        return GridCoord(x, y, z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


ORIGIN = GridCoord(0, 0, 0)


@dataclass
class Square:
    """A paper tile on the grid."""
    id: str                                   # UUID
    coord: GridCoord                          # Fixed at creation
    orientation: 'Orientation'                # Fixed at creation
    player_occupied: bool = False             # True while the player stands here
    paper_thickness: float = 0.001
    joint_ids: List[int] = field(default_factory=list)  # Joints this square bridges

    @staticmethod
    def create(coord: GridCoord, orientation: 'Orientation',
               paper_thickness: float = 0.001) -> 'Square':
        """Factory method to create a new square."""
        return Square(
            id=str(uuid.uuid4()),
            coord=coord,
            orientation=orientation,
            paper_thickness=paper_thickness,
        )

    def set_player_occupied(self, value: bool):
        self.player_occupied = value


@dataclass
class Joint:
    """Fold hinge between two squares.

    The joint sits half way between the two square centres, one lattice step
    from its anchor square along `offset`.
    """
    id: int
    position: Tuple[float, float, float]      # World position
    axis: 'Axis'                              # Capsule direction
    anchor: GridCoord                         # Coordinate of the square it was built from
    offset: GridCoord                         # Signed tangent step from the anchor
    square_ids: Tuple[str, str]               # The two bridged squares

    def other(self, square_id: str) -> str:
        """Id of the square on the other side of the fold."""
        a, b = self.square_ids
        if square_id == a:
            return b
        if square_id == b:
            return a
        raise KeyError(f"Joint {self.id} does not bridge square {square_id}")

    def bridges(self, square_id: str) -> bool:
        return square_id in self.square_ids


class JointArena:
    """Owns every live joint, keyed by an integer id.

    Ids are never reused within one arena, so a stale id held somewhere
    can't silently resolve to a newer joint.
    """

    def __init__(self):
        self._joints: Dict[int, Joint] = {}
        self._next_id = 1

    def create(self, position: Tuple[float, float, float], axis: 'Axis',
               anchor: GridCoord, offset: GridCoord,
               square_a: str, square_b: str) -> Joint:
        if square_a == square_b:
            raise ValueError(f"A joint must bridge two distinct squares, got {square_a} twice")
        joint = Joint(
            id=self._next_id,
            position=position,
            axis=axis,
            anchor=anchor,
            offset=offset,
            square_ids=(square_a, square_b),
        )
        self._joints[joint.id] = joint
        self._next_id += 1
        return joint

    def get(self, joint_id: int) -> Optional[Joint]:
        return self._joints.get(joint_id)

    def discard(self, joint_id: int) -> Optional[Joint]:
        """Drop a joint. Returns it, or None if it was already gone."""
        return self._joints.pop(joint_id, None)

    def clear(self):
        self._joints.clear()

    def __len__(self) -> int:
        return len(self._joints)

    def __iter__(self) -> Iterator[Joint]:
        return iter(list(self._joints.values()))

    def __contains__(self, joint_id: int) -> bool:
        return joint_id in self._joints
