"""
Orientation model for paper squares.

A square lies in one of three axis-aligned planes:
- XZ: the floor plane (normal +Y)
- XY: a wall facing Z (normal +Z)
- YZ: a wall facing X (normal +X)

The orientation decides which two world axes are tangent (in-plane, unit
steps along the paper) and which one is the normal. The rest pose of a square
mesh lies in XZ; plane_angles() gives the Euler rotation for the other planes.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict, List, Tuple

import numpy as np

from .data_model import GridCoord

Vec3 = Tuple[float, float, float]


class Axis(Enum):
    """World axis. The value is the capsule direction index used by renderers."""
    X = 0
    Y = 1
    Z = 2

    def unit(self) -> GridCoord:
        """Positive unit step along this axis."""
        return _AXIS_UNITS[self]

    @staticmethod
    def of(direction: GridCoord) -> 'Axis':
        """Axis a unit (or signed unit) direction lies along."""
        for axis, component in zip((Axis.X, Axis.Y, Axis.Z), direction.to_tuple()):
            if component != 0:
                return axis
        raise ValueError(f"Zero vector has no axis: {direction}")


_AXIS_UNITS: Dict[Axis, GridCoord] = {
    Axis.X: GridCoord(1, 0, 0),
    Axis.Y: GridCoord(0, 1, 0),
    Axis.Z: GridCoord(0, 0, 1),
}


class Orientation(Enum):
    """Plane a square lies in, named by the two axes it spans."""
    XZ = "XZ"
    XY = "XY"
    YZ = "YZ"

    def __str__(self) -> str:
        return self.value


_TANGENT_AXES: Dict[Orientation, Tuple[Axis, Axis]] = {
    Orientation.XZ: (Axis.X, Axis.Z),
    Orientation.XY: (Axis.X, Axis.Y),
    Orientation.YZ: (Axis.Y, Axis.Z),
}

_NORMAL_AXES: Dict[Orientation, Axis] = {
    Orientation.XZ: Axis.Y,
    Orientation.XY: Axis.Z,
    Orientation.YZ: Axis.X,
}

# Euler angles (degrees) that rotate a square resting in XZ into each plane.
_PLANE_ANGLES: Dict[Orientation, Vec3] = {
    Orientation.XZ: (0.0, 0.0, 0.0),
    Orientation.XY: (90.0, 0.0, 0.0),
    Orientation.YZ: (0.0, 0.0, 90.0),
}


def tangent_axes(orientation: Orientation) -> Tuple[Axis, Axis]:
    """The two in-plane axes of an orientation."""
    return _TANGENT_AXES[orientation]


def tangents(orientation: Orientation) -> List[GridCoord]:
    """All four signed unit directions lying in the plane.

    Ordered +A, -A, +B, -B where A and B are the tangent axes.
    """
    directions = []
    for axis in _TANGENT_AXES[orientation]:
        unit = axis.unit()
        directions.append(unit)
        directions.append(-unit)
    return directions


def normal_axis(orientation: Orientation) -> Axis:
    """The axis perpendicular to the plane."""
    return _NORMAL_AXES[orientation]


def normal(orientation: Orientation) -> GridCoord:
    """Positive unit vector perpendicular to the plane."""
    return _NORMAL_AXES[orientation].unit()


def plane_angles(orientation: Orientation) -> Vec3:
    """Euler angles (degrees) placing a square mesh in this plane."""
    return _PLANE_ANGLES[orientation]


def _euler_matrix(euler: Vec3) -> np.ndarray:
    """Rotation matrix for Euler angles applied Z first, then X, then Y."""
    ax, ay, az = (math.radians(a) for a in euler)
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)

    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return ry @ rx @ rz


def orientation_from_angles(euler: Vec3) -> Orientation:
    """Recover the plane of a square mesh from its Euler rotation.

    The mesh's rest normal (+Y) is rotated and the dominant world axis of the
    result picks the plane. Any rotation maps to some orientation, so
    flipped squares (e.g. 270 degrees about X) resolve to the same plane.
    """
    rotated = _euler_matrix(euler) @ np.array([0.0, 1.0, 0.0])
    dominant = Axis(int(np.argmax(np.abs(rotated))))
    for orientation, axis in _NORMAL_AXES.items():
        if axis == dominant:
            return orientation
    raise ValueError(f"No orientation has normal axis {dominant}")
