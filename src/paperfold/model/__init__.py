"""
Level data model: lattice coordinates, squares, joints and orientations.

GridRegistry lives in paperfold.model.grid_registry and is imported from
there (it depends on paperfold.config, which depends on this package).
"""

from .data_model import GridCoord, Square, Joint, JointArena, ORIGIN
from .orientation import (
    Axis,
    Orientation,
    tangents,
    tangent_axes,
    normal,
    normal_axis,
    plane_angles,
    orientation_from_angles,
)

__all__ = [
    'GridCoord',
    'Square',
    'Joint',
    'JointArena',
    'ORIGIN',
    'Axis',
    'Orientation',
    'tangents',
    'tangent_axes',
    'normal',
    'normal_axis',
    'plane_angles',
    'orientation_from_angles',
]
