"""
paperfold - level editing core for foldable paper puzzles.

Squares sit on an integer 3D lattice, each in one of three axis-aligned
planes, and are linked to their neighbours by fold joints. This package keeps
the square registry and the joint graph consistent while squares are added
and removed.

The Qt signal bridge lives in paperfold.ui and is not imported here.
"""

from .model import (
    Axis,
    GridCoord,
    Joint,
    JointArena,
    ORIGIN,
    Orientation,
    Square,
    normal,
    normal_axis,
    orientation_from_angles,
    plane_angles,
    tangent_axes,
    tangents,
)
from .config import EditorSettings, load_settings, save_settings
from .model.grid_registry import GridError, GridRegistry, OccupiedCellError, OutOfRangeError
from .editor import (
    AdjacencyEngine,
    EditResult,
    EditorSession,
    ErrorCode,
    ReferencePlane,
)
from .validation import ValidationError, ValidationResult, validate_registry

__version__ = "0.1.0"
__all__ = [
    # Model
    'Axis', 'GridCoord', 'Joint', 'JointArena', 'ORIGIN', 'Orientation', 'Square',
    'normal', 'normal_axis', 'orientation_from_angles', 'plane_angles',
    'tangent_axes', 'tangents',
    # Config
    'EditorSettings', 'load_settings', 'save_settings',
    # Registry
    'GridError', 'GridRegistry', 'OccupiedCellError', 'OutOfRangeError',
    # Editing
    'AdjacencyEngine', 'EditResult', 'EditorSession', 'ErrorCode', 'ReferencePlane',
    # Validation
    'ValidationError', 'ValidationResult', 'validate_registry',
]
