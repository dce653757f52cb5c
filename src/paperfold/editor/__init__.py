"""
Editing operations on a paper level.

Provides:
- AdjacencyEngine: joint discovery on placement, joint detachment on removal
- EditorSession: orientation/reference-plane state and add/remove entry points
- EditResult / ErrorCode: outcome of an edit
"""

from .adjacency import AdjacencyEngine, JOINT_AXES, joint_axis, neighbor_candidates
from .results import EditResult, ErrorCode
from .session import EditorSession, ReferencePlane

__all__ = [
    'AdjacencyEngine',
    'JOINT_AXES',
    'joint_axis',
    'neighbor_candidates',
    'EditResult',
    'ErrorCode',
    'EditorSession',
    'ReferencePlane',
]
