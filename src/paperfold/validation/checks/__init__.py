"""Validation checks over a grid registry."""

from .graph_checks import check_isolated_squares, check_joints, check_squares, validate_registry

__all__ = [
    'check_squares',
    'check_joints',
    'check_isolated_squares',
    'validate_registry',
]
