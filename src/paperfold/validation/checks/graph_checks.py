"""
Square/joint graph validation checks.

Validates a grid registry against the level invariants:
- Registry key matches square coordinate (GRID-001)
- Coordinates within the grid bound (GRID-002)
- Center square present (GRID-003)
- Joints bridge two distinct squares (JOINT-001)
- Joints reference registered squares (JOINT-002)
- Both bridged squares list the joint (JOINT-003)
- Squares only list live joints that bridge them (JOINT-004)
- Isolated squares (JOINT-005)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..core import ValidationError, ValidationResult
from ..rules import GRID_001, GRID_002, GRID_003, JOINT_001, JOINT_002, JOINT_003, JOINT_004, JOINT_005

if TYPE_CHECKING:
    from ...model.grid_registry import GridRegistry

logger = logging.getLogger(__name__)


def check_squares(registry: 'GridRegistry') -> ValidationResult:
    """GRID-001..003 over every registered square."""
    result = ValidationResult()

    for cell, square_id in registry.occupied_cells().items():
        square = registry.square_by_id(square_id)
        if square is None:
            continue
        if square.coord != cell:
            result.add_issue(GRID_001.issue(
                location=str(cell), square=square.id, cell=cell, coord=square.coord,
            ))
        if not registry.in_bounds(cell):
            result.add_issue(GRID_002.issue(
                location=str(cell), square=square.id, coord=cell, bound=registry.bound,
            ))

    center = registry.square_at(registry.center_coord)
    if center is None:
        result.add_issue(GRID_003.issue(location=str(registry.center_coord),
                                        coord=registry.center_coord))
    return result


def check_joints(registry: 'GridRegistry') -> ValidationResult:
    """JOINT-001..004: every joint and every square's joint list agree."""
    result = ValidationResult()

    for joint in registry.joints:
        a, b = joint.square_ids
        if a == b:
            result.add_issue(JOINT_001.issue(joint=joint.id, squares=joint.square_ids))
            continue
        for square_id in joint.square_ids:
            square = registry.square_by_id(square_id)
            if square is None:
                result.add_issue(JOINT_002.issue(joint=joint.id, square=square_id))
            elif joint.id not in square.joint_ids:
                result.add_issue(JOINT_003.issue(
                    location=str(square.coord), square=square.id, joint=joint.id,
                    coord=square.coord,
                ))

    for square in registry.squares():
        for joint_id in square.joint_ids:
            joint = registry.joints.get(joint_id)
            if joint is None:
                reason = "does not exist"
            elif not joint.bridges(square.id):
                reason = "does not bridge it"
            elif square.joint_ids.count(joint_id) > 1:
                reason = "is listed more than once"
            else:
                continue
            result.add_issue(JOINT_004.issue(
                location=str(square.coord), square=square.id, joint=joint_id,
                coord=square.coord, reason=reason,
            ))
    return result


def check_isolated_squares(registry: 'GridRegistry') -> ValidationResult:
    """JOINT-005. Only meaningful once the level has more than one square."""
    result = ValidationResult()
    if len(registry) < 2:
        return result
    for square in registry.squares():
        if not square.joint_ids:
            result.add_issue(JOINT_005.issue(location=str(square.coord), square=square.id,
                                             coord=square.coord))
    return result


def validate_registry(registry: 'GridRegistry', fail_fast: bool = False) -> ValidationResult:
    """Run every graph check over a registry.

    Args:
        registry: The registry to check
        fail_fast: Raise ValidationError if any FAIL issue is found

    Returns:
        ValidationResult with all issues

    Raises:
        ValidationError: fail_fast is set and the graph is inconsistent
    """
    result = ValidationResult()
    result.merge(check_squares(registry))
    result.merge(check_joints(registry))
    result.merge(check_isolated_squares(registry))

    for issue in result.errors:
        logger.warning(f"Validation: {issue.code}: {issue.message}")

    if fail_fast and result.failed:
        raise ValidationError(result)
    return result
