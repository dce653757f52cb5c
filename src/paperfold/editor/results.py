"""
Outcome types for editing operations.

Rejected edits are ordinary outcomes, not exceptions: the caller gets an
EditResult with success=False and an ErrorCode saying why.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..model.data_model import GridCoord, Square


class ErrorCode(Enum):
    """Why an edit was rejected."""
    OK = "OK"
    OCCUPIED_CELL = "OccupiedCell"
    EMPTY_CELL = "EmptyCell"
    PROTECTED_CELL = "ProtectedCell"
    OUT_OF_RANGE = "OutOfRange"
    SESSION_CLOSED = "SessionClosed"

    def __str__(self) -> str:
        return self.value


@dataclass
class EditResult:
    """Result of a place or remove operation."""
    success: bool
    error: ErrorCode
    coord: GridCoord
    square: Optional[Square] = None
    joints_created: List[int] = field(default_factory=list)
    joints_removed: List[int] = field(default_factory=list)
    message: str = ""

    def __bool__(self) -> bool:
        return self.success

    @staticmethod
    def rejected(coord: GridCoord, error: ErrorCode, message: str) -> 'EditResult':
        return EditResult(success=False, error=error, coord=coord, message=message)
