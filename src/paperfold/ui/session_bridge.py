"""
Qt signal bridge between an EditorSession and a scene renderer.

The session only tracks logical placement. A renderer connects to these
signals to create and destroy the square/joint visuals and to move the
reference plane.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from ..editor.results import EditResult
from ..editor.session import EditorSession, ReferencePlane
from ..model.data_model import GridCoord, Joint, Square
from ..model.orientation import Orientation


class EditorSessionBridge(QObject):
    """Forwards session edits as Qt signals."""

    # Signals
    square_added = pyqtSignal(Square)  # Emitted with the new square
    square_removed = pyqtSignal(GridCoord)  # Emitted with the coordinate that was cleared
    joint_created = pyqtSignal(Joint)  # Emitted for each joint wired on placement
    joint_removed = pyqtSignal(int)  # Emitted with the id of each detached joint
    reference_plane_changed = pyqtSignal(ReferencePlane)  # Emitted when the plane moves or toggles
    status_message = pyqtSignal(str)  # Emitted with status messages for user feedback

    def __init__(self, session: Optional[EditorSession] = None, parent=None):
        super().__init__(parent)
        self._session = session or EditorSession()

    @property
    def session(self) -> EditorSession:
        return self._session

    def add_square(self, coord) -> bool:
        """Place a square with the session orientation and notify the renderer."""
        result = self._session.place_square(coord)
        if not result.success:
            self.status_message.emit(f"Cannot add square: {result.message}")
            return False

        self.square_added.emit(result.square)
        for joint_id in result.joints_created:
            joint = self._session.registry.joints.get(joint_id)
            if joint is not None:
                self.joint_created.emit(joint)
        self.status_message.emit(self._describe(result, "Added"))
        return True

    def remove_square(self, coord) -> bool:
        """Remove a square and notify the renderer of everything that went with it."""
        result = self._session.delete_square(coord)
        if not result.success:
            self.status_message.emit(f"Cannot remove square: {result.message}")
            return False

        for joint_id in result.joints_removed:
            self.joint_removed.emit(joint_id)
        self.square_removed.emit(result.coord)
        self.status_message.emit(self._describe(result, "Removed"))
        return True

    def set_reference_plane(self, orientation: Orientation, offset: int) -> ReferencePlane:
        plane = self._session.set_reference_plane(orientation, offset)
        self.reference_plane_changed.emit(plane)
        return plane

    def show_plane(self):
        self.reference_plane_changed.emit(self._session.show_plane())

    def hide_plane(self):
        self.reference_plane_changed.emit(self._session.hide_plane())

    @staticmethod
    def _describe(result: EditResult, verb: str) -> str:
        joints = len(result.joints_created) + len(result.joints_removed)
        return f"{verb} square at {result.coord} ({joints} joint(s))"
