import logging

import pytest

from paperfold.config import EditorSettings
from paperfold.editor import EditorSession, ErrorCode
from paperfold.model import GridCoord, ORIGIN, Orientation
from paperfold.model.grid_registry import MissingCenterError


def test_session_builds_its_own_registry():
    session = EditorSession(settings=EditorSettings(default_orientation=Orientation.YZ))
    assert session.orientation == Orientation.YZ
    assert session.center().coord == ORIGIN
    assert session.template is session.center()


def test_add_square_then_square_at(session):
    assert session.add_square((2, 0, 0))
    square = session.square_at((2, 0, 0))
    assert square is not None
    assert square.coord == GridCoord(2, 0, 0)
    assert square.orientation == Orientation.XZ


def test_add_square_twice_fails(session):
    assert session.add_square((0, 0, 2))
    joints_before = len(session.registry.joints)

    assert not session.add_square((0, 0, 2))
    assert len(session.registry) == 2
    assert len(session.registry.joints) == joints_before


def test_place_square_with_explicit_orientation(session):
    result = session.place_square(GridCoord(1, 1, 0), Orientation.YZ)
    assert result.success
    assert result.square.orientation == Orientation.YZ
    assert session.orientation == Orientation.XZ


def test_remove_square(session):
    session.add_square((2, 0, 0))
    assert session.remove_square((2, 0, 0))
    assert session.square_at((2, 0, 0)) is None
    assert not session.remove_square((2, 0, 0))


def test_remove_center_always_fails(session):
    result = session.delete_square(ORIGIN)
    assert result.error == ErrorCode.PROTECTED_CELL
    assert not session.remove_square((0, 0, 0))
    assert session.square_at(ORIGIN) is session.center()


def test_new_squares_copy_template_thickness(session):
    session.add_square((2, 0, 0))
    session.square_at((2, 0, 0)).paper_thickness = 0.01
    assert session.set_template((2, 0, 0))

    session.add_square((4, 0, 0))

    assert session.square_at((4, 0, 0)).paper_thickness == 0.01


def test_removing_template_falls_back_to_center(session):
    session.add_square((2, 0, 0))
    session.set_template((2, 0, 0))

    session.remove_square((2, 0, 0))

    assert session.template is session.center()


def test_set_template_on_empty_cell(session):
    assert not session.set_template((3, 3, 3))
    assert session.template is session.center()


def test_reference_plane_offset_is_clamped(session):
    plane = session.set_reference_plane(Orientation.YZ, 99)
    assert plane.offset == 5
    assert plane.orientation == Orientation.YZ
    assert plane.position == (5.0, 0.0, 0.0)
    assert plane.angles == (0.0, 0.0, 90.0)
    assert session.orientation == Orientation.YZ

    plane = session.set_reference_plane(Orientation.XY, -7)
    assert plane.offset == -5
    assert plane.position == (0.0, 0.0, -5.0)


def test_show_and_hide_plane(session):
    assert not session.reference_plane.visible
    assert session.show_plane().visible
    assert not session.hide_plane().visible


def test_pos_on_plane_replaces_normal_component(session):
    session.set_reference_plane(Orientation.XZ, 2)
    assert session.pos_on_plane((0.3, 7.5, -1.7)) == (0.3, 2.0, -1.7)


def test_coord_from_plane_point(session):
    session.set_reference_plane(Orientation.XZ, 2)
    assert session.coord_from_plane_point((1.8, 0.2, -0.9)) == GridCoord(2, 2, 0)


def test_plane_pick_next_to_center_lands_on_center(session):
    coord = session.coord_from_plane_point((0.9, 0.0, 0.2))
    assert coord == ORIGIN

    result = session.place_square(coord)

    assert result.error == ErrorCode.OCCUPIED_CELL
    assert len(session.registry) == 1


def test_plane_pick_on_wall_snaps_to_aligned_cell(session):
    session.set_reference_plane(Orientation.YZ, 1)
    coord = session.coord_from_plane_point((0.2, 0.6, 0.7))
    assert coord == GridCoord(1, 1, 0)

    result = session.place_square(coord)

    assert result.success
    assert len(result.joints_created) == 1


@pytest.mark.parametrize("orientation, offset, expected", [
    (Orientation.XZ, 1, 0),
    (Orientation.XZ, -3, -2),
    (Orientation.XZ, 99, 4),
    (Orientation.YZ, 0, 1),
    (Orientation.YZ, 2, 1),
    (Orientation.XY, -4, -3),
])
def test_reference_plane_offset_moves_onto_square_cells(session, orientation, offset, expected):
    assert session.set_reference_plane(orientation, offset).offset == expected


def test_initial_plane_offset_matches_default_orientation():
    session = EditorSession(settings=EditorSettings(default_orientation=Orientation.YZ))
    assert session.plane_offset == 1
    assert session.reference_plane.position == (1.0, 0.0, 0.0)


def test_coord_from_square_pick(session):
    coord, orientation = session.coord_from_square_pick((1.0, 1.0, 0.0), (0.0, 0.0, 90.0))
    assert coord == GridCoord(1, 1, 0)
    assert orientation == Orientation.YZ


def test_absolute_and_nearest_round_trip(session):
    for coord in [(0, 0, 0), (4, -2, 2)]:
        assert session.nearest_square_pos(session.absolute_position(coord)) == GridCoord.of(coord)


def test_validate_after_edits(session):
    session.add_square((2, 0, 0))
    session.place_square((1, 1, 0), Orientation.YZ)
    session.remove_square((2, 0, 0))
    assert session.validate(fail_fast=True).passed


def test_teardown_drops_everything(session):
    session.add_square((2, 0, 0))
    session.teardown()
    assert len(session.registry) == 0
    assert len(session.registry.joints) == 0


def test_edits_after_teardown_are_rejected(session):
    session.teardown()

    with pytest.raises(MissingCenterError):
        session.center()
    assert session.place_square((0, 0, 0)).error == ErrorCode.SESSION_CLOSED
    assert not session.add_square((0, 0, 0))
    assert not session.remove_square((0, 0, 0))
    assert len(session.registry) == 0


def test_fractional_coordinates_are_rejected(session):
    with pytest.raises(ValueError):
        session.add_square((1.5, 0, 0))
    assert len(session.registry) == 1


def test_edits_are_logged(session, caplog):
    caplog.set_level(logging.INFO, logger="paperfold")
    session.add_square((2, 0, 0))
    session.remove_square((0, 0, 0))
    assert "Added square at (2, 0, 0)" in caplog.text
    assert "center square cannot be removed" in caplog.text
