import pytest

from paperfold.model import (
    Axis,
    GridCoord,
    Orientation,
    normal,
    normal_axis,
    orientation_from_angles,
    plane_angles,
    tangent_axes,
    tangents,
)


def test_tangents_enumerate_both_signs():
    assert tangents(Orientation.XZ) == [
        GridCoord(1, 0, 0), GridCoord(-1, 0, 0),
        GridCoord(0, 0, 1), GridCoord(0, 0, -1),
    ]
    assert set(tangents(Orientation.XY)) == {
        GridCoord(1, 0, 0), GridCoord(-1, 0, 0),
        GridCoord(0, 1, 0), GridCoord(0, -1, 0),
    }
    assert set(tangents(Orientation.YZ)) == {
        GridCoord(0, 1, 0), GridCoord(0, -1, 0),
        GridCoord(0, 0, 1), GridCoord(0, 0, -1),
    }


@pytest.mark.parametrize("orientation, expected", [
    (Orientation.XZ, GridCoord(0, 1, 0)),
    (Orientation.XY, GridCoord(0, 0, 1)),
    (Orientation.YZ, GridCoord(1, 0, 0)),
])
def test_normal(orientation, expected):
    assert normal(orientation) == expected


@pytest.mark.parametrize("orientation", list(Orientation))
def test_normal_is_the_axis_not_in_the_plane(orientation):
    axes = set(tangent_axes(orientation)) | {normal_axis(orientation)}
    assert axes == {Axis.X, Axis.Y, Axis.Z}


@pytest.mark.parametrize("orientation", list(Orientation))
def test_plane_angles_map_back_to_orientation(orientation):
    assert orientation_from_angles(plane_angles(orientation)) == orientation


@pytest.mark.parametrize("angles, expected", [
    ((270.0, 0.0, 0.0), Orientation.XY),
    ((0.0, 90.0, 0.0), Orientation.XZ),
    ((180.0, 0.0, 0.0), Orientation.XZ),
    ((0.0, 0.0, -90.0), Orientation.YZ),
    ((90.0, 90.0, 0.0), Orientation.YZ),
])
def test_orientation_from_rotated_angles(angles, expected):
    assert orientation_from_angles(angles) == expected


def test_axis_of_signed_direction():
    assert Axis.of(GridCoord(0, 0, -1)) == Axis.Z
    assert Axis.of(GridCoord(1, 0, 0)) == Axis.X
    with pytest.raises(ValueError):
        Axis.of(GridCoord(0, 0, 0))


def test_grid_coord_arithmetic():
    t = GridCoord(0, -1, 0)
    assert GridCoord(1, 1, 0) + 2 * t == GridCoord(1, -1, 0)
    assert -t == GridCoord(0, 1, 0)
    assert GridCoord(3, 2, 1) - GridCoord(1, 1, 1) == GridCoord(2, 1, 0)
    assert GridCoord.of((1, 2, 3)) == GridCoord(1, 2, 3)


def test_grid_coord_of_accepts_integral_floats():
    assert GridCoord.of((1.0, -2.0, 3)) == GridCoord(1, -2, 3)
    assert isinstance(GridCoord.of((1.0, 0, 0)).x, int)


def test_grid_coord_of_rejects_fractions():
    with pytest.raises(ValueError):
        GridCoord.of((1.7, 0, 0))
    with pytest.raises(ValueError):
        GridCoord.of((0, 0, -0.5))


def test_orientation_from_angles_raises_value_error_without_matching_plane(monkeypatch):
    from paperfold.model import orientation as orientation_module
    monkeypatch.delitem(orientation_module._NORMAL_AXES, Orientation.XZ)
    with pytest.raises(ValueError):
        orientation_from_angles((0.0, 0.0, 0.0))
