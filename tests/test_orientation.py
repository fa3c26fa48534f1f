import itertools

import numpy as np
import pytest

from orientgrid.core.grid import OrientGrid, Vec3
from orientgrid.core.rotation import axis_rotation, euler_rotation, is_rotation_matrix


def test_identity_orientation_is_translation():
    grid = OrientGrid((4, 5, 6))
    offsets = list(itertools.product(range(-2, 3), repeat=3))
    anchors = [(0, 0, 0), (2, 3, 4), (3, 4, 5)]

    for anchor, offset in itertools.product(anchors, offsets):
        expected = Vec3(anchor[0] + offset[0], anchor[1] + offset[1], anchor[2] + offset[2])
        in_bounds = 0 <= expected.x < 4 and 0 <= expected.y < 5 and 0 <= expected.z < 6
        result = grid.try_orient_index(offset, anchor, 0)
        if in_bounds:
            assert result == expected
        else:
            assert result is None


def test_edge_of_grid(grid):
    identity = np.eye(3, dtype=int)
    assert grid.try_orient_index((1, 0, 0), (9, 0, 0), identity) is None
    assert grid.try_orient_index((1, 0, 0), (8, 0, 0), identity) == Vec3(9, 0, 0)


def test_orient_index_reports_candidate_outside(grid):
    assert grid.orient_index((1, 0, 0), (9, 0, 0), 0) == Vec3(10, 0, 0)


@pytest.mark.parametrize("axis, offset, degrees, expected", [
    ("z", (2, 1, 0), 90, (4, 7, 5)),
    ("z", (2, 1, 0), 180, (3, 4, 5)),
    ("z", (2, 1, 0), 270, (6, 3, 5)),
    ("x", (0, 2, 1), 90, (5, 4, 7)),
    ("x", (0, 2, 1), 180, (5, 3, 4)),
    ("x", (0, 2, 1), 270, (5, 6, 3)),
    ("y", (1, 0, 2), 90, (7, 5, 4)),
    ("y", (1, 0, 2), 180, (4, 5, 3)),
    ("y", (1, 0, 2), 270, (3, 5, 6)),
])
def test_quarter_turns_land_on_exact_cells(grid, axis, offset, degrees, expected):
    assert grid.try_orient_index(offset, (5, 5, 5), axis_rotation(axis, degrees)) == Vec3(*expected)


@pytest.mark.parametrize("axis, offset, degrees, expected", [
    ("z", (2, 1, 0), 90, (4, 7, 5)),
    ("x", (0, 2, 1), 180, (5, 3, 4)),
    ("y", (1, 0, 2), 270, (3, 5, 6)),
])
def test_float_quarter_turns_round_to_the_same_cells(grid, axis, offset, degrees, expected):
    theta = np.deg2rad(degrees)
    c, s = np.cos(theta), np.sin(theta)
    matrices = {
        "x": np.array([[1, 0, 0], [0, c, -s], [0, s, c]]),
        "y": np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]]),
        "z": np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]]),
    }
    assert grid.try_orient_index(offset, (5, 5, 5), matrices[axis]) == Vec3(*expected)


def test_ties_round_half_to_even(grid):
    # 60 degrees about Z with an exact 0.5 cosine
    s = np.sqrt(3) / 2
    R = np.array([
        [0.5, -s, 0],
        [s, 0.5, 0],
        [0, 0, 1],
    ])
    assert is_rotation_matrix(R)

    anchor = (5, 5, 5)
    # x components 0.5, 1.5, 2.5, -0.5
    assert grid.try_orient_index((1, 0, 0), anchor, R) == Vec3(5, 6, 5)
    assert grid.try_orient_index((3, 0, 0), anchor, R) == Vec3(7, 8, 5)
    assert grid.try_orient_index((5, 0, 0), anchor, R) == Vec3(7, 9, 5)
    assert grid.try_orient_index((-1, 0, 0), anchor, R) == Vec3(5, 4, 5)


def test_rot24_index_accepted(grid):
    # Rot24 index 1 is a quarter turn about Z
    assert grid.try_orient_index((1, 0, 0), (5, 5, 5), 1) == Vec3(5, 6, 5)


def test_euler_negative_quarter_turn(grid):
    assert grid.try_orient_index((0, 3, 0), (2, 8, 0), euler_rotation(0, 0, -90)) == Vec3(5, 8, 0)
