"""
Rotation matrices for orienting pattern offsets.

Rotations are plain 3x3 numpy matrices acting on column vectors. The 24
proper rotations of the cube (Rot24) are precomputed as integer matrices;
arbitrary rotations are accepted as any 3x3 array-like.
"""

from typing import List, Sequence, Union

import numpy as np

Rotation = Union[int, np.ndarray, Sequence[Sequence[float]]]

# 90 degree right-handed rotations about each axis
RX90 = np.array([
    [1, 0, 0],
    [0, 0, -1],
    [0, 1, 0]
], dtype=int)

RY90 = np.array([
    [0, 0, 1],
    [0, 1, 0],
    [-1, 0, 0]
], dtype=int)

RZ90 = np.array([
    [0, -1, 0],
    [1, 0, 0],
    [0, 0, 1]
], dtype=int)

IDENTITY = np.eye(3, dtype=int)

_BASE_90 = {"x": RX90, "y": RY90, "z": RZ90}


def generate_24_rotations() -> List[np.ndarray]:
    """
    Generate the 24 proper rotations of the cube (a discrete subgroup of SO(3)).

    Six face orientations, each combined with four quarter turns about Z.
    """
    rotations = []

    face_rotations = [
        IDENTITY,               # +Z up
        RX90,                   # +Y up
        RX90 @ RX90,            # -Z up
        RX90 @ RX90 @ RX90,     # -Y up
        RY90,                   # +X up
        RY90 @ RY90 @ RY90,     # -X up
    ]

    for face_rot in face_rotations:
        for i in range(4):
            z_rot = np.linalg.matrix_power(RZ90, i)
            rotations.append(face_rot @ z_rot)

    return rotations


ROTATION_MATRICES = generate_24_rotations()


def get_rotation_matrix(rot_index: int) -> np.ndarray:
    """
    Get a Rot24 matrix.
    rot_index: 0-23
    """
    if not 0 <= rot_index < 24:
        raise ValueError(f"Rotation index must be 0-23, got {rot_index}")
    return ROTATION_MATRICES[rot_index]


def axis_rotation(axis: str, degrees: float) -> np.ndarray:
    """
    Right-handed rotation about a coordinate axis.

    Multiples of 90 degrees give exact integer matrices, anything else a
    float matrix.

    Args:
        axis: "x", "y" or "z"
        degrees: rotation angle in degrees

    Returns:
        3x3 rotation matrix
    """
    axis = axis.lower()
    if axis not in _BASE_90:
        raise ValueError(f"axis must be 'x', 'y' or 'z', got {axis!r}")

    if float(degrees) % 90 == 0:
        quarter_turns = int(round(degrees / 90)) % 4
        return np.linalg.matrix_power(_BASE_90[axis], quarter_turns)

    theta = np.deg2rad(degrees)
    c, s = np.cos(theta), np.sin(theta)
    if axis == "x":
        return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])
    if axis == "y":
        return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


def euler_rotation(x: float = 0, y: float = 0, z: float = 0) -> np.ndarray:
    """
    Rotation from Euler angles in degrees.

    The rotation about Z is applied first, then X, then Y.
    """
    return axis_rotation("y", y) @ axis_rotation("x", x) @ axis_rotation("z", z)


def as_rotation_matrix(rotation: Rotation) -> np.ndarray:
    """Normalise a Rot24 index or a 3x3 array-like into a matrix."""
    if isinstance(rotation, (int, np.integer)) and not isinstance(rotation, bool):
        return get_rotation_matrix(int(rotation))

    matrix = np.asarray(rotation)
    if matrix.shape != (3, 3):
        raise ValueError(f"Rotation must be a Rot24 index or a 3x3 matrix, got shape {matrix.shape}")
    if not np.issubdtype(matrix.dtype, np.number):
        raise ValueError(f"Rotation matrix must be numeric, got dtype {matrix.dtype}")
    return matrix


def is_rotation_matrix(matrix: np.ndarray, atol: float = 1e-9) -> bool:
    """Check orthonormality and determinant +1 (no mirroring)."""
    matrix = np.asarray(matrix, dtype=float)
    if matrix.shape != (3, 3):
        return False
    is_orthogonal = np.allclose(matrix @ matrix.T, np.eye(3), atol=atol)
    is_proper = np.isclose(np.linalg.det(matrix), 1.0, atol=atol)
    return bool(is_orthogonal and is_proper)


def round_half_even(values: np.ndarray) -> np.ndarray:
    """
    Round to the nearest integer, ties to even (0.5 -> 0, 1.5 -> 2, -0.5 -> 0).

    Returns an integer array.
    """
    return np.rint(values).astype(int)
