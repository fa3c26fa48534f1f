"""
Pattern definitions and shape utilities.

A pattern is an ordered list of local integer offsets relative to its
anchor. Built-in patterns are registered by name so configs can refer to
them.
"""

from typing import Iterable, List, Sequence

from orientgrid.core.grid import Vec3, as_vec3
from orientgrid.core.registry import PATTERN_REGISTRY, register_pattern
from orientgrid.core.rotation import ROTATION_MATRICES


@register_pattern("l_hexomino")
def l_hexomino() -> List[Vec3]:
    """Six-cell L: three along X, four along Y, sharing the origin."""
    return [
        Vec3(0, 0, 0),
        Vec3(1, 0, 0),
        Vec3(2, 0, 0),
        Vec3(0, 1, 0),
        Vec3(0, 2, 0),
        Vec3(0, 3, 0),
    ]


@register_pattern("single")
def single() -> List[Vec3]:
    return [Vec3(0, 0, 0)]


@register_pattern("i_tromino")
def i_tromino() -> List[Vec3]:
    return [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(2, 0, 0)]


@register_pattern("l_tromino")
def l_tromino() -> List[Vec3]:
    return [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)]


@register_pattern("t_tetromino")
def t_tetromino() -> List[Vec3]:
    return [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(2, 0, 0), Vec3(1, 1, 0)]


@register_pattern("cube_2x2x2")
def cube_2x2x2() -> List[Vec3]:
    return [Vec3(x, y, z) for z in range(2) for y in range(2) for x in range(2)]


def get_pattern(name: str) -> List[Vec3]:
    """
    Look up a registered pattern.

    Raises:
        KeyError: if no pattern is registered under ``name``
    """
    factory = PATTERN_REGISTRY.get(name)
    if factory is None:
        known = ", ".join(sorted(PATTERN_REGISTRY))
        raise KeyError(f"Unknown pattern '{name}'. Known patterns: {known}")
    return factory()


def parse_pattern(offsets: Iterable[Sequence[int]]) -> List[Vec3]:
    """Convert nested lists such as ``[[0, 0, 0], [1, 0, 0]]`` into offsets."""
    pattern = []
    for i, offset in enumerate(offsets):
        try:
            pattern.append(as_vec3(offset))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid offset #{i} {offset!r}: {e}")
    return pattern


def normalize_points(points: Iterable[Vec3]) -> List[Vec3]:
    """
    Translate the point set so its minimum corner is (0,0,0), then sort
    lexicographically.
    """
    points = list(points)
    if not points:
        return []

    min_x = min(p.x for p in points)
    min_y = min(p.y for p in points)
    min_z = min(p.z for p in points)

    normalized = [
        Vec3(p.x - min_x, p.y - min_y, p.z - min_z)
        for p in points
    ]
    normalized.sort(key=lambda v: (v.x, v.y, v.z))
    return normalized


def points_to_signature(points: Iterable[Vec3]) -> str:
    """Canonical signature string of a point set."""
    normalized = normalize_points(points)
    return ";".join(f"{p.x},{p.y},{p.z}" for p in normalized)


def unique_rotations(pattern: Sequence[Vec3]) -> List[int]:
    """
    Rot24 indices that produce distinct shapes for the pattern.

    The first rotation index of each distinct signature is kept.
    """
    seen_signatures = set()
    indices = []

    for rot_idx, rot_matrix in enumerate(ROTATION_MATRICES):
        rotated_points = [Vec3.from_array(rot_matrix @ v.to_array()) for v in pattern]
        signature = points_to_signature(rotated_points)
        if signature not in seen_signatures:
            seen_signatures.add(signature)
            indices.append(rot_idx)

    return indices
