"""
Core modules for orientgrid.

This package contains the fundamental components:
- Voxel grid, cells and rotated pattern placement
- Rotation matrices (Rot24 and arbitrary)
- Pattern definitions and shape signatures
- Configuration management
- Registry for patterns and rotation samplers
"""

from orientgrid.core.grid import Cell, ErrorCode, OrientGrid, OutOfRangeError, PlacementResult, Vec3

from orientgrid.core.rotation import (
    ROTATION_MATRICES,
    as_rotation_matrix,
    axis_rotation,
    euler_rotation,
    get_rotation_matrix,
    is_rotation_matrix,
    round_half_even,
)

from orientgrid.core.patterns import get_pattern, parse_pattern, unique_rotations

from orientgrid.core.config import Config, load_config, create_default_config, validate_config, GridConfig, ExplorationConfig, RunnerConfig

from orientgrid.core.registry import register_pattern, register_rotation_sampler, PATTERN_REGISTRY, ROTATION_SAMPLER_REGISTRY

__all__ = [
    "Cell",
    "ErrorCode",
    "OrientGrid",
    "OutOfRangeError",
    "PlacementResult",
    "Vec3",
    "ROTATION_MATRICES",
    "as_rotation_matrix",
    "axis_rotation",
    "euler_rotation",
    "get_rotation_matrix",
    "is_rotation_matrix",
    "round_half_even",
    "get_pattern",
    "parse_pattern",
    "unique_rotations",
    "Config",
    "load_config",
    "create_default_config",
    "validate_config",
    "GridConfig",
    "ExplorationConfig",
    "RunnerConfig",
    "register_pattern",
    "register_rotation_sampler",
    "PATTERN_REGISTRY",
    "ROTATION_SAMPLER_REGISTRY",
]
