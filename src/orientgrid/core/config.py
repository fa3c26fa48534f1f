"""
Configuration management for orientgrid.

This module handles loading and validation of YAML configuration files
and provides typed configuration objects.
"""

import math

import yaml
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from pathlib import Path

from orientgrid.core.registry import PATTERN_REGISTRY, ROTATION_SAMPLER_REGISTRY


@dataclass
class GridConfig:
    """Grid dimensions and cell size."""
    size: Tuple[int, int, int] = (10, 10, 10)
    cell_size: float = 1.01

    def __post_init__(self):
        if not isinstance(self.size, (tuple, list)) or len(self.size) != 3:
            raise ValueError("size must be a tuple of 3 integers")
        if not all(isinstance(d, int) and not isinstance(d, bool) and d >= 0 for d in self.size):
            raise ValueError("size components must be non-negative integers")
        self.size = tuple(self.size)
        if (isinstance(self.cell_size, bool) or not isinstance(self.cell_size, (float, int))
                or not math.isfinite(self.cell_size) or self.cell_size <= 0):
            raise ValueError("cell_size must be a positive number")


@dataclass
class ExplorationConfig:
    """Configuration for random placement exploration."""
    attempts: int = 200
    seed: Optional[int] = None
    pattern: str = "l_hexomino"
    # Explicit offsets take precedence over the named pattern
    offsets: Optional[List[List[int]]] = None
    rotation_sampler: str = "euler90"
    first_tile: int = 1

    def __post_init__(self):
        if not isinstance(self.attempts, int) or self.attempts < 0:
            raise ValueError("attempts must be a non-negative integer")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError("seed must be an integer or null")
        if not isinstance(self.first_tile, int) or self.first_tile <= 0:
            raise ValueError("first_tile must be a positive integer")
        if self.offsets is not None and not isinstance(self.offsets, (list, tuple)):
            raise ValueError("offsets must be a list of [x, y, z] offsets")


@dataclass
class RunnerConfig:
    """Configuration for the exploration runner."""
    experiment_name: str = "exploration"
    log_dir: str = "logs"
    results_csv_path: str = "exploration_results.csv"
    save_logs: bool = True
    verbose: bool = True


@dataclass
class Config:
    """Main configuration object."""
    runner: RunnerConfig = field(default_factory=RunnerConfig)
    grid: GridConfig = field(default_factory=GridConfig)
    exploration: ExplorationConfig = field(default_factory=ExplorationConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        runner = RunnerConfig(**(data.get("runner") or {}))
        grid = GridConfig(**(data.get("grid") or {}))
        exploration = ExplorationConfig(**(data.get("exploration") or {}))

        return cls(
            runner=runner,
            grid=grid,
            exploration=exploration,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        grid = dict(self.grid.__dict__)
        grid["size"] = list(grid["size"])
        return {
            "runner": {
                **{k: v for k, v in self.runner.__dict__.items()}
            },
            "grid": grid,
            "exploration": {
                **{k: v for k, v in self.exploration.__dict__.items()}
            },
        }


def load_config(config_path: str) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        ValueError: If fields are missing or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML config: {e}")

    if not data:
        raise ValueError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a mapping")

    try:
        return Config.from_dict(data)
    except Exception as e:
        raise ValueError(f"Error creating config from data: {e}")


def create_default_config(output_path: str = "config.yaml") -> Config:
    """
    Create a default configuration file.

    Args:
        output_path: Path where to save the default config

    Returns:
        Default Config object
    """
    config = Config(
        runner=RunnerConfig(experiment_name="default_exploration"),
        grid=GridConfig(),
        exploration=ExplorationConfig(),
    )

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, indent=2, sort_keys=False)

    return config


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration to validate

    Returns:
        List of validation messages
    """
    # Patterns and samplers register themselves on import
    import orientgrid.core.patterns  # noqa: F401
    import orientgrid.samplers  # noqa: F401

    issues = []
    volume = config.grid.size[0] * config.grid.size[1] * config.grid.size[2]

    if not config.runner.experiment_name:
        issues.append("ERROR: Experiment name is required")

    if config.exploration.rotation_sampler not in ROTATION_SAMPLER_REGISTRY:
        issues.append(f"ERROR: Unknown rotation sampler: {config.exploration.rotation_sampler}")

    pattern_size = None
    if config.exploration.offsets is not None:
        if not config.exploration.offsets:
            issues.append("WARNING: offsets is an empty pattern; every placement writes nothing")
        pattern_size = len(config.exploration.offsets)
    elif config.exploration.pattern not in PATTERN_REGISTRY:
        issues.append(f"ERROR: Unknown pattern: {config.exploration.pattern}")
    else:
        pattern_size = len(PATTERN_REGISTRY[config.exploration.pattern]())

    if volume == 0:
        issues.append("WARNING: Grid has zero volume; every placement will be out of bounds")
    elif pattern_size is not None and pattern_size > volume:
        issues.append(f"WARNING: Pattern has {pattern_size} cells but the grid only has {volume}")

    if config.exploration.attempts == 0:
        issues.append("WARNING: attempts is 0; nothing will be placed")
    elif volume > 0 and config.exploration.attempts > volume:
        issues.append(f"WARNING: attempts ({config.exploration.attempts}) exceeds the grid volume ({volume}); most attempts will overlap")

    return issues
