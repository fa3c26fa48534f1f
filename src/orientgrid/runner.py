"""
Exploration runner for orientgrid.

Repeatedly tries to place a pattern at random anchors and rotations and
records which attempts were accepted. The retry policy lives here, outside
the grid, which only answers individual placement attempts.
"""

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from orientgrid.core import Config
from orientgrid.core.grid import ErrorCode, OrientGrid, Vec3
from orientgrid.core.patterns import get_pattern, parse_pattern
from orientgrid.samplers import RotationSampler, create_sampler
from orientgrid.utils.logger import ExperimentLogger
from orientgrid.utils.display import PlacementProgress, StatusDisplay, LiveLogger


@dataclass
class ExplorationResult:
    """Outcome of an exploration run."""
    attempts: int
    placed: int
    out_of_bounds: int
    overlaps: int
    occupied_cells: int
    total_cells: int
    execution_time: float
    seed: Optional[int] = None
    placements: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def fill_ratio(self) -> float:
        if self.total_cells == 0:
            return 0.0
        return self.occupied_cells / self.total_cells

    def to_dict(self) -> Dict[str, Any]:
        """Summary without the per-placement details."""
        return {
            "attempts": self.attempts,
            "placed": self.placed,
            "out_of_bounds": self.out_of_bounds,
            "overlaps": self.overlaps,
            "occupied_cells": self.occupied_cells,
            "total_cells": self.total_cells,
            "fill_ratio": self.fill_ratio,
            "execution_time": self.execution_time,
            "seed": self.seed,
        }


class ExplorationRunner:
    """Drives random placement attempts against a grid."""

    def __init__(self, config: Config):
        self.config = config
        self.grid: Optional[OrientGrid] = None
        self.pattern: List[Vec3] = []
        self.rng: Optional[random.Random] = None
        self.sampler: Optional[RotationSampler] = None
        self.logger: Optional[ExperimentLogger] = None

        self.live_logger = LiveLogger(verbose=config.runner.verbose)

    def setup(self) -> None:
        """Build the grid, pattern, random source and rotation sampler."""
        grid_config = self.config.grid
        exploration = self.config.exploration

        self.grid = OrientGrid(grid_config.size, grid_config.cell_size)
        self.pattern = self._create_pattern()
        self.rng = random.Random(exploration.seed)
        self.sampler = create_sampler(exploration.rotation_sampler, self.pattern, self.rng)

        if self.config.runner.save_logs:
            self.logger = ExperimentLogger(
                log_dir=self.config.runner.log_dir,
                experiment_name=self.config.runner.experiment_name
            )

        self.live_logger.log_info(
            f"Grid {'x'.join(str(d) for d in grid_config.size)} ready, "
            f"pattern of {len(self.pattern)} cells, sampler '{exploration.rotation_sampler}'"
        )

    def _create_pattern(self) -> List[Vec3]:
        exploration = self.config.exploration
        if exploration.offsets is not None:
            return parse_pattern(exploration.offsets)
        return get_pattern(exploration.pattern)

    def random_anchor(self) -> Vec3:
        size = self.grid.size
        # An empty axis has no valid anchor; 0 keeps the attempt well-defined
        x = self.rng.randrange(size.x) if size.x else 0
        y = self.rng.randrange(size.y) if size.y else 0
        z = self.rng.randrange(size.z) if size.z else 0
        return Vec3(x, y, z)

    def run(self) -> ExplorationResult:
        """Run all configured attempts and return the summary."""
        if self.grid is None or self.sampler is None:
            raise RuntimeError("Runner not set up. Call setup() first.")

        exploration = self.config.exploration
        attempts = exploration.attempts
        next_tile = exploration.first_tile
        counts = {ErrorCode.OK: 0, ErrorCode.OUT_OF_BOUNDS: 0, ErrorCode.OVERLAP: 0}
        placements = []

        progress = PlacementProgress(attempts) if self.config.runner.verbose else None
        start_time = time.time()

        for step in range(1, attempts + 1):
            anchor = self.random_anchor()
            rotation = self.sampler.sample()
            result = self.grid.try_place_pattern(next_tile, self.pattern, anchor, rotation)
            counts[result.error] += 1

            entry = {
                "anchor": anchor.to_tuple(),
                "rotation": rotation.tolist(),
            }
            if result:
                entry.update({
                    "step_type": "placed",
                    "tile": next_tile,
                    "world_cells": [c.to_tuple() for c in result.world_cells],
                })
                placements.append({"step": step, **entry})
                next_tile += 1
            else:
                entry.update({"step_type": "rejected", "error": result.error.value})

            if self.logger:
                self.logger.log_step(step, entry)
            if progress:
                progress.record(result.error)

        if progress:
            progress.finish()

        result = ExplorationResult(
            attempts=attempts,
            placed=counts[ErrorCode.OK],
            out_of_bounds=counts[ErrorCode.OUT_OF_BOUNDS],
            overlaps=counts[ErrorCode.OVERLAP],
            occupied_cells=self.grid.occupied_count(),
            total_cells=self.grid.cell_count,
            execution_time=time.time() - start_time,
            seed=exploration.seed,
            placements=placements,
        )

        self.live_logger.log_result(f"{result.placed} patterns added.")
        self._save_results(result)
        return result

    def _save_results(self, result: ExplorationResult) -> None:
        if not self.logger:
            return
        self.logger.save_logs()

        summary = {
            "experiment_name": self.logger.experiment_name,
            "grid_size": "x".join(str(d) for d in self.config.grid.size),
            "pattern": self.config.exploration.pattern if self.config.exploration.offsets is None else "custom",
            "rotation_sampler": self.config.exploration.rotation_sampler,
            **result.to_dict(),
        }
        self.logger.save_results_to_csv(summary, self.config.runner.results_csv_path)

    def print_summary(self, result: ExplorationResult) -> None:
        StatusDisplay.print_fields({
            "Attempts": result.attempts,
            "Occupied Cells": f"{result.occupied_cells}/{result.total_cells}",
            "Fill Ratio": f"{result.fill_ratio:.1%}",
            "Execution Time": f"{result.execution_time:.2f}s",
        }, "Exploration Results")
        StatusDisplay.print_outcomes({
            ErrorCode.OK: result.placed,
            ErrorCode.OUT_OF_BOUNDS: result.out_of_bounds,
            ErrorCode.OVERLAP: result.overlaps,
        })
