"""
orientgrid: rotated pattern placement on a fixed-size voxel grid

A three-dimensional grid of cells onto which multi-cell patterns are
stamped under arbitrary rotation. A placement is rejected when any cell
would leave the grid or overlap an occupied cell, and is otherwise
committed atomically.

Example Usage:
```python
from orientgrid import OrientGrid, euler_rotation, get_pattern

grid = OrientGrid((10, 10, 10), cell_size=1.01)
result = grid.try_place_pattern(1, get_pattern("l_hexomino"), (2, 8, 0), euler_rotation(z=-90))
if not result:
    print(result.error)
```

Command-line Usage:
```bash
orientgrid run --config configs/l_hexomino.yaml
orientgrid place --size 10 10 10 --pattern l_hexomino --anchor 2 8 0 --euler 0 0 -90
```
"""

from orientgrid.core import (
    Cell,
    ErrorCode,
    OrientGrid,
    OutOfRangeError,
    PlacementResult,
    Vec3,
    euler_rotation,
    get_pattern,
)
from orientgrid.core.config import Config, load_config, validate_config
from orientgrid.runner import ExplorationRunner, ExplorationResult

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "ErrorCode",
    "OrientGrid",
    "OutOfRangeError",
    "PlacementResult",
    "Vec3",
    "euler_rotation",
    "get_pattern",
    "Config",
    "load_config",
    "validate_config",
    "ExplorationRunner",
    "ExplorationResult",
]
