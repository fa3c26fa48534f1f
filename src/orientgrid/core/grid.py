"""
Voxel grid with rotated pattern placement.

The grid owns a dense 3D array of cells. Patterns (lists of local integer
offsets) are rotated, rounded, translated onto an anchor and committed
only when every destination is inside the grid and currently empty.
"""

import math
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from orientgrid.core.rotation import Rotation, as_rotation_matrix, round_half_even


class ErrorCode(Enum):
    """Placement outcome codes."""
    OK = "OK"
    OUT_OF_BOUNDS = "OutOfBounds"
    OVERLAP = "Overlap"


class OutOfRangeError(IndexError):
    """Raised when a cell is looked up with an index outside the grid."""


@dataclass(frozen=True)
class Vec3:
    """Integer coordinate triple."""
    x: int
    y: int
    z: int

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y, self.z))

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=int)

    @staticmethod
    def from_list(lst: Sequence[int]) -> "Vec3":
        return Vec3(int(lst[0]), int(lst[1]), int(lst[2]))

    @staticmethod
    def from_array(arr: np.ndarray) -> "Vec3":
        return Vec3(int(arr[0]), int(arr[1]), int(arr[2]))


IndexLike = Union[Vec3, Sequence[int]]


def as_vec3(index: IndexLike) -> Vec3:
    """
    Convert a 3-component sequence into a Vec3.

    Raises:
        ValueError: wrong length, or a component that is not an integral number
    """
    if isinstance(index, Vec3):
        return index
    if len(index) != 3:
        raise ValueError(f"Index must have 3 components, got {len(index)}")
    for c in index:
        if isinstance(c, (bool, np.bool_)) or not isinstance(c, (int, float, np.number)) or not float(c).is_integer():
            raise ValueError(f"Index components must be integers, got {c!r}")
    return Vec3.from_list(index)


class Cell:
    """
    One grid cell. ``tile == 0`` means empty.

    The grid's cell size is stored on the cell so the spatial center can be
    computed without a reference back to the grid. The index is read-only.
    """

    def __init__(self, index: Vec3, cell_size: float, tile: int = 0):
        self._index = index
        self._cell_size = cell_size
        self.tile = tile

    def __repr__(self) -> str:
        return f"Cell(index={self._index!r}, tile={self.tile})"

    @property
    def index(self) -> Vec3:
        return self._index

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def is_empty(self) -> bool:
        return self.tile == 0

    def get_center(self) -> Tuple[float, float, float]:
        return (
            self.index.x * self.cell_size,
            self.index.y * self.cell_size,
            self.index.z * self.cell_size,
        )


@dataclass
class PlacementResult:
    """Result of a pattern placement attempt."""
    success: bool
    error: ErrorCode
    world_cells: List[Vec3] = field(default_factory=list)
    message: str = ""

    def __bool__(self) -> bool:
        return self.success


class OrientGrid:
    """Fixed-size 3D grid of cells supporting rotated pattern placement."""

    def __init__(self, size: IndexLike, cell_size: float = 1.0):
        """
        Args:
            size: grid dimensions (dx, dy, dz), each >= 0
            cell_size: edge length of a cell, used only for cell centers
        """
        size = as_vec3(size)
        if min(size) < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {size.to_tuple()}")
        if (isinstance(cell_size, bool) or not isinstance(cell_size, (int, float))
                or not math.isfinite(cell_size) or cell_size <= 0):
            raise ValueError(f"cell_size must be a positive number, got {cell_size}")

        self._size = size
        self._cell_size = float(cell_size)
        self._lock = threading.RLock()
        self._cells = np.empty(size.to_tuple(), dtype=object)

        for z in range(size.z):
            for y in range(size.y):
                for x in range(size.x):
                    self._cells[x, y, z] = Cell(index=Vec3(x, y, z), cell_size=self._cell_size)

    @property
    def size(self) -> Vec3:
        return self._size

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def cell_count(self) -> int:
        return self._size.x * self._size.y * self._size.z

    def in_bounds(self, index: IndexLike) -> bool:
        index = as_vec3(index)
        return (
            0 <= index.x < self._size.x
            and 0 <= index.y < self._size.y
            and 0 <= index.z < self._size.z
        )

    def get_cell(self, index: IndexLike) -> Cell:
        index = as_vec3(index)
        if not self.in_bounds(index):
            raise OutOfRangeError(
                f"Index {index.to_tuple()} outside grid of size {self._size.to_tuple()}"
            )
        return self._cells[index.x, index.y, index.z]

    def get_cells(self) -> Iterator[Cell]:
        """Yield every cell, Z outermost, then Y, then X."""
        for z in range(self._size.z):
            for y in range(self._size.y):
                for x in range(self._size.x):
                    yield self._cells[x, y, z]

    def tiles(self) -> np.ndarray:
        """Snapshot of the tile ids as an int array indexed [x, y, z]."""
        with self._lock:
            snapshot = np.zeros(self._size.to_tuple(), dtype=int)
            for cell in self.get_cells():
                snapshot[cell.index.x, cell.index.y, cell.index.z] = cell.tile
            return snapshot

    def occupied_count(self) -> int:
        return sum(1 for cell in self.get_cells() if not cell.is_empty)

    def orient_index(self, local_index: IndexLike, anchor: IndexLike, rotation: Rotation) -> Vec3:
        """Rotate a local offset, round it, and translate it onto the anchor. No bounds check."""
        local = as_vec3(local_index)
        rotated = as_rotation_matrix(rotation) @ local.to_array()
        return as_vec3(anchor) + Vec3.from_array(round_half_even(rotated))

    def try_orient_index(self, local_index: IndexLike, anchor: IndexLike,
                         rotation: Rotation) -> Optional[Vec3]:
        """
        Map a local offset to a world index.

        Returns:
            The world index, or None when it falls outside the grid
        """
        world_index = self.orient_index(local_index, anchor, rotation)
        if not self.in_bounds(world_index):
            return None
        return world_index

    def try_place_pattern(self, tile: int, pattern: Iterable[IndexLike],
                          anchor: IndexLike, rotation: Rotation) -> PlacementResult:
        """
        Stamp a pattern onto the grid as a single transaction.

        Every offset is oriented and bounds-checked, then every distinct
        destination is checked for emptiness against the current grid state.
        Cells are written only if both checks pass; otherwise the grid is
        left untouched.

        Args:
            tile: positive tile id written into the claimed cells
            pattern: local integer offsets
            anchor: world index the pattern origin maps to
            rotation: Rot24 index or 3x3 rotation matrix

        Returns:
            PlacementResult (truthy on success)
        """
        if isinstance(tile, bool) or not isinstance(tile, (int, np.integer)) or tile <= 0:
            raise ValueError(f"tile must be a positive integer, got {tile!r}")

        anchor = as_vec3(anchor)
        matrix = as_rotation_matrix(rotation)

        with self._lock:
            # Distinct destinations in order of first appearance
            destinations = {}
            for local_index in pattern:
                world_index = self.try_orient_index(local_index, anchor, matrix)
                if world_index is None:
                    return PlacementResult(
                        success=False,
                        error=ErrorCode.OUT_OF_BOUNDS,
                        message=f"Offset {as_vec3(local_index).to_tuple()} lands outside the grid"
                    )
                destinations[world_index] = None

            world_cells = list(destinations)

            for index in world_cells:
                cell = self._cells[index.x, index.y, index.z]
                if not cell.is_empty:
                    return PlacementResult(
                        success=False,
                        error=ErrorCode.OVERLAP,
                        message=f"Cell {index.to_tuple()} already holds tile {cell.tile}"
                    )

            for index in world_cells:
                self._cells[index.x, index.y, index.z].tile = int(tile)

        return PlacementResult(
            success=True,
            error=ErrorCode.OK,
            world_cells=world_cells,
            message=f"Tile {tile} placed on {len(world_cells)} cells"
        )
