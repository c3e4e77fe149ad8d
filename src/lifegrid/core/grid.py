"""Grid data structure for bounded cellular automata."""

from typing import Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

DEAD = 0
ALIVE = 1

NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

_torch_configured = False


def _configure_torch() -> None:
    """Set torch single-threaded once per process, steps are computed sequentially."""
    global _torch_configured
    if not _torch_configured:
        torch.set_num_threads(1)
        _torch_configured = True


def _check_cell_data(data) -> np.ndarray:
    arr = np.asarray(data)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"Cell data must be a square 2D array, got shape {arr.shape}")
    if not (np.issubdtype(arr.dtype, np.number) or arr.dtype == bool):
        raise ValueError(f"Cell data must be numeric or boolean, got dtype {arr.dtype}")
    return arr


class Grid:
    """Represents a square N x N grid of cells.

    Cells are indexed as ``[row, col]``. Edges are bounded: cells beyond
    the border do not exist and never contribute to a neighbor count.
    """

    def __init__(self, size: int) -> None:
        """Initialize a new all-dead grid.

        Args:
            size: Number of rows (and columns)
        """
        _configure_torch()

        self.size = size
        self._cells = np.zeros((size, size), dtype=np.int8)

        # PyTorch input buffer for convolution, shared with successor grids
        self._torch_input = torch.zeros(1, 1, size, size, dtype=torch.float32)

    @classmethod
    def from_array(cls, data) -> "Grid":
        """Build a grid from a square 2D array-like of 0/1 values.

        Args:
            data: Nested list or array with cell states

        Raises:
            ValueError: If data is not a square 2D numeric or boolean array
        """
        arr = _check_cell_data(data)

        grid = cls(arr.shape[0])
        grid._cells[:] = (arr > 0).astype(np.int8)
        return grid

    def successor(self, data) -> "Grid":
        """Build the next grid of the same size, reusing the convolution buffer.

        Args:
            data: Square 2D array with the new cell states

        Raises:
            ValueError: If data is not a square array of this grid's size
        """
        arr = _check_cell_data(data)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")

        grid = Grid.__new__(Grid)
        grid.size = self.size
        grid._cells = (arr > 0).astype(np.int8)
        grid._torch_input = self._torch_input
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.size, self.size)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        self._cells[row, col] = ALIVE if alive else DEAD

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(DEAD)

    def randomize(self, probability: float, seed: Optional[int] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for a reproducible population
        """
        rng = np.random.default_rng(seed)
        mask = rng.random((self.size, self.size)) < probability
        self._cells[mask] = ALIVE
        self._cells[~mask] = DEAD

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        return Grid.from_array(self._cells)

    def snapshot(self) -> np.ndarray:
        """Return a read-only copy of the cell array."""
        snapshot = self._cells.copy()
        snapshot.flags.writeable = False
        return snapshot

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def get_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        The 3x3 block around the cell is clipped to the grid bounds, so
        corner cells examine 3 neighbors and edge cells 5.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        self._check_bounds(row, col)
        block = self._cells[max(0, row - 1) : min(self.size, row + 2), max(0, col - 1) : min(self.size, col + 2)]
        return int(block.sum()) - int(self._cells[row, col])

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch-accelerated convolution.

        Zero padding stands in for the missing cells beyond the border,
        which gives the same counts as clipping the neighborhood.

        Returns:
            2D array with neighbor counts for each cell
        """
        if self.size == 0:
            return np.zeros((0, 0), dtype=np.int8)

        self._torch_input[0, 0] = torch.from_numpy((self._cells > 0).astype(np.float32))
        neighbors = F.conv2d(self._torch_input, NEIGHBOR_KERNEL, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8)

    def to_list(self) -> list:
        """Convert grid to nested list.

        Returns:
            2D list representation of the grid
        """
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
